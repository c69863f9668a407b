# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("SECRET_KEY", "inkwell-test-secret")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from inkwell.core import security
from inkwell.core.identity import Identity
from inkwell.core.settings import settings
from inkwell.core.tokens import TokenService
from inkwell.db.session import Base, enable_sqlite_foreign_keys
from inkwell.db.session import get_db as app_get_session
from inkwell.main import app as fastapi_app
from inkwell.models import Post, User

TEST_DB_URL = "sqlite://"
TEST_PASSWORD = "correct-horse-1"


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def token_service() -> TokenService:
    """Token service bound to the same secret as the application."""
    return TokenService(settings.secret_key)


@pytest.fixture()
def make_user(db_session: Session) -> Callable[..., User]:
    """Return a factory persisting users with ``TEST_PASSWORD``."""

    def _make_user(email: str, password: str = TEST_PASSWORD) -> User:
        user = User(email=email, password_hash=security.hash_password(password, rounds=4))
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture()
def test_user(make_user: Callable[..., User]) -> User:
    """Create and return the primary test user."""
    return make_user("author@example.com")


@pytest.fixture()
def other_user(make_user: Callable[..., User]) -> User:
    """Create and return a second user."""
    return make_user("reader@example.com")


@pytest.fixture()
def identity(test_user: User) -> Identity:
    return Identity(id=test_user.id, email=test_user.email)


@pytest.fixture()
def other_identity(other_user: User) -> Identity:
    return Identity(id=other_user.id, email=other_user.email)


@pytest.fixture()
def auth_token(test_user: User, token_service: TokenService) -> dict[str, str]:
    """Return authorization headers for the primary test user."""
    return {"Authorization": f"Bearer {token_service.issue(test_user.id)}"}


@pytest.fixture()
def other_auth_token(other_user: User, token_service: TokenService) -> dict[str, str]:
    """Return authorization headers for the secondary test user."""
    return {"Authorization": f"Bearer {token_service.issue(other_user.id)}"}


@pytest.fixture()
def test_post(db_session: Session, test_user: User) -> Post:
    """Create a baseline post owned by ``test_user``."""
    post = Post(title="First post", content="Test post content", owner_id=test_user.id)
    db_session.add(post)
    db_session.commit()
    db_session.refresh(post)
    return post
