"""Response field selection for list endpoints (``?fields=id,title``)."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from fastapi import HTTPException, status


def parse_fields(raw: str | None, allowed: Sequence[str]) -> list[str] | None:
    """Split a ``fields`` query value and check every name against ``allowed``.

    Returns:
        The requested names in order, or ``None`` when no filter was given.

    Raises:
        HTTPException: 400 if a name is not a known field.
    """
    if not raw:
        return None
    names = [name.strip() for name in raw.split(",") if name.strip()]
    unknown = [name for name in names if name not in allowed]
    if unknown or not names:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid filter to response fields",
        )
    return names


def select_fields(items: Iterable[dict[str, Any]], fields: list[str] | None) -> list[dict[str, Any]]:
    """Project each item onto ``fields``; ``None`` keeps every key."""
    if fields is None:
        return list(items)
    return [{name: item[name] for name in fields} for item in items]
