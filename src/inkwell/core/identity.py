"""Typed identity attached to authenticated requests."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Identity:
    """Authenticated caller resolved from a verified token."""

    id: int
    email: str
