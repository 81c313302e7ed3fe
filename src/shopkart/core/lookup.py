"""Explicit lookup results for repository queries.

A lookup either found a value or did not; callers branch on the type
instead of testing for None.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    """The lookup matched a record."""

    value: T


@dataclass(frozen=True)
class NotFound:
    """The lookup matched nothing; ``key`` is what was searched for."""

    key: object
