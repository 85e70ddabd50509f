"""Shared SQLAlchemy helpers for the service layer."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, cast

from sqlalchemy.sql import ColumnElement


def eq(column: Any, value: Any) -> ColumnElement[bool]:
    """Typed equality expression helper."""
    return cast(ColumnElement[bool], column == value)


def in_(column: Any, values: Iterable[Any]) -> ColumnElement[bool]:
    """Typed IN expression helper."""
    return cast(ColumnElement[bool], cast(Any, column).in_(list(values)))


def asc(column: Any) -> Any:
    return cast(Any, column).asc()


def desc(column: Any) -> Any:
    """Typed descending ordering helper."""
    return cast(Any, column).desc()
