"""Dialect-aware INSERT ... ON CONFLICT helpers."""

from collections.abc import Iterator, Sequence
from typing import Any, TypeVar

from sqlalchemy import Table
from sqlalchemy.dialects import postgresql, sqlite

T = TypeVar("T")


def chunked(items: Sequence[T], size: int) -> Iterator[Sequence[T]]:
    if size <= 0:
        raise ValueError(f"chunk size must be positive, got {size}")
    for start in range(0, len(items), size):
        yield items[start : start + size]


def _insert_for(dialect_name: str, table: Table):
    if dialect_name == "postgresql":
        return postgresql.insert(table)
    if dialect_name == "sqlite":
        return sqlite.insert(table)
    raise NotImplementedError(f"Upserts are not supported on dialect {dialect_name!r}")


def upsert_statement(dialect_name: str, table: Table):
    """``INSERT ... ON CONFLICT (pk) DO UPDATE`` overwriting every non-key column."""
    stmt = _insert_for(dialect_name, table)
    primary_keys = [column.name for column in table.primary_key.columns]
    return stmt.on_conflict_do_update(
        index_elements=primary_keys,
        set_={
            column: stmt.excluded[column.key]
            for column in table.columns
            if not column.primary_key
        },
    )


def insert_ignore_statement(dialect_name: str, table: Table):
    """``INSERT ... ON CONFLICT DO NOTHING``, for pure key tables."""
    stmt = _insert_for(dialect_name, table)
    primary_keys = [column.name for column in table.primary_key.columns]
    return stmt.on_conflict_do_nothing(index_elements=primary_keys)


def dedupe_by(rows: list[dict[str, Any]], *keys: str) -> list[dict[str, Any]]:
    """Keep the last row per key so one statement never touches a row twice."""
    unique: dict[tuple, dict[str, Any]] = {}
    for row in rows:
        unique[tuple(row[key] for key in keys)] = row
    return list(unique.values())
