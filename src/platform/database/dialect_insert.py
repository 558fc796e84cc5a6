"""
Dialect-aware INSERT constructs

ON CONFLICT clauses live on the dialect-specific insert() of PostgreSQL and
SQLite. Both expose the same on_conflict_do_nothing / on_conflict_do_update
API, so repositories pick the construct from the session's bind.
"""

from typing import Any, Union

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession


UpsertInsert = Union[postgresql.Insert, sqlite.Insert]


def dialect_insert(session: AsyncSession, entity: Any) -> UpsertInsert:
    bind = session.bind
    dialect_name = bind.dialect.name if bind is not None else ''
    if dialect_name == 'postgresql':
        return postgresql.insert(entity)
    if dialect_name == 'sqlite':
        return sqlite.insert(entity)
    raise NotImplementedError(f'ON CONFLICT inserts are not supported on {dialect_name!r}')
