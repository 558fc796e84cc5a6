"""
Database configuration (compatibility layer)

Re-exports the SQLAlchemy engine/session management from orm_db_setting.py
"""

from src.platform.database.orm_db_setting import (
    Base,
    Database,
    create_db_and_tables,
    dispose_engine,
    get_engine,
    get_session_maker,
)

__all__ = [
    'Base',
    'Database',
    'create_db_and_tables',
    'dispose_engine',
    'get_engine',
    'get_session_maker',
]
