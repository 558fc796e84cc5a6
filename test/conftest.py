"""
Test Configuration and Fixtures

This module provides:
- A throwaway SQLite database per xdist worker, migrated with alembic
- Table cleanup around every integration test
- The HTTP client fixture (httpx over ASGI, lifespan included)

Architecture:
- Unit tests (marked `unit`): mocked repositories, no database
- Integration tests: real repositories against the SQLite test database
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# settings reads DATABASE_URL and TEST_LOG_DIR at import time
# =============================================================================
import os
from pathlib import Path
import tempfile


def _get_test_database_path() -> Path:
    worker_id = os.environ.get('PYTEST_XDIST_WORKER', 'master')
    db_dir = Path(tempfile.gettempdir()) / 'seat_inventory_test'
    db_dir.mkdir(exist_ok=True)
    return db_dir / f'seat_inventory_{worker_id}.db'


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{_get_test_database_path()}'
    os.environ['DB_CREATE_TABLES_ON_STARTUP'] = 'false'
    os.environ['EXPIRY_SWEEP_ENABLED'] = 'false'

    # Create test log directory
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import AsyncGenerator  # noqa: E402

from alembic import command  # noqa: E402
from alembic.config import Config  # noqa: E402
import httpx  # noqa: E402
import pytest  # noqa: E402

from src.platform.config.core_setting import settings  # noqa: E402
from src.platform.constant.path import ALEMBIC_INI  # noqa: E402
from src.platform.database.orm_db_setting import Base, dispose_engine, get_engine  # noqa: E402
import src.service.seating.driven_adapter.model  # noqa: E402, F401


# =============================================================================
# Pytest Hooks: Detect test type and setup accordingly
# =============================================================================
def _is_unit_test_only_run(config: pytest.Config) -> bool:
    markexpr = config.getoption('markexpr', default='')
    if markexpr and 'unit' in str(markexpr) and 'not unit' not in str(markexpr):
        return True

    args = config.args or []
    test_paths = [arg for arg in args if arg and not arg.startswith('-')]
    return bool(test_paths and all('/unit/' in path or '\\unit\\' in path for path in test_paths))


def pytest_sessionstart(session: pytest.Session) -> None:
    if _is_unit_test_only_run(session.config):
        return
    _setup_test_database()


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        markers = [m.name for m in item.iter_markers()]
        if 'unit' not in markers:
            # Wipe first so the test's own fixtures seed a clean database
            item.fixturenames.insert(0, 'clean_database')


# =============================================================================
# Database Setup and Cleanup
# =============================================================================
def _setup_test_database() -> None:
    """Start every run from an empty file and the migrated schema."""
    _get_test_database_path().unlink(missing_ok=True)

    alembic_cfg = Config(str(ALEMBIC_INI))
    alembic_cfg.set_main_option('sqlalchemy.url', settings.DATABASE_URL)
    alembic_cfg.attributes['url_overridden'] = True
    # Keep loguru's intercept handler in charge of stdlib logging
    alembic_cfg.attributes['configure_logger'] = False
    command.upgrade(alembic_cfg, 'head')


async def _clean_all_tables() -> None:
    async with get_engine().begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            await conn.execute(table.delete())


@pytest.fixture(scope='function')
async def clean_database() -> AsyncGenerator[None, None]:
    await _clean_all_tables()
    yield
    await dispose_engine()


# =============================================================================
# HTTP client
# =============================================================================
@pytest.fixture
async def client() -> AsyncGenerator[httpx.AsyncClient, None]:
    from test.test_main import app

    async with app.router.lifespan_context(app):
        async with httpx.AsyncClient(
            transport=httpx.ASGITransport(app=app), base_url='http://testserver'
        ) as test_client:
            yield test_client


# =============================================================================
# Load service fixtures
# =============================================================================
from test.fixture_loader import *  # noqa: E402, F401, F403
