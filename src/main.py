"""
Production FastAPI Application

Seat inventory API plus the periodic expiry reclaimer.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import anyio
from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import create_db_and_tables, dispose_engine, get_engine
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Seat Inventory] Starting up...')

    # Wire dependency injection for all modules
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Seat Inventory] Dependency injection wired')

    # Initialize database
    get_engine()
    if settings.DB_CREATE_TABLES_ON_STARTUP:
        await create_db_and_tables()
        Logger.base.info('🗄️  [Seat Inventory] Database tables ensured')

    async with anyio.create_task_group() as tg:
        await container.expiry_reclaimer_runner().start(task_group=tg)
        Logger.base.info('✅ [Seat Inventory] Ready to serve requests')

        yield

        Logger.base.info('🛑 [Seat Inventory] Shutting down...')
        tg.cancel_scope.cancel()

    await dispose_engine()
    Logger.base.info('🗄️  [Seat Inventory] Database engine disposed')

    # Unwire DI
    container.unwire()

    Logger.base.info('👋 [Seat Inventory] Shutdown complete')


# Create FastAPI app using shared factory
app = create_app(
    lifespan=lifespan,
    description='Cinema Seat Inventory - seat generation, holds, expiry sweep and queue admission',
)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
