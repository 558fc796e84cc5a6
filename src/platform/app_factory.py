"""
Shared FastAPI App Factory

Provides common app setup for production and test environments.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.platform.config.core_setting import settings
from src.platform.exception.exception_handlers import register_exception_handlers
from src.service.seating.driving_adapter.http_controller.cart_controller import (
    router as cart_router,
)
from src.service.seating.driving_adapter.http_controller.cron_controller import (
    router as cron_router,
)
from src.service.seating.driving_adapter.http_controller.queue_controller import (
    router as queue_router,
)
from src.service.seating.driving_adapter.http_controller.seat_hold_controller import (
    router as seat_hold_router,
)
from src.service.seating.driving_adapter.http_controller.session_seat_controller import (
    router as session_seat_router,
)


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    title_suffix: str = '',
    description: str = 'Cinema Seat Inventory',
) -> FastAPI:
    """
    Create a configured FastAPI application.

    Args:
        lifespan: Async context manager for app lifespan (startup/shutdown)
        title_suffix: Optional suffix for app title (e.g., " (Test)")
        description: App description

    Returns:
        Configured FastAPI application
    """
    title = f'{settings.PROJECT_NAME}{title_suffix}'

    app = FastAPI(
        title=title,
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    # Register exception handlers
    register_exception_handlers(app)

    # Include routers
    app.include_router(session_seat_router, prefix='/api/session', tags=['session'])
    app.include_router(cart_router, prefix='/api/cart', tags=['cart'])
    app.include_router(seat_hold_router, prefix='/api/seats', tags=['seats'])
    app.include_router(cron_router, prefix='/api/cron', tags=['cron'])
    app.include_router(queue_router, prefix='/api/queue', tags=['queue'])

    # Register common endpoints
    _register_common_endpoints(app)

    return app


def _register_common_endpoints(app: FastAPI) -> None:
    @app.get('/health')
    async def health_check() -> dict[str, str]:
        """Health check endpoint for container orchestration."""
        return {'status': 'healthy', 'service': 'Cinema Seat Inventory'}
