from typing import Any, Callable, Coroutine

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.responses import Response

from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io import Logger

# Type alias for exception handlers (compatible with Starlette's expected signature)
ExceptionHandler = Callable[[Request, Exception], Coroutine[Any, Any, Response]]


def _error_response(status_code: int, detail: Any, **extra: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={'detail': detail, **extra})


async def custom_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, CustomBaseError) else CustomBaseError(str(exc), 500)
    return _error_response(error.status_code, error.message, **error.extra)


async def value_error_handler(request: Request, exc: Exception) -> JSONResponse:
    return _error_response(status.HTTP_400_BAD_REQUEST, str(exc))


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    errors = exc.errors() if isinstance(exc, RequestValidationError) else []
    return _error_response(status.HTTP_400_BAD_REQUEST, jsonable_encoder(errors))


async def integrity_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # A uniqueness race the repositories did not absorb, e.g. a plain seat insert run twice
    Logger.base.warning(f'⚠️  [DB] Constraint violation on {request.method} {request.url.path}')
    return _error_response(
        status.HTTP_409_CONFLICT, 'Conflicting write, please retry', code='CONSTRAINT_VIOLATION'
    )


async def general_500_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    Logger.base.opt(exception=exc).error(f'Unhandled error on {request.method} {request.url.path}')
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, 'Internal server error')


EXCEPTION_HANDLERS: dict[type[Exception], ExceptionHandler] = {
    CustomBaseError: custom_error_handler,
    ValueError: value_error_handler,
    RequestValidationError: validation_error_handler,
    IntegrityError: integrity_error_handler,
    Exception: general_500_exception_handler,  # Catch-all for unhandled exceptions
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
