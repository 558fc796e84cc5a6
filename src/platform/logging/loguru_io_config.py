"""
Loguru sinks and the stdlib bridge

Everything is configured at import time: the first `Logger` import installs
the stdout sink, the DEBUG-only rotating file sink and the InterceptHandler
that pulls uvicorn, SQLAlchemy and alembic records into loguru.
"""

from contextvars import ContextVar
from datetime import datetime, timezone
from enum import StrEnum
import logging
import os
from pathlib import Path
import sys
from typing import TYPE_CHECKING, Any, Optional

from loguru import logger as loguru_logger


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings
from src.platform.constant.path import LOG_DIR
from src.platform.logging.service_context import get_service_context


SENSITIVE_KEYWORDS = {
    'password',
    'cron_secret',
    'authorization',
    'visitor_token',
}

# Loggers that flood DEBUG with per-statement noise
_NOISY_DEBUG_LOGGERS = ('aiosqlite', 'asyncio', 'httpcore', 'multipart')

# Access-log status class -> loguru level
_STATUS_LEVELS = ((500, 'CRITICAL'), (400, 'ERROR'), (300, 'WARNING'), (200, 'SUCCESS'))

chain_start_time_var: ContextVar[float] = ContextVar('first_time_var', default=0)
call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'


def _default_extra() -> dict[str, Any]:
    return {
        ExtraField.SERVICE_CONTEXT: get_service_context(),
        ExtraField.CHAIN_START_TIME: '',
        ExtraField.CALL_TARGET: '',
    }


def access_log_level(message: str) -> Optional[str]:
    """
    Level for a uvicorn access line, picked from its status code.

    '127.0.0.1:52100 - "POST /api/seats/hold HTTP/1.1" 409' -> 'ERROR'
    Anything that is not an access line returns None.
    """
    if ' - "' not in message or ' HTTP/' not in message:
        return None

    tail = message.rsplit('"', 1)[-1].split()
    if not tail or not tail[0].isdigit():
        return None

    status_code = int(tail[0])
    for floor, level in _STATUS_LEVELS:
        if status_code >= floor:
            return level
    return 'INFO'


class InterceptHandler(logging.Handler):
    _bound: Optional['LoguruLogger'] = None

    @classmethod
    def _logger(cls) -> 'LoguruLogger':
        if cls._bound is None:
            cls._bound = loguru_logger.bind(**_default_extra())
        return cls._bound

    def emit(self, record: logging.LogRecord) -> None:
        if record.levelno <= logging.DEBUG and record.name.startswith(_NOISY_DEBUG_LOGGERS):
            return

        message = record.getMessage()
        level: str | int | None = access_log_level(message)
        if level is None:
            try:
                level = loguru_logger.level(record.levelname).name
            except ValueError:
                level = record.levelno

        # Walk out of the logging module so loguru reports the real caller
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore
            depth += 1

        self._logger().opt(depth=depth, exception=record.exc_info).log(level, message)


io_log_format = ' | '.join(
    (
        f'<c>{{extra[{ExtraField.SERVICE_CONTEXT}]}}</>',
        '<lvl>{level:<8}</>',
        f'<c>{{file}}::{{function}}:{{line}}</>=><y>{{extra[{ExtraField.CALL_TARGET}]}}</>',
        '{message}',
        '<lk>{elapsed}</>',
        f'<lk>{{extra[{ExtraField.CHAIN_START_TIME}]:<18}}</>',
    )
)


def _log_file_path() -> Path:
    test_log_dir = os.environ.get('TEST_LOG_DIR')
    hour = datetime.now(timezone.utc).strftime('%Y-%m-%d_%H')
    if test_log_dir:
        return Path(test_log_dir) / f'test_{hour}.log'
    return LOG_DIR / f'{hour}.log'


def _configure_sinks() -> 'LoguruLogger':
    loguru_logger.remove()
    bound = loguru_logger.bind(**_default_extra())
    level = settings.LOG_LEVEL or ('DEBUG' if settings.DEBUG else 'INFO')

    bound.add(sys.stdout, format=io_log_format, level=level, enqueue=True)
    # File output only in DEBUG mode, production ships stdout
    if settings.DEBUG:
        bound.add(
            str(_log_file_path()),
            format=io_log_format,
            rotation='1 hour',
            retention='7 days',
            compression='gz',
            enqueue=True,
            level=level,
        )
    return bound


custom_logger = _configure_sinks()

logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
