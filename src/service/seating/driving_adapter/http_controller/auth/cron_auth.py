import secrets
from typing import Optional

from fastapi import Header

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import AuthenticationError


async def require_cron_secret(authorization: Optional[str] = Header(default=None)) -> None:
    """Bearer check against CRON_SECRET; open when no secret is configured"""
    if settings.CRON_SECRET is None:
        return

    expected = f'Bearer {settings.CRON_SECRET.get_secret_value()}'
    if not authorization or not secrets.compare_digest(authorization, expected):
        raise AuthenticationError('Unauthorized')
