from unittest.mock import MagicMock

import orjson
import pytest
from sqlalchemy.exc import IntegrityError

from src.platform.exception.exception_handlers import (
    custom_error_handler,
    general_500_exception_handler,
    integrity_error_handler,
    value_error_handler,
)
from src.platform.exception.exceptions import AuthenticationError
from src.service.seating.domain.seating_errors import SeatOccupiedError


pytestmark = pytest.mark.unit


@pytest.fixture
def request_stub() -> MagicMock:
    request = MagicMock()
    request.method = 'POST'
    request.url.path = '/api/seats/hold'
    return request


class TestExceptionHandlers:
    async def test_domain_error_carries_status_and_extra(self, request_stub: MagicMock) -> None:
        response = await custom_error_handler(request_stub, SeatOccupiedError(['A2', 'A1']))

        assert response.status_code == 409
        assert orjson.loads(response.body) == {
            'detail': 'Some of your seats were just taken, please reselect',
            'code': 'SEAT_OCCUPIED',
            'seat_ids': ['A1', 'A2'],
        }

    async def test_authentication_error(self, request_stub: MagicMock) -> None:
        response = await custom_error_handler(request_stub, AuthenticationError('Unauthorized'))

        assert response.status_code == 401
        assert orjson.loads(response.body) == {'detail': 'Unauthorized'}

    async def test_value_error_is_a_bad_request(self, request_stub: MagicMock) -> None:
        response = await value_error_handler(request_stub, ValueError('bad seat id'))

        assert response.status_code == 400

    async def test_unhandled_error_hides_details(self, request_stub: MagicMock) -> None:
        response = await general_500_exception_handler(request_stub, RuntimeError('boom'))

        assert response.status_code == 500
        assert orjson.loads(response.body) == {'detail': 'Internal server error'}

    async def test_integrity_error_is_a_conflict(self, request_stub: MagicMock) -> None:
        exc = IntegrityError('INSERT INTO seat ...', {}, Exception('UNIQUE constraint failed'))

        response = await integrity_error_handler(request_stub, exc)

        assert response.status_code == 409
        assert orjson.loads(response.body)['code'] == 'CONSTRAINT_VIOLATION'
