from datetime import timedelta
from unittest.mock import AsyncMock

import pytest

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import DomainError
from src.service.seating.app.command.create_cart_use_case import CreateCartUseCase
from src.service.seating.app.command.expire_cart_use_case import ExpireCartUseCase
from src.service.seating.app.command.release_cart_seats_use_case import (
    ReleaseCartSeatsUseCase,
)
from src.service.seating.app.command.sell_held_seats_use_case import SellHeldSeatsUseCase
from src.service.seating.domain.entity.cart_entity import Cart
from src.service.seating.domain.entity.cinema_session_entity import CinemaSession
from src.service.seating.domain.enum.cart_status import CartStatus
from src.service.seating.domain.seating_errors import CartNotFoundError, SessionNotFoundError
from src.service.seating.domain.utc_clock import utc_now


pytestmark = pytest.mark.unit


class TestCreateCartUseCase:
    @pytest.fixture
    def mock_cinema_session_query_repo(self) -> AsyncMock:
        repo = AsyncMock()
        repo.get_by_id = AsyncMock(return_value=CinemaSession(id='session-1', base_price=3200))
        return repo

    @pytest.fixture
    def mock_cart_command_repo(self) -> AsyncMock:
        repo = AsyncMock()
        repo.create = AsyncMock(side_effect=lambda *, cart: cart)
        return repo

    @pytest.fixture
    def use_case(
        self, mock_cinema_session_query_repo: AsyncMock, mock_cart_command_repo: AsyncMock
    ) -> CreateCartUseCase:
        return CreateCartUseCase(
            cinema_session_query_repo=mock_cinema_session_query_repo,
            cart_command_repo=mock_cart_command_repo,
        )

    async def test_opens_an_active_cart(self, use_case: CreateCartUseCase) -> None:
        before = utc_now()

        cart = await use_case.execute(session_id='session-1', user_id='user-1')

        assert cart.status == CartStatus.ACTIVE
        assert cart.session_id == 'session-1'
        assert cart.user_id == 'user-1'
        assert cart.id
        assert cart.expires_at >= before + timedelta(minutes=settings.SEAT_HOLD_TTL_MINUTES)

    async def test_unknown_session(
        self,
        use_case: CreateCartUseCase,
        mock_cinema_session_query_repo: AsyncMock,
        mock_cart_command_repo: AsyncMock,
    ) -> None:
        mock_cinema_session_query_repo.get_by_id.return_value = None

        with pytest.raises(SessionNotFoundError):
            await use_case.execute(session_id='missing')

        mock_cart_command_repo.create.assert_not_awaited()

    async def test_ttl_over_maximum(self, use_case: CreateCartUseCase) -> None:
        with pytest.raises(DomainError):
            await use_case.execute(
                session_id='session-1', ttl_minutes=settings.SEAT_HOLD_MAX_TTL_MINUTES + 1
            )


class TestReleaseCartSeatsUseCase:
    @pytest.fixture
    def mock_cart_command_repo(self) -> AsyncMock:
        repo = AsyncMock()
        repo.get_by_id = AsyncMock(
            return_value=Cart.open(id='cart-1', session_id='session-1', now=utc_now(), ttl_minutes=10)
        )
        return repo

    @pytest.fixture
    def mock_seat_hold_command_repo(self) -> AsyncMock:
        repo = AsyncMock()
        repo.release_cart_seats = AsyncMock(return_value=['A1'])
        return repo

    @pytest.fixture
    def use_case(
        self, mock_cart_command_repo: AsyncMock, mock_seat_hold_command_repo: AsyncMock
    ) -> ReleaseCartSeatsUseCase:
        return ReleaseCartSeatsUseCase(
            cart_command_repo=mock_cart_command_repo,
            seat_hold_command_repo=mock_seat_hold_command_repo,
        )

    async def test_releases_selected_seats(
        self, use_case: ReleaseCartSeatsUseCase, mock_seat_hold_command_repo: AsyncMock
    ) -> None:
        released = await use_case.execute(cart_id='cart-1', seat_ids=['a1', 'A1'])

        assert released == ['A1']
        mock_seat_hold_command_repo.release_cart_seats.assert_awaited_once_with(
            cart_id='cart-1', seat_ids=['A1']
        )

    async def test_without_seat_ids_releases_everything(
        self, use_case: ReleaseCartSeatsUseCase, mock_seat_hold_command_repo: AsyncMock
    ) -> None:
        await use_case.execute(cart_id='cart-1')

        mock_seat_hold_command_repo.release_cart_seats.assert_awaited_once_with(
            cart_id='cart-1', seat_ids=None
        )

    async def test_unknown_cart(
        self,
        use_case: ReleaseCartSeatsUseCase,
        mock_cart_command_repo: AsyncMock,
        mock_seat_hold_command_repo: AsyncMock,
    ) -> None:
        mock_cart_command_repo.get_by_id.return_value = None

        with pytest.raises(CartNotFoundError):
            await use_case.execute(cart_id='missing')

        mock_seat_hold_command_repo.release_cart_seats.assert_not_awaited()


class TestSellHeldSeatsUseCase:
    async def test_delegates_with_a_utc_instant(self) -> None:
        repo = AsyncMock()
        repo.sell_held_seats = AsyncMock(return_value=['A1', 'A2'])
        use_case = SellHeldSeatsUseCase(seat_hold_command_repo=repo)

        sold = await use_case.execute(cart_id='cart-1')

        assert sold == ['A1', 'A2']
        now = repo.sell_held_seats.await_args.kwargs['now']
        assert now.tzinfo is not None


class TestExpireCartUseCase:
    async def test_expires_with_a_utc_instant(self) -> None:
        repo = AsyncMock()
        repo.expire = AsyncMock(return_value=True)

        expired = await ExpireCartUseCase(cart_command_repo=repo).execute(cart_id='cart-1')

        assert expired is True
        kwargs = repo.expire.await_args.kwargs
        assert kwargs['cart_id'] == 'cart-1'
        assert kwargs['now'].tzinfo is not None

    async def test_inactive_cart_is_left_alone(self) -> None:
        repo = AsyncMock()
        repo.expire = AsyncMock(return_value=False)

        assert await ExpireCartUseCase(cart_command_repo=repo).execute(cart_id='cart-1') is False
