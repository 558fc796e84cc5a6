from unittest.mock import AsyncMock

import pytest

from src.platform.exception.exceptions import DomainError
from src.service.seating.app.command.bind_queue_entry_to_cart_use_case import (
    BindQueueEntryToCartUseCase,
)
from src.service.seating.app.command.join_queue_use_case import JoinQueueUseCase
from src.service.seating.domain.entity.queue_entry_entity import QueueEntry
from src.service.seating.domain.enum.queue_entry_status import QueueEntryStatus


pytestmark = pytest.mark.unit


@pytest.fixture
def mock_queue_command_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.allocate = AsyncMock(
        side_effect=lambda **kwargs: QueueEntry(
            id=kwargs['entry_id'],
            scope_key=kwargs['scope_key'],
            queue_number=7,
            visitor_token=kwargs['visitor_token'],
        )
    )
    repo.count_waiting = AsyncMock(return_value=3)
    return repo


class TestJoinQueueUseCase:
    async def test_returns_number_and_people_waiting(self, mock_queue_command_repo: AsyncMock) -> None:
        use_case = JoinQueueUseCase(queue_command_repo=mock_queue_command_repo)

        admission = await use_case.execute(scope_key='the-odyssey-global', visitor_token='v-1')

        assert admission.queue_number == 7
        assert admission.people_in_queue == 3
        assert admission.status == QueueEntryStatus.WAITING
        assert admission.scope_key == 'the-odyssey-global'
        assert mock_queue_command_repo.allocate.await_args.kwargs['visitor_token'] == 'v-1'

    @pytest.mark.parametrize('scope_key', ['', 'has space', 'semi;colon', 'x' * 121])
    async def test_rejects_invalid_scope_keys(
        self, mock_queue_command_repo: AsyncMock, scope_key: str
    ) -> None:
        use_case = JoinQueueUseCase(queue_command_repo=mock_queue_command_repo)

        with pytest.raises(DomainError):
            await use_case.execute(scope_key=scope_key)

        mock_queue_command_repo.allocate.assert_not_awaited()


class TestBindQueueEntryToCartUseCase:
    async def test_binds_visitor_entry(self, mock_queue_command_repo: AsyncMock) -> None:
        entry = QueueEntry(
            id='entry-1', scope_key='s', queue_number=1, status=QueueEntryStatus.ACTIVE
        )
        mock_queue_command_repo.bind_to_cart = AsyncMock(return_value=entry)
        use_case = BindQueueEntryToCartUseCase(queue_command_repo=mock_queue_command_repo)

        result = await use_case.execute(scope_key='s', visitor_token='v-1', cart_id='cart-1')

        assert result == entry
        mock_queue_command_repo.bind_to_cart.assert_awaited_once_with(
            scope_key='s', visitor_token='v-1', cart_id='cart-1'
        )

    async def test_no_visitor_token_is_a_no_op(self, mock_queue_command_repo: AsyncMock) -> None:
        use_case = BindQueueEntryToCartUseCase(queue_command_repo=mock_queue_command_repo)

        assert await use_case.execute(scope_key='s', visitor_token=None, cart_id='c') is None
        mock_queue_command_repo.bind_to_cart.assert_not_awaited()

    async def test_failures_do_not_propagate(self, mock_queue_command_repo: AsyncMock) -> None:
        mock_queue_command_repo.bind_to_cart = AsyncMock(side_effect=RuntimeError('db down'))
        use_case = BindQueueEntryToCartUseCase(queue_command_repo=mock_queue_command_repo)

        assert await use_case.execute(scope_key='s', visitor_token='v-1', cart_id='c') is None
