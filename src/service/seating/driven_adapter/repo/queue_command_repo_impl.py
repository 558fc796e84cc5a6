"""
Queue Command Repository Implementation

    INSERT INTO queue_counter (scope_key, last_number) VALUES (:scope, 1)
    ON CONFLICT (scope_key) DO UPDATE SET last_number = queue_counter.last_number + 1
    RETURNING last_number

The counter row is locked by the upsert until commit, so concurrent joins in
one scope are serialised and numbered 1..N without gaps. The entry insert
runs in the same transaction: if it fails, the increment rolls back with it.
"""

from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable, Optional

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.database.dialect_insert import dialect_insert
from src.platform.logging.loguru_io import Logger
from src.service.seating.app.interface.i_queue_command_repo import IQueueCommandRepo
from src.service.seating.domain.entity.queue_entry_entity import QueueEntry
from src.service.seating.domain.enum.queue_entry_status import QueueEntryStatus
from src.service.seating.domain.utc_clock import as_utc, utc_now
from src.service.seating.driven_adapter.model.queue_counter_model import QueueCounterModel
from src.service.seating.driven_adapter.model.queue_entry_model import QueueEntryModel


class QueueCommandRepoImpl(IQueueCommandRepo):
    def __init__(
        self, session_factory: Callable[..., AsyncContextManager[AsyncSession]] | None = None
    ) -> None:
        self.session_factory = session_factory
        self.session: AsyncSession | None = None

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        if self.session is not None:
            yield self.session
        elif self.session_factory is not None:
            async with self.session_factory() as session:
                yield session
        else:
            raise RuntimeError('No session or session_factory available')

    @staticmethod
    def _model_to_entry(model: QueueEntryModel) -> QueueEntry:
        return QueueEntry(
            id=model.id,
            scope_key=model.scope_key,
            queue_number=model.queue_number,
            status=QueueEntryStatus(model.status),
            visitor_token=model.visitor_token,
            user_id=model.user_id,
            cart_id=model.cart_id,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    @Logger.io
    async def allocate(
        self,
        *,
        entry_id: str,
        scope_key: str,
        visitor_token: Optional[str] = None,
        user_id: Optional[str] = None,
        cart_id: Optional[str] = None,
    ) -> QueueEntry:
        now = utc_now()
        async with self._get_session() as session, session.begin():
            stmt = dialect_insert(session, QueueCounterModel).values(
                scope_key=scope_key, last_number=1, updated_at=now
            )
            stmt = stmt.on_conflict_do_update(
                index_elements=[QueueCounterModel.scope_key],
                set_={'last_number': QueueCounterModel.last_number + 1, 'updated_at': now},
            ).returning(QueueCounterModel.last_number)
            queue_number = (await session.execute(stmt)).scalar_one()

            model = QueueEntryModel(
                id=entry_id,
                scope_key=scope_key,
                queue_number=queue_number,
                visitor_token=visitor_token,
                user_id=user_id,
                cart_id=cart_id,
                status=QueueEntryStatus.WAITING.value,
                created_at=now,
                updated_at=now,
            )
            session.add(model)
            await session.flush()
            return self._model_to_entry(model)

    @Logger.io
    async def bind_to_cart(
        self, *, scope_key: str, visitor_token: str, cart_id: str
    ) -> Optional[QueueEntry]:
        now = utc_now()
        async with self._get_session() as session, session.begin():
            model = await session.scalar(
                select(QueueEntryModel)
                .where(
                    QueueEntryModel.scope_key == scope_key,
                    QueueEntryModel.visitor_token == visitor_token,
                    QueueEntryModel.status.in_(
                        [QueueEntryStatus.WAITING.value, QueueEntryStatus.ACTIVE.value]
                    ),
                )
                .order_by(QueueEntryModel.queue_number.desc())
                .limit(1)
            )
            if model is None:
                return None

            await session.execute(
                update(QueueEntryModel)
                .where(QueueEntryModel.id == model.id)
                .values(cart_id=cart_id, status=QueueEntryStatus.ACTIVE.value, updated_at=now)
                .execution_options(synchronize_session=False)
            )
            await session.refresh(model)
            return self._model_to_entry(model)

    @Logger.io
    async def count_waiting(self, *, scope_key: str) -> int:
        async with self._get_session() as session:
            count = await session.scalar(
                select(func.count())
                .select_from(QueueEntryModel)
                .where(
                    QueueEntryModel.scope_key == scope_key,
                    QueueEntryModel.status == QueueEntryStatus.WAITING.value,
                )
            )
            return count or 0
