import anyio
from anyio.abc import TaskGroup

from src.platform.logging.loguru_io import Logger
from src.service.seating.app.command.release_expired_reservations_use_case import (
    ReleaseExpiredReservationsUseCase,
)
from src.service.seating.app.dto.seat_inventory_dto import ReleaseExpiredResult


class ExpiryReclaimerRunner:
    """Periodically sweep expired holds; a failed sweep is retried on the next tick"""

    def __init__(
        self,
        *,
        release_expired_reservations_use_case: ReleaseExpiredReservationsUseCase,
        interval_seconds: float = 60.0,
        enabled: bool = True,
    ) -> None:
        self.release_expired_reservations_use_case = release_expired_reservations_use_case
        self.interval_seconds = interval_seconds
        self.enabled = enabled

    async def start(self, *, task_group: TaskGroup) -> None:
        if not self.enabled:
            Logger.base.info('⏸️  [Expiry Reclaimer] Disabled')
            return
        task_group.start_soon(self._sweep_loop)  # pyrefly: ignore[bad-argument-type]
        Logger.base.info(f'⏰ [Expiry Reclaimer] Started, every {self.interval_seconds}s')

    async def run_once(self) -> ReleaseExpiredResult | None:
        try:
            return await self.release_expired_reservations_use_case.execute()
        except Exception as e:
            Logger.base.error(f'❌ [Expiry Reclaimer] Sweep failed, retrying next tick: {e}')
            return None

    async def _sweep_loop(self) -> None:
        while True:
            await self.run_once()
            await anyio.sleep(self.interval_seconds)
