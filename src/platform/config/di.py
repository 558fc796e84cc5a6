"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.db_setting import Database
from src.service.seating.app.command.release_expired_reservations_use_case import (
    ReleaseExpiredReservationsUseCase,
)
from src.service.seating.driven_adapter.repo.cart_command_repo_impl import CartCommandRepoImpl
from src.service.seating.driven_adapter.repo.cinema_session_query_repo_impl import (
    CinemaSessionQueryRepoImpl,
)
from src.service.seating.driven_adapter.repo.queue_command_repo_impl import QueueCommandRepoImpl
from src.service.seating.driven_adapter.repo.seat_generation_command_repo_impl import (
    SeatGenerationCommandRepoImpl,
)
from src.service.seating.driven_adapter.repo.seat_hold_command_repo_impl import (
    SeatHoldCommandRepoImpl,
)
from src.service.seating.driven_adapter.repo.seat_query_repo_impl import SeatQueryRepoImpl
from src.service.seating.driving_adapter.background.expiry_reclaimer_runner import (
    ExpiryReclaimerRunner,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (uses AsyncEngineManager with settings from config_service)
    database = providers.Singleton(Database)

    # Repositories (stateless - use session_factory per call)
    cinema_session_query_repo = providers.Singleton(
        CinemaSessionQueryRepoImpl, session_factory=database.provided.session
    )
    seat_query_repo = providers.Singleton(
        SeatQueryRepoImpl, session_factory=database.provided.session
    )
    seat_generation_command_repo = providers.Singleton(
        SeatGenerationCommandRepoImpl, session_factory=database.provided.session
    )
    seat_hold_command_repo = providers.Singleton(
        SeatHoldCommandRepoImpl, session_factory=database.provided.session
    )
    cart_command_repo = providers.Singleton(
        CartCommandRepoImpl, session_factory=database.provided.session
    )
    queue_command_repo = providers.Singleton(
        QueueCommandRepoImpl, session_factory=database.provided.session
    )

    # Expiry sweep (shared by the background runner and the cron endpoint)
    release_expired_reservations_use_case = providers.Singleton(
        ReleaseExpiredReservationsUseCase, seat_hold_command_repo=seat_hold_command_repo
    )
    expiry_reclaimer_runner = providers.Singleton(
        ExpiryReclaimerRunner,
        release_expired_reservations_use_case=release_expired_reservations_use_case,
        interval_seconds=config_service.provided.EXPIRY_SWEEP_INTERVAL_SECONDS,
        enabled=config_service.provided.EXPIRY_SWEEP_ENABLED,
    )


container = Container()
