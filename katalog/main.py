"""Wiring for one catalog engine per process."""

from sqlalchemy.future import Engine

from .application.catalog_store import CatalogStore
from .application.form_session import FormSession
from .application.notifications import NotificationCenter
from .config import Settings, settings
from .domain.entities import policy_for
from .infrastructure.storage.database import get_main_engine, init_storage
from .infrastructure.storage.gateway import PersistenceGateway
from .infrastructure.storage.key_value import SqlKeyValueStore
from .infrastructure.storage.seed import seed_catalog
from .logging_config import get_logger, setup_logging
from .logging_utils import log_system_info
from .presentation.controller import CatalogController, Confirm


def create_controller(
    app_settings: Settings | None = None,
    engine: Engine | None = None,
    confirm: Confirm | None = None,
) -> CatalogController:
    """Build the store, session, notifications and controller.

    Args:
        app_settings: Settings to use instead of the global ones
        engine: Storage engine to use instead of the configured database
        confirm: Optional synchronous delete confirmation collaborator
    """
    app_settings = app_settings or settings
    engine = engine or get_main_engine()
    policy = policy_for(app_settings.variant)

    init_storage(engine)
    gateway = PersistenceGateway(
        SqlKeyValueStore(engine),
        default=seed_catalog(policy),
        key=app_settings.storage_key,
    )
    store = CatalogStore(gateway)
    notifications = NotificationCenter(app_settings.notification_duration_ms)
    session = FormSession(store, notifications, policy=policy)

    return CatalogController(session, confirm=confirm)


def bootstrap(confirm: Confirm | None = None) -> CatalogController:
    """Configure logging and build the engine from the global settings."""
    setup_logging()
    logger = get_logger(__name__)

    controller = create_controller(confirm=confirm)

    log_system_info(settings.app_name, settings.version, settings.variant, settings.debug)
    logger.info("Catalog engine ready", products=len(controller.store))
    return controller
