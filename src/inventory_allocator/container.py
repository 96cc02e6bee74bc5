from dependency_injector import containers, providers

from inventory_allocator.adapters.notifications import LoggingNotifications
from inventory_allocator.config import Settings
from inventory_allocator.domain import model


class Container(containers.DeclarativeContainer):
    __self__ = providers.Self()

    config = providers.Configuration()
    config.from_pydantic(Settings())

    allocator = providers.Factory(
        model.InventoryAllocator,
        keep_idle_warehouses=config.allocation.KEEP_IDLE_WAREHOUSES,
    )

    notifications = providers.Singleton(
        LoggingNotifications,
        stock_admin=config.notifications.STOCK_ADMIN,
    )
