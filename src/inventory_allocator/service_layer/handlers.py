from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from inventory_allocator.domain import commands, events, model


if TYPE_CHECKING:
    from inventory_allocator.adapters import notifications


logger = logging.getLogger(__name__)


async def allocate(
        command: commands.Allocate,
        allocator: model.InventoryAllocator,
) -> model.Shipment:
    return allocator.allocate(
        command.order,
        command.warehouses,
        reference=command.order_id,
    )


async def log_allocation(
        event: events.Allocated,
        notifications: notifications.AbstractNotifications,
):
    logger.info(f'Order {event.order_id} shipped from {event.shipment}')


async def send_out_of_stock_notification(
        event: events.OutOfStock,
        notifications: notifications.AbstractNotifications,
):
    missing = ", ".join(f'{item} x{qty}' for item, qty in event.shortfall.items())
    await notifications.send(
        notifications.stock_admin,
        f'cannot fulfill order {event.order_id}, out of stock for {missing}',
    )
