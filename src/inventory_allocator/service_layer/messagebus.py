from __future__ import annotations

import logging
from typing import (
    Callable,
    Dict,
    List,
    Optional,
    Type,
    Union,
)

from inventory_allocator.adapters import notifications as notifications_adapter
from inventory_allocator.domain import commands, events, model
from inventory_allocator.service_layer import handlers


logger = logging.getLogger(__name__)
Message = Union[commands.Command, events.Event]


class MessageBus:
    EVENT_HANDLERS = {
        events.Allocated: [handlers.log_allocation],
        events.OutOfStock: [handlers.send_out_of_stock_notification],
    }   # type: Dict[Type[events.Event], List[Callable]]
    COMMAND_HANDLERS = {
        commands.Allocate: handlers.allocate,
    }   # type: Dict[Type[commands.Command], Callable]


async def handle(
        message: Message,
        allocator: model.InventoryAllocator,
        notifications: Optional[notifications_adapter.AbstractNotifications] = None,
):
    if notifications is None:
        notifications = notifications_adapter.LoggingNotifications()

    results = []
    queue: List[Message] = [message]
    while queue:
        message = queue.pop(0)

        if isinstance(message, events.Event):
            await handle_event(message, queue, allocator, notifications)
        elif isinstance(message, commands.Command):
            result = await handle_command(message, queue, allocator)
            results.append(result)
        else:
            raise Exception(f'{message} was not a Command or Event')

    return results


def collect_new_events(allocator: model.InventoryAllocator):
    while allocator.messages:
        yield allocator.messages.popleft()


async def handle_command(
        command: commands.Command,
        queue: List[Message],
        allocator: model.InventoryAllocator,
):
    logger.debug(f'Handling command {command}')
    try:
        handler = MessageBus.COMMAND_HANDLERS[type(command)]
        result = await handler(command, allocator)
        queue.extend(collect_new_events(allocator))
        return result
    except Exception as ex:
        logger.exception(f'Exception handling {command}... detail: {ex}')
        raise


async def handle_event(
        event: events.Event,
        queue: List[Message],
        allocator: model.InventoryAllocator,
        notifications: notifications_adapter.AbstractNotifications,
):
    for handler in MessageBus.EVENT_HANDLERS[type(event)]:
        try:
            logger.debug(f'Handling event {event} with {handler}')
            await handler(event, notifications)
            queue.extend(collect_new_events(allocator))
        except Exception as ex:
            logger.exception(f'Exception handling {event}... detail: {ex}')
            continue
