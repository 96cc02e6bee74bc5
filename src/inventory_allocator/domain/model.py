import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, List, Mapping, Optional, Sequence, Union

from inventory_allocator.domain import commands, events


logger = logging.getLogger(__name__)

Order = Mapping[str, int]


@dataclass
class Warehouse:
    name: str
    inventory: Dict[str, int] = field(default_factory=dict)

    def __repr__(self):
        return f"<Warehouse {self.name}>"

    def stock_of(self, item: str) -> int:
        return self.inventory.get(item) or 0


@dataclass
class ShipmentEntry:
    warehouse: str
    items: Dict[str, int] = field(default_factory=dict)

    @property
    def total_quantity(self) -> int:
        return sum(self.items.values())

    def as_dict(self) -> Dict[str, Dict[str, int]]:
        return {self.warehouse: dict(self.items)}


Shipment = List[ShipmentEntry]
Message = Union[commands.Command, events.Event]


def is_fulfilled(remaining: Mapping[str, int]) -> bool:
    return all(qty == 0 for qty in remaining.values())


class InventoryAllocator:
    """ 주문을 우선순위 순서의 창고 목록에 나눠 할당한다.

    창고는 주어진 순서대로만 소비된다. 앞선 창고가 항상 먼저 비워지고,
    주문을 전부 채울 수 없으면 빈 shipment 를 돌려준다 (부분 할당 없음).

    호출자의 order, warehouse 는 건드리지 않는다.
    할당이 끝날 때마다 결과 이벤트를 messages 에 쌓는다.
    """

    def __init__(
            self,
            keep_idle_warehouses: bool = False,
    ):
        self.keep_idle_warehouses = keep_idle_warehouses
        self.messages = deque()    # type: Deque[Message]

    def allocate(
            self,
            order: Optional[Order],
            warehouses: Optional[Sequence[Warehouse]],
            reference: Optional[str] = None,
    ) -> Shipment:
        if not order or not warehouses:
            return []

        if is_fulfilled(order):
            return []

        remaining = dict(order)
        shipment = []   # type: Shipment

        for warehouse in warehouses:
            entry = ShipmentEntry(warehouse.name)
            for item, qty in remaining.items():
                if qty == 0:
                    continue
                stock = warehouse.stock_of(item)
                if stock:
                    entry.items[item] = min(stock, qty)
                    remaining[item] = qty - entry.items[item]

            if entry.items or self.keep_idle_warehouses:
                shipment.append(entry)

            if is_fulfilled(remaining):
                logger.debug(f'Allocated {reference} across {len(shipment)} warehouse(s)')
                self.messages.append(
                    events.Allocated(
                        order_id=reference,
                        shipment=[e.as_dict() for e in shipment],
                    )
                )
                return shipment

        shortfall = {item: qty for item, qty in remaining.items() if qty}
        logger.debug(f'Cannot fulfill {reference}, short of {shortfall}')
        self.messages.append(events.OutOfStock(order_id=reference, shortfall=shortfall))
        return []


def allocate(
        order: Optional[Order],
        warehouses: Optional[Sequence[Warehouse]],
        keep_idle_warehouses: bool = False,
) -> Shipment:
    return InventoryAllocator(keep_idle_warehouses).allocate(order, warehouses)
