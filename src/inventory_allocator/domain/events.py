from dataclasses import dataclass, field
from typing import Dict, List, Optional


class Event:
    pass


@dataclass
class Allocated(Event):
    order_id: Optional[str]
    shipment: List[Dict[str, Dict[str, int]]] = field(default_factory=list)


@dataclass
class OutOfStock(Event):
    order_id: Optional[str]
    shortfall: Dict[str, int] = field(default_factory=dict)
