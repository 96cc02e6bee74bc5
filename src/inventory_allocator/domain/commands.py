from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, TYPE_CHECKING


if TYPE_CHECKING:
    from .model import Warehouse


class Command:
    pass


@dataclass
class Allocate(Command):
    order_id: Optional[str]
    order: Dict[str, int]
    warehouses: List[Warehouse] = field(default_factory=list)
