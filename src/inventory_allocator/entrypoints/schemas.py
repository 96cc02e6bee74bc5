from typing import Dict, List, Optional

from pydantic import BaseModel, Field, NonNegativeInt

from inventory_allocator.domain import model


class WarehouseRequest(BaseModel):
    name: str
    inventory: Dict[str, NonNegativeInt] = Field(default_factory=dict)

    def to_domain(self) -> model.Warehouse:
        return model.Warehouse(name=self.name, inventory=dict(self.inventory))


class AllocationRequest(BaseModel):
    order_id: Optional[str] = None
    order: Dict[str, NonNegativeInt] = Field(default_factory=dict)
    warehouses: List[WarehouseRequest] = Field(default_factory=list)


class AllocationResponse(BaseModel):
    order_id: Optional[str] = None
    shipment: List[Dict[str, Dict[str, int]]] = Field(default_factory=list)
