from inventory_allocator.domain.model import (
    InventoryAllocator,
    Shipment,
    ShipmentEntry,
    Warehouse,
    allocate,
)
