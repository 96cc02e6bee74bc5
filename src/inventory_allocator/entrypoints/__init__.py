from .schemas import AllocationRequest, AllocationResponse, WarehouseRequest
