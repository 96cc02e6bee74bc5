import logging
from contextlib import asynccontextmanager

from dependency_injector.wiring import inject, Provide
from fastapi import FastAPI, status, Depends

from inventory_allocator.adapters import notifications
from inventory_allocator.container import Container
from inventory_allocator.domain import commands, model
from inventory_allocator.entrypoints import AllocationRequest, AllocationResponse
from inventory_allocator.service_layer import messagebus


container = Container()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(level=container.config.LOG_LEVEL())
    yield


app = FastAPI(
    lifespan=lifespan,
    title=container.config.desc.REST_SERVICE_NAME(),
    description=container.config.desc.REST_SERVICE_DESCRIPTION(),
    version=container.config.desc.REST_SERVICE_VERSION(),
    openapi_url=container.config.desc.OPENAPI_URL(),
    debug=container.config.DEBUG(),
)
app.container = container


@app.get("/health")
async def health_endpoint():
    return {"status": "ok"}


@app.post(
    "/allocate",
    status_code=status.HTTP_200_OK,
    response_model=AllocationResponse,
)
@inject
async def allocate_endpoint(
        allocation: AllocationRequest,
        allocator: model.InventoryAllocator = Depends(Provide[Container.allocator]),
        notifier: notifications.AbstractNotifications = Depends(Provide[Container.notifications]),
):
    command = commands.Allocate(
        order_id=allocation.order_id,
        order=dict(allocation.order),
        warehouses=[w.to_domain() for w in allocation.warehouses],
    )
    results = await messagebus.handle(
        command,
        allocator=allocator,
        notifications=notifier,
    )
    shipment = results.pop(0)

    return AllocationResponse(
        order_id=allocation.order_id,
        shipment=[entry.as_dict() for entry in shipment],
    )


container.wire(modules=[__name__])
