import uuid

import pytest
import pytest_asyncio
from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient

from inventory_allocator.adapters import notifications
from inventory_allocator.domain import model


def random_suffix():
    return uuid.uuid4().hex[:6]


def random_orderid(name=""):
    return f"order-{name}-{random_suffix()}"


@pytest.fixture
def allocator():
    return model.InventoryAllocator()


@pytest.fixture
def fake_notifications():
    return notifications.LoggingNotifications(stock_admin="admin@test.com")


@pytest_asyncio.fixture(name="client")
async def test_client(fake_notifications):
    from inventory_allocator.entrypoints.app import app, container

    with container.notifications.override(fake_notifications):
        async with LifespanManager(app):
            async with AsyncClient(
                transport=ASGITransport(app=app),
                base_url="http://localhost:13370",
            ) as client:
                yield client
