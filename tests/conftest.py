from __future__ import annotations

from collections.abc import AsyncIterator, Iterator
from typing import Dict

import pytest
import pytest_asyncio
from bson import ObjectId
from fastapi import FastAPI, HTTPException
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient
from pydantic import BaseModel

from graphql_id import ID
from graphql_id.config import get_settings

SAMPLE_HEX = "5eaefffa00c9fdf000c46fdc"


@pytest.fixture(autouse=True)
def _env_overrides(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv("GRAPHQL_ID_UNSIGNED_OVERFLOW", raising=False)
    get_settings.cache_clear()  # type: ignore[attr-defined]
    yield
    get_settings.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture
def sample_oid() -> ObjectId:
    return ObjectId(SAMPLE_HEX)


@pytest_asyncio.fixture
async def mongo_client() -> AsyncIterator[AsyncMongoMockClient]:
    client = AsyncMongoMockClient()
    yield client
    client.close()


class Item(BaseModel):
    id: ID
    name: str


def build_items_app() -> FastAPI:
    app = FastAPI(title="graphql-id test API")
    items: Dict[ID, Item] = {}

    @app.post("/api/items", status_code=201, response_model=Item)
    async def create_item(item: Item) -> Item:
        items[item.id] = item
        return item

    @app.get("/api/items/{item_id}", response_model=Item)
    async def get_item(item_id: str) -> Item:
        item = items.get(ID.from_string(item_id))
        if item is None:
            raise HTTPException(status_code=404, detail="item not found")
        return item

    return app


@pytest_asyncio.fixture
async def api_client() -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=build_items_app())
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
