"""Fixtures — fake Redis sinks."""

import pytest_asyncio
from fakeredis.aioredis import FakeRedis

from src.storage.redis import FullTextStore, SummaryStore


@pytest_asyncio.fixture
async def redis_client():
    """In-memory FakeRedis instance shared by both sinks."""
    client = FakeRedis(decode_responses=True)
    yield client
    await client.aclose()


@pytest_asyncio.fixture
async def full_text_store(redis_client):
    return FullTextStore(redis_client)


@pytest_asyncio.fixture
async def summary_store(redis_client):
    return SummaryStore(redis_client, ttl=600)
