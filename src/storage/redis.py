"""Redis-backed persistence sinks for scraped text and summaries."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

import redis.asyncio as redis
from redis.backoff import ExponentialBackoff
from redis.retry import Retry

logger = logging.getLogger(__name__)

FULL_TEXT_PREFIX = "fulltext:"
SUMMARY_PREFIX = "summary:"


class StorageError(Exception):
    """Raised when a sink cannot persist a record."""


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class _RedisSink:
    prefix = ""

    def __init__(self, client: redis.Redis, ttl: int = 0) -> None:
        self._client = client
        self._ttl = ttl

    async def _write(self, url: str, record: dict) -> None:
        key = f"{self.prefix}{url}"
        try:
            await self._client.set(key, json.dumps(record, ensure_ascii=False), ex=self._ttl or None)
        except redis.RedisError as exc:
            logger.warning("storage write failed", extra={"key": key}, exc_info=True)
            raise StorageError(f"Failed to save {self.prefix.rstrip(':')} for {url}") from exc
        logger.debug("storage write", extra={"key": key, "ttl": self._ttl})

    async def load(self, url: str) -> dict | None:
        """Return the stored record for *url*, or ``None`` if absent."""
        try:
            raw = await self._client.get(f"{self.prefix}{url}")
        except redis.RedisError as exc:
            raise StorageError(f"Failed to load {self.prefix.rstrip(':')} for {url}") from exc
        return json.loads(raw) if raw is not None else None


class FullTextStore(_RedisSink):
    """Stores ``(url, full_text)`` records."""

    prefix = FULL_TEXT_PREFIX

    async def save(self, url: str, full_text: str) -> None:
        await self._write(url, {"url": url, "full_text": full_text, "created_at": _now()})


class SummaryStore(_RedisSink):
    """Stores ``(url, summary, translation)`` records."""

    prefix = SUMMARY_PREFIX

    async def save(self, url: str, summary: str, translation: str) -> None:
        await self._write(
            url,
            {"url": url, "summary": summary, "translation": translation, "created_at": _now()},
        )


def create_redis_client(redis_url: str) -> redis.Redis:
    # Strip credentials for logging (everything before @ if present)
    safe_url = redis_url.split("@")[-1] if "@" in redis_url else redis_url
    logger.info("connecting to redis", extra={"redis_url": safe_url})
    retry = Retry(ExponentialBackoff(), retries=3)
    return redis.from_url(
        redis_url,
        decode_responses=True,
        socket_connect_timeout=5,
        socket_timeout=5,
        health_check_interval=30,
        retry=retry,
        retry_on_error=[redis.ConnectionError, redis.TimeoutError],
    )
