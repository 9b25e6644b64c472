"""Redis-backed store for the user's saved coins."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import List, Optional

import redis

from .config import Config
from .errors import StorageError
from .models import SavedCoin

logger = logging.getLogger(__name__)


class RedisSavedCoinStore:
    """Persist saved coin ids in Redis, preserving the order they were added."""

    def __init__(self, client: Optional[redis.Redis] = None) -> None:
        try:
            self.redis_client = client or redis.Redis(
                host=Config.REDIS_HOST,
                port=Config.REDIS_PORT,
                db=Config.REDIS_DB,
                password=Config.REDIS_PASSWORD,
                decode_responses=True,
                ssl=Config.REDIS_SSL,
                socket_connect_timeout=3,
                socket_timeout=3,
            )
            self.redis_client.ping()
            logger.info("Connected to Redis successfully")
        except redis.RedisError as exc:
            logger.error("Failed to connect to Redis: %s", exc)
            raise StorageError("Saved coins are unavailable: cannot reach the store.") from exc

    @property
    def saved_key(self) -> str:
        return f"{Config.REDIS_KEY_PREFIX}saved"

    @property
    def archived_key(self) -> str:
        return f"{Config.REDIS_KEY_PREFIX}archived"

    def list_saved_sync(self, exclude_archived: bool = True) -> List[SavedCoin]:
        try:
            ids = self.redis_client.zrange(self.saved_key, 0, -1)
            archived = self.redis_client.smembers(self.archived_key) or set()
        except redis.RedisError as exc:
            logger.error("Failed to read saved coins from Redis: %s", exc)
            raise StorageError() from exc
        saved = [SavedCoin(id=coin_id, is_archived=coin_id in archived) for coin_id in ids]
        if exclude_archived:
            saved = [coin for coin in saved if not coin.is_archived]
        return saved

    async def list_saved(self, exclude_archived: bool = True) -> List[SavedCoin]:
        return await asyncio.to_thread(self.list_saved_sync, exclude_archived)

    def save(self, coin_id: str) -> None:
        try:
            self.redis_client.zadd(self.saved_key, {coin_id: time.time()}, nx=True)
        except redis.RedisError as exc:
            logger.error("Failed to save coin %s: %s", coin_id, exc)
            raise StorageError("Failed to save coin.") from exc

    def delete(self, coin_id: str) -> None:
        try:
            self.redis_client.zrem(self.saved_key, coin_id)
            self.redis_client.srem(self.archived_key, coin_id)
        except redis.RedisError as exc:
            logger.error("Failed to delete coin %s: %s", coin_id, exc)
            raise StorageError("Failed to delete coin.") from exc

    def set_archived(self, coin_id: str, archived: bool) -> None:
        try:
            if archived:
                self.redis_client.sadd(self.archived_key, coin_id)
            else:
                self.redis_client.srem(self.archived_key, coin_id)
        except redis.RedisError as exc:
            logger.error("Failed to update archive flag for %s: %s", coin_id, exc)
            raise StorageError("Failed to update coin.") from exc

    def is_saved(self, coin_id: str) -> bool:
        try:
            return self.redis_client.zscore(self.saved_key, coin_id) is not None
        except redis.RedisError as exc:
            logger.error("Failed to look up coin %s: %s", coin_id, exc)
            raise StorageError() from exc
