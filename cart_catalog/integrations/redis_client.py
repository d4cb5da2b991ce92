"""Redis client construction for the cart repository."""
from __future__ import annotations

import logging

import redis

from cart_catalog.core.config import Settings

logger = logging.getLogger(__name__)

CONNECT_TIMEOUT_SECONDS = 5


def create_redis_client(redis_url: str, socket_timeout: float | None = None) -> redis.Redis:
    """Connect to Redis and verify the connection with ``PING``.

    Connection errors propagate: an unreachable backend is fatal to the caller.
    """
    client = redis.from_url(
        redis_url,
        decode_responses=True,
        socket_connect_timeout=CONNECT_TIMEOUT_SECONDS,
        socket_timeout=socket_timeout,
    )
    client.ping()
    logger.info("Redis cart storage enabled")
    return client


def client_from_settings(settings: Settings) -> redis.Redis:
    return create_redis_client(settings.redis_url, socket_timeout=settings.socket_timeout)
