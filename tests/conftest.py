"""Shared pytest fixtures: an in-memory stand-in for the redis-py client."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from cart_catalog.domain.cart import Product
from cart_catalog.repositories import CartRepository


@dataclass
class FakeRedisClient:
    """Implements the redis-py commands used by CartRepository.

    Set members come back in insertion order so scans are deterministic.
    """

    strings: dict[str, str] = field(default_factory=dict)
    sets: dict[str, dict[str, None]] = field(default_factory=dict)
    hashes: dict[str, dict[str, str]] = field(default_factory=dict)
    pipelines_executed: int = 0

    def ping(self) -> bool:
        return True

    def close(self) -> None:
        pass

    # strings
    def get(self, key: str):
        return self.strings.get(key)

    def set(self, key: str, value: str) -> bool:
        self.strings[key] = str(value)
        return True

    # sets
    def sadd(self, key: str, *values: str) -> int:
        members = self.sets.setdefault(key, {})
        added = 0
        for value in values:
            if value not in members:
                members[value] = None
                added += 1
        return added

    def srem(self, key: str, *values: str) -> int:
        members = self.sets.get(key, {})
        removed = 0
        for value in values:
            if value in members:
                del members[value]
                removed += 1
        if key in self.sets and not members:
            del self.sets[key]
        return removed

    def smembers(self, key: str) -> list[str]:
        return list(self.sets.get(key, {}))

    def scard(self, key: str) -> int:
        return len(self.sets.get(key, {}))

    def sismember(self, key: str, value: str) -> bool:
        return value in self.sets.get(key, {})

    # hashes
    def hset(self, key: str, mapping: dict[str, str] | None = None) -> int:
        fields = self.hashes.setdefault(key, {})
        added = 0
        for name, value in (mapping or {}).items():
            if name not in fields:
                added += 1
            fields[name] = str(value)
        return added

    def hgetall(self, key: str) -> dict[str, str]:
        return dict(self.hashes.get(key, {}))

    def hincrby(self, key: str, name: str, amount: int = 1) -> int:
        fields = self.hashes.setdefault(key, {})
        value = int(fields.get(name, "0")) + amount
        fields[name] = str(value)
        return value

    # keys
    def delete(self, *keys: str) -> int:
        deleted = 0
        for key in keys:
            for store in (self.strings, self.sets, self.hashes):
                if key in store:
                    del store[key]
                    deleted += 1
        return deleted

    def pipeline(self, transaction: bool = True) -> FakePipeline:
        return FakePipeline(self)


class FakePipeline:
    """Buffers commands and applies them on ``execute``."""

    def __init__(self, client: FakeRedisClient) -> None:
        self._client = client
        self.commands: list[tuple[str, tuple[Any, ...], dict[str, Any]]] = []

    def __enter__(self) -> FakePipeline:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.commands = []

    def __getattr__(self, name: str):
        def buffer(*args: Any, **kwargs: Any) -> FakePipeline:
            self.commands.append((name, args, kwargs))
            return self

        return buffer

    def execute(self) -> list[Any]:
        results = [getattr(self._client, name)(*args, **kwargs) for name, args, kwargs in self.commands]
        self.commands = []
        self._client.pipelines_executed += 1
        return results


@pytest.fixture
def fake_redis() -> FakeRedisClient:
    return FakeRedisClient()


@pytest.fixture
def repo(fake_redis: FakeRedisClient) -> CartRepository:
    return CartRepository(fake_redis)


@pytest.fixture
def atomic_repo(fake_redis: FakeRedisClient) -> CartRepository:
    return CartRepository(fake_redis, atomic=True)


@pytest.fixture
def make_products():
    def factory(count: int, price: int = 100, quantity: int = 1) -> list[Product]:
        return [
            Product(id=f"P{i}", title=f"Product {i}", image=f"p{i}.webp", price=price, quantity=quantity)
            for i in range(1, count + 1)
        ]

    return factory
