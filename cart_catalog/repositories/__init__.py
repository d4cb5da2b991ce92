"""Repositories over the key-value backend."""
from __future__ import annotations

from cart_catalog.repositories.cart_repository import CartRepository, KeyValueStore

__all__ = ["CartRepository", "KeyValueStore"]
