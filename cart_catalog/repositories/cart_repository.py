"""Cart repository over Redis sets, hashes and strings.

Key layout:

- ``carts``                              set of every cart id (``cart:<user>``)
- ``<cart_id>:products``                 set of product ids in the cart
- ``<cart_id>:isPaid``                   ``"0"`` or ``"1"``
- ``<cart_id>:product:<product_id>``     hash snapshot of the product line

Every aggregate query scans the registry and issues per-cart commands one at
a time; there is no secondary index.
"""
from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import Any, Protocol

from cart_catalog.core.constants import (
    CART_KEY_PREFIX,
    CART_LINE_INFIX,
    CART_PAID_SUFFIX,
    CART_PRODUCTS_SUFFIX,
    CART_REGISTRY_KEY,
    LARGE_CART_THRESHOLD,
    LINE_QUANTITY_FIELD,
    PAID,
    UNPAID,
)
from cart_catalog.domain.cart import CartLine, MaxTotalCart, Product, ProductFrequency

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Subset of the redis-py client API used by the repository."""

    def sadd(self, name: str, *values: str) -> Any:
        ...

    def srem(self, name: str, *values: str) -> Any:
        ...

    def smembers(self, name: str) -> Any:
        ...

    def scard(self, name: str) -> Any:
        ...

    def sismember(self, name: str, value: str) -> Any:
        ...

    def get(self, name: str) -> Any:
        ...

    def set(self, name: str, value: str) -> Any:
        ...

    def hset(self, name: str, mapping: dict[str, str] | None = None) -> Any:
        ...

    def hgetall(self, name: str) -> Any:
        ...

    def hincrby(self, name: str, key: str, amount: int = 1) -> Any:
        ...

    def delete(self, *names: str) -> Any:
        ...

    def pipeline(self, transaction: bool = True) -> Any:
        ...


class CartRepository:
    """Cart lifecycle operations and aggregate queries.

    With ``atomic=True`` the write sequences of create, remove and clear run
    in a ``MULTI/EXEC`` pipeline instead of command by command.
    """

    def __init__(self, store: KeyValueStore, atomic: bool = False) -> None:
        self._store = store
        self._atomic = atomic

    # ========== KEYS ==========
    @staticmethod
    def cart_key(user_id: str) -> str:
        return f"{CART_KEY_PREFIX}{user_id}"

    @staticmethod
    def _products_key(cart_id: str) -> str:
        return f"{cart_id}{CART_PRODUCTS_SUFFIX}"

    @staticmethod
    def _paid_key(cart_id: str) -> str:
        return f"{cart_id}{CART_PAID_SUFFIX}"

    @staticmethod
    def _line_key(cart_id: str, product_id: str) -> str:
        return f"{cart_id}{CART_LINE_INFIX}{product_id}"

    @contextmanager
    def _writer(self) -> Iterator[Any]:
        if not self._atomic:
            yield self._store
            return

        with self._store.pipeline(transaction=True) as pipe:
            yield pipe
            pipe.execute()

    # ========== LIFECYCLE ==========
    def create_cart(self, user_id: str, products: Iterable[Product]) -> str:
        """Register a cart for ``user_id`` and write its lines.

        Re-creating an existing cart merges into it: lines for products that
        are no longer listed are left in place.
        """
        cart_id = self.cart_key(user_id)
        lines = [CartLine.from_product(product) for product in products]

        with self._writer() as writer:
            writer.sadd(CART_REGISTRY_KEY, cart_id)
            if lines:
                writer.sadd(self._products_key(cart_id), *(line.id for line in lines))
            writer.set(self._paid_key(cart_id), UNPAID)
            for line in lines:
                writer.hset(self._line_key(cart_id, line.id), mapping=line.to_mapping())

        logger.info("Cart created %s", cart_id)
        return cart_id

    def remove_product(self, cart_id: str, product_id: str) -> None:
        with self._writer() as writer:
            writer.srem(self._products_key(cart_id), product_id)
            writer.delete(self._line_key(cart_id, product_id))
        logger.info("Removed %s from %s", product_id, cart_id)

    def increment_product(self, cart_id: str, product_id: str) -> int:
        """Add one to the stored line quantity and return the new value.

        Membership is not checked: incrementing a removed product recreates
        a bare hash holding only ``quantity``.
        """
        return int(self._store.hincrby(self._line_key(cart_id, product_id), LINE_QUANTITY_FIELD, 1))

    def clear_cart(self, cart_id: str) -> None:
        """Delete every line and the membership set; the cart stays registered."""
        product_ids = self._store.smembers(self._products_key(cart_id))

        with self._writer() as writer:
            for product_id in product_ids:
                writer.delete(self._line_key(cart_id, product_id))
            writer.delete(self._products_key(cart_id))

        logger.info("Cart cleared %s", cart_id)

    def mark_paid(self, cart_id: str) -> None:
        self._store.set(self._paid_key(cart_id), PAID)

    def mark_unpaid(self, cart_id: str) -> None:
        self._store.set(self._paid_key(cart_id), UNPAID)

    # ========== QUERIES ==========
    def get_all_cart_ids(self) -> list[str]:
        return list(self._store.smembers(CART_REGISTRY_KEY))

    def find_unpaid_carts(self) -> list[str]:
        unpaid = [
            cart_id
            for cart_id in self.get_all_cart_ids()
            if self._store.get(self._paid_key(cart_id)) == UNPAID
        ]
        logger.debug("Unpaid carts: %s", unpaid)
        return unpaid

    def carts_with_more_than_five_items(self) -> list[str]:
        large = [
            cart_id
            for cart_id in self.get_all_cart_ids()
            if int(self._store.scard(self._products_key(cart_id))) > LARGE_CART_THRESHOLD
        ]
        logger.debug("Carts above %s items: %s", LARGE_CART_THRESHOLD, large)
        return large

    def count_carts_with_product(self, product_id: str) -> int:
        count = 0
        for cart_id in self.get_all_cart_ids():
            if self._store.sismember(self._products_key(cart_id), product_id):
                count += 1
        logger.debug("Carts containing %s: %s", product_id, count)
        return count

    def get_carts_by_user(self, user_id: str) -> list[str]:
        """Cart ids starting with the user's cart key.

        This is a plain prefix match, so ``ncdai`` also matches ``cart:ncdai-10``.
        """
        prefix = self.cart_key(user_id)
        carts = [cart_id for cart_id in self.get_all_cart_ids() if cart_id.startswith(prefix)]
        logger.debug("Carts for %s: %s", user_id, carts)
        return carts

    def get_cart_lines(self, cart_id: str) -> list[CartLine]:
        lines = []
        for product_id in self._store.smembers(self._products_key(cart_id)):
            data = self._store.hgetall(self._line_key(cart_id, product_id))
            if not data:
                continue
            lines.append(CartLine.from_mapping(data))
        return lines

    def calculate_cart_total(self, cart_id: str) -> int | float:
        """Sum price * quantity over the cart's lines.

        A line with a missing or non-numeric field turns the total into NaN.
        """
        total: int | float = 0
        for product_id in self._store.smembers(self._products_key(cart_id)):
            data = self._store.hgetall(self._line_key(cart_id, product_id))
            total += CartLine.from_mapping(data).subtotal
        logger.debug("Cart %s total = %s", cart_id, total)
        return total

    def find_cart_with_max_total(self) -> MaxTotalCart:
        """Cart with the strictly highest total; first seen wins ties.

        Zero is the starting point, so a registry whose totals are all zero
        or less (or NaN) reports no cart.
        """
        max_total: int | float = 0
        max_cart_id: str | None = None

        for cart_id in self.get_all_cart_ids():
            total = self.calculate_cart_total(cart_id)
            if total > max_total:
                max_total = total
                max_cart_id = cart_id

        logger.debug("Max total cart %s = %s", max_cart_id, max_total)
        return MaxTotalCart(cart_id=max_cart_id, total=max_total)

    def get_most_frequent_product(self) -> ProductFrequency:
        counter: Counter[str] = Counter()
        for cart_id in self.get_all_cart_ids():
            counter.update(self._store.smembers(self._products_key(cart_id)))

        if not counter:
            return ProductFrequency(product_id=None, count=0)

        product_id, count = counter.most_common(1)[0]
        logger.debug("Most frequent product %s x%s", product_id, count)
        return ProductFrequency(product_id=product_id, count=count)
