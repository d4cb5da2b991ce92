"""Cart and catalog records."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any


def parse_stored_int(value: Any) -> int | float:
    """Parse an integer read back from Redis; anything unparsable becomes NaN."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return math.nan


@dataclass(frozen=True)
class Product:
    """Catalog item. ``quantity`` is the default quantity added to a cart."""

    id: str
    title: str
    image: str
    price: int
    quantity: int = 1


@dataclass(frozen=True)
class CartLine:
    """Snapshot of a product as it was stored in a cart.

    Numeric fields read back from a missing or malformed hash are NaN.
    """

    id: str
    title: str
    image: str
    price: int | float
    quantity: int | float

    @classmethod
    def from_product(cls, product: Product) -> CartLine:
        return cls(
            id=product.id,
            title=product.title,
            image=product.image,
            price=int(product.price),
            quantity=int(product.quantity),
        )

    def to_mapping(self) -> dict[str, str]:
        """Hash fields as written to Redis; numbers are stringified."""
        return {
            "id": self.id,
            "title": self.title,
            "image": self.image,
            "price": str(int(self.price)),
            "quantity": str(int(self.quantity)),
        }

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> CartLine:
        return cls(
            id=str(data.get("id", "")),
            title=str(data.get("title", "")),
            image=str(data.get("image", "")),
            price=parse_stored_int(data.get("price")),
            quantity=parse_stored_int(data.get("quantity")),
        )

    @property
    def subtotal(self) -> int | float:
        return self.price * self.quantity


@dataclass(frozen=True)
class MaxTotalCart:
    cart_id: str | None
    total: int | float


@dataclass(frozen=True)
class ProductFrequency:
    product_id: str | None
    count: int
