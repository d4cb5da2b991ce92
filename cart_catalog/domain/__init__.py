"""Domain records for carts and catalog products."""
from __future__ import annotations

from cart_catalog.domain.cart import CartLine, MaxTotalCart, Product, ProductFrequency

__all__ = ["CartLine", "MaxTotalCart", "Product", "ProductFrequency"]
