"""Demo runner: seeds two carts and logs every aggregate query.

Run:
    python scripts/run_demo.py

Environment variables:
- `REDIS_URL` - Redis connection URL (required)
- `LOG_LEVEL` - logging level, default INFO
- `CART_ATOMIC_WRITES` - wrap multi-key writes in MULTI/EXEC when true
"""
from __future__ import annotations

import logging
import sys

from cart_catalog.catalog import PRODUCTS
from cart_catalog.core.config import load_settings
from cart_catalog.core.exceptions import ConfigurationException
from cart_catalog.integrations.redis_client import client_from_settings
from cart_catalog.repositories import CartRepository

logger = logging.getLogger(__name__)


def run(repo: CartRepository) -> None:
    repo.create_cart("ncdai-1", PRODUCTS)
    repo.create_cart("ncdai-2", PRODUCTS[:3])

    logger.info("findUnpaidCarts %s", repo.find_unpaid_carts())
    logger.info("cartsWithMoreThanFiveItems %s", repo.carts_with_more_than_five_items())
    logger.info("countCartsWithProduct %s", repo.count_carts_with_product("SKU002"))
    logger.info("calculateCartTotal %s", repo.calculate_cart_total("cart:ncdai-1"))
    logger.info("getCartsByUser %s", repo.get_carts_by_user("ncdai"))
    logger.info("findCartWithMaxTotal %s", repo.find_cart_with_max_total())
    logger.info("getMostFrequentProduct %s", repo.get_most_frequent_product())


def main() -> int:
    try:
        settings = load_settings()
    except ConfigurationException as e:
        logging.basicConfig(level=logging.INFO)
        logger.error("Failed to load settings: %s", e)
        return 1

    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))
    client = client_from_settings(settings)
    try:
        run(CartRepository(client, atomic=settings.atomic_writes))
    finally:
        client.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
