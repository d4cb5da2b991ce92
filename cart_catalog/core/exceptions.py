"""Custom exceptions for the cart catalog.

Backend failures are not wrapped: redis-py exceptions reach the caller as-is.
"""
from __future__ import annotations


class CartCatalogException(Exception):
    """Base exception for all cart catalog errors."""

    def __init__(self, message: str, *args: object) -> None:
        super().__init__(message, *args)
        self.message = message


class ConfigurationException(CartCatalogException):
    """Configuration errors."""

    def __init__(self, setting: str, reason: str) -> None:
        super().__init__(f"Invalid setting {setting}: {reason}")
        self.setting = setting
        self.reason = reason
