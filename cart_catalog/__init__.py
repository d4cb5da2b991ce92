"""Shopping-cart catalog stored in Redis sets, hashes and strings."""
from __future__ import annotations

__version__ = "1.0.0"
