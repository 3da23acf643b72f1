"""Application services."""

from .wallet_client import QiwiClient

__all__ = [
    "QiwiClient",
]
