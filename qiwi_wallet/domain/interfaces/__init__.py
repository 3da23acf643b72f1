"""
Domain Interfaces (Ports)
"""

from .transport import HttpMethod, Transport

__all__ = [
    "HttpMethod",
    "Transport",
]
