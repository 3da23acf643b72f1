"""External API client implementations."""

from .caller import Caller
from .http_transport import HttpTransport

__all__ = [
    "Caller",
    "HttpTransport",
]
