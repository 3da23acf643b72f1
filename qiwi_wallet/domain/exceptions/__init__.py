"""Domain Exceptions - Transport, decoding and wallet errors."""

from .base import DomainException
from .transport import DecodeException, TransportException
from .wallet import InvalidPhoneNumberException, WalletAPIException

__all__ = [
    "DomainException",
    "TransportException",
    "DecodeException",
    "WalletAPIException",
    "InvalidPhoneNumberException",
]
