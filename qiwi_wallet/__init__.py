"""
QIWI Wallet - async client for the QIWI Wallet personal API

Authenticates with a phone number and API token and exposes profile
lookup, paginated payment history, commission quoting and transfers.
"""

__version__ = "0.1.0"

from qiwi_wallet.application.services import QiwiClient
from qiwi_wallet.domain.entities import (
    BASE_CURRENCY,
    CellularTopUp,
    Currency,
    Provider,
    QiwiTransfer,
    TransferDirection,
    WalletUser,
)
from qiwi_wallet.domain.exceptions import (
    DecodeException,
    DomainException,
    InvalidPhoneNumberException,
    TransportException,
    WalletAPIException,
)
from qiwi_wallet.domain.interfaces import HttpMethod, Transport
from qiwi_wallet.infrastructure.clients import Caller, HttpTransport
from qiwi_wallet.schemas import Envelope

__all__ = [
    "__version__",
    "QiwiClient",
    "Caller",
    "Transport",
    "HttpTransport",
    "HttpMethod",
    "Envelope",
    "WalletUser",
    "Currency",
    "BASE_CURRENCY",
    "Provider",
    "QiwiTransfer",
    "CellularTopUp",
    "TransferDirection",
    "DomainException",
    "TransportException",
    "DecodeException",
    "WalletAPIException",
    "InvalidPhoneNumberException",
]
