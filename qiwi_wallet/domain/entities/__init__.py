"""Domain Entities - Wallet identities, currencies and transfer directions."""

from .currency import BASE_CURRENCY, Currency, Provider
from .transfer import CellularTopUp, QiwiTransfer, TransferDirection
from .user import WalletUser

__all__ = [
    "BASE_CURRENCY",
    "Currency",
    "Provider",
    "WalletUser",
    "QiwiTransfer",
    "CellularTopUp",
    "TransferDirection",
]
