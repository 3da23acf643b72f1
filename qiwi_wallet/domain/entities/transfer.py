"""Transfer directions."""

from dataclasses import dataclass
from typing import Union

from .currency import BASE_CURRENCY, Currency, Provider
from .user import WalletUser


@dataclass(frozen=True)
class QiwiTransfer:
    """Wallet-to-wallet transfer in a currency chosen by the caller."""

    to_phone: WalletUser
    to_currency: Currency = BASE_CURRENCY

    @property
    def provider_id(self) -> int:
        return int(Provider.QIWI)

    @property
    def currency(self) -> Currency:
        return self.to_currency

    @property
    def account(self) -> WalletUser:
        return self.to_phone


@dataclass(frozen=True)
class CellularTopUp:
    """
    Mobile carrier top-up.

    The carrier is addressed by its numeric provider id and the sum is
    always in the base currency.
    """

    carrier: int
    to_phone: WalletUser

    @property
    def provider_id(self) -> int:
        return int(self.carrier)

    @property
    def currency(self) -> Currency:
        return BASE_CURRENCY

    @property
    def account(self) -> WalletUser:
        return self.to_phone


TransferDirection = Union[QiwiTransfer, CellularTopUp]
