"""Currencies and payment providers known to the wallet."""

from enum import IntEnum


class Currency(IntEnum):
    """ISO 4217 numeric currency codes."""

    RUB = 643
    USD = 840
    EUR = 978
    KZT = 398

    @property
    def code(self) -> str:
        """String form used in request bodies."""
        return str(self.value)


# Commission quotes and mobile top-ups are always priced in this currency.
BASE_CURRENCY = Currency.RUB


class Provider(IntEnum):
    """Well-known payment provider ids."""

    QIWI = 99
    VISA_RU = 1963
    VISA_CIS = 1960
    MASTERCARD_RU = 21013
    MASTERCARD_CIS = 21012
    MIR = 31652
    TINKOFF = 466
    ALFABANK = 464
    PROMSVYAZBANK = 821
    RUSSIAN_STANDARD = 815
    OTHER_BANK = 1717
