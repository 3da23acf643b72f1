"""Wallet user identity."""

from dataclasses import dataclass

import phonenumbers

from qiwi_wallet.domain.exceptions import InvalidPhoneNumberException


@dataclass(frozen=True)
class WalletUser:
    """
    Immutable wallet account identifier.

    The wallet addresses a person by their phone number written as the
    country calling code followed by the national significant number,
    without ``+`` or separators: ``+7 (999) 123-45-67`` -> ``79991234567``.

    Attributes:
        account: Normalized account string
    """

    account: str

    @classmethod
    def parse(cls, raw: str) -> "WalletUser":
        """
        Parse a phone number in international format.

        Raises:
            InvalidPhoneNumberException: If the number cannot be parsed
        """
        try:
            number = phonenumbers.parse(raw.strip(), None)
        except phonenumbers.NumberParseException as exc:
            raise InvalidPhoneNumberException(raw, str(exc)) from exc

        if not phonenumbers.is_possible_number(number):
            raise InvalidPhoneNumberException(raw, "impossible number")

        national = phonenumbers.national_significant_number(number)
        return cls(account=f"{number.country_code}{national}")

    @property
    def e164(self) -> str:
        return f"+{self.account}"

    def __str__(self) -> str:
        return self.account
