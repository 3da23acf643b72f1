"""Wallet-reported and input validation exceptions."""

from .base import DomainException


class WalletAPIException(DomainException):
    """Raised when the wallet answers with an ``errorCode`` envelope."""

    def __init__(self, error_code: str):
        super().__init__(
            message=f"qiwi error: {error_code}",
            code="WALLET_API_ERROR",
        )
        self.error_code = error_code


class InvalidPhoneNumberException(DomainException):
    """Raised when a phone number cannot be parsed into a wallet account."""

    def __init__(self, phone: str, reason: str = "not a valid phone number"):
        super().__init__(
            message=f"Invalid phone number {phone!r}: {reason}",
            code="INVALID_PHONE_NUMBER",
        )
        self.phone = phone
