"""
Unit tests for wallet domain entities.

These tests verify:
1. Phone numbers normalize to the wallet account format
2. Malformed phone numbers fail before any request is made
3. Currency codes and transfer directions resolve correctly
"""

from dataclasses import FrozenInstanceError

import pytest

from qiwi_wallet.domain.entities import (
    BASE_CURRENCY,
    CellularTopUp,
    Currency,
    Provider,
    QiwiTransfer,
    WalletUser,
)
from qiwi_wallet.domain.exceptions import DomainException, InvalidPhoneNumberException


# =============================================================================
# WalletUser Tests
# =============================================================================

class TestWalletUser:
    """Tests for phone number parsing."""

    @pytest.mark.parametrize(
        "raw,account",
        [
            ("+79991234567", "79991234567"),
            ("+7 (999) 123-45-67", "79991234567"),
            (" +7 999 123 45 67 ", "79991234567"),
            ("+44 20 7946 0958", "442079460958"),
            ("+1 650 253 0000", "16502530000"),
        ],
    )
    def test_parse_normalizes_account(self, raw, account):
        user = WalletUser.parse(raw)

        assert user.account == account
        assert str(user) == account

    def test_e164(self):
        assert WalletUser.parse("+7 999 123 45 67").e164 == "+79991234567"

    @pytest.mark.parametrize("raw", ["", "not a phone", "89991234567", "+7 12"])
    def test_invalid_phone_raises(self, raw):
        with pytest.raises(InvalidPhoneNumberException) as exc_info:
            WalletUser.parse(raw)

        assert exc_info.value.code == "INVALID_PHONE_NUMBER"
        assert isinstance(exc_info.value, DomainException)

    def test_user_is_immutable(self):
        user = WalletUser.parse("+79991234567")

        with pytest.raises(FrozenInstanceError):
            user.account = "1"

    def test_users_compare_by_account(self):
        assert WalletUser.parse("+79991234567") == WalletUser.parse("+7 999 123-45-67")


# =============================================================================
# Currency and Provider Tests
# =============================================================================

class TestCurrency:
    """Tests for currency identifiers."""

    def test_code_is_numeric_string(self):
        assert Currency.RUB.code == "643"
        assert Currency.USD.code == "840"
        assert Currency.EUR.code == "978"
        assert Currency.KZT.code == "398"

    def test_base_currency_is_rub(self):
        assert BASE_CURRENCY is Currency.RUB

    def test_qiwi_provider_id(self):
        assert Provider.QIWI == 99


# =============================================================================
# Transfer Direction Tests
# =============================================================================

class TestTransferDirection:
    """Tests for resolving a direction to provider, currency and account."""

    def test_qiwi_transfer_uses_wallet_provider_and_caller_currency(self):
        direction = QiwiTransfer(
            to_phone=WalletUser.parse("+79991234567"),
            to_currency=Currency.USD,
        )

        assert direction.provider_id == 99
        assert direction.currency is Currency.USD
        assert str(direction.account) == "79991234567"

    def test_cellular_top_up_is_always_base_currency(self):
        direction = CellularTopUp(carrier=1, to_phone=WalletUser.parse("+79031234567"))

        assert direction.provider_id == 1
        assert direction.currency is BASE_CURRENCY
        assert str(direction.account) == "79031234567"
