"""Commission documents (``sinap/providers/{id}/...``)."""

from decimal import Decimal
from typing import List

from .base import WalletModel


class CommissionRange(WalletModel):
    bound: Decimal
    rate: Decimal
    min: Decimal
    max: Decimal
    fixed: Decimal


class CommissionLimit(WalletModel):
    currency: int
    min: Decimal
    max: Decimal


class CommissionInfo(WalletModel):
    ranges: List[CommissionRange]
    limits: List[CommissionLimit] = []


class CommissionForm(WalletModel):
    """Provider form; only the commission section is used."""

    commission: CommissionInfo


class CommissionAmount(WalletModel):
    amount: Decimal


class CommissionQuote(WalletModel):
    qw_commission: CommissionAmount
