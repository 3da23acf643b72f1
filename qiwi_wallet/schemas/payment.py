"""Request bodies and the transfer response."""

from decimal import Decimal
from typing import Annotated

from pydantic import Field, PlainSerializer

from .base import WalletModel

# Plain digits on the wire: ``Decimal("1E+2")`` is sent as ``"100"``.
PlainDecimal = Annotated[
    Decimal,
    PlainSerializer(lambda value: format(value, "f"), return_type=str, when_used="json"),
]


class Money(WalletModel):
    amount: PlainDecimal
    currency: str


class PaymentMethod(WalletModel):
    """Pay from the wallet balance held in ``account_id`` currency."""

    type: str = "Account"
    account_id: str


class PurchaseTotals(WalletModel):
    total: Money


class CommissionQuoteRequest(WalletModel):
    account: str
    payment_method: PaymentMethod
    purchase_totals: PurchaseTotals


class TransferFields(WalletModel):
    account: str


class TransferRequest(WalletModel):
    id: str
    sum: Money
    payment_method: PaymentMethod
    payment_fields: TransferFields = Field(alias="fields")
    comment: str = ""


class TransferState(WalletModel):
    code: str


class TransferTransaction(WalletModel):
    id: str
    state: TransferState


class TransferData(WalletModel):
    """Accepted transfer: wallet transaction id and its state code."""

    transaction: TransferTransaction
