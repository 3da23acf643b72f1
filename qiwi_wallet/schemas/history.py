"""Payment history documents (``payment-history/v2/persons/{id}/payments``)."""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import Field

from .base import WalletModel


class PaymentType(str, Enum):
    IN = "IN"
    OUT = "OUT"
    QIWI_CARD = "QIWI_CARD"


class PaymentStatus(str, Enum):
    WAITING = "WAITING"
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


class PaymentSum(WalletModel):
    amount: Decimal
    currency: str


class ProviderInfo(WalletModel):
    id: int
    short_name: Optional[str] = None
    long_name: Optional[str] = None
    logo_url: Optional[str] = None
    description: Optional[str] = None
    keys: Optional[str] = None
    site_url: Optional[str] = None


class PaymentHistoryEntry(WalletModel):
    txn_id: int
    person_id: int
    date: datetime
    error_code: int
    error: Optional[str] = None
    payment_type: PaymentType = Field(alias="type")
    status: PaymentStatus
    status_text: Optional[str] = None
    trm_txn_id: str
    account: str
    sum: PaymentSum
    commission: PaymentSum
    total: PaymentSum
    provider: ProviderInfo
    comment: Optional[str] = None
    currency_rate: Decimal
    extras: Dict[str, Any] = {}
    cheque_ready: bool = False
    bank_document_available: bool = False
    bank_document_ready: bool = False
    repeat_payment_enabled: bool = False
    favorite_payment_enabled: bool = False
    regular_payment_enabled: bool = False


class PaymentHistoryPage(WalletModel):
    """One page of history plus the cursor of the next page."""

    data: List[PaymentHistoryEntry]
    next_txn_id: Optional[int] = None
    next_txn_date: Optional[str] = None

    @property
    def cursor(self) -> Optional[Tuple[str, int]]:
        """``(nextTxnDate, nextTxnId)`` or None when this is the last page."""
        if self.next_txn_date is None or self.next_txn_id is None:
            return None
        return self.next_txn_date, self.next_txn_id
