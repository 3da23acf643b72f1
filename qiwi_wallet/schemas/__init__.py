"""Pydantic models for the wallet API JSON documents."""

from .base import WalletModel
from .commission import (
    CommissionAmount,
    CommissionForm,
    CommissionInfo,
    CommissionLimit,
    CommissionQuote,
    CommissionRange,
)
from .envelope import Envelope, ErrorPayload
from .history import (
    PaymentHistoryEntry,
    PaymentHistoryPage,
    PaymentStatus,
    PaymentSum,
    PaymentType,
    ProviderInfo,
)
from .payment import (
    CommissionQuoteRequest,
    Money,
    PaymentMethod,
    PurchaseTotals,
    TransferData,
    TransferFields,
    TransferRequest,
    TransferState,
    TransferTransaction,
)
from .profile import (
    AuthInfo,
    ContractInfo,
    IdentificationInfo,
    IdentificationLevel,
    MobilePinInfo,
    PassInfo,
    PinInfo,
    ProfileInfo,
    UserInfo,
)

__all__ = [
    "WalletModel",
    "Envelope",
    "ErrorPayload",
    "ProfileInfo",
    "AuthInfo",
    "ContractInfo",
    "UserInfo",
    "MobilePinInfo",
    "PassInfo",
    "PinInfo",
    "IdentificationInfo",
    "IdentificationLevel",
    "PaymentHistoryPage",
    "PaymentHistoryEntry",
    "PaymentSum",
    "ProviderInfo",
    "PaymentType",
    "PaymentStatus",
    "CommissionInfo",
    "CommissionRange",
    "CommissionLimit",
    "CommissionForm",
    "CommissionAmount",
    "CommissionQuote",
    "CommissionQuoteRequest",
    "Money",
    "PaymentMethod",
    "PurchaseTotals",
    "TransferRequest",
    "TransferFields",
    "TransferData",
    "TransferTransaction",
    "TransferState",
]
