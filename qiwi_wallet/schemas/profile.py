"""Person profile documents (``person-profile/v1/profile/current``)."""

from datetime import datetime
from enum import Enum
from typing import Any, List, Optional

from pydantic import IPvAnyAddress

from .base import WalletModel


class IdentificationLevel(str, Enum):
    ANONYMOUS = "ANONYMOUS"
    SIMPLE = "SIMPLE"
    VERIFIED = "VERIFIED"
    FULL = "FULL"


class MobilePinInfo(WalletModel):
    mobile_pin_used: bool
    last_mobile_pin_change: Optional[str] = None
    next_mobile_pin_change: Optional[str] = None


class PassInfo(WalletModel):
    password_used: bool
    last_pass_change: Optional[str] = None
    next_pass_change: Optional[str] = None


class PinInfo(WalletModel):
    pin_used: bool


class IdentificationInfo(WalletModel):
    bank_alias: str
    identification_level: IdentificationLevel


class UserInfo(WalletModel):
    default_pay_currency: int
    default_pay_source: Optional[int] = None
    email: Optional[str] = None
    first_txn_id: int
    language: str
    operator: str
    phone_hash: str
    promo_enabled: Optional[Any] = None


class ContractInfo(WalletModel):
    blocked: bool
    contract_id: int
    creation_date: datetime
    features: List[Any] = []
    identification_info: List[IdentificationInfo] = []


class AuthInfo(WalletModel):
    person_id: int
    registration_date: datetime
    bound_email: Optional[str] = None
    ip: IPvAnyAddress
    last_login_date: Optional[datetime] = None
    mobile_pin_info: MobilePinInfo
    pass_info: PassInfo
    pin_info: PinInfo


class ProfileInfo(WalletModel):
    """
    Current user profile.

    Each section is present only when the matching ``*InfoEnabled`` flag
    was requested.
    """

    auth_info: Optional[AuthInfo] = None
    contract_info: Optional[ContractInfo] = None
    user_info: Optional[UserInfo] = None
