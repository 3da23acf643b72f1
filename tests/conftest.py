"""
Shared fixtures.

Provides:
- In-memory Transport double that records every request
- Builders for wallet JSON documents
- A QiwiClient wired to the in-memory transport
"""

import json
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional

import pytest

from qiwi_wallet.application.services import QiwiClient
from qiwi_wallet.domain.entities import WalletUser
from qiwi_wallet.domain.interfaces import HttpMethod, Transport
from qiwi_wallet.infrastructure.clients import Caller


OWNER_PHONE = "+79991234567"
OWNER_ACCOUNT = "79991234567"
FIXED_NOW = 1_700_000_000.456


# =============================================================================
# Mock Transport
# =============================================================================

@dataclass
class RecordedCall:
    endpoint: str
    method: HttpMethod
    params: Dict[str, str]
    body: Any


class MockTransport(Transport):
    """
    Transport that replays queued responses and records requests.

    Each queued item is either a JSON-serializable document, a raw string
    returned verbatim, or an exception to raise.
    """

    def __init__(self, responses: Optional[List[Any]] = None):
        self.responses = list(responses or [])
        self.calls: List[RecordedCall] = []

    def queue(self, *responses: Any) -> "MockTransport":
        self.responses.extend(responses)
        return self

    @property
    def call_count(self) -> int:
        return len(self.calls)

    async def call(
        self,
        endpoint: str,
        method: HttpMethod,
        params: Mapping[str, str],
        body: Any = None,
    ) -> str:
        self.calls.append(RecordedCall(endpoint, method, dict(params), body))

        if not self.responses:
            raise AssertionError(f"Unexpected request to {endpoint}")

        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        if isinstance(response, str):
            return response
        return json.dumps(response)


# =============================================================================
# Document Builders
# =============================================================================

def make_money(amount: str = "100.00", currency: str = "643") -> dict:
    return {"amount": amount, "currency": currency}


def make_history_entry(txn_id: int, amount: str = "100.00") -> dict:
    return {
        "txnId": txn_id,
        "personId": int(OWNER_ACCOUNT),
        "date": "2023-11-14T12:00:00+03:00",
        "errorCode": 0,
        "error": None,
        "type": "OUT",
        "status": "SUCCESS",
        "statusText": "Success",
        "trmTxnId": f"trm-{txn_id}",
        "account": "+79990000000",
        "sum": make_money(amount),
        "commission": make_money("0.00"),
        "total": make_money(amount),
        "provider": {
            "id": 99,
            "shortName": "QIWI Wallet",
            "longName": "QIWI Wallet",
            "logoUrl": "https://static.qiwi.com/img/providers/logoBig/99_l.png",
            "description": "",
            "keys": "qiwi",
            "siteUrl": "https://qiwi.com",
        },
        "comment": "",
        "currencyRate": "1",
        "extras": {},
        "chequeReady": True,
        "bankDocumentAvailable": False,
        "bankDocumentReady": False,
        "repeatPaymentEnabled": True,
        "favoritePaymentEnabled": True,
        "regularPaymentEnabled": True,
    }


def make_history_page(
    txn_ids: List[int],
    next_txn_date: Optional[str] = None,
    next_txn_id: Optional[int] = None,
) -> dict:
    page: Dict[str, Any] = {"data": [make_history_entry(i) for i in txn_ids]}
    if next_txn_date is not None:
        page["nextTxnDate"] = next_txn_date
    if next_txn_id is not None:
        page["nextTxnId"] = next_txn_id
    return page


def make_profile() -> dict:
    return {
        "authInfo": {
            "personId": int(OWNER_ACCOUNT),
            "registrationDate": "2017-01-07T16:51:06.000+03:00",
            "boundEmail": "user@example.com",
            "ip": "81.210.201.22",
            "lastLoginDate": "2023-11-14T09:13:45.000+03:00",
            "mobilePinInfo": {
                "mobilePinUsed": True,
                "lastMobilePinChange": "2017-01-07T16:51:06.000+03:00",
                "nextMobilePinChange": "2017-07-07T16:51:06.000+03:00",
            },
            "passInfo": {
                "passwordUsed": True,
                "lastPassChange": "2017-01-07T16:51:06.000+03:00",
                "nextPassChange": "2017-07-07T16:51:06.000+03:00",
            },
            "pinInfo": {"pinUsed": True},
        },
        "contractInfo": {
            "blocked": False,
            "contractId": int(OWNER_ACCOUNT),
            "creationDate": "2017-01-07T16:51:06.000+03:00",
            "features": [],
            "identificationInfo": [
                {"bankAlias": "QIWI", "identificationLevel": "SIMPLE"},
            ],
        },
        "userInfo": {
            "defaultPayCurrency": 643,
            "defaultPaySource": 7,
            "email": None,
            "firstTxnId": 10807097143,
            "language": "Russian",
            "operator": "Beeline",
            "phoneHash": "lgsco87234f0287",
            "promoEnabled": None,
        },
    }


def make_commission_form() -> dict:
    return {
        "id": "99",
        "commission": {
            "ranges": [
                {"bound": 0, "rate": 0.02, "min": 10, "max": 5000, "fixed": 0},
            ],
            "limits": [
                {"currency": 643, "min": 1, "max": 15000},
            ],
        },
    }


def make_transfer_response(txn_id: str = "11155897070", code: str = "Accepted") -> dict:
    return {
        "id": "1700000000000",
        "terms": "99",
        "fields": {"account": "79990000000"},
        "sum": make_money("10.00"),
        "transaction": {"id": txn_id, "state": {"code": code}},
        "source": "account_643",
    }


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def transport() -> MockTransport:
    return MockTransport()


@pytest.fixture
def owner() -> WalletUser:
    return WalletUser.parse(OWNER_PHONE)


@pytest.fixture
def client(transport: MockTransport, owner: WalletUser) -> QiwiClient:
    return QiwiClient(
        caller=Caller(transport),
        user=owner,
        history_page_size=50,
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture
def history_page() -> Callable[..., dict]:
    return make_history_page


@pytest.fixture
def history_entry() -> Callable[..., dict]:
    return make_history_entry


@pytest.fixture
def profile_document() -> dict:
    return make_profile()


@pytest.fixture
def commission_form() -> dict:
    return make_commission_form()


@pytest.fixture
def transfer_response() -> Callable[..., dict]:
    return make_transfer_response
