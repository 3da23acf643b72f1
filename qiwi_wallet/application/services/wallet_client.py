"""QIWI wallet client - the public surface of the package."""

import time
from decimal import Decimal
from typing import AsyncIterator, Callable

import structlog

from qiwi_wallet.core.config import Settings, settings as default_settings
from qiwi_wallet.core.metrics import record_history_page
from qiwi_wallet.domain.entities import BASE_CURRENCY, TransferDirection, WalletUser
from qiwi_wallet.domain.interfaces import HttpMethod
from qiwi_wallet.infrastructure.clients import Caller, HttpTransport
from qiwi_wallet.schemas import (
    CommissionForm,
    CommissionInfo,
    CommissionQuote,
    CommissionQuoteRequest,
    Money,
    PaymentHistoryEntry,
    PaymentHistoryPage,
    PaymentMethod,
    ProfileInfo,
    PurchaseTotals,
    TransferData,
    TransferFields,
    TransferRequest,
)

logger = structlog.get_logger(__name__)


def _base_account_payment() -> PaymentMethod:
    return PaymentMethod(type="Account", account_id=BASE_CURRENCY.code)


class QiwiClient:
    """
    Client for the QIWI Wallet personal API.

    Holds a shared ``Caller`` and the identity of the authenticated user.
    All operations are independent coroutines and may run concurrently.
    """

    def __init__(
        self,
        caller: Caller,
        user: WalletUser,
        history_page_size: int | None = None,
        clock: Callable[[], float] = time.time,
    ):
        self._caller = caller
        self._user = user
        self._history_page_size = history_page_size or default_settings.history_page_size
        self._clock = clock

    @classmethod
    def from_credentials(
        cls,
        phone: str,
        token: str,
        settings: Settings | None = None,
    ) -> "QiwiClient":
        """
        Build a ready-to-use client talking to the real wallet API.

        Raises:
            InvalidPhoneNumberException: If ``phone`` cannot be parsed
        """
        settings = settings or default_settings
        user = WalletUser.parse(phone)
        transport = HttpTransport(
            token=token,
            base_url=settings.api_url,
            timeout=settings.api_timeout,
        )
        return cls(
            caller=Caller(transport),
            user=user,
            history_page_size=settings.history_page_size,
        )

    @property
    def user(self) -> WalletUser:
        return self._user

    async def profile_info(self) -> ProfileInfo:
        """Fetch the auth, contract and user sections of the profile."""
        envelope = await self._caller.call(
            "person-profile/v1/profile/current",
            HttpMethod.GET,
            {
                "authInfoEnabled": "true",
                "contractInfoEnabled": "true",
                "userInfoEnabled": "true",
            },
            model=ProfileInfo,
        )
        return envelope.into_result()

    async def payment_history(self, rows: int | None = None) -> AsyncIterator[PaymentHistoryEntry]:
        """
        Iterate over the whole payment history, newest first.

        Pages are fetched lazily; the cursor returned with each page keys
        the next request, and a page without a cursor ends the iteration.
        Any failed page aborts the iteration with its exception.
        """
        endpoint = f"payment-history/v2/persons/{self._user}/payments"
        rows = rows or self._history_page_size
        log = logger.bind(person=str(self._user), rows=rows)

        cursor: tuple[str, int] | None = None
        page_number = 0
        while True:
            params = {"rows": str(rows)}
            if cursor is not None:
                params["nextTxnDate"] = cursor[0]
                params["nextTxnId"] = str(cursor[1])

            envelope = await self._caller.call(
                endpoint,
                HttpMethod.GET,
                params,
                model=PaymentHistoryPage,
            )
            page = envelope.into_result()
            page_number += 1
            record_history_page()

            cursor = page.cursor
            log.debug(
                "history_page_fetched",
                page=page_number,
                entries=len(page.data),
                has_next=cursor is not None,
            )

            for entry in page.data:
                yield entry

            if cursor is None:
                break

    async def commission_info(self, provider: int) -> CommissionInfo:
        """Fetch commission ranges and limits of a provider."""
        envelope = await self._caller.call(
            f"sinap/providers/{int(provider)}/form",
            HttpMethod.GET,
            model=CommissionForm,
        )
        return envelope.into_result().commission

    async def commission_quote(
        self,
        provider: int,
        account: WalletUser | str,
        amount: Decimal,
    ) -> Decimal:
        """
        Quote the commission for paying ``amount`` to ``account``.

        The quote is always requested in the base currency, whatever
        currency the transfer itself will use.
        """
        if not isinstance(account, WalletUser):
            account = WalletUser.parse(account)

        request = CommissionQuoteRequest(
            account=str(account),
            payment_method=_base_account_payment(),
            purchase_totals=PurchaseTotals(
                total=Money(amount=amount, currency=BASE_CURRENCY.code),
            ),
        )
        envelope = await self._caller.call(
            f"sinap/providers/{int(provider)}/onlineCommission",
            HttpMethod.POST,
            body=request.to_json_body(),
            model=CommissionQuote,
        )
        return envelope.into_result().qw_commission.amount

    def next_transfer_id(self) -> int:
        """Client-side transfer id: the current time in ms, at second resolution."""
        return int(self._clock()) * 1000

    async def transfer(
        self,
        id: int | None,
        amount: Decimal,
        direction: TransferDirection,
        comment: str = "",
    ) -> TransferData:
        """
        Send money to another wallet or top up a mobile phone.

        Args:
            id: Client-side transaction id, generated from the clock if None
            amount: Sum to send, in the direction's currency
            direction: ``QiwiTransfer`` or ``CellularTopUp``
            comment: Free-form payment comment

        Returns:
            TransferData with the wallet transaction id and state code
        """
        transfer_id = id if id is not None else self.next_transfer_id()

        request = TransferRequest(
            id=str(transfer_id),
            sum=Money(amount=amount, currency=direction.currency.code),
            payment_method=_base_account_payment(),
            payment_fields=TransferFields(account=str(direction.account)),
            comment=comment,
        )

        logger.info(
            "transfer_requested",
            transfer_id=request.id,
            provider=direction.provider_id,
            currency=direction.currency.name,
        )

        envelope = await self._caller.call(
            f"sinap/api/v2/terms/{direction.provider_id}/payments",
            HttpMethod.POST,
            body=request.to_json_body(),
            model=TransferData,
        )
        return envelope.into_result()
