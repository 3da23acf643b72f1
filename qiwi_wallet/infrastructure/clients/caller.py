"""Caller: dispatch through a Transport and decode the envelope."""

from typing import Any, Mapping, Type, TypeVar

from qiwi_wallet.domain.interfaces import HttpMethod, Transport
from qiwi_wallet.schemas.envelope import Envelope

T = TypeVar("T")


class Caller:
    """
    Thin wrapper that turns raw response text into an ``Envelope``.

    Holds no mutable state, so one instance can be shared by any number
    of concurrent calls.
    """

    def __init__(self, transport: Transport):
        self._transport = transport

    @property
    def transport(self) -> Transport:
        return self._transport

    async def call(
        self,
        endpoint: str,
        method: HttpMethod,
        params: Mapping[str, str] | None = None,
        body: Any | None = None,
        *,
        model: Type[T],
    ) -> Envelope[T]:
        """
        Perform a request and decode the response as ``Envelope[model]``.

        Raises:
            TransportException: Propagated from the transport unchanged
            DecodeException: If the text fits neither envelope shape
        """
        raw = await self._transport.call(endpoint, method, params or {}, body)
        return Envelope.decode(raw, model)
