"""Transport port."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Mapping


class HttpMethod(str, Enum):
    """HTTP verbs used by the wallet API."""

    GET = "GET"
    POST = "POST"


class Transport(ABC):
    """
    Abstract request dispatcher for the wallet API.

    Implementations must be safe to call concurrently and keep no
    per-request state between calls.
    """

    @abstractmethod
    async def call(
        self,
        endpoint: str,
        method: HttpMethod,
        params: Mapping[str, str],
        body: Any | None = None,
    ) -> str:
        """
        Perform exactly one request and return the raw response text.

        Args:
            endpoint: Path relative to the API host, without leading slash
            method: HTTP verb
            params: Query string parameters
            body: JSON-serializable request body, if any

        Returns:
            Response body as text

        Raises:
            TransportException: On connection failure, non-2xx status or
                a body that is not valid text
        """
        ...
