"""Transport and decoding exceptions."""

from .base import DomainException


class TransportException(DomainException):
    """
    Raised when a request does not produce usable response text.

    Covers connection failures, non-2xx statuses (the response body is
    kept for diagnostics) and bodies that are not valid text.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
    ):
        super().__init__(
            message=message,
            code="TRANSPORT_ERROR",
        )
        self.status_code = status_code
        self.body = body


class DecodeException(DomainException):
    """Raised when response text is not JSON or matches no envelope variant."""

    def __init__(self, message: str, raw: str | None = None):
        super().__init__(
            message=message,
            code="DECODE_ERROR",
        )
        self.raw = raw
