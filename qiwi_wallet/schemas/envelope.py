"""Success/error response envelope."""

import json
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import structlog
from pydantic import StrictStr, TypeAdapter, ValidationError

from qiwi_wallet.core.metrics import record_remote_error
from qiwi_wallet.domain.exceptions import DecodeException, WalletAPIException

from .base import WalletModel

logger = structlog.get_logger(__name__)

T = TypeVar("T")

ERROR_FIELD = "errorCode"


class ErrorPayload(WalletModel):
    """The error shape: ``{"errorCode": "..."}``."""

    error_code: StrictStr


@dataclass(frozen=True)
class Envelope(Generic[T]):
    """
    Either a wallet error code or a successful payload.

    The error shape always takes precedence: a document carrying a string
    ``errorCode`` is an error even if it would also validate as ``T``.
    """

    payload: T | None = None
    error_code: str | None = None

    @property
    def is_error(self) -> bool:
        return self.error_code is not None

    @classmethod
    def decode(cls, raw: str, model: Any) -> "Envelope[T]":
        """
        Decode response text into an envelope.

        Args:
            raw: Response body text
            model: Type of the success payload (a model class or any
                type pydantic can validate)

        Raises:
            DecodeException: If ``raw`` is not JSON or fits neither shape
        """
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise DecodeException(f"Response is not valid JSON: {exc}", raw=raw) from exc

        # The error shape is {"errorCode": <string>}. A non-string errorCode
        # does not match it and the document is validated as the success type.
        if isinstance(data, dict) and ERROR_FIELD in data:
            try:
                error = ErrorPayload.model_validate(data)
            except ValidationError:
                pass
            else:
                return cls(error_code=error.error_code)

        try:
            payload = TypeAdapter(model).validate_python(data)
        except ValidationError as exc:
            logger.debug("envelope_decode_failed", model=getattr(model, "__name__", str(model)))
            raise DecodeException(
                f"Response matches neither error nor {getattr(model, '__name__', model)} shape: {exc}",
                raw=raw,
            ) from exc

        return cls(payload=payload)

    def into_result(self) -> T:
        """
        Unwrap the payload.

        Raises:
            WalletAPIException: If the wallet reported an error code
        """
        if self.error_code is not None:
            record_remote_error(self.error_code)
            raise WalletAPIException(self.error_code)
        return self.payload  # type: ignore[return-value]
