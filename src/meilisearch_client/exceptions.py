"""Exception hierarchy for the Meilisearch client.

Transports raise `TransportError` and codecs raise `CodecError`; the service
template rewraps both into `MeiliSearchRuntimeError` so callers only ever
need to handle the normalized type (plus `MeiliSearchTimeoutError` from the
polling helper).
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from meilisearch_client.api.models import Update


class ErrorKind(str, Enum):
    """Category of a normalized runtime error."""

    TRANSPORT = "transport"
    RESPONSE = "response"
    RESPONSE_SHAPE = "response_shape"
    CODEC = "codec"


class MeiliSearchError(Exception):
    """Base class for all client exceptions."""


class ConfigurationError(MeiliSearchError):
    """Raised when the client cannot be assembled from its configuration."""


class TransportError(MeiliSearchError):
    """Raised by HTTP clients when no response could be obtained."""

    def __init__(self, message: str, *, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class CodecError(MeiliSearchError):
    """Raised by JSON handlers for malformed or shape-mismatched payloads."""

    def __init__(self, message: str, *, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class MeiliSearchRuntimeError(MeiliSearchError):
    """Normalized error surfaced by every API call.

    Attributes
    ----------
    message: str
        Human-readable description, taken from the server when available.
    status_code: int | None
        HTTP status of the response, if one was received.
    cause: BaseException | None
        The underlying transport or codec failure.
    kind: ErrorKind
        Which stage of the call failed.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        cause: Optional[BaseException] = None,
        kind: ErrorKind = ErrorKind.RESPONSE,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.cause = cause
        self.kind = kind

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"[{self.status_code}] {self.message}"
        return self.message


class MeiliSearchApiError(MeiliSearchRuntimeError):
    """Raised for non-2xx responses; carries the server's error payload."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        error_code: Optional[str] = None,
        error_type: Optional[str] = None,
        error_link: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message, status_code=status_code, cause=cause, kind=ErrorKind.RESPONSE)
        self.error_code = error_code
        self.error_type = error_type
        self.error_link = error_link


class MeiliSearchUpdateFailedError(MeiliSearchRuntimeError):
    """Raised while waiting on an update that the server marked as failed."""

    def __init__(self, update: "Update") -> None:
        detail = update.error or "no error message"
        super().__init__(
            f"Update {update.update_id} failed: {detail}",
            kind=ErrorKind.RESPONSE,
        )
        self.update = update


class MeiliSearchTimeoutError(MeiliSearchError, TimeoutError):
    """Raised when waiting for an update exceeds its deadline or is cancelled."""
