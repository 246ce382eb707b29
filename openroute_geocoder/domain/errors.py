"""Typed domain errors for the openrouteservice geocoder.

Every failure the adapter can report is one of these types, so callers
can tell a bad API key from a rate limit from a dropped connection
without parsing messages.

All errors inherit from GeocoderError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class GeocoderError(Exception):
    """Base error for the geocoder domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class UnsupportedOperation(GeocoderError):
    """The provider cannot serve this kind of query (e.g. IP geocoding)."""


@dataclass
class InvalidCredentials(GeocoderError):
    """The API key was rejected or never supplied."""


@dataclass
class QuotaExceeded(GeocoderError):
    """The request was valid but the account quota or QPS limit is spent."""


@dataclass
class ProviderFailure(GeocoderError):
    """The service answered with an error envelope we do not map further.

    Attributes:
        status_code: Status code reported by the service
        error_type: Error type string from the envelope, if any
    """

    status_code: Optional[int] = None
    error_type: Optional[str] = None


@dataclass
class TransportFailure(GeocoderError):
    """The request never produced a usable response.

    Covers connection errors, timeouts and bodies that are not JSON.

    Attributes:
        url: Requested URL with the API key redacted
    """

    url: Optional[str] = None


@dataclass
class InvalidArgument(GeocoderError):
    """A domain value was built from invalid input."""


@dataclass
class CollectionIsEmpty(GeocoderError):
    """An element was requested from an empty collection."""


@dataclass
class OutOfBounds(GeocoderError):
    """An index outside the collection was requested.

    Attributes:
        index: The requested index
    """

    index: int = 0
