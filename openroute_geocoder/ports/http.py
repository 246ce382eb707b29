"""HTTP port - The fetch capability used by provider adapters.

Adapters never talk to a network library directly. They receive an
object with a single fetch() call, which keeps them testable with a stub
and leaves timeouts and pooling to the client's configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


def is_success_status(status_code: int) -> bool:
    """Check if a status code is in the 2xx range."""
    return 200 <= status_code < 300


@dataclass(frozen=True, slots=True)
class HttpResponse:
    """Status and decoded text body of an HTTP response."""

    status_code: int
    body: str

    @property
    def is_success(self) -> bool:
        return is_success_status(self.status_code)


class HttpClientPort(Protocol):
    """Port for issuing GET requests.

    Implementation: adapters/http/requests_client.py
    """

    def fetch(self, url: str) -> HttpResponse:
        """Issue a GET request.

        Non-2xx statuses are returned, not raised, so callers can read
        error envelopes in the body.

        Args:
            url: Absolute URL including the query string.

        Returns:
            The response status and body.

        Raises:
            TransportFailure: If the request could not be completed.
        """
        ...
