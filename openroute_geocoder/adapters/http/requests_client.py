"""HTTP fetch capability backed by requests.

Implements HttpClientPort with a shared requests.Session, so repeated
lookups reuse connections. Timeouts and the User-Agent come from
GeocodingConfig.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Optional

import requests

from ...config import GeocodingConfig, get_config
from ...domain.errors import TransportFailure
from ...ports.http import HttpResponse

_API_KEY_PATTERN = re.compile(r"(api_key=)[^&]*")


def redact_url(url: str) -> str:
    """Hide the API key in a URL before it is logged or attached to an error."""
    return _API_KEY_PATTERN.sub(r"\1***", url)


@dataclass
class RequestsHttpClient:
    """HttpClientPort implementation using requests.

    Attributes:
        config: Geocoding configuration (timeout, user agent)
        session: Optional session to reuse; one is created if omitted
    """

    config: GeocodingConfig = field(default_factory=lambda: get_config().geocoding)
    session: Optional[requests.Session] = field(default=None, repr=False)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if self.session is None:
            self.session = requests.Session()
        self.session.headers.update(
            {"User-Agent": self.config.user_agent, "Accept": "application/json"}
        )

    def fetch(self, url: str) -> HttpResponse:
        """Issue a GET request and return status and body.

        Args:
            url: Absolute URL including the query string.

        Returns:
            The response, whatever its status code.

        Raises:
            TransportFailure: On timeouts, connection errors and any other
                requests failure.
        """
        safe_url = redact_url(url)
        self._logger.debug("HTTP GET", extra={"url": safe_url})

        try:
            response = self.session.get(url, timeout=self.config.timeout_seconds)  # type: ignore[union-attr]
        except requests.Timeout as e:
            self._logger.warning("HTTP request timed out", extra={"url": safe_url})
            raise TransportFailure(
                f"Request timed out after {self.config.timeout_seconds}s",
                cause=e,
                url=safe_url,
            ) from e
        except requests.ConnectionError as e:
            self._logger.warning(
                "HTTP connection failed", extra={"url": safe_url, "error": str(e)}
            )
            raise TransportFailure("Could not connect to the service", cause=e, url=safe_url) from e
        except requests.RequestException as e:
            self._logger.warning(
                "HTTP request failed", extra={"url": safe_url, "error": str(e)}
            )
            raise TransportFailure("HTTP request failed", cause=e, url=safe_url) from e

        self._logger.debug(
            "HTTP response",
            extra={"url": safe_url, "status_code": response.status_code},
        )
        return HttpResponse(status_code=response.status_code, body=response.text)

    def close(self) -> None:
        if self.session is not None:
            self.session.close()

    def __enter__(self) -> RequestsHttpClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
