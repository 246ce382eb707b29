"""HTTP adapters - Implementations of HttpClientPort.

Available implementations:
- RequestsHttpClient: requests.Session based client
"""

from .requests_client import RequestsHttpClient, redact_url

__all__ = ["RequestsHttpClient", "redact_url"]
