"""Ports layer - Abstract interfaces (Protocols) for the geocoder.

Ports define the contracts between the provider adapter and the
collaborators it drives, so both sides can be swapped in tests.
"""

from .geocoding import GeocoderPort
from .http import HttpClientPort, HttpResponse, is_success_status

__all__ = [
    # Geocoding
    "GeocoderPort",
    # HTTP
    "HttpClientPort",
    "HttpResponse",
    "is_success_status",
]
