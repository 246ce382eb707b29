"""Geocoding adapters - Implementations of GeocoderPort.

Available implementations:
- OpenRouteServiceGeocoder: openrouteservice (Pelias) geocoding API
"""

from .openrouteservice_adapter import OpenRouteServiceGeocoder, is_ip_address

__all__ = ["OpenRouteServiceGeocoder", "is_ip_address"]
