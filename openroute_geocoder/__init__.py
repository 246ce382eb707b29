"""openrouteservice geocoding provider.

Translates forward and reverse geocoding requests into calls against the
openrouteservice geocoding API and maps the answers into immutable
Address records.

    from openroute_geocoder import create_geocoder

    geocoder = create_geocoder(api_key="...")
    addresses = geocoder.geocode("Kalbacher Hauptstraße 10, Frankfurt")
"""

from .container import create_geocoder
from .domain import (
    Address,
    AddressCollection,
    AdminLevel,
    Coordinates,
    Country,
    GeocodeQuery,
    GeocoderError,
    ReverseQuery,
)

__all__ = [
    "create_geocoder",
    "Address",
    "AddressCollection",
    "AdminLevel",
    "Coordinates",
    "Country",
    "GeocodeQuery",
    "ReverseQuery",
    "GeocoderError",
]
