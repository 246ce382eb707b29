"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the geocoder. No external dependencies.
"""

from .errors import (
    CollectionIsEmpty,
    GeocoderError,
    InvalidArgument,
    InvalidCredentials,
    OutOfBounds,
    ProviderFailure,
    QuotaExceeded,
    TransportFailure,
    UnsupportedOperation,
)
from .models import (
    Address,
    AddressCollection,
    AdminLevel,
    AdminLevelCollection,
    Bounds,
    Coordinates,
    Country,
    GeocodeQuery,
    ReverseQuery,
)

__all__ = [
    # Models
    "Coordinates",
    "Bounds",
    "AdminLevel",
    "AdminLevelCollection",
    "Country",
    "Address",
    "AddressCollection",
    "GeocodeQuery",
    "ReverseQuery",
    # Errors
    "GeocoderError",
    "UnsupportedOperation",
    "InvalidCredentials",
    "QuotaExceeded",
    "ProviderFailure",
    "TransportFailure",
    "InvalidArgument",
    "CollectionIsEmpty",
    "OutOfBounds",
]
