"""Geocoding port - Abstraction over forward and reverse geocoding.

This protocol defines the contract for geocoding providers, allowing
different implementations to be swapped behind the same calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import AddressCollection, GeocodeQuery, ReverseQuery


class GeocoderPort(Protocol):
    """Port for geocoding providers.

    Implementation: adapters/geocoding/openrouteservice_adapter.py

    Both operations return an AddressCollection in provider order. Zero
    matches is an empty collection, not an error.
    """

    @property
    def name(self) -> str:
        """Short provider name, stamped on every returned address."""
        ...

    def geocode_query(self, query: GeocodeQuery) -> AddressCollection:
        """Resolve a free-text address to candidate addresses.

        Args:
            query: The forward geocoding request.

        Returns:
            Matching addresses, possibly empty.

        Raises:
            UnsupportedOperation: If the provider cannot serve the query.
            InvalidCredentials: If the API key is rejected.
            QuotaExceeded: If the rate limit is hit.
            ProviderFailure: For any other error reported by the service.
            TransportFailure: If no usable response was received.
        """
        ...

    def reverse_query(self, query: ReverseQuery) -> AddressCollection:
        """Resolve coordinates to nearby addresses.

        Args:
            query: The reverse geocoding request.

        Returns:
            Addresses near the coordinates, possibly empty.
        """
        ...
