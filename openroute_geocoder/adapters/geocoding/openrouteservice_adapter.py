"""openrouteservice geocoder adapter.

Implements GeocoderPort on top of the openrouteservice geocoding API,
a hosted Pelias instance. One call is one GET request; the JSON body is
mapped feature by feature into Address records.

The service reports errors inside the JSON envelope (`meta.status_code`
and `results.error`), so the envelope is checked before the transport
status.
"""

from __future__ import annotations

import ipaddress
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Mapping, Optional
from urllib.parse import urlencode

from ...config import GeocodingConfig, get_config
from ...domain.errors import (
    InvalidCredentials,
    ProviderFailure,
    QuotaExceeded,
    TransportFailure,
    UnsupportedOperation,
)
from ...domain.models import (
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
from ...ports.http import HttpClientPort, HttpResponse, is_success_status
from ..http.requests_client import redact_url

# Pelias layers mapped to admin levels, broadest first: (level, name key, code key)
ADMIN_LEVEL_LAYERS: tuple[tuple[int, str, Optional[str]], ...] = (
    (1, "region", "region_a"),
    (2, "county", "county_a"),
    (3, "locality", None),
    (4, "localadmin", None),
    (5, "borough", None),
)


def is_ip_address(text: str) -> bool:
    """Check if text is an IPv4 or IPv6 literal."""
    try:
        ipaddress.ip_address(text.strip())
    except ValueError:
        return False
    return True


def _text(properties: Mapping[str, Any], key: str) -> Optional[str]:
    """Return a property as stripped text, or None when missing or empty."""
    value = properties.get(key)
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass
class OpenRouteServiceGeocoder:
    """Geocoder adapter for the openrouteservice API.

    Attributes:
        api_key: openrouteservice API key
        http_client: Fetch capability used for the GET requests
        config: Geocoding configuration (base URL, default limit)
        decode: JSON decode capability; must raise ValueError on bad input
    """

    NAME: ClassVar[str] = "openrouteservice"

    api_key: str
    http_client: HttpClientPort
    config: GeocodingConfig = field(default_factory=lambda: get_config().geocoding)
    decode: Callable[[str], Any] = field(default=json.loads, repr=False)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if not self.api_key or not self.api_key.strip():
            raise InvalidCredentials("No API key provided.")

    @property
    def name(self) -> str:
        return self.NAME

    def geocode(
        self,
        text: str,
        limit: Optional[int] = None,
        locale: Optional[str] = None,
        country: Optional[str] = None,
    ) -> AddressCollection:
        """Geocode a free-text address.

        Shortcut for geocode_query() with a GeocodeQuery built from the
        arguments; limit defaults to the configured default_limit.
        """
        return self.geocode_query(
            GeocodeQuery(
                text=text,
                limit=limit if limit is not None else self.config.default_limit,
                locale=locale,
                country=country,
            )
        )

    def reverse_geocode(
        self,
        latitude: float,
        longitude: float,
        limit: Optional[int] = None,
        locale: Optional[str] = None,
    ) -> AddressCollection:
        """Reverse geocode a coordinate pair. Shortcut for reverse_query()."""
        return self.reverse_query(
            ReverseQuery.from_coordinates(
                latitude,
                longitude,
                limit=limit if limit is not None else self.config.default_limit,
                locale=locale,
            )
        )

    def geocode_query(self, query: GeocodeQuery) -> AddressCollection:
        """Resolve a free-text address to candidate addresses.

        Args:
            query: The forward geocoding request.

        Returns:
            Matching addresses in service order, possibly empty.

        Raises:
            UnsupportedOperation: If the text is an IP address.
            InvalidCredentials: If the API key is rejected.
            QuotaExceeded: If the rate limit is hit.
            ProviderFailure: For any other error reported by the service.
            TransportFailure: If no usable response was received.
        """
        if is_ip_address(query.text):
            raise UnsupportedOperation(
                f"The {self.name} provider does not support IP addresses, "
                "only street addresses."
            )

        params: dict[str, Any] = {
            "text": query.text,
            "api_key": self.api_key,
            "size": query.limit,
        }
        if query.locale:
            params["lang"] = query.locale
        if query.country:
            params["boundary.country"] = query.country

        self._logger.debug("Geocode request", extra={"query": query.text})
        return self._execute_query(self._build_url("search", params))

    def reverse_query(self, query: ReverseQuery) -> AddressCollection:
        """Resolve coordinates to nearby addresses.

        Args:
            query: The reverse geocoding request.

        Returns:
            Addresses near the coordinates, in service order.
        """
        params: dict[str, Any] = {
            "point.lat": query.coordinates.latitude,
            "point.lon": query.coordinates.longitude,
            "api_key": self.api_key,
            "size": query.limit,
        }
        if query.locale:
            params["lang"] = query.locale

        self._logger.debug(
            "Reverse geocode request",
            extra={
                "lat": query.coordinates.latitude,
                "lon": query.coordinates.longitude,
            },
        )
        return self._execute_query(self._build_url("reverse", params))

    def _build_url(self, endpoint: str, params: Mapping[str, Any]) -> str:
        return f"{self.config.base_url.rstrip('/')}/{endpoint}?{urlencode(params)}"

    def _execute_query(self, url: str) -> AddressCollection:
        response = self.http_client.fetch(url)
        payload = self._decode_body(response, url)
        self._raise_for_error(payload, response)
        addresses = self._map_features(payload)

        self._logger.debug(
            "Geocode success",
            extra={"url": redact_url(url), "results": len(addresses)},
        )
        return addresses

    def _decode_body(self, response: HttpResponse, url: str) -> Any:
        if not response.body or not response.body.strip():
            raise TransportFailure(
                f"The {self.name} service returned an empty body "
                f"(HTTP {response.status_code})",
                url=redact_url(url),
            )
        try:
            return self.decode(response.body)
        except ValueError as e:
            self._logger.warning(
                "Response body is not valid JSON",
                extra={"url": redact_url(url), "status_code": response.status_code},
            )
            raise TransportFailure(
                f"The {self.name} service returned a body that is not valid JSON",
                cause=e,
                url=redact_url(url),
            ) from e

    def _raise_for_error(self, payload: Any, response: HttpResponse) -> None:
        """Raise the domain error matching the envelope or transport status."""
        status: Optional[int] = None
        if isinstance(payload, dict) and isinstance(payload.get("meta"), dict):
            try:
                status = int(payload["meta"]["status_code"])
            except (KeyError, TypeError, ValueError):
                status = None

        if status is None:
            if response.is_success:
                return
            status = response.status_code
        elif is_success_status(status):
            return

        error_type, error_message = self._extract_error(payload)
        self._logger.warning(
            "Geocoding service reported an error",
            extra={
                "status_code": status,
                "error_type": error_type,
                "error": error_message,
            },
        )

        if status == 429:
            raise QuotaExceeded("Valid request but quota exceeded.")
        if status in (401, 403):
            raise InvalidCredentials("Invalid or missing api key.")
        raise ProviderFailure(
            error_message
            or error_type
            or f"The {self.name} service returned status {status}",
            status_code=status,
            error_type=error_type,
        )

    @staticmethod
    def _extract_error(payload: Any) -> tuple[Optional[str], Optional[str]]:
        """Return (type, message) from `results.error` or a top-level `error`."""
        if not isinstance(payload, dict):
            return None, None

        results = payload.get("results")
        error = results.get("error") if isinstance(results, dict) else None
        if error is None:
            error = payload.get("error")

        if isinstance(error, dict):
            message = error.get("message")
            error_type = error.get("type")
            return (
                str(error_type) if error_type is not None else None,
                str(message) if message is not None else None,
            )
        if isinstance(error, str):
            return None, error
        return None, None

    def _map_features(self, payload: Any) -> AddressCollection:
        features = payload.get("features") if isinstance(payload, dict) else None
        if not isinstance(features, list):
            return AddressCollection()

        addresses = []
        for feature in features:
            address = self._map_feature(feature)
            if address is not None:
                addresses.append(address)
        return AddressCollection(tuple(addresses))

    def _map_feature(self, feature: Any) -> Optional[Address]:
        if not isinstance(feature, dict):
            return None

        geometry = feature.get("geometry")
        position = geometry.get("coordinates") if isinstance(geometry, dict) else None
        try:
            if not isinstance(position, (list, tuple)) or len(position) < 2:
                raise ValueError("coordinates must be a [lon, lat] list")
            longitude, latitude = position[:2]
            coordinates = Coordinates(float(latitude), float(longitude))
        except (TypeError, ValueError):
            self._logger.debug(
                "Skipping feature without usable coordinates",
                extra={"geometry": geometry},
            )
            return None

        properties = feature.get("properties")
        if not isinstance(properties, dict):
            properties = {}

        country_name = _text(properties, "country")
        country_code = _text(properties, "country_a")
        country = None
        if country_name or country_code:
            country = Country(
                name=country_name,
                code=country_code.upper() if country_code else None,
            )

        return Address(
            coordinates=coordinates,
            provided_by=self.name,
            bounds=self._map_bounds(feature.get("bbox")),
            street_number=_text(properties, "housenumber"),
            street_name=_text(properties, "street"),
            sub_locality=_text(properties, "neighbourhood"),
            locality=_text(properties, "locality"),
            postal_code=_text(properties, "postalcode"),
            admin_levels=self._map_admin_levels(properties),
            country=country,
        )

    @staticmethod
    def _map_admin_levels(properties: Mapping[str, Any]) -> AdminLevelCollection:
        levels = []
        for level, name_key, code_key in ADMIN_LEVEL_LAYERS:
            name = _text(properties, name_key)
            if name is None:
                continue
            code = _text(properties, code_key) if code_key else None
            levels.append(AdminLevel(level=level, name=name, code=code))
        return AdminLevelCollection(tuple(levels))

    @staticmethod
    def _map_bounds(bbox: Any) -> Optional[Bounds]:
        # GeoJSON order: [west, south, east, north]
        if not isinstance(bbox, list) or len(bbox) != 4:
            return None
        try:
            west, south, east, north = (float(value) for value in bbox)
        except (TypeError, ValueError):
            return None
        return Bounds(south=south, west=west, north=north, east=east)
