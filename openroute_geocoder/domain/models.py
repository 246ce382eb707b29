"""Immutable domain models for the openrouteservice geocoder.

All models are frozen dataclasses with slots. They have no external
dependencies and describe queries going out and addresses coming back.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, Optional

from .errors import CollectionIsEmpty, InvalidArgument, OutOfBounds

MAX_ADMIN_LEVEL = 5
DEFAULT_RESULT_LIMIT = 5


@dataclass(frozen=True, slots=True)
class Coordinates:
    """GPS coordinates in decimal degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if not math.isfinite(self.latitude) or not -90 <= self.latitude <= 90:
            raise ValueError(
                f"Latitude must be between -90 and 90, got {self.latitude}"
            )
        if not math.isfinite(self.longitude) or not -180 <= self.longitude <= 180:
            raise ValueError(
                f"Longitude must be between -180 and 180, got {self.longitude}"
            )


@dataclass(frozen=True, slots=True)
class Bounds:
    """Bounding box of a result."""

    south: float
    west: float
    north: float
    east: float


@dataclass(frozen=True, slots=True)
class AdminLevel:
    """One rung of an administrative hierarchy.

    Attributes:
        level: Specificity of the rung, 1 (broadest) to 5
        name: Name of the administrative area
        code: Optional short code (e.g. 'HE' for Hesse)
    """

    level: int
    name: str
    code: Optional[str] = None


@dataclass(frozen=True, slots=True)
class AdminLevelCollection:
    """Administrative levels of an address, keyed by level number.

    Levels need not be contiguous: a record may carry only levels 1 and 3.
    Entries are always iterated in ascending level order.
    """

    levels: tuple[AdminLevel, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        seen: set[int] = set()
        for admin_level in self.levels:
            if not 1 <= admin_level.level <= MAX_ADMIN_LEVEL:
                raise InvalidArgument(
                    f"Administrative level should be an integer in [1,{MAX_ADMIN_LEVEL}], "
                    f"{admin_level.level} given"
                )
            if admin_level.level in seen:
                raise InvalidArgument(
                    f"Administrative level {admin_level.level} is defined twice"
                )
            seen.add(admin_level.level)
        object.__setattr__(
            self, "levels", tuple(sorted(self.levels, key=lambda a: a.level))
        )

    def __len__(self) -> int:
        return len(self.levels)

    def __iter__(self) -> Iterator[AdminLevel]:
        return iter(self.levels)

    def has(self, level: int) -> bool:
        """Check if the given level is populated."""
        return any(admin_level.level == level for admin_level in self.levels)

    def get(self, level: int) -> AdminLevel:
        """Return the entry for a level number.

        Raises:
            InvalidArgument: If the level is out of range or not populated.
        """
        if not 1 <= level <= MAX_ADMIN_LEVEL:
            raise InvalidArgument(
                f"Administrative level should be an integer in [1,{MAX_ADMIN_LEVEL}], "
                f"{level} given"
            )
        for admin_level in self.levels:
            if admin_level.level == level:
                return admin_level
        raise InvalidArgument(f"Administrative level {level} is not set for this address")

    def first(self) -> AdminLevel:
        """Return the broadest populated level."""
        if not self.levels:
            raise CollectionIsEmpty("The administrative level collection is empty")
        return self.levels[0]

    def all(self) -> dict[int, AdminLevel]:
        """Return the levels as a level-number mapping."""
        return {admin_level.level: admin_level for admin_level in self.levels}


@dataclass(frozen=True, slots=True)
class Country:
    """Country of an address.

    Attributes:
        name: Country name as reported by the service
        code: ISO 3166-1 alpha-3 code, upper case
    """

    name: Optional[str] = None
    code: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Address:
    """A normalized address returned by a geocoder.

    Optional text fields are None when the service did not report them,
    never an empty string.

    Attributes:
        coordinates: Position of the result
        provided_by: Name of the provider that produced the result
        bounds: Bounding box, if reported
        street_number: House number, kept as text ('10a')
        street_name: Street name
        sub_locality: Neighbourhood
        locality: City, town or village
        postal_code: Postal code, kept as text to preserve leading zeros
        admin_levels: Administrative hierarchy keyed by level
        country: Country name and alpha-3 code
    """

    coordinates: Coordinates
    provided_by: str
    bounds: Optional[Bounds] = None
    street_number: Optional[str] = None
    street_name: Optional[str] = None
    sub_locality: Optional[str] = None
    locality: Optional[str] = None
    postal_code: Optional[str] = None
    admin_levels: AdminLevelCollection = field(default_factory=AdminLevelCollection)
    country: Optional[Country] = None


@dataclass(frozen=True, slots=True)
class AddressCollection:
    """Ordered result of a geocoding call.

    Order is the order of the service response. An empty collection is
    a valid result meaning "no match".
    """

    addresses: tuple[Address, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.addresses)

    def __iter__(self) -> Iterator[Address]:
        return iter(self.addresses)

    @property
    def is_empty(self) -> bool:
        """Check if no address was found."""
        return len(self.addresses) == 0

    def first(self) -> Address:
        """Return the first (best) address."""
        if not self.addresses:
            raise CollectionIsEmpty("The address collection is empty")
        return self.addresses[0]

    def get(self, index: int) -> Address:
        """Return the address at a position in the response."""
        if not self.addresses:
            raise CollectionIsEmpty("The address collection is empty")
        if not 0 <= index < len(self.addresses):
            raise OutOfBounds(f"No address at index {index}", index=index)
        return self.addresses[index]

    def has(self, index: int) -> bool:
        return 0 <= index < len(self.addresses)

    def slice(self, offset: int, length: Optional[int] = None) -> AddressCollection:
        end = None if length is None else offset + length
        return AddressCollection(self.addresses[offset:end])

    def all(self) -> list[Address]:
        return list(self.addresses)


@dataclass(frozen=True, slots=True)
class GeocodeQuery:
    """Forward geocoding request.

    Attributes:
        text: Free-text address
        limit: Maximum number of results wanted
        locale: Preferred language of the results (e.g. 'de')
        country: Restrict results to a country (ISO alpha-2 or alpha-3)
    """

    text: str
    limit: int = DEFAULT_RESULT_LIMIT
    locale: Optional[str] = None
    country: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.text or not self.text.strip():
            raise ValueError("Geocode query text must not be empty")
        if self.limit < 1:
            raise InvalidArgument(f"Limit must be at least 1, got {self.limit}")


@dataclass(frozen=True, slots=True)
class ReverseQuery:
    """Reverse geocoding request.

    Attributes:
        coordinates: Position to look up
        limit: Maximum number of results wanted
        locale: Preferred language of the results
    """

    coordinates: Coordinates
    limit: int = DEFAULT_RESULT_LIMIT
    locale: Optional[str] = None

    def __post_init__(self) -> None:
        if self.limit < 1:
            raise InvalidArgument(f"Limit must be at least 1, got {self.limit}")

    @classmethod
    def from_coordinates(
        cls,
        latitude: float,
        longitude: float,
        limit: int = DEFAULT_RESULT_LIMIT,
        locale: Optional[str] = None,
    ) -> ReverseQuery:
        return cls(Coordinates(latitude, longitude), limit=limit, locale=locale)
