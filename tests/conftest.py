"""Shared fixtures: a stub HTTP client and canned service responses."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import Any, Union

import pytest

from openroute_geocoder.config import GeocodingConfig, reset_config
from openroute_geocoder.ports.http import HttpResponse


@dataclass
class StubHttpClient:
    """HttpClientPort stub returning one canned response and recording URLs."""

    body: Union[str, dict[str, Any]] = "{}"
    status_code: int = 200
    urls: list[str] = field(default_factory=list)

    def fetch(self, url: str) -> HttpResponse:
        self.urls.append(url)
        body = self.body if isinstance(self.body, str) else json.dumps(self.body)
        return HttpResponse(status_code=self.status_code, body=body)


def feature(
    lon: float,
    lat: float,
    bbox: Union[list[float], None] = None,
    **properties: Any,
) -> dict[str, Any]:
    data: dict[str, Any] = {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": [lon, lat]},
        "properties": properties,
    }
    if bbox is not None:
        data["bbox"] = bbox
    return data


def feature_collection(*features: dict[str, Any]) -> dict[str, Any]:
    return {
        "geocoding": {"version": "0.2"},
        "type": "FeatureCollection",
        "features": list(features),
    }


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch):
    """Keep ORS_* variables from the developer's shell out of the tests."""
    for name in list(os.environ):
        if name.startswith("ORS_"):
            monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def geocoding_config() -> GeocodingConfig:
    return GeocodingConfig(base_url="https://ors.test/geocode")


@pytest.fixture
def frankfurt_response() -> dict[str, Any]:
    return feature_collection(
        feature(
            8.636781,
            50.189017,
            housenumber="10a",
            street="Kalbacher Hauptstraße",
            postalcode="60437",
            neighbourhood="Kalbach",
            locality="Frankfurt",
            localadmin="Frankfurt",
            borough="Kalbach-Riedberg",
            county="Frankfurt",
            region="Hesse",
            region_a="HE",
            country="Germany",
            country_a="DEU",
        ),
        feature(
            8.6365,
            50.1887,
            bbox=[8.63, 50.18, 8.64, 50.19],
            street="Kalbacher Hauptstraße",
            postalcode="60437",
            locality="Frankfurt",
            region="Hesse",
            region_a="HE",
            country="Germany",
            country_a="deu",
        ),
    )


@pytest.fixture
def hanover_response() -> dict[str, Any]:
    return feature_collection(
        feature(
            9.787455,
            52.379952,
            locality="Hanover",
            localadmin="Hanover",
            county="Region Hannover",
            region="Lower Saxony",
            region_a="NI",
            country="Germany",
            country_a="DEU",
        ),
        feature(
            -78.107687,
            18.393428,
            region="Hanover",
            country="Jamaica",
            country_a="JAM",
        ),
        feature(
            -76.72414,
            39.19289,
            locality="Hanover",
            county="Anne Arundel County",
            county_a="AA",
            region="Maryland",
            region_a="MD",
            country="United States",
            country_a="USA",
        ),
    )


@pytest.fixture
def stub_http():
    """Factory for StubHttpClient instances."""
    return StubHttpClient


@pytest.fixture
def make_feature():
    return feature


@pytest.fixture
def make_collection():
    return feature_collection
