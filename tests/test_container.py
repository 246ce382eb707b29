"""Tests for the dependency injection container."""

import pytest

from openroute_geocoder.adapters.geocoding import OpenRouteServiceGeocoder
from openroute_geocoder.adapters.http import RequestsHttpClient
from openroute_geocoder.config import AppConfig, GeocodingConfig
from openroute_geocoder.container import (
    Container,
    create_geocoder,
    get_container,
    reset_container,
)
from openroute_geocoder.domain.errors import InvalidCredentials
from openroute_geocoder.ports.geocoding import GeocoderPort
from openroute_geocoder.ports.http import HttpClientPort


@pytest.fixture
def app_config():
    return AppConfig(geocoding=GeocodingConfig(api_key="from-config"))


def test_register_and_resolve_singleton():
    container = Container(config=AppConfig())
    container.register(HttpClientPort, object)

    first = container.resolve(HttpClientPort)

    assert container.is_registered(HttpClientPort)
    assert container.resolve(HttpClientPort) is first
    container.clear_singletons()
    assert container.resolve(HttpClientPort) is not first


def test_register_transient():
    container = Container(config=AppConfig())
    container.register(HttpClientPort, object, singleton=False)
    assert container.resolve(HttpClientPort) is not container.resolve(HttpClientPort)


def test_resolve_unregistered_raises():
    container = Container(config=AppConfig())
    with pytest.raises(KeyError):
        container.resolve(GeocoderPort)


def test_default_bindings(app_config):
    container = Container.create_default(app_config)

    geocoder = container.resolve(GeocoderPort)

    assert isinstance(geocoder, OpenRouteServiceGeocoder)
    assert isinstance(geocoder.http_client, RequestsHttpClient)
    assert geocoder.http_client is container.resolve(HttpClientPort)
    assert geocoder.api_key == "from-config"


def test_default_bindings_with_stub_client(app_config, stub_http):
    stub = stub_http(body="{}")
    container = Container.create_default(app_config)
    container.register(HttpClientPort, lambda: stub)

    addresses = container.resolve(GeocoderPort).geocode("foobar")

    assert len(addresses) == 0
    assert len(stub.urls) == 1


def test_create_geocoder_explicit_key_wins(app_config):
    geocoder = create_geocoder(api_key="explicit", config=app_config)
    assert geocoder.api_key == "explicit"


def test_create_geocoder_without_key_fails():
    with pytest.raises(InvalidCredentials, match="No API key provided."):
        create_geocoder(config=AppConfig())


def test_default_container_lifecycle(monkeypatch):
    monkeypatch.setenv("ORS_GEO_API_KEY", "env-key")
    reset_container()
    try:
        container = get_container()
        assert get_container() is container
        assert container.resolve(GeocoderPort).api_key == "env-key"
    finally:
        reset_container()
