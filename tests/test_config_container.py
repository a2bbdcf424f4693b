"""Tests for configuration loading and the DI container."""

from pathlib import Path

import pytest

from bookingmx.adapters.graph import CSVGraphDataRepository, SampleGraphDataRepository
from bookingmx.adapters.reservations import HTTPReservationClient
from bookingmx.config import AppConfig, get_config, reset_config
from bookingmx.container import Container, get_container, reset_container
from bookingmx.domain.errors import ConfigurationError
from bookingmx.ports.graph import GraphDataRepositoryPort
from bookingmx.ports.reservations import ReservationStorePort
from bookingmx.services import ProximityService, ReservationService


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


def test_defaults():
    config = get_config()
    assert config.graph.source == "sample"
    assert config.graph.default_max_distance_km == 250.0
    assert config.graph.cities_path.name == "cities.csv"
    assert config.api.base_url == "http://localhost:8080/api/reservations"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("BOOKINGMX_GRAPH_SOURCE", "csv")
    monkeypatch.setenv("BOOKINGMX_GRAPH_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("BOOKINGMX_GRAPH_DEFAULT_MAX_DISTANCE_KM", "80")
    monkeypatch.setenv("BOOKINGMX_API_BASE_URL", "http://api.test/reservations")

    config = get_config()

    assert config.graph.source == "csv"
    assert config.graph.edges_path == Path(tmp_path) / "edges.csv"
    assert config.graph.default_max_distance_km == 80.0
    assert config.api.base_url == "http://api.test/reservations"


def test_get_config_is_cached():
    assert get_config() is get_config()


def test_default_container_wiring():
    container = Container.create_default(AppConfig())

    assert isinstance(container.resolve(GraphDataRepositoryPort), SampleGraphDataRepository)
    assert isinstance(container.resolve(ReservationStorePort), HTTPReservationClient)
    proximity = container.resolve(ProximityService)
    assert proximity is container.resolve(ProximityService)
    assert proximity.default_max_distance_km == 250.0
    assert isinstance(container.resolve(ReservationService).store, HTTPReservationClient)


def test_csv_source_wiring(monkeypatch):
    monkeypatch.setenv("BOOKINGMX_GRAPH_SOURCE", "csv")
    container = Container.create_default(AppConfig())
    assert isinstance(container.resolve(GraphDataRepositoryPort), CSVGraphDataRepository)
    assert container.resolve(ProximityService).is_available


def test_unknown_source_raises_configuration_error():
    config = AppConfig()
    config.graph.source = "xml"
    container = Container.create_default(config)

    with pytest.raises(ConfigurationError) as exc:
        container.resolve(GraphDataRepositoryPort)
    assert exc.value.setting_name == "graph.source"


def test_unregistered_type_raises_key_error():
    with pytest.raises(KeyError):
        Container(config=AppConfig()).resolve(ProximityService)


def test_non_singleton_registration():
    container = Container(config=AppConfig())
    container.register(list, list, singleton=False)
    assert container.resolve(list) is not container.resolve(list)
    assert container.is_registered(list)


def test_reregistering_replaces_cached_singleton():
    container = Container(config=AppConfig())
    container.register(dict, lambda: {"v": 1})
    assert container.resolve(dict) == {"v": 1}
    container.register(dict, lambda: {"v": 2})
    assert container.resolve(dict) == {"v": 2}


def test_get_container_is_shared():
    assert get_container() is get_container()
