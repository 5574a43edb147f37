"""Tests for loading the network from CSV files."""

import logging

import pytest

from metro_network.adapters.graph import CSVNetworkRepository
from metro_network.config import NetworkConfig
from metro_network.domain.errors import NetworkLoadError


def _repository(data_dir) -> CSVNetworkRepository:
    return CSVNetworkRepository(NetworkConfig(data_dir=data_dir))


def test_load_network(data_dir):
    network = _repository(data_dir).load()

    assert list(network) == ["A", "B", "C", "D", "E"]
    assert network.edge_count == 4
    station = network.get_station("C")
    assert station.line == "Red"
    assert station.zone == 3
    assert station.latitude == pytest.approx(28.62)
    assert ("E", 2.5) in network.neighbors("D")


def test_load_is_cached(data_dir):
    repository = _repository(data_dir)
    first = repository.load()

    assert repository.load() is first

    repository.clear_cache()
    assert repository.load() is not first


def test_get_and_list_stations(data_dir):
    repository = _repository(data_dir)

    assert repository.get_station("A").line == "Blue"
    assert repository.get_station("Nowhere") is None
    assert [s.name for s in repository.list_stations()] == ["A", "B", "C", "D", "E"]


def test_malformed_rows_are_skipped(tmp_path, caplog):
    (tmp_path / "stations.csv").write_text(
        "name,line,zone,lat,lon\n"
        "A,Blue,1,28.6,77.2\n"
        "\n"
        "# closed for works\n"
        "B,Blue,not-a-zone,28.6,77.2\n"
        "C,Blue,2,28.7,77.3\n"
        "A,Red,5,0,0\n",
        encoding="utf-8",
    )
    (tmp_path / "connections.csv").write_text(
        "from_station,to_station,distance_km\n"
        "A,C,abc\n"
        "A,C,2.0\n"
        "A,Ghost,1.0\n",
        encoding="utf-8",
    )

    with caplog.at_level(logging.WARNING):
        network = _repository(tmp_path).load()

    assert list(network) == ["A", "C"]
    assert network.get_station("A").line == "Blue"
    assert network.neighbors("A") == (("C", 2.0),)
    assert "Skipping malformed station row" in caplog.text
    assert "Skipping malformed connection row" in caplog.text
    assert "Connection references unknown station" in caplog.text


def test_missing_file_raises(tmp_path):
    with pytest.raises(NetworkLoadError) as excinfo:
        _repository(tmp_path).load()

    assert excinfo.value.file_path == str(tmp_path / "stations.csv")
    assert excinfo.value.cause is not None


def test_shipped_dataset_loads():
    network = CSVNetworkRepository(NetworkConfig()).load()

    assert network.station_count > 0
    assert network.edge_count > 0
    assert len(network.lines()) > 1


def test_invalid_encoding_raises(data_dir):
    (data_dir / "stations.csv").write_bytes(
        b"name,line,zone,lat,lon\nA\xff,Blue,1,28.6,77.2\n"
    )

    with pytest.raises(NetworkLoadError) as excinfo:
        _repository(data_dir).load()

    assert isinstance(excinfo.value.cause, UnicodeDecodeError)
