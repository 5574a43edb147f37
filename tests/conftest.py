"""Shared fixtures: small hand-built networks and CSV data directories."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from metro_network.config import reset_config
from metro_network.container import reset_container
from metro_network.graph.network import Network

STATIONS_CSV = """\
# name,line,zone,lat,lon
name,line,zone,lat,lon
A,Blue,1,28.60,77.20
B,Blue,2,28.61,77.21
C,Red,3,28.62,77.22
D,Green,1,28.90,77.50
E,Green,2,28.91,77.51
"""

CONNECTIONS_CSV = """\
from_station,to_station,distance_km
A,B,1.0
B,C,1.0
A,C,5.0
D,E,2.5
"""


@pytest.fixture(autouse=True)
def _fresh_state():
    """Isolate configuration, container and root logger between tests."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def triangle() -> Network:
    """A-B 1km, B-C 1km, A-C 5km; C sits on another line."""
    network = Network()
    network.add_station("A", "Blue", 1, 28.60, 77.20)
    network.add_station("B", "Blue", 2, 28.61, 77.21)
    network.add_station("C", "Red", 3, 28.62, 77.22)
    network.add_edge("A", "B", 1.0)
    network.add_edge("B", "C", 1.0)
    network.add_edge("A", "C", 5.0)
    return network


@pytest.fixture
def diamond() -> Network:
    network = Network()
    for name in "ABCD":
        network.add_station(name, "Blue")
    network.add_edge("A", "B", 1.0)
    network.add_edge("A", "C", 1.0)
    network.add_edge("B", "D", 1.0)
    network.add_edge("C", "D", 1.0)
    return network


@pytest.fixture
def star() -> Network:
    network = Network()
    network.add_station("Hub", "Yellow")
    for name in ("X", "Y", "Z"):
        network.add_station(name, "Yellow")
        network.add_edge("Hub", name, 2.0)
    return network


@pytest.fixture
def disconnected() -> Network:
    """Two components: A-B and C-D."""
    network = Network()
    for name in "ABCD":
        network.add_station(name, "Blue")
    network.add_edge("A", "B", 1.0)
    network.add_edge("C", "D", 1.0)
    return network


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Directory with stations.csv / connections.csv for two components."""
    (tmp_path / "stations.csv").write_text(STATIONS_CSV, encoding="utf-8")
    (tmp_path / "connections.csv").write_text(CONNECTIONS_CSV, encoding="utf-8")
    return tmp_path
