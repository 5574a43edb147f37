import pytest

from metro_network.graph.network import Network
from metro_network.services.search_engine import SearchEngine


@pytest.fixture
def city() -> Network:
    network = Network()
    network.add_station("Central Station", "Blue", 1, 28.63, 77.22)
    network.add_station("Northcentral", "Red", 2, 28.70, 77.10)
    network.add_station("Airport", "Orange", 4, 28.55, 77.08)
    network.add_station("Centre Park", "blue", 1, 28.64, 77.23)
    network.add_edge("Central Station", "Centre Park", 1.2)
    network.add_edge("Central Station", "Northcentral", 9.0)
    return network


def test_search_by_name_is_case_insensitive(city):
    search = SearchEngine(city)
    assert search.search_by_name("CENTRAL") == ["Central Station", "Northcentral"]
    assert search.search_by_name("xyz") == []


def test_search_by_line_ignores_case(city):
    assert SearchEngine(city).search_by_line("BLUE") == ["Central Station", "Centre Park"]


def test_search_by_zone(city):
    search = SearchEngine(city)
    assert search.search_by_zone(1) == ["Central Station", "Centre Park"]
    assert search.search_by_zone(9) == []


def test_autocomplete_matches_prefix_only(city):
    search = SearchEngine(city)
    assert search.autocomplete("cen") == ["Central Station", "Centre Park"]
    assert search.autocomplete("Centra") == ["Central Station"]


def test_search_sees_network_changes(city):
    search = SearchEngine(city)
    city.add_station("Central Market", "Yellow", 2)
    city.remove_station("Centre Park")

    assert search.autocomplete("Cen") == ["Central Market", "Central Station"]


def test_nearest_station(city):
    search = SearchEngine(city)
    assert search.nearest_station(28.551, 77.081) == "Airport"
    assert search.nearest_station(28.63, 77.22) == "Central Station"


def test_nearest_station_tie_goes_to_first_inserted():
    network = Network()
    network.add_station("East", "Blue", 1, 0.0, 1.0)
    network.add_station("West", "Blue", 1, 0.0, -1.0)

    assert SearchEngine(network).nearest_station(0.0, 0.0) == "East"


def test_nearest_station_on_empty_network():
    assert SearchEngine(Network()).nearest_station(28.6, 77.2) is None
