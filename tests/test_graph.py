import math

from metro_network.adapters.fare import ZoneFareCalculator
from metro_network.domain.models import NO_PATH_DISTANCE, PathResult
from metro_network.graph.dijkstra import count_transfers, dijkstra, shortest_path
from metro_network.graph.engine import GraphEngine
from metro_network.graph.network import Network


def test_dijkstra_finds_direct_edge():
    network = Network()
    network.add_station("A", "Blue")
    network.add_station("B", "Blue")
    network.add_edge("A", "B", 10.0)

    path, distance = dijkstra(network, "A", "B")

    assert path == ["A", "B"]
    assert distance == 10.0


def test_dijkstra_chooses_shortest_path(triangle):
    # A can reach C directly, but A->B->C is shorter
    path, distance = dijkstra(triangle, "A", "C")

    assert path == ["A", "B", "C"]
    assert distance == 2.0


def test_dijkstra_no_path_returns_inf(disconnected):
    path, distance = dijkstra(disconnected, "A", "D")

    assert path == []
    assert math.isinf(distance)


def test_shortest_path_summarizes_route(triangle):
    result = shortest_path(triangle, "A", "C")

    assert result.is_found
    assert result.path == ("A", "B", "C")
    assert result.total_distance_km == 2.0
    assert result.lines == {"Blue", "Red"}
    assert result.transfer_count == 1
    assert result.max_zone == 3
    assert result.estimated_fare == 0


def test_shortest_path_prices_with_fare_policy(triangle):
    result = shortest_path(triangle, "A", "C", ZoneFareCalculator())
    # 5.0 base + 2 km * 0.8 + zone 3 * 3.0 = 15.6
    assert result.estimated_fare == 16


def test_disconnected_stations_yield_sentinel(disconnected):
    result = shortest_path(disconnected, "A", "D")

    assert not result.is_found
    assert result.path == ()
    assert result.total_distance_km < 0
    assert result == PathResult.no_path()


def test_unknown_station_yields_sentinel(triangle):
    result = shortest_path(triangle, "A", "Nowhere")
    assert not result.is_found
    assert result.total_distance_km == NO_PATH_DISTANCE


def test_same_station_path(triangle):
    result = shortest_path(triangle, "A", "A")

    assert result.is_found
    assert result.path == ("A",)
    assert result.total_distance_km == 0.0
    assert result.transfer_count == 0
    assert result.lines == {"Blue"}


def test_lightest_parallel_edge_wins(triangle):
    triangle.add_edge("A", "C", 0.5)
    result = shortest_path(triangle, "A", "C")

    assert result.path == ("A", "C")
    assert result.total_distance_km == 0.5


def test_transfers_count_every_line_change():
    network = Network()
    network.add_station("P", "Blue")
    network.add_station("Q", "Red")
    network.add_station("R", "Blue")
    network.add_edge("P", "Q", 1.0)
    network.add_edge("Q", "R", 1.0)

    assert count_transfers(network, ["P", "Q", "R"]) == 2
    assert shortest_path(network, "P", "R").transfer_count == 2


def test_engine_reflects_network_changes(triangle):
    engine = GraphEngine(triangle)
    assert engine.find_shortest_path("A", "C").total_distance_km == 2.0

    triangle.remove_station("B")

    assert engine.find_shortest_path("A", "C").total_distance_km == 5.0
