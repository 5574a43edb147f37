"""End-to-end tests for the command-line interface."""

import pytest

from metro_network.cli import build_parser, main


def run(capsys, data_dir, *argv):
    code = main(["--data-dir", str(data_dir), "--log-level", "WARNING", *argv])
    out, err = capsys.readouterr()
    return code, out, err


def test_route(capsys, data_dir):
    code, out, _ = run(capsys, data_dir, "route", "A", "C")

    assert code == 0
    assert "ROUTE FOUND" in out
    assert "Distance: 2.0 km" in out
    assert "Estimated Fare: 16" in out


def test_route_with_fare_breakdown(capsys, data_dir):
    code, out, _ = run(capsys, data_dir, "route", "A", "C", "--fare-breakdown")
    assert code == 0
    assert "FARE BREAKDOWN" in out


def test_route_errors(capsys, data_dir):
    code, out, _ = run(capsys, data_dir, "route", "A", "Nowhere")
    assert code == 1
    assert "Station not found: Nowhere" in out

    code, out, _ = run(capsys, data_dir, "route", "A", "D")
    assert code == 1
    assert "No path found between A and D" in out


def test_traversals(capsys, data_dir):
    code, out, _ = run(capsys, data_dir, "bfs", "A")
    assert code == 0
    assert out.strip() == "BFS: A -> B -> C"

    code, out, _ = run(capsys, data_dir, "dfs", "Nowhere")
    assert code == 1
    assert "station not found" in out


def test_paths(capsys, data_dir):
    code, out, _ = run(capsys, data_dir, "paths", "A", "C", "--limit", "1")
    assert code == 0
    assert out.strip() == "1. A -> B -> C"

    code, _, _ = run(capsys, data_dir, "paths", "A", "D")
    assert code == 1


def test_structure_commands(capsys, data_dir):
    code, out, _ = run(capsys, data_dir, "cycle")
    assert code == 0
    assert "Cycle detected." in out

    _, out, _ = run(capsys, data_dir, "components")
    assert "2 connected component(s)" in out

    _, out, _ = run(capsys, data_dir, "mst")
    assert "A - B (1.0 km)" in out
    assert "disconnected" in out

    _, out, _ = run(capsys, data_dir, "stats")
    assert "Total Stations:      5" in out


def test_search_and_nearest(capsys, data_dir):
    code, out, _ = run(capsys, data_dir, "search", "--line", "green")
    assert code == 0
    assert " D " in out and " E " in out

    _, out, _ = run(capsys, data_dir, "stations", "--line", "Blue")
    assert " A " in out and " C " not in out

    code, out, _ = run(capsys, data_dir, "nearest", "28.905", "77.505")
    assert code == 0
    assert out.strip() in ("D", "E")


def test_missing_data_exits_with_error(capsys, tmp_path):
    code, _, err = run(capsys, tmp_path, "stats")
    assert code == 2
    assert err.startswith("Error: Failed to load stations")


def test_invalid_log_level(capsys, data_dir):
    code = main(["--data-dir", str(data_dir), "--log-level", "LOUD", "stats"])
    assert code == 2
    assert "Unknown log level" in capsys.readouterr().err


def test_search_requires_a_criterion():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["search"])


def test_route_map_defaults_to_configured_file(capsys, data_dir, monkeypatch):
    monkeypatch.setenv("METRO_OUTPUT_DIR", str(data_dir / "out"))

    code, out, _ = run(capsys, data_dir, "route", "A", "C", "--map")

    expected = data_dir / "out" / "route.html"
    assert code == 0
    assert expected.exists()
    assert f"Map saved to: {expected}" in out


def test_network_listing(capsys, data_dir):
    code, out, _ = run(capsys, data_dir, "network")

    assert code == 0
    assert "D (Green, zone 1)\n  -> E (2.5 km)" in out
    assert "5 station(s), 4 connection(s)" in out


def test_fare_breakdown_shows_category_and_round_trip(capsys, data_dir):
    _, out, _ = run(capsys, data_dir, "route", "A", "C", "--fare-breakdown")

    assert "Category:           Standard" in out
    assert "Round Trip:         27" in out


def test_stations_lists_every_station(capsys, data_dir):
    code, out, _ = run(capsys, data_dir, "stations")

    assert code == 0
    assert [row.split("|")[1].strip() for row in out.splitlines()[2:]] == [
        "A", "B", "C", "D", "E",
    ]


def test_paths_limit_zero(capsys, data_dir):
    code, out, _ = run(capsys, data_dir, "paths", "A", "C", "--limit", "0")
    assert code == 1
    assert "No paths found." in out


def test_undecodable_data_exits_with_error(capsys, data_dir):
    (data_dir / "connections.csv").write_bytes(b"from_station,to_station\nA\xff,B\n")

    code, _, err = run(capsys, data_dir, "stats")

    assert code == 2
    assert err.startswith("Error: Failed to load connections")
