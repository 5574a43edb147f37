"""Command-line interface for the metro network.

Each invocation loads the network, answers one query and prints the
result, e.g.::

    metro-network route "Rajiv Chowk" "Hauz Khas"
    metro-network search --line blue
    metro-network mst
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from .adapters.fare import ZoneFareCalculator
from .config import AppConfig, NetworkConfig, ObservabilityConfig, get_config
from .container import Container
from .domain.errors import MetroNetworkError
from .io import formatting
from .monitoring import configure_logging
from .services import MetroService

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="metro-network",
        description="Route planning and analysis over a metro network.",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        help="Directory holding stations.csv and connections.csv",
    )
    parser.add_argument("--log-level", help="Logging level (default: from config)")

    sub = parser.add_subparsers(dest="command", required=True)

    route = sub.add_parser("route", help="Shortest route between two stations")
    route.add_argument("source")
    route.add_argument("destination")
    route.add_argument(
        "--map",
        nargs="?",
        const="",
        metavar="PATH",
        help="Write an HTML map of the route (default file from config)",
    )
    route.add_argument(
        "--fare-breakdown", action="store_true", help="Show how the fare is computed"
    )

    for name, help_text in (
        ("bfs", "Breadth-first visit order"),
        ("dfs", "Depth-first visit order"),
    ):
        traversal = sub.add_parser(name, help=help_text)
        traversal.add_argument("start")

    paths = sub.add_parser("paths", help="Every simple path between two stations")
    paths.add_argument("source")
    paths.add_argument("destination")
    paths.add_argument("--limit", type=int, help="Stop after this many paths")

    sub.add_parser("cycle", help="Check whether the network contains a cycle")
    sub.add_parser("components", help="List connected components")
    sub.add_parser("mst", help="Minimum spanning tree (Prim)")
    sub.add_parser("stats", help="Network statistics")
    sub.add_parser("network", help="Every station with its connections")

    stations = sub.add_parser("stations", help="List stations")
    stations.add_argument("--line", help="Only stations on this line")

    search = sub.add_parser("search", help="Search stations")
    criteria = search.add_mutually_exclusive_group(required=True)
    criteria.add_argument("--name", help="Name contains (case-insensitive)")
    criteria.add_argument("--line", help="Line label (case-insensitive)")
    criteria.add_argument("--zone", type=int, help="Zone number")
    criteria.add_argument("--prefix", help="Name starts with (case-insensitive)")

    nearest = sub.add_parser("nearest", help="Nearest station to coordinates")
    nearest.add_argument("latitude", type=float)
    nearest.add_argument("longitude", type=float)

    return parser


def _load_config(args: argparse.Namespace) -> AppConfig:
    config = get_config()
    updates = {}
    if args.data_dir is not None:
        updates["network"] = NetworkConfig(data_dir=args.data_dir)
    if args.log_level:
        updates["observability"] = ObservabilityConfig(level=args.log_level)
    return config.model_copy(update=updates) if updates else config


def _map_path(value: str, config: AppConfig) -> Path:
    if value:
        return Path(value)
    return config.output_dir / config.rendering.output_file


def run_command(service: MetroService, args: argparse.Namespace) -> int:
    """Execute one parsed command against the service and print the result."""
    network = service.network
    engine = service.engine

    if args.command == "route":
        route, error = service.plan_route_safe(
            args.source,
            args.destination,
            generate_map=args.map is not None,
            map_output_path=args.map,
        )
        if route is None:
            print(error)
            return 1
        print(service.format_result(route, args.map))
        if args.fare_breakdown and isinstance(service.fare_policy, ZoneFareCalculator):
            fares = service.fare_policy
            breakdown = fares.fare_breakdown(route.total_distance_km, route.max_zone)
            print(
                formatting.format_fare_breakdown(
                    breakdown,
                    category=fares.fare_category(breakdown.total_fare),
                    round_trip=fares.round_trip_fare(
                        route.total_distance_km, route.max_zone
                    ),
                )
            )
        return 0

    if args.command in ("bfs", "dfs"):
        order = engine.bfs(args.start) if args.command == "bfs" else engine.dfs(args.start)
        print(formatting.format_traversal(args.command.upper(), order))
        return 0 if order else 1

    if args.command == "paths":
        found = engine.find_all_paths(args.source, args.destination, args.limit)
        print(formatting.format_paths(found))
        return 0 if found else 1

    if args.command == "cycle":
        print("Cycle detected." if engine.has_cycle() else "No cycle.")
        return 0

    if args.command == "components":
        print(formatting.format_components(engine.connected_components()))
        return 0

    if args.command == "mst":
        print(formatting.format_spanning_tree(engine.minimum_spanning_tree()))
        return 0

    if args.command == "stats":
        print(formatting.format_network_stats(network.statistics()))
        return 0

    if args.command == "network":
        print(formatting.format_network(network))
        return 0

    if args.command == "stations":
        if args.line:
            names = network.stations_by_line(args.line)
        else:
            names = sorted(s.name for s in service.repository.list_stations())
        print(formatting.format_station_table(names, network))
        return 0

    if args.command == "search":
        search = service.search
        if args.name is not None:
            names = search.search_by_name(args.name)
        elif args.line is not None:
            names = search.search_by_line(args.line)
        elif args.zone is not None:
            names = search.search_by_zone(args.zone)
        else:
            names = search.autocomplete(args.prefix)
        print(formatting.format_station_table(names, network))
        return 0

    if args.command == "nearest":
        name = service.search.nearest_station(args.latitude, args.longitude)
        if name is None:
            print("No stations loaded.")
            return 1
        print(name)
        return 0

    raise ValueError(f"Unknown command: {args.command!r}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = _load_config(args)
        configure_logging(config.observability)
        if getattr(args, "map", None) is not None:
            args.map = _map_path(args.map, config)
        service: MetroService = Container.create_default(config).resolve(MetroService)
        return run_command(service, args)
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2
    except MetroNetworkError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
