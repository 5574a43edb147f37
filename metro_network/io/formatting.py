"""Plain-text rendering of graph results.

These helpers turn the data returned by the graph engine and the search
layer into human-readable reports. Nothing in the core depends on them.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..domain.models import FareBreakdown, NetworkStats, PathResult, SpanningTree
from ..graph.network import Network

WIDTH = 50


def _header(title: str) -> List[str]:
    return ["=" * WIDTH, title, "=" * WIDTH]


def format_route(result: PathResult, network: Network) -> str:
    """Route report: summary, lines used and a stop-by-stop listing."""
    if not result.is_found:
        return "No route found."

    lines = _header("ROUTE FOUND")
    lines.append(f"Distance: {result.total_distance_km:.1f} km")
    lines.append(f"Estimated Fare: {result.estimated_fare}")
    lines.append(f"Transfer Points: {result.transfer_count}")
    lines.append(f"Lines Used: {', '.join(sorted(result.lines))}")
    lines.append("-" * WIDTH)

    current_line = None
    for i, name in enumerate(result.path):
        station = network.get_station(name)
        station_line = station.line if station else "?"
        if i == 0:
            lines.append(f"  START: {name} ({station_line})")
        elif station_line != current_line:
            lines.append(f"  TRANSFER to {station_line}")
            lines.append(f"  -> {name}")
        else:
            lines.append(f"  -> {name}")
        current_line = station_line
    lines.append("  END")
    lines.append("=" * WIDTH)
    return "\n".join(lines)


def format_network(network: Network) -> str:
    """Every station with its line, followed by its connections."""
    if len(network) == 0:
        return "Network is empty."

    lines = _header("METRO NETWORK")
    for name, station in network.stations.items():
        lines.append(f"{name} ({station.line}, zone {station.zone})")
        neighbors = network.neighbors(name)
        if not neighbors:
            lines.append("  (no connections)")
        for neighbor, distance in neighbors:
            lines.append(f"  -> {neighbor} ({distance:.1f} km)")
    lines.append("-" * WIDTH)
    lines.append(
        f"{network.station_count} station(s), {len(network.edges())} connection(s)"
    )
    return "\n".join(lines)


def format_station_table(names: Sequence[str], network: Network) -> str:
    if not names:
        return "No stations found."

    lines = [f"{'No':>3} | {'Station':<35} | {'Line':<15} | {'Zone':>4}"]
    lines.append("-" * 66)
    for i, name in enumerate(names, start=1):
        station = network.get_station(name)
        if station is None:
            continue
        lines.append(f"{i:>3} | {name:<35} | {station.line:<15} | {station.zone:>4}")
    return "\n".join(lines)


def format_traversal(title: str, order: Sequence[str]) -> str:
    if not order:
        return f"{title}: station not found."
    return f"{title}: " + " -> ".join(order)


def format_paths(paths: Sequence[Sequence[str]]) -> str:
    if not paths:
        return "No paths found."
    return "\n".join(
        f"{i:>3}. " + " -> ".join(path) for i, path in enumerate(paths, start=1)
    )


def format_components(components: Sequence[Sequence[str]]) -> str:
    lines = [f"{len(components)} connected component(s)"]
    for i, component in enumerate(components, start=1):
        lines.append(f"  [{i}] " + ", ".join(component))
    return "\n".join(lines)


def format_spanning_tree(tree: SpanningTree) -> str:
    lines = _header("MINIMUM SPANNING TREE")
    for edge in tree:
        lines.append(f"  {edge.from_station} - {edge.to_station} ({edge.weight:.1f} km)")
    lines.append(f"Total weight: {tree.total_weight:.1f} km")
    if not tree.is_spanning:
        lines.append("Warning: network is disconnected, tree covers one component only.")
    return "\n".join(lines)


def format_network_stats(stats: NetworkStats) -> str:
    lines = _header("NETWORK STATISTICS")
    lines.append(f"Total Stations:      {stats.station_count}")
    lines.append(f"Total Connections:   {stats.edge_count}")
    lines.append(f"Metro Lines:         {len(stats.lines)}")
    for i, line in enumerate(stats.lines, start=1):
        lines.append(f"  {i}. {line}")
    lines.append(f"Network Density:     {stats.density:.3f}")
    return "\n".join(lines)


def format_fare_breakdown(
    breakdown: FareBreakdown,
    category: Optional[str] = None,
    round_trip: Optional[int] = None,
) -> str:
    lines = _header("FARE BREAKDOWN")
    lines.append(f"Base Fare:          {breakdown.base_fare:.2f}")
    lines.append(
        f"Distance Charge:    {breakdown.distance_charge:.2f} "
        f"({breakdown.distance_km:.1f} km)"
    )
    lines.append(
        f"Zone Surcharge:     {breakdown.zone_charge:.2f} "
        f"(zone {breakdown.max_zone})"
    )
    lines.append("-" * WIDTH)
    lines.append(f"Total Fare:         {breakdown.total_fare}")
    if category is not None:
        lines.append(f"Category:           {category}")
    if round_trip is not None:
        lines.append(f"Round Trip:         {round_trip}")
    return "\n".join(lines)
