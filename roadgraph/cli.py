"""Command-line entry point.

Two tools are available:

``roadgraph roadmap EDGES NODES MAXPATHS OUTPUT``
    Exports the shortest paths from one node to every connected node
    of a whitespace-separated road network as KML.

``roadgraph streets CSV [CSV ...]``
    Loads street geometries and interactively routes between two
    street names, exporting each route as KML.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from .adapters.network import StreetCsvRepository, TextNetworkRepository
from .config import configure_logging, get_config
from .container import Container
from .domain.errors import (
    ConfigurationError,
    ExportError,
    NetworkLoadError,
    NoRouteFoundError,
    StreetNotFoundError,
)
from .domain.models import RouteResult
from .services import RoadmapService

logger = logging.getLogger(__name__)

Prompt = Callable[[str], str]


def _non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{text}'")
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or greater, got {value}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="roadgraph",
        description="Shortest paths over road networks, exported as KML.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    roadmap = subparsers.add_parser(
        "roadmap",
        help="export shortest paths from one node to all connected nodes",
    )
    roadmap.add_argument("edges", type=Path, help="path to the file with edges")
    roadmap.add_argument(
        "nodes", type=Path, help="path to the file with nodes' coordinates"
    )
    roadmap.add_argument(
        "maxpaths",
        type=_non_negative_int,
        help="the maximum number of paths to export",
    )
    roadmap.add_argument("output", type=Path, help="the path to the output file")
    roadmap.add_argument(
        "--source",
        type=int,
        default=None,
        help="source node id (defaults to the configured source node)",
    )
    roadmap.add_argument(
        "--map", type=Path, default=None, help="also write an HTML map"
    )

    streets = subparsers.add_parser(
        "streets", help="interactively route between two streets"
    )
    streets.add_argument(
        "files", type=Path, nargs="+", help="street network CSV file(s)"
    )
    streets.add_argument(
        "--output", type=Path, default=None, help="KML file written after each route"
    )
    streets.add_argument(
        "--map", type=Path, default=None, help="also write an HTML map"
    )

    return parser


def run_roadmap(container: Container, args: argparse.Namespace) -> int:
    config = container.config
    container.register(
        TextNetworkRepository,
        lambda: TextNetworkRepository(
            config.roadmap, edges_path=args.edges, nodes_path=args.nodes
        ),
    )
    service: RoadmapService = container.roadmap_service(TextNetworkRepository)

    source = args.source if args.source is not None else config.roadmap.source_node
    routes = service.all_routes(source, max_paths=args.maxpaths)
    service.export(routes, args.output, map_output_path=args.map)
    print(f"{len(routes)} route(s) written to {args.output}")
    return 0


def _ask_street(
    service: RoadmapService, title: str, prompt: Prompt
) -> Optional[str]:
    """Ask for a street name until a known one is entered.

    Returns None when input ends or an empty line is entered.
    """
    print(title)
    while True:
        try:
            name = prompt("").strip()
        except EOFError:
            return None
        if not name:
            return None
        if service.has_street(name):
            return name
        print("Not found. Try again, please")


def run_streets(
    container: Container,
    args: argparse.Namespace,
    prompt: Prompt = input,
) -> int:
    config = container.config
    container.register(
        StreetCsvRepository,
        lambda: StreetCsvRepository(
            config.streets, config.geodesy, paths=args.files
        ),
    )
    service: RoadmapService = container.roadmap_service(StreetCsvRepository)
    output = args.output or config.streets.output_path
    map_output = args.map
    if map_output is None and config.streets.map_file:
        map_output = config.streets.data_dir / config.streets.map_file

    # File errors surface before the first prompt
    service.repository.load()

    while True:
        from_street = _ask_street(service, "Enter start street", prompt)
        if from_street is None:
            return 0
        to_street = _ask_street(service, "Enter destination street", prompt)
        if to_street is None:
            return 0

        try:
            route = service.street_route(from_street, to_street)
        except (NoRouteFoundError, StreetNotFoundError):
            print("Route not found")
            routes: List[RouteResult] = []
        else:
            print(f"The route found. Length {route.total_weight:.6g} m")
            routes = [route]

        service.export(
            routes, output, map_output_path=map_output if routes else None
        )


def main(argv: Optional[Sequence[str]] = None, prompt: Prompt = input) -> int:
    """Run the command line and return the process exit code."""
    args = _build_parser().parse_args(argv)
    config = get_config()
    configure_logging(config.observability)
    container = Container.create_default(config)

    try:
        if args.command == "roadmap":
            return run_roadmap(container, args)
        return run_streets(container, args, prompt)
    except (ConfigurationError, NetworkLoadError, ExportError) as e:
        logger.error("Command failed", extra={"command": args.command})
        print(str(e), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
