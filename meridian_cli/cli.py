"""
Meridian CLI - Main entry point.

Runs the geodesic algorithms against coordinates given on the command line
or GeoJSON files, printing results as JSON on stdout.
"""

import argparse
import json
import math
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from meridian_geojson import (
    Feature,
    FeatureCollection,
    GeoJsonError,
    LineString,
    MultiLineString,
    MultiPolygon,
    Polygon,
    from_json,
)
from meridian_geojson import polyline
from meridian_geojson.logging import LogEvent, create_logger, set_global_level
from meridian_turf import (
    TurfConfig,
    TurfError,
    area,
    bbox,
    bearing,
    center,
    circle,
    distance,
    inside,
    length,
    midpoint,
)

logger = create_logger("cli")

LINEAR_TYPES = (LineString, MultiLineString, Polygon, MultiPolygon)


def load_geojson(path: str):
    """
    Read a GeoJSON file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        GeoJsonError: If the content is not valid GeoJSON
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"GeoJSON file not found: {path}")
    return from_json(file_path.read_text())


def load_config(path: Optional[str]) -> TurfConfig:
    if path is None:
        return TurfConfig()
    if not Path(path).exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    try:
        return TurfConfig.from_yaml(path)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e


def _rounded(value: Any, precision: int) -> Any:
    if isinstance(value, float):
        return round(value, precision)
    if isinstance(value, dict):
        return {k: _rounded(v, precision) for k, v in value.items()}
    if isinstance(value, list):
        return [_rounded(v, precision) for v in value]
    return value


def _geometries(value) -> List:
    if isinstance(value, FeatureCollection):
        return [f.geometry for f in value.features if f.geometry is not None]
    if isinstance(value, Feature):
        return [value.geometry] if value.geometry is not None else []
    return [value]


def _line_of(value) -> LineString:
    for geometry in _geometries(value):
        if isinstance(geometry, LineString):
            return geometry
    raise TurfError("Input must contain a LineString")


def run_command(args: argparse.Namespace, config: TurfConfig) -> Dict[str, Any]:
    """
    Execute one parsed subcommand.

    Returns:
        JSON-serializable result
    """
    units = args.units or config.default_unit

    if args.command == 'distance':
        return {
            'distance': distance((args.lon1, args.lat1), (args.lon2, args.lat2), units),
            'units': units,
        }

    if args.command == 'bearing':
        return {'bearing': bearing((args.lon1, args.lat1), (args.lon2, args.lat2))}

    if args.command == 'midpoint':
        return midpoint((args.lon1, args.lat1), (args.lon2, args.lat2)).to_dict()

    if args.command == 'bbox':
        box = bbox(load_geojson(args.file))
        if not all(math.isfinite(v) for v in box):
            raise TurfError("Input has no coordinates to bound")
        return {'bbox': box}

    if args.command == 'area':
        return {'area': area(load_geojson(args.file)), 'units': 'square meters'}

    if args.command == 'length':
        value = load_geojson(args.file)
        lines = [g for g in _geometries(value) if isinstance(g, LINEAR_TYPES)]
        if not lines:
            raise TurfError("Input must contain a line or polygon geometry")
        total = sum(length(g, units) for g in lines)
        return {'length': total, 'units': units}

    if args.command == 'center':
        value = load_geojson(args.file)
        if not isinstance(value, (Feature, FeatureCollection)):
            value = Feature(value)
        return center(value).to_dict()

    if args.command == 'circle':
        steps = args.steps if args.steps is not None else config.circle_steps
        return circle((args.lon, args.lat), args.radius, steps, units).to_dict()

    if args.command == 'inside':
        polygons = [
            g for g in _geometries(load_geojson(args.file))
            if isinstance(g, (Polygon, MultiPolygon))
        ]
        if not polygons:
            raise TurfError("Input must contain a Polygon or MultiPolygon")
        return {'inside': any(inside((args.lon, args.lat), p) for p in polygons)}

    if args.command == 'encode':
        precision = args.precision if args.precision is not None else config.polyline_precision
        return {'polyline': _line_of(load_geojson(args.file)).to_polyline(precision)}

    if args.command == 'decode':
        precision = args.precision if args.precision is not None else config.polyline_precision
        return LineString(tuple(polyline.decode(args.text, precision))).to_dict()

    raise ValueError(f"Unknown command: {args.command}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="meridian",
        description="Meridian CLI - Geodesic measurements on GeoJSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Great-circle distance in miles
  meridian --units miles distance -75.343 39.984 -75.534 39.123

  # Area of every polygon in a file (square meters)
  meridian area parcels.geojson

  # 32-sided circle polygon, radius 5km
  meridian circle 0 0 5 --steps 32

  # Point-in-polygon
  meridian inside -122.4 37.7 city.geojson

  # Polyline round trip (OSRM precision)
  meridian encode route.geojson --precision 6
  meridian decode '_p~iF~ps|U_ulLnnqC_mqNvxq`@'
"""
    )

    # Global arguments
    parser.add_argument(
        "--config",
        default=None,
        help="YAML config with default_unit, circle_steps, precisions, log_level"
    )
    parser.add_argument(
        "--units",
        default=None,
        help="Length unit (default: from config, else kilometers)"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override the configured log level (DEBUG, INFO, WARNING, ERROR)"
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    for name, help_text in (
        ('distance', 'Great-circle distance between two points'),
        ('bearing', 'Initial bearing from point 1 to point 2'),
        ('midpoint', 'Geodesic midpoint of two points'),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument('lon1', type=float)
        sub.add_argument('lat1', type=float)
        sub.add_argument('lon2', type=float)
        sub.add_argument('lat2', type=float)

    for name, help_text in (
        ('bbox', 'Bounding box of a GeoJSON file'),
        ('area', 'Area of a GeoJSON file in square meters'),
        ('length', 'Total length of the lines/rings in a GeoJSON file'),
        ('center', 'Center of the bounding box as a Point Feature'),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument('file', help='Path to GeoJSON file')

    circle_cmd = subparsers.add_parser('circle', help='Circle polygon around a center')
    circle_cmd.add_argument('lon', type=float)
    circle_cmd.add_argument('lat', type=float)
    circle_cmd.add_argument('radius', type=float)
    circle_cmd.add_argument('--steps', type=int, default=None, help='Number of vertices')

    inside_cmd = subparsers.add_parser('inside', help='Test a point against polygons in a file')
    inside_cmd.add_argument('lon', type=float)
    inside_cmd.add_argument('lat', type=float)
    inside_cmd.add_argument('file', help='Path to GeoJSON file')

    encode_cmd = subparsers.add_parser('encode', help='Encode a LineString file as a polyline')
    encode_cmd.add_argument('file', help='Path to GeoJSON file')
    encode_cmd.add_argument('--precision', type=int, default=None)

    decode_cmd = subparsers.add_parser('decode', help='Decode a polyline into a LineString')
    decode_cmd.add_argument('text', help='Encoded polyline')
    decode_cmd.add_argument('--precision', type=int, default=None)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        config = load_config(args.config)
        if args.log_level:
            config = TurfConfig(
                default_unit=config.default_unit,
                circle_steps=config.circle_steps,
                coordinate_precision=config.coordinate_precision,
                polyline_precision=config.polyline_precision,
                log_level=args.log_level,
            )
        set_global_level(config.logging_level)

        logger.info(
            event=LogEvent.CLI_COMMAND_STARTED,
            message=f"Running {args.command}",
            metadata={'units': args.units or config.default_unit},
        )
        result = run_command(args, config)
        print(json.dumps(_rounded(result, config.coordinate_precision), allow_nan=False))
        logger.info(
            event=LogEvent.CLI_COMMAND_COMPLETED,
            message=f"Completed {args.command}",
        )

    except (GeoJsonError, TurfError, ValueError, OSError) as e:
        logger.error(
            event=LogEvent.CLI_COMMAND_FAILED,
            message=f"{args.command} failed",
            exc_info=e,
        )
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
