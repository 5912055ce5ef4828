"""
Meridian CLI - Command-line interface for the geodesic algorithms.

Usage:
    meridian distance -75.343 39.984 -75.534 39.123
    meridian --units miles length route.geojson
    meridian area parcels.geojson
    meridian circle 0 0 10 --steps 64
    meridian inside -122.4 37.7 city.geojson
    meridian decode '_p~iF~ps|U_ulLnnqC_mqNvxq`@'
"""

from .cli import build_parser, main, run_command

__version__ = "0.1.0"

__all__ = ['build_parser', 'main', 'run_command']
