"""Parsers for converting raw benchmark output into structured results."""

from .base import BaseParser
from .dbench_parser import DbenchLineParser
from .duration import parse_duration, parse_implicit_milliseconds

__all__ = ["BaseParser", "DbenchLineParser", "parse_duration", "parse_implicit_milliseconds"]
