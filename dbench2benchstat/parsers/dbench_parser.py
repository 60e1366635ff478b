"""Parser for the result lines printed by dbench."""

from __future__ import annotations

import logging
import re

from ..exceptions import ParseError
from ..models import MAX_NUM_SAMPLES, BenchmarkResult
from .base import BaseParser
from .duration import parse_duration, parse_implicit_milliseconds

LOGGER = logging.getLogger(__name__)

# basic/increment -> avg 0.00927782162588819ms out of 2534 samples. (std dev 0.00161196365508829, min 0.008, max 0.082)
RESULT_LINE_PATTERN = re.compile(
    r"\s*(?P<name>\S+)\s+->\s+avg\s+(?P<average>\S+)"
    r"\s+out\s+of\s+(?P<samples>\S+)\s+samples\."
    r"\s+\(std\s+dev\s+(?P<std_dev>[^\s,]+),"
    r"\s+min\s+(?P<min>[^\s,]+),"
    r"\s+max\s+(?P<max>[^\s)]+)\)\s*"
)


class DbenchLineParser(BaseParser):
    """Parse a single dbench summary line into a :class:`BenchmarkResult`."""

    def parse(self, line: str) -> BenchmarkResult:
        match = RESULT_LINE_PATTERN.fullmatch(line)
        if match is None:
            raise ParseError(line, "line does not match the dbench result format")

        try:
            average_ns = parse_duration(match.group("average"))
        except ValueError as exc:
            raise ParseError(line, f"could not parse average duration: {exc}") from exc

        num_samples = self._parse_samples(line, match.group("samples"))

        durations = {}
        for field, label in (("std_dev", "std dev"), ("min", "min duration"), ("max", "max duration")):
            try:
                durations[field] = parse_implicit_milliseconds(match.group(field))
            except ValueError as exc:
                raise ParseError(line, f"could not parse {label}: {exc}") from exc

        result = BenchmarkResult(
            name=match.group("name"),
            average_ns=average_ns,
            num_samples=num_samples,
            std_dev_ns=durations["std_dev"],
            min_ns=durations["min"],
            max_ns=durations["max"],
        )
        LOGGER.debug("Parsed %s: %s", result.name, result)
        return result

    @staticmethod
    def _parse_samples(line: str, value: str) -> int:
        if not value.isascii() or not value.isdigit():
            raise ParseError(line, f"could not parse number of samples: {value!r}")
        samples = int(value)
        if samples > MAX_NUM_SAMPLES:
            raise ParseError(line, f"number of samples out of range: {value!r}")
        return samples
