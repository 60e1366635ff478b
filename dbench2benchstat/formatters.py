"""Render parsed results as benchstat input lines."""

from .models import BenchmarkResult

DEFAULT_NAME_PREFIX = "Benchmark"


class BenchstatFormatter:
    """Format a :class:`BenchmarkResult` as ``Benchmark<name>\\t<n>\\t<ns> ns/op``.

    Only the average is emitted; std dev, min and max are dropped.
    """

    def __init__(self, name_prefix: str = DEFAULT_NAME_PREFIX) -> None:
        self.name_prefix = name_prefix

    def format(self, result: BenchmarkResult) -> str:
        return f"{self.name_prefix}{result.name}\t{result.num_samples}\t{result.average_ns} ns/op"
