"""Base classes and interfaces for parsers."""

from abc import ABC, abstractmethod

from ..models import BenchmarkResult


class BaseParser(ABC):
    """Abstract base class for benchmark line parsers."""

    @abstractmethod
    def parse(self, line: str) -> BenchmarkResult:
        """Parse one line of a report, raising ``ParseError`` on mismatch."""
        raise NotImplementedError
