"""Convert dbench benchmark reports into benchstat input lines."""

from .exceptions import ConversionError, ParseError, StreamError
from .formatters import BenchstatFormatter
from .models import BenchmarkResult
from .parsers import DbenchLineParser
from .processor import ProcessSummary, StreamProcessor

__version__ = "1.0.0"

__all__ = [
    "BenchmarkResult",
    "BenchstatFormatter",
    "ConversionError",
    "DbenchLineParser",
    "ParseError",
    "ProcessSummary",
    "StreamError",
    "StreamProcessor",
    "__version__",
]
