"""Errors raised while converting dbench reports."""


class ConversionError(Exception):
    """Base class for conversion failures."""


class ParseError(ConversionError, ValueError):
    """A single input line does not match the dbench result grammar."""

    def __init__(self, line: str, reason: str) -> None:
        super().__init__(f"could not parse: {line!r}: {reason}")
        self.line = line
        self.reason = reason


class StreamError(ConversionError, OSError):
    """Reading the input or writing the output stream failed."""
