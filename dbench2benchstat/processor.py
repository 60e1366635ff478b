"""Line-by-line conversion of a dbench report stream."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from typing import IO, List, Optional, Tuple, Union

from .exceptions import ParseError, StreamError
from .formatters import BenchstatFormatter
from .parsers import BaseParser, DbenchLineParser

logger = logging.getLogger(__name__)

Stream = Union[IO[str], IO[bytes]]


@dataclass
class ProcessSummary:
    """Counters collected over one :meth:`StreamProcessor.process` run."""

    lines_read: int = 0
    converted: int = 0
    skipped: List[Tuple[str, str]] = field(default_factory=list)


def _strip_line_ending(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def _is_binary(stream: Stream) -> bool:
    return isinstance(stream, (io.RawIOBase, io.BufferedIOBase))


class StreamProcessor:
    """Read dbench lines from one stream and write benchstat lines to another.

    Lines that do not parse are logged and skipped. Failures of the streams
    themselves abort the run with :class:`StreamError`. Streams are never
    closed here.
    """

    def __init__(
        self,
        parser: Optional[BaseParser] = None,
        formatter: Optional[BenchstatFormatter] = None,
    ) -> None:
        self.parser = parser or DbenchLineParser()
        self.formatter = formatter or BenchstatFormatter()

    def process(self, input_stream: Stream, output_stream: Stream) -> ProcessSummary:
        summary = ProcessSummary()
        binary_output = _is_binary(output_stream)

        while True:
            raw = self._read_line(input_stream)
            if not raw:
                break
            summary.lines_read += 1
            line = _strip_line_ending(raw)

            try:
                result = self.parser.parse(line)
            except ParseError as exc:
                logger.warning("could not parse: %r: %s", line, exc.reason)
                summary.skipped.append((line, exc.reason))
                continue

            rendered = self.formatter.format(result) + "\n"
            try:
                binary_output = self._write_line(output_stream, rendered, binary_output)
            except (OSError, UnicodeEncodeError, TypeError) as exc:
                raise StreamError(f"could not output a line for: {line!r}: {exc}") from exc
            summary.converted += 1

        flush = getattr(output_stream, "flush", None)
        if flush is not None:
            try:
                flush()
            except OSError as exc:
                raise StreamError(f"could not flush output: {exc}") from exc

        logger.debug(
            "Processed %d lines: %d converted, %d skipped",
            summary.lines_read,
            summary.converted,
            len(summary.skipped),
        )
        return summary

    def process_text(self, report: str) -> Tuple[str, ProcessSummary]:
        """Convert an in-memory report, returning the output text and summary."""

        output = io.StringIO()
        summary = self.process(io.StringIO(report), output)
        return output.getvalue(), summary

    @staticmethod
    def _write_line(stream: Stream, text: str, binary: bool) -> bool:
        """Write ``text``, switching to UTF-8 bytes if the stream rejects ``str``.

        Returns whether the stream takes bytes.
        """
        if binary:
            stream.write(text.encode("utf-8"))
            return True
        try:
            stream.write(text)
        except TypeError:
            stream.write(text.encode("utf-8"))
            return True
        return False

    @staticmethod
    def _read_line(stream: Stream) -> str:
        try:
            raw = stream.readline()
            if isinstance(raw, bytes):
                raw = raw.decode("utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise StreamError(f"could not read input: {exc}") from exc
        return raw
