"""Conversion endpoints for dbench reports."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from ....config import get_settings
from ....exceptions import ParseError, StreamError
from ....formatters import BenchstatFormatter
from ....models import (
    ConvertLineRequest,
    ConvertLineResponse,
    ConvertRequest,
    ConvertResponse,
    SkippedLine,
)
from ....parsers import DbenchLineParser
from ....processor import StreamProcessor

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/convert", tags=["convert"])


def _formatter() -> BenchstatFormatter:
    return BenchstatFormatter(name_prefix=get_settings().name_prefix)


@router.post("", response_model=ConvertResponse)
async def convert_report(request: ConvertRequest) -> ConvertResponse:
    """Convert every line of a dbench report, listing the lines that were skipped."""
    if not request.report.strip():
        raise HTTPException(status_code=400, detail="Report is empty.")

    processor = StreamProcessor(formatter=_formatter())
    try:
        output, summary = processor.process_text(request.report)
    except StreamError as exc:
        logger.exception("Report conversion failed")
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return ConvertResponse(
        output=output,
        converted=summary.converted,
        skipped=[SkippedLine(line=line, reason=reason) for line, reason in summary.skipped],
    )


@router.post("/line", response_model=ConvertLineResponse)
async def convert_line(request: ConvertLineRequest) -> ConvertLineResponse:
    try:
        result = DbenchLineParser().parse(request.line)
    except ParseError as exc:
        raise HTTPException(status_code=422, detail=exc.reason) from exc
    return ConvertLineResponse(result=result, output=_formatter().format(result))
