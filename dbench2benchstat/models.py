"""Pydantic models shared by the parser, formatter and HTTP surface."""

from pydantic import BaseModel, ConfigDict, Field

NS_PER_MS = 1_000_000
MAX_DURATION_NS = 2**63 - 1
MIN_DURATION_NS = -(2**63)
MAX_NUM_SAMPLES = 2**31 - 1


class BenchmarkResult(BaseModel):
    """Summary statistics of one benchmark, durations in nanoseconds."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    average_ns: int = Field(ge=MIN_DURATION_NS, le=MAX_DURATION_NS)
    num_samples: int = Field(ge=0, le=MAX_NUM_SAMPLES)
    std_dev_ns: int = Field(ge=MIN_DURATION_NS, le=MAX_DURATION_NS)
    min_ns: int = Field(ge=MIN_DURATION_NS, le=MAX_DURATION_NS)
    max_ns: int = Field(ge=MIN_DURATION_NS, le=MAX_DURATION_NS)


class ConvertRequest(BaseModel):
    """Schema for converting a whole dbench report."""

    report: str


class ConvertLineRequest(BaseModel):
    """Schema for converting a single dbench line."""

    line: str


class SkippedLine(BaseModel):
    line: str
    reason: str


class ConvertResponse(BaseModel):
    """Converted benchstat text plus the lines that were skipped."""

    output: str
    converted: int
    skipped: list[SkippedLine] = []


class ConvertLineResponse(BaseModel):
    result: BenchmarkResult
    output: str
