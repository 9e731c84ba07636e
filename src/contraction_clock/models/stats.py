"""Pydantic models for session statistics and the contraction log."""

from pydantic import BaseModel, ConfigDict, Field


class SessionStats(BaseModel):
    """Summary statistics over the recorded contractions."""

    model_config = ConfigDict(frozen=True)

    count: int = Field(default=0, ge=0, description="Recorded contractions")
    avg_duration_ms: float | None = Field(
        default=None, description="Mean duration (ms)"
    )
    last_interval_ms: int | None = Field(
        default=None, description="Start-to-start spacing of the last two (ms)"
    )
    last_duration_ms: int | None = Field(
        default=None, description="Duration of the most recent contraction (ms)"
    )


class LogEntry(BaseModel):
    """One row of the contraction log."""

    model_config = ConfigDict(frozen=True)

    number: int = Field(ge=1, description="1-based position in the session")
    start: int = Field(description="Start timestamp (Unix milliseconds)")
    duration_ms: int = Field(description="Duration (ms)")
    frequency_ms: int | None = Field(
        default=None, description="Spacing from the previous start (ms)"
    )
    intensity_level: int = Field(description="Intensity on the 1-10 scale")
    is_latest: bool = Field(default=False)
