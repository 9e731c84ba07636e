"""Pydantic models for recorded and in-progress contractions."""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ContractionEvent(BaseModel):
    """
    A completed, recorded contraction.

    Serialises to the persisted record shape ``{id, start, end, duration,
    intensity}``. Instances are immutable once created.

    Attributes:
        id: Event identifier (the start timestamp)
        start: Start timestamp (Unix milliseconds)
        end: End timestamp (Unix milliseconds)
        duration: ``end - start`` in milliseconds
        intensity: Normalized intensity (0-1)
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(description="Event identifier")
    start: int = Field(description="Start timestamp (Unix milliseconds)")
    end: int = Field(description="End timestamp (Unix milliseconds)")
    duration: int = Field(ge=0, description="Duration (milliseconds)")
    intensity: float = Field(ge=0, le=1, description="Normalized intensity (0-1)")

    @model_validator(mode="after")
    def _check_duration(self) -> "ContractionEvent":
        if self.end - self.start != self.duration:
            raise ValueError(
                f"duration {self.duration} does not match end - start "
                f"({self.end - self.start})"
            )
        return self

    @classmethod
    def from_span(cls, start: int, end: int, intensity: float) -> "ContractionEvent":
        """Build an event from its start/end timestamps."""
        return cls(
            id=start, start=start, end=end, duration=end - start, intensity=intensity
        )

    @property
    def intensity_level(self) -> int:
        """Intensity on the 1-10 input scale."""
        return round(self.intensity * 10)


class InProgressEvent(BaseModel):
    """A started but not yet ended contraction."""

    model_config = ConfigDict(frozen=True)

    started_at: int = Field(description="Start timestamp (Unix milliseconds)")

    def elapsed_ms(self, now: int) -> int:
        """Milliseconds elapsed at ``now``."""
        return now - self.started_at
