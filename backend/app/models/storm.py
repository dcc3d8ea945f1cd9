"""
Pydantic models for storm track input.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TrackPoint(BaseModel):
    """A single observation along a storm's path."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    datetime: str = Field(
        ...,
        description="ISO-8601 timestamp of the observation",
        examples=["2020-08-01T00:00:00Z"],
    )
    date: str = Field(
        ...,
        description="Display date, starting with YYYY-MM-DD",
        examples=["2020-08-01"],
    )
    max_wind: int = Field(..., ge=0, description="Maximum sustained wind (kts)")
    min_pressure: int = Field(
        default=0,
        description="Minimum central pressure (mb). 0 or less means not reported",
    )
    record_identifier: Optional[str] = Field(
        default=None,
        max_length=1,
        description="Single-character record code. 'L' marks a landfall",
    )


class Storm(BaseModel):
    """An identified system and its chronologically ordered track."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: Optional[str] = None
    name: Optional[str] = None
    track: Optional[list[TrackPoint]] = Field(
        default=None,
        description="Track points, oldest first. May be absent or empty",
    )
