"""
Pydantic models for derived storm statistics and summary cards.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.config import StormCategory
from app.models.storm import Storm, TrackPoint


class StormStats(BaseModel):
    """Summary statistics derived from a storm track."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    peak_wind: int = Field(0, description="Highest max_wind on the track (kts)")
    min_pressure: int = Field(
        0, description="Lowest reported pressure (mb). 0 means unknown"
    )
    landfalls: list[TrackPoint] = Field(
        default_factory=list,
        description="Landfall track points in chronological order",
    )
    category: StormCategory = StormCategory.NOT_AVAILABLE
    duration_days: int = Field(
        0, description="Whole days between first and last point, rounded up"
    )


class StormSummaryInput(BaseModel):
    """Input for the summary card feed."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    storm: Optional[Storm] = None
    identity_color: Optional[str] = Field(
        None,
        description="Header color for the storm. Defaults to neutral gray",
        examples=["#f43f5e"],
    )


class SummaryCard(BaseModel):
    """Display data for one summary card. No markup."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str
    value: str              # display value, or a placeholder
    unit: str
    value_color: str        # color token for the value
    header_color: str
    details: list[str] = Field(default_factory=list)


class StormSummaryOutput(BaseModel):
    """Stats plus everything the summary panel needs to draw itself."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    stats: StormStats
    category_color: str
    header_color: str
    cards: list[SummaryCard]
