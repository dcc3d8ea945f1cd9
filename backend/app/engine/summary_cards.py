"""
Summary card feed for the storm summary panel.

Turns StormStats into four display-ready cards (Peak Intensity, Pressure,
Impacts, Duration). Only values and color tokens are produced here; layout
and markup belong to the client.
"""

from typing import Optional

from app.config import (
    DEFAULT_IDENTITY_COLOR,
    MAX_LANDFALL_LABELS,
    MONTH_DAY_OFFSET,
    NO_DATA_LABEL,
    OPEN_WATER_LABEL,
    MISSING_VALUE,
    MISSING_DURATION,
    CARD_COLORS,
    CARD_UNITS,
)
from app.engine.storm_stats import category_color, compute_storm_stats
from app.models.storm import Storm
from app.models.storm_stats import (
    StormStats,
    StormSummaryInput,
    StormSummaryOutput,
    SummaryCard,
)


def month_day_label(date: str) -> str:
    """Month-day part of a YYYY-MM-DD date string ("2020-08-03" → "08-03")."""
    return date[MONTH_DAY_OFFSET:]


def landfall_labels(stats: StormStats, limit: int = MAX_LANDFALL_LABELS) -> list[str]:
    """Month-day labels for the first `limit` landfalls, oldest first."""
    return [month_day_label(p.date) for p in stats.landfalls[:limit]]


def track_span_label(storm: Optional[Storm]) -> str:
    """First and last track dates as "MM-DD → MM-DD", or NO_DATA."""
    if storm is None or not storm.track:
        return NO_DATA_LABEL
    first = month_day_label(storm.track[0].date)
    last = month_day_label(storm.track[-1].date)
    return f"{first} → {last}"


def resolve_header_color(identity_color: Optional[str]) -> str:
    return identity_color or DEFAULT_IDENTITY_COLOR


def build_summary_cards(
    stats: StormStats,
    storm: Optional[Storm],
    identity_color: Optional[str] = None,
) -> list[SummaryCard]:
    """
    Build the four summary cards in display order.

    Zero wind and pressure show as "---", zero duration as "-"; the
    landfall count is always shown. Cards with no data use the inactive
    color token.
    """
    header = resolve_header_color(identity_color)
    inactive = CARD_COLORS["inactive"]

    has_wind = stats.peak_wind > 0
    peak_card = SummaryCard(
        title="Peak Intensity",
        value=str(stats.peak_wind) if has_wind else MISSING_VALUE,
        unit=CARD_UNITS["peak_intensity"],
        value_color=category_color(stats.category) if has_wind else inactive,
        header_color=header,
        details=[f"[{stats.category.value}]"],
    )

    has_pressure = stats.min_pressure > 0
    pressure_card = SummaryCard(
        title="Pressure",
        value=str(stats.min_pressure) if has_pressure else MISSING_VALUE,
        unit=CARD_UNITS["pressure"],
        value_color=CARD_COLORS["pressure"] if has_pressure else inactive,
        header_color=header,
    )

    labels = landfall_labels(stats)
    impacts_card = SummaryCard(
        title="Impacts",
        value=str(len(stats.landfalls)),
        unit=CARD_UNITS["impacts"],
        value_color=CARD_COLORS["impacts"] if stats.landfalls else inactive,
        header_color=header,
        details=labels or [OPEN_WATER_LABEL],
    )

    has_duration = stats.duration_days > 0
    duration_card = SummaryCard(
        title="Duration",
        value=str(stats.duration_days) if has_duration else MISSING_DURATION,
        unit=CARD_UNITS["duration"],
        value_color=CARD_COLORS["duration"] if has_duration else inactive,
        header_color=header,
        details=[track_span_label(storm)],
    )

    return [peak_card, pressure_card, impacts_card, duration_card]


def build_storm_summary(inp: StormSummaryInput) -> StormSummaryOutput:
    """Compute stats for the input storm and assemble the summary panel data."""
    stats = compute_storm_stats(inp.storm)
    return StormSummaryOutput(
        stats=stats,
        category_color=category_color(stats.category),
        header_color=resolve_header_color(inp.identity_color),
        cards=build_summary_cards(stats, inp.storm, inp.identity_color),
    )
