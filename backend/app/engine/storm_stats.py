"""
Storm statistics engine.

Derives the summary of a storm track:
  - Peak wind: highest max_wind on the track
  - Minimum pressure: lowest reported pressure (values <= 0 are unreported)
  - Landfalls: track points flagged with the landfall record identifier
  - Category: intensity class from the peak wind threshold ladder
  - Duration: whole days from first to last point, rounded up

All functions are pure. An absent storm, absent track, or empty track
yields the zero summary (category "N/A") instead of an error.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from app.config import (
    StormCategory,
    CATEGORY_THRESHOLDS,
    TOP_CATEGORY,
    CATEGORY_COLORS,
    LANDFALL_CODE,
    MS_PER_DAY,
)
from app.models.storm import Storm, TrackPoint
from app.models.storm_stats import StormStats

logger = logging.getLogger(__name__)

_ONE_MS = timedelta(milliseconds=1)


def peak_wind(track: list[TrackPoint]) -> int:
    """Highest max_wind across the track (kts). 0 for an empty track."""
    return max((p.max_wind for p in track), default=0)


def min_reported_pressure(track: list[TrackPoint]) -> int:
    """
    Lowest reported minimum pressure (mb).

    Points with min_pressure <= 0 did not report a pressure and are ignored.
    Returns 0 when no point reported one, so 0 reads as "unknown".
    """
    reported = [p.min_pressure for p in track if p.min_pressure > 0]
    return min(reported) if reported else 0


def extract_landfalls(track: list[TrackPoint]) -> list[TrackPoint]:
    """Landfall points in track order. Adjacent landfalls stay separate events."""
    return [p for p in track if p.record_identifier == LANDFALL_CODE]


def classify_category(wind: int) -> StormCategory:
    """
    Classify storm intensity from peak sustained wind (kts).

    Bands are half-open [lower, upper); the first band whose upper bound
    exceeds the wind wins. 137 kts and above is Category 5.
    """
    for upper, category in CATEGORY_THRESHOLDS:
        if wind < upper:
            return category
    return TOP_CATEGORY


def category_color(category: StormCategory) -> str:
    """Display color token for a category."""
    return CATEGORY_COLORS[category]


def parse_instant(value: str) -> datetime:
    """
    Parse an ISO-8601 timestamp into an aware UTC datetime.

    A trailing 'Z' is accepted. Timestamps without an offset are taken as UTC.
    Raises ValueError for unparseable input.
    """
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def duration_days(track: list[TrackPoint]) -> int:
    """
    Storm duration in whole days, rounded up.

    Measured between the first and last points only:
        days = ceil(|t_last - t_first| in ms / ms_per_day)

    A single-point track lasts 0 days.
    """
    if not track:
        return 0

    start = parse_instant(track[0].datetime)
    end = parse_instant(track[-1].datetime)
    elapsed_ms = abs(end - start) // _ONE_MS

    # Integer ceiling division
    return -(-elapsed_ms // MS_PER_DAY)


def compute_storm_stats(storm: Optional[Storm]) -> StormStats:
    """
    Compute summary statistics for a storm.

    Args:
        storm: Storm to summarize, or None.

    Returns:
        StormStats. The zero summary (all 0, no landfalls, category "N/A")
        when the storm or its track is missing or empty.

    Raises:
        ValueError: If a first/last point datetime cannot be parsed.
    """
    if storm is None or not storm.track:
        logger.debug("No track data; returning empty storm stats")
        return StormStats()

    track = storm.track
    wind = peak_wind(track)

    stats = StormStats(
        peak_wind=wind,
        min_pressure=min_reported_pressure(track),
        landfalls=extract_landfalls(track),
        category=classify_category(wind),
        duration_days=duration_days(track),
    )

    logger.debug(
        "Storm %s: peak=%d kts, min_pressure=%d mb, landfalls=%d, %s, %d days",
        storm.name or storm.id or "<unnamed>",
        stats.peak_wind,
        stats.min_pressure,
        len(stats.landfalls),
        stats.category.value,
        stats.duration_days,
    )
    return stats
