"""
Storm stats configuration and constants.
"""

from enum import Enum


class StormCategory(str, Enum):
    NOT_AVAILABLE = "N/A"  # no track data
    DEPRESSION = "Depression"
    TROPICAL_STORM = "Tropical Storm"
    CATEGORY_1 = "Category 1"
    CATEGORY_2 = "Category 2"
    CATEGORY_3 = "Category 3"
    CATEGORY_4 = "Category 4"
    CATEGORY_5 = "Category 5"


# Intensity ladder, evaluated top to bottom. Each entry is the exclusive
# upper bound (knots) of its band; the last band is open-ended.
CATEGORY_THRESHOLDS: list[tuple[int, StormCategory]] = [
    (34, StormCategory.DEPRESSION),
    (64, StormCategory.TROPICAL_STORM),
    (83, StormCategory.CATEGORY_1),
    (96, StormCategory.CATEGORY_2),
    (113, StormCategory.CATEGORY_3),
    (137, StormCategory.CATEGORY_4),
]
TOP_CATEGORY = StormCategory.CATEGORY_5

# Display color token per category (blue → green → yellow → orange → red → purple)
CATEGORY_COLORS: dict[StormCategory, str] = {
    StormCategory.NOT_AVAILABLE: "text-slate-500",
    StormCategory.DEPRESSION: "text-blue-400",
    StormCategory.TROPICAL_STORM: "text-emerald-400",
    StormCategory.CATEGORY_1: "text-yellow-400",
    StormCategory.CATEGORY_2: "text-yellow-500",
    StormCategory.CATEGORY_3: "text-orange-400",
    StormCategory.CATEGORY_4: "text-red-400",
    StormCategory.CATEGORY_5: "text-purple-400",
}

# Record identifier marking a landfall track point
LANDFALL_CODE = "L"

MS_PER_DAY = 1000 * 60 * 60 * 24

# Header color used when the caller gives no identity color
DEFAULT_IDENTITY_COLOR = "#94a3b8"  # slate-400

# Summary card display policy
MAX_LANDFALL_LABELS = 3
MONTH_DAY_OFFSET = 5  # "YYYY-MM-DD"[5:] → "MM-DD"
NO_DATA_LABEL = "NO_DATA"
OPEN_WATER_LABEL = "Open Water"
MISSING_VALUE = "---"
MISSING_DURATION = "-"

CARD_COLORS = {
    "pressure": "text-rose-400",
    "impacts": "text-emerald-400",
    "duration": "text-blue-400",
    "inactive": "text-slate-700",
}

# Units shown next to each card value
CARD_UNITS = {
    "peak_intensity": "kts",
    "pressure": "mb",
    "impacts": "Events",
    "duration": "Days",
}
