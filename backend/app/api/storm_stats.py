"""
API routes for storm statistics and the summary card feed.
"""

from typing import Optional

from fastapi import APIRouter, Body, HTTPException, Query

from app.models.storm import Storm
from app.models.storm_stats import StormStats, StormSummaryInput, StormSummaryOutput
from app.engine.storm_stats import compute_storm_stats, classify_category, category_color
from app.engine.summary_cards import build_storm_summary

router = APIRouter(prefix="/api/v1", tags=["storm-stats"])


@router.post("/storm-stats", response_model=StormStats)
async def storm_stats(storm: Optional[Storm] = Body(None)) -> StormStats:
    """
    Compute peak wind, minimum pressure, landfalls, category and duration
    for a storm track.

    A missing storm or an empty track returns the zero summary
    (category "N/A").
    """
    try:
        return compute_storm_stats(storm)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")


@router.post("/storm-summary", response_model=StormSummaryOutput)
async def storm_summary(data: StormSummaryInput) -> StormSummaryOutput:
    """
    Compute storm stats and the four summary cards
    (Peak Intensity, Pressure, Impacts, Duration).
    """
    try:
        return build_storm_summary(data)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")


@router.get("/storm-category")
async def storm_category(peak_wind: int = Query(..., ge=0)) -> dict:
    """
    Classify a peak sustained wind (kts).

    Returns:
        Category name and its display color token.
    """
    category = classify_category(peak_wind)
    return {
        "peakWind": peak_wind,
        "category": category.value,
        "color": category_color(category),
    }
