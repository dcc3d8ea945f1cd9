"""
Top-level API router that aggregates all sub-routers.
"""

from fastapi import APIRouter

from app.api.storm_stats import router as storm_stats_router

router = APIRouter()
router.include_router(storm_stats_router)
