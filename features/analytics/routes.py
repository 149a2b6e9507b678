"""FastAPI routes for analytics feature."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from core.pydantic_schemas import ok as api_ok
from features.analytics.dependencies import get_analytics_service
from features.analytics.service import AnalyticsService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/analytics", tags=["analytics"])


@router.get("/dashboard")
async def get_dashboard(service: AnalyticsService = Depends(get_analytics_service)) -> dict:
    """All dashboard views in one payload."""
    return api_ok("Dashboard retrieved", data=service.snapshot().to_wire())


@router.get("/summary")
async def get_summary(service: AnalyticsService = Depends(get_analytics_service)) -> dict:
    return api_ok("Summary statistics retrieved", data=service.snapshot().summary.to_wire())


@router.get("/mood-trend")
async def get_mood_trend(service: AnalyticsService = Depends(get_analytics_service)) -> dict:
    points = service.snapshot().mood_trend
    return api_ok(
        "Mood trend retrieved",
        data=[point.to_wire() for point in points],
        meta={"count": len(points)},
    )


@router.get("/emotions")
async def get_emotions(service: AnalyticsService = Depends(get_analytics_service)) -> dict:
    emotions = service.snapshot().emotions
    return api_ok(
        "Emotion distribution retrieved",
        data=[item.to_wire() for item in emotions],
        meta={"count": len(emotions)},
    )


@router.get("/sentiment-weekly")
async def get_weekly_sentiment(service: AnalyticsService = Depends(get_analytics_service)) -> dict:
    weeks = service.snapshot().weekly_sentiment
    return api_ok(
        "Weekly sentiment retrieved",
        data=[week.to_wire() for week in weeks],
        meta={"count": len(weeks)},
    )


@router.get("/insights")
async def get_insights(service: AnalyticsService = Depends(get_analytics_service)) -> dict:
    insights = service.snapshot().insights
    return api_ok(
        "Wellness insights retrieved",
        data=[insight.to_wire() for insight in insights],
        meta={"count": len(insights)},
    )


@router.get("/calendar")
async def get_calendar(
    year: Optional[int] = Query(None, ge=1970, le=9999),
    month: Optional[int] = Query(None, ge=1, le=12),
    service: AnalyticsService = Depends(get_analytics_service),
) -> dict:
    """Mood calendar for a month; defaults to the current one."""
    today = service.today()
    calendar = service.calendar(year or today.year, month or today.month)
    return api_ok("Mood calendar retrieved", data=calendar.to_wire())


__all__ = ["router"]
