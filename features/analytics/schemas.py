"""Pydantic schemas for analytics views."""

from __future__ import annotations

from datetime import date, datetime
from typing import List, Literal, Optional

from pydantic import Field

from core.pydantic_schemas import CamelModel
from features.sentiment.schemas import Sentiment

InsightKind = Literal["warning", "positive", "neutral"]
ColorBand = Literal["red", "orange", "yellow", "green"]


class MoodTrendPoint(CamelModel):
    date: str = Field(description="Display date, e.g. 'Oct 19'")
    day: str = Field(description="Short weekday, e.g. 'Mon'")
    user_mood: int
    ai_mood: Optional[float] = None


class EmotionCount(CamelModel):
    name: str
    value: int
    color: str


class WeeklySentiment(CamelModel):
    week_label: str
    week_start: date
    positive: int = 0
    negative: int = 0
    neutral: int = 0


class SummaryStatistics(CamelModel):
    average_mood: float = 0.0
    average_ai_mood: float = 0.0
    total_entries: int = 0
    positive_entries: int = 0
    mood_trend: float = 0.0
    streak_days: int = 0
    todays_mood: Optional[int] = None


class Insight(CamelModel):
    kind: InsightKind
    title: str
    description: str


class CalendarDay(CamelModel):
    day: int
    date: date
    mood: Optional[int] = None
    sentiment: Optional[Sentiment] = None
    emoji: Optional[str] = None
    color_band: Optional[ColorBand] = None


class MoodCalendar(CamelModel):
    year: int
    month: int
    month_name: str
    first_weekday: int = Field(description="Weekday of the 1st, Sunday = 0")
    days: List[CalendarDay] = Field(default_factory=list)


class DashboardSnapshot(CamelModel):
    generated_at: datetime
    summary: SummaryStatistics
    mood_trend: List[MoodTrendPoint] = Field(default_factory=list)
    emotions: List[EmotionCount] = Field(default_factory=list)
    weekly_sentiment: List[WeeklySentiment] = Field(default_factory=list)
    insights: List[Insight] = Field(default_factory=list)


__all__ = [
    "CalendarDay",
    "ColorBand",
    "DashboardSnapshot",
    "EmotionCount",
    "Insight",
    "InsightKind",
    "MoodCalendar",
    "MoodTrendPoint",
    "SummaryStatistics",
    "WeeklySentiment",
]
