"""Mood analytics derived from journal entries."""

from .schemas import DashboardSnapshot, MoodCalendar, SummaryStatistics
from .service import AnalyticsService

__all__ = ["AnalyticsService", "DashboardSnapshot", "MoodCalendar", "SummaryStatistics"]
