"""Pure analytics over the journal entry list.

Every function takes the full entry list, most recent first, and returns a
fresh result; nothing is cached between calls. Functions that depend on the
current date accept it as a parameter.
"""

from __future__ import annotations

import calendar
from collections import Counter
from datetime import UTC, date, datetime, timedelta
from statistics import fmean
from typing import Iterable, List, Optional, Sequence

from features.journal.schemas import JournalEntry
from features.sentiment.schemas import Sentiment

from .schemas import (
    CalendarDay,
    ColorBand,
    DashboardSnapshot,
    EmotionCount,
    Insight,
    MoodCalendar,
    MoodTrendPoint,
    SummaryStatistics,
    WeeklySentiment,
)

MOOD_TREND_WINDOW = 14
EMOTION_LIMIT = 8
WEEK_LIMIT = 8
TREND_WINDOW = 3
RECENT_WINDOW = 5
INSIGHT_LIMIT = 4

EMOTION_COLORS = (
    "#f97316",  # orange
    "#eab308",  # yellow
    "#22c55e",  # green
    "#3b82f6",  # blue
    "#8b5cf6",  # purple
    "#ec4899",  # pink
    "#06b6d4",  # cyan
    "#84cc16",  # lime
)

MOOD_EMOJIS = ("😢", "😟", "😕", "😐", "🙂", "😊", "😄", "😁", "🤩", "🥳")


def entry_day(entry: JournalEntry) -> date:
    return entry.date.date()


def display_date(day: date) -> str:
    return f"{day:%b} {day.day}"


def normalise_emotion(label: str) -> str:
    """Capitalized form used for counting: 'joy', 'JOY' and 'Joy' are one label."""

    return label.strip().capitalize()


def _normalised_emotions(entries: Iterable[JournalEntry]) -> List[str]:
    labels = []
    for entry in entries:
        for emotion in entry.emotions:
            label = normalise_emotion(emotion)
            if label:
                labels.append(label)
    return labels


def _average(values: Sequence[float]) -> float:
    return fmean(values) if values else 0.0


def _round_half_up(value: float) -> int:
    return int(value + 0.5)


# Chart series ------------------------------------------------------------


def mood_trend_series(entries: Sequence[JournalEntry], window: int = MOOD_TREND_WINDOW) -> List[MoodTrendPoint]:
    """Latest ``window`` entries as chart points, oldest to newest."""

    points = []
    for entry in reversed(entries[:window]):
        day = entry_day(entry)
        points.append(
            MoodTrendPoint(
                date=display_date(day),
                day=f"{day:%a}",
                user_mood=entry.mood,
                ai_mood=entry.mood_score,
            )
        )
    return points


def emotion_distribution(entries: Sequence[JournalEntry], limit: int = EMOTION_LIMIT) -> List[EmotionCount]:
    """Most frequent emotion labels; ties keep first-encountered order."""

    counts = Counter(_normalised_emotions(entries))
    # Counter preserves insertion order, which is first-encounter order
    ranked = [
        EmotionCount(name=name, value=count, color=EMOTION_COLORS[index % len(EMOTION_COLORS)])
        for index, (name, count) in enumerate(counts.items())
    ]
    ranked.sort(key=lambda item: item.value, reverse=True)
    return ranked[:limit]


def week_start(day: date) -> date:
    """Sunday that starts the week containing ``day``."""

    return day - timedelta(days=(day.weekday() + 1) % 7)


def weekly_sentiment_buckets(entries: Sequence[JournalEntry], weeks: int = WEEK_LIMIT) -> List[WeeklySentiment]:
    """Sentiment counts for the most recent ``weeks`` weeks that have entries, chronological."""

    buckets: dict[date, WeeklySentiment] = {}
    for entry in entries:
        start = week_start(entry_day(entry))
        bucket = buckets.get(start)
        if bucket is None:
            bucket = buckets[start] = WeeklySentiment(week_label=display_date(start), week_start=start)
        field = entry.sentiment.value
        setattr(bucket, field, getattr(bucket, field) + 1)

    ordered = [buckets[start] for start in sorted(buckets)]
    return ordered[-weeks:] if weeks > 0 else []


# Statistics --------------------------------------------------------------


def mood_trend_delta(entries: Sequence[JournalEntry], window: int = TREND_WINDOW) -> float:
    """Average mood of the latest ``window`` entries minus the ``window`` before them.

    Zero unless both windows hold at least one entry.
    """

    recent = [entry.mood for entry in entries[:window]]
    previous = [entry.mood for entry in entries[window : window * 2]]
    if not recent or not previous:
        return 0.0
    return _average(recent) - _average(previous)


def current_streak(entries: Sequence[JournalEntry], today: date) -> int:
    """Consecutive days with at least one entry, counting back from ``today``."""

    days = {entry_day(entry) for entry in entries}
    streak = 0
    cursor = today
    while cursor in days:
        streak += 1
        cursor -= timedelta(days=1)
    return streak


def todays_mood(entries: Sequence[JournalEntry], today: date) -> Optional[int]:
    for entry in entries:
        if entry_day(entry) == today:
            return entry.mood
    return None


def summary_statistics(entries: Sequence[JournalEntry], today: Optional[date] = None) -> SummaryStatistics:
    today = today or datetime.now(UTC).date()
    if not entries:
        return SummaryStatistics()

    ai_scores = [entry.mood_score for entry in entries if entry.mood_score is not None]
    return SummaryStatistics(
        average_mood=_average([entry.mood for entry in entries]),
        average_ai_mood=_average(ai_scores),
        total_entries=len(entries),
        positive_entries=sum(1 for entry in entries if entry.sentiment is Sentiment.POSITIVE),
        mood_trend=mood_trend_delta(entries),
        streak_days=current_streak(entries, today),
        todays_mood=todays_mood(entries, today),
    )


# Insights ----------------------------------------------------------------


def rule_based_insights(
    entries: Sequence[JournalEntry],
    now: Optional[datetime] = None,
    limit: int = INSIGHT_LIMIT,
) -> List[Insight]:
    """Evaluate the insight rules in order and keep the first ``limit`` produced."""

    if not entries:
        return []
    now = now or datetime.now(UTC)

    insights: List[Insight] = []
    recent = entries[:RECENT_WINDOW]
    recent_average = _average([entry.mood for entry in recent])

    if recent_average < 4:
        insights.append(
            Insight(
                kind="warning",
                title="Low Mood Pattern",
                description=(
                    "Your recent mood scores have been below 4/10. "
                    "Consider reaching out to someone or practicing self-care."
                ),
            )
        )
    elif recent_average > 7:
        insights.append(
            Insight(
                kind="positive",
                title="Great Mood Streak",
                description="You've been feeling great lately! Keep up the positive momentum.",
            )
        )

    recent_negative = sum(1 for entry in recent if entry.sentiment is Sentiment.NEGATIVE)
    if recent_negative >= 3:
        insights.append(
            Insight(
                kind="warning",
                title="Negative Sentiment Alert",
                description=(
                    "You've had several negative entries recently. "
                    "Consider talking to a mental health professional."
                ),
            )
        )

    positive_ratio = sum(1 for entry in entries if entry.sentiment is Sentiment.POSITIVE) / len(entries)
    if positive_ratio > 0.7:
        insights.append(
            Insight(
                kind="positive",
                title="Positive Outlook",
                description=(
                    f"{_round_half_up(positive_ratio * 100)}% of your entries show positive sentiment. "
                    "Great job maintaining a positive mindset!"
                ),
            )
        )

    oldest = min(entry.date for entry in entries)
    days_since_first = int((now - oldest).total_seconds() // 86400)
    if len(entries) / max(days_since_first, 1) > 0.8:
        insights.append(
            Insight(
                kind="positive",
                title="Consistent Journaling",
                description=(
                    "You're maintaining great journaling consistency. "
                    "This habit supports your mental wellness journey."
                ),
            )
        )

    unique_emotions = len(set(_normalised_emotions(entries)))
    if unique_emotions > 10:
        insights.append(
            Insight(
                kind="neutral",
                title="Emotional Awareness",
                description=(
                    f"You've expressed {unique_emotions} different emotions. "
                    "This shows good emotional awareness and vocabulary."
                ),
            )
        )

    return insights[:limit]


# Calendar ----------------------------------------------------------------


def mood_color_band(mood: int) -> ColorBand:
    if mood <= 3:
        return "red"
    if mood <= 5:
        return "orange"
    if mood <= 7:
        return "yellow"
    return "green"


def mood_emoji(mood: int) -> str:
    if 1 <= mood <= len(MOOD_EMOJIS):
        return MOOD_EMOJIS[mood - 1]
    return "😐"


def mood_calendar(entries: Sequence[JournalEntry], year: int, month: int) -> MoodCalendar:
    """Month grid for the heatmap; each day shows its latest entry."""

    first_weekday, days_in_month = calendar.monthrange(year, month)
    latest_by_day: dict[date, JournalEntry] = {}
    for entry in entries:
        latest_by_day.setdefault(entry_day(entry), entry)

    days = []
    for number in range(1, days_in_month + 1):
        current = date(year, month, number)
        entry = latest_by_day.get(current)
        if entry is None:
            days.append(CalendarDay(day=number, date=current))
            continue
        days.append(
            CalendarDay(
                day=number,
                date=current,
                mood=entry.mood,
                sentiment=entry.sentiment,
                emoji=mood_emoji(entry.mood),
                color_band=mood_color_band(entry.mood),
            )
        )

    return MoodCalendar(
        year=year,
        month=month,
        month_name=calendar.month_name[month],
        first_weekday=(first_weekday + 1) % 7,
        days=days,
    )


def build_dashboard(entries: Sequence[JournalEntry], now: Optional[datetime] = None) -> DashboardSnapshot:
    """Every dashboard view derived from one entry list."""

    now = now or datetime.now(UTC)
    return DashboardSnapshot(
        generated_at=now,
        summary=summary_statistics(entries, now.date()),
        mood_trend=mood_trend_series(entries),
        emotions=emotion_distribution(entries),
        weekly_sentiment=weekly_sentiment_buckets(entries),
        insights=rule_based_insights(entries, now),
    )


__all__ = [
    "EMOTION_COLORS",
    "MOOD_EMOJIS",
    "build_dashboard",
    "current_streak",
    "emotion_distribution",
    "mood_calendar",
    "mood_color_band",
    "mood_emoji",
    "mood_trend_delta",
    "mood_trend_series",
    "normalise_emotion",
    "rule_based_insights",
    "summary_statistics",
    "todays_mood",
    "week_start",
    "weekly_sentiment_buckets",
]
