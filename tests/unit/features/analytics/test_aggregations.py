from datetime import UTC, date, datetime, timedelta
from typing import Optional, Sequence

import pytest

from features.analytics.aggregations import (
    EMOTION_COLORS,
    build_dashboard,
    current_streak,
    emotion_distribution,
    mood_calendar,
    mood_color_band,
    mood_trend_delta,
    mood_trend_series,
    rule_based_insights,
    summary_statistics,
    week_start,
    weekly_sentiment_buckets,
)
from features.journal.schemas import EntryAnalysis, JournalEntry
from features.sentiment.schemas import Sentiment

# Monday
NOW = datetime(2026, 10, 19, 12, 0, tzinfo=UTC)
TODAY = NOW.date()


def make_entry(
    index: int,
    when: datetime,
    mood: int = 5,
    sentiment: Sentiment = Sentiment.NEUTRAL,
    emotions: Sequence[str] = ("calm",),
    mood_score: Optional[float] = None,
) -> JournalEntry:
    analysis = None
    if mood_score is not None:
        analysis = EntryAnalysis(mood_score=mood_score, confidence=0.8)
    return JournalEntry(
        id=index,
        date=when,
        mood=mood,
        content=f"entry {index}",
        sentiment=sentiment,
        emotions=list(emotions),
        analysis=analysis,
    )


def daily_entries(moods: Sequence[int], **kwargs) -> list[JournalEntry]:
    """One entry per day going back from NOW; ``moods[0]`` is today."""

    return [make_entry(i, NOW - timedelta(days=i), mood=mood, **kwargs) for i, mood in enumerate(moods)]


# Chart series ------------------------------------------------------------


def test_mood_trend_series_keeps_latest_fourteen_in_chronological_order():
    entries = daily_entries([(i % 10) + 1 for i in range(20)])
    entries[0] = make_entry(0, NOW, mood=9, mood_score=8.5)

    points = mood_trend_series(entries)

    assert len(points) == 14
    assert points[-1].user_mood == 9
    assert points[-1].ai_mood == 8.5
    assert points[-1].date == "Oct 19"
    assert points[-1].day == "Mon"
    assert points[0].date == "Oct 6"
    assert points[0].ai_mood is None


def test_emotion_distribution_merges_case_and_ranks_by_count():
    entries = [
        make_entry(1, NOW, emotions=["joy", "Calm"]),
        make_entry(2, NOW, emotions=["JOY", " calm ", "tired"]),
        make_entry(3, NOW, emotions=["Joy", ""]),
    ]

    result = emotion_distribution(entries)

    assert [(item.name, item.value) for item in result] == [("Joy", 3), ("Calm", 2), ("Tired", 1)]
    # colors follow first-encounter order, not rank
    assert [item.color for item in result] == list(EMOTION_COLORS[:3])


def test_emotion_distribution_caps_at_eight_and_keeps_ties_in_encounter_order():
    entries = [make_entry(1, NOW, emotions=[f"e{i}" for i in range(12)])]

    result = emotion_distribution(entries)

    assert len(result) == 8
    assert [item.name for item in result] == [f"E{i}" for i in range(8)]


def test_week_start_is_sunday():
    assert week_start(date(2026, 10, 17)) == date(2026, 10, 11)  # Saturday
    assert week_start(date(2026, 10, 18)) == date(2026, 10, 18)  # Sunday
    assert week_start(date(2026, 10, 19)) == date(2026, 10, 18)  # Monday


def test_weekly_buckets_count_sentiments_per_week():
    entries = [
        make_entry(1, NOW, sentiment=Sentiment.POSITIVE),
        make_entry(2, NOW - timedelta(days=1), sentiment=Sentiment.NEGATIVE),
        make_entry(3, NOW - timedelta(days=2), sentiment=Sentiment.POSITIVE),
        make_entry(4, NOW - timedelta(days=3), sentiment=Sentiment.NEUTRAL),
    ]

    buckets = weekly_sentiment_buckets(entries)

    assert [bucket.week_label for bucket in buckets] == ["Oct 11", "Oct 18"]
    assert (buckets[0].positive, buckets[0].negative, buckets[0].neutral) == (1, 0, 1)
    assert (buckets[1].positive, buckets[1].negative, buckets[1].neutral) == (1, 1, 0)


def test_weekly_buckets_keep_last_eight_weeks():
    entries = [make_entry(i, NOW - timedelta(weeks=i)) for i in range(10)]

    buckets = weekly_sentiment_buckets(entries)

    assert len(buckets) == 8
    starts = [bucket.week_start for bucket in buckets]
    assert starts == sorted(starts)
    assert starts[-1] == date(2026, 10, 18)
    assert sum(bucket.neutral for bucket in buckets) == 8


def test_weekly_buckets_skip_weeks_without_entries():
    entries = [
        make_entry(1, NOW, sentiment=Sentiment.POSITIVE),
        make_entry(2, NOW - timedelta(weeks=3), sentiment=Sentiment.NEGATIVE),
    ]

    buckets = weekly_sentiment_buckets(entries)

    assert [bucket.week_start for bucket in buckets] == [date(2026, 9, 27), date(2026, 10, 18)]
    assert all(bucket.positive + bucket.negative + bucket.neutral > 0 for bucket in buckets)
    assert (buckets[0].negative, buckets[1].positive) == (1, 1)


# Statistics --------------------------------------------------------------


def test_summary_of_no_entries_is_zeroed():
    summary = summary_statistics([], TODAY)

    assert summary.total_entries == 0
    assert summary.average_mood == 0
    assert summary.average_ai_mood == 0
    assert summary.streak_days == 0
    assert summary.todays_mood is None


def test_summary_statistics():
    entries = [
        make_entry(1, NOW, mood=8, sentiment=Sentiment.POSITIVE, mood_score=9),
        make_entry(2, NOW - timedelta(days=1), mood=6, mood_score=5),
        make_entry(3, NOW - timedelta(days=3), mood=4, sentiment=Sentiment.NEGATIVE),
    ]

    summary = summary_statistics(entries, TODAY)

    assert summary.total_entries == 3
    assert summary.average_mood == pytest.approx(6.0)
    assert summary.average_ai_mood == pytest.approx(7.0)
    assert summary.positive_entries == 1
    assert summary.streak_days == 2
    assert summary.todays_mood == 8
    # fewer than four entries leaves the previous window empty
    assert summary.mood_trend == 0


def test_mood_trend_compares_latest_three_with_previous_three():
    entries = daily_entries([8, 8, 8, 4, 4, 4, 1])

    assert mood_trend_delta(entries) == pytest.approx(4.0)
    assert mood_trend_delta(daily_entries([5, 7, 9, 3])) == pytest.approx(4.0)


def test_streak_is_zero_without_an_entry_today():
    entries = [make_entry(1, NOW - timedelta(days=1)), make_entry(2, NOW - timedelta(days=2))]

    assert current_streak(entries, TODAY) == 0
    assert current_streak(entries, TODAY - timedelta(days=1)) == 2


def test_streak_counts_days_not_entries():
    entries = [make_entry(i, NOW - timedelta(hours=i)) for i in range(5)]

    assert current_streak(entries, TODAY) == 1


def test_streak_stops_at_first_gap():
    entries = [
        make_entry(1, NOW),
        make_entry(2, NOW - timedelta(days=1)),
        make_entry(3, NOW - timedelta(days=3)),
    ]

    assert current_streak(entries, TODAY) == 2


# Insights ----------------------------------------------------------------


def test_no_entries_means_no_insights():
    assert rule_based_insights([], NOW) == []


def test_low_mood_and_negative_alert():
    entries = daily_entries([2, 2, 3, 2, 3], sentiment=Sentiment.NEGATIVE)

    titles = [insight.title for insight in rule_based_insights(entries, NOW)]

    # five entries over four days also counts as consistent journaling
    assert titles == ["Low Mood Pattern", "Negative Sentiment Alert", "Consistent Journaling"]


def test_great_mood_and_positive_outlook():
    entries = [
        make_entry(i, NOW - timedelta(days=5 * i), mood=9, sentiment=Sentiment.POSITIVE) for i in range(5)
    ]

    insights = rule_based_insights(entries, NOW)

    assert [insight.title for insight in insights] == ["Great Mood Streak", "Positive Outlook"]
    assert insights[0].kind == "positive"
    assert insights[1].description.startswith("100% of your entries show positive sentiment.")


def test_middling_mood_produces_no_mood_insight():
    entries = [make_entry(i, NOW - timedelta(days=10 * i), mood=5) for i in range(3)]

    assert rule_based_insights(entries, NOW) == []


def test_emotional_awareness_counts_distinct_labels():
    entries = [
        make_entry(i, NOW - timedelta(days=30 * i), emotions=[f"feeling{i}", f"FEELING{i}"]) for i in range(11)
    ]

    insights = rule_based_insights(entries, NOW)

    assert [insight.title for insight in insights] == ["Emotional Awareness"]
    assert insights[0].kind == "neutral"
    assert "11 different emotions" in insights[0].description


def test_insights_are_capped_at_four_in_rule_order():
    recent = [
        make_entry(i, NOW - timedelta(hours=i), mood=2, sentiment=Sentiment.NEGATIVE, emotions=[f"e{i}"])
        for i in range(5)
    ]
    older = [
        make_entry(i, NOW - timedelta(hours=i), mood=2, sentiment=Sentiment.POSITIVE, emotions=[f"e{i}"])
        for i in range(5, 25)
    ]

    insights = rule_based_insights(recent + older, NOW)

    assert [insight.title for insight in insights] == [
        "Low Mood Pattern",
        "Negative Sentiment Alert",
        "Positive Outlook",
        "Consistent Journaling",
    ]
    assert insights[2].description.startswith("80% of your entries")


# Calendar ----------------------------------------------------------------


@pytest.mark.parametrize(
    ("mood", "band"),
    [(1, "red"), (3, "red"), (4, "orange"), (5, "orange"), (6, "yellow"), (7, "yellow"), (8, "green"), (10, "green")],
)
def test_mood_color_band(mood, band):
    assert mood_color_band(mood) == band


def test_mood_calendar_uses_latest_entry_per_day():
    entries = [
        make_entry(2, NOW, mood=8, sentiment=Sentiment.POSITIVE),
        make_entry(1, NOW - timedelta(hours=3), mood=2),
        make_entry(0, datetime(2026, 9, 30, tzinfo=UTC), mood=1),
    ]

    calendar = mood_calendar(entries, 2026, 10)

    assert calendar.month_name == "October"
    # October 1st 2026 is a Thursday
    assert calendar.first_weekday == 4
    assert len(calendar.days) == 31
    day = calendar.days[18]
    assert (day.day, day.mood, day.emoji, day.color_band) == (19, 8, "😁", "green")
    assert day.sentiment is Sentiment.POSITIVE
    assert all(item.mood is None for item in calendar.days if item.day != 19)


def test_dashboard_bundles_every_view():
    entries = daily_entries([7, 6], sentiment=Sentiment.POSITIVE, emotions=["grateful"])

    snapshot = build_dashboard(entries, NOW)

    assert snapshot.generated_at == NOW
    assert snapshot.summary.total_entries == 2
    assert len(snapshot.mood_trend) == 2
    assert snapshot.emotions[0].name == "Grateful"
    assert snapshot.weekly_sentiment[-1].positive == 2
    payload = snapshot.to_wire()
    assert set(payload) == {"generatedAt", "summary", "moodTrend", "emotions", "weeklySentiment", "insights"}
    assert "streakDays" in payload["summary"]


def test_naive_entry_dates_are_read_as_utc():
    imported = JournalEntry.model_validate(
        {"id": 1, "date": "2026-10-18T12:00:00", "mood": 5, "content": "Imported from an old export"}
    )

    assert imported.date == datetime(2026, 10, 18, 12, 0, tzinfo=UTC)

    titles = [insight.title for insight in rule_based_insights([make_entry(2, NOW), imported], NOW)]
    assert titles == ["Consistent Journaling"]
