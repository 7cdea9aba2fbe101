"""Activity scoring dimension for the hireability engine.

Scores a developer on how many repositories they pushed to in the last
90 days, decayed linearly by the time since their most recent push.
Forks count here: pushing to a fork is still activity.  Maximum score:
30 points.
"""

from __future__ import annotations

import datetime
import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

from hireability.models import (
    UNKNOWN_DATE,
    UNKNOWN_DAYS,
    ActivityLevel,
    Repository,
    format_timestamp,
)

logger = logging.getLogger(__name__)

MAX_SCORE = 30
POINTS_PER_REPO = 3
VELOCITY_CAP = 10
WINDOW_DAYS = 90

# (max days since last push, min velocity) per level, checked in order.
HIGHLY_ACTIVE_THRESHOLD = (7, 5)
MODERATELY_ACTIVE_THRESHOLD = (30, 1)


@dataclass(frozen=True)
class ActivitySummary:
    """Intermediate activity figures shared with the composite scorer."""

    last_commit_date: str
    days_since_last_activity: int
    recent_activity_velocity: int
    activity_level: ActivityLevel
    score: float


def recency_multiplier(days_since: int) -> float:
    """Linear decay from 1.0 on the day of the push to 0.0 at 90 days.

    Never exceeds 1.0, even for a push timestamp later than "now".
    """
    if days_since <= 0:
        return 1.0
    return max(0.0, 1 - days_since / WINDOW_DAYS)


def classify_activity_level(days_since: int, velocity: int) -> ActivityLevel:
    """Classify recency and velocity into one of three activity levels.

    Thresholds (first match wins):
        - <= 7 days and >= 5 recent repos  -> HIGHLY_ACTIVE
        - <= 30 days and >= 1 recent repo  -> MODERATELY_ACTIVE
        - else                             -> INACTIVE
    """
    max_days, min_velocity = HIGHLY_ACTIVE_THRESHOLD
    if days_since <= max_days and velocity >= min_velocity:
        return ActivityLevel.HIGHLY_ACTIVE
    max_days, min_velocity = MODERATELY_ACTIVE_THRESHOLD
    if days_since <= max_days and velocity >= min_velocity:
        return ActivityLevel.MODERATELY_ACTIVE
    return ActivityLevel.INACTIVE


def summarize_activity(
    repos: Sequence[Repository], now: datetime.datetime
) -> ActivitySummary:
    """Compute last activity, velocity, level, and score over *repos*.

    Args:
        repos: All repositories of the profile, forks included.
        now: The single "now" sampled for this scoring call.

    Returns:
        An :class:`ActivitySummary`.  With no repositories the date and
        day-gap fall back to the ``N/A`` / ``999`` sentinels.
    """
    if not repos:
        logger.debug("Activity: no repositories, using sentinels")
        return ActivitySummary(
            last_commit_date=UNKNOWN_DATE,
            days_since_last_activity=UNKNOWN_DAYS,
            recent_activity_velocity=0,
            activity_level=ActivityLevel.INACTIVE,
            score=0.0,
        )

    last_push = max(repo.pushed_at for repo in repos)
    days_since = math.floor((now - last_push) / datetime.timedelta(days=1))

    window_start = now - datetime.timedelta(days=WINDOW_DAYS)
    velocity = sum(1 for repo in repos if repo.pushed_at >= window_start)

    level = classify_activity_level(days_since, velocity)
    score = (
        min(VELOCITY_CAP, velocity) * POINTS_PER_REPO
        * recency_multiplier(days_since)
    )

    logger.debug(
        "Activity: %.2f (days_since=%d, velocity=%d, level=%s)",
        score, days_since, velocity, level.name,
    )
    return ActivitySummary(
        last_commit_date=format_timestamp(last_push),
        days_since_last_activity=days_since,
        recent_activity_velocity=velocity,
        activity_level=level,
        score=score,
    )
