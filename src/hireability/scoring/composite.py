"""Composite scorer for the hireability engine.

Combines all six scoring dimensions into a single :class:`Metrics`
record.  The engine is pure: no I/O, no shared state, and "now" is read
once per call (or injected) so every relative-time figure agrees.
"""

from __future__ import annotations

import datetime
import logging
import math
from collections.abc import Sequence

from hireability.models import Metrics, Profile, Repository
from hireability.scoring.activity import summarize_activity
from hireability.scoring.complexity import calculate_complexity_score
from hireability.scoring.diversity import (
    calculate_diversity_score,
    calculate_star_bonus,
)
from hireability.scoring.documentation import calculate_documentation_score
from hireability.scoring.maturity import calculate_maturity_score
from hireability.scoring.originality import (
    calculate_originality_score,
    original_repos,
)

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 going up (4.5 -> 5)."""
    return math.floor(value + 0.5)


def calculate_hireability_score(
    profile: Profile,
    repos: Sequence[Repository],
    now: datetime.datetime | None = None,
) -> Metrics:
    """Compute the hireability metrics for a profile across 6 dimensions.

    Dimensions:
        - Activity      (max 30)
        - Originality   (max 20)
        - Diversity     (max 15)
        - Documentation (max 15)
        - Maturity      (max 10)
        - Complexity    (max 10)

    The total is the rounded sum of the unrounded sub-scores; each
    sub-score is rounded on its own for display.

    Args:
        profile: The developer's profile.
        repos: Zero or more repositories, forks included.
        now: Reference time.  Sampled once from the clock when omitted.

    Returns:
        A :class:`Metrics` record.
    """
    if now is None:
        now = datetime.datetime.now(datetime.timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=datetime.timezone.utc)

    originals = original_repos(repos)

    activity = summarize_activity(repos, now)
    originality = calculate_originality_score(repos)
    star_bonus = calculate_star_bonus(originals)
    diversity = calculate_diversity_score(originals)
    documentation = calculate_documentation_score(originals)
    maturity = calculate_maturity_score(profile, now)
    complexity = calculate_complexity_score(originals)

    total_score = round_half_up(
        activity.score
        + originality
        + diversity
        + documentation
        + maturity
        + complexity
    )

    metrics = Metrics(
        total_score=total_score,
        activity_score=round_half_up(activity.score),
        originality_score=round_half_up(originality),
        diversity_score=round_half_up(diversity),
        documentation_score=round_half_up(documentation),
        follower_signal=round_half_up(maturity),
        complexity_score=round_half_up(complexity),
        repo_count_score=round_half_up(originality),
        star_impact=round_half_up(star_bonus),
        activity_level=activity.activity_level,
        last_commit_date=activity.last_commit_date,
        days_since_last_activity=activity.days_since_last_activity,
        recent_activity_velocity=activity.recent_activity_velocity,
    )

    logger.info(
        "Scored %s: total=%d (%s) "
        "[act=%d, orig=%d, div=%d, doc=%d, mat=%d, cpx=%d]",
        profile.login, metrics.total_score, metrics.activity_level.value,
        metrics.activity_score, metrics.originality_score,
        metrics.diversity_score, metrics.documentation_score,
        metrics.follower_signal, metrics.complexity_score,
    )
    return metrics
