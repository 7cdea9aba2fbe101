"""Maturity scoring dimension for the hireability engine.

Scores account age and follower count, each saturating at 5 points.
Maximum score: 10 points.
"""

import datetime
import logging

from hireability.models import Profile

logger = logging.getLogger(__name__)

AGE_MAX = 5
FOLLOWER_MAX = 5
MAX_SCORE = AGE_MAX + FOLLOWER_MAX

# Followers needed to saturate the follower component.
FOLLOWER_SATURATION = 100

YEAR = datetime.timedelta(days=365)


def calculate_maturity_score(profile: Profile, now: datetime.datetime) -> float:
    """Calculate maturity from account age and followers.

    Points awarded (additive):
        - one point per 365 days of account age, capped at 5
        - ``followers / 100 * 5``, capped at 5

    Args:
        profile: The scored profile.
        now: The single "now" sampled for this scoring call.

    Returns:
        A float between 0 and 10.
    """
    age_years = (now - profile.created_at) / YEAR
    age_score = min(AGE_MAX, max(0.0, age_years))
    follower_score = min(
        FOLLOWER_MAX, profile.followers / FOLLOWER_SATURATION * FOLLOWER_MAX
    )
    score = age_score + follower_score

    logger.debug(
        "Maturity: %.2f (age_years=%.2f, followers=%d)",
        score, age_years, profile.followers,
    )
    return score
