"""Originality scoring dimension for the hireability engine.

Rewards profiles whose repositories are mostly their own work rather
than forks.  Maximum score: 20 points.
"""

import logging
from collections.abc import Sequence

from hireability.models import Repository

logger = logging.getLogger(__name__)

MAX_SCORE = 20


def original_repos(repos: Sequence[Repository]) -> list[Repository]:
    """Return the repositories that are not forks, preserving order."""
    return [repo for repo in repos if not repo.fork]


def calculate_originality_score(repos: Sequence[Repository]) -> float:
    """Score the share of original repositories.

    ``originals / total * 20``, or 0 for a profile with no repositories.

    Args:
        repos: All repositories of the profile, forks included.

    Returns:
        A float between 0 and 20.
    """
    if not repos:
        return 0.0

    originals = len(original_repos(repos))
    ratio = originals / len(repos)
    score = ratio * MAX_SCORE

    logger.debug(
        "Originality: %.2f (originals=%d, forks=%d)",
        score, originals, len(repos) - originals,
    )
    return score
