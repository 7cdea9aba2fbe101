"""Technical-breadth scoring dimension for the hireability engine.

Combines social proof (stars, log-compressed) with the number of
distinct languages across the developer's original repositories.
Maximum score: 15 points (5 for stars, 10 for languages).
"""

import logging
import math
from collections.abc import Sequence

from hireability.models import Repository

logger = logging.getLogger(__name__)

STAR_MAX = 5
LANGUAGE_MAX = 10
MAX_SCORE = STAR_MAX + LANGUAGE_MAX

# Four distinct languages saturate the language bonus.
LANGUAGE_SATURATION = 4


def calculate_star_bonus(originals: Sequence[Repository]) -> float:
    """``5 * log10(total_stars + 1) / 2``, capped at 5.

    About 100 stars saturates the bonus.
    """
    total_stars = sum(repo.stargazers_count for repo in originals)
    return min(STAR_MAX, math.log10(total_stars + 1) / 2 * STAR_MAX)


def distinct_languages(originals: Sequence[Repository]) -> set[str]:
    return {repo.language for repo in originals if repo.language}


def calculate_language_bonus(originals: Sequence[Repository]) -> float:
    """``10 * languages / 4``, capped at 10."""
    count = len(distinct_languages(originals))
    return min(LANGUAGE_MAX, count / LANGUAGE_SATURATION * LANGUAGE_MAX)


def calculate_diversity_score(originals: Sequence[Repository]) -> float:
    """Calculate the technical-breadth score over original repositories.

    Args:
        originals: Non-fork repositories only.

    Returns:
        A float between 0 and 15.
    """
    star_bonus = calculate_star_bonus(originals)
    language_bonus = calculate_language_bonus(originals)
    score = star_bonus + language_bonus

    logger.debug(
        "Diversity: %.2f (stars=%.2f, languages=%.2f)",
        score, star_bonus, language_bonus,
    )
    return score
