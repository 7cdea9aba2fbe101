"""Documentation-signal scoring dimension for the hireability engine.

Uses two proxies for production readiness on each original repository:
a meaningful description, and use of GitHub issues, projects, or pages.
Maximum score: 15 points.
"""

import logging
from collections.abc import Sequence

from hireability.models import Repository

logger = logging.getLogger(__name__)

MAX_SCORE = 15

# A description must be longer than this to count as documentation.
MIN_DESCRIPTION_LENGTH = 20


def has_documentation_signal(repo: Repository) -> bool:
    return len(repo.description or "") > MIN_DESCRIPTION_LENGTH


def calculate_documentation_score(originals: Sequence[Repository]) -> float:
    """Calculate documentation score over original repositories.

    Each repository can earn two signals (description, feature usage);
    the score is the share of signals earned times 15.

    Args:
        originals: Non-fork repositories only.

    Returns:
        A float between 0 and 15.  0 when there are no originals.
    """
    if not originals:
        return 0.0

    described = sum(1 for repo in originals if has_documentation_signal(repo))
    featured = sum(1 for repo in originals if repo.uses_platform_features)
    ratio = (described + featured) / (len(originals) * 2)
    score = ratio * MAX_SCORE

    logger.debug(
        "Documentation: %.2f (described=%d, featured=%d, originals=%d)",
        score, described, featured, len(originals),
    )
    return score
