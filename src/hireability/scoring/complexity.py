"""Complexity scoring dimension for the hireability engine.

Log-compresses the average size of original repositories so a few huge
repositories cannot dominate.  Maximum score: 10 points.
"""

import logging
import math
from collections.abc import Sequence

from hireability.models import Repository

logger = logging.getLogger(__name__)

MAX_SCORE = 10


def calculate_complexity_score(originals: Sequence[Repository]) -> float:
    """``10 * log10(avg_size + 1) / 5``, capped at 10.

    Args:
        originals: Non-fork repositories only.

    Returns:
        A float between 0 and 10.  0 when there are no originals.
    """
    if originals:
        avg_size = sum(repo.size for repo in originals) / len(originals)
    else:
        avg_size = 0

    score = min(MAX_SCORE, math.log10(avg_size + 1) / 5 * MAX_SCORE)

    logger.debug("Complexity: %.2f (avg_size=%.1f)", score, avg_size)
    return score
