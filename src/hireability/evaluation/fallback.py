"""Deterministic statistical evaluator.

Used when no AI evaluator is configured, and as the fallback when an
injected evaluator fails.
"""

import logging
from collections.abc import Mapping, Sequence

import requests

from hireability.evaluation.base import BaseEvaluator, EvaluationError
from hireability.models import Evaluation, HiringTier, Metrics, Profile, Repository

logger = logging.getLogger(__name__)

# Totals strictly above this are treated as a strong hire.
STRONG_HIRE_THRESHOLD = 70


class StatisticalEvaluator(BaseEvaluator):
    """Derive a tier from the total score alone."""

    def evaluate(
        self,
        profile: Profile,
        repos: Sequence[Repository],
        metrics: Metrics,
        readmes: Mapping[str, str],
    ) -> Evaluation:
        if metrics.total_score > STRONG_HIRE_THRESHOLD:
            tier = HiringTier.STRONG_HIRE
        else:
            tier = HiringTier.NEEDS_IMPROVEMENT

        return Evaluation(
            tier=tier,
            strengths=("Quantitative threshold met",),
            risks=("Qualitative audit unavailable",),
            verdict="Fallback: Statistical analysis suggests viable candidate.",
            recommendations=(
                "Audit READMEs manually",
                "Validate commit history",
            ),
        )


def evaluate_with_fallback(
    evaluator: BaseEvaluator | None,
    profile: Profile,
    repos: Sequence[Repository],
    metrics: Metrics,
    readmes: Mapping[str, str],
) -> Evaluation:
    """Run *evaluator*, falling back to :class:`StatisticalEvaluator`.

    :class:`EvaluationError` and ``requests`` transport failures trigger
    the fallback; anything else is a bug in the evaluator and propagates.
    """
    fallback = StatisticalEvaluator()
    if evaluator is None:
        return fallback.evaluate(profile, repos, metrics, readmes)

    try:
        return evaluator.evaluate(profile, repos, metrics, readmes)
    except (EvaluationError, requests.RequestException) as exc:
        logger.error(
            "Qualitative audit failed for %s, using statistical fallback: %s",
            profile.login, exc,
        )
        return fallback.evaluate(profile, repos, metrics, readmes)
