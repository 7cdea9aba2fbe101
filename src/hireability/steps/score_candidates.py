"""pypyr step: score and evaluate every fetched candidate.

Each candidate is scored with its own "now" sample.

Context keys consumed:
    candidates (list[CandidateData]): Output of ``fetch_candidates``.
    evaluator (BaseEvaluator, optional): Qualitative evaluator.  The
        statistical fallback is used when absent.

Context keys produced:
    scored_candidates (list[dict]): ``{"candidate", "metrics",
        "evaluation"}`` per candidate, highest total score first.
"""

import logging

from hireability.evaluation import evaluate_with_fallback
from hireability.scoring import calculate_hireability_score

logger = logging.getLogger(__name__)


def run_step(context: dict) -> None:
    """pypyr entry-point: run the engine and evaluator per candidate."""
    candidates = context.get("candidates") or []
    evaluator = context.get("evaluator")

    scored: list[dict] = []
    for candidate in candidates:
        metrics = calculate_hireability_score(candidate.profile, candidate.repos)
        evaluation = evaluate_with_fallback(
            evaluator,
            candidate.profile,
            candidate.repos,
            metrics,
            candidate.readmes,
        )
        scored.append({
            "candidate": candidate,
            "metrics": metrics,
            "evaluation": evaluation,
        })

    scored.sort(key=lambda item: item["metrics"].total_score, reverse=True)
    context["scored_candidates"] = scored

    logger.info("Scoring complete: %d candidates scored", len(scored))
