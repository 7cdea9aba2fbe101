"""Evaluator interface and response parsing.

Qualitative evaluators (typically a generative-AI service) are injected
at this boundary so the deterministic engine never depends on them.
"""

import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence

from hireability.models import Evaluation, HiringTier, Metrics, Profile, Repository

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("tier", "strengths", "risks", "verdict", "recommendations")


class EvaluationError(Exception):
    """An evaluator failed or returned an unusable verdict."""


class BaseEvaluator(ABC):
    """Abstract base class for qualitative evaluators.

    Concrete subclasses turn the quantitative metrics plus raw
    repository and README context into an :class:`Evaluation`.  An AI
    backed evaluator usually renders the audit prompt, sends it to the
    model and parses the JSON reply::

        class ChatEvaluator(BaseEvaluator):
            def __init__(self, complete):
                self.complete = complete  # prompt text -> reply text

            def evaluate(self, profile, repos, metrics, readmes):
                prompt = build_audit_prompt(profile, repos, metrics, readmes)
                return parse_evaluation(self.complete(prompt))

    Pass it to :func:`~hireability.evaluation.evaluate_with_fallback` so a
    malformed reply or a dropped connection degrades to the statistical
    verdict.
    """

    @abstractmethod
    def evaluate(
        self,
        profile: Profile,
        repos: Sequence[Repository],
        metrics: Metrics,
        readmes: Mapping[str, str],
    ) -> Evaluation:
        """Produce a verdict for one candidate.

        Raises:
            EvaluationError: If no usable verdict could be produced.
        """
        ...


def _string_list(value, key: str) -> tuple[str, ...]:
    if not isinstance(value, list):
        raise EvaluationError(f"Evaluation field '{key}' must be a list")
    return tuple(str(item) for item in value)


def parse_evaluation(payload: str | Mapping) -> Evaluation:
    """Parse an evaluator response into an :class:`Evaluation`.

    Args:
        payload: JSON text or an already-decoded mapping with the keys
            ``tier``, ``strengths``, ``risks``, ``verdict`` and
            ``recommendations``.  ``tier`` may be a member name
            (``STRONG_HIRE``) or a label (``Strong Hire``).

    Raises:
        EvaluationError: On invalid JSON, missing keys, or unknown tier.
    """
    if isinstance(payload, str):
        try:
            payload = json.loads(payload)
        except ValueError as exc:
            raise EvaluationError("Evaluator returned invalid JSON") from exc

    if not isinstance(payload, Mapping):
        raise EvaluationError("Evaluator response must be a JSON object")

    missing = [key for key in REQUIRED_FIELDS if key not in payload]
    if missing:
        raise EvaluationError(f"missing fields: {', '.join(missing)}")

    try:
        tier = HiringTier.parse(payload["tier"])
    except ValueError as exc:
        raise EvaluationError(str(exc)) from exc

    return Evaluation(
        tier=tier,
        strengths=_string_list(payload["strengths"], "strengths"),
        risks=_string_list(payload["risks"], "risks"),
        verdict=str(payload["verdict"]),
        recommendations=_string_list(
            payload["recommendations"], "recommendations"
        ),
    )
