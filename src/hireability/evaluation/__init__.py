"""Evaluation sub-package for the hireability project.

Exports the evaluator interface and helpers:

- ``BaseEvaluator`` -- interface for injected qualitative evaluators.
- ``StatisticalEvaluator`` -- deterministic score-only fallback.
- ``evaluate_with_fallback`` -- run an evaluator, falling back on failure.
- ``build_audit_prompt`` / ``parse_evaluation`` -- AI request/response glue.
"""

from hireability.evaluation.base import (
    BaseEvaluator,
    EvaluationError,
    parse_evaluation,
)
from hireability.evaluation.fallback import (
    StatisticalEvaluator,
    evaluate_with_fallback,
)
from hireability.evaluation.prompt import AUDIT_INSTRUCTIONS, build_audit_prompt

__all__ = [
    "AUDIT_INSTRUCTIONS",
    "BaseEvaluator",
    "EvaluationError",
    "StatisticalEvaluator",
    "build_audit_prompt",
    "evaluate_with_fallback",
    "parse_evaluation",
]
