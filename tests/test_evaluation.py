"""Tests for the evaluation sub-package (interface, prompt, fallback).

No AI service is called: evaluators are small in-test stubs.
"""

import dataclasses
import json

import pytest
import requests

from hireability.evaluation import (
    AUDIT_INSTRUCTIONS,
    BaseEvaluator,
    EvaluationError,
    StatisticalEvaluator,
    build_audit_prompt,
    evaluate_with_fallback,
    parse_evaluation,
)
from hireability.evaluation.prompt import primary_stack, top_projects
from hireability.models import Evaluation, HiringTier


class _FixedEvaluator(BaseEvaluator):
    """Returns a canned verdict."""

    def evaluate(self, profile, repos, metrics, readmes):
        return Evaluation(tier=HiringTier.ELITE, verdict="Top of the stack.")


class _BrokenEvaluator(BaseEvaluator):
    """Simulates an AI service returning garbage."""

    def evaluate(self, profile, repos, metrics, readmes):
        return parse_evaluation("<html>502 Bad Gateway</html>")


class _BuggyEvaluator(BaseEvaluator):

    def evaluate(self, profile, repos, metrics, readmes):
        raise RuntimeError("programming error")


class _OfflineEvaluator(BaseEvaluator):
    """Simulates the AI service being unreachable."""

    def evaluate(self, profile, repos, metrics, readmes):
        raise requests.ConnectionError("Max retries exceeded")


class _ChatEvaluator(BaseEvaluator):
    """Prompt in, JSON reply out, the way an AI backed evaluator is wired."""

    def __init__(self, complete):
        self.complete = complete

    def evaluate(self, profile, repos, metrics, readmes):
        prompt = build_audit_prompt(profile, repos, metrics, readmes)
        return parse_evaluation(self.complete(prompt))


# ======================================================================
# parse_evaluation
# ======================================================================


class TestParseEvaluation:

    def test_json_text(self):
        text = json.dumps({
            "tier": "STRONG_HIRE",
            "strengths": ["High commit velocity"],
            "risks": ["Thin READMEs"],
            "verdict": "Productive backend engineer.",
            "recommendations": ["Document the API project"],
        })
        evaluation = parse_evaluation(text)
        assert evaluation.tier is HiringTier.STRONG_HIRE
        assert evaluation.strengths == ("High commit velocity",)
        assert evaluation.verdict == "Productive backend engineer."

    def test_mapping_with_label_tier(self):
        evaluation = parse_evaluation({
            "tier": "Needs Improvement",
            "strengths": [],
            "risks": ["Tutorial hell"],
            "verdict": "Early career.",
            "recommendations": [],
        })
        assert evaluation.tier is HiringTier.NEEDS_IMPROVEMENT

    def test_invalid_json(self):
        with pytest.raises(EvaluationError, match="invalid JSON"):
            parse_evaluation("{not json")

    def test_not_an_object(self):
        with pytest.raises(EvaluationError):
            parse_evaluation("[1, 2, 3]")

    def test_missing_fields(self):
        with pytest.raises(EvaluationError, match="risks, verdict"):
            parse_evaluation({"tier": "ELITE", "strengths": [],
                              "recommendations": []})

    def test_unknown_tier(self):
        with pytest.raises(EvaluationError, match="Unknown hiring tier"):
            parse_evaluation({"tier": "10x", "strengths": [], "risks": [],
                              "verdict": "", "recommendations": []})

    def test_list_fields_must_be_lists(self):
        with pytest.raises(EvaluationError, match="strengths"):
            parse_evaluation({"tier": "ELITE", "strengths": "many", "risks": [],
                              "verdict": "", "recommendations": []})


# ======================================================================
# StatisticalEvaluator / evaluate_with_fallback
# ======================================================================


class TestStatisticalEvaluator:

    def test_above_threshold(self, make_profile, sample_metrics):
        metrics = dataclasses.replace(sample_metrics, total_score=71)
        result = StatisticalEvaluator().evaluate(make_profile(), [], metrics, {})
        assert result.tier is HiringTier.STRONG_HIRE

    def test_threshold_is_exclusive(self, make_profile, sample_metrics):
        metrics = dataclasses.replace(sample_metrics, total_score=70)
        result = StatisticalEvaluator().evaluate(make_profile(), [], metrics, {})
        assert result.tier is HiringTier.NEEDS_IMPROVEMENT

    def test_fixed_narrative(self, make_profile, sample_metrics):
        result = StatisticalEvaluator().evaluate(
            make_profile(), [], sample_metrics, {}
        )
        assert result.verdict.startswith("Fallback:")
        assert result.recommendations == (
            "Audit READMEs manually", "Validate commit history",
        )


class TestEvaluateWithFallback:

    def test_no_evaluator_uses_statistics(self, make_profile, sample_metrics):
        result = evaluate_with_fallback(None, make_profile(), [], sample_metrics, {})
        assert result.tier is HiringTier.NEEDS_IMPROVEMENT

    def test_injected_evaluator_used(self, make_profile, sample_metrics):
        result = evaluate_with_fallback(
            _FixedEvaluator(), make_profile(), [], sample_metrics, {}
        )
        assert result.tier is HiringTier.ELITE

    def test_evaluation_error_falls_back(self, make_profile, sample_metrics, caplog):
        result = evaluate_with_fallback(
            _BrokenEvaluator(), make_profile(), [], sample_metrics, {}
        )
        assert result.verdict.startswith("Fallback:")
        assert "statistical fallback" in caplog.text

    def test_transport_error_falls_back(self, make_profile, sample_metrics, caplog):
        result = evaluate_with_fallback(
            _OfflineEvaluator(), make_profile(), [], sample_metrics, {}
        )
        assert result.tier is HiringTier.NEEDS_IMPROVEMENT
        assert result.verdict.startswith("Fallback:")
        assert "Max retries exceeded" in caplog.text

    def test_other_errors_propagate(self, make_profile, sample_metrics):
        with pytest.raises(RuntimeError):
            evaluate_with_fallback(
                _BuggyEvaluator(), make_profile(), [], sample_metrics, {}
            )

    def test_prompt_and_parse_wired_together(self, make_profile, make_repo,
                                             sample_metrics):
        prompts = []

        def complete(prompt):
            prompts.append(prompt)
            return json.dumps({
                "tier": "HIREABLE",
                "strengths": ["Ships a real product"],
                "risks": [],
                "verdict": "Solid generalist.",
                "recommendations": [],
            })

        result = evaluate_with_fallback(
            _ChatEvaluator(complete), make_profile(login="octocat"),
            [make_repo("api", language="Go")], sample_metrics, {},
        )
        assert result.tier is HiringTier.HIREABLE
        assert "AUDIT SUBJECT: octocat" in prompts[0]

    def test_malformed_reply_falls_back(self, make_profile, sample_metrics):
        result = evaluate_with_fallback(
            _ChatEvaluator(lambda prompt: "Sorry, I cannot help."),
            make_profile(), [], sample_metrics, {},
        )
        assert result.verdict.startswith("Fallback:")


# ======================================================================
# Audit prompt
# ======================================================================


class TestAuditPrompt:

    @pytest.fixture()
    def repos(self, make_repo):
        return [
            make_repo("alpha", language="Go", stargazers_count=5),
            make_repo("beta", language="Rust", stargazers_count=50,
                      has_pages=True, description="Embedded key-value store"),
            make_repo("upstream", language="C", stargazers_count=9000, fork=True),
            make_repo("gamma", language="Go", stargazers_count=1),
            make_repo("delta", language="Python", stargazers_count=2),
            make_repo("epsilon", language="Elixir", stargazers_count=3),
            make_repo("zeta", language="Zig", stargazers_count=4),
        ]

    def test_primary_stack_first_five_distinct(self, repos):
        assert primary_stack(repos) == ["Go", "Rust", "C", "Python", "Elixir"]

    def test_top_projects_excludes_forks(self, repos):
        projects = top_projects(repos, {"beta": "# Beta"})
        assert [p["name"] for p in projects] == [
            "beta", "alpha", "zeta", "epsilon", "delta",
        ]
        assert projects[0]["readme_snippet"] == "README_ATTACHED"
        assert projects[1]["readme_snippet"] == "NO_README"
        assert projects[0]["has_pages"] is True

    def test_prompt_contents(self, make_profile, sample_metrics, repos):
        prompt = build_audit_prompt(
            make_profile(login="octocat"), repos, sample_metrics,
            {"beta": "B" * 800},
        )
        assert "AUDIT SUBJECT: octocat" in prompt
        assert "- Score: 57/100" in prompt
        assert "- Activity: Moderately Active (0 days since last push)" in prompt
        assert "- Originality: 20/20" in prompt
        assert "- Documentation: 15/15" in prompt
        assert "- Primary Stack: Go, Rust, C, Python, Elixir" in prompt
        assert "REPO: beta\nCONTENT: " + "B" * 500 + "\n" in prompt
        assert "B" * 501 not in prompt
        assert "NEEDS_IMPROVEMENT" in prompt

    def test_instructions_name_the_categories(self):
        assert "Tutorial Hell" in AUDIT_INSTRUCTIONS
        assert "Architect" in AUDIT_INSTRUCTIONS
