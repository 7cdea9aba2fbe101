"""Audit prompt construction for generative-AI evaluators.

Builds the deterministic text an AI evaluator receives: the engine's
metrics, the top original projects, and sampled README content.
"""

import json
from collections.abc import Mapping, Sequence

from hireability.models import Metrics, Profile, Repository

TOP_PROJECT_LIMIT = 5
STACK_LIMIT = 5
README_PROMPT_CHARS = 500

AUDIT_INSTRUCTIONS = """\
You are a Lead Engineering Auditor at a Tier-1 Venture Capital firm.
You are auditing a developer's GitHub to decide if they are "Investment Grade".

AUDIT PROTOCOL:
1. VALIDATE: Look for 'Tutorial Hell' (dozens of 1-star repos with names like 'todo-app').
2. BENCHMARK: Categorize the developer as: 'Academic/Student', 'Bootcamp Grad', 'Systems Engineer', 'Product Engineer', or 'Architect'.
3. FORENSICS: If READMEs are missing or short, penalize heavily for "Technical Communication Gaps".
4. NO FLUFF: Use terms like 'Technical Debt', 'Documentation Parity', 'Commit Velocity', and 'Social Proof'.
"""

RESPONSE_SCHEMA = """\
{
  "tier": "ELITE | STRONG_HIRE | HIREABLE | NEEDS_IMPROVEMENT | REJECT",
  "strengths": ["string"],
  "risks": ["string"],
  "verdict": "One sentence industrial-grade summary.",
  "recommendations": ["High-impact technical tasks"]
}"""


def primary_stack(repos: Sequence[Repository]) -> list[str]:
    """First five distinct languages across all repositories, in list order."""
    seen: list[str] = []
    for repo in repos:
        if repo.language and repo.language not in seen:
            seen.append(repo.language)
    return seen[:STACK_LIMIT]


def top_projects(
    repos: Sequence[Repository], readmes: Mapping[str, str]
) -> list[dict]:
    """Summaries of the five most-starred original repositories."""
    ranked = sorted(
        (repo for repo in repos if not repo.fork),
        key=lambda repo: repo.stargazers_count,
        reverse=True,
    )[:TOP_PROJECT_LIMIT]
    return [
        {
            "name": repo.name,
            "stars": repo.stargazers_count,
            "readme_snippet": (
                "README_ATTACHED" if readmes.get(repo.name) else "NO_README"
            ),
            "has_pages": repo.has_pages,
            "description": repo.description,
        }
        for repo in ranked
    ]


def build_audit_prompt(
    profile: Profile,
    repos: Sequence[Repository],
    metrics: Metrics,
    readmes: Mapping[str, str],
) -> str:
    """Render the audit request for one candidate."""
    readme_section = "\n---\n".join(
        f"REPO: {name}\nCONTENT: {content[:README_PROMPT_CHARS]}"
        for name, content in readmes.items()
    )
    lines = [
        f"AUDIT SUBJECT: {profile.login}",
        "QUANTITATIVE DATA:",
        f"- Score: {metrics.total_score}/100",
        f"- Activity: {metrics.activity_level.value} "
        f"({metrics.days_since_last_activity} days since last push)",
        f"- Originality: {metrics.originality_score}/20",
        f"- Documentation: {metrics.documentation_score}/15",
        f"- Primary Stack: {', '.join(primary_stack(repos))}",
        "",
        "TOP PROJECT ANALYSIS:",
        json.dumps(top_projects(repos, readmes)),
        "",
        "README SAMPLES (CONTEXT):",
        readme_section,
        "",
        "OUTPUT JSON OBJECT:",
        RESPONSE_SCHEMA,
    ]
    return "\n".join(lines)
