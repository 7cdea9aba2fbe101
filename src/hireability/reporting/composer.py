"""Compose the candidate scorecard.

Renders an HTML scorecard from a :class:`Metrics` record and its
:class:`Evaluation`, using the Jinja2 template at
``templates/scorecard.html``.
"""

import datetime
import logging
import pathlib

from jinja2 import Environment, FileSystemLoader

from hireability.models import Evaluation, Metrics, Profile
from hireability.scoring import (
    activity,
    complexity,
    diversity,
    documentation,
    maturity,
    originality,
)

logger = logging.getLogger(__name__)

# Locate the templates directory relative to this file.
_TEMPLATE_DIR = pathlib.Path(__file__).parent / "templates"


def _build_rows(metrics: Metrics) -> list[dict]:
    """Return one ``{label, value, max}`` row per sub-score, in weight order."""
    return [
        {"label": "Activity", "value": metrics.activity_score,
         "max": activity.MAX_SCORE},
        {"label": "Originality", "value": metrics.originality_score,
         "max": originality.MAX_SCORE},
        {"label": "Technical Breadth", "value": metrics.diversity_score,
         "max": diversity.MAX_SCORE},
        {"label": "Documentation", "value": metrics.documentation_score,
         "max": documentation.MAX_SCORE},
        {"label": "Maturity", "value": metrics.follower_signal,
         "max": maturity.MAX_SCORE},
        {"label": "Complexity", "value": metrics.complexity_score,
         "max": complexity.MAX_SCORE},
    ]


def compose_scorecard(
    profile: Profile,
    metrics: Metrics,
    evaluation: Evaluation,
    generated_at: datetime.datetime | None = None,
) -> dict:
    """Build the HTML scorecard for one candidate.

    Args:
        profile: The scored profile (display fields are shown).
        metrics: Output of the scoring engine.
        evaluation: Qualitative verdict for the same candidate.
        generated_at: Timestamp printed in the footer; defaults to now.

    Returns:
        A dict with keys:
            - ``subject`` (str): A one-line title for the scorecard.
            - ``html_body`` (str): The rendered HTML.
    """
    if generated_at is None:
        generated_at = datetime.datetime.now(datetime.timezone.utc)

    env = Environment(
        loader=FileSystemLoader(str(_TEMPLATE_DIR)),
        autoescape=True,
    )
    template = env.get_template("scorecard.html")

    html_body = template.render(
        profile=profile,
        metrics=metrics,
        evaluation=evaluation,
        rows=_build_rows(metrics),
        generated_at=generated_at.strftime("%Y-%m-%d %H:%M UTC"),
    )

    subject = (
        f"{profile.login}: {metrics.total_score}/100 "
        f"| {evaluation.tier.value}"
    )

    logger.info("Composed scorecard for %s", profile.login)

    return {"subject": subject, "html_body": html_body}
