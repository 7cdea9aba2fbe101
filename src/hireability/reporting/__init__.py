"""Reporting sub-package for the hireability project.

Usage::

    from hireability.reporting import compose_scorecard

    card = compose_scorecard(profile, metrics, evaluation)
    pathlib.Path("card.html").write_text(card["html_body"])
"""

from hireability.reporting.composer import compose_scorecard

__all__ = ["compose_scorecard"]
