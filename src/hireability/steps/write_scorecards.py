"""pypyr step: write an HTML scorecard per candidate plus a JSON summary.

Context keys consumed:
    scored_candidates (list[dict]): Output of ``score_candidates``.
    output_dir (str): Directory to write into.  Created if missing.

Context keys produced:
    scorecard_paths (list[str]): Paths of the HTML files written.
    summary_path (str): Path of ``summary.json``.
"""

import json
import logging
import pathlib

from hireability.reporting import compose_scorecard

logger = logging.getLogger(__name__)


def run_step(context: dict) -> None:
    """pypyr entry-point: render scorecards and the batch summary."""
    scored = context.get("scored_candidates") or []
    output_dir = pathlib.Path(context["output_dir"])
    output_dir.mkdir(parents=True, exist_ok=True)

    paths: list[str] = []
    summary: list[dict] = []
    for item in scored:
        profile = item["candidate"].profile
        card = compose_scorecard(profile, item["metrics"], item["evaluation"])

        path = output_dir / f"{profile.login}.html"
        path.write_text(card["html_body"], encoding="utf-8")
        paths.append(str(path))

        summary.append({
            "login": profile.login,
            "metrics": item["metrics"].to_dict(),
            "evaluation": item["evaluation"].to_dict(),
        })

    summary_path = output_dir / "summary.json"
    summary_path.write_text(json.dumps(summary, indent=2), encoding="utf-8")

    context["scorecard_paths"] = paths
    context["summary_path"] = str(summary_path)

    logger.info("Wrote %d scorecards to %s", len(paths), output_dir)
