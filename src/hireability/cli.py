"""Click CLI for hireability.

Commands:
    score      -- Fetch a GitHub profile and print its hireability score.
    score-file -- Score a profile saved as JSON (no network).
    report     -- Write an HTML scorecard for a GitHub profile.
    batch      -- Invoke the ``score_batch`` pypyr pipeline for many handles.
"""

from __future__ import annotations

import json
import logging
import os
import pathlib

import click
from dotenv import load_dotenv

from hireability import DEFAULT_API_URL

logger = logging.getLogger("hireability.cli")


def _resolve_api_url(ctx_url: str | None) -> str:
    """Return the API URL from --api-url flag, env var, or default."""
    if ctx_url:
        return ctx_url
    env_url = os.environ.get("HIREABILITY_API_URL")
    if env_url:
        return env_url
    return DEFAULT_API_URL


def _fetch(ctx: click.Context, username: str):
    """Fetch candidate data, exiting with status 1 on retrieval errors."""
    from hireability.github import GitHubClient, GitHubError
    from hireability.models import InvalidRecordError

    client = GitHubClient(token=ctx.obj["token"], api_url=ctx.obj["api_url"])
    click.echo(
        click.style(f"Fetching GitHub data for {username}...", fg="cyan"),
        err=True,
    )
    try:
        return client.fetch_candidate(username)
    except (GitHubError, InvalidRecordError) as exc:
        logger.error("Fetching %s failed: %s", username, exc)
        click.echo(click.style(f"Error: {exc}", fg="red"))
        raise SystemExit(1)


def _evaluate(candidate):
    from hireability.evaluation import evaluate_with_fallback
    from hireability.scoring import calculate_hireability_score

    metrics = calculate_hireability_score(candidate.profile, candidate.repos)
    evaluation = evaluate_with_fallback(
        None, candidate.profile, candidate.repos, metrics, candidate.readmes
    )
    return metrics, evaluation


def _echo_result(login: str, metrics, evaluation, as_json: bool) -> None:
    if as_json:
        click.echo(json.dumps({
            "login": login,
            "metrics": metrics.to_dict(),
            "evaluation": evaluation.to_dict(),
        }, indent=2))
        return

    colour = "green" if metrics.total_score > 70 else "yellow"
    click.echo(
        click.style(f"{login}: {metrics.total_score}/100", fg=colour, bold=True)
        + f" ({evaluation.tier.value})"
    )
    click.echo(
        f"  Activity {metrics.activity_score}/30 | "
        f"Originality {metrics.originality_score}/20 | "
        f"Breadth {metrics.diversity_score}/15 | "
        f"Docs {metrics.documentation_score}/15 | "
        f"Maturity {metrics.follower_signal}/10 | "
        f"Complexity {metrics.complexity_score}/10"
    )
    click.echo(
        f"  {metrics.activity_level.value}: "
        f"{metrics.recent_activity_velocity} repos pushed in 90 days, "
        f"last push {metrics.last_commit_date}"
    )
    click.echo(f"  {evaluation.verdict}")


@click.group()
@click.option(
    "--token",
    default=None,
    envvar="GITHUB_TOKEN",
    help="GitHub API token (raises the rate limit).",
)
@click.option(
    "--api-url",
    default=None,
    envvar="HIREABILITY_API_URL",
    help="GitHub API base URL.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(
    ctx: click.Context, token: str | None, api_url: str | None, verbose: bool
) -> None:
    """hireability: Score a developer's public GitHub footprint."""
    load_dotenv()
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["token"] = token or os.environ.get("GITHUB_TOKEN")
    ctx.obj["api_url"] = _resolve_api_url(api_url)


@main.command()
@click.argument("username")
@click.option("--json", "as_json", is_flag=True, help="Print JSON output.")
@click.pass_context
def score(ctx: click.Context, username: str, as_json: bool) -> None:
    """Fetch USERNAME from GitHub and print the hireability score."""
    candidate = _fetch(ctx, username)
    metrics, evaluation = _evaluate(candidate)
    _echo_result(candidate.profile.login, metrics, evaluation, as_json)


@main.command("score-file")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Print JSON output.")
def score_file(path: str, as_json: bool) -> None:
    """Score a saved candidate JSON file: {"profile", "repos", "readmes"}."""
    from hireability.models import CandidateData, InvalidRecordError

    try:
        raw = json.loads(pathlib.Path(path).read_text(encoding="utf-8"))
        candidate = CandidateData.from_dict(raw)
    except (ValueError, InvalidRecordError) as exc:
        logger.error("Invalid candidate file %s: %s", path, exc)
        click.echo(click.style(f"Error: {exc}", fg="red"))
        raise SystemExit(1)

    metrics, evaluation = _evaluate(candidate)
    _echo_result(candidate.profile.login, metrics, evaluation, as_json)


@main.command()
@click.argument("username")
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(dir_okay=False, writable=True),
    help="Where to write the HTML scorecard.",
)
@click.pass_context
def report(ctx: click.Context, username: str, output: str) -> None:
    """Write an HTML scorecard for USERNAME."""
    from hireability.reporting import compose_scorecard

    candidate = _fetch(ctx, username)
    metrics, evaluation = _evaluate(candidate)

    card = compose_scorecard(candidate.profile, metrics, evaluation)
    out_path = pathlib.Path(output)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(card["html_body"], encoding="utf-8")

    click.echo(click.style(f"Scorecard written to {output}.", fg="green"))


@main.command()
@click.argument("handles", nargs=-1, required=True)
@click.option(
    "--output-dir",
    default="scorecards",
    show_default=True,
    type=click.Path(file_okay=False),
    help="Directory for scorecards and summary.json.",
)
@click.pass_context
def batch(ctx: click.Context, handles: tuple[str, ...], output_dir: str) -> None:
    """Run the score_batch pypyr pipeline over HANDLES."""
    from pypyr import pipelinerunner
    from hireability import PACKAGE_DIR

    pipeline_path = str(PACKAGE_DIR / "pipelines" / "score_batch")
    click.echo(
        click.style(f"Scoring {len(handles)} handles...", fg="cyan")
    )

    try:
        context = pipelinerunner.run(
            pipeline_name=pipeline_path,
            dict_in={
                "handles": list(handles),
                "output_dir": output_dir,
                "github_token": ctx.obj["token"],
                "api_url": ctx.obj["api_url"],
            },
        )
    except Exception as exc:
        logger.error("Pipeline failed: %s", exc)
        click.echo(click.style(f"Pipeline failed: {exc}", fg="red"))
        raise SystemExit(1)

    failed = context.get("failed_handles") or []
    click.echo(
        click.style(
            f"Done. {len(context.get('scorecard_paths') or [])} scorecards "
            f"written to {output_dir}.",
            fg="green",
        )
    )
    if failed:
        click.echo(
            click.style(f"Could not fetch: {', '.join(failed)}", fg="yellow")
        )
