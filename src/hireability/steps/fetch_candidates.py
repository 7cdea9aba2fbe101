"""pypyr step: fetch GitHub data for every handle in the batch.

Usage in a pipeline YAML::

    steps:
      - name: hireability.steps.fetch_candidates

Context keys consumed:
    handles (list[str]): GitHub usernames to fetch.
    github_token (str, optional): API token.  Falls back to the
        ``GITHUB_TOKEN`` env var.
    api_url (str, optional): API base URL.  Falls back to the
        ``HIREABILITY_API_URL`` env var, then the public API.

Context keys produced:
    candidates (list[CandidateData]): One entry per handle fetched.
    failed_handles (list[str]): Handles that could not be fetched.
"""

import logging
import os

from hireability import DEFAULT_API_URL
from hireability.github import GitHubClient, GitHubError
from hireability.models import InvalidRecordError

logger = logging.getLogger(__name__)


def run_step(context: dict) -> None:
    """pypyr entry-point: fetch each handle, skipping failures."""
    handles: list[str] = context.get("handles") or []
    token = context.get("github_token") or os.environ.get("GITHUB_TOKEN")
    api_url = (
        context.get("api_url")
        or os.environ.get("HIREABILITY_API_URL")
        or DEFAULT_API_URL
    )

    client = GitHubClient(token=token, api_url=api_url)

    candidates = []
    failed: list[str] = []
    for handle in handles:
        try:
            candidates.append(client.fetch_candidate(handle))
        except (GitHubError, InvalidRecordError):
            logger.exception("Error fetching %s, skipping", handle)
            failed.append(handle)

    context["candidates"] = candidates
    context["failed_handles"] = failed

    logger.info(
        "Fetched %d of %d candidates (%d failed)",
        len(candidates), len(handles), len(failed),
    )
