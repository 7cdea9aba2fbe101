"""GitHub REST client used to gather a candidate's public footprint.

Fetches the profile, up to 300 repositories (most recently pushed
first), and README samples for the most-starred original repositories.
No retry or backoff: a failed profile fetch raises, a failed repo page
ends pagination, and a failed README is skipped.
"""

import logging
from collections.abc import Sequence

import requests

from hireability import DEFAULT_API_URL
from hireability.models import CandidateData, Profile, Repository

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 20
MAX_PAGES = 3
PER_PAGE = 100
README_LIMIT = 3
README_SAMPLE_CHARS = 2000


class GitHubError(Exception):
    """Base class for retrieval failures."""


class CandidateNotFoundError(GitHubError):
    """The requested handle does not exist (HTTP 404)."""


class RateLimitExceededError(GitHubError):
    """GitHub refused the request, usually the anonymous rate limit (HTTP 403)."""


class GitHubAPIError(GitHubError):
    """Any other non-success response or transport failure."""


class GitHubClient:
    """Thin wrapper over the GitHub REST API.

    Args:
        token: Optional personal access token, sent as a bearer token.
        api_url: Base URL of the API (override for GitHub Enterprise).
        timeout: Per-request timeout in seconds.
        session: Optional :class:`requests.Session` to reuse.
    """

    def __init__(
        self,
        token: str | None = None,
        api_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.token = token
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # HTTP helpers
    # ------------------------------------------------------------------

    def get_headers(self, accept: str = "application/vnd.github+json") -> dict:
        """Return request headers, including auth when a token is set."""
        headers = {
            "Accept": accept,
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": "hireability",
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _get(
        self,
        path: str,
        params: dict | None = None,
        accept: str = "application/vnd.github+json",
    ) -> requests.Response:
        url = f"{self.api_url}{path}"
        try:
            return self.session.get(
                url,
                params=params,
                headers=self.get_headers(accept),
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise GitHubAPIError(f"Request to {url} failed: {exc}") from exc

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def fetch_profile(self, username: str) -> Profile:
        """Fetch ``/users/{username}``.

        Raises:
            CandidateNotFoundError: On HTTP 404.
            RateLimitExceededError: On HTTP 403.
            GitHubAPIError: On any other failure.
        """
        resp = self._get(f"/users/{username}")

        if resp.status_code == 404:
            raise CandidateNotFoundError(f"GitHub user '{username}' not found")
        if resp.status_code == 403:
            raise RateLimitExceededError(
                "GitHub API rate limit exceeded; set GITHUB_TOKEN to raise it"
            )
        if not resp.ok:
            raise GitHubAPIError(
                f"GitHub API failure: {resp.status_code} {resp.reason}"
            )

        try:
            data = resp.json()
        except ValueError as exc:
            raise GitHubAPIError("GitHub API returned non-JSON profile") from exc

        return Profile.from_api(data)

    def fetch_repositories(
        self,
        username: str,
        max_pages: int = MAX_PAGES,
        per_page: int = PER_PAGE,
    ) -> list[Repository]:
        """Fetch up to ``max_pages * per_page`` repositories, newest push first.

        Pagination stops early on a failed page, an empty page, or a
        page shorter than ``per_page``.

        Raises:
            GitHubAPIError: If a successful page is not a JSON list.
        """
        repos: list[Repository] = []

        for page in range(1, max_pages + 1):
            resp = self._get(
                f"/users/{username}/repos",
                params={"per_page": per_page, "page": page, "sort": "pushed"},
            )
            if not resp.ok:
                logger.warning(
                    "Repo page %d for %s failed (%d); stopping pagination",
                    page, username, resp.status_code,
                )
                break

            try:
                items = resp.json()
            except ValueError as exc:
                raise GitHubAPIError(
                    f"GitHub API returned non-JSON repo page {page}"
                ) from exc
            if not isinstance(items, list):
                raise GitHubAPIError(
                    f"GitHub API returned {type(items).__name__} for repo page "
                    f"{page}, expected a list"
                )
            if not items:
                break

            repos.extend(Repository.from_api(item) for item in items)
            if len(items) < per_page:
                break

        logger.info("Fetched %d repositories for %s", len(repos), username)
        return repos

    def fetch_top_readmes(
        self,
        username: str,
        repos: Sequence[Repository],
        limit: int = README_LIMIT,
        sample_chars: int = README_SAMPLE_CHARS,
    ) -> dict[str, str]:
        """Sample READMEs of the *limit* most-starred original repositories.

        Returns:
            A mapping of repository name to the first *sample_chars*
            characters of its README.  Repositories whose README could
            not be fetched are left out.
        """
        targets = sorted(
            (repo for repo in repos if not repo.fork),
            key=lambda repo: repo.stargazers_count,
            reverse=True,
        )[:limit]

        readmes: dict[str, str] = {}
        for repo in targets:
            try:
                resp = self._get(
                    f"/repos/{username}/{repo.name}/readme",
                    accept="application/vnd.github.raw",
                )
            except GitHubAPIError:
                logger.warning("Could not audit README of %s", repo.name)
                continue

            if resp.ok:
                readmes[repo.name] = resp.text[:sample_chars]
            else:
                logger.debug(
                    "No README for %s (%d)", repo.name, resp.status_code
                )

        return readmes

    def fetch_candidate(self, username: str) -> CandidateData:
        """Fetch profile, repositories, and README samples for *username*."""
        profile = self.fetch_profile(username)
        repos = self.fetch_repositories(username)
        readmes = self.fetch_top_readmes(username, repos)
        return CandidateData(profile=profile, repos=tuple(repos), readmes=readmes)
