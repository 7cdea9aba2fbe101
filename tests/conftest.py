"""Shared pytest fixtures for the hireability test suite.

Provides:
    now            -- fixed reference time shared by every scoring call
    make_repo      -- factory for Repository records pushed N days before now
    make_profile   -- factory for Profile records created N days before now
    repo_payload   -- factory for raw GitHub repo-listing items
    profile_payload -- a raw ``GET /users/{username}`` payload
    sample_metrics -- a Metrics record with known values
"""

import datetime

import pytest

from hireability.models import ActivityLevel, Metrics, Profile, Repository

NOW = datetime.datetime(2026, 10, 19, 12, 0, tzinfo=datetime.timezone.utc)


@pytest.fixture()
def now() -> datetime.datetime:
    return NOW


# ---------------------------------------------------------------------------
# Record factories
# ---------------------------------------------------------------------------

@pytest.fixture()
def make_repo():
    """Return a factory building a Repository pushed *days_ago* before NOW."""

    def _make_repo(name: str = "project", days_ago: float = 0, **overrides) -> Repository:
        fields = {
            "name": name,
            "pushed_at": NOW - datetime.timedelta(days=days_ago),
            "description": "",
            "stargazers_count": 0,
            "language": None,
            "size": 0,
            "fork": False,
            "has_issues": False,
            "has_projects": False,
            "has_pages": False,
        }
        fields.update(overrides)
        return Repository(**fields)

    return _make_repo


@pytest.fixture()
def make_profile():
    """Return a factory building a Profile created *days_ago* before NOW."""

    def _make_profile(days_ago: float = 0, followers: int = 0, login: str = "octocat") -> Profile:
        return Profile(
            login=login,
            created_at=NOW - datetime.timedelta(days=days_ago),
            followers=followers,
        )

    return _make_profile


# ---------------------------------------------------------------------------
# Raw API payloads
# ---------------------------------------------------------------------------

@pytest.fixture()
def profile_payload() -> dict:
    """A realistic ``GET /users/octocat`` response body."""
    return {
        "login": "octocat",
        "name": "The Octocat",
        "bio": "GitHub mascot",
        "avatar_url": "https://avatars.githubusercontent.com/u/583231",
        "html_url": "https://github.com/octocat",
        "location": "San Francisco",
        "blog": "https://github.blog",
        "public_repos": 8,
        "followers": 50,
        "following": 9,
        "created_at": "2011-01-25T18:44:36Z",
    }


@pytest.fixture()
def repo_payload():
    """Return a factory for one item of ``GET /users/{username}/repos``."""

    def _repo_payload(name: str = "hello-world", **overrides) -> dict:
        payload = {
            "name": name,
            "description": "My first repository on GitHub!",
            "stargazers_count": 10,
            "forks_count": 2,
            "language": "Python",
            "updated_at": "2026-10-01T10:00:00Z",
            "pushed_at": "2026-10-01T09:30:00Z",
            "created_at": "2020-05-05T05:05:05Z",
            "html_url": f"https://github.com/octocat/{name}",
            "size": 1024,
            "fork": False,
            "has_issues": True,
            "has_projects": False,
            "has_pages": False,
        }
        payload.update(overrides)
        return payload

    return _repo_payload


@pytest.fixture()
def sample_metrics() -> Metrics:
    """Metrics for the one-repo Go developer worked example."""
    return Metrics(
        total_score=57,
        activity_score=3,
        originality_score=20,
        diversity_score=8,
        documentation_score=15,
        follower_signal=5,
        complexity_score=7,
        repo_count_score=20,
        star_impact=5,
        activity_level=ActivityLevel.MODERATELY_ACTIVE,
        last_commit_date="2026-10-19T12:00:00.000Z",
        days_since_last_activity=0,
        recent_activity_velocity=1,
    )
