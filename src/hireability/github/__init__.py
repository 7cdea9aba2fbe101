"""GitHub retrieval sub-package -- fetches the data the engine scores.

Public API
----------
- :class:`GitHubClient` -- profile, repository, and README retrieval
- :class:`GitHubError` and its subclasses -- retrieval failures
"""

from hireability.github.client import (
    CandidateNotFoundError,
    GitHubAPIError,
    GitHubClient,
    GitHubError,
    RateLimitExceededError,
)

__all__ = [
    "CandidateNotFoundError",
    "GitHubAPIError",
    "GitHubClient",
    "GitHubError",
    "RateLimitExceededError",
]
