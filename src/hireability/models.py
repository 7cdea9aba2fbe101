"""Records passed into and out of the hireability scoring engine.

Inputs (:class:`Profile`, :class:`Repository`) are frozen pydantic models
built from GitHub REST payloads with ``from_api``.  Their timestamps are
always aware UTC, even when constructed directly from naive values, so
the engine can trust them and never raises.

Outputs (:class:`Metrics`, :class:`Evaluation`) are frozen and serialise
to the camelCase dict contract consumed downstream via ``to_dict``.
"""

from __future__ import annotations

import datetime
import enum
from dataclasses import dataclass, field
from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    model_validator,
)

# Sentinels reported when a profile has no repositories at all.
UNKNOWN_DATE = "N/A"
UNKNOWN_DAYS = 999


class InvalidRecordError(ValueError):
    """Raised when a profile or repository payload cannot be trusted."""


class ActivityLevel(enum.Enum):
    """How recently and how broadly a developer has pushed code."""

    HIGHLY_ACTIVE = "Highly Active"
    MODERATELY_ACTIVE = "Moderately Active"
    INACTIVE = "Inactive"


class HiringTier(enum.Enum):
    """Qualitative verdict produced by an evaluator (never by the engine)."""

    ELITE = "Elite"
    STRONG_HIRE = "Strong Hire"
    HIREABLE = "Hireable"
    NEEDS_IMPROVEMENT = "Needs Improvement"
    REJECT = "Reject"

    @classmethod
    def parse(cls, value: str) -> HiringTier:
        """Resolve *value* by member name (``STRONG_HIRE``) or label.

        Raises:
            ValueError: If *value* matches no tier.
        """
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        key = text.upper().replace(" ", "_")
        if key in cls.__members__:
            return cls.__members__[key]
        for tier in cls:
            if tier.value.lower() == text.lower():
                return tier
        raise ValueError(f"Unknown hiring tier: {value!r}")


# ---------------------------------------------------------------------------
# Timestamp helpers
# ---------------------------------------------------------------------------

def _as_utc(value: datetime.datetime) -> datetime.datetime:
    if value.tzinfo is None:
        value = value.replace(tzinfo=datetime.timezone.utc)
    return value.astimezone(datetime.timezone.utc)


# GitHub sends ISO-8601 with a ``Z`` suffix; naive values are taken as UTC.
UtcDatetime = Annotated[datetime.datetime, AfterValidator(_as_utc)]
# Strict so that ``True`` and ``"12"`` are not accepted as counts.
Count = Annotated[int, Field(strict=True, ge=0)]

_timestamp_adapter = TypeAdapter(UtcDatetime)


def parse_timestamp(value: Any) -> datetime.datetime:
    """Parse an ISO-8601 timestamp into an aware UTC ``datetime``.

    Raises:
        InvalidRecordError: If *value* is not a parseable timestamp.
    """
    try:
        return _timestamp_adapter.validate_python(value)
    except ValidationError as exc:
        raise InvalidRecordError(f"Malformed timestamp: {value!r}") from exc


def format_timestamp(value: datetime.datetime) -> str:
    """Render *value* as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` in UTC."""
    utc = _as_utc(value)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------

class _Record(BaseModel):
    """Frozen pydantic model shared by the GitHub payload records."""

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        # GitHub reports absent optional values as null; fall back to defaults.
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

    @classmethod
    def from_api(cls, data: Any):
        """Validate a GitHub REST payload.

        Raises:
            InvalidRecordError: If the payload is not a usable record.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise InvalidRecordError(str(exc)) from exc


class Profile(_Record):
    """A GitHub user.  Only ``created_at`` and ``followers`` are scored.

    Built from a ``GET /users/{username}`` payload with ``from_api``.
    """

    login: str = Field(min_length=1)
    created_at: UtcDatetime
    followers: Count = 0
    name: str | None = None
    bio: str | None = None
    avatar_url: str | None = None
    html_url: str | None = None
    location: str | None = None
    blog: str | None = None
    public_repos: Count = 0
    following: Count = 0


class Repository(_Record):
    """A GitHub repository as listed by ``GET /users/{username}/repos``."""

    name: str = Field(min_length=1)
    pushed_at: UtcDatetime
    description: str = ""
    stargazers_count: Count = 0
    language: str | None = None
    size: Count = 0
    fork: bool = False
    has_issues: bool = False
    has_projects: bool = False
    has_pages: bool = False
    html_url: str | None = None
    forks_count: Count = 0

    @model_validator(mode="before")
    @classmethod
    def fill_push_time(cls, data: Any) -> Any:
        # Empty repositories report ``pushed_at: null``; use creation time.
        if isinstance(data, dict):
            data = dict(data)
            if not data.get("pushed_at") and data.get("created_at"):
                data["pushed_at"] = data["created_at"]
            if data.get("language") == "":
                del data["language"]
        return data

    @property
    def uses_platform_features(self) -> bool:
        return self.has_issues or self.has_projects or self.has_pages


@dataclass(frozen=True)
class CandidateData:
    """Everything the retrieval layer gathers about one handle."""

    profile: Profile
    repos: tuple[Repository, ...] = ()
    readmes: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> CandidateData:
        """Build from ``{"profile": {...}, "repos": [...], "readmes": {...}}``."""
        if not isinstance(data, dict):
            raise InvalidRecordError("Candidate payload must be a mapping")
        repos_raw = data.get("repos") or []
        if not isinstance(repos_raw, list):
            raise InvalidRecordError("Candidate field 'repos' must be a list")
        readmes = data.get("readmes") or {}
        if not isinstance(readmes, dict):
            raise InvalidRecordError("Candidate field 'readmes' must be a mapping")
        return cls(
            profile=Profile.from_api(data.get("profile")),
            repos=tuple(Repository.from_api(item) for item in repos_raw),
            readmes={str(k): str(v) for k, v in readmes.items()},
        )


# ---------------------------------------------------------------------------
# Outputs
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Metrics:
    """Scored result for one profile.

    ``repo_count_score`` mirrors ``originality_score`` and ``star_impact``
    carries only the star component of ``diversity_score``; downstream
    consumers read both under these names.
    """

    total_score: int
    activity_score: int
    originality_score: int
    diversity_score: int
    documentation_score: int
    follower_signal: int
    complexity_score: int
    repo_count_score: int
    star_impact: int
    activity_level: ActivityLevel
    last_commit_date: str
    days_since_last_activity: int
    recent_activity_velocity: int

    def to_dict(self) -> dict:
        return {
            "totalScore": self.total_score,
            "repoCountScore": self.repo_count_score,
            "starImpact": self.star_impact,
            "activityScore": self.activity_score,
            "diversityScore": self.diversity_score,
            "followerSignal": self.follower_signal,
            "documentationScore": self.documentation_score,
            "originalityScore": self.originality_score,
            "complexityScore": self.complexity_score,
            "activityLevel": self.activity_level.value,
            "lastCommitDate": self.last_commit_date,
            "daysSinceLastActivity": self.days_since_last_activity,
            "recentActivityVelocity": self.recent_activity_velocity,
        }


@dataclass(frozen=True)
class Evaluation:
    """Qualitative verdict attached to a :class:`Metrics` record."""

    tier: HiringTier
    strengths: tuple[str, ...] = ()
    risks: tuple[str, ...] = ()
    verdict: str = ""
    recommendations: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "tier": self.tier.value,
            "strengths": list(self.strengths),
            "risks": list(self.risks),
            "verdict": self.verdict,
            "recommendations": list(self.recommendations),
        }
