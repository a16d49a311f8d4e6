"""Marketplace value records consumed by the matching engine."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class GigStatus(str, Enum):
    """Lifecycle state of a gig listing."""

    OPEN = "open"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


def _clean_strings(values) -> tuple[str, ...]:
    """Strip entries and drop blanks, returning an immutable tuple."""
    return tuple(v.strip() for v in values if v and v.strip())


@dataclass(frozen=True)
class InfluencerProfile:
    """Influencer fields relevant to matching."""

    id: str
    name: str
    categories: tuple[str, ...] = ()
    followers: int = 0
    engagement_rate: float = 0.0  # percent, typically 0-15
    rate_per_post: float = 0.0
    location: str = ""

    def __post_init__(self):
        object.__setattr__(self, "categories", _clean_strings(self.categories))


@dataclass(frozen=True)
class Gig:
    """Sponsor-posted opportunity listing."""

    id: str
    title: str
    categories: tuple[str, ...] = ()
    requirements: tuple[str, ...] = ()
    price: float = 0.0
    location: Optional[str] = None
    status: GigStatus = GigStatus.OPEN

    def __post_init__(self):
        object.__setattr__(self, "categories", _clean_strings(self.categories))
        # Requirement order matters for follower parsing, keep it as given
        object.__setattr__(self, "requirements", tuple(self.requirements))
        if not isinstance(self.status, GigStatus):
            object.__setattr__(self, "status", GigStatus(self.status))

    @property
    def is_open(self) -> bool:
        return self.status is GigStatus.OPEN


@dataclass(frozen=True)
class SponsorProfile:
    """Sponsor fields relevant to matching."""

    id: str
    company: str
    industry: str = ""
    location: str = ""
