"""Match score structures and fixed scoring constants."""
import math
from dataclasses import dataclass, field, fields
from enum import Enum

from gigmatch.records.base import Gig, InfluencerProfile

# Matches scoring below this are treated as noise and never ranked
MIN_MATCH_SCORE = 50

# Counterparty price used by sponsor matching when the caller gives no budget
DEFAULT_SPONSOR_BUDGET = 10000.0


class Compatibility(str, Enum):
    """Qualitative bucket derived from a numeric match score."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"

    @classmethod
    def from_score(cls, score: float) -> "Compatibility":
        if score >= 85:
            return cls.EXCELLENT
        if score >= 70:
            return cls.GOOD
        if score >= 55:
            return cls.FAIR
        return cls.POOR

    @property
    def rank(self) -> int:
        """Ordering key, higher is better."""
        return {"poor": 0, "fair": 1, "good": 2, "excellent": 3}[self.value]


@dataclass(frozen=True)
class MatchWeights:
    """Relative weight of each factor in a combined score."""

    category: float
    follower_size: float
    budget: float
    location: float
    engagement: float
    price_compatibility: float = 0.0

    def total(self) -> float:
        return sum(getattr(self, f.name) for f in fields(self))


GIG_MATCH_WEIGHTS = MatchWeights(
    category=0.30,
    follower_size=0.20,
    budget=0.20,
    location=0.10,
    engagement=0.15,
    price_compatibility=0.05,
)

# Sponsor data is coarser: no price compatibility, follower size is a tier
SPONSOR_MATCH_WEIGHTS = MatchWeights(
    category=0.35,
    follower_size=0.10,
    budget=0.25,
    location=0.15,
    engagement=0.15,
)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class MatchBreakdown:
    """Per-factor sub-scores, each 0-100."""

    category_match: int = 0
    follower_size_match: int = 0
    budget_match: int = 0
    location_match: int = 0
    engagement_rate: int = 0
    price_compatibility: int = 0

    def as_dict(self) -> dict[str, int]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class MatchScore:
    """Result of scoring one subject against one counterparty."""

    score: int  # 0-100
    breakdown: MatchBreakdown
    reasons: list[str] = field(default_factory=list, hash=False)
    compatibility: Compatibility = Compatibility.POOR


@dataclass
class InfluencerMatch:
    """An influencer with its match score."""

    influencer: InfluencerProfile
    match_score: MatchScore
    # Never populated by the ranking functions
    recommended_gigs: list[Gig] = field(default_factory=list)

    @property
    def score(self) -> int:
        return self.match_score.score


@dataclass
class GigMatch:
    """A gig with its match score."""

    gig: Gig
    match_score: MatchScore

    @property
    def score(self) -> int:
        return self.match_score.score
