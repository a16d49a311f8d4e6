"""Matching service used by application code."""
import logging
from collections import deque
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Sequence
from uuid import uuid4

from config.settings import Settings, settings as default_settings
from gigmatch.matching.matcher import calculate_influencer_gig_match
from gigmatch.matching.models import GigMatch, InfluencerMatch, MatchScore
from gigmatch.matching.ranking import (
    find_best_gigs_for_influencer,
    find_best_influencers_for_gig,
    find_best_influencers_for_sponsor,
    influencer_opportunity_overview,
)
from gigmatch.records.base import Gig, InfluencerProfile, SponsorProfile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchRecord:
    """A match a user acted on."""

    id: str
    user_id: str
    target_id: str
    score: int
    timestamp: datetime


class MatchingService:
    """Run match lookups with configured defaults and keep a match history.

    The history lives in memory only; callers that need it to survive a
    restart must store the records themselves.
    """

    def __init__(self, config: Optional[Settings] = None):
        """
        Initialize matching service.

        Args:
            config: Settings providing default limits and budget
        """
        self.config = config or default_settings
        self._history: deque[MatchRecord] = deque(maxlen=self.config.match_history_size)

    def get_influencer_matches(
        self,
        influencer: InfluencerProfile,
        gigs: Sequence[Gig],
        limit: Optional[int] = None,
    ) -> list[GigMatch]:
        """Best open gigs for an influencer."""
        if limit is None:
            limit = self.config.gig_match_limit
        logger.info("Finding matches for influencer %s", influencer.name)
        matches = find_best_gigs_for_influencer(influencer, gigs, limit)
        logger.info("Found %d matches", len(matches))
        return matches

    def get_gig_matches(
        self,
        gig: Gig,
        influencers: Sequence[InfluencerProfile],
        limit: Optional[int] = None,
    ) -> list[InfluencerMatch]:
        """Best influencers for a gig."""
        if limit is None:
            limit = self.config.gig_match_limit
        logger.info("Finding matches for gig %s", gig.title)
        matches = find_best_influencers_for_gig(influencers, gig, limit)
        logger.info("Found %d matches", len(matches))
        return matches

    def get_sponsor_matches(
        self,
        sponsor: SponsorProfile,
        influencers: Sequence[InfluencerProfile],
        budget: Optional[float] = None,
        limit: Optional[int] = None,
    ) -> list[InfluencerMatch]:
        """Best influencers for a sponsor at the given per-post budget."""
        if budget is None:
            budget = self.config.sponsor_budget
        if limit is None:
            limit = self.config.sponsor_match_limit
        logger.info("Finding matches for sponsor %s", sponsor.company)
        matches = find_best_influencers_for_sponsor(sponsor, influencers, budget, limit)
        logger.info("Found %d matches", len(matches))
        return matches

    def get_agent_overview(
        self,
        influencers: Sequence[InfluencerProfile],
        gigs: Sequence[Gig],
        per_influencer: int = 3,
    ) -> list[InfluencerMatch]:
        """Influencers ranked by the quality of their best open gigs."""
        logger.info("Building opportunity overview for %d influencers", len(influencers))
        overview = influencer_opportunity_overview(influencers, gigs, per_influencer)
        logger.info("Found %d influencers with opportunities", len(overview))
        return overview

    def calculate_match(self, influencer: InfluencerProfile, gig: Gig) -> MatchScore:
        return calculate_influencer_gig_match(influencer, gig)

    def record_match(self, user_id: str, target_id: str, score: int) -> MatchRecord:
        """Remember that `user_id` acted on a match with `target_id`."""
        record = MatchRecord(
            id=f"match_{uuid4().hex}",
            user_id=user_id,
            target_id=target_id,
            score=score,
            timestamp=datetime.now(timezone.utc),
        )
        # Newest first; the deque drops the oldest entry when full
        self._history.appendleft(record)
        logger.info("Match recorded: %s -> %s (%d%%)", user_id, target_id, score)
        return record

    def get_match_history(self, user_id: str) -> list[MatchRecord]:
        """Recorded matches for a user, newest first."""
        return [r for r in self._history if r.user_id == user_id]

    @property
    def match_history(self) -> list[MatchRecord]:
        return list(self._history)


def get_matching_service(config: Optional[Settings] = None) -> MatchingService:
    """Factory: create a MatchingService from settings."""
    return MatchingService(config)
