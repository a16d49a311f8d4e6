"""Influencer, gig and sponsor matching."""
from .matcher import calculate_influencer_gig_match, calculate_sponsor_influencer_match
from .models import (
    Compatibility,
    GigMatch,
    InfluencerMatch,
    MatchBreakdown,
    MatchScore,
)
from .ranking import (
    find_best_gigs_for_influencer,
    find_best_influencers_for_gig,
    find_best_influencers_for_sponsor,
    influencer_opportunity_overview,
)
from .service import MatchingService, get_matching_service

__all__ = [
    "calculate_influencer_gig_match",
    "calculate_sponsor_influencer_match",
    "find_best_gigs_for_influencer",
    "find_best_influencers_for_gig",
    "find_best_influencers_for_sponsor",
    "influencer_opportunity_overview",
    "Compatibility",
    "GigMatch",
    "InfluencerMatch",
    "MatchBreakdown",
    "MatchScore",
    "MatchingService",
    "get_matching_service",
]
