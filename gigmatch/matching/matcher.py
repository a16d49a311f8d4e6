"""Combine factor scores into a single match score."""
from gigmatch.matching.factors import (
    budget_match,
    category_match,
    engagement_score,
    follower_size_match,
    follower_tier_score,
    industry_match,
    location_match,
    price_compatibility,
)
from gigmatch.matching.models import (
    DEFAULT_SPONSOR_BUDGET,
    GIG_MATCH_WEIGHTS,
    SPONSOR_MATCH_WEIGHTS,
    Compatibility,
    MatchBreakdown,
    MatchScore,
    MatchWeights,
    round_half_up,
)
from gigmatch.records.base import Gig, InfluencerProfile, SponsorProfile


def _weighted_score(
    weights: MatchWeights,
    category: float,
    follower_size: float,
    budget: float,
    location: float,
    engagement: float,
    price: float = 0.0,
) -> float:
    score = (
        category * weights.category
        + follower_size * weights.follower_size
        + budget * weights.budget
        + location * weights.location
        + engagement * weights.engagement
        + price * weights.price_compatibility
    )
    return min(100.0, max(0.0, score))


def _build_score(
    score: float,
    category: float,
    follower_size: float,
    budget: float,
    location: float,
    engagement: float,
    price: float,
    reasons: list[str],
) -> MatchScore:
    rounded = round_half_up(score)
    return MatchScore(
        score=rounded,
        breakdown=MatchBreakdown(
            category_match=round_half_up(category),
            follower_size_match=round_half_up(follower_size),
            budget_match=round_half_up(budget),
            location_match=round_half_up(location),
            engagement_rate=round_half_up(engagement),
            price_compatibility=round_half_up(price),
        ),
        reasons=reasons,
        compatibility=Compatibility.from_score(rounded),
    )


def calculate_influencer_gig_match(
    influencer: InfluencerProfile,
    gig: Gig,
) -> MatchScore:
    """
    Score how well an influencer fits a gig.

    Weights:
    - Category overlap: 30%
    - Follower size vs requirement: 20%
    - Budget fit: 20%
    - Engagement: 15%
    - Location: 10%
    - Price compatibility: 5%

    Args:
        influencer: Influencer being considered
        gig: Gig listing

    Returns:
        MatchScore with rounded breakdown, reasons and compatibility tier
    """
    category = category_match(influencer.categories, gig.categories)
    follower_size = follower_size_match(influencer.followers, gig.requirements)
    budget = budget_match(influencer.rate_per_post, gig.price)
    location = location_match(influencer.location, gig.location)
    engagement = engagement_score(influencer.engagement_rate)
    price = price_compatibility(influencer.rate_per_post, gig.price)

    score = _weighted_score(
        GIG_MATCH_WEIGHTS, category, follower_size, budget, location, engagement, price
    )

    # One message per factor, highest tier only
    reasons: list[str] = []

    if category >= 80:
        reasons.append("Perfect category match")
    elif category >= 60:
        reasons.append("Good category alignment")

    if follower_size >= 90:
        reasons.append("Ideal audience size")
    elif follower_size >= 70:
        reasons.append("Good audience reach")

    if budget >= 85:
        reasons.append("Budget perfectly aligned")
    elif budget >= 70:
        reasons.append("Budget compatible")

    if location >= 90:
        reasons.append("Same location")
    elif location >= 60:
        reasons.append("Regional match")

    # Raw rate, not the tiered engagement score
    if influencer.engagement_rate >= 7:
        reasons.append("Exceptional engagement rate")
    elif influencer.engagement_rate >= 5:
        reasons.append("Strong engagement")

    if price >= 90:
        reasons.append("Price expectations met")

    return _build_score(
        score, category, follower_size, budget, location, engagement, price, reasons
    )


def calculate_sponsor_influencer_match(
    sponsor: SponsorProfile,
    influencer: InfluencerProfile,
    sponsor_budget: float = DEFAULT_SPONSOR_BUDGET,
) -> MatchScore:
    """
    Score how well an influencer fits a sponsor.

    Sponsor profiles carry an industry instead of categories and no
    follower requirement, so category is a two-level industry check and
    audience size is a coarse tier. The budget factor doubles as the
    price compatibility sub-score.

    Weights:
    - Industry/category: 35%
    - Budget fit: 25%
    - Location: 15%
    - Engagement: 15%
    - Follower tier: 10%
    """
    category = industry_match(sponsor.industry, influencer.categories)
    budget = budget_match(influencer.rate_per_post, sponsor_budget)
    location = location_match(influencer.location, sponsor.location)
    engagement = engagement_score(influencer.engagement_rate)
    follower_tier = follower_tier_score(influencer.followers)

    score = _weighted_score(
        SPONSOR_MATCH_WEIGHTS, category, follower_tier, budget, location, engagement
    )

    reasons: list[str] = []
    if category >= 80:
        reasons.append("Industry alignment")
    if budget >= 80:
        reasons.append("Budget compatible")
    if location >= 80:
        reasons.append("Location match")
    if influencer.engagement_rate >= 6:
        reasons.append("High engagement")
    if influencer.followers >= 500_000:
        reasons.append("Large audience")

    return _build_score(
        score, category, follower_tier, budget, location, engagement, budget, reasons
    )
