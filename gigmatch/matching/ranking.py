"""Rank and filter match results across collections."""
import logging
from dataclasses import dataclass
from typing import Iterable, Sequence, TypeVar, Union

from gigmatch.matching.matcher import (
    calculate_influencer_gig_match,
    calculate_sponsor_influencer_match,
)
from gigmatch.matching.models import (
    DEFAULT_SPONSOR_BUDGET,
    MIN_MATCH_SCORE,
    Compatibility,
    GigMatch,
    InfluencerMatch,
    MatchBreakdown,
    MatchScore,
    round_half_up,
)
from gigmatch.records.base import Gig, InfluencerProfile, SponsorProfile

logger = logging.getLogger(__name__)

M = TypeVar("M", InfluencerMatch, GigMatch)


def _rank(matches: Iterable[M], limit: int) -> list[M]:
    """Drop matches under the cutoff, sort best first, keep top `limit`.

    The sort is stable, so equal scores keep their input order.
    """
    if limit <= 0:
        return []
    kept = [m for m in matches if m.match_score.score >= MIN_MATCH_SCORE]
    kept.sort(key=lambda m: m.match_score.score, reverse=True)
    return kept[:limit]


def find_best_influencers_for_gig(
    influencers: Sequence[InfluencerProfile],
    gig: Gig,
    limit: int = 10,
) -> list[InfluencerMatch]:
    """
    Rank influencers for a gig.

    Args:
        influencers: Candidate influencers
        gig: Gig to fill
        limit: Maximum number of results

    Returns:
        InfluencerMatch list, scores >= 50 only, best first
    """
    matches = (
        InfluencerMatch(
            influencer=influencer,
            match_score=calculate_influencer_gig_match(influencer, gig),
        )
        for influencer in influencers
    )
    ranked = _rank(matches, limit)
    logger.debug(
        "Gig %s: %d of %d influencers ranked", gig.id, len(ranked), len(influencers)
    )
    return ranked


def find_best_gigs_for_influencer(
    influencer: InfluencerProfile,
    gigs: Sequence[Gig],
    limit: int = 10,
) -> list[GigMatch]:
    """
    Rank open gigs for an influencer.

    Gigs that are not open are skipped before scoring.
    """
    open_gigs = [gig for gig in gigs if gig.is_open]
    matches = (
        GigMatch(gig=gig, match_score=calculate_influencer_gig_match(influencer, gig))
        for gig in open_gigs
    )
    ranked = _rank(matches, limit)
    logger.debug(
        "Influencer %s: %d of %d open gigs ranked (%d gigs total)",
        influencer.id, len(ranked), len(open_gigs), len(gigs),
    )
    return ranked


def find_best_influencers_for_sponsor(
    sponsor: SponsorProfile,
    influencers: Sequence[InfluencerProfile],
    budget: float = DEFAULT_SPONSOR_BUDGET,
    limit: int = 20,
) -> list[InfluencerMatch]:
    """
    Rank influencers for a sponsor.

    Args:
        sponsor: Sponsor looking for influencers
        influencers: Candidate influencers
        budget: Price the sponsor is willing to pay per post. Defaults to
            10000, which changes budget scores noticeably for low-rate
            influencers, so pass the real budget when known.
        limit: Maximum number of results
    """
    matches = (
        InfluencerMatch(
            influencer=influencer,
            match_score=calculate_sponsor_influencer_match(sponsor, influencer, budget),
        )
        for influencer in influencers
    )
    ranked = _rank(matches, limit)
    logger.debug(
        "Sponsor %s: %d of %d influencers ranked (budget %.2f)",
        sponsor.id, len(ranked), len(influencers), budget,
    )
    return ranked


def influencer_opportunity_overview(
    influencers: Sequence[InfluencerProfile],
    gigs: Sequence[Gig],
    per_influencer: int = 3,
) -> list[InfluencerMatch]:
    """
    Summarize how many good gigs each influencer has, for agents.

    Each influencer's summary score is the average of its top
    `per_influencer` gig matches. The breakdown is left at zero since it
    does not describe a single pairing.
    """
    summaries = []
    for influencer in influencers:
        gig_matches = find_best_gigs_for_influencer(influencer, gigs, per_influencer)
        if gig_matches:
            average = sum(m.match_score.score for m in gig_matches) / len(gig_matches)
        else:
            average = 0.0

        score = round_half_up(average)
        summaries.append(
            InfluencerMatch(
                influencer=influencer,
                match_score=MatchScore(
                    score=score,
                    breakdown=MatchBreakdown(),
                    reasons=[f"{len(gig_matches)} matching opportunities"],
                    compatibility=Compatibility.from_score(score),
                ),
            )
        )

    return _rank(summaries, len(summaries))


def filter_by_compatibility(
    matches: Sequence[M],
    minimum: Union[Compatibility, str],
) -> list[M]:
    """Keep matches whose compatibility tier is at least `minimum`."""
    threshold = Compatibility(minimum).rank
    return [m for m in matches if m.match_score.compatibility.rank >= threshold]


@dataclass
class MatchStats:
    """Headline numbers for a list of matches."""

    total: int
    excellent: int
    good: int
    average_score: int


def summarize_matches(matches: Sequence[Union[InfluencerMatch, GigMatch]]) -> MatchStats:
    """Count tiers and average the scores of a match list."""
    tiers = [m.match_score.compatibility for m in matches]
    average = (
        round_half_up(sum(m.match_score.score for m in matches) / len(matches))
        if matches
        else 0
    )
    return MatchStats(
        total=len(matches),
        excellent=tiers.count(Compatibility.EXCELLENT),
        good=tiers.count(Compatibility.GOOD),
        average_score=average,
    )
