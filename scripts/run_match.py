#!/usr/bin/env python3
"""Run match lookups against a marketplace data file.

Usage:
    python scripts/run_match.py gigs --influencer inf-1
    python scripts/run_match.py influencers --gig gig-7 --limit 5
    python scripts/run_match.py sponsor --sponsor sp-2 --budget 4000
    python scripts/run_match.py overview --min-tier good

Environment variables:
    MARKETPLACE_FILE: Default data file (overridden by --data)
    LOG_LEVEL: Log level for console output
    ENGINE_LOG_LEVEL: Separate level for the matching engine loggers
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence, Union

# Bootstrap imports
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from scripts.bootstrap import get_matching_service, settings
from gigmatch.exceptions import MarketplaceDataError
from gigmatch.logging_config import setup_logging
from gigmatch.matching.models import Compatibility, GigMatch, InfluencerMatch
from gigmatch.matching.ranking import filter_by_compatibility, summarize_matches
from gigmatch.records.loader import load_marketplace

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Find influencer, gig and sponsor matches.")
    parser.add_argument(
        "--data",
        type=Path,
        default=None,
        help="Marketplace YAML file (defaults to MARKETPLACE_FILE or config/marketplace.yaml).",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum number of matches to show.",
    )
    parser.add_argument(
        "--min-tier",
        choices=[c.value for c in Compatibility],
        default=None,
        help="Only show matches at or above this compatibility tier.",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    gigs = sub.add_parser("gigs", help="Best open gigs for an influencer.")
    gigs.add_argument("--influencer", required=True, help="Influencer id.")

    influencers = sub.add_parser("influencers", help="Best influencers for a gig.")
    influencers.add_argument("--gig", required=True, help="Gig id.")

    sponsor = sub.add_parser("sponsor", help="Best influencers for a sponsor.")
    sponsor.add_argument("--sponsor", required=True, help="Sponsor id.")
    sponsor.add_argument(
        "--budget",
        type=float,
        default=None,
        help="Per-post budget (defaults to SPONSOR_BUDGET, 10000).",
    )

    sub.add_parser("overview", help="Influencers ranked by their best open gigs.")
    return parser


def format_match(match: Union[GigMatch, InfluencerMatch]) -> str:
    """One display line per match."""
    score = match.match_score
    if isinstance(match, GigMatch):
        label = match.gig.title
    else:
        label = match.influencer.name
    reasons = ", ".join(score.reasons) or "-"
    return f"{score.score:>3}  {score.compatibility.value:<9}  {label}  ({reasons})"


def main(argv: Optional[Sequence[str]] = None) -> int:
    setup_logging(settings.log_level, settings.log_file, settings.engine_log_level)

    args = build_parser().parse_args(argv)
    data_path = args.data or settings.marketplace_path
    service = get_matching_service()

    try:
        marketplace = load_marketplace(data_path)

        if args.command == "gigs":
            influencer = marketplace.influencer(args.influencer)
            matches = service.get_influencer_matches(influencer, marketplace.gigs, args.limit)
        elif args.command == "influencers":
            gig = marketplace.gig(args.gig)
            matches = service.get_gig_matches(gig, marketplace.influencers, args.limit)
        elif args.command == "sponsor":
            sponsor = marketplace.sponsor(args.sponsor)
            matches = service.get_sponsor_matches(
                sponsor, marketplace.influencers, args.budget, args.limit
            )
        else:
            matches = service.get_agent_overview(marketplace.influencers, marketplace.gigs)
            if args.limit is not None:
                matches = matches[: max(args.limit, 0)]
    except MarketplaceDataError as e:
        logger.error("Error: %s", e)
        return 1

    if args.min_tier:
        matches = filter_by_compatibility(matches, args.min_tier)

    for match in matches:
        print(format_match(match))

    stats = summarize_matches(matches)
    print(
        f"{stats.total} matches ({stats.excellent} excellent, {stats.good} good), "
        f"average score {stats.average_score}"
    )
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.info("Interrupted.")
        sys.exit(1)
