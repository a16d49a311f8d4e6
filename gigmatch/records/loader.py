"""Load marketplace records from YAML."""
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

import yaml
from pydantic import BaseModel, ValidationError

from gigmatch.exceptions import InvalidRecordError, MarketplaceDataError, UnknownRecordError

from .base import Gig, InfluencerProfile, SponsorProfile
from .validators import GigRecord, InfluencerRecord, MarketplaceConfig, SponsorRecord

logger = logging.getLogger(__name__)


@dataclass
class Marketplace:
    """Influencers, gigs and sponsors loaded from one data file."""

    influencers: list[InfluencerProfile] = field(default_factory=list)
    gigs: list[Gig] = field(default_factory=list)
    sponsors: list[SponsorProfile] = field(default_factory=list)

    def influencer(self, influencer_id: str) -> InfluencerProfile:
        for influencer in self.influencers:
            if influencer.id == influencer_id:
                return influencer
        raise UnknownRecordError("influencer", influencer_id)

    def gig(self, gig_id: str) -> Gig:
        for gig in self.gigs:
            if gig.id == gig_id:
                return gig
        raise UnknownRecordError("gig", gig_id)

    def sponsor(self, sponsor_id: str) -> SponsorProfile:
        for sponsor in self.sponsors:
            if sponsor.id == sponsor_id:
                return sponsor
        raise UnknownRecordError("sponsor", sponsor_id)


def _validate_all(kind: str, model: type[BaseModel], entries: list[dict]) -> list:
    records = []
    for index, entry in enumerate(entries):
        try:
            records.append(model.model_validate(entry).to_record())
        except ValidationError as e:
            raise InvalidRecordError(kind, index, str(e)) from e
    return records


def parse_marketplace(data: dict) -> Marketplace:
    """
    Validate a marketplace dictionary and build the records.

    Args:
        data: Dictionary with optional `influencers`, `gigs`, `sponsors` lists

    Returns:
        Marketplace with frozen records

    Raises:
        InvalidRecordError: If any entry fails validation
    """
    try:
        config = MarketplaceConfig.model_validate(data or {})
    except ValidationError as e:
        raise InvalidRecordError("marketplace", 0, str(e)) from e

    return Marketplace(
        influencers=_validate_all("influencer", InfluencerRecord, config.influencers),
        gigs=_validate_all("gig", GigRecord, config.gigs),
        sponsors=_validate_all("sponsor", SponsorRecord, config.sponsors),
    )


def load_marketplace(path: Union[str, Path]) -> Marketplace:
    """Load and validate a marketplace YAML file."""
    path = Path(path)
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise MarketplaceDataError(f"Cannot read marketplace file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise MarketplaceDataError(f"Malformed YAML in {path}: {e}") from e

    if data is not None and not isinstance(data, dict):
        raise MarketplaceDataError(f"Expected a mapping at the top of {path}")

    marketplace = parse_marketplace(data)
    logger.info(
        "Loaded %d influencers, %d gigs, %d sponsors from %s",
        len(marketplace.influencers),
        len(marketplace.gigs),
        len(marketplace.sponsors),
        path,
    )
    return marketplace
