"""Marketplace records and data loading."""
from .base import Gig, GigStatus, InfluencerProfile, SponsorProfile
from .loader import Marketplace, load_marketplace, parse_marketplace

__all__ = [
    "Gig",
    "GigStatus",
    "InfluencerProfile",
    "SponsorProfile",
    "Marketplace",
    "load_marketplace",
    "parse_marketplace",
]
