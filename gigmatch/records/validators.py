"""Pydantic validation models for marketplace data files."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .base import Gig, GigStatus, InfluencerProfile, SponsorProfile


def _filter_empty_strings(v):
    """Remove empty strings from lists."""
    if isinstance(v, list):
        return [str(item).strip() for item in v if item and str(item).strip()]
    return v


class InfluencerRecord(BaseModel):
    """Influencer entry."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(min_length=1)
    name: str = Field(default="")
    categories: list[str] = Field(default_factory=list)
    followers: int = Field(ge=0, default=0)
    engagement_rate: float = Field(ge=0, default=0.0, alias="engagementRate")
    rate_per_post: float = Field(ge=0, default=0.0, alias="ratePerPost")
    location: str = Field(default="")

    @field_validator("categories", mode="before")
    @classmethod
    def filter_empty_strings(cls, v):
        return _filter_empty_strings(v)

    def to_record(self) -> InfluencerProfile:
        return InfluencerProfile(
            id=self.id,
            name=self.name or self.id,
            categories=tuple(self.categories),
            followers=self.followers,
            engagement_rate=self.engagement_rate,
            rate_per_post=self.rate_per_post,
            location=self.location,
        )


class GigRecord(BaseModel):
    """Gig entry."""
    id: str = Field(min_length=1)
    title: str = Field(default="")
    categories: list[str] = Field(default_factory=list)
    requirements: list[str] = Field(default_factory=list)
    price: float = Field(ge=0, default=0.0)
    location: Optional[str] = Field(default=None)
    status: GigStatus = Field(default=GigStatus.OPEN)

    @field_validator("categories", "requirements", mode="before")
    @classmethod
    def filter_empty_strings(cls, v):
        return _filter_empty_strings(v)

    def to_record(self) -> Gig:
        return Gig(
            id=self.id,
            title=self.title or self.id,
            categories=tuple(self.categories),
            requirements=tuple(self.requirements),
            price=self.price,
            location=self.location,
            status=self.status,
        )


class SponsorRecord(BaseModel):
    """Sponsor entry."""
    id: str = Field(min_length=1)
    company: str = Field(default="")
    industry: str = Field(default="")
    location: str = Field(default="")

    def to_record(self) -> SponsorProfile:
        return SponsorProfile(
            id=self.id,
            company=self.company or self.id,
            industry=self.industry,
            location=self.location,
        )


class MarketplaceConfig(BaseModel):
    """Complete marketplace data file."""
    influencers: list[dict] = Field(default_factory=list)
    gigs: list[dict] = Field(default_factory=list)
    sponsors: list[dict] = Field(default_factory=list)

    @field_validator("influencers", "gigs", "sponsors", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        """A bare `gigs:` key in YAML loads as None."""
        return [] if v is None else v
