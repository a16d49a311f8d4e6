"""Pytest fixtures for gigmatch tests."""
import sys
from pathlib import Path

import pytest
import yaml

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from config.settings import Settings
from gigmatch.records.base import Gig, GigStatus, InfluencerProfile, SponsorProfile


# =============================================================================
# RECORD FIXTURES
# =============================================================================


@pytest.fixture
def fitness_influencer():
    """Mid-size fitness creator in Los Angeles."""
    return InfluencerProfile(
        id="inf-1",
        name="Maya Torres",
        categories=("Fitness", "Wellness"),
        followers=125000,
        engagement_rate=4.2,
        rate_per_post=2500,
        location="Los Angeles, CA",
    )


@pytest.fixture
def fitness_gig():
    """Fitness gig in Los Angeles asking for 50k+ followers."""
    return Gig(
        id="gig-1",
        title="Spring training challenge",
        categories=("Fitness",),
        requirements=("50k+ followers",),
        price=3000,
        location="Los Angeles, CA",
    )


@pytest.fixture
def perfect_pair():
    """Influencer and gig that max out every factor."""
    influencer = InfluencerProfile(
        id="inf-star",
        name="Star",
        categories=("Fitness",),
        followers=100000,
        engagement_rate=8.5,
        rate_per_post=1000,
        location="Los Angeles, CA",
    )
    gig = Gig(
        id="gig-star",
        title="Perfect fit",
        categories=("Fitness",),
        requirements=("50k+ followers",),
        price=1000,
        location="Los Angeles, CA",
    )
    return influencer, gig


@pytest.fixture
def poor_influencer():
    """Influencer that fits the fitness gig badly on every factor."""
    return InfluencerProfile(
        id="inf-poor",
        name="Off Target",
        categories=("Cooking",),
        followers=1000,
        engagement_rate=1.0,
        rate_per_post=5000,
        location="Austin, TX",
    )


@pytest.fixture
def sports_sponsor():
    return SponsorProfile(
        id="sp-1",
        company="Stride Athletics",
        industry="Sports & Fitness",
        location="Los Angeles, CA",
    )


@pytest.fixture
def influencer_pool(fitness_influencer, poor_influencer, perfect_pair):
    """Influencers of mixed quality, deliberately not in score order."""
    return [poor_influencer, fitness_influencer, perfect_pair[0]]


@pytest.fixture
def gig_pool(fitness_gig):
    """Open and closed gigs."""
    closed = Gig(
        id="gig-closed",
        title="Winter hydration campaign",
        categories=("Fitness", "Wellness"),
        requirements=("50k+ followers",),
        price=2500,
        location="Los Angeles, CA",
        status=GigStatus.COMPLETED,
    )
    off_topic = Gig(
        id="gig-fashion",
        title="Milan fashion week coverage",
        categories=("Fashion",),
        requirements=("200k+ followers",),
        price=7000,
        location="Milan, Italy",
    )
    return [closed, off_topic, fitness_gig]


# =============================================================================
# CONFIG FIXTURES
# =============================================================================


@pytest.fixture
def test_settings():
    """Settings isolated from any local .env file."""
    return Settings(_env_file=None, match_history_size=3)


@pytest.fixture
def marketplace_data():
    """Marketplace dictionary using the app's camelCase keys."""
    return {
        "influencers": [
            {
                "id": "inf-1",
                "name": "Maya Torres",
                "categories": ["Fitness", "Wellness", ""],
                "followers": 125000,
                "engagementRate": 4.2,
                "ratePerPost": 2500,
                "location": "Los Angeles, CA",
            },
            {
                "id": "inf-2",
                "name": "Ana Kim",
                "categories": ["Food"],
                "followers": 9000,
                "engagement_rate": 3.1,
                "rate_per_post": 300,
                "location": "Austin, TX",
            },
        ],
        "gigs": [
            {
                "id": "gig-1",
                "title": "Spring training challenge",
                "categories": ["Fitness"],
                "requirements": ["50k+ followers"],
                "price": 3000,
                "location": "Los Angeles, CA",
                "status": "open",
            },
            {
                "id": "gig-2",
                "title": "Winter hydration campaign",
                "categories": ["Fitness"],
                "price": 2000,
                "status": "completed",
            },
        ],
        "sponsors": [
            {
                "id": "sp-1",
                "company": "Stride Athletics",
                "industry": "Sports & Fitness",
                "location": "Los Angeles, CA",
            },
        ],
    }


@pytest.fixture
def marketplace_file(tmp_path, marketplace_data):
    """Marketplace YAML written to a temp file."""
    path = tmp_path / "marketplace.yaml"
    with open(path, "w") as f:
        yaml.dump(marketplace_data, f)
    return path
