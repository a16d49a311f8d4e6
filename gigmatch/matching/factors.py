"""Factor functions for match scoring.

Every factor is a pure function returning a float on a 0-100 scale.
Rounding is left to the aggregation step.
"""
import re
from typing import Iterable, Optional, Sequence

# Cities treated as one global-influencer market
INTERNATIONAL_HUBS = frozenset(
    {"london", "paris", "milan", "tokyo", "dubai", "barcelona"}
)

NEUTRAL_FOLLOWER_SCORE = 75.0
NEUTRAL_LOCATION_SCORE = 50.0
NEUTRAL_BUDGET_SCORE = 50.0

_FOLLOWER_PATTERN = re.compile(r"(\d+)k\+", re.IGNORECASE)


def _fuzzy_equal(a: str, b: str) -> bool:
    """True if either lowercased string contains the other."""
    a, b = a.lower(), b.lower()
    return a in b or b in a


def category_match(
    subject_categories: Sequence[str],
    target_categories: Sequence[str],
) -> float:
    """
    Category overlap between two free-text taxonomies.

    A subject category counts as matched when it is a case-insensitive
    substring of any target category or vice versa, so "Fitness" matches
    "Fitness & Wellness".

    Returns:
        matched / max(len(subject), len(target)) * 100, or 0 if none match
    """
    matches = sum(
        1
        for cat in subject_categories
        if any(_fuzzy_equal(cat, target) for target in target_categories)
    )
    if matches == 0:
        return 0.0
    return matches / max(len(subject_categories), len(target_categories)) * 100


def parse_follower_requirement(requirements: Iterable[str]) -> Optional[int]:
    """
    Extract a minimum follower count from free-text requirements.

    Only the first requirement mentioning "follower" or "k+" is inspected,
    and it must contain a "<N>k+" token (e.g. "50k+ followers").

    Returns:
        Required follower count, or None when no usable requirement exists
        (no candidate line, no "<N>k+" token, or a zero requirement).
    """
    candidate = next(
        (
            req for req in requirements
            if "follower" in req.lower() or "k+" in req.lower()
        ),
        None,
    )
    if candidate is None:
        return None

    match = _FOLLOWER_PATTERN.search(candidate)
    if not match:
        return None

    required = int(match.group(1)) * 1000
    return required or None


def follower_size_match(followers: int, requirements: Iterable[str]) -> float:
    """Audience size fit against a gig's stated follower requirement."""
    required = parse_follower_requirement(requirements)
    if required is None:
        return NEUTRAL_FOLLOWER_SCORE

    if followers >= required:
        ratio = followers / required
        if ratio <= 3:
            return 100.0
        if ratio <= 5:
            return 85.0
        # Heavily over-qualified accounts usually blow the budget
        return 70.0

    # Under the threshold: partial credit, capped below any qualifying score
    return min(followers / required * 100, 50.0)


def budget_match(rate: float, price: float) -> float:
    """
    Fit between an influencer's rate and the offered price.

    Both underpaying and overpaying move the score down the same tiers;
    a premium of up to 1.3x still counts as a full match.
    """
    if rate <= 0:
        return NEUTRAL_BUDGET_SCORE

    ratio = price / rate
    if 0.9 <= ratio <= 1.3:
        return 100.0
    if 0.7 <= ratio < 0.9 or 1.3 < ratio <= 1.5:
        return 85.0
    if 0.5 <= ratio < 0.7 or 1.5 < ratio <= 2:
        return 70.0
    if 0.3 <= ratio < 0.5 or 2 < ratio <= 3:
        return 50.0
    return 30.0


def _location_segment(location: str, index: int) -> Optional[str]:
    parts = location.split(",")
    if index >= len(parts):
        return None
    return parts[index].strip().lower()


def location_match(subject_location: str, target_location: Optional[str]) -> float:
    """Proximity of two "City, Region" locations."""
    if not target_location:
        return NEUTRAL_LOCATION_SCORE

    subject_city = _location_segment(subject_location or "", 0)
    target_city = _location_segment(target_location, 0)
    if subject_city == target_city:
        return 100.0

    subject_region = _location_segment(subject_location or "", 1)
    target_region = _location_segment(target_location, 1)
    if subject_region and target_region and subject_region == target_region:
        return 70.0

    if subject_city in INTERNATIONAL_HUBS and target_city in INTERNATIONAL_HUBS:
        return 60.0

    return 40.0


def engagement_score(engagement_rate: float) -> float:
    """Tiered engagement quality from a percentage rate."""
    if engagement_rate >= 8:
        return 100.0
    if engagement_rate >= 6:
        return 90.0
    if engagement_rate >= 4:
        return 75.0
    if engagement_rate >= 2:
        return 60.0
    return 40.0


def price_compatibility(rate: float, price: float) -> float:
    """One-directional check that the price covers enough of the rate."""
    if price >= rate * 0.8:
        return 100.0
    if price >= rate * 0.6:
        return 75.0
    if price >= rate * 0.4:
        return 50.0
    return 25.0


def follower_tier_score(followers: int) -> float:
    """Coarse audience tier used when there is no requirement to parse."""
    if followers >= 100_000:
        return 100.0
    if followers >= 50_000:
        return 85.0
    if followers >= 10_000:
        return 70.0
    return 50.0


def industry_match(industry: str, categories: Sequence[str]) -> float:
    """
    Sponsor industry vs influencer categories.

    The industry is split on "&" into sub-industries ("Sports & Fitness"
    -> "sports", "fitness"); any fuzzy overlap scores 85, otherwise 50.
    """
    tokens = [t.strip() for t in industry.lower().split("&")]
    # Blank segments ("Fitness &", "") are dropped; an empty token would
    # otherwise be a substring of every category and always score 85
    tokens = [t for t in tokens if t]

    for cat in categories:
        if any(_fuzzy_equal(cat, token) for token in tokens):
            return 85.0
    return 50.0
