"""
LEADSCOUT — Website Quality Assessor
Additive boolean-signal score. A weak site means a branding opportunity.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from adapters.base import PageSnapshot
from .contacts import extract_social_links


SIGNAL_WEIGHTS = {
    "ssl": 20,
    "mobile_viewport": 20,
    "logo": 15,
    "contact_page": 10,
    "images": 10,
    "modern_layout": 15,
    "social_presence": 10,
}

MIN_IMAGES = 5
GOOD_THRESHOLD = 70
AVERAGE_THRESHOLD = 40

MODERN_LAYOUT_HINTS = ("flex", "grid")


@dataclass
class QualityReport:
    score: int
    rating: str
    branding_needs: bool
    signals: Dict[str, bool] = field(default_factory=dict)
    load_time_ms: Optional[int] = None


def rate(score: int) -> Tuple[str, bool]:
    """Map a quality score to (rating, branding_needs)."""
    if score >= GOOD_THRESHOLD:
        return "Good", False
    if score >= AVERAGE_THRESHOLD:
        return "Average", True
    return "Poor", True


def quality_signals(snapshot: PageSnapshot, social: Optional[dict] = None) -> Dict[str, bool]:
    if social is None:
        social = extract_social_links(snapshot.anchors)
    return {
        "ssl": (snapshot.protocol or "").lower().rstrip(":") == "https",
        "mobile_viewport": bool(snapshot.has_viewport_meta),
        "logo": any("logo" in image.hint for image in snapshot.images),
        "contact_page": any(
            "contact" in f"{a.text} {a.href}".lower() for a in snapshot.anchors
        ),
        "images": (snapshot.image_count or 0) >= MIN_IMAGES,
        "modern_layout": any(
            hint in name.lower()
            for name in snapshot.class_names
            for hint in MODERN_LAYOUT_HINTS
        ),
        "social_presence": any(social.values()),
    }


def assess_quality(snapshot: PageSnapshot, social: Optional[dict] = None) -> QualityReport:
    """
    Score a page's website quality.

    Args:
        snapshot: The page to assess
        social: Already-extracted social links, to avoid a second anchor scan

    Returns:
        QualityReport with score in [0, 100]
    """
    signals = quality_signals(snapshot, social)
    score = sum(SIGNAL_WEIGHTS[name] for name, present in signals.items() if present)
    score = max(0, min(100, score))
    rating, branding_needs = rate(score)
    return QualityReport(
        score=score,
        rating=rating,
        branding_needs=branding_needs,
        signals=signals,
        load_time_ms=snapshot.load_time_ms,
    )
