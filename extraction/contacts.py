"""
LEADSCOUT — Contact & Social Extraction
Regex detectors for email and phone, plus social profile links from anchors.
"""

import re
from typing import Dict, Iterable, Optional

from adapters.base import Anchor, host_of


# ── Email ─────────────────────────────────────────

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")

# Placeholder, no-reply and role addresses are never a lead's contact
EXCLUDED_EMAIL_PATTERNS = [
    re.compile(p, re.IGNORECASE) for p in (
        r"example\.com",
        r"yourdomain",
        r"placeholder",
        r"^no-?reply@",
        r"^privacy@",
        r"^abuse@",
    )
]


def is_excluded_email(email: str) -> bool:
    return any(p.search(email) for p in EXCLUDED_EMAIL_PATTERNS)


def extract_email(text: str) -> Optional[str]:
    """First email in the text that is not on the exclusion list."""
    for match in EMAIL_PATTERN.findall(text or ""):
        if not is_excluded_email(match):
            return match
    return None


# ── Phone ─────────────────────────────────────────

# Precedence list: the first pattern with any hit wins
PHONE_PATTERNS = [
    re.compile(r"(?:\+?1[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}"),
    re.compile(r"\+\d{1,3}[-.\s]?\(?\d{1,4}\)?(?:[-.\s]?\d{2,4}){2,4}"),
]


def extract_phone(text: str) -> Optional[str]:
    for pattern in PHONE_PATTERNS:
        match = pattern.search(text or "")
        if match:
            return match.group(0).strip() or None
    return None


# ── Social ────────────────────────────────────────

SOCIAL_PLATFORMS = {
    "linkedin": ("linkedin.com",),
    "facebook": ("facebook.com",),
    "twitter": ("twitter.com", "x.com"),
    "instagram": ("instagram.com",),
}


def _on_domain(host: str, domain: str) -> bool:
    return host == domain or host.endswith("." + domain)


def extract_social_links(anchors: Iterable[Anchor]) -> Dict[str, Optional[str]]:
    """
    Map each platform to the first anchor pointing at it.

    Returns:
        {"linkedin": str|None, "facebook": ..., "twitter": ..., "instagram": ...}
    """
    found: Dict[str, Optional[str]] = {platform: None for platform in SOCIAL_PLATFORMS}
    for anchor in anchors:
        host = host_of(anchor.href)
        if not host:
            continue
        for platform, domains in SOCIAL_PLATFORMS.items():
            if found[platform] is None and any(_on_domain(host, d) for d in domains):
                found[platform] = anchor.href.strip()
    return found
