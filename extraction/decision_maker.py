"""
LEADSCOUT — Decision-Maker Finder
Finds a named leader on the page, optionally hopping once to a team/about page.
"""

import logging
import re
from typing import Awaitable, Callable, Optional, Tuple
from urllib.parse import urljoin

from adapters.base import PageSnapshot, host_of

logger = logging.getLogger(__name__)


TEAM_LINK_PATTERN = re.compile(r"team|leadership|about|staff|management", re.IGNORECASE)

# Checked in this order; the first title with a hit wins
DECISION_MAKER_TITLES = [
    "CEO", "Founder", "Co-Founder", "President", "Director",
    "Owner", "Managing Director", "Partner",
]

NAME = r"([A-Z][a-z]+[ \t]+[A-Z][a-z]+)"
GAP = r"[^\n]*?"

Follow = Callable[[str], Awaitable[PageSnapshot]]


def _title_patterns(title: str):
    title_re = rf"\b(?i:{re.escape(title)})\b"
    return (
        re.compile(NAME + GAP + title_re),
        re.compile(title_re + GAP + NAME),
    )


TITLE_PATTERNS = [(title, _title_patterns(title)) for title in DECISION_MAKER_TITLES]


def _site_of(url: str) -> str:
    host = host_of(url)
    return host[4:] if host.startswith("www.") else host


def _on_site(url: str, site: str) -> bool:
    host = _site_of(url)
    return host == site or host.endswith("." + site)


def find_team_link(snapshot: PageSnapshot) -> Optional[str]:
    """
    Absolute URL of the first team/leadership/about link on the page's own
    site. Off-site links (social profiles, directories) are never followed.
    """
    site = _site_of(snapshot.url)
    for anchor in snapshot.anchors:
        href = (anchor.href or "").strip()
        if not href or href.startswith(("mailto:", "tel:", "javascript:", "#")):
            continue
        if not (TEAM_LINK_PATTERN.search(anchor.text or "") or TEAM_LINK_PATTERN.search(href)):
            continue
        url = urljoin(snapshot.url, href)
        if site and not _on_site(url, site):
            continue
        return url
    return None


def match_decision_maker(text: str) -> Optional[Tuple[str, str]]:
    """
    Search text for a "Name ... Title" or "Title ... Name" pair.

    Returns:
        (name, title) for the first title in DECISION_MAKER_TITLES that
        matches in either direction, or None
    """
    if not text:
        return None
    for title, (name_first, title_first) in TITLE_PATTERNS:
        for pattern in (name_first, title_first):
            match = pattern.search(text)
            if match:
                return match.group(1), title
    return None


async def find_decision_maker(
    snapshot: PageSnapshot,
    follow: Optional[Follow] = None,
) -> Optional[Tuple[str, str]]:
    """
    Two-phase lookup: locate a team page link and, when a navigator is
    supplied, search that page instead of the current one. A failed hop
    leaves the decision maker unknown.
    """
    target = snapshot
    team_url = find_team_link(snapshot)
    if team_url and follow is not None:
        try:
            target = await follow(team_url)
        except Exception as e:
            logger.warning(f"  ⚠️ Team page {team_url} unavailable: {e}")
            return None
    return match_decision_maker(target.text)
