"""
LEADSCOUT — Data Models & Base Listing Adapter
Shared record types for the extraction pipeline, plus the abstract base
that listing-style adapters (maps / search results) extend.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, asdict
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple
from urllib.parse import parse_qs, urlparse

from bs4 import BeautifulSoup


def utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


def host_of(url: str) -> str:
    """Lowercased host of a URL, '' when it has none (relative links, junk)."""
    try:
        return (urlparse(url).hostname or "").lower()
    except ValueError:
        return ""


def unwrap_redirect(href: str) -> str:
    """Resolve Google-style '/url?q=<target>' redirects to their target."""
    if href and "/url?q=" in href:
        query = href.split("?", 1)[1]
        target = parse_qs(query).get("q", [""])[0]
        return target or href
    return href


# ──────────────────────────────────────────────────
#  Page Snapshot
# ──────────────────────────────────────────────────

@dataclass(frozen=True)
class Anchor:
    href: str
    text: str = ""


@dataclass(frozen=True)
class ImageRef:
    src: str = ""
    alt: str = ""
    css_class: str = ""

    @property
    def hint(self) -> str:
        return f"{self.src} {self.alt} {self.css_class}".lower()


@dataclass(frozen=True)
class PageSnapshot:
    """
    Read-only capture of one rendered page, as handed over by the navigator.

    The extraction core only ever reads from it. Every field has an empty
    default so a snapshot of a blank page is still valid input.
    """
    url: str = ""
    text: str = ""
    title: str = ""
    meta_tags: Dict[str, str] = field(default_factory=dict)
    anchors: Tuple[Anchor, ...] = ()
    image_count: int = 0
    has_viewport_meta: bool = False
    protocol: str = ""
    load_time_ms: Optional[int] = None
    headings: Tuple[str, ...] = ()
    footer_text: str = ""
    images: Tuple[ImageRef, ...] = ()
    class_names: Tuple[str, ...] = ()

    def meta(self, key: str) -> str:
        return self.meta_tags.get(key.lower(), "") or ""


# ──────────────────────────────────────────────────
#  Output Records
# ──────────────────────────────────────────────────

@dataclass
class ExtractedFields:
    """Typed fields pulled from a page. None means 'not found'."""
    company_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    linkedin: Optional[str] = None
    facebook: Optional[str] = None
    twitter: Optional[str] = None
    instagram: Optional[str] = None
    location: Optional[str] = None
    industry: Optional[str] = None
    website_quality_score: Optional[int] = None
    website_quality_rating: Optional[str] = None
    branding_needs: Optional[bool] = None
    decision_maker_name: Optional[str] = None
    decision_maker_role: Optional[str] = None


@dataclass
class LeadRecord(ExtractedFields):
    """A single lead extracted from a company website."""
    website_url: str = ""
    lead_score: int = 0
    scraped_at: str = field(default_factory=utc_now)
    errors: List[str] = field(default_factory=list)

    @property
    def domain(self) -> Optional[str]:
        host = host_of(self.website_url)
        if host.startswith("www."):
            host = host[4:]
        return host or None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class CompanyRecord:
    """A company found on a listing page (maps / search results)."""
    company_name: str
    domain: Optional[str] = None
    location: Optional[str] = None
    industry: Optional[str] = None
    scraped_at: str = field(default_factory=utc_now)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class CompanyCandidate:
    """Raw listing entry before normalization and dedup."""
    company_name: str
    domain: Optional[str] = None
    location: Optional[str] = None


# ──────────────────────────────────────────────────
#  Base Listing Adapter
# ──────────────────────────────────────────────────

class BaseListingAdapter(ABC):
    """
    Abstract base for listing-page parsers.
    Subclasses implement parse_card() with source-specific selectors;
    the base class handles card iteration and per-card failure isolation.
    """

    card_selector = "div"
    max_cards: Optional[int] = None

    # Hosts that never count as the company's own website
    ignored_hosts: Tuple[str, ...] = ("google.com", "gstatic.com")

    @property
    def name(self) -> str:
        return self.__class__.__name__

    def parse(self, html: str) -> List[CompanyCandidate]:
        """Parse a rendered listing page into company candidates."""
        soup = BeautifulSoup(html or "", "html.parser")
        cards = soup.select(self.card_selector)
        if self.max_cards is not None:
            cards = cards[:self.max_cards]

        results = []
        for card in cards:
            try:
                candidate = self.parse_card(card)
            except Exception:
                continue
            if candidate and len(candidate.company_name) > 1:
                results.append(candidate)
        return results

    @abstractmethod
    def parse_card(self, card) -> Optional[CompanyCandidate]:
        """
        Parse a single listing card.

        Args:
            card: A BeautifulSoup Tag representing one result

        Returns:
            CompanyCandidate or None if the card has no usable name
        """

    # ── Utility helpers for subclasses ──

    def _first_text(self, card, selectors) -> Optional[str]:
        """Text of the first selector that yields non-blank text."""
        for selector in selectors:
            el = card.select_one(selector)
            if el is not None:
                text = el.get_text(strip=True)
                if text:
                    return text
        return None

    def _website_domain(self, href: str) -> Optional[str]:
        """Bare domain for an http(s) link, None for ignored or invalid hosts."""
        href = unwrap_redirect(href or "")
        if not href.startswith(("http://", "https://")):
            return None
        host = host_of(href)
        if not host or any(ignored in host for ignored in self.ignored_hosts):
            return None
        return host[4:] if host.startswith("www.") else host
