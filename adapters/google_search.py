"""
LEADSCOUT — Search Results Adapter
Parses organic web search results into company candidates.
"""

import re
from typing import Optional

from .base import BaseListingAdapter, CompanyCandidate


SEARCH_LOCATION_PATTERNS = [
    re.compile(r"([A-Z][a-z]+(?:\s+[A-Z][a-z]+)*,\s*[A-Z]{2,})"),
    re.compile(r"([A-Z][a-z]+(?:\s+[A-Z][a-z]+)*,\s*[A-Z][a-z]+)"),
    re.compile(r"\b(?i:located in|based in|in)\s+([A-Z][a-z]+(?:\s+[A-Z][a-z]+)*)"),
]


class SearchListingAdapter(BaseListingAdapter):
    """
    Adapter for web search result pages.

    Each organic result's <h3> is taken as the company name; directory and
    social hosts are not accepted as the company's domain.
    """

    card_selector = "div[data-ved] h3, .g h3"
    max_cards = 30
    ignored_hosts = (
        "google.com", "youtube.com", "facebook.com", "linkedin.com", "twitter.com",
    )

    SNIPPET_SELECTOR = ".VwiC3b, .s, .IsZvec"

    def parse_card(self, heading) -> Optional[CompanyCandidate]:
        name = heading.get_text(strip=True)
        if not name:
            return None

        container = heading.find_parent(class_="g") or heading.parent
        if container is None:
            return None

        if container.name == "a" and container.get("href"):
            link = container
        else:
            link = container.select_one("a[href]")
        domain = self._website_domain(link.get("href", "")) if link else None

        snippet_el = container.select_one(self.SNIPPET_SELECTOR)
        snippet = snippet_el.get_text(" ", strip=True) if snippet_el else ""
        full_text = f"{snippet} {container.get_text(' ', strip=True)}"

        return CompanyCandidate(
            company_name=name,
            domain=domain,
            location=self._find_location(full_text),
        )

    @staticmethod
    def _find_location(text: str) -> Optional[str]:
        for pattern in SEARCH_LOCATION_PATTERNS:
            match = pattern.search(text)
            if match:
                return match.group(1).strip()
        return None
