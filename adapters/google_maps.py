"""
LEADSCOUT — Maps Listing Adapter
Parses business cards from a rendered maps search results pane.
"""

import re
from typing import Optional

from .base import BaseListingAdapter, CompanyCandidate


class MapsListingAdapter(BaseListingAdapter):
    """
    Adapter for maps search results (https://www.google.com/maps/search/...)

    Every business is an element with role="article". Markup shifts often,
    so name and address each go through a selector fallback list.
    """

    card_selector = '[role="article"]'
    ignored_hosts = ("google.com", "maps.google", "gstatic.com")

    NAME_SELECTORS = [
        'div[font-weight="500"]',
        'div[font-weight="600"]',
        "h3",
        '[data-value="Directions"]',
        'div[class*="fontHeadline"]',
    ]

    ADDRESS_SELECTORS = [
        'button[data-value="Directions"]',
        'span[aria-label*="Address"]',
        'div[class*="fontBodyMedium"]',
    ]

    def parse_card(self, card) -> Optional[CompanyCandidate]:
        name = self._first_text(card, self.NAME_SELECTORS)
        if not name:
            return None

        return CompanyCandidate(
            company_name=name,
            domain=self._find_website(card),
            location=self._find_address(card),
        )

    def _find_address(self, card) -> Optional[str]:
        """First address-like text: must contain a comma or a digit."""
        for selector in self.ADDRESS_SELECTORS:
            el = card.select_one(selector)
            if el is None:
                continue
            text = el.get_text(strip=True) or el.get("aria-label", "") or ""
            if "," in text or re.search(r"\d", text):
                return text.strip()
        return None

    def _find_website(self, card) -> Optional[str]:
        for link in card.select("a[href]"):
            domain = self._website_domain(link.get("href", ""))
            if domain:
                return domain
        return None
