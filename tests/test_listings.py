"""
LEADSCOUT — Listing Adapter Tests
Covers: maps and web search result parsing, search URL builders.
Run with: python -m pytest tests/test_listings.py -v
"""

import os
import random
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from adapters.base import unwrap_redirect
from adapters.google_maps import MapsListingAdapter
from adapters.google_search import SearchListingAdapter
from discovery.searcher import (
    build_queries, build_search_urls, is_maps_url, maps_url, query_from_url, web_search_url,
)


MAPS_HTML = """
<div role="feed">
  <div role="article">
    <div font-weight="500">Acme Plumbing</div>
    <span aria-label="Address: 123 Main St, Austin, TX">123 Main St, Austin, TX</span>
    <a href="https://www.google.com/maps/place/acme">Directions</a>
    <a href="https://www.acmeplumbing.com/">Website</a>
  </div>
  <div role="article">
    <h3>Beta Builders</h3>
    <div class="fontBodyMedium">Open now</div>
    <a href="/url?q=https://betabuilders.io/home&amp;sa=U">Website</a>
  </div>
  <div role="article">
    <div font-weight="500">X</div>
  </div>
  <div role="article"><span>Sponsored</span></div>
</div>
"""

SEARCH_HTML = """
<div id="search">
  <div class="g">
    <a href="https://www.acmelaw.com/"><h3>Acme Law Group</h3></a>
    <div class="VwiC3b">Trusted attorneys serving Austin, TX since 1990.</div>
  </div>
  <div class="g">
    <a href="https://www.linkedin.com/company/beta-legal"><h3>Beta Legal</h3></a>
    <div class="VwiC3b">Beta Legal is based in Dallas and handles contracts.</div>
  </div>
</div>
"""


# ──────────────────────────────────────────────────
#  Maps
# ──────────────────────────────────────────────────

class TestMapsAdapter:
    def setup_method(self):
        self.adapter = MapsListingAdapter()

    def test_parses_named_cards_only(self):
        found = self.adapter.parse(MAPS_HTML)
        assert [c.company_name for c in found] == ["Acme Plumbing", "Beta Builders"]

    def test_website_skips_maps_links(self):
        acme = self.adapter.parse(MAPS_HTML)[0]
        assert acme.domain == "acmeplumbing.com"
        assert acme.location == "123 Main St, Austin, TX"

    def test_redirect_link_unwrapped(self):
        beta = self.adapter.parse(MAPS_HTML)[1]
        assert beta.domain == "betabuilders.io"

    def test_non_address_text_ignored(self):
        beta = self.adapter.parse(MAPS_HTML)[1]
        assert beta.location is None

    def test_empty_page(self):
        assert self.adapter.parse("") == []
        assert self.adapter.parse(None) == []


# ──────────────────────────────────────────────────
#  Web Search
# ──────────────────────────────────────────────────

class TestSearchAdapter:
    def setup_method(self):
        self.adapter = SearchListingAdapter()

    def test_parses_results(self):
        found = self.adapter.parse(SEARCH_HTML)
        assert [c.company_name for c in found] == ["Acme Law Group", "Beta Legal"]

    def test_domain_and_location(self):
        acme = self.adapter.parse(SEARCH_HTML)[0]
        assert acme.domain == "acmelaw.com"
        assert acme.location == "Austin, TX"

    def test_social_result_has_no_domain(self):
        beta = self.adapter.parse(SEARCH_HTML)[1]
        assert beta.domain is None
        assert beta.location == "Dallas"

    def test_card_limit(self):
        cards = "".join(
            f'<div class="g"><a href="https://c{i}.com"><h3>Company {i}</h3></a></div>'
            for i in range(40)
        )
        assert len(self.adapter.parse(cards)) == 30


class TestRedirects:
    def test_unwrap(self):
        assert unwrap_redirect("/url?q=https://acme.com/&sa=U") == "https://acme.com/"

    def test_plain_link_untouched(self):
        assert unwrap_redirect("https://acme.com") == "https://acme.com"


# ──────────────────────────────────────────────────
#  Search URL Builders
# ──────────────────────────────────────────────────

class TestSearcher:
    def test_queries(self):
        queries = build_queries("Legal", "Austin")
        assert len(queries) == 5
        assert queries[0] == "Legal companies in Austin"
        assert all("Legal" in q and "Austin" in q for q in queries)

    def test_url_mix(self):
        urls = build_search_urls("Legal", "Austin", random.Random(7))
        assert len(urls) == 7
        assert all(is_maps_url(u) for u in urls[:5])
        assert not any(is_maps_url(u) for u in urls[5:])

    def test_seeded_rng_is_reproducible(self):
        first = build_search_urls("Legal", "Austin", random.Random(42))
        second = build_search_urls("Legal", "Austin", random.Random(42))
        assert first == second

    def test_maps_query_recovered(self):
        url = maps_url("law firms in Austin")
        assert url == "https://www.google.com/maps/search/law%20firms%20in%20Austin"
        assert query_from_url(url) == "law firms in Austin"

    def test_web_query_recovered(self):
        url = web_search_url("law firms in Austin")
        assert url == "https://www.google.com/search?q=law+firms+in+Austin"
        assert query_from_url(url) == "law firms in Austin"
