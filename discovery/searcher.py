"""
LEADSCOUT — Search Query Builder
Builds varied maps / web search URLs for an industry + location pair.
"""

import random
import urllib.parse
from typing import List, Optional
from urllib.parse import urlparse

MAPS_SEARCH_URL = "https://www.google.com/maps/search/{query}"
WEB_SEARCH_URL = "https://www.google.com/search?q={query}"

# Qualifiers mixed into queries so repeated runs surface different results
QUALIFIERS = [
    "best", "top", "leading", "premier", "reliable",
    "established", "professional", "trusted", "quality",
    "popular", "famous", "well-known", "reputable", "successful",
]


def build_queries(industry: str, location: str) -> List[str]:
    return [
        f"{industry} companies in {location}",
        f"{industry} businesses in {location}",
        f"{industry} firms in {location}",
        f"{industry} in {location}",
        f"{location} {industry} companies",
    ]


def randomize(query: str, rng: Optional[random.Random] = None) -> str:
    """Mix a qualifier or a structure variant into a query."""
    rng = rng or random
    term = rng.choice(QUALIFIERS)
    structures = [
        f"{term} {query}",
        f"{query} {term}",
        f"{query} companies",
        f"{query} businesses",
        f"{query} firms",
    ]
    return rng.choice(structures)


def maps_url(query: str) -> str:
    return MAPS_SEARCH_URL.format(query=urllib.parse.quote(query))


def web_search_url(query: str) -> str:
    return WEB_SEARCH_URL.format(query=urllib.parse.quote_plus(query))


def build_search_urls(
    industry: str,
    location: str,
    rng: Optional[random.Random] = None,
    search_count: int = 2,
) -> List[str]:
    """
    One maps URL per base query, then `search_count` web search URLs.

    Pass a seeded random.Random for reproducible URL lists.
    """
    rng = rng or random.Random()
    queries = build_queries(industry, location)

    urls = [maps_url(randomize(q, rng)) for q in queries]
    for _ in range(search_count):
        urls.append(web_search_url(randomize(rng.choice(queries), rng)))
    return urls


def is_maps_url(url: str) -> bool:
    parsed = urlparse(url)
    return parsed.netloc.startswith("maps.") or parsed.path.startswith("/maps")


def query_from_url(url: str) -> str:
    """Recover the search text from a maps or web search URL."""
    parsed = urlparse(url)
    if is_maps_url(url):
        path = parsed.path
        for prefix in ("/maps/search/", "/search/"):
            if path.startswith(prefix):
                path = path[len(prefix):]
                break
        return urllib.parse.unquote(path).strip("/")
    return urllib.parse.parse_qs(parsed.query).get("q", [""])[0]
