"""
LEADSCOUT — Discovery Package
Search query and URL builders for listing-style sources.
"""
from .searcher import build_queries, build_search_urls, query_from_url

__all__ = ["build_queries", "build_search_urls", "query_from_url"]
