"""LEADSCOUT Adapters — Page snapshots, record models and listing parsers."""
from .base import (
    Anchor, ImageRef, PageSnapshot, ExtractedFields, LeadRecord,
    CompanyRecord, CompanyCandidate, BaseListingAdapter,
)
from .google_maps import MapsListingAdapter
from .google_search import SearchListingAdapter
from .snapshot import build_snapshot

__all__ = [
    "Anchor", "ImageRef", "PageSnapshot", "ExtractedFields", "LeadRecord",
    "CompanyRecord", "CompanyCandidate", "BaseListingAdapter",
    "MapsListingAdapter", "SearchListingAdapter", "build_snapshot",
]
