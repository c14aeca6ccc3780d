"""LEADSCOUT Enrichment — Lead scoring."""
from .scoring import LeadScorer

__all__ = ["LeadScorer"]
