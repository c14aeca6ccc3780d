"""LEADSCOUT Extraction — Heuristic field extractors and the lead assembly pipeline."""
from .chain import ExtractionError, first_match
from .pipeline import extract_lead

__all__ = ["ExtractionError", "first_match", "extract_lead"]
