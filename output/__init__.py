"""LEADSCOUT Output — Deduplication, CSV export and webhook notifications."""
from .csv_writer import CSVWriter
from .dedup import DedupLedger, ResultSet, check_floor
from .webhook import WebhookNotifier

__all__ = ["CSVWriter", "DedupLedger", "ResultSet", "check_floor", "WebhookNotifier"]
