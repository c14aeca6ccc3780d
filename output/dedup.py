"""
LEADSCOUT — Deduplication Ledger & Result Set
Run-scoped name/domain ledger and the capacity-bounded accepted-record list.
"""

import logging
import threading
from typing import Iterator, List, Optional

from adapters.base import host_of

logger = logging.getLogger(__name__)

MIN_RESULTS = 10


def normalize_name(name) -> Optional[str]:
    if not isinstance(name, str):
        return None
    key = name.strip().lower()
    return key or None


def normalize_domain(value) -> Optional[str]:
    """Lowercase host without 'www.'; accepts bare hosts or full URLs."""
    if not isinstance(value, str) or not value.strip():
        return None
    value = value.strip()
    host = host_of(value if "://" in value else "https://" + value)
    if host.startswith("www."):
        host = host[4:]
    return host or None


class DedupLedger:
    """
    Set-based record of accepted company names and domains.

    admit() is the only mutation entry point. It checks and registers both
    keys under one lock, so concurrent callers never interleave.
    """

    def __init__(self):
        self._names: set = set()
        self._domains: set = set()
        self._lock = threading.Lock()

    def admit(self, name, domain=None) -> bool:
        name_key = normalize_name(name)
        if not name_key:
            return False
        domain_key = normalize_domain(domain)

        with self._lock:
            if name_key in self._names:
                return False
            if domain_key and domain_key in self._domains:
                return False
            self._names.add(name_key)
            if domain_key:
                self._domains.add(domain_key)
            return True

    def has_name(self, name) -> bool:
        return normalize_name(name) in self._names

    def has_domain(self, domain) -> bool:
        return normalize_domain(domain) in self._domains

    def __len__(self) -> int:
        return len(self._names)


class ResultSet:
    """
    Ordered accepted records, bounded by target_results.

    First accepted wins. Once full, offers are refused before the ledger is
    consulted, so a refused candidate's keys are never marked as seen.
    """

    def __init__(self, target_results: int, ledger: Optional[DedupLedger] = None):
        if target_results < 0:
            raise ValueError("target_results must be >= 0")
        self.target_results = target_results
        self.ledger = ledger if ledger is not None else DedupLedger()
        self._records: List = []
        self._lock = threading.Lock()

    @property
    def is_full(self) -> bool:
        return len(self._records) >= self.target_results

    @property
    def remaining(self) -> int:
        return max(0, self.target_results - len(self._records))

    def offer(self, record, name_attr: str = "company_name") -> bool:
        """Admit a record if there is room and its name/domain are unseen."""
        with self._lock:
            if self.is_full:
                return False
            domain = getattr(record, "domain", None)
            # A nameless lead is keyed by its domain instead
            name = getattr(record, name_attr, None) or domain
            if not self.ledger.admit(name, domain):
                return False
            self._records.append(record)
            return True

    @property
    def records(self) -> List:
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator:
        return iter(list(self._records))


def check_floor(count: int, minimum: int = MIN_RESULTS) -> Optional[str]:
    """Low yield is a warning, never a failure."""
    if count < minimum:
        warning = f"Only found {count} records. Minimum requirement is {minimum}."
        logger.warning(f"  ⚠️ {warning}")
        return warning
    return None
