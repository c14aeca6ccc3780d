"""
LEADSCOUT — CSV Writer
Streams accepted records to CSV as they are finalized.
"""

import csv
import logging
from pathlib import Path
from typing import Dict, List

from adapters.base import CompanyRecord, LeadRecord

logger = logging.getLogger(__name__)


class CSVWriter:
    """
    Appends one row per accepted record:
    - leads.csv for LeadRecord, companies.csv for CompanyRecord
    - header written once per file
    - None written as an empty cell, errors joined with '; '
    """

    LEAD_FIELDS = [
        ("Company Name", "company_name"),
        ("Website", "website_url"),
        ("Email", "email"),
        ("Phone", "phone"),
        ("LinkedIn", "linkedin"),
        ("Facebook", "facebook"),
        ("Twitter", "twitter"),
        ("Instagram", "instagram"),
        ("Location", "location"),
        ("Industry", "industry"),
        ("Website Quality Score", "website_quality_score"),
        ("Website Quality Rating", "website_quality_rating"),
        ("Branding Needs", "branding_needs"),
        ("Decision Maker", "decision_maker_name"),
        ("Decision Maker Role", "decision_maker_role"),
        ("Lead Score", "lead_score"),
        ("Scraped At", "scraped_at"),
        ("Errors", "errors"),
    ]

    COMPANY_FIELDS = [
        ("Company Name", "company_name"),
        ("Domain", "domain"),
        ("Location", "location"),
        ("Industry", "industry"),
        ("Scraped At", "scraped_at"),
    ]

    FILENAMES = {LeadRecord: "leads.csv", CompanyRecord: "companies.csv"}

    def __init__(self, output_dir: str = "data"):
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self._written: Dict[str, int] = {}

    def _columns(self, record) -> List[tuple]:
        return self.LEAD_FIELDS if isinstance(record, LeadRecord) else self.COMPANY_FIELDS

    def path_for(self, record) -> Path:
        return self.output_dir / self.FILENAMES[type(record)]

    @staticmethod
    def _cell(value):
        if value is None:
            return ""
        if isinstance(value, list):
            return "; ".join(str(v) for v in value)
        return value

    def append(self, record) -> str:
        """
        Append a single record to its CSV file.

        Returns:
            Path to the file written
        """
        columns = self._columns(record)
        filepath = self.path_for(record)
        new_file = not filepath.exists() or filepath.stat().st_size == 0

        with open(filepath, "a", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            if new_file:
                writer.writerow([header for header, _ in columns])
            writer.writerow([self._cell(getattr(record, attr, None)) for _, attr in columns])

        key = str(filepath)
        self._written[key] = self._written.get(key, 0) + 1
        return key

    @property
    def stats(self) -> dict:
        return dict(self._written)
