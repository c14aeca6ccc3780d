"""
LEADSCOUT — Company Name Strategies
Most reliable signal first, title-tag splitting last.
"""

import re
from typing import Optional

from adapters.base import PageSnapshot
from .chain import clean, first_match

MAX_HEADING_LENGTH = 80
# Hyphens only separate when spaced, so "Coca-Cola" survives
TITLE_SEPARATORS = re.compile(r"\s*\|\s*|\s+-\s+")


def from_site_name_meta(snapshot: PageSnapshot) -> Optional[str]:
    return snapshot.meta("og:site_name")


def from_application_name_meta(snapshot: PageSnapshot) -> Optional[str]:
    return snapshot.meta("application-name")


def from_heading(snapshot: PageSnapshot) -> Optional[str]:
    for heading in snapshot.headings:
        heading = clean(heading)
        if heading and len(heading) <= MAX_HEADING_LENGTH:
            return heading
    return None


def from_logo_alt(snapshot: PageSnapshot) -> Optional[str]:
    for image in snapshot.images:
        if "logo" in image.hint and image.alt:
            return re.sub(r"\blogo\b", " ", image.alt, flags=re.IGNORECASE)
    return None


def from_title(snapshot: PageSnapshot) -> Optional[str]:
    for part in TITLE_SEPARATORS.split(snapshot.title or ""):
        part = clean(part)
        if part:
            return part
    return None


COMPANY_NAME_STRATEGIES = [
    from_site_name_meta,
    from_application_name_meta,
    from_heading,
    from_logo_alt,
    from_title,
]


def extract_company_name(snapshot: PageSnapshot, errors=None) -> Optional[str]:
    return first_match(COMPANY_NAME_STRATEGIES, snapshot, errors)
