"""
LEADSCOUT — Lead Extraction Pipeline
Runs every field extractor over one snapshot and assembles a scored LeadRecord.

A failing extractor never aborts the page: its field stays None and the
failure is recorded on the record's error list.
"""

import logging
from typing import Callable, List, Optional

from adapters.base import LeadRecord, PageSnapshot
from enrichment.scoring import LeadScorer
from .chain import ExtractionError, clean
from .classify import classify_industry, extract_location
from .contacts import extract_email, extract_phone, extract_social_links
from .decision_maker import Follow, find_decision_maker
from .fields import extract_company_name
from .quality import assess_quality

logger = logging.getLogger(__name__)

_scorer = LeadScorer()


def _attempt(field_name: str, fn: Callable, errors: List[str], default=None):
    try:
        return fn()
    except Exception as e:
        err = ExtractionError(field_name, e)
        logger.debug(f"  ❌ {err}")
        errors.append(str(err))
        return default


async def extract_lead(
    snapshot: PageSnapshot,
    follow: Optional[Follow] = None,
    scorer: Optional[LeadScorer] = None,
) -> LeadRecord:
    """
    Extract, assemble and score one lead.

    Args:
        snapshot: Rendered page content
        follow: Optional coroutine fetching a snapshot for a URL, used for the
                single hop to a team/about page
        scorer: LeadScorer to use (module default otherwise)

    Returns:
        LeadRecord, always; extraction problems are listed in record.errors
    """
    errors: List[str] = []
    record = LeadRecord(website_url=snapshot.url, errors=errors)

    record.company_name = _attempt(
        "company_name", lambda: extract_company_name(snapshot, errors), errors
    )
    record.email = _attempt("email", lambda: clean(extract_email(snapshot.text)), errors)
    record.phone = _attempt("phone", lambda: clean(extract_phone(snapshot.text)), errors)

    social = _attempt("social", lambda: extract_social_links(snapshot.anchors), errors, {})
    record.linkedin = social.get("linkedin")
    record.facebook = social.get("facebook")
    record.twitter = social.get("twitter")
    record.instagram = social.get("instagram")

    record.location = _attempt("location", lambda: clean(extract_location(snapshot)), errors)
    record.industry = _attempt(
        "industry",
        lambda: classify_industry(snapshot.text, snapshot.meta("description")),
        errors,
    )

    quality = _attempt("website_quality", lambda: assess_quality(snapshot, social), errors)
    if quality is not None:
        record.website_quality_score = quality.score
        record.website_quality_rating = quality.rating
        record.branding_needs = quality.branding_needs

    try:
        found = await find_decision_maker(snapshot, follow)
    except Exception as e:
        err = ExtractionError("decision_maker", e)
        logger.debug(f"  ❌ {err}")
        errors.append(str(err))
        found = None
    if found:
        record.decision_maker_name, record.decision_maker_role = found

    record.lead_score = (scorer or _scorer).score(record)
    return record
