"""
LEADSCOUT — Location & Industry Classifier
Keyword-anchored location lookup and first-match industry labelling.
"""

import re
from typing import Optional

from adapters.base import PageSnapshot


# ── Location ──────────────────────────────────────

LOCATION_KEYWORDS = ["address:", "location:", "located in", "based in"]
LOCATION_WINDOW = 100

# "Austin, TX" before "Austin, Texas"
LOCATION_PATTERNS = [
    re.compile(r"[A-Z][a-z]+(?:\s+[A-Z][a-z]+)*,\s*[A-Z]{2,}\b"),
    re.compile(r"[A-Z][a-z]+(?:\s+[A-Z][a-z]+)*,\s*[A-Z][a-z]+(?:\s+[A-Z][a-z]+)*"),
]


def match_location(text: str) -> Optional[str]:
    for pattern in LOCATION_PATTERNS:
        match = pattern.search(text or "")
        if match:
            return match.group(0).strip()
    return None


def extract_location(snapshot: PageSnapshot) -> Optional[str]:
    """
    Look behind each location keyword first, then fall back to the footer.
    """
    text = snapshot.text or ""
    lowered = text.lower()
    for keyword in LOCATION_KEYWORDS:
        idx = lowered.find(keyword)
        if idx == -1:
            continue
        start = idx + len(keyword)
        found = match_location(text[start:start + LOCATION_WINDOW])
        if found:
            return found
    return match_location(snapshot.footer_text)


# ── Industry ──────────────────────────────────────

OTHER_INDUSTRY = "Other"

# Declared order is the tie-break: first industry with any hit wins
INDUSTRY_KEYWORDS = {
    "Technology": [
        "software", "saas", "cloud", "platform", "app development",
        "artificial intelligence", "machine learning", "cybersecurity",
        "it services", "web development", "technology",
    ],
    "Healthcare": [
        "healthcare", "medical", "clinic", "hospital", "dental", "dentist",
        "physician", "patient", "pharmacy", "therapy", "wellness",
    ],
    "Finance": [
        "financial", "finance", "accounting", "bookkeeping", "insurance",
        "investment", "wealth management", "banking", "tax preparation",
    ],
    "Real Estate": [
        "real estate", "realtor", "property management", "homes for sale",
        "mortgage", "brokerage",
    ],
    "Legal": [
        "law firm", "attorney", "lawyer", "legal services", "litigation",
    ],
    "Construction": [
        "construction", "contractor", "roofing", "remodeling", "plumbing",
        "hvac", "electrician", "renovation",
    ],
    "Restaurant & Food": [
        "restaurant", "catering", "bakery", "cafe", "our menu", "cuisine",
    ],
    "Retail": [
        "shop now", "online store", "boutique", "retail", "add to cart",
        "e-commerce", "ecommerce",
    ],
    "Marketing": [
        "marketing agency", "digital marketing", "seo", "advertising",
        "branding", "social media management",
    ],
    "Education": [
        "school", "academy", "tutoring", "courses", "university", "training",
    ],
    "Manufacturing": [
        "manufacturing", "manufacturer", "fabrication", "industrial",
    ],
    "Hospitality": [
        "hotel", "resort", "travel", "tourism", "bed and breakfast",
    ],
}


def classify_industry(text: str, meta_description: str = "") -> str:
    haystack = f"{text or ''} {meta_description or ''}".lower()
    for industry, keywords in INDUSTRY_KEYWORDS.items():
        if any(keyword in haystack for keyword in keywords):
            return industry
    return OTHER_INDUSTRY
