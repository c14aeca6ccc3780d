"""
LEADSCOUT — Snapshot Builder
Turns rendered page HTML into the read-only PageSnapshot the extractors consume.
"""

import re
from typing import Optional
from urllib.parse import urlparse

from bs4 import BeautifulSoup

from .base import Anchor, ImageRef, PageSnapshot


FOOTER_PATTERN = re.compile(r"footer", re.IGNORECASE)


def _collapse(text: str) -> str:
    return re.sub(r"\s+", " ", text or "").strip()


def _page_text(soup: BeautifulSoup) -> str:
    """Visible text, one line per block, inner whitespace collapsed."""
    raw = soup.get_text(separator="\n")
    lines = (_collapse(line) for line in raw.splitlines())
    return "\n".join(line for line in lines if line)


def build_snapshot(url: str, html: str, load_time_ms: Optional[int] = None) -> PageSnapshot:
    """
    Build a PageSnapshot from rendered HTML.

    Args:
        url: Final URL of the page (after redirects)
        html: Rendered document HTML; empty or None yields an empty snapshot
        load_time_ms: Navigation time measured by the navigator

    Returns:
        PageSnapshot
    """
    soup = BeautifulSoup(html or "", "html.parser")

    meta_tags = {}
    has_viewport = False
    for tag in soup.find_all("meta"):
        key = (tag.get("name") or tag.get("property") or "").strip().lower()
        if not key:
            continue
        if key == "viewport":
            has_viewport = True
        meta_tags.setdefault(key, (tag.get("content") or "").strip())

    title = _collapse(soup.title.get_text()) if soup.title else ""

    anchors = tuple(
        Anchor(href=a["href"].strip(), text=_collapse(a.get_text(" ")))
        for a in soup.find_all("a", href=True)
    )

    images = tuple(
        ImageRef(
            src=img.get("src", "") or "",
            alt=img.get("alt", "") or "",
            css_class=" ".join(img.get("class", []) or []),
        )
        for img in soup.find_all("img")
    )

    class_names = []
    seen = set()
    for tag in soup.find_all(class_=True):
        for token in tag.get("class", []):
            if token not in seen:
                seen.add(token)
                class_names.append(token)

    headings = tuple(
        text for text in (_collapse(h.get_text(" ")) for h in soup.find_all(["h1", "h2"]))
        if text
    )

    for tag in soup(["script", "style", "noscript", "template"]):
        tag.decompose()

    footers = soup.find_all("footer") or soup.find_all(
        True, attrs={"class": FOOTER_PATTERN}
    ) or soup.find_all(True, attrs={"id": FOOTER_PATTERN})
    footer_text = " ".join(_collapse(f.get_text(" ")) for f in footers).strip()

    body = soup.body or soup

    return PageSnapshot(
        url=url,
        text=_page_text(body),
        title=title,
        meta_tags=meta_tags,
        anchors=anchors,
        image_count=len(images),
        has_viewport_meta=has_viewport,
        protocol=(urlparse(url).scheme or "").lower(),
        load_time_ms=load_time_ms,
        headings=headings,
        footer_text=footer_text,
        images=images,
        class_names=tuple(class_names),
    )
