"""
LEADSCOUT — Quality & Scoring Tests
Covers: website quality signals and rating bands, lead score formula.
Run with: python -m pytest tests/test_quality_scoring.py -v
"""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from adapters.base import Anchor, ImageRef, LeadRecord, PageSnapshot
from enrichment.scoring import LeadScorer
from extraction.quality import SIGNAL_WEIGHTS, assess_quality, quality_signals, rate


def _full_snapshot(**overrides) -> PageSnapshot:
    fields = dict(
        url="https://acme.com",
        protocol="https",
        has_viewport_meta=True,
        images=(ImageRef(src="/static/acme-logo.svg", alt="Acme"),),
        image_count=5,
        anchors=(
            Anchor("/contact", "Contact Us"),
            Anchor("https://www.facebook.com/acme", "Facebook"),
        ),
        class_names=("container", "d-flex", "nav"),
    )
    fields.update(overrides)
    return PageSnapshot(**fields)


# ──────────────────────────────────────────────────
#  Rating Bands
# ──────────────────────────────────────────────────

class TestRatingBands:
    def test_good(self):
        assert rate(100) == ("Good", False)
        assert rate(70) == ("Good", False)

    def test_average(self):
        assert rate(69) == ("Average", True)
        assert rate(40) == ("Average", True)

    def test_poor(self):
        assert rate(39) == ("Poor", True)
        assert rate(0) == ("Poor", True)


# ──────────────────────────────────────────────────
#  Quality Signals
# ──────────────────────────────────────────────────

class TestQualityAssessment:
    def test_weights_sum_to_100(self):
        assert sum(SIGNAL_WEIGHTS.values()) == 100

    def test_all_signals_present(self):
        report = assess_quality(_full_snapshot())
        assert all(report.signals.values())
        assert report.score == 100
        assert report.rating == "Good"
        assert report.branding_needs is False

    def test_blank_page(self):
        report = assess_quality(PageSnapshot())
        assert report.score == 0
        assert report.rating == "Poor"
        assert report.branding_needs is True

    def test_http_loses_ssl(self):
        report = assess_quality(_full_snapshot(protocol="http"))
        assert report.signals["ssl"] is False
        assert report.score == 80

    def test_too_few_images(self):
        report = assess_quality(_full_snapshot(image_count=4))
        assert report.signals["images"] is False
        assert report.score == 90

    def test_grid_layout_counts_as_modern(self):
        signals = quality_signals(_full_snapshot(class_names=("css-grid-wrapper",)))
        assert signals["modern_layout"] is True

    def test_contact_link_by_href(self):
        snap = PageSnapshot(anchors=(Anchor("https://acme.com/contact-us", "Reach out"),))
        assert quality_signals(snap)["contact_page"] is True

    def test_logo_by_class(self):
        snap = PageSnapshot(images=(ImageRef(src="/a.png", css_class="site-logo"),))
        assert quality_signals(snap)["logo"] is True

    def test_supplied_social_links_are_used(self):
        snap = PageSnapshot()
        signals = quality_signals(snap, social={"linkedin": "https://linkedin.com/x"})
        assert signals["social_presence"] is True

    def test_average_band(self):
        snap = PageSnapshot(protocol="https", has_viewport_meta=True)
        report = assess_quality(snap)
        assert report.score == 40
        assert report.rating == "Average"
        assert report.branding_needs is True

    def test_load_time_carried_over(self):
        report = assess_quality(PageSnapshot(load_time_ms=850))
        assert report.load_time_ms == 850


# ──────────────────────────────────────────────────
#  Lead Score
# ──────────────────────────────────────────────────

class TestLeadScorer:
    def setup_method(self):
        self.scorer = LeadScorer()

    def test_empty_record(self):
        assert self.scorer.score(LeadRecord()) == 0

    def test_maximum(self):
        record = LeadRecord(
            email="jane@acme.com",
            phone="512-555-0199",
            decision_maker_name="Jane Smith",
            website_quality_score=10,
            linkedin="https://linkedin.com/company/acme",
            facebook="https://facebook.com/acme",
            twitter="https://x.com/acme",
            industry="Legal",
            location="Austin, TX",
            company_name="Acme",
        )
        assert self.scorer.score(record) == 100

    def test_contactability(self):
        assert self.scorer.score(LeadRecord(email="a@acme.com")) == 20
        assert self.scorer.score(LeadRecord(phone="512-555-0199")) == 15
        assert self.scorer.score(LeadRecord(decision_maker_name="Jane Smith")) == 5

    def test_weaker_site_scores_higher(self):
        assert self.scorer.score(LeadRecord(website_quality_score=39)) == 30
        assert self.scorer.score(LeadRecord(website_quality_score=40)) == 20
        assert self.scorer.score(LeadRecord(website_quality_score=69)) == 20
        assert self.scorer.score(LeadRecord(website_quality_score=70)) == 10
        assert self.scorer.score(LeadRecord(website_quality_score=0)) == 30

    def test_twitter_and_instagram_count_once(self):
        both = LeadRecord(twitter="https://x.com/a", instagram="https://instagram.com/a")
        one = LeadRecord(instagram="https://instagram.com/a")
        assert self.scorer.score(both) == 5
        assert self.scorer.score(one) == 5

    def test_unknown_industry_earns_nothing(self):
        assert self.scorer.score(LeadRecord(industry="Unknown")) == 0
        assert self.scorer.score(LeadRecord(industry="Other")) == 5

    def test_score_is_pure(self):
        record = LeadRecord(email="a@acme.com", location="Austin, TX")
        assert self.scorer.score(record) == self.scorer.score(record) == 25
        assert record.lead_score == 0

    def test_score_batch_sorts_descending(self):
        low = LeadRecord(company_name="Low")
        high = LeadRecord(company_name="High", email="a@high.com")
        ranked = self.scorer.score_batch([low, high])
        assert [r.company_name for r in ranked] == ["High", "Low"]
        assert high.lead_score == 25
        assert self.scorer.stats["total_scored"] == 2
        assert self.scorer.stats["max_score"] == 25

    def test_stats_empty(self):
        assert self.scorer.stats == {"total_scored": 0}
