"""
LEADSCOUT — Decision-Maker Finder Tests
Run with: python -m pytest tests/test_decision_maker.py -v
"""

import asyncio
import os
import sys
from unittest.mock import AsyncMock

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from adapters.base import Anchor, PageSnapshot
from extraction.decision_maker import find_decision_maker, find_team_link, match_decision_maker


class TestMatchDecisionMaker:
    def test_name_before_title(self):
        assert match_decision_maker("Jane Smith, CEO of Acme") == ("Jane Smith", "CEO")

    def test_title_before_name(self):
        assert match_decision_maker("Founder: John Doe") == ("John Doe", "Founder")

    def test_title_is_case_insensitive(self):
        assert match_decision_maker("Maria Lopez, owner") == ("Maria Lopez", "Owner")

    def test_title_order_is_precedence(self):
        text = "Partner Bob Jones\nPresident Alice Brown"
        assert match_decision_maker(text) == ("Alice Brown", "President")

    def test_co_founder_reported_as_founder(self):
        assert match_decision_maker("Co-Founder Alice Brown") == ("Alice Brown", "Founder")

    def test_managing_director_reported_as_director(self):
        assert match_decision_maker("Managing Director Tom Hale") == ("Tom Hale", "Director")

    def test_long_gap_on_one_line(self):
        text = "Jane Smith has led the company with passion and care for many years as our CEO"
        assert match_decision_maker(text) == ("Jane Smith", "CEO")

    def test_gap_may_contain_periods(self):
        assert match_decision_maker("John Smith, Jr. CEO") == ("John Smith", "CEO")

    def test_does_not_cross_lines(self):
        assert match_decision_maker("Talk to Jane Smith\nOur CEO is busy") is None

    def test_title_inside_word_ignored(self):
        assert match_decision_maker("Jane Smith loves ownership") is None

    def test_no_text(self):
        assert match_decision_maker("") is None
        assert match_decision_maker(None) is None


class TestTeamLink:
    def test_resolves_relative_link(self):
        snap = PageSnapshot(
            url="https://acme.com/",
            anchors=(Anchor("/services", "Services"), Anchor("/about", "About Us")),
        )
        assert find_team_link(snap) == "https://acme.com/about"

    def test_matches_anchor_text(self):
        snap = PageSnapshot(url="https://acme.com", anchors=(Anchor("/p/12", "Our Leadership"),))
        assert find_team_link(snap) == "https://acme.com/p/12"

    def test_off_site_links_never_followed(self):
        snap = PageSnapshot(
            url="https://acme.com",
            anchors=(
                Anchor("https://linkedin.com/company/acme/about", "About Acme"),
                Anchor("/team", "Our Team"),
            ),
        )
        assert find_team_link(snap) == "https://acme.com/team"

    def test_only_off_site_link(self):
        snap = PageSnapshot(
            url="https://acme.com",
            anchors=(Anchor("https://linkedin.com/company/acme/about", "About"),),
        )
        assert find_team_link(snap) is None

    def test_www_and_subdomains_count_as_same_site(self):
        snap = PageSnapshot(
            url="https://www.acme.com/",
            anchors=(Anchor("https://about.acme.com/leadership", "Leadership"),),
        )
        assert find_team_link(snap) == "https://about.acme.com/leadership"

    def test_skips_non_navigable(self):
        snap = PageSnapshot(
            url="https://acme.com",
            anchors=(Anchor("mailto:team@acme.com", "Email the team"), Anchor("#about", "About")),
        )
        assert find_team_link(snap) is None


class TestFindDecisionMaker:
    def test_searches_current_page_without_navigator(self):
        snap = PageSnapshot(text="Jane Smith, CEO", anchors=(Anchor("/team", "Team"),))

        async def run():
            return await find_decision_maker(snap)

        assert asyncio.run(run()) == ("Jane Smith", "CEO")

    def test_follows_team_link_once(self):
        home = PageSnapshot(
            url="https://acme.com",
            text="Welcome to Acme",
            anchors=(Anchor("/about", "About"),),
        )
        follow = AsyncMock(return_value=PageSnapshot(text="Jane Smith, CEO"))

        async def run():
            return await find_decision_maker(home, follow)

        assert asyncio.run(run()) == ("Jane Smith", "CEO")
        follow.assert_awaited_once_with("https://acme.com/about")

    def test_failed_hop_yields_none(self):
        home = PageSnapshot(
            url="https://acme.com",
            text="Jane Smith, CEO",
            anchors=(Anchor("/about", "About"),),
        )
        follow = AsyncMock(side_effect=RuntimeError("timeout"))

        async def run():
            return await find_decision_maker(home, follow)

        assert asyncio.run(run()) is None

    def test_no_team_link_uses_home_page(self):
        home = PageSnapshot(url="https://acme.com", text="Founder: John Doe")
        follow = AsyncMock()

        async def run():
            return await find_decision_maker(home, follow)

        assert asyncio.run(run()) == ("John Doe", "Founder")
        follow.assert_not_awaited()
