"""
╔══════════════════════════════════════════════════════════════╗
║                                                              ║
║   🕷️  LEADSCOUT ENGINE — Lead Extraction & Scoring           ║
║                                                              ║
║   Extracts leads from company websites, or companies from    ║
║   maps / search listings, then scores and deduplicates them. ║
║                                                              ║
║   Usage:                                                     ║
║     python engine.py --url https://acme.com                  ║
║     python engine.py --urls-file data/targets.txt            ║
║     python engine.py --mode companies --industry Legal       ║
║     python engine.py --dry-run         # Don't write CSVs    ║
║                                                              ║
╚══════════════════════════════════════════════════════════════╝
"""

import argparse
import asyncio
import logging
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from dotenv import load_dotenv

from adapters.base import CompanyCandidate, CompanyRecord, LeadRecord
from adapters.google_maps import MapsListingAdapter
from adapters.google_search import SearchListingAdapter
from discovery.searcher import build_search_urls, is_maps_url, query_from_url, web_search_url
from extraction.pipeline import extract_lead
from navigator import PlaywrightNavigator
from output.csv_writer import CSVWriter
from output.dedup import ResultSet, check_floor, normalize_domain
from output.webhook import WebhookNotifier
from settings.loader import RunConfig, load_run_config

logger = logging.getLogger(__name__)


@dataclass
class RunSummary:
    """Run-level counters for logging; not part of the record schema."""
    found: int
    target: int
    skipped: int = 0
    warnings: List[str] = field(default_factory=list)


# ──────────────────────────────────────────────────
#  Engine
# ──────────────────────────────────────────────────

class LeadEngine:
    """
    Wires the extraction core to its collaborators:
    - navigator: anything with `async snapshot(url)` and `async render(url, scroll)`
    - sink: called once per accepted record, as soon as it is accepted
    - notifier: optional WebhookNotifier

    Page extraction runs concurrently up to max_concurrency; admission into
    the ResultSet happens one candidate at a time, in input order.
    """

    def __init__(
        self,
        config: RunConfig,
        navigator,
        sink: Optional[Callable] = None,
        notifier: Optional[WebhookNotifier] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config
        self.navigator = navigator
        self.sink = sink
        self.notifier = notifier
        self.rng = rng or random.Random()
        self.results = ResultSet(config.target_results)
        self.maps_adapter = MapsListingAdapter()
        self.search_adapter = SearchListingAdapter()
        self.skipped = 0

    # ── Admission ──

    def _push(self, record):
        if self.sink is not None:
            self.sink(record)

    def _matches_filter(self, record: LeadRecord) -> bool:
        wanted = self.config.industry_filter
        if not wanted:
            return True
        return (record.industry or "").lower() == wanted.strip().lower()

    def admit_lead(self, record: LeadRecord) -> bool:
        if not self._matches_filter(record):
            self.skipped += 1
            logger.debug(f"  ⏭️ {record.website_url}: industry {record.industry!r} filtered out")
            return False
        if not self.results.offer(record):
            return False
        self._push(record)
        logger.info(f"  ✅ Lead {record.company_name or record.domain} (score {record.lead_score})")
        return True

    def admit_company(self, candidate: CompanyCandidate) -> bool:
        name = (candidate.company_name or "").strip()
        if len(name) < 2:
            return False
        record = CompanyRecord(
            company_name=name,
            domain=normalize_domain(candidate.domain),
            location=(candidate.location or "").strip() or self.config.location,
            industry=self.config.industry,
        )
        if not self.results.offer(record):
            return False
        self._push(record)
        return True

    # ── Lead mode ──

    async def _extract(self, url: str, semaphore: asyncio.Semaphore) -> Optional[LeadRecord]:
        async with semaphore:
            try:
                snapshot = await self.navigator.snapshot(url)
            except Exception as e:
                logger.warning(f"  ⚠️ Failed to fetch {url}: {e}")
                return None
            return await extract_lead(snapshot, follow=self.navigator.snapshot)

    async def run_leads(self, urls: Optional[Iterable[str]] = None) -> RunSummary:
        """Extract one lead per website URL until the target is reached."""
        targets = list(dict.fromkeys(urls if urls is not None else self.config.start_urls))
        logger.info(f"  🎯 {len(targets)} websites, target {self.results.target_results} leads")

        semaphore = asyncio.Semaphore(self.config.max_concurrency)
        batch_size = self.config.max_concurrency
        for start in range(0, len(targets), batch_size):
            if self.results.is_full:
                break
            batch = targets[start:start + batch_size]
            records = await asyncio.gather(*(self._extract(url, semaphore) for url in batch))
            for record in records:
                if record is not None:
                    self.admit_lead(record)
            logger.info(f"  📊 Running total: {len(self.results)}/{self.results.target_results}")

        return await self._finish()

    # ── Company mode ──

    async def _render(self, url: str, scroll: bool = False) -> str:
        try:
            return await self.navigator.render(url, scroll=scroll)
        except Exception as e:
            logger.warning(f"  ⚠️ Request {url} failed: {e}")
            return ""

    async def collect_listing(self, url: str) -> List[CompanyCandidate]:
        """Maps results first, topped up from web search when short."""
        query = query_from_url(url)
        if not is_maps_url(url):
            found = self.search_adapter.parse(await self._render(url))
            logger.info(f"  Found {len(found)} companies from web search")
            return found

        found = self.maps_adapter.parse(await self._render(url, scroll=True))
        logger.info(f"  Found {len(found)} companies from maps")
        if len(found) < self.results.remaining and query:
            extra = self.search_adapter.parse(
                await self._render(web_search_url(f"{query} companies"))
            )
            logger.info(f"  Found {len(extra)} companies from web search")
            found.extend(extra)
        return found

    async def run_companies(self, urls: Optional[Iterable[str]] = None) -> RunSummary:
        """Collect companies from listing searches until the target is reached."""
        if urls is None:
            urls = build_search_urls(self.config.industry, self.config.location, self.rng)
        urls = list(urls)
        logger.info(
            f"  🔍 Searching for {self.config.industry} companies in "
            f"{self.config.location} ({len(urls)} queries)"
        )

        for i, url in enumerate(urls):
            if self.results.is_full:
                logger.info(f"  ✓ Reached target of {self.results.target_results} companies!")
                break
            for candidate in await self.collect_listing(url):
                if self.results.is_full:
                    break
                self.admit_company(candidate)
            logger.info(
                f"  📊 Total unique companies found: "
                f"{len(self.results)}/{self.results.target_results}"
            )
            if self.config.search_delay_s and i < len(urls) - 1:
                await asyncio.sleep(self.config.search_delay_s)

        return await self._finish()

    # ── Wrap-up ──

    async def _finish(self) -> RunSummary:
        summary = RunSummary(
            found=len(self.results),
            target=self.results.target_results,
            skipped=self.skipped,
        )
        warning = check_floor(summary.found, self.config.min_results)
        if warning:
            summary.warnings.append(warning)

        logger.info(f"""
============================================================
  📊  RUN SUMMARY
============================================================
  📝  Records found: {summary.found}
  🎯  Target: {summary.target}
  ⏭️  Filtered out: {summary.skipped}
============================================================
""")

        if self.notifier is not None:
            leads = [r for r in self.results if isinstance(r, LeadRecord)]
            if leads:
                await self.notifier.notify_hot_leads(leads)
            await self.notifier.notify_run_complete(summary)
        return summary

    async def run(self, urls: Optional[Iterable[str]] = None) -> RunSummary:
        if self.config.mode == "companies":
            return await self.run_companies(urls)
        return await self.run_leads(urls)


# ──────────────────────────────────────────────────
#  CLI
# ──────────────────────────────────────────────────

def _load_urls(path: str) -> List[str]:
    """Target URLs from a file, one per line, '#' comments skipped."""
    urls = []
    for line in Path(path).read_text().splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            urls.append(line)
    return urls


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="LEADSCOUT — extract, score and dedupe leads")
    parser.add_argument("--config", default=None, help="Path to run config YAML")
    parser.add_argument("--mode", choices=["leads", "companies"], default=None)
    parser.add_argument("--industry", default=None, help="Industry label (companies mode)")
    parser.add_argument("--location", default=None, help="Target location")
    parser.add_argument("--max-results", type=int, default=None, help="Result count target")
    parser.add_argument("--industry-filter", default=None, help="Only keep leads in this industry")
    parser.add_argument("--concurrency", type=int, default=None, help="Max concurrent page extractions")
    parser.add_argument("--url", action="append", default=[], help="Website to extract (repeatable)")
    parser.add_argument("--urls-file", default=None, help="File with one website URL per line")
    parser.add_argument("--headed", action="store_true", help="Run with browser visible")
    parser.add_argument("--dry-run", action="store_true", help="Log records without writing CSV")
    parser.add_argument("--webhook", default=None, help="Discord/Slack webhook URL")
    parser.add_argument("--webhook-platform", choices=["discord", "slack"], default=None)
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def config_from_args(args) -> RunConfig:
    config = load_run_config(args.config).with_overrides(
        mode=args.mode,
        industry=args.industry,
        location=args.location,
        max_results=args.max_results,
        industry_filter=args.industry_filter,
        max_concurrency=args.concurrency,
        webhook_url=args.webhook,
        webhook_platform=args.webhook_platform,
        headless=False if args.headed else None,
    )
    urls = list(args.url)
    if args.urls_file:
        urls.extend(_load_urls(args.urls_file))
    if urls:
        config = config.with_overrides(start_urls=urls)
    return config


async def _main(args) -> RunSummary:
    config = config_from_args(args)
    sink = None if args.dry_run else CSVWriter(config.output_dir).append
    notifier = WebhookNotifier(config.webhook_url, config.webhook_platform)

    async with PlaywrightNavigator(
        headless=config.headless, timeout_ms=config.request_timeout_ms
    ) as navigator:
        engine = LeadEngine(config, navigator, sink=sink, notifier=notifier)
        return await engine.run()


def main(argv=None) -> int:
    load_dotenv()  # .env → os.environ (LEADSCOUT_WEBHOOK_URL, ...)
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(message)s",
    )
    asyncio.run(_main(args))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
