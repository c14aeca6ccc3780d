"""
Load and validate run configuration.

A run is defined by a YAML file (settings/run.yaml by default), optionally
overridden by environment variables (read after python-dotenv loads .env)
and finally by CLI flags.
"""

import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import List, Optional

import yaml


SETTINGS_DIR = Path(__file__).parent
DEFAULT_CONFIG = SETTINGS_DIR / "run.yaml"

MODES = ("leads", "companies")

ENV_OVERRIDES = {
    "LEADSCOUT_WEBHOOK_URL": "webhook_url",
    "LEADSCOUT_OUTPUT_DIR": "output_dir",
}

INT_FIELDS = ("max_results", "min_results", "max_concurrency", "request_timeout_ms")
STR_FIELDS = ("mode", "industry", "location", "output_dir", "webhook_url", "webhook_platform")


def _as_int(name: str, value) -> int:
    """Accept ints and digit strings ("20" from env or YAML); bools are not ints here."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value.strip())
    raise ValueError(f"{name} must be an integer, got {value!r}")


def _as_float(name: str, value) -> float:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a number, got {value!r}") from None


def _as_url_list(value) -> List[str]:
    """A lone URL becomes a one-item list; anything but strings is rejected."""
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"start_urls must be a list of URLs, got {value!r}")
    urls = []
    for url in value:
        if not isinstance(url, str):
            raise ValueError(f"start_urls entries must be strings, got {url!r}")
        if url.strip():
            urls.append(url.strip())
    return urls


@dataclass
class RunConfig:
    """Everything the host supplies to one extraction run."""
    mode: str = "leads"
    industry: str = "Technology"
    location: str = "New York"
    max_results: int = 20
    min_results: int = 10
    start_urls: List[str] = field(default_factory=list)
    industry_filter: Optional[str] = None
    max_concurrency: int = 3
    headless: bool = True
    request_timeout_ms: int = 30000
    search_delay_s: float = 2.0
    output_dir: str = "data"
    webhook_url: str = ""
    webhook_platform: str = "discord"

    def __post_init__(self):
        for name in INT_FIELDS:
            setattr(self, name, _as_int(name, getattr(self, name)))
        self.search_delay_s = _as_float("search_delay_s", self.search_delay_s)
        self.start_urls = _as_url_list(self.start_urls)
        if self.webhook_url is None:
            self.webhook_url = ""
        for name in STR_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ValueError(f"{name} must be a string, got {value!r}")
        if self.industry_filter is not None and not isinstance(self.industry_filter, str):
            raise ValueError(f"industry_filter must be a string, got {self.industry_filter!r}")
        if not isinstance(self.headless, bool):
            raise ValueError(f"headless must be true or false, got {self.headless!r}")

    @property
    def target_results(self) -> int:
        """The floor is also a lower bound on the target."""
        return max(self.max_results, self.min_results)

    def validate(self) -> "RunConfig":
        if self.mode not in MODES:
            raise ValueError(f"Unknown mode {self.mode!r}, expected one of {MODES}")
        if self.max_results < 1:
            raise ValueError("max_results must be >= 1")
        if self.min_results < 0:
            raise ValueError("min_results must be >= 0")
        if self.max_concurrency < 1:
            raise ValueError("max_concurrency must be >= 1")
        if self.webhook_platform not in ("discord", "slack"):
            raise ValueError("webhook_platform must be 'discord' or 'slack'")
        return self

    def with_overrides(self, **overrides) -> "RunConfig":
        """Copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes).validate()


def load_run_config(path: Optional[str] = None) -> RunConfig:
    """
    Load a RunConfig from YAML.

    An explicit path that doesn't exist is an error; the bundled default
    is optional. Unknown keys are ignored.
    """
    config_path = Path(path) if path else DEFAULT_CONFIG
    if not config_path.exists():
        if path:
            raise FileNotFoundError(f"Run config not found: {config_path}")
        raw = {}
    else:
        with open(config_path) as f:
            raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Run config must be a mapping: {config_path}")

    known = {f.name for f in fields(RunConfig)}
    values = {k: v for k, v in raw.items() if k in known}
    if values.get("start_urls") is None:
        values.pop("start_urls", None)

    for env_key, attr in ENV_OVERRIDES.items():
        env_value = os.environ.get(env_key)
        if env_value:
            values[attr] = env_value

    return RunConfig(**values).validate()
