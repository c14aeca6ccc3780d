"""Run configuration for extraction runs."""
from .loader import RunConfig, load_run_config

__all__ = ["RunConfig", "load_run_config"]
