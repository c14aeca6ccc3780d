"""
LEADSCOUT — Strategy Chain
Ordered first-match evaluation of independent extraction strategies.
"""

import logging
import re
from typing import Callable, Iterable, List, Optional

from adapters.base import PageSnapshot

logger = logging.getLogger(__name__)

Strategy = Callable[[PageSnapshot], Optional[str]]


class ExtractionError(Exception):
    """A field extractor failed; the field degrades to None."""

    def __init__(self, field_name: str, cause: BaseException):
        self.field_name = field_name
        self.cause = cause
        super().__init__(f"{field_name}: {cause.__class__.__name__}: {cause}")


def clean(value) -> Optional[str]:
    """Collapse whitespace; blank or non-string values become None."""
    if not isinstance(value, str):
        return None
    value = re.sub(r"\s+", " ", value).strip()
    return value or None


def strategy_name(strategy: Strategy) -> str:
    return getattr(strategy, "__name__", strategy.__class__.__name__)


def first_match(
    strategies: Iterable[Strategy],
    snapshot: PageSnapshot,
    errors: Optional[List[str]] = None,
) -> Optional[str]:
    """
    Run strategies in order and return the first non-empty, trimmed result.

    A strategy that raises counts as "no match". Its failure is appended to
    `errors` when a list is supplied, and the chain moves on.
    """
    for strategy in strategies:
        try:
            value = clean(strategy(snapshot))
        except Exception as e:
            logger.debug(f"  strategy {strategy_name(strategy)} failed: {e}")
            if errors is not None:
                errors.append(f"{strategy_name(strategy)}: {e}")
            continue
        if value:
            return value
    return None
