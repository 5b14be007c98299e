#!/usr/bin/env python3
"""
dates.py
-------------------
Resolve the date-range key of an event line into a ``(from, to)`` pair.

A range key is the text before the first colon of an event line:

    01/01/2023: New year            single date, to = from + 1 day
    01/01/2023 - 14/01/2023: Sprint range on the page's pattern
    2023-14-01/now: Ongoing         range on the extended fallback

Resolution tries an ordered list of strategies and stops at the first one
that parses the whole key:
    1. separator "-" with the page's configured pattern
    2. separator "/" with the fixed extended pattern (year-day-month)

The literal ``now`` yields the NOW sentinel in either position under any
strategy. Inverted ranges are returned as written.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Sequence, Tuple

# --- Local imports ---
from markwhen.core.exceptions import DateRangeParseError
from markwhen.dataclasses.timeline import (
    EXTENDED_DATE_FORMAT,
    NOW,
    Concrete,
    DateFormat,
    Moment,
)


logger = logging.getLogger(__name__)

NOW_TOKEN = "now"
RANGE_SEPARATOR = "-"
EXTENDED_RANGE_SEPARATOR = "/"


@dataclass(frozen=True)
class DateStrategy:
    """
    One way of reading a range key.

    Attributes:
        separator: Text splitting ``from`` and ``to``
        pattern: strptime pattern for each half
    """

    separator: str
    pattern: str

    def parse_moment(self, text: str) -> Moment:
        """
        Parse one side of a range.

        Raises:
            ValueError: If the text does not match the pattern
        """
        text = text.strip()
        if text == NOW_TOKEN:
            return NOW
        parsed = datetime.strptime(text, self.pattern)
        return Concrete(parsed.replace(tzinfo=timezone.utc))

    def resolve(self, key: str) -> Tuple[Moment, Moment]:
        """
        Read a whole range key.

        A key without the separator is a single date lasting one day;
        otherwise it is split on the first separator.

        Raises:
            ValueError: If either side fails to parse
        """
        head, sep, tail = key.partition(self.separator)
        if not sep:
            start = self.parse_moment(key)
            return start, start.plus_days(1)
        return self.parse_moment(head), self.parse_moment(tail)


EXTENDED_STRATEGY = DateStrategy(EXTENDED_RANGE_SEPARATOR, EXTENDED_DATE_FORMAT)


def strategies_for(date_format: DateFormat) -> Tuple[DateStrategy, ...]:
    """Ordered strategies for a page using ``date_format``."""
    return (
        DateStrategy(RANGE_SEPARATOR, date_format.value),
        EXTENDED_STRATEGY,
    )


def resolve_range(
    key: str,
    date_format: DateFormat,
    strategies: Optional[Sequence[DateStrategy]] = None,
) -> Tuple[Moment, Moment]:
    """
    Resolve a range key, trying each strategy in order.

    Args:
        key: Text before the first colon of an event line
        date_format: The page's configured date pattern
        strategies: Override the default strategy order

    Returns:
        (from, to) moments

    Raises:
        DateRangeParseError: If every strategy fails; carries the patterns
            attempted and the primary strategy's failure
    """
    if strategies is None:
        strategies = strategies_for(date_format)

    failures = []
    for strategy in strategies:
        try:
            return strategy.resolve(key)
        except ValueError as e:
            logger.debug(f"Strategy {strategy.pattern!r} rejected {key!r}: {e}")
            failures.append(str(e))

    raise DateRangeParseError(
        key,
        [strategy.pattern for strategy in strategies],
        failures[0] if failures else "no date strategies configured",
    )
