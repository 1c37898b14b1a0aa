"""Magnitude tables — the thresholds, templates and divisors behind rel_time."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Iterable
import logging

from .exc import MagnitudeTableError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Duration units
# ---------------------------------------------------------------------------

SECOND = timedelta(seconds=1)
MINUTE = timedelta(minutes=1)
HOUR = timedelta(hours=1)
DAY = 24 * HOUR
WEEK = 7 * DAY
MONTH = 30 * DAY
YEAR = 12 * MONTH
LONG_TIME = 10 * YEAR

# Catch-all threshold for the last row of a table
FOREVER = timedelta.max

# Divisor for rows whose template has no %d
RESOLUTION = timedelta.resolution


@dataclass(frozen=True)
class RelTimeMagnitude:
    """One row of a magnitude table.

    A row is selected when its ``threshold`` is the first one in the table
    strictly greater than the time difference. ``template`` may contain one
    ``%d`` (replaced by ``difference // divisor``) and one ``%s`` (replaced
    by the directional label).

    e.g. to show "%d minutes %s" for differences below two hours, use
    ``RelTimeMagnitude(2 * HOUR, "%d minutes %s", MINUTE)``.
    """

    threshold: timedelta
    template: str
    divisor: timedelta


def magnitude_table(rules: Iterable[RelTimeMagnitude]) -> tuple[RelTimeMagnitude, ...]:
    """Validate rules and freeze them into a table.

    Raises:
        MagnitudeTableError: the table is empty, thresholds are not strictly
            ascending, or a divisor is not positive.
    """
    table = tuple(rules)
    if not table:
        raise MagnitudeTableError("magnitude table must contain at least one rule")

    previous: RelTimeMagnitude | None = None
    for index, rule in enumerate(table):
        if rule.divisor <= timedelta(0):
            raise MagnitudeTableError(
                f"rule {index} ({rule.template!r}) has non-positive divisor {rule.divisor}"
            )
        if previous is not None and rule.threshold <= previous.threshold:
            raise MagnitudeTableError(
                f"rule {index} ({rule.template!r}) threshold {rule.threshold} "
                f"is not greater than {previous.threshold}"
            )
        previous = rule

    if table[-1].threshold < FOREVER:
        logger.warning(
            "Last magnitude rule %r is bounded at %s; larger differences will reuse it",
            table[-1].template,
            table[-1].threshold,
        )
    return table


def _table(templates: tuple[str, ...]) -> tuple[RelTimeMagnitude, ...]:
    """Pair locale templates with the shared thresholds and divisors."""
    return magnitude_table(
        RelTimeMagnitude(threshold, template, divisor)
        for (threshold, divisor), template in zip(_BOUNDARIES, templates, strict=True)
    )


# Singular rows ("1 minute") sit just below the plural row that takes over
# at the next step up.
_BOUNDARIES: tuple[tuple[timedelta, timedelta], ...] = (
    (SECOND, SECOND),
    (2 * SECOND, RESOLUTION),
    (MINUTE, SECOND),
    (2 * MINUTE, RESOLUTION),
    (HOUR, MINUTE),
    (2 * HOUR, RESOLUTION),
    (DAY, HOUR),
    (2 * DAY, RESOLUTION),
    (WEEK, DAY),
    (2 * WEEK, RESOLUTION),
    (MONTH, WEEK),
    (2 * MONTH, RESOLUTION),
    (YEAR, MONTH),
    (18 * MONTH, RESOLUTION),
    (2 * YEAR, RESOLUTION),
    (LONG_TIME, YEAR),
    (FOREVER, RESOLUTION),
)

DEFAULT_MAGNITUDES = _table((
    "now",
    "1 second %s",
    "%d seconds %s",
    "1 minute %s",
    "%d minutes %s",
    "1 hour %s",
    "%d hours %s",
    "1 day %s",
    "%d days %s",
    "1 week %s",
    "%d weeks %s",
    "1 month %s",
    "%d months %s",
    "1 year %s",
    "2 years %s",
    "%d years %s",
    "a long while %s",
))

CHINESE_MAGNITUDES = _table((
    "now",
    "1秒%s",
    "%d秒%s",
    "1分钟%s",
    "%d分钟%s",
    "1小时%s",
    "%d小时%s",
    "1天%s",
    "%d天%s",
    "1周%s",
    "%d周%s",
    "1月%s",
    "%d月%s",
    "1年%s",
    "2年%s",
    "%d年%s",
    "很久%s",
))
