"""Relative time formatting — "3 minutes ago", "1 year from now"."""
from __future__ import annotations

from bisect import bisect_right
from datetime import datetime, timedelta
from operator import attrgetter
from typing import Sequence
import logging

from .exc import MagnitudeTableError
from .magnitudes import DEFAULT_MAGNITUDES, RelTimeMagnitude

logger = logging.getLogger(__name__)

DEFAULT_PAST_LABEL = "ago"
DEFAULT_FUTURE_LABEL = "from now"

_threshold = attrgetter("threshold")


def _placeholders(template: str) -> list[str]:
    """Return the verbs ('d' or 's') of the template's placeholders, in order."""
    verbs: list[str] = []
    escaped = False
    for ch in template:
        if escaped:
            if ch in ("d", "s"):
                verbs.append(ch)
            escaped = False
        else:
            escaped = ch == "%"
    return verbs


def _render(template: str, args: list[object]) -> str:
    """Substitute args positionally into the template's %d/%s escapes.

    Other escapes ("%%", "%x") and a trailing "%" are copied verbatim.
    """
    out: list[str] = []
    remaining = iter(args)
    i = 0
    while i < len(template):
        ch = template[i]
        if ch != "%" or i + 1 == len(template):
            out.append(ch)
            i += 1
            continue
        verb = template[i + 1]
        if verb in ("d", "s"):
            out.append(str(next(remaining, "")))
        else:
            out.append(ch + verb)
        i += 2
    return "".join(out)


def custom_rel_time(
    a: datetime,
    b: datetime,
    albl: str,
    blbl: str,
    magnitudes: Sequence[RelTimeMagnitude],
) -> str:
    """Format the difference between two instants with a magnitude table.

    ``albl`` is used when ``a`` is not after ``b`` (e.g. "ago" when ``a`` is
    the event and ``b`` is now), ``blbl`` when ``b`` came first.

    Args:
        a, b:       Instants to compare. Anything whose subtraction yields
                    a ``timedelta`` works.
        albl:       Label for "a precedes b". May be empty.
        blbl:       Label for "b precedes a". May be empty.
        magnitudes: Table sorted ascending by threshold. Build it with
                    :func:`humanized.magnitudes.magnitude_table`, which
                    validates the rows and freezes them into a tuple; any
                    other sequence is used as-is, unchecked and uncopied.

    Raises:
        MagnitudeTableError: ``magnitudes`` is empty.
    """
    if not magnitudes:
        raise MagnitudeTableError("magnitude table must contain at least one rule")

    label = albl
    diff: timedelta = b - a
    if a > b:
        label = blbl
        diff = a - b

    index = bisect_right(magnitudes, diff, key=_threshold)
    if index >= len(magnitudes):
        index = len(magnitudes) - 1
    mag = magnitudes[index]
    logger.debug("Difference %s selected magnitude %d (%r)", diff, index, mag.template)

    args: list[object] = []
    for verb in _placeholders(mag.template):
        if verb == "d":
            args.append(diff // mag.divisor)
        else:
            args.append(label)
    return _render(mag.template, args)


def rel_time(a: datetime, b: datetime, albl: str, blbl: str) -> str:
    """Format a relative time with the default table.

    rel_time(earlier, later, "earlier", "later") -> "3 weeks earlier"
    """
    return custom_rel_time(a, b, albl, blbl, DEFAULT_MAGNITUDES)


def time_since(
    then: datetime,
    now: datetime | None = None,
    magnitudes: Sequence[RelTimeMagnitude] = DEFAULT_MAGNITUDES,
) -> str:
    """Format ``then`` relative to ``now`` (the current time if omitted).

    time_since(three_weeks_ago) -> "3 weeks ago"
    """
    if now is None:
        now = datetime.now(then.tzinfo)
    return custom_rel_time(then, now, DEFAULT_PAST_LABEL, DEFAULT_FUTURE_LABEL, magnitudes)
