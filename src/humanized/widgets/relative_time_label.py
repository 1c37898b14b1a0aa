"""RelativeTimeLabel — Static widget that keeps "N minutes ago" text current."""
from __future__ import annotations

from datetime import datetime
from typing import Sequence

from textual.timer import Timer
from textual.widgets import Static

from ..magnitudes import DEFAULT_MAGNITUDES, RelTimeMagnitude
from ..reltime import DEFAULT_FUTURE_LABEL, DEFAULT_PAST_LABEL, custom_rel_time


class RelativeTimeLabel(Static):
    """Label showing how long ago (or how far ahead) an instant is.

    Displays e.g. "5 minutes ago" or "1 hour from now" and re-renders on a
    timer so the phrase moves to the next bucket as time passes.
    Shows ``placeholder`` while no instant is set.

    The current display text is always stored in ``_display_text`` for easy
    introspection in tests.
    """

    DEFAULT_CSS = """
    RelativeTimeLabel {
        width: auto;
        color: #A8B5A2;
    }
    """

    def __init__(
        self,
        then: datetime | None = None,
        *,
        refresh_interval: float = 1.0,
        past_label: str = DEFAULT_PAST_LABEL,
        future_label: str = DEFAULT_FUTURE_LABEL,
        magnitudes: Sequence[RelTimeMagnitude] = DEFAULT_MAGNITUDES,
        placeholder: str = "never",
        **kwargs: object,
    ) -> None:
        """Initialise the widget.

        Args:
            then:             Instant to describe, or None for the placeholder.
            refresh_interval: Seconds between re-renders.
            past_label:       Label used when ``then`` is in the past.
            future_label:     Label used when ``then`` is in the future.
            magnitudes:       Magnitude table to format with.
            placeholder:      Text shown while ``then`` is None.
            **kwargs:         Forwarded to :class:`textual.widgets.Static`.
        """
        super().__init__(placeholder, **kwargs)
        self._then = then
        self._refresh_interval = refresh_interval
        self._past_label = past_label
        self._future_label = future_label
        self._magnitudes = magnitudes
        self._placeholder = placeholder
        self._display_text: str = placeholder
        self._refresh_timer: Timer | None = None

    def on_mount(self) -> None:
        """Render immediately and start the refresh timer."""
        self.refresh_label()
        self._refresh_timer = self.set_interval(self._refresh_interval, self.refresh_label)

    def on_unmount(self) -> None:
        """Stop the refresh timer when widget is removed."""
        if self._refresh_timer is not None:
            self._refresh_timer.stop()
            self._refresh_timer = None

    def set_then(self, then: datetime | None, now: datetime | None = None) -> None:
        """Change the instant being described and re-render."""
        self._then = then
        self.refresh_label(now)

    def refresh_label(self, now: datetime | None = None) -> None:
        """Recompute the phrase relative to ``now`` (current time if omitted)."""
        if self._then is None:
            text = self._placeholder
        else:
            if now is None:
                now = datetime.now(self._then.tzinfo)
            text = custom_rel_time(
                self._then,
                now,
                self._past_label,
                self._future_label,
                self._magnitudes,
            )
        if text == self._display_text:
            return
        self._display_text = text
        self.update(text)
