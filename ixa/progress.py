"""A single, process-wide progress bar for timelines or custom counters.

Only one progress bar is active at a time; initialising a new one replaces
the previous bar.
"""

from __future__ import annotations

import logging
import math
import sys
from dataclasses import dataclass
from typing import TextIO

logger = logging.getLogger(__name__)

_BAR_WIDTH = 40

_current: ProgressBar | None = None
_max_time: float | None = None


def _round(value: float) -> int:
    """Round half away from zero, clamped at zero."""
    if value < 0:
        return 0
    return int(math.floor(value + 0.5))


@dataclass
class ProgressBar:
    """A textual progress bar with a label, a maximum and a current value."""

    label: str
    max_value: int
    progress: int = 0
    finished: bool = False
    stream: TextIO | None = None

    def _write(self, text: str) -> None:
        out = self.stream if self.stream is not None else sys.stderr
        out.write(text)
        out.flush()

    def render(self) -> str:
        """Return the bar as a single line of text."""
        if self.max_value > 0:
            fraction = min(self.progress, self.max_value) / self.max_value
        else:
            fraction = 1.0
        filled = int(fraction * _BAR_WIDTH)
        bar = "=" * filled + " " * (_BAR_WIDTH - filled)
        return f"{self.label} [{bar}] {self.progress}/{self.max_value}"

    def set_progress(self, value: int) -> None:
        """Set the current value and redraw."""
        self.progress = value
        self._write("\r" + self.render())

    def increment(self) -> None:
        """Advance the current value by one."""
        self.set_progress(self.progress + 1)

    def finalize(self) -> None:
        """Mark the bar as finished and end its line."""
        if not self.finished:
            self.finished = True
            self._write("\r" + self.render() + "\n")


def current_progress_bar() -> ProgressBar | None:
    """The active progress bar, if one has been initialised."""
    return _current


def reset_progress() -> ProgressBar | None:
    """Drop the active progress bar and the timeline maximum; return the dropped bar."""
    global _current, _max_time
    dropped = _current
    if dropped is not None or _max_time is not None:
        logger.debug("resetting progress bar state")
    _current = None
    _max_time = None
    return dropped


def init_timeline_progress_bar(max_time: float) -> None:
    """Initialise the timeline bar with the time at which the simulation ends."""
    global _current, _max_time
    logger.debug("initializing timeline progress bar with max time %s", max_time)
    if _max_time is not None:
        raise RuntimeError("Timeline progress already initialized")
    _max_time = max_time
    _current = ProgressBar("Time", _round(max_time))


def update_timeline_progress(current_time: float) -> None:
    """Update the timeline bar; finalise it once ``current_time`` reaches the end."""
    if _max_time is None or _current is None:
        logger.warning(
            "attempted to update timeline progress bar before it was initialized"
        )
        return
    current_time = min(current_time, _max_time)
    _current.set_progress(_round(current_time))
    if current_time == _max_time:
        _current.finalize()


def init_custom_progress_bar(label: str, max_value: int) -> None:
    """Initialise a custom bar, replacing any existing one."""
    global _current
    logger.debug(
        "initializing custom progress bar with label %s and max value %s",
        label,
        max_value,
    )
    _current = ProgressBar(label, max_value)


def _require_bar() -> ProgressBar:
    if _current is None:
        raise RuntimeError("no progress bar has been initialized")
    return _current


def update_custom_progress(current_value: int) -> None:
    """Set the current value of the custom bar."""
    _require_bar().set_progress(current_value)


def increment_custom_progress() -> None:
    """Advance the custom bar by one."""
    _require_bar().increment()