"""Signal handling that turns pause and stop requests into recorder state."""

from __future__ import annotations

import signal
from dataclasses import dataclass
from types import FrameType
from typing import Any, Callable, Union

_Handler = Union[Callable[[int, Union[FrameType, None]], Any], int, None]

STOP_SIGNALS: tuple[signal.Signals, ...] = (
    signal.SIGINT,
    signal.SIGTERM,
    signal.SIGABRT,
)
PAUSE_SIGNAL: signal.Signals | None = getattr(signal, "SIGUSR1", None)


@dataclass
class RunState:
    """Flags shared between the signal handlers and the recording threads."""

    running: bool = True
    paused: bool = False
    aborted: bool = False
    pause_state_changed: bool = False

    def request_pause(self, signum: int, frame: FrameType | None) -> None:
        """Ask for the pause state to be toggled."""
        self.pause_state_changed = True

    def request_stop(self, signum: int, frame: FrameType | None) -> None:
        """Stop recording; an abort signal also marks the run as aborted."""
        self.running = False
        if signum == signal.SIGABRT:
            self.aborted = True


def register_callbacks(state: RunState) -> dict[int, _Handler]:
    """Install the pause and stop handlers for ``state``.

    SIGUSR1 toggles pausing; SIGINT, SIGTERM and SIGABRT stop the recording.
    Returns the handlers that were replaced, keyed by signal number, so a
    caller can put them back.
    """
    previous: dict[int, _Handler] = {}
    if PAUSE_SIGNAL is not None:
        previous[PAUSE_SIGNAL] = signal.signal(PAUSE_SIGNAL, state.request_pause)
    for signum in STOP_SIGNALS:
        previous[signum] = signal.signal(signum, state.request_stop)
    return previous