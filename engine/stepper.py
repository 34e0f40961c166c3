"""
stepper.py — Step-by-Step Playback
===================================
Replays a traversal one Step at a time: forward, backward, or on a
timer.  The Stepper owns a source of Steps (a live DFS generator or a
finished Trace), buffers every Step it has pulled so it can rewind, and
exposes a small play/pause/next/prev/speed API.

State machine:
    IDLE     →  load() / replay()  →  PAUSED
    PAUSED   →  play()             →  PLAYING
    PLAYING  →  pause()            →  PAUSED
    PLAYING  →  (no more steps)    →  FINISHED
    any      →  reset()            →  IDLE

One Stepper belongs to one caller; it is not thread-safe.
"""

import time
from enum import Enum
from typing import Callable, Iterator, List, Optional

from algorithms.step import Step, Trace


class StepperState(Enum):
    IDLE     = "idle"
    PAUSED   = "paused"
    PLAYING  = "playing"
    FINISHED = "finished"


# seconds per step
SPEED_PRESETS = {
    "slow":   1.0,
    "medium": 0.7,
    "fast":   0.3,
    "turbo":  0.05,
}

MIN_SPEED = 0.02


class Stepper:
    """
    Attributes:
        state       : Current StepperState.
        steps       : Every Step pulled so far (buffer for rewind).
        current_idx : Index into `steps` that is currently shown.
        speed       : Seconds between auto-advance ticks.
        on_step     : Optional callback(Step) fired whenever the current
                      step changes.
    """

    def __init__(self, on_step: Optional[Callable[[Step], None]] = None):
        self._source:     Optional[Iterator[Step]] = None
        self.steps:       List[Step]   = []
        self.current_idx: int          = -1
        self.state:       StepperState = StepperState.IDLE
        self.speed:       float        = SPEED_PRESETS["medium"]
        self.on_step:     Optional[Callable[[Step], None]] = on_step
        self._last_tick:  float        = 0.0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def load(self, source: Iterator[Step]) -> None:
        """
        Attach a fresh Step source and show its first Step.

        The first Step is pulled eagerly, so an invalid start vertex
        surfaces here rather than on the first next_step().
        """
        self._source     = iter(source)
        self.steps       = []
        self.current_idx = -1
        self.state       = StepperState.IDLE
        if self._fetch_next():
            self.state = StepperState.PAUSED
            self._goto(0)

    def replay(self, trace: Trace) -> None:
        """Load a finished Trace for playback."""
        self.load(iter(trace.steps))

    def reset(self) -> None:
        self._source     = None
        self.steps       = []
        self.current_idx = -1
        self.state       = StepperState.IDLE

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Advance one step.  Returns False if already at the end."""
        target = self.current_idx + 1
        if target >= len(self.steps) and not self._fetch_next():
            self.state = StepperState.FINISHED
            return False
        self._goto(target)
        return True

    def prev_step(self) -> bool:
        """Rewind one step.  Returns False if already at the start."""
        if self.current_idx <= 0:
            return False
        if self.state == StepperState.FINISHED:
            self.state = StepperState.PAUSED
        self._goto(self.current_idx - 1)
        return True

    def goto_step(self, idx: int) -> bool:
        """Jump to step `idx`, pulling forward from the source if needed."""
        if idx < 0:
            return False
        while idx >= len(self.steps):
            if not self._fetch_next():
                return False
        self._goto(idx)
        return True

    def rewind(self) -> None:
        if self.steps:
            self.state = StepperState.PAUSED
            self._goto(0)

    def jump_to_end(self) -> None:
        """Exhaust the source and show the final step."""
        while self._fetch_next():
            pass
        if self.steps:
            self._goto(len(self.steps) - 1)
        self.state = StepperState.FINISHED

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self, now: Optional[float] = None) -> None:
        if self.state in (StepperState.IDLE, StepperState.FINISHED):
            return
        self.state      = StepperState.PLAYING
        self._last_tick = time.monotonic() if now is None else now

    def pause(self) -> None:
        if self.state == StepperState.PLAYING:
            self.state = StepperState.PAUSED

    def toggle_play(self) -> None:
        if self.state == StepperState.PLAYING:
            self.pause()
        else:
            self.play()

    def tick(self, now: Optional[float] = None) -> bool:
        """
        Call periodically while playing.  Advances one step once
        `speed` seconds have passed since the last advance.  Returns
        True if a step was taken.
        """
        if self.state != StepperState.PLAYING:
            return False
        now = time.monotonic() if now is None else now
        if now - self._last_tick < self.speed:
            return False
        self._last_tick = now
        return self.next_step()

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, preset: str) -> None:
        self.speed = SPEED_PRESETS.get(preset, SPEED_PRESETS["medium"])

    def set_speed_value(self, seconds: float) -> None:
        self.speed = max(MIN_SPEED, seconds)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_step(self) -> Optional[Step]:
        if 0 <= self.current_idx < len(self.steps):
            return self.steps[self.current_idx]
        return None

    @property
    def total_steps_fetched(self) -> int:
        return len(self.steps)

    @property
    def is_finished(self) -> bool:
        return self.state == StepperState.FINISHED

    @property
    def is_playing(self) -> bool:
        return self.state == StepperState.PLAYING

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _fetch_next(self) -> bool:
        if self._source is None:
            return False
        step = next(self._source, None)
        if step is None:
            return False
        self.steps.append(step)
        return True

    def _goto(self, idx: int) -> None:
        self.current_idx = idx
        if self.on_step:
            self.on_step(self.steps[idx])
