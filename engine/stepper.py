"""
stepper.py — Step-by-Step Playback Engine
==========================================
The Stepper is the animation driver.  It owns the algorithm generator,
pulls one Step per tick and dispatches it into the store.  It decides
WHEN the next step happens; the reducer decides what a step means.

State machine:
    IDLE     →  start()         →  PLAYING  (or PAUSED with autoplay=False)
    PAUSED   →  play()          →  PLAYING
    PLAYING  →  pause()         →  PAUSED
    PLAYING  →  (done step)     →  FINISHED
    any      →  reset()         →  IDLE

Pausing just stops pulling from the generator; playing again continues
the same generator, so no progress is lost.  reset() and switching
algorithm drop the generator.

Thread safety:
  This class is NOT thread-safe.  Call tick() / next_step() from a single
  thread (or an async event loop).
"""

import logging
import time
from enum import Enum
from typing import Callable, Generator, Optional

import config
from algorithms import create_producer, get_algorithm
from algorithms.step import Step
from engine.actions import (
    AppendPathNote, ApplyStep, ResetStatus, SetAlgorithm, SetRunning,
    SetSpeed, SetStartNode, SetTotalCost,
)
from engine.store import Store

logger = logging.getLogger(__name__)


class RunError(ValueError):
    """Raised when a run cannot start (no algorithm, no start node)."""


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    IDLE     = "idle"
    PAUSED   = "paused"
    PLAYING  = "playing"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        store       : The Store every step is dispatched into.
        state       : Current StepperState.
        steps_taken : Number of steps pulled from the current generator.
        last_step   : The most recent Step dispatched (or None).
    """

    def __init__(self, store: Store, clock: Callable[[], float] = time.monotonic):
        self.store = store
        self.state:       StepperState = StepperState.IDLE
        self.steps_taken: int          = 0
        self.last_step:   Optional[Step] = None

        self._generator: Optional[Generator[Step, None, None]] = None
        self._clock = clock
        self._last_tick: float = 0.0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def select_algorithm(self, key: Optional[str]) -> None:
        """Switch algorithm: drop the current run and clear the colours."""
        self.reset()
        self.store.dispatch(SetAlgorithm(key))

    def start(self, algorithm: Optional[str] = None, start: Optional[str] = None, autoplay: bool = True) -> None:
        """
        Build a fresh generator over the current graph and begin playing.
        Falls back to the store's selected algorithm and start node.
        """
        app = self.store.state
        key = algorithm or app.algorithm
        info = get_algorithm(key)
        if info is None:
            raise RunError("Please select an algorithm to run.")

        start_id = start if start is not None else app.start_node_id
        if info.requires_start and app.graph.get_node(start_id) is None:
            raise RunError("No start node: choose a start node first.")

        if key != app.algorithm:
            self.store.dispatch(SetAlgorithm(key))
        self.store.dispatch(ResetStatus())
        self.store.dispatch(SetStartNode(start_id))

        self._generator  = create_producer(key, self.store.state.graph.copy(), start_id)
        self.steps_taken = 0
        self.last_step   = None
        logger.info("starting %s run on %r from %s", key, self.store.state.graph, start_id)

        if autoplay:
            self.play()
        else:
            self.state = StepperState.PAUSED

    def reset(self) -> None:
        """Back to IDLE: drop the generator, stop running, clear the colours."""
        self._generator  = None
        self.steps_taken = 0
        self.last_step   = None
        self.state       = StepperState.IDLE
        self.store.dispatch(SetRunning(False))
        self.store.dispatch(ResetStatus())
        if self.store.state.start_node_id is not None:
            self.store.dispatch(SetStartNode(self.store.state.start_node_id))

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> Optional[Step]:
        """Pull and dispatch one step.  None once the run is over."""
        if self._generator is None or self.state is StepperState.FINISHED:
            return None

        try:
            step = next(self._generator)
        except StopIteration:
            self._finish()
            return None

        self.steps_taken += 1
        self.last_step = step
        self.store.dispatch(ApplyStep(step))
        if step.path_note:
            self.store.dispatch(AppendPathNote(step.path_note))

        if step.is_final:
            if step.total_cost is not None:
                self.store.dispatch(SetTotalCost(step.total_cost))
            self._finish()
        return step

    def jump_to_end(self) -> None:
        """Exhaust the generator, dispatching every remaining step."""
        while self.next_step() is not None:
            pass

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self) -> None:
        if self._generator is None or self.state is StepperState.FINISHED:
            return
        self.state      = StepperState.PLAYING
        self._last_tick = self._clock()
        self.store.dispatch(SetRunning(True))

    def pause(self) -> None:
        if self.state is StepperState.PLAYING:
            self.state = StepperState.PAUSED
        self.store.dispatch(SetRunning(False))

    def toggle_play(self) -> None:
        if self.state is StepperState.PLAYING:
            self.pause()
        else:
            self.play()

    # ------------------------------------------------------------------
    # Tick  (call this from your event loop / timer)
    # ------------------------------------------------------------------
    def tick(self) -> bool:
        """
        Call periodically.  If playing and at least `speed` ms have passed
        since the last step, advances one step.  Returns True if a step
        was taken.
        """
        if self.state is not StepperState.PLAYING:
            return False
        now = self._clock()
        if (now - self._last_tick) * 1000 < self.store.state.speed:
            return False
        self._last_tick = now
        return self.next_step() is not None

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, value) -> int:
        """Preset name ("slow", "fast", …) or milliseconds."""
        ms = config.resolve_speed(value)
        self.store.dispatch(SetSpeed(ms))
        return ms

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def is_finished(self) -> bool:
        return self.state is StepperState.FINISHED

    @property
    def is_playing(self) -> bool:
        return self.state is StepperState.PLAYING

    def to_dict(self) -> dict:
        return {
            "state":      self.state.value,
            "stepsTaken": self.steps_taken,
            "lastStep":   self.last_step.to_dict() if self.last_step else None,
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _finish(self) -> None:
        self._generator = None
        self.state = StepperState.FINISHED
        self.store.dispatch(SetRunning(False))
        logger.info(
            "run finished after %d steps: %s",
            self.steps_taken,
            self.last_step.message if self.last_step else "no steps",
        )
