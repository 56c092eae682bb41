"""
engine/
-------
State, reducer, playback & recording layer.

    from engine import Store, Stepper, reduce, initial_state
    from engine import actions
"""

from engine import actions
from engine.state    import AppState, initial_state
from engine.history  import History
from engine.reducer  import reduce
from engine.store    import Store
from engine.stepper  import Stepper, StepperState, RunError
from engine.recorder import Recorder, RunSummary, ComparisonResult, compare, record

__all__ = [
    "actions",
    "AppState",
    "initial_state",
    "History",
    "reduce",
    "Store",
    "Stepper",
    "StepperState",
    "RunError",
    "Recorder",
    "RunSummary",
    "ComparisonResult",
    "compare",
    "record",
]
