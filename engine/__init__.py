"""
engine/
-------
Playback & recording layer.

    from engine import Stepper, Recorder, run_trace, trace_to_dict
"""

from engine.stepper  import Stepper, StepperState, SPEED_PRESETS
from engine.recorder import Recorder, RunMetrics, run_trace, trace_to_dict

__all__ = [
    "Stepper",
    "StepperState",
    "SPEED_PRESETS",
    "Recorder",
    "RunMetrics",
    "run_trace",
    "trace_to_dict",
]
