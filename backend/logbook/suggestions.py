from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Protocol

from logbook.loads import bodyweight_addend, format_bodyweight_load, format_load, parse_load_string
from logbook.program import is_failure_exercise, is_isolation_exercise

FAILURE_REP_TARGET = 10
FAILURE_ADDEND_STEP = 5.0
COMPOUND_STEP = 5.0
ISOLATION_STEP = 2.5
# Progression is earned: a hard set (RIR <= 1) of at least 8 reps
MAX_RIR_FOR_BUMP = 1
MIN_REPS_FOR_BUMP = 8

class LoggedSet(Protocol):
    load: Optional[str]
    reps: Optional[int]
    rir: Optional[float]

@dataclass(frozen=True, slots=True)
class Suggestion:
    load: str
    reps: Optional[int] = None
    rir: Optional[float] = None

def _num(v):
    return v if isinstance(v, (int, float)) and not isinstance(v, bool) else None

def suggest(exercise: str, set_type: str, last: Optional[LoggedSet]) -> Optional[Suggestion]:
    """Next-session target derived from the last set in the same slot.

    Pure function of ``last`` and the exercise name. Clients merge the result
    into blank fields only; nothing here is ever written back.
    """
    if last is None:
        return None
    previous = last.load or ""
    reps = _num(last.reps)

    if is_failure_exercise(exercise):
        if reps is not None and reps >= FAILURE_REP_TARGET:
            return Suggestion(load=format_bodyweight_load(bodyweight_addend(previous) + FAILURE_ADDEND_STEP), rir=0)
        return Suggestion(load=previous, rir=0)

    parsed = parse_load_string(previous.strip())
    if parsed is None:
        return Suggestion(load=previous)

    step = ISOLATION_STEP if is_isolation_exercise(exercise) else COMPOUND_STEP
    rir = _num(last.rir)
    earned = rir is not None and rir <= MAX_RIR_FOR_BUMP and reps is not None and reps >= MIN_REPS_FOR_BUMP
    return Suggestion(load=format_load(parsed.value + (step if earned else 0), parsed.unit))
