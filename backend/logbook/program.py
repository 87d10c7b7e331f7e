"""Static training program: the universe of loggable (exercise, set-type) pairs.

The catalog is compiled in and read-only at runtime. Routers receive it through
``get_program()`` so tests can swap it with ``app.dependency_overrides``.
"""
from __future__ import annotations
import re
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping, NamedTuple

class ExerciseSlot(NamedTuple):
    name: str
    set_types: tuple[str, ...]

Program = Mapping[str, tuple[ExerciseSlot, ...]]

PULL_UPS = ExerciseSlot("Pull-Ups (Failure)", ("Set 1 (Fail)", "Set 2 (Fail)"))

_PROGRAM: dict[str, tuple[ExerciseSlot, ...]] = {
    "FB-A": (
        ExerciseSlot("Back Squat / Hack Squat", ("Top Set", "Back-off")),
        ExerciseSlot("Romanian Deadlift", ("Top Set", "Back-off")),
        ExerciseSlot("Bench Press", ("Top Set", "Back-off")),
        ExerciseSlot("Chest-Supported Row", ("Set 1", "Set 2")),
        PULL_UPS,
        ExerciseSlot("Lateral Raises (Myo-reps)", ("Activation", "Mini-set 1", "Mini-set 2", "Mini-set 3")),
        ExerciseSlot("Triceps Pushdown", ("Set 1", "Set 2")),
        ExerciseSlot("Calf Raise", ("Set 1", "Set 2")),
    ),
    "FB-B": (
        ExerciseSlot("Bulgarian Split Squat", ("Top Set", "Back-off")),
        ExerciseSlot("Leg Curl", ("Set 1", "Set 2")),
        ExerciseSlot("DB Overhead Press", ("Top Set", "Back-off")),
        ExerciseSlot("1-Arm DB Row", ("Set 1", "Set 2")),
        PULL_UPS,
        ExerciseSlot("Incline DB Curl", ("Set 1", "Set 2")),
        ExerciseSlot("Overhead Triceps Extension", ("Set 1", "Set 2")),
        ExerciseSlot("Rear Delt Fly / Face Pull", ("Set 1", "Set 2")),
        ExerciseSlot("Abs", ("Set 1", "Set 2")),
    ),
    "FB-C": (
        ExerciseSlot("Leg Press", ("Top Set", "Back-off")),
        ExerciseSlot("Hip Thrust", ("Set 1", "Set 2")),
        ExerciseSlot("Incline Bench / Dips", ("Top Set", "Back-off")),
        ExerciseSlot("Row Variation", ("Set 1", "Set 2")),
        PULL_UPS,
        ExerciseSlot("Pec Deck / Push-Ups (Drop)", ("Set 1", "Set 2")),
        ExerciseSlot("Hammer Curl", ("Set 1", "Set 2")),
        ExerciseSlot("Lateral Raise (Light)", ("Set 1", "Set 2")),
    ),
}

PROGRAM: Program = MappingProxyType(_PROGRAM)

# Exercises whose name contains this tag are logged as bodyweight sets to failure
FAILURE_TAG = "Pull-Ups"

ISOLATION_KEYWORDS = ("raise", "curl", "pushdown", "extension", "rear", "face", "abs", "pec deck")
_ISOLATION_RE = re.compile("|".join(re.escape(k) for k in ISOLATION_KEYWORDS), re.IGNORECASE)

# Rows of the stats snapshot, in display order
KEY_LIFTS: tuple[tuple[str, str], ...] = (
    ("Back Squat / Hack Squat", "Top Set"),
    ("Leg Press", "Top Set"),
    ("Bench Press", "Top Set"),
    ("Incline Bench / Dips", "Top Set"),
    ("DB Overhead Press", "Top Set"),
    (PULL_UPS.name, PULL_UPS.set_types[0]),
)

@lru_cache
def get_program() -> Program:
    return PROGRAM

def all_exercises(program: Program = PROGRAM) -> list[str]:
    """Distinct exercise names of the configured program, sorted.

    Derived from the catalog rather than stored sets, so exercises show up
    before they have ever been logged.
    """
    return sorted({slot.name for slots in program.values() for slot in slots})

def is_failure_exercise(exercise: str | None) -> bool:
    return FAILURE_TAG in (exercise or "")

def is_isolation_exercise(exercise: str | None) -> bool:
    return bool(_ISOLATION_RE.search(exercise or ""))
