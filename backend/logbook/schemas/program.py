from pydantic import BaseModel

from logbook.schemas.exercise_set import SetRead
from logbook.schemas.stats import PRRead, SuggestionRead

class ExerciseSlotRead(BaseModel):
    name: str
    set_types: list[str]

class SetSlotRead(BaseModel):
    set_type: str
    last: SetRead | None = None
    suggestion: SuggestionRead | None = None

class ExerciseCardRead(BaseModel):
    exercise: str
    slots: list[SetSlotRead]
    # PR of the primary (first) set type
    best: PRRead | None = None

class WorkoutSheetRead(BaseModel):
    workout_type: str
    exercises: list[ExerciseCardRead]
