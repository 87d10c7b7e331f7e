import datetime as dt
from pydantic import BaseModel

from logbook.analytics import PersonalRecord, pr_display
from logbook.schemas.exercise_set import SetRead

class PRRead(BaseModel):
    exercise: str
    set_type: str
    score: float
    # reps for sets to failure, rounded e1RM otherwise
    display: int | None = None
    record: SetRead

    @classmethod
    def build(cls, exercise: str, set_type: str, pr: PersonalRecord | None) -> "PRRead | None":
        if pr is None:
            return None
        return cls(
            exercise=exercise,
            set_type=set_type,
            score=pr.score,
            display=pr_display(exercise, pr),
            record=SetRead.model_validate(pr.record),
        )

class SuggestionRead(BaseModel):
    load: str
    reps: int | None = None
    rir: float | None = None

    model_config = {"from_attributes": True}

class SnapshotRowRead(BaseModel):
    exercise: str
    set_type: str
    last: SetRead | None = None
    best: PRRead | None = None

class BodyweightPointRead(BaseModel):
    date: dt.date
    bodyweight: float

    model_config = {"from_attributes": True}

class BodyweightTrendRead(BaseModel):
    days: int
    points: list[BodyweightPointRead]
    change: float | None = None
    per_week: float | None = None

    model_config = {"from_attributes": True}

class PlatesRead(BaseModel):
    target: float
    bar: float
    per_side: float
    plates: list[float]
