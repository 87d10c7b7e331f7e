import datetime as dt
from typing import Annotated
from pydantic import BaseModel, Field, field_validator

# Keep max lengths in line with the table columns
ExerciseStr = Annotated[str, Field(max_length=120)]
SetTypeStr = Annotated[str, Field(max_length=60)]
LoadStr = Annotated[str, Field(max_length=60)]
NonNegInt = Annotated[int, Field(ge=0)]
Rir = Annotated[float, Field(ge=0, multiple_of=0.5)]

class SetCreate(BaseModel):
    exercise: ExerciseStr
    set_type: SetTypeStr
    load: LoadStr | None = None
    reps: NonNegInt | None = None
    rir: Rir | None = None
    notes: str | None = None

    @field_validator("exercise", "set_type")
    @classmethod
    def non_blank(cls, v: str) -> str:
        v2 = v.strip()
        if not v2:
            raise ValueError("cannot be blank")
        return v2

    @field_validator("load", "notes")
    @classmethod
    def empty_to_none(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.strip() or None

    def is_blank(self) -> bool:
        """Untouched set card: nothing but the exercise and set-type labels."""
        return not self.load and self.reps is None and self.rir is None and not self.notes

class SetRead(BaseModel):
    id: int
    session_id: int
    exercise: str
    set_type: str
    load: str | None = None
    reps: int | None = None
    rir: float | None = None
    notes: str | None = None
    date: dt.date
    workout_type: str | None = None
    bodyweight: float | None = None

    model_config = {"from_attributes": True}
