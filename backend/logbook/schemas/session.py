import datetime as dt
from typing import Annotated
from pydantic import BaseModel, Field, field_validator, model_validator

from logbook.program import PROGRAM
from logbook.schemas.exercise_set import SetCreate, SetRead

NonNegInt = Annotated[int, Field(ge=0)]
NonNegFloat = Annotated[float, Field(ge=0)]

class SessionCreate(BaseModel):
    date: dt.date
    workout_type: str
    bodyweight: NonNegFloat | None = None
    calories: NonNegInt | None = None
    sleep: NonNegFloat | None = None
    sets: list[SetCreate] = Field(default_factory=list)

    @field_validator("workout_type")
    @classmethod
    def known_workout_type(cls, v: str) -> str:
        if v not in PROGRAM:
            raise ValueError(f"unknown workout type {v!r}")
        return v

    @model_validator(mode="after")
    def require_a_set(self):
        self.sets = [s for s in self.sets if not s.is_blank()]
        if not self.sets:
            raise ValueError("Enter at least one set.")
        return self

class SessionRead(BaseModel):
    id: int
    date: dt.date
    workout_type: str
    bodyweight: float | None = None
    calories: int | None = None
    sleep: float | None = None
    created_at: dt.datetime | None = None

    model_config = {"from_attributes": True}

class SessionDetail(SessionRead):
    sets: list[SetRead] = []
