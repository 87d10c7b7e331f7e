import datetime as dt
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

class BackupModel(BaseModel):
    # camelCase on the wire so documents written by the browser logbook import as-is
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True,
                              from_attributes=True, extra="ignore")

class BackupSession(BackupModel):
    id: int | None = None
    date: dt.date
    workout_type: str = Field(alias="type")
    bodyweight: float | None = None
    calories: int | None = None
    sleep: float | None = None
    created_at: dt.datetime | None = None

class BackupSet(BackupModel):
    id: int | None = None
    session_id: int | None = None
    exercise: str
    set_type: str
    load: str | None = None
    reps: int | None = None
    rir: float | None = None
    notes: str | None = None
    date: dt.date
    workout_type: str | None = Field(default=None, alias="type")
    bodyweight: float | None = None

class BackupDocument(BackupModel):
    version: int | None = None
    exported_at: dt.datetime | None = None
    sessions: list[BackupSession]
    sets: list[BackupSet]

class ImportResult(BaseModel):
    mode: str
    sessions: int
    sets: int
