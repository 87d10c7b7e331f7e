from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from logbook.analytics import best_pr, bodyweight_trend, snapshot
from logbook.db import get_db
from logbook.repositories.session_repo import SessionRepository
from logbook.repositories.set_repo import SetRepository
from logbook.schemas.exercise_set import SetRead
from logbook.schemas.stats import BodyweightTrendRead, PRRead, SnapshotRowRead, SuggestionRead
from logbook.suggestions import suggest

router = APIRouter(prefix="/stats", tags=["stats"])

# sessions considered for the bodyweight chart
BODYWEIGHT_SESSIONS = 500

@router.get("/pr", response_model=PRRead | None)
def personal_record(
    exercise: str = Query(..., min_length=1),
    set_type: str = Query(..., min_length=1),
    db: Session = Depends(get_db),
):
    return PRRead.build(exercise, set_type, best_pr(db, exercise, set_type))

@router.get("/suggestion", response_model=SuggestionRead | None)
def next_suggestion(
    exercise: str = Query(..., min_length=1),
    set_type: str = Query(..., min_length=1),
    db: Session = Depends(get_db),
):
    last = SetRepository(db).most_recent_for(exercise, set_type)
    return suggest(exercise, set_type, last)

@router.get("/snapshot", response_model=list[SnapshotRowRead])
def key_lift_snapshot(db: Session = Depends(get_db)):
    return [
        SnapshotRowRead(
            exercise=row.exercise,
            set_type=row.set_type,
            last=SetRead.model_validate(row.last) if row.last else None,
            best=PRRead.build(row.exercise, row.set_type, row.best),
        )
        for row in snapshot(db)
    ]

@router.get("/bodyweight", response_model=BodyweightTrendRead)
def bodyweight(days: int = Query(7, ge=1, le=365), db: Session = Depends(get_db)):
    sessions = SessionRepository(db).recent(limit=BODYWEIGHT_SESSIONS)
    return bodyweight_trend(sessions, days)
