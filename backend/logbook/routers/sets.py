from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session
from logbook.db import get_db
from logbook.exports import csv_filename, history_csv
from logbook.schemas.exercise_set import SetRead
from logbook.repositories.set_repo import SetRepository
from logbook.settings import get_settings

router = APIRouter(prefix="/sets", tags=["sets"])

@router.get("/last", response_model=SetRead | None)
def last_set(
    exercise: str = Query(..., min_length=1),
    set_type: str = Query(..., min_length=1),
    db: Session = Depends(get_db),
):
    return SetRepository(db).most_recent_for(exercise, set_type)

@router.get("/history", response_model=list[SetRead])
def exercise_history(
    exercise: str = Query(..., min_length=1),
    limit: int = Query(get_settings().HISTORY_LIMIT, ge=1, le=2000),
    db: Session = Depends(get_db),
):
    return SetRepository(db).history(exercise, limit=limit)

@router.get("/history.csv")
def export_history_csv(exercise: str = Query(..., min_length=1), db: Session = Depends(get_db)):
    rows = SetRepository(db).history(exercise, limit=get_settings().CSV_HISTORY_LIMIT)
    return Response(
        content=history_csv(rows),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{csv_filename(exercise)}"'},
    )
