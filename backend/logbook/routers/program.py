from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from logbook.analytics import best_pr
from logbook.db import get_db
from logbook.program import Program, all_exercises, get_program
from logbook.repositories.set_repo import SetRepository
from logbook.schemas.exercise_set import SetRead
from logbook.schemas.program import ExerciseCardRead, ExerciseSlotRead, SetSlotRead, WorkoutSheetRead
from logbook.schemas.stats import PRRead, SuggestionRead
from logbook.suggestions import suggest

router = APIRouter(prefix="/program", tags=["program"])

@router.get("", response_model=dict[str, list[ExerciseSlotRead]])
def get_catalog(program: Program = Depends(get_program)):
    return {
        wtype: [ExerciseSlotRead(name=slot.name, set_types=list(slot.set_types)) for slot in slots]
        for wtype, slots in program.items()
    }

@router.get("/exercises", response_model=list[str])
def list_exercises(program: Program = Depends(get_program)):
    return all_exercises(program)

@router.get("/{workout_type}", response_model=WorkoutSheetRead)
def workout_sheet(workout_type: str, db: Session = Depends(get_db), program: Program = Depends(get_program)):
    """Everything a set card needs: last entry, suggestion, and the primary PR."""
    slots = program.get(workout_type)
    if slots is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Unknown workout type")

    repo = SetRepository(db)
    cards = []
    for slot in slots:
        rows = []
        for st in slot.set_types:
            last = repo.most_recent_for(slot.name, st)
            tip = suggest(slot.name, st, last)
            rows.append(SetSlotRead(
                set_type=st,
                last=SetRead.model_validate(last) if last else None,
                suggestion=SuggestionRead.model_validate(tip) if tip else None,
            ))
        primary = slot.set_types[0]
        cards.append(ExerciseCardRead(
            exercise=slot.name,
            slots=rows,
            best=PRRead.build(slot.name, primary, best_pr(db, slot.name, primary)),
        ))
    return WorkoutSheetRead(workout_type=workout_type, exercises=cards)
