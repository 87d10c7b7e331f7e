from __future__ import annotations
from typing import Optional
from sqlalchemy import select
from logbook.models import ExerciseSession, ExerciseSet
from logbook.repositories.base import BaseRepository
from logbook.schemas.exercise_set import SetCreate

class SetRepository(BaseRepository[ExerciseSet]):
    model = ExerciseSet

    # READS
    def list_by_session(self, session_id: int) -> list[ExerciseSet]:
        stmt = select(ExerciseSet).where(ExerciseSet.session_id == session_id).order_by(ExerciseSet.id.asc())
        return list(self.db.execute(stmt).scalars().all())

    def most_recent_for(self, exercise: str, set_type: str) -> Optional[ExerciseSet]:
        """Latest set logged in this slot; same-day entries go to the higher id."""
        stmt = select(ExerciseSet)\
            .where(ExerciseSet.exercise == exercise, ExerciseSet.set_type == set_type)\
            .order_by(ExerciseSet.date.desc(), ExerciseSet.id.desc())\
            .limit(1)
        return self.db.execute(stmt).scalars().first()

    def history(self, exercise: str, *, limit: int = 200) -> list[ExerciseSet]:
        stmt = select(ExerciseSet).where(ExerciseSet.exercise == exercise)\
                                  .order_by(ExerciseSet.date.desc(), ExerciseSet.id.desc())\
                                  .limit(limit)
        return list(self.db.execute(stmt).scalars().all())

    # WRITES (staged; the caller owns the transaction)
    def stage(self, **fields) -> ExerciseSet:
        s = ExerciseSet(**fields)
        self.db.add(s)
        return s

    def stage_for_session(self, sess: ExerciseSession, row: SetCreate) -> ExerciseSet:
        return self.stage(
            session_id=sess.id,
            exercise=row.exercise,
            set_type=row.set_type,
            load=row.load,
            reps=row.reps,
            rir=row.rir,
            notes=row.notes,
            date=sess.date,
            workout_type=sess.workout_type,
            bodyweight=sess.bodyweight,
        )
