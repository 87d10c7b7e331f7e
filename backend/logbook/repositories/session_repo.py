from __future__ import annotations
import logging
from typing import Iterable, Optional
from sqlalchemy import select, delete
from logbook.models import ExerciseSession, ExerciseSet
from logbook.repositories.base import BaseRepository
from logbook.repositories.set_repo import SetRepository
from logbook.schemas.exercise_set import SetCreate
from logbook.schemas.session import SessionCreate

log = logging.getLogger(__name__)

class SessionRepository(BaseRepository[ExerciseSession]):
    model = ExerciseSession

    # READS
    def get(self, session_id: int) -> Optional[ExerciseSession]:
        return self.db.get(ExerciseSession, session_id)

    def recent(self, *, limit: int = 50) -> list[ExerciseSession]:
        stmt = select(ExerciseSession)\
            .order_by(ExerciseSession.date.desc(), ExerciseSession.id.desc())\
            .limit(limit)
        return list(self.db.execute(stmt).scalars().all())

    # WRITES
    def stage(self, **fields) -> ExerciseSession:
        """Add a session and flush so its id is available to child rows."""
        sess = ExerciseSession(**fields)
        self.db.add(sess)
        self.db.flush()
        return sess

    def create(self, session: SessionCreate, set_rows: Iterable[SetCreate]) -> ExerciseSession:
        """Persist a session together with its sets in one transaction."""
        set_repo = SetRepository(self.db)
        with self.write_unit("save session"):
            sess = self.stage(
                date=session.date.isoformat(),
                workout_type=session.workout_type,
                bodyweight=session.bodyweight,
                calories=session.calories,
                sleep=session.sleep,
            )
            count = 0
            for row in set_rows:
                set_repo.stage_for_session(sess, row)
                count += 1
        self.db.refresh(sess)
        log.info("saved session id=%s date=%s type=%s sets=%d", sess.id, sess.date, sess.workout_type, count)
        return sess

    def delete_all(self) -> None:
        """Stage removal of every set and session; the caller commits."""
        self.db.execute(delete(ExerciseSet))
        self.db.execute(delete(ExerciseSession))

    def clear_all(self) -> None:
        with self.write_unit("wipe"):
            self.delete_all()
        log.info("wiped all sessions and sets")
