from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, ForeignKey, String, Float, Text, Index
from logbook.db import Base

class ExerciseSet(Base):
    __tablename__ = "exercise_sets"
    __table_args__ = (
        Index("ix_exercise_sets_exercise_set_type", "exercise", "set_type"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    session_id: Mapped[int] = mapped_column(ForeignKey("sessions.id", ondelete="CASCADE"), nullable=False, index=True)
    exercise: Mapped[str] = mapped_column(String(120), nullable=False, index=True)
    set_type: Mapped[str] = mapped_column(String(60), nullable=False)
    load: Mapped[str | None] = mapped_column(String(60), nullable=True)
    reps: Mapped[int | None] = mapped_column(Integer, nullable=True)
    rir: Mapped[float | None] = mapped_column(Float, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Copied from the owning session when the set is written; never re-synced
    date: Mapped[str] = mapped_column(String(10), nullable=False, index=True)
    workout_type: Mapped[str | None] = mapped_column("type", String(32), nullable=True)
    bodyweight: Mapped[float | None] = mapped_column(Float, nullable=True)

    session = relationship("ExerciseSession", back_populates="sets")
