from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, String, Float, DateTime, func
from logbook.db import Base

class ExerciseSession(Base):
    __tablename__ = "sessions"
    # AUTOINCREMENT keeps ids monotonic across wipes; recency tie-breaks rely on it
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    date: Mapped[str] = mapped_column(String(10), nullable=False, index=True)
    workout_type: Mapped[str] = mapped_column("type", String(32), nullable=False, index=True)
    bodyweight: Mapped[float | None] = mapped_column(Float, nullable=True)
    calories: Mapped[int | None] = mapped_column(Integer, nullable=True)
    sleep: Mapped[float | None] = mapped_column(Float, nullable=True)
    created_at: Mapped[DateTime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    sets = relationship("ExerciseSet", back_populates="session", cascade="all, delete-orphan",
                        order_by="ExerciseSet.id")
