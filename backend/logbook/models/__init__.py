from logbook.models.session import ExerciseSession
from logbook.models.exercise_set import ExerciseSet

__all__ = ["ExerciseSession", "ExerciseSet"]
