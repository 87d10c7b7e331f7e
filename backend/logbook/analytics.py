"""Derived numbers: personal records, key-lift snapshot, bodyweight trend."""
from __future__ import annotations
import datetime as dt
import math
from dataclasses import dataclass
from typing import Iterable, Optional, Protocol

from sqlalchemy.orm import Session

from logbook.models import ExerciseSession, ExerciseSet
from logbook.program import KEY_LIFTS, is_failure_exercise
from logbook.loads import resolve_load
from logbook.repositories.set_repo import SetRepository
from logbook.settings import get_settings

class ScorableSet(Protocol):
    exercise: str
    load: Optional[str]
    reps: Optional[int]
    bodyweight: Optional[float]

@dataclass(slots=True)
class PersonalRecord:
    score: float
    record: ExerciseSet

@dataclass(slots=True)
class SnapshotRow:
    exercise: str
    set_type: str
    last: Optional[ExerciseSet]
    best: Optional[PersonalRecord]

@dataclass(slots=True)
class BodyweightPoint:
    date: dt.date
    bodyweight: float

@dataclass(slots=True)
class BodyweightTrend:
    days: int
    points: list[BodyweightPoint]
    change: Optional[float] = None
    per_week: Optional[float] = None

def epley(load: float, reps: int) -> float:
    return load * (1 + reps / 30)

def _is_int(v) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)

def pr_score(row: ScorableSet) -> Optional[float]:
    """Score of one logged set, or None when it cannot be scored.

    Sets to failure score their rep count. Weighted sets score the Epley
    estimated max, with BW-relative loads resolved against the bodyweight
    stored on the set.
    """
    if is_failure_exercise(row.exercise):
        return row.reps if _is_int(row.reps) and row.reps >= 0 else None
    load = resolve_load(row.load, row.bodyweight)
    if load is None or not _is_int(row.reps) or row.reps <= 0:
        return None
    return epley(load.value, row.reps)

def best_of(rows: Iterable[ExerciseSet], set_type: str) -> Optional[PersonalRecord]:
    best: Optional[PersonalRecord] = None
    for r in rows:
        if r.set_type != set_type:
            continue
        score = pr_score(r)
        if score is None:
            continue
        if best is None or score > best.score:
            best = PersonalRecord(score=score, record=r)
    return best

def best_pr(db: Session, exercise: str, set_type: str) -> Optional[PersonalRecord]:
    rows = SetRepository(db).history(exercise, limit=get_settings().PR_HISTORY_LIMIT)
    return best_of(rows, set_type)

def pr_display(exercise: str, pr: PersonalRecord) -> Optional[int]:
    """What a PR badge shows: reps for sets to failure, rounded e1RM otherwise."""
    if is_failure_exercise(exercise):
        return pr.record.reps
    return math.floor(pr.score + 0.5)

def snapshot(db: Session, key_lifts: Iterable[tuple[str, str]] = KEY_LIFTS) -> list[SnapshotRow]:
    repo = SetRepository(db)
    return [
        SnapshotRow(exercise=ex, set_type=st, last=repo.most_recent_for(ex, st), best=best_pr(db, ex, st))
        for ex, st in key_lifts
    ]

def _round1(v: float) -> float:
    return math.floor(v * 10 + 0.5) / 10

def bodyweight_trend(sessions: Iterable[ExerciseSession], days: int, today: Optional[dt.date] = None) -> BodyweightTrend:
    today = today or dt.date.today()
    cutoff = today - dt.timedelta(days=days)
    points = sorted(
        (BodyweightPoint(dt.date.fromisoformat(s.date), s.bodyweight)
         for s in sessions if s.bodyweight is not None),
        key=lambda p: p.date,
    )
    # the day exactly `days` back falls outside the window
    points = [p for p in points if p.date > cutoff]
    trend = BodyweightTrend(days=days, points=points)
    if len(points) < 2:
        return trend
    trend.change = _round1(points[-1].bodyweight - points[0].bodyweight)
    trend.per_week = _round1(trend.change / (days / 7))
    return trend
