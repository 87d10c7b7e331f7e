from __future__ import annotations
import csv
import io
from typing import Iterable

from logbook.loads import format_number
from logbook.models import ExerciseSet

CSV_HEADER = ("date", "type", "exercise", "setType", "load", "reps", "rir", "notes")

def _cell(v) -> str:
    if v is None:
        return ""
    if isinstance(v, float):
        return format_number(v)
    return str(v)

def history_csv(rows: Iterable[ExerciseSet]) -> str:
    """Every field quoted, embedded quotes doubled, header unquoted."""
    buf = io.StringIO()
    buf.write(",".join(CSV_HEADER))
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for r in rows:
        buf.write("\n")
        writer.writerow([_cell(v) for v in (r.date, r.workout_type, r.exercise, r.set_type,
                                            r.load, r.reps, r.rir, r.notes)])
    return buf.getvalue().rstrip("\n")

def csv_filename(exercise: str) -> str:
    return f"history_{exercise.replace(' ', '_')}.csv"
