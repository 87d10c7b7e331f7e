from __future__ import annotations
from dataclasses import dataclass, field

from logbook.loads import round_to_half

PLATES = (45, 35, 25, 10, 5, 2.5)

class PlateError(ValueError):
    pass

@dataclass(slots=True)
class PlateBreakdown:
    per_side: float
    plates: list[float] = field(default_factory=list)

def plate_breakdown(target: float, bar: float, plates: tuple[float, ...] = PLATES) -> PlateBreakdown:
    """Greedy per-side plate list for loading ``target`` on a ``bar``."""
    total = target - bar
    if total < 0:
        raise PlateError("Target is below bar weight.")
    per_side = total / 2
    remaining = round_to_half(per_side)
    out: list[float] = []
    for p in plates:
        while remaining >= p - 1e-9:
            out.append(p)
            remaining = round_to_half(remaining - p)
    if remaining > 0.01:
        raise PlateError("Cannot match exactly with standard plates.")
    return PlateBreakdown(per_side=per_side, plates=out)
