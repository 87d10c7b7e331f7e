"""Free-text load encodings.

A load is typed as entered on the set card: ``"225"``, ``"100 kg"``, ``"70s"``
for a pair of dumbbells, ``"BW"`` or ``"BW+25"`` relative to bodyweight.
Every parser here is total: unrecognized text yields ``None``, never an error.
"""
from __future__ import annotations
import math
import re
from dataclasses import dataclass
from typing import Optional, Union

DUMBBELL_SUFFIX = "s"

_NUMBER = r"(\d+(?:\.\d*)?|\.\d+)"
_BW_ADDEND_RE = re.compile(r"BW\s*\+\s*" + _NUMBER)
_DUMBBELL_RE = re.compile(r"^" + _NUMBER + r"\s*s$", re.IGNORECASE)
_LEADING_NUMBER_RE = re.compile(r"^" + _NUMBER + r"(.*)$", re.DOTALL)

@dataclass(frozen=True, slots=True)
class NumericLoad:
    value: float
    unit: str = ""

@dataclass(frozen=True, slots=True)
class BodyweightLoad:
    addend: float = 0.0

Load = Union[NumericLoad, BodyweightLoad]

@dataclass(frozen=True, slots=True)
class ResolvedLoad:
    """A load reduced to a number, ready for scoring."""
    value: float
    unit: str

def _parse_numeric(text: str) -> Optional[NumericLoad]:
    m = _DUMBBELL_RE.match(text)
    if m:
        return NumericLoad(float(m.group(1)), DUMBBELL_SUFFIX)
    m = _LEADING_NUMBER_RE.match(text)
    if m:
        return NumericLoad(float(m.group(1)), m.group(2).strip())
    return None

def parse_load(text: Optional[str]) -> Optional[Load]:
    """Classify a load string; ``None`` when it is blank or unrecognized."""
    if not text:
        return None
    s = str(text).strip()
    if s.upper().startswith("BW"):
        m = _BW_ADDEND_RE.search(s.upper())
        return BodyweightLoad(float(m.group(1)) if m else 0.0)
    return _parse_numeric(s)

def resolve_load(text: Optional[str], bodyweight: Optional[float]) -> Optional[ResolvedLoad]:
    """Numeric value of a load, using ``bodyweight`` for BW-relative loads.

    A BW-relative load without a known bodyweight cannot be scored and
    resolves to ``None``.
    """
    load = parse_load(text)
    if load is None:
        return None
    if isinstance(load, BodyweightLoad):
        if bodyweight is None:
            return None
        return ResolvedLoad(bodyweight + load.addend, "bw")
    return ResolvedLoad(load.value, load.unit)

def parse_load_string(text: Optional[str]) -> Optional[NumericLoad]:
    """Looser parse used for progression: leading number plus free-form suffix.

    ``BW`` loads are not special-cased and need no bodyweight.
    """
    if not text:
        return None
    return _parse_numeric(str(text).strip())

def bodyweight_addend(text: Optional[str]) -> float:
    load = parse_load(text)
    return load.addend if isinstance(load, BodyweightLoad) else 0.0

def round_to_half(value: float) -> float:
    # half-up, so 232.25 -> 232.5 regardless of float banker's rounding
    return math.floor(value * 2 + 0.5) / 2

def format_number(value: float) -> str:
    value = float(value)
    return str(int(value)) if value.is_integer() else str(value)

def format_load(value: float, suffix: str = "") -> str:
    n = format_number(round_to_half(value))
    if suffix == DUMBBELL_SUFFIX:
        return f"{n}{DUMBBELL_SUFFIX}"
    return f"{n} {suffix}" if suffix else n

def format_bodyweight_load(addend: float) -> str:
    return f"BW+{format_number(addend)}"
