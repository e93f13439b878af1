# whenin/models.py
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Literal, Optional, Union

# ---------- parser candidates ----------

@dataclass(frozen=True)
class SingleCandidate:
    at: datetime
    kind: Literal["single"] = "single"

@dataclass(frozen=True)
class RangeCandidate:
    # start <= end is not guaranteed
    start: datetime
    end: datetime
    kind: Literal["range"] = "range"

Candidate = Union[SingleCandidate, RangeCandidate]

# ---------- display outcomes ----------

class Phase(str, Enum):
    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    ENDED = "ended"

@dataclass(frozen=True)
class SingleOutcome:
    local_time: str
    time_left: str
    kind: Literal["single"] = "single"

@dataclass(frozen=True)
class RangeOutcome:
    start_local: str
    end_local: str
    duration: str
    phase: Phase
    until_label: Optional[str] = None  # e.g. "Starts in 2 days, 0 hours, 0 minutes"
    kind: Literal["range"] = "range"

Outcome = Union[SingleOutcome, RangeOutcome]
