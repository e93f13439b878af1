# whenin/shell.py
"""
Presentation state for the converter.

The state is an immutable `ShellState`; every user action is an event and
`reduce(state, event, converter)` returns the next state. The clock is read
by whoever creates the event, never in here.
"""
from __future__ import annotations
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Callable, Optional, Union

from . import timeparse
from .errors import ConversionError, EmptyInput, Unparseable
from .interval import interpret
from .models import Candidate, Outcome
from .timeparse import ParseSettings

Parser = Callable[[str, datetime, ParseSettings], Optional[Candidate]]

@dataclass(frozen=True)
class Converter:
    settings: ParseSettings = field(default_factory=ParseSettings)
    clock: str = "12h"
    parser: Parser = timeparse.parse

def convert(text: str, now: datetime, converter: Converter) -> Outcome:
    """Text -> outcome, or raise EmptyInput / Unparseable / PastInstant."""
    if not text or not text.strip():
        raise EmptyInput()
    candidate = converter.parser(text, now, converter.settings)
    if candidate is None:
        raise Unparseable()
    return interpret(candidate, now, converter.settings.zone, converter.clock)

# ---------- state & events ----------

@dataclass(frozen=True)
class ShellState:
    text: str = ""
    outcome: Optional[Outcome] = None
    error: Optional[str] = None

    @property
    def idle(self) -> bool:
        return self.outcome is None and self.error is None

@dataclass(frozen=True)
class TextChanged:
    text: str

@dataclass(frozen=True)
class Cleared:
    pass

@dataclass(frozen=True)
class Submitted:
    now: datetime

@dataclass(frozen=True)
class ExampleSelected:
    text: str
    now: datetime

Event = Union[TextChanged, Cleared, Submitted, ExampleSelected]

def reduce(state: ShellState, event: Event, converter: Converter) -> ShellState:
    if isinstance(event, TextChanged):
        return replace(state, text=event.text)
    if isinstance(event, Cleared):
        return replace(state, text="")
    if isinstance(event, ExampleSelected):
        state = replace(state, text=event.text)
    elif not isinstance(event, Submitted):
        raise TypeError(f"unknown event: {event!r}")

    try:
        outcome = convert(state.text, event.now, converter)
    except ConversionError as e:
        return replace(state, outcome=None, error=str(e))
    return replace(state, outcome=outcome, error=None)
