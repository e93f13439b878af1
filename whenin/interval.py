# whenin/interval.py
"""
Pure interval math: humanized durations, range phases and local formatting.

Nothing here reads the clock; callers pass `now` in.
"""
from __future__ import annotations
from datetime import datetime, timedelta, tzinfo
from typing import Optional

from .errors import PastInstant
from .models import Candidate, Outcome, Phase, RangeCandidate, RangeOutcome, SingleOutcome

MS_PER_MINUTE = 60 * 1000
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR

_ONE_MS = timedelta(milliseconds=1)

def humanize_duration(ms: int) -> str:
    """'<d> days, <h> hours, <m> minutes', floored; '-' prefix for negative input."""
    sign = "-" if ms < 0 else ""
    diff = abs(int(ms))
    days, rem = divmod(diff, MS_PER_DAY)
    hours, rem = divmod(rem, MS_PER_HOUR)
    minutes = rem // MS_PER_MINUTE
    return f"{sign}{days} days, {hours} hours, {minutes} minutes"

def delta_ms(delta: timedelta) -> int:
    # truncates toward zero, so sub-millisecond noise never yields "-0 days"
    return int(delta / _ONE_MS)

def humanize_delta(delta: timedelta) -> str:
    return humanize_duration(delta_ms(delta))

def format_local(instant: datetime, tz: Optional[tzinfo] = None, clock: str = "12h") -> str:
    """
    Long-form rendering in the viewer's zone, e.g.
    'Friday, August 29, 2025 at 1:00 PM PDT'. tz=None means the system zone.
    """
    local = instant.astimezone(tz)
    if clock == "24h":
        hm = f"{local:%H:%M}"
    else:
        # %I pads with a zero and %-I is not portable
        hm = f"{local.hour % 12 or 12}:{local:%M} {'AM' if local.hour < 12 else 'PM'}"
    zone = local.strftime("%Z") or local.strftime("%z")
    return f"{local:%A, %B} {local.day}, {local.year} at {hm} {zone}".rstrip()

def classify_phase(start: datetime, end: datetime, now: datetime) -> Phase:
    if now < start:
        return Phase.UPCOMING
    if start <= now <= end:
        return Phase.ONGOING
    return Phase.ENDED

def classify_and_format_range(
    start: datetime,
    end: datetime,
    now: datetime,
    tz: Optional[tzinfo] = None,
    clock: str = "12h",
) -> RangeOutcome:
    # endpoints are taken as given; a reversed range is still measured by |end - start|
    duration = humanize_duration(abs(delta_ms(end - start)))
    phase = classify_phase(start, end, now)
    until: Optional[str] = None
    if phase is Phase.UPCOMING:
        until = f"Starts in {humanize_delta(start - now)}"
    elif phase is Phase.ONGOING:
        until = f"Ends in {humanize_delta(end - now)}"
    return RangeOutcome(
        start_local=format_local(start, tz, clock),
        end_local=format_local(end, tz, clock),
        duration=duration,
        phase=phase,
        until_label=until,
    )

def classify_and_format_single(
    target: datetime,
    now: datetime,
    tz: Optional[tzinfo] = None,
    clock: str = "12h",
) -> SingleOutcome:
    if target < now:
        raise PastInstant()
    return SingleOutcome(
        local_time=format_local(target, tz, clock),
        time_left=humanize_delta(target - now),
    )

def interpret(candidate: Candidate, now: datetime, tz: Optional[tzinfo] = None, clock: str = "12h") -> Outcome:
    if isinstance(candidate, RangeCandidate):
        return classify_and_format_range(candidate.start, candidate.end, now, tz, clock)
    return classify_and_format_single(candidate.at, now, tz, clock)
