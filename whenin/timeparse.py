# whenin/timeparse.py
"""
Binding to the `dateparser` natural-language parser.

`parse` turns free text into at most one candidate: a single instant, or a
(start, end) pair when the text names a range ("Aug 29 1pm to Sep 1 1pm").
Naive results are read as wall time in the parse zone; the parse zone is the
viewer's zone unless the text ends in a generic zone name such as "PT".
"""
from __future__ import annotations
import logging
import re
from dataclasses import dataclass, replace
from datetime import datetime, tzinfo
from typing import Optional, Tuple
from zoneinfo import ZoneInfo

import dateparser
from dateparser.search import search_dates

from .models import Candidate, RangeCandidate, SingleCandidate

log = logging.getLogger(__name__)

# generic North American zone names dateparser does not resolve on its own
ZONE_ALIASES = {
    "PT": "America/Los_Angeles",
    "MT": "America/Denver",
    "CT": "America/Chicago",
    "ET": "America/New_York",
    "AKT": "America/Anchorage",
    "HT": "Pacific/Honolulu",
}

_ZONE_ALIAS_RE = re.compile(r"\s+(" + "|".join(ZONE_ALIASES) + r")\.?$")
_RANGE_PREFIX_RE = re.compile(r"^(?:from|between)\s+", re.IGNORECASE)
# spaced hyphen only, so "UTC-7" and "2025-08-29" stay intact
_RANGE_SEP_RE = re.compile(
    r"\s+(?:to|until|till|through|thru)\s+|\s*[–—]\s*|\s+-\s+",
    re.IGNORECASE,
)

PREFER_CHOICES = ("current_period", "future", "past")

@dataclass(frozen=True)
class ParseSettings:
    zone: Optional[tzinfo] = None        # None -> system local zone
    prefer_dates_from: str = "current_period"  # range starts only
    languages: Tuple[str, ...] = ("en",)

def now_local(zone: Optional[tzinfo] = None) -> datetime:
    return datetime.now(zone) if zone else datetime.now().astimezone()

def _wall(now: datetime, zone: Optional[tzinfo]) -> datetime:
    return now.astimezone(zone).replace(tzinfo=None)

def _localize(dt: datetime, zone: Optional[tzinfo]) -> datetime:
    if dt.tzinfo is not None:
        return dt
    return dt.replace(tzinfo=zone) if zone else dt.astimezone()

def pop_zone_alias(text: str) -> Tuple[str, Optional[ZoneInfo]]:
    m = _ZONE_ALIAS_RE.search(text)
    if not m:
        return text, None
    name = ZONE_ALIASES[m.group(1)]
    log.debug("zone alias %s -> %s", m.group(1), name)
    return text[:m.start()], ZoneInfo(name)

def split_range(text: str) -> Optional[Tuple[str, str]]:
    body = _RANGE_PREFIX_RE.sub("", text)
    parts = _RANGE_SEP_RE.split(body, maxsplit=1)
    if len(parts) != 2 or not parts[0].strip() or not parts[1].strip():
        return None
    return parts[0].strip(), parts[1].strip()

def _dp_settings(base: datetime, prefer: str) -> dict:
    return {"RELATIVE_BASE": base, "PREFER_DATES_FROM": prefer}

def parse_instant(
    text: str,
    now: datetime,
    settings: ParseSettings,
    *,
    prefer: Optional[str] = None,
    search: bool = False,
) -> Optional[datetime]:
    """
    Resolve one instant. With search=True, fall back to the first date found
    inside longer text ("lunch tomorrow at noon").
    """
    fragment, alias = pop_zone_alias(text)
    zone = alias or settings.zone
    dp = _dp_settings(_wall(now, zone), prefer or settings.prefer_dates_from)
    langs = list(settings.languages)
    dt = dateparser.parse(fragment, languages=langs, settings=dp)
    if dt is None and search:
        found = search_dates(fragment, languages=langs, settings=dp)
        if found:
            log.debug("search fallback matched %r", found[0][0])
            dt = found[0][1]
    if dt is None:
        return None
    return _localize(dt, zone)

def parse(text: str, now: datetime, settings: ParseSettings = ParseSettings()) -> Optional[Candidate]:
    """Zero or one candidate for `text`, resolved against `now`."""
    text = " ".join((text or "").split())
    if not text:
        return None

    halves = split_range(text)
    if halves:
        start = parse_instant(halves[0], now, settings)
        if start is not None:
            # the end is read relative to the start and in the start's zone
            end = parse_instant(halves[1], start, replace(settings, zone=start.tzinfo), prefer="future")
            if end is not None:
                log.debug("range %r -> %s .. %s", text, start.isoformat(), end.isoformat())
                return RangeCandidate(start=start, end=end)
        log.debug("range split of %r did not parse; trying as a single instant", text)

    # a single instant in the past is rejected anyway, so ambiguous text reads forward
    at = parse_instant(text, now, settings, prefer="future", search=True)
    if at is None:
        log.debug("no candidate for %r", text)
        return None
    log.debug("single %r -> %s", text, at.isoformat())
    return SingleCandidate(at=at)
