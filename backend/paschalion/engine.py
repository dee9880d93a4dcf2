"""EasterEngine: all movable dates of one year, computed from the Easter anchor."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict

from .easter import (
    check_year,
    compute_easter,
    next_or_same_sunday,
    offset,
    resolve_mark_evangelist,
    resolve_saint_george,
)
from .observances import OBSERVANCE_OFFSETS, SPECIAL_LABELS


class _FromEaster:
    """Accessor for an OBSERVANCE_OFFSETS entry, named after the attribute."""

    def __set_name__(self, owner, name):
        if name not in OBSERVANCE_OFFSETS:
            raise KeyError(f"No offset registered for '{name}'")
        self.key = name

    def __get__(self, engine, owner=None):
        if engine is None:
            return self
        return offset(engine.easter, OBSERVANCE_OFFSETS[self.key])


@dataclass(frozen=True)
class EasterEngine:
    """
    Orthodox movable calendar for one year.

    Easter, Saint George and Mark the Evangelist are resolved in that order at
    construction, together with the two nearest-Sunday dates. Every other
    observance is Easter plus its fixed offset.

    Raises:
        InvalidYear: if year <= 1582
    """

    year: int
    easter: date = field(init=False)
    forefathers_sunday: date = field(init=False)
    saint_george: date = field(init=False)
    mark_the_evangelist: date = field(init=False)
    saint_cloe: date = field(init=False, compare=False)

    def __post_init__(self):
        year = check_year(self.year)
        easter = compute_easter(year)
        george = resolve_saint_george(year, easter)

        object.__setattr__(self, "year", year)
        object.__setattr__(self, "easter", easter)
        object.__setattr__(self, "forefathers_sunday", next_or_same_sunday(date(year, 12, 11)))
        object.__setattr__(self, "saint_george", george)
        object.__setattr__(self, "mark_the_evangelist", resolve_mark_evangelist(year, george, easter))
        object.__setattr__(self, "saint_cloe", next_or_same_sunday(date(year, 3, 13)))

    publican = _FromEaster()
    prodigal_son = _FromEaster()
    shrove_thursday = _FromEaster()
    all_souls_a = _FromEaster()
    carnival = _FromEaster()
    cheese_sunday = _FromEaster()
    shrove_monday = _FromEaster()
    saint_theodore = _FromEaster()
    sunday_of_orthodoxy = _FromEaster()
    gregory_palamas = _FromEaster()
    lazarus_saturday = _FromEaster()
    palm_sunday = _FromEaster()
    holy_monday = _FromEaster()
    holy_tuesday = _FromEaster()
    holy_wednesday = _FromEaster()
    holy_thursday = _FromEaster()
    holy_friday = _FromEaster()
    holy_saturday = _FromEaster()
    easter_monday = _FromEaster()
    easter_tuesday = _FromEaster()
    easter_wednesday = _FromEaster()
    easter_thursday = _FromEaster()
    easter_friday = _FromEaster()
    life_giving_spring = _FromEaster()
    easter_saturday = _FromEaster()
    thomas_sunday = _FromEaster()
    myrrhbearers = _FromEaster()
    paralytic = _FromEaster()
    ascension = _FromEaster()
    all_souls_b = _FromEaster()
    pentecost = _FromEaster()
    holy_spirit_day = _FromEaster()
    all_saints = _FromEaster()

    def observance(self, key: str) -> date:
        """Date of a named observance (offset table key or special date)."""
        if key in OBSERVANCE_OFFSETS:
            return offset(self.easter, OBSERVANCE_OFFSETS[key])
        if key in SPECIAL_LABELS:
            return getattr(self, key)
        raise KeyError(f"Unknown observance: {key}")

    def observances(self, include_cloe: bool = False) -> Dict[str, date]:
        """
        All dates of the year keyed by observance name.

        Saint Cloe is left out unless include_cloe is set.
        """
        out = {key: offset(self.easter, k) for key, k in OBSERVANCE_OFFSETS.items()}
        for key in SPECIAL_LABELS:
            if key == "saint_cloe" and not include_cloe:
                continue
            out[key] = getattr(self, key)
        return out
