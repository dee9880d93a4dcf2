"""Observance tables and date-index flags built on top of EasterEngine.

Produces per-year observance frames, range lookups, and is_observance flags
for DataFrames indexed by date.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import date, datetime
from typing import Dict, List, Mapping, Optional

import numpy as np
import pandas as pd

from .easter import check_year, days_from_easter
from .engine import EasterEngine
from .observances import GREEK_LABELS, LABELS


def _ts() -> str:
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


def _log(msg: str):
    print(f"[{_ts()}] {msg}", flush=True)


@dataclass
class ObservanceConfig:
    """Which observances get flagged."""

    include_cloe: bool = False
    keys: Optional[List[str]] = None

    def __post_init__(self):
        if self.keys is not None:
            unknown = [k for k in self.keys if k not in LABELS]
            if unknown:
                raise ValueError(f"Unknown observance key(s): {unknown}")
            if "saint_cloe" in self.keys:
                self.include_cloe = True


def config_from_env(env: Optional[Mapping[str, str]] = None) -> ObservanceConfig:
    """Build an ObservanceConfig from PC_INCLUDE_CLOE / PC_KEYS."""
    env = os.environ if env is None else env
    keys = [k.strip() for k in env.get("PC_KEYS", "").split(",") if k.strip()]
    return ObservanceConfig(
        include_cloe=env.get("PC_INCLUDE_CLOE", "false").lower() in {"1", "true", "yes"},
        keys=keys or None,
    )


def observances_frame(year: int, include_cloe: bool = False) -> pd.DataFrame:
    """
    All observances of a year as a DataFrame.

    Args:
        year: Year (> 1582)
        include_cloe: Also list Saint Cloe

    Returns:
        DataFrame with columns key, label, greek, date, offset, weekday; sorted by date
    """
    engine = EasterEngine(year)
    rows = [
        {
            "key": key,
            "label": LABELS[key],
            "greek": GREEK_LABELS[key],
            "date": day,
            "offset": days_from_easter(day, engine.easter),
            "weekday": day.strftime("%A"),
        }
        for key, day in engine.observances(include_cloe=include_cloe).items()
    ]
    df = pd.DataFrame(rows, columns=["key", "label", "greek", "date", "offset", "weekday"])
    return df.sort_values(["date", "key"], kind="stable").reset_index(drop=True)


def observances_range(
    start_date: date, end_date: date, include_cloe: bool = False
) -> Dict[date, List[str]]:
    """
    Get all observances in a date range.

    Args:
        start_date: Start date (inclusive)
        end_date: End date (inclusive)
        include_cloe: Also list Saint Cloe

    Returns:
        Mapping date -> observance keys on that date, in date order
    """
    if start_date > end_date:
        raise ValueError(f"start_date {start_date} is after end_date {end_date}")
    check_year(start_date.year)

    found: Dict[date, List[str]] = {}
    for year in range(start_date.year, end_date.year + 1):
        for key, day in EasterEngine(year).observances(include_cloe=include_cloe).items():
            if start_date <= day <= end_date:
                found.setdefault(day, []).append(key)

    return {d: sorted(found[d]) for d in sorted(found)}


def add_observance_flags(df: pd.DataFrame, cfg: Optional[ObservanceConfig] = None) -> pd.DataFrame:
    """
    Add is_observance and observance columns to a DataFrame.

    Args:
        df: DataFrame with date index
        cfg: Which observances to flag (default: all but Saint Cloe)

    Returns:
        DataFrame with added flags; observance holds ';'-joined keys
    """
    cfg = cfg or ObservanceConfig()
    idx = pd.DatetimeIndex(df.index)
    if idx.tz is not None:
        # Local wall-clock dates
        idx = idx.tz_localize(None)
    df = df.copy()

    if len(idx) == 0:
        df["is_observance"] = pd.Series(dtype=int)
        df["observance"] = pd.Series(dtype=object)
        return df

    start, end = idx.min().date(), idx.max().date()
    _log(f"Flagging observances {start} .. {end}")
    found = observances_range(start, end, include_cloe=cfg.include_cloe)
    if cfg.keys is not None:
        wanted = set(cfg.keys)
        found = {d: [k for k in keys if k in wanted] for d, keys in found.items()}
        found = {d: keys for d, keys in found.items() if keys}

    names = {pd.Timestamp(d): ";".join(keys) for d, keys in found.items()}
    labels = idx.normalize().map(lambda ts: names.get(ts, "")).to_numpy(dtype=object)

    df["is_observance"] = np.where(labels != "", 1, 0).astype(int)
    df["observance"] = labels
    _log(f"  {int(df['is_observance'].sum())} of {len(df)} rows fall on an observance")

    return df
