"""Unit tests for observance frames, range lookups and date-index flags."""

import pytest
import pandas as pd
import numpy as np
from datetime import date

from paschalion import EasterEngine, InvalidYear, OBSERVANCE_OFFSETS
from paschalion.calendar_flags import (
    ObservanceConfig,
    config_from_env,
    observances_frame,
    observances_range,
    add_observance_flags,
)


def test_observances_frame_2024():
    df = observances_frame(2024)

    assert list(df.columns) == ["key", "label", "greek", "date", "offset", "weekday"]
    assert len(df) == len(OBSERVANCE_OFFSETS) + 4
    assert "saint_cloe" not in set(df["key"])

    # Sorted by date, Publican first, Forefathers last
    assert df["key"].iloc[0] == "publican"
    assert df["key"].iloc[-1] == "forefathers_sunday"
    assert list(df["date"]) == sorted(df["date"])

    easter = df.set_index("key").loc["easter"]
    assert easter["date"] == date(2024, 5, 5)
    assert easter["offset"] == 0
    assert easter["weekday"] == "Sunday"

    pentecost = df.set_index("key").loc["pentecost"]
    assert pentecost["label"] == "Pentecost"
    assert pentecost["offset"] == 49
    assert pentecost["greek"] == "Πεντηκοστή"

    by_key = df.set_index("key")["greek"]
    assert by_key["shrove_monday"] == "Καθαρά Δευτέρα"
    assert by_key["shrove_thursday"] == "Τσικνοπέμπτη"
    assert by_key["easter"] == "Πάσχα"
    assert by_key["prodigal_son"] == ""


def test_observances_frame_with_cloe():
    df = observances_frame(2024, include_cloe=True)
    row = df.set_index("key").loc["saint_cloe"]
    assert row["date"] == date(2024, 3, 17)
    assert row["offset"] == (date(2024, 3, 17) - date(2024, 5, 5)).days


def test_observances_range_single_year():
    found = observances_range(date(2024, 5, 1), date(2024, 5, 10))

    # Holy Week tail, Easter and Bright Week
    assert found[date(2024, 5, 3)] == ["holy_friday"]
    assert found[date(2024, 5, 5)] == ["easter"]
    assert found[date(2024, 5, 6)] == ["easter_monday", "saint_george"]
    assert found[date(2024, 5, 10)] == ["easter_friday", "life_giving_spring"]
    assert list(found) == sorted(found)
    assert all(date(2024, 5, 1) <= d <= date(2024, 5, 10) for d in found)


def test_observances_range_across_years():
    found = observances_range(date(2024, 12, 1), date(2025, 1, 31))
    assert found[date(2024, 12, 15)] == ["forefathers_sunday"]
    # Publican 2025 is Easter (Apr 20) - 70
    assert "publican" not in {k for keys in found.values() for k in keys}

    found = observances_range(date(2024, 12, 1), date(2025, 2, 28))
    assert found[date(2025, 2, 9)] == ["publican"]


def test_observances_range_errors():
    with pytest.raises(ValueError):
        observances_range(date(2024, 5, 10), date(2024, 5, 1))
    with pytest.raises(InvalidYear):
        observances_range(date(1582, 1, 1), date(1583, 12, 31))


def test_add_observance_flags():
    dates = pd.date_range("2024-04-25", "2024-05-10", freq="D")
    df = pd.DataFrame({"Revenue": np.arange(len(dates), dtype=float)}, index=dates)

    df_out = add_observance_flags(df)

    assert "is_observance" in df_out.columns
    assert "observance" in df_out.columns
    assert "is_observance" not in df.columns, "input must not be modified"
    assert len(df_out) == len(df)

    assert df_out.loc["2024-05-05", "is_observance"] == 1
    assert df_out.loc["2024-05-05", "observance"] == "easter"
    assert df_out.loc["2024-04-28", "observance"] == "palm_sunday"
    assert df_out.loc["2024-05-06", "observance"] == "easter_monday;saint_george"
    assert df_out.loc["2024-04-26", "is_observance"] == 0
    assert df_out.loc["2024-04-26", "observance"] == ""

    # One flag per distinct date, however many observances share it
    engine = EasterEngine(2024)
    in_window = {d for d in engine.observances().values() if date(2024, 4, 25) <= d <= date(2024, 5, 10)}
    assert df_out["is_observance"].sum() == len(in_window)


def test_add_observance_flags_restricted_keys():
    dates = pd.date_range("2024-03-01", "2024-06-30", freq="D")
    df = pd.DataFrame({"Revenue": 1.0}, index=dates)

    cfg = ObservanceConfig(keys=["easter", "pentecost", "saint_cloe"])
    assert cfg.include_cloe is True

    df_out = add_observance_flags(df, cfg)
    flagged = df_out[df_out["is_observance"] == 1]
    assert list(flagged["observance"]) == ["saint_cloe", "easter", "pentecost"]
    assert list(flagged.index.date) == [date(2024, 3, 17), date(2024, 5, 5), date(2024, 6, 23)]


def test_add_observance_flags_tz_aware_index():
    dates = pd.date_range("2024-05-01", "2024-05-10", freq="D", tz="Europe/Athens")
    df = pd.DataFrame({"Revenue": 1.0}, index=dates)

    df_out = add_observance_flags(df)

    assert df_out.index.equals(df.index)
    flagged = dict(zip(df_out.index.date, df_out["observance"]))
    assert flagged[date(2024, 5, 5)] == "easter"
    assert flagged[date(2024, 5, 6)] == "easter_monday;saint_george"
    # 2024-05-01 .. 05-10 is Holy Wednesday through Easter Friday
    assert df_out["is_observance"].sum() == 10


def test_add_observance_flags_empty():
    df = pd.DataFrame({"Revenue": []}, index=pd.DatetimeIndex([]))
    df_out = add_observance_flags(df)
    assert "is_observance" in df_out.columns
    assert "observance" in df_out.columns
    assert len(df_out) == 0


def test_config_validation_and_env():
    with pytest.raises(ValueError):
        ObservanceConfig(keys=["christmas"])

    cfg = config_from_env({"PC_INCLUDE_CLOE": "yes", "PC_KEYS": "easter, pentecost ,"})
    assert cfg.include_cloe is True
    assert cfg.keys == ["easter", "pentecost"]

    cfg = config_from_env({})
    assert cfg.include_cloe is False
    assert cfg.keys is None
