"""
core/stats.py
────────────────────────────────────────────────────────────────────────
Dashboard aggregates over a user's own logs:

* calories eaten today
* completed / total workouts
* last-7-days calorie and completed-workout series (oldest first)

Timestamps are bucketed by calendar day in `tz` (default UTC).
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Any, Iterable

import pandas as pd

WINDOW_DAYS = 7


def _frame(rows: Iterable[dict[str, Any]], ts_col: str, tz: str) -> pd.DataFrame:
    df = pd.DataFrame(list(rows))
    if df.empty or ts_col not in df:
        return pd.DataFrame({"day": pd.Series(dtype="object")})
    stamps = pd.to_datetime(df[ts_col], utc=True, errors="coerce", format="ISO8601")
    df["day"] = stamps.dt.tz_convert(tz).dt.date
    return df.dropna(subset=["day"])


def _window(today: date) -> list[date]:
    return [today - timedelta(days=WINDOW_DAYS - 1 - i) for i in range(WINDOW_DAYS)]


def summarize(
    nutrition_logs: Iterable[dict[str, Any]],
    workout_plans: Iterable[dict[str, Any]],
    today: date,
    tz: str = "UTC",
) -> dict[str, Any]:
    meals = _frame(nutrition_logs, "logged_at", tz)
    plans = pd.DataFrame(list(workout_plans))

    # non-numeric calories count as 0
    if "calories" in meals:
        meals["calories"] = pd.to_numeric(meals["calories"], errors="coerce").fillna(0)
        per_day = meals.groupby("day")["calories"].sum()
    else:
        per_day = pd.Series(dtype="float64")

    completed = (
        plans[plans["completed"].fillna(False).astype(bool)]
        if "completed" in plans
        else plans.iloc[0:0]
    )
    done = _frame(completed.to_dict("records"), "created_at", tz)
    done_per_day = done.groupby("day").size() if not done.empty else pd.Series(dtype="int64")

    days = _window(today)
    return {
        "calories_today": _num(per_day.get(today, 0)),
        "workouts_completed": int(len(completed)),
        "workouts_total": int(len(plans)),
        "calorie_series": [
            {"day": d.strftime("%a"), "date": d.isoformat(), "calories": _num(per_day.get(d, 0))}
            for d in days
        ],
        "workout_series": [
            {"day": d.strftime("%a"), "date": d.isoformat(), "workouts": int(done_per_day.get(d, 0))}
            for d in days
        ],
    }


def _num(value: Any) -> int | float:
    value = float(value)
    return int(value) if value.is_integer() else round(value, 1)
