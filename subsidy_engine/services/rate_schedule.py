# subsidy_engine/services/rate_schedule.py

import os
import re
import logging
from functools import lru_cache
from typing import Any, Dict, List

import pandas as pd
from pydantic import ValidationError

from ..programs.models_schedule import RateSchedule

logger = logging.getLogger(__name__)

# --------------------------------------------------
# Paths
# --------------------------------------------------

BASE_DIR = os.path.dirname(os.path.dirname(__file__))  # .../subsidy_engine
DATA_DIR = os.path.join(BASE_DIR, "data")

# One file per program year: rates_2025.csv, rates_2026.csv, ...
SCHEDULE_FILE_PATTERN = re.compile(r"^rates_(\d{4})\.csv$")

DEFAULT_PROGRAM_YEAR = 2025

REQUIRED_COLUMNS = ["category", "item", "value"]

# CSV category -> RateSchedule section holding plain per-unit rates
_RATE_SECTIONS = {
    "direct": "direct_payments",
    "crop": "crop_payments",
    "ecoscheme": "ecoschemes",
    "limit": "limits",
    "deadline": "deadlines",
}


class ScheduleLoadError(ValueError):
    """A rate schedule file is missing, unreadable or does not describe a valid schedule."""


class ScheduleNotFoundError(LookupError):
    """No rate schedule is published for the requested program year."""


# --------------------------------------------------
# Loader
# --------------------------------------------------

def _cell(row: pd.Series, column: str) -> str:
    return str(row.get(column, "")).strip()


def _rows_to_schedule_data(df: pd.DataFrame, path: str) -> Dict[str, Any]:
    """
    Fold `category,item,value,limit` rows into the nested dict shape
    RateSchedule validates. Values stay strings; pydantic coerces them.
    """
    data: Dict[str, Any] = {section: {} for section in _RATE_SECTIONS.values()}
    data["animal_payments"] = {}
    data["currency_rates"] = {}

    for _, row in df.iterrows():
        category = _cell(row, "category").lower()
        item = _cell(row, "item")
        value = _cell(row, "value")

        if not category or not item:
            # blank / spacer rows
            continue

        if category == "meta":
            data[item] = value
        elif category == "animal":
            limit = _cell(row, "limit")
            data["animal_payments"][item] = {"rate": value, "limit": limit or None}
        elif category == "currency":
            data["currency_rates"][item.upper()] = value
        elif category in _RATE_SECTIONS:
            data[_RATE_SECTIONS[category]][item] = value
        else:
            logger.warning("ignoring unknown category %r (item %r) in %s", category, item, path)

    # Deadlines are optional for a program year
    if not data["deadlines"]:
        del data["deadlines"]

    return data


def load_rate_schedule(path: str) -> RateSchedule:
    """
    Load one program year's rate schedule from a CSV file.

    Raises ScheduleLoadError if the file cannot be read, lacks the
    required columns, or holds rates that fail validation (e.g. a
    non-positive rate or a base currency factor other than 1).
    """
    try:
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    except Exception as e:
        logger.warning("could not load rate schedule from %s: %s", path, e)
        raise ScheduleLoadError(f"could not read rate schedule {path}: {e}") from e

    # Normalize column names just in case
    df.columns = [str(c).strip().lower() for c in df.columns]

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        logger.warning(
            "rate schedule %s is missing columns: %s. Columns: %s",
            path,
            missing,
            df.columns.tolist(),
        )
        raise ScheduleLoadError(f"rate schedule {path} is missing columns: {missing}")

    data = _rows_to_schedule_data(df, path)

    try:
        schedule = RateSchedule.model_validate(data)
    except ValidationError as e:
        logger.warning("rate schedule %s is invalid: %s", path, e)
        raise ScheduleLoadError(f"invalid rate schedule {path}: {e}") from e

    logger.info(
        "loaded %s rate schedule from %s (%d currencies)",
        schedule.program_year,
        path,
        len(schedule.currency_rates),
    )
    return schedule


# --------------------------------------------------
# Registry
# --------------------------------------------------

def schedule_path_for_year(year: int) -> str:
    return os.path.join(DATA_DIR, f"rates_{year}.csv")


def available_program_years() -> List[int]:
    """
    Program years with a schedule file in DATA_DIR, oldest first.
    """
    if not os.path.isdir(DATA_DIR):
        return []

    years = []
    for name in os.listdir(DATA_DIR):
        match = SCHEDULE_FILE_PATTERN.match(name)
        if match:
            years.append(int(match.group(1)))
    return sorted(years)


@lru_cache(maxsize=None)
def get_rate_schedule(year: int = DEFAULT_PROGRAM_YEAR) -> RateSchedule:
    """
    Return the schedule for `year`, loading it on first use.

    Raises ScheduleNotFoundError for a year without a file, and
    ScheduleLoadError if the file is broken or published for another year.
    """
    path = schedule_path_for_year(year)
    if not os.path.exists(path):
        raise ScheduleNotFoundError(f"no rate schedule for program year {year}")

    schedule = load_rate_schedule(path)

    if schedule.program_year != year:
        logger.warning(
            "rate schedule %s declares program year %s, expected %s",
            path,
            schedule.program_year,
            year,
        )
        raise ScheduleLoadError(
            f"rate schedule {path} declares program year {schedule.program_year}, expected {year}"
        )

    return schedule
