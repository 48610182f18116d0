from typing import List

from ..programs.models_schedule import RateSchedule


def convert(amount: float, currency: str, schedule: RateSchedule) -> float:
    """
    Convert a base-currency amount into `currency` using the schedule's
    static factor. No rounding; formatting belongs to the caller.

    Raises KeyError if the schedule has no factor for `currency`.
    """
    return amount * schedule.currency_rates[currency]


def supported_currencies(schedule: RateSchedule) -> List[str]:
    return list(schedule.currency_rates)


def next_currency(current: str, schedule: RateSchedule) -> str:
    """
    Next display currency after `current`, wrapping around:
    PLN -> EUR -> UAH -> PLN for the 2025 table.
    """
    codes = supported_currencies(schedule)
    idx = codes.index(current)  # ValueError for an unknown code
    return codes[(idx + 1) % len(codes)]
