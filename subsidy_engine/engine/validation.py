from typing import List

from ..programs.models_farm import FarmInput
from ..programs.models_schedule import RateSchedule

# Sanity bound on declared total area (ha)
MAX_REASONABLE_AREA_HA = 10_000


def validate(farm: FarmInput, schedule: RateSchedule) -> List[str]:
    """
    Return human-readable policy warnings for `farm`, in rule order.

    Purely advisory: an empty list means nothing looked off, and a non-empty
    one never stops `calculate` from producing amounts.
    """
    issues: List[str] = []

    if farm.total_area < 0:
        issues.append("Total area cannot be negative")

    if farm.total_area > MAX_REASONABLE_AREA_HA:
        issues.append(f"Total area seems unreasonably large (>{MAX_REASONABLE_AREA_HA:,} ha)")

    eco_max = schedule.limits.ecoschemes_max_ha
    if farm.ecoscheme_area_total() > eco_max:
        issues.append(f"Ecoschemes total area exceeds limit ({eco_max:g} ha)")

    return issues
