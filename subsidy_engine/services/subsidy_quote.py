# subsidy_engine/services/subsidy_quote.py

import logging
from typing import Optional

from ..engine.calculations import calculate
from ..engine.validation import validate
from ..programs.models_farm import FarmInput
from ..programs.models_result import SubsidyQuoteResponse
from .rate_schedule import DEFAULT_PROGRAM_YEAR, get_rate_schedule

logger = logging.getLogger(__name__)


def quote_subsidies(
    farm: FarmInput,
    year: int = DEFAULT_PROGRAM_YEAR,
    currency: Optional[str] = None,
) -> SubsidyQuoteResponse:
    """
    Subsidy breakdown plus advisory issues for a farm in a program year.

    Uses the cached schedule from rate_schedule.get_rate_schedule, so a
    missing year raises ScheduleNotFoundError and an unknown currency
    raises KeyError; both are left to the caller (FastAPI maps them).
    """
    schedule = get_rate_schedule(year)

    result = calculate(farm, schedule, currency)
    issues = validate(farm, schedule)

    if issues:
        logger.debug("farm input for %s has %d issue(s): %s", year, len(issues), issues)

    return SubsidyQuoteResponse(
        program_year=schedule.program_year,
        currency=result.currency,
        result=result,
        issues=issues,
    )
