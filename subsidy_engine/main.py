import logging
from typing import Annotated, List, Optional

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel

# Program models
from .programs.models_farm import FarmInput
from .programs.models_result import CalculationResult, SubsidyQuoteResponse
from .programs.models_schedule import ProgramDeadlines, RateSchedule

# Service layers
from .services.rate_schedule import (
    DEFAULT_PROGRAM_YEAR,
    ScheduleLoadError,
    ScheduleNotFoundError,
    available_program_years,
    get_rate_schedule,
)
from .services.subsidy_quote import quote_subsidies

# Engine layers
from .engine.calculations import calculate
from .engine.currency import convert, supported_currencies
from .engine.validation import validate

logger = logging.getLogger(__name__)


# =======================================================
# Response models
# =======================================================

class ScheduleYearsResponse(BaseModel):
    program_years: List[int]
    default_year: int


class CurrenciesResponse(BaseModel):
    program_year: int
    base_currency: str
    currencies: List[str]


class ValidationResponse(BaseModel):
    program_year: int
    issues: List[str]


class ConversionResponse(BaseModel):
    program_year: int
    amount: float
    base_currency: str
    currency: str
    converted: float


# =======================================================
# Boundary helpers
# =======================================================

def _schedule_or_error(year: int) -> RateSchedule:
    try:
        return get_rate_schedule(year)
    except ScheduleNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ScheduleLoadError as e:
        logger.warning("rate schedule for %s failed to load: %s", year, e)
        raise HTTPException(status_code=500, detail=str(e))


def _currency_or_400(currency: Optional[str], schedule: RateSchedule) -> Optional[str]:
    """
    Normalize ' pln ' -> 'PLN' and make sure the schedule can convert to it.
    None means the schedule's base currency.
    """
    if currency is None:
        return None
    code = currency.strip().upper()
    if code not in schedule.currency_rates:
        raise HTTPException(
            status_code=400,
            detail=(
                f"Unsupported currency '{currency}' for {schedule.program_year}; "
                f"expected one of {supported_currencies(schedule)}"
            ),
        )
    return code


YearQuery = Annotated[int, Query(description="Program year of the rate schedule, e.g. 2025")]
CurrencyQuery = Annotated[
    Optional[str],
    Query(description="Display currency code, e.g. EUR, PLN, UAH (default: base currency)"),
]


# =======================================================
# FastAPI app
# =======================================================

app = FastAPI(title="Agricultural Subsidy Calculator API", version="1.0")


@app.get("/")
def root():
    return {
        "status": "ok",
        "message": "Subsidy calculator API running with direct/crop/animal/ecoscheme payments",
    }


# =======================================================
# Rate schedules
# =======================================================

@app.get("/schedules", response_model=ScheduleYearsResponse)
def list_schedules():
    return ScheduleYearsResponse(
        program_years=available_program_years(),
        default_year=DEFAULT_PROGRAM_YEAR,
    )


@app.get("/schedules/{year}", response_model=RateSchedule)
def schedule_for_year(year: int):
    return _schedule_or_error(year)


@app.get("/schedules/{year}/deadlines", response_model=ProgramDeadlines)
def deadlines_for_year(year: int):
    schedule = _schedule_or_error(year)
    if schedule.deadlines is None:
        raise HTTPException(status_code=404, detail=f"No deadlines published for {year}")
    return schedule.deadlines


@app.get("/currencies", response_model=CurrenciesResponse)
def currencies(year: YearQuery = DEFAULT_PROGRAM_YEAR):
    schedule = _schedule_or_error(year)
    return CurrenciesResponse(
        program_year=schedule.program_year,
        base_currency=schedule.base_currency,
        currencies=supported_currencies(schedule),
    )


# =======================================================
# Subsidy calculation
# =======================================================

@app.post("/subsidies/calculate", response_model=CalculationResult)
def subsidies_calculate(
    farm: FarmInput,
    year: YearQuery = DEFAULT_PROGRAM_YEAR,
    currency: CurrencyQuery = None,
):
    schedule = _schedule_or_error(year)
    return calculate(farm, schedule, _currency_or_400(currency, schedule))


@app.post("/subsidies/validate", response_model=ValidationResponse)
def subsidies_validate(farm: FarmInput, year: YearQuery = DEFAULT_PROGRAM_YEAR):
    """
    Advisory only: always 200, issues listed in the body.
    """
    schedule = _schedule_or_error(year)
    return ValidationResponse(program_year=schedule.program_year, issues=validate(farm, schedule))


@app.post("/subsidies/quote", response_model=SubsidyQuoteResponse)
def subsidies_quote(
    farm: FarmInput,
    year: YearQuery = DEFAULT_PROGRAM_YEAR,
    currency: CurrencyQuery = None,
):
    """
    One-shot calculation + validation for a farm:

    1. Resolve the program year's rate schedule
    2. Calculate every category and the converted grand total
    3. Attach validation issues (they never change the amounts)
    """
    schedule = _schedule_or_error(year)
    code = _currency_or_400(currency, schedule)
    return quote_subsidies(farm, year=year, currency=code)


# =======================================================
# Currency
# =======================================================

@app.get("/currency/convert", response_model=ConversionResponse)
def currency_convert(
    amount: float = Query(..., description="Amount in the schedule's base currency"),
    currency: str = Query(..., description="Target currency code, e.g. PLN"),
    year: YearQuery = DEFAULT_PROGRAM_YEAR,
):
    schedule = _schedule_or_error(year)
    code = _currency_or_400(currency, schedule)
    return ConversionResponse(
        program_year=schedule.program_year,
        amount=amount,
        base_currency=schedule.base_currency,
        currency=code,
        converted=convert(amount, code, schedule),
    )
