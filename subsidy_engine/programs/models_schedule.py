# subsidy_engine/programs/models_schedule.py

from datetime import date
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class DirectPaymentRates(_Frozen):
    # EUR (base currency) per ha
    basic_income_support: float = Field(..., gt=0)
    redistributive_payment: float = Field(..., gt=0)
    young_farmers_payment: float = Field(..., gt=0)
    small_farms_payment: float = Field(..., gt=0)
    supplementary_basic_payment: float = Field(..., gt=0)


class CropRates(_Frozen):
    leguminous_crops: float = Field(..., gt=0)
    fodder_crops: float = Field(..., gt=0)
    starch_potatoes: float = Field(..., gt=0)
    sugar_beets: float = Field(..., gt=0)
    tomatoes: float = Field(..., gt=0)
    hops: float = Field(..., gt=0)
    strawberries: float = Field(..., gt=0)
    flax: float = Field(..., gt=0)
    fiber_hemp: float = Field(..., gt=0)


class AnimalRate(_Frozen):
    rate: float = Field(..., gt=0)         # per head
    limit: Optional[float] = Field(None, gt=0)  # max paid head count, None = no limit


class AnimalRates(_Frozen):
    cattle: AnimalRate
    cows: AnimalRate
    sheep: AnimalRate
    goats: AnimalRate


class EcoschemeRates(_Frozen):
    honey_plants: float = Field(..., gt=0)
    extensive_grassland: float = Field(..., gt=0)
    winter_cover: float = Field(..., gt=0)
    crop_diversification: float = Field(..., gt=0)
    water_retention: float = Field(..., gt=0)
    fallow_land: float = Field(..., gt=0)
    biological_protection: float = Field(..., gt=0)
    micro_fertilizers: float = Field(..., gt=0)
    ipr_orchard: float = Field(..., gt=0)
    ipr_berry: float = Field(..., gt=0)
    ipr_agricultural: float = Field(..., gt=0)
    ipr_vegetable: float = Field(..., gt=0)
    elite_seed_cereals: float = Field(..., gt=0)
    elite_seed_legumes: float = Field(..., gt=0)
    elite_seed_potatoes: float = Field(..., gt=0)


class PolicyLimits(_Frozen):
    redistributive_max_ha: float = Field(..., gt=0)
    small_farm_max_ha: float = Field(..., gt=0)
    small_farm_payment_cap: float = Field(..., gt=0)  # base currency, absolute
    ecoschemes_max_ha: float = Field(..., gt=0)


class ProgramDeadlines(_Frozen):
    application_start: date
    application_end: date
    late_submission_end: date
    changes_deadline: date
    payment_start: date
    payment_end: date


class RateSchedule(_Frozen):
    """
    Published rates, caps and currency factors for one program year.

    Built once by the schedule loader and passed explicitly into the
    calculation functions. Amounts are in ``base_currency``; every entry of
    ``currency_rates`` is the factor to multiply a base amount by.
    """

    program_year: int
    base_currency: str = "EUR"

    direct_payments: DirectPaymentRates
    crop_payments: CropRates
    animal_payments: AnimalRates
    ecoschemes: EcoschemeRates
    limits: PolicyLimits
    currency_rates: Mapping[str, float]

    deadlines: Optional[ProgramDeadlines] = None

    @field_validator("currency_rates", mode="after")
    @classmethod
    def _read_only_currency_rates(cls, value: Mapping[str, float]) -> Mapping[str, float]:
        # Cached schedules are shared process-wide; item assignment must fail too
        return MappingProxyType(dict(value))

    @field_serializer("currency_rates")
    def _dump_currency_rates(self, value: Mapping[str, float]) -> Dict[str, float]:
        return dict(value)

    @model_validator(mode="after")
    def _check_currency_rates(self) -> "RateSchedule":
        for code, factor in self.currency_rates.items():
            if not factor > 0:
                raise ValueError(f"currency factor for {code} must be > 0, got {factor}")
        if self.currency_rates.get(self.base_currency) != 1:
            raise ValueError(
                f"base currency {self.base_currency} must have a conversion factor of exactly 1"
            )
        return self
