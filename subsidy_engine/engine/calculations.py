from typing import Optional

from ..programs.models_farm import ANIMAL_ITEMS, CROP_ITEMS, ECOSCHEME_ITEMS, FarmInput
from ..programs.models_result import (
    AnimalPaymentsResult,
    CalculationResult,
    CropPaymentsResult,
    DirectPaymentsResult,
    EcoschemesResult,
)
from ..programs.models_schedule import RateSchedule
from .currency import convert


def calculate(
    farm: FarmInput,
    schedule: RateSchedule,
    target_currency: Optional[str] = None,
) -> CalculationResult:
    """
    Compute every subsidy line item for `farm` under `schedule`.

    - Four independent categories: direct, crop, animal, ecoschemes
    - grand_total is in the schedule's base currency
    - grand_total_converted is in `target_currency` (base currency if None)

    Inputs are not checked here; run `validate` for policy warnings.
    """
    currency = schedule.base_currency if target_currency is None else target_currency

    direct = calculate_direct_payments(farm, schedule)
    crops = calculate_crop_payments(farm, schedule)
    animals = calculate_animal_payments(farm, schedule)
    eco = calculate_ecoschemes(farm, schedule)

    grand_total = direct.total + crops.total + animals.total + eco.total

    return CalculationResult(
        direct_payments=direct,
        crop_payments=crops,
        animal_payments=animals,
        ecoschemes=eco,
        grand_total=grand_total,
        grand_total_converted=convert(grand_total, currency, schedule),
        currency=currency,
    )


def calculate_direct_payments(farm: FarmInput, schedule: RateSchedule) -> DirectPaymentsResult:
    rates = schedule.direct_payments
    limits = schedule.limits
    area = farm.total_area

    basic_income_support = area * rates.basic_income_support

    # Only the first redistributive_max_ha hectares are paid
    redistributive_payment = min(area, limits.redistributive_max_ha) * rates.redistributive_payment

    young_farmers_payment = area * rates.young_farmers_payment if farm.is_young_farmer else 0.0

    # Eligibility cliff at small_farm_max_ha (inclusive), then an absolute cap
    if farm.is_small_farm and area <= limits.small_farm_max_ha:
        small_farms_payment = min(area * rates.small_farms_payment, limits.small_farm_payment_cap)
    else:
        small_farms_payment = 0.0

    supplementary_basic_payment = area * rates.supplementary_basic_payment

    total = (
        basic_income_support
        + redistributive_payment
        + young_farmers_payment
        + small_farms_payment
        + supplementary_basic_payment
    )

    return DirectPaymentsResult(
        basic_income_support=basic_income_support,
        redistributive_payment=redistributive_payment,
        young_farmers_payment=young_farmers_payment,
        small_farms_payment=small_farms_payment,
        supplementary_basic_payment=supplementary_basic_payment,
        total=total,
    )


def calculate_crop_payments(farm: FarmInput, schedule: RateSchedule) -> CropPaymentsResult:
    rates = schedule.crop_payments

    items = {
        name: getattr(farm, field) * getattr(rates, name)
        for name, field in CROP_ITEMS
    }
    total = sum(items[name] for name, _ in CROP_ITEMS)

    return CropPaymentsResult(**items, total=total)


def calculate_animal_payments(farm: FarmInput, schedule: RateSchedule) -> AnimalPaymentsResult:
    items = {}
    for name, field in ANIMAL_ITEMS:
        animal = getattr(schedule.animal_payments, name)
        count = getattr(farm, field)
        if animal.limit is not None:
            count = min(count, animal.limit)
        items[name] = count * animal.rate

    total = sum(items[name] for name, _ in ANIMAL_ITEMS)

    return AnimalPaymentsResult(**items, total=total)


def calculate_ecoschemes(farm: FarmInput, schedule: RateSchedule) -> EcoschemesResult:
    """
    Paid on the full declared area of each practice. The aggregate
    ecoschemes_max_ha limit is reported by the validator, not applied here.
    """
    rates = schedule.ecoschemes

    items = {
        name: getattr(farm, field) * getattr(rates, name)
        for name, field in ECOSCHEME_ITEMS
    }
    total = sum(items[name] for name, _ in ECOSCHEME_ITEMS)

    return EcoschemesResult(**items, total=total)
