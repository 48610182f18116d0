# subsidy_engine/programs/models_result.py

from typing import ClassVar, Dict, List, Tuple

from pydantic import BaseModel

from .models_farm import ANIMAL_ITEMS, CROP_ITEMS, ECOSCHEME_ITEMS


class _CategoryResult(BaseModel):
    # Line item field names in display order; never includes "total".
    LINE_ITEMS: ClassVar[Tuple[str, ...]] = ()

    total: float

    def line_items(self) -> Dict[str, float]:
        return {name: getattr(self, name) for name in self.LINE_ITEMS}


class DirectPaymentsResult(_CategoryResult):
    LINE_ITEMS: ClassVar[Tuple[str, ...]] = (
        "basic_income_support",
        "redistributive_payment",
        "young_farmers_payment",
        "small_farms_payment",
        "supplementary_basic_payment",
    )

    basic_income_support: float
    redistributive_payment: float
    young_farmers_payment: float
    small_farms_payment: float
    supplementary_basic_payment: float


class CropPaymentsResult(_CategoryResult):
    LINE_ITEMS: ClassVar[Tuple[str, ...]] = tuple(name for name, _ in CROP_ITEMS)

    leguminous_crops: float
    fodder_crops: float
    starch_potatoes: float
    sugar_beets: float
    tomatoes: float
    hops: float
    strawberries: float
    flax: float
    fiber_hemp: float


class AnimalPaymentsResult(_CategoryResult):
    LINE_ITEMS: ClassVar[Tuple[str, ...]] = tuple(name for name, _ in ANIMAL_ITEMS)

    cattle: float
    cows: float
    sheep: float
    goats: float


class EcoschemesResult(_CategoryResult):
    LINE_ITEMS: ClassVar[Tuple[str, ...]] = tuple(name for name, _ in ECOSCHEME_ITEMS)

    honey_plants: float
    extensive_grassland: float
    winter_cover: float
    crop_diversification: float
    water_retention: float
    fallow_land: float
    biological_protection: float
    micro_fertilizers: float
    ipr_orchard: float
    ipr_berry: float
    ipr_agricultural: float
    ipr_vegetable: float
    elite_seed_cereals: float
    elite_seed_legumes: float
    elite_seed_potatoes: float


class CalculationResult(BaseModel):
    direct_payments: DirectPaymentsResult
    crop_payments: CropPaymentsResult
    animal_payments: AnimalPaymentsResult
    ecoschemes: EcoschemesResult

    grand_total: float            # base currency
    grand_total_converted: float  # in `currency`
    currency: str


class SubsidyQuoteResponse(BaseModel):
    """
    Calculation plus advisory issues for one farm and program year.
    Issues never change the amounts in ``result``.
    """
    program_year: int
    currency: str
    result: CalculationResult
    issues: List[str]
