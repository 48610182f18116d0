"""Shared test fixtures."""

from datetime import date
from pathlib import Path

import pytest

from subsidy_engine.programs.models_farm import FarmInput
from subsidy_engine.programs.models_schedule import (
    AnimalRate,
    AnimalRates,
    CropRates,
    DirectPaymentRates,
    EcoschemeRates,
    PolicyLimits,
    ProgramDeadlines,
    RateSchedule,
)
from subsidy_engine.services import rate_schedule

SHIPPED_2025_CSV = Path(rate_schedule.DATA_DIR) / "rates_2025.csv"


@pytest.fixture
def schedule_2025() -> RateSchedule:
    """The published 2025 rates, built directly rather than loaded from CSV."""
    return RateSchedule(
        program_year=2025,
        base_currency="EUR",
        direct_payments=DirectPaymentRates(
            basic_income_support=114.42,
            redistributive_payment=39.80,
            young_farmers_payment=58.12,
            small_farms_payment=225.00,
            supplementary_basic_payment=13.00,
        ),
        crop_payments=CropRates(
            leguminous_crops=206.09,
            fodder_crops=103.70,
            starch_potatoes=383.94,
            sugar_beets=300.75,
            tomatoes=550.00,
            hops=436.67,
            strawberries=272.14,
            flax=101.85,
            fiber_hemp=29.55,
        ),
        animal_payments=AnimalRates(
            cattle=AnimalRate(rate=75.73, limit=20),
            cows=AnimalRate(rate=96.64, limit=20),
            sheep=AnimalRate(rate=25.80),
            goats=AnimalRate(rate=11.27),
        ),
        ecoschemes=EcoschemeRates(
            honey_plants=269.21,
            extensive_grassland=112.35,
            winter_cover=112.35,
            crop_diversification=67.41,
            water_retention=63.15,
            fallow_land=126.52,
            biological_protection=89.89,
            micro_fertilizers=22.47,
            ipr_orchard=342.70,
            ipr_berry=309.21,
            ipr_agricultural=146.07,
            ipr_vegetable=309.21,
            elite_seed_cereals=26.74,
            elite_seed_legumes=43.37,
            elite_seed_potatoes=112.13,
        ),
        limits=PolicyLimits(
            redistributive_max_ha=30,
            small_farm_max_ha=5,
            small_farm_payment_cap=1125,
            ecoschemes_max_ha=300,
        ),
        currency_rates={"PLN": 4.45, "EUR": 1, "UAH": 45.20},
        deadlines=ProgramDeadlines(
            application_start=date(2025, 3, 15),
            application_end=date(2025, 6, 16),
            late_submission_end=date(2025, 7, 11),
            changes_deadline=date(2025, 7, 1),
            payment_start=date(2025, 12, 1),
            payment_end=date(2026, 6, 30),
        ),
    )


@pytest.fixture
def ten_hectare_farm() -> FarmInput:
    """10 ha, no flags, nothing else declared."""
    return FarmInput(total_area=10)


@pytest.fixture
def shipped_csv_text() -> str:
    return SHIPPED_2025_CSV.read_text(encoding="utf-8")


@pytest.fixture
def schedule_dir(tmp_path, monkeypatch):
    """Point the schedule registry at an empty temp data dir."""
    rate_schedule.get_rate_schedule.cache_clear()
    monkeypatch.setattr(rate_schedule, "DATA_DIR", str(tmp_path))
    yield tmp_path
    rate_schedule.get_rate_schedule.cache_clear()
