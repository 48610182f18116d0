# subsidy_engine/programs/models_farm.py

from typing import Tuple

from pydantic import BaseModel, ConfigDict

# (crop payment line item, FarmInput area field)
CROP_ITEMS: Tuple[Tuple[str, str], ...] = (
    ("leguminous_crops", "leguminous_area"),
    ("fodder_crops", "fodder_area"),
    ("starch_potatoes", "starch_potatoes_area"),
    ("sugar_beets", "sugar_beets_area"),
    ("tomatoes", "tomatoes_area"),
    ("hops", "hops_area"),
    ("strawberries", "strawberries_area"),
    ("flax", "flax_area"),
    ("fiber_hemp", "fiber_hemp_area"),
)

# (animal payment line item, FarmInput head count field)
ANIMAL_ITEMS: Tuple[Tuple[str, str], ...] = (
    ("cattle", "cattle_count"),
    ("cows", "cows_count"),
    ("sheep", "sheep_count"),
    ("goats", "goats_count"),
)

# (ecoscheme line item, FarmInput area field)
# Shared by the engine and the validator; the aggregate ecoscheme area is
# always the sum of exactly these fields.
ECOSCHEME_ITEMS: Tuple[Tuple[str, str], ...] = (
    ("honey_plants", "honey_plants_area"),
    ("extensive_grassland", "extensive_grassland_area"),
    ("winter_cover", "winter_cover_area"),
    ("crop_diversification", "crop_diversification_area"),
    ("water_retention", "water_retention_area"),
    ("fallow_land", "fallow_land_area"),
    ("biological_protection", "biological_protection_area"),
    ("micro_fertilizers", "micro_fertilizers_area"),
    ("ipr_orchard", "ipr_orchard_area"),
    ("ipr_berry", "ipr_berry_area"),
    ("ipr_agricultural", "ipr_agricultural_area"),
    ("ipr_vegetable", "ipr_vegetable_area"),
    ("elite_seed_cereals", "elite_seed_cereals_area"),
    ("elite_seed_legumes", "elite_seed_legumes_area"),
    ("elite_seed_potatoes", "elite_seed_potatoes_area"),
)


class FarmInput(BaseModel):
    """
    One snapshot of a farm's declared attributes for a single calculation.

    Values are taken as declared: negative or absurd numbers are accepted
    here and reported by the validator instead.
    """

    model_config = ConfigDict(extra="forbid")

    total_area: float = 0.0  # ha
    is_young_farmer: bool = False
    is_small_farm: bool = False

    # Crop areas (ha)
    leguminous_area: float = 0.0
    fodder_area: float = 0.0
    starch_potatoes_area: float = 0.0
    sugar_beets_area: float = 0.0
    tomatoes_area: float = 0.0
    hops_area: float = 0.0
    strawberries_area: float = 0.0
    flax_area: float = 0.0
    fiber_hemp_area: float = 0.0

    # Animal head counts
    cattle_count: float = 0.0
    cows_count: float = 0.0
    sheep_count: float = 0.0
    goats_count: float = 0.0

    # Ecoscheme practice areas (ha)
    honey_plants_area: float = 0.0
    extensive_grassland_area: float = 0.0
    winter_cover_area: float = 0.0
    crop_diversification_area: float = 0.0
    water_retention_area: float = 0.0
    fallow_land_area: float = 0.0
    biological_protection_area: float = 0.0
    micro_fertilizers_area: float = 0.0
    ipr_orchard_area: float = 0.0
    ipr_berry_area: float = 0.0
    ipr_agricultural_area: float = 0.0
    ipr_vegetable_area: float = 0.0
    elite_seed_cereals_area: float = 0.0
    elite_seed_legumes_area: float = 0.0
    elite_seed_potatoes_area: float = 0.0

    def with_updates(self, **changes) -> "FarmInput":
        """
        Return a copy with the given fields replaced, leaving this one as is.
        Unknown field names raise a ValidationError.
        """
        data = self.model_dump()
        data.update(changes)
        return FarmInput.model_validate(data)

    def ecoscheme_area_total(self) -> float:
        return sum(getattr(self, field) for _, field in ECOSCHEME_ITEMS)
