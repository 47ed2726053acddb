"""Domain models for meal templates and logged meals."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from uuid import UUID


@dataclass(frozen=True)
class MacroProfile:
    """Macronutrient amounts for a portion."""

    calories: int
    protein_g: int
    carbs_g: int
    fat_g: int


@dataclass(frozen=True)
class MealTemplate:
    """Reusable food with macros per 100 g."""

    id: UUID
    name: str
    calories_per_100g: float
    protein_per_100g: float = 0.0
    carbs_per_100g: float = 0.0
    fat_per_100g: float = 0.0


@dataclass(frozen=True)
class LoggedMeal:
    """Meal logged from a template, with macros fixed at logging time."""

    id: UUID
    template_id: UUID
    name: str
    calories: int
    protein_g: int
    carbs_g: int
    fat_g: int
    amount_g: float


def derive_meal(template: MealTemplate, amount_g: float) -> MacroProfile:
    """Scale a template's per-100 g macros to an absolute portion."""
    return MacroProfile(
        calories=scale_per_100g(template.calories_per_100g, amount_g),
        protein_g=scale_per_100g(template.protein_per_100g, amount_g),
        carbs_g=scale_per_100g(template.carbs_per_100g, amount_g),
        fat_g=scale_per_100g(template.fat_per_100g, amount_g),
    )


def scale_per_100g(rate: float, amount_g: float) -> int:
    """Return ``rate * amount / 100`` rounded half away from zero.

    Decimal arithmetic on the shortest string form keeps inputs such as
    ``3.6`` exact, so ``x.5`` results round the same way on every platform.
    """
    value = Decimal(str(rate)) * Decimal(str(amount_g)) / Decimal(100)
    return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))
