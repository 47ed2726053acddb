"""Totals and BMI derived from the current session state."""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from fitness_tracker.domain.meals import LoggedMeal
from fitness_tracker.domain.profile import Profile
from fitness_tracker.domain.results import CommandResult
from fitness_tracker.domain.workouts import Workout
from fitness_tracker.services.forms import find_missing, parse_number

UNDERWEIGHT_BELOW = 18.5
OVERWEIGHT_FROM = 25.0
OBESE_FROM = 30.0


class BmiCategory(Enum):
    """BMI ranges shown by the calculator."""

    UNDERWEIGHT = "Underweight"
    FIT = "Fit"
    OVERWEIGHT = "Overweight"
    OBESE = "Obese"


@dataclass(frozen=True)
class BmiReading:
    """Calculated BMI with its category."""

    bmi: float
    category: BmiCategory

    @property
    def display(self) -> str:
        """BMI rendered to one decimal place."""
        return format_bmi(self.bmi)


@dataclass(frozen=True)
class DashboardSummary:
    """Totals shown on the dashboard."""

    total_calories: float
    total_workouts: int
    bmi: str


def total_calories(meals: Sequence[LoggedMeal]) -> float:
    """Sum calories over logged meals."""
    return sum((meal.calories for meal in meals), 0)


def total_workouts(workouts: Sequence[Workout]) -> int:
    """Count logged workouts."""
    return len(workouts)


def compute_bmi(height_cm: float, weight_kg: float) -> float:
    """Return weight divided by the square of height in metres."""
    height_m = height_cm / 100
    return weight_kg / (height_m * height_m)


def format_bmi(bmi: float) -> str:
    """Render a BMI value to one decimal place."""
    return f"{bmi:.1f}"


def profile_bmi(profile: Profile | None) -> str:
    """Return the profile's BMI for display, or ``"0"`` without a profile."""
    if profile is None:
        return "0"
    return format_bmi(compute_bmi(profile.height_cm, profile.weight_kg))


def classify_bmi(bmi: float) -> BmiCategory:
    """Map a BMI value to its category; each range includes its lower bound."""
    if bmi < UNDERWEIGHT_BELOW:
        return BmiCategory.UNDERWEIGHT
    if bmi < OVERWEIGHT_FROM:
        return BmiCategory.FIT
    if bmi < OBESE_FROM:
        return BmiCategory.OVERWEIGHT
    return BmiCategory.OBESE


def calculate_bmi(height_cm: object, weight_kg: object) -> CommandResult[BmiReading]:
    """Run the BMI calculator on submitted height and weight."""
    form = {"height_cm": height_cm, "weight_kg": weight_kg}
    missing = find_missing(form, number_fields=("height_cm", "weight_kg"))
    height = parse_number(height_cm)
    if "height_cm" not in missing and (height is None or height <= 0):
        missing.insert(0, "height_cm")
    if missing or height is None:
        return CommandResult.missing(*missing)
    bmi = compute_bmi(height, parse_number(weight_kg) or 0.0)
    # Category follows the one-decimal display value.
    category = classify_bmi(float(format_bmi(bmi)))
    return CommandResult.success(BmiReading(bmi=bmi, category=category))


def summarize(
    meals: Sequence[LoggedMeal], workouts: Sequence[Workout], profile: Profile | None
) -> DashboardSummary:
    """Build the dashboard totals from the current collections."""
    return DashboardSummary(
        total_calories=total_calories(meals),
        total_workouts=total_workouts(workouts),
        bmi=profile_bmi(profile),
    )
