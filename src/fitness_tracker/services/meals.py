"""Meal logging service."""

from dataclasses import dataclass
from uuid import UUID

from fitness_tracker.domain.meals import (
    LoggedMeal,
    MacroProfile,
    MealTemplate,
    derive_meal,
)
from fitness_tracker.domain.results import CommandResult
from fitness_tracker.services.forms import is_blank, parse_number
from fitness_tracker.services.logs import LogCollection
from fitness_tracker.services.templates import TemplateStore


@dataclass(frozen=True)
class MealDraft:
    """Meal form values restored for editing a logged meal."""

    meal_id: UUID
    template_id: UUID
    amount_g: float


@dataclass
class MealLogService:
    """Service that derives meals from templates and keeps the meal log."""

    templates: TemplateStore
    meals: LogCollection[LoggedMeal]

    def preview(
        self, template_id: UUID | None, amount: object
    ) -> CommandResult[MacroProfile]:
        """Compute the macros a meal would get without logging it."""
        resolved = self._resolve(template_id, amount)
        if not resolved.ok or resolved.value is None:
            return resolved.rejection()
        template, amount_g = resolved.value
        return CommandResult.success(derive_meal(template, amount_g))

    def log_meal(
        self, template_id: UUID | None, amount: object
    ) -> CommandResult[LoggedMeal]:
        """Log a new meal from a template and an amount in grams."""
        resolved = self._resolve(template_id, amount)
        if not resolved.ok or resolved.value is None:
            return resolved.rejection()
        return CommandResult.success(self.meals.add(_meal_payload(*resolved.value)))

    def update_meal(
        self, meal_id: UUID, template_id: UUID | None, amount: object
    ) -> CommandResult[LoggedMeal]:
        """Re-derive a logged meal in place from a template and an amount."""
        resolved = self._resolve(template_id, amount)
        if not resolved.ok or resolved.value is None:
            return resolved.rejection()
        updated = self.meals.update(meal_id, _meal_payload(*resolved.value))
        if updated is None:
            return CommandResult.missing_target()
        return CommandResult.success(updated)

    def delete_meal(self, meal_id: UUID) -> bool:
        """Delete a logged meal."""
        return self.meals.delete(meal_id)

    def start_edit(self, meal_id: UUID) -> CommandResult[MealDraft]:
        """Return the form values for editing a meal.

        The source template is found by the id stored on the meal, so it is
        not found once the template has been deleted.
        """
        meal = self.meals.get(meal_id)
        if meal is None or self.templates.get(meal.template_id) is None:
            return CommandResult.missing_target()
        return CommandResult.success(
            MealDraft(
                meal_id=meal.id, template_id=meal.template_id, amount_g=meal.amount_g
            )
        )

    def list_meals(self) -> list[LoggedMeal]:
        """Return logged meals in the order they were added."""
        return self.meals.list()

    def _resolve(
        self, template_id: UUID | None, amount: object
    ) -> CommandResult[tuple[MealTemplate, float]]:
        missing: list[str] = []
        if template_id is None:
            missing.append("template_id")
        amount_g = None if is_blank(amount) else parse_number(amount)
        if amount_g is None or amount_g <= 0:
            missing.append("amount_g")
        if missing or template_id is None or amount_g is None:
            return CommandResult.missing(*missing)
        template = self.templates.get(template_id)
        if template is None:
            return CommandResult.missing_target()
        return CommandResult.success((template, amount_g))


def _meal_payload(template: MealTemplate, amount_g: float) -> dict[str, object]:
    macros = derive_meal(template, amount_g)
    return {
        "template_id": template.id,
        "name": template.name,
        "calories": macros.calories,
        "protein_g": macros.protein_g,
        "carbs_g": macros.carbs_g,
        "fat_g": macros.fat_g,
        "amount_g": amount_g,
    }
