"""Pydantic models for persisted meal template records."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from fitness_tracker.domain.meals import MealTemplate


class TemplateRecord(BaseModel):
    """Meal template as stored under the durable key."""

    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    name: str
    calories_per_100g: float = Field(alias="caloriesPer100g")
    protein_per_100g: float = Field(default=0.0, alias="proteinPer100g")
    carbs_per_100g: float = Field(default=0.0, alias="carbsPer100g")
    fat_per_100g: float = Field(default=0.0, alias="fatPer100g")

    @classmethod
    def from_template(cls, template: MealTemplate) -> "TemplateRecord":
        """Build a record from a domain template."""
        return cls(
            id=template.id,
            name=template.name,
            calories_per_100g=template.calories_per_100g,
            protein_per_100g=template.protein_per_100g,
            carbs_per_100g=template.carbs_per_100g,
            fat_per_100g=template.fat_per_100g,
        )

    def to_template(self) -> MealTemplate:
        """Convert the record into a domain template."""
        return MealTemplate(
            id=self.id,
            name=self.name,
            calories_per_100g=self.calories_per_100g,
            protein_per_100g=self.protein_per_100g,
            carbs_per_100g=self.carbs_per_100g,
            fat_per_100g=self.fat_per_100g,
        )


TEMPLATE_LIST = TypeAdapter(list[TemplateRecord])
