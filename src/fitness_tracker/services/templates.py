"""Services for managing persisted meal templates."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol
from uuid import UUID, uuid4

from pydantic import ValidationError

from fitness_tracker.domain.meals import MealTemplate
from fitness_tracker.domain.results import CommandResult
from fitness_tracker.domain.template_records import TEMPLATE_LIST, TemplateRecord
from fitness_tracker.services.forms import find_missing, optional_number, parse_number

TEMPLATES_KEY = "mealTemplates"

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Durable storage of string values under named keys."""

    def get(self, key: str) -> str | None:
        """Return the value stored under a key, if present."""

    def set(self, key: str, value: str) -> None:
        """Store a value under a key, replacing any previous value."""


class TemplateLoadError(ValueError):
    """Raised when persisted templates cannot be decoded."""


@dataclass
class TemplateStore:
    """Ordered collection of meal templates saved under one durable key."""

    storage: KeyValueStore
    key: str = TEMPLATES_KEY
    load_error: str | None = field(default=None, init=False)
    _templates: list[MealTemplate] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        raw = self.storage.get(self.key)
        if raw is None:
            return
        try:
            self._templates = decode_templates(raw)
        except TemplateLoadError as exc:
            self.load_error = str(exc)
            logger.warning(
                "Ignoring unreadable meal templates under %r: %s", self.key, exc
            )

    def list(self) -> list[MealTemplate]:
        """Return templates in insertion order."""
        return list(self._templates)

    def get(self, template_id: UUID) -> MealTemplate | None:
        """Return a template by id, if present."""
        for template in self._templates:
            if template.id == template_id:
                return template
        return None

    def upsert(
        self, payload: Mapping[str, object], editing_id: UUID | None = None
    ) -> CommandResult[MealTemplate]:
        """Create a template, or replace the one being edited in place."""
        missing = find_missing(
            payload, text_fields=("name",), number_fields=("calories_per_100g",)
        )
        if missing:
            return CommandResult.missing(*missing)

        existing = self.get(editing_id) if editing_id is not None else None
        template = MealTemplate(
            id=existing.id if existing else uuid4(),
            name=str(payload["name"]).strip(),
            calories_per_100g=parse_number(payload["calories_per_100g"]) or 0.0,
            protein_per_100g=optional_number(payload, "protein_per_100g") or 0.0,
            carbs_per_100g=optional_number(payload, "carbs_per_100g") or 0.0,
            fat_per_100g=optional_number(payload, "fat_per_100g") or 0.0,
        )
        if existing:
            self._templates = [
                template if item.id == existing.id else item
                for item in self._templates
            ]
        else:
            self._templates.append(template)
        self._save()
        return CommandResult.success(template)

    def remove(self, template_id: UUID) -> bool:
        """Remove a template; return False when it did not exist."""
        remaining = [item for item in self._templates if item.id != template_id]
        if len(remaining) == len(self._templates):
            return False
        self._templates = remaining
        self._save()
        return True

    def _save(self) -> None:
        self.storage.set(self.key, encode_templates(self._templates))


def encode_templates(templates: list[MealTemplate]) -> str:
    """Serialize templates to the persisted JSON array."""
    records = [TemplateRecord.from_template(template) for template in templates]
    return TEMPLATE_LIST.dump_json(records, by_alias=True).decode("utf-8")


def decode_templates(raw: str) -> list[MealTemplate]:
    """Parse the persisted JSON array back into templates."""
    try:
        records = TEMPLATE_LIST.validate_json(raw)
    except ValidationError as exc:
        raise TemplateLoadError(str(exc)) from exc
    return [record.to_template() for record in records]
