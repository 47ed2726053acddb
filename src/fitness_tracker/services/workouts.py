"""Workout logging service."""

from collections.abc import Mapping
from dataclasses import dataclass
from uuid import UUID

from fitness_tracker.domain.results import CommandResult
from fitness_tracker.domain.workouts import Workout
from fitness_tracker.services.forms import find_missing, optional_number, parse_number
from fitness_tracker.services.logs import LogCollection

REQUIRED_NUMBERS = ("sets", "reps", "calories_burned")


@dataclass
class WorkoutService:
    """Service for the workout log."""

    workouts: LogCollection[Workout]

    def add_workout(self, payload: Mapping[str, object]) -> CommandResult[Workout]:
        """Log a workout from submitted form values."""
        parsed = _parse_workout(payload)
        if not parsed.ok or parsed.value is None:
            return parsed.rejection()
        return CommandResult.success(self.workouts.add(parsed.value))

    def update_workout(
        self, workout_id: UUID, payload: Mapping[str, object]
    ) -> CommandResult[Workout]:
        """Replace a logged workout in place."""
        parsed = _parse_workout(payload)
        if not parsed.ok or parsed.value is None:
            return parsed.rejection()
        updated = self.workouts.update(workout_id, parsed.value)
        if updated is None:
            return CommandResult.missing_target()
        return CommandResult.success(updated)

    def delete_workout(self, workout_id: UUID) -> bool:
        """Delete a logged workout."""
        return self.workouts.delete(workout_id)

    def start_edit(self, workout_id: UUID) -> CommandResult[Workout]:
        """Return the stored workout to prefill the edit form."""
        workout = self.workouts.get(workout_id)
        if workout is None:
            return CommandResult.missing_target()
        return CommandResult.success(workout)

    def list_workouts(self) -> list[Workout]:
        """Return logged workouts in the order they were added."""
        return self.workouts.list()


def _parse_workout(payload: Mapping[str, object]) -> CommandResult[dict[str, object]]:
    missing = find_missing(
        payload, text_fields=("name",), number_fields=REQUIRED_NUMBERS
    )
    if missing:
        return CommandResult.missing(*missing)
    return CommandResult.success(
        {
            "name": str(payload["name"]).strip(),
            "sets": int(parse_number(payload["sets"]) or 0),
            "reps": int(parse_number(payload["reps"]) or 0),
            "calories_burned": parse_number(payload["calories_burned"]) or 0.0,
            "duration_min": optional_number(payload, "duration_min"),
        }
    )
