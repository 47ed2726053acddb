"""Domain models for workout logging."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class Workout:
    """A logged workout."""

    id: UUID
    name: str
    sets: int
    reps: int
    calories_burned: float
    duration_min: float | None = None
