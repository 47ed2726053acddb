"""Domain models for the user profile."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Profile:
    """Profile of the signed-in user."""

    name: str
    email: str
    age: int
    height_cm: float
    weight_kg: float
