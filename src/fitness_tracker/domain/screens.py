"""Screens the client can display."""

from enum import Enum


class Screen(Enum):
    """Named screens of the client."""

    LOGIN = "login"
    REGISTER = "register"
    DASHBOARD = "dashboard"
    MEALS = "meals"
    WORKOUTS = "workouts"
    BMI = "bmi"
    PROFILE = "profile"


UNAUTHENTICATED_SCREENS = frozenset({Screen.LOGIN, Screen.REGISTER})
