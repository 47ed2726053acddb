"""Session state and screen navigation for the single-user client."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from fitness_tracker.domain.meals import LoggedMeal, MealTemplate
from fitness_tracker.domain.profile import Profile
from fitness_tracker.domain.results import CommandResult
from fitness_tracker.domain.screens import UNAUTHENTICATED_SCREENS, Screen
from fitness_tracker.domain.workouts import Workout
from fitness_tracker.services import stats
from fitness_tracker.services.forms import find_missing, parse_number
from fitness_tracker.services.logs import LogCollection
from fitness_tracker.services.meals import MealLogService
from fitness_tracker.services.templates import TemplateStore
from fitness_tracker.services.workouts import WorkoutService

logger = logging.getLogger(__name__)

LOGIN_PROFILE_NAME = "John Doe"
LOGIN_PROFILE_DEFAULTS = {"age": 28, "height_cm": 175.0, "weight_kg": 75.0}
REGISTER_PROFILE_DEFAULTS = {"age": 25, "height_cm": 170.0, "weight_kg": 70.0}
PROFILE_NUMBERS = ("age", "height_cm", "weight_kg")


@dataclass
class AppState:
    """Everything the client holds for the current session."""

    screen: Screen = Screen.LOGIN
    profile: Profile | None = None
    meals: LogCollection[LoggedMeal] = field(
        default_factory=lambda: LogCollection(LoggedMeal)
    )
    workouts: LogCollection[Workout] = field(
        default_factory=lambda: LogCollection(Workout)
    )


@dataclass(frozen=True)
class DashboardView:
    """Dashboard screen contents."""

    summary: stats.DashboardSummary


@dataclass(frozen=True)
class MealsView:
    """Meal tracker screen contents."""

    meals: list[LoggedMeal]
    templates: list[MealTemplate]


@dataclass(frozen=True)
class WorkoutsView:
    """Workout tracker screen contents."""

    workouts: list[Workout]


@dataclass(frozen=True)
class BmiView:
    """BMI calculator prefilled from the profile."""

    height_cm: float | None
    weight_kg: float | None


@dataclass(frozen=True)
class ProfileView:
    """Profile screen contents."""

    profile: Profile | None
    total_calories: float
    total_workouts: int


@dataclass(frozen=True)
class AuthView:
    """Login or registration form."""

    screen: Screen


ScreenView = DashboardView | MealsView | WorkoutsView | BmiView | ProfileView | AuthView


@dataclass
class SessionService:
    """Owns the application state and applies user commands to it."""

    templates: TemplateStore
    state: AppState = field(default_factory=AppState)

    @property
    def meal_log(self) -> MealLogService:
        """Meal logging bound to the current session's meals."""
        return MealLogService(templates=self.templates, meals=self.state.meals)

    @property
    def workout_log(self) -> WorkoutService:
        """Workout logging bound to the current session's workouts."""
        return WorkoutService(workouts=self.state.workouts)

    @property
    def is_authenticated(self) -> bool:
        """Return True when a profile is signed in."""
        return self.state.profile is not None

    @property
    def visible_screen(self) -> Screen:
        """Screen that is actually rendered for the current state."""
        if (
            not self.is_authenticated
            and self.state.screen not in UNAUTHENTICATED_SCREENS
        ):
            return Screen.LOGIN
        return self.state.screen

    def navigate(self, screen: Screen) -> Screen:
        """Switch to a screen and return the one now rendered."""
        self.state.screen = screen
        return self.visible_screen

    def login(self, email: str, password: str) -> CommandResult[Profile]:
        """Sign in with a placeholder profile; credentials are not checked."""
        missing = find_missing(
            {"email": email, "password": password}, text_fields=("email", "password")
        )
        if missing:
            return CommandResult.missing(*missing)
        profile = Profile(
            name=LOGIN_PROFILE_NAME, email=email.strip(), **LOGIN_PROFILE_DEFAULTS
        )
        return self._start_session(profile)

    def register(self, name: str, email: str, password: str) -> CommandResult[Profile]:
        """Create a placeholder profile for a new account and sign in."""
        missing = find_missing(
            {"name": name, "email": email, "password": password},
            text_fields=("name", "email", "password"),
        )
        if missing:
            return CommandResult.missing(*missing)
        profile = Profile(
            name=name.strip(), email=email.strip(), **REGISTER_PROFILE_DEFAULTS
        )
        return self._start_session(profile)

    def logout(self) -> None:
        """Clear the profile and both logs; meal templates are kept."""
        self.state.profile = None
        self.state.meals.clear()
        self.state.workouts.clear()
        self.state.screen = Screen.LOGIN
        logger.info("Session ended")

    def update_profile(self, payload: Mapping[str, object]) -> CommandResult[Profile]:
        """Replace the profile with submitted form values."""
        if self.state.profile is None:
            return CommandResult.missing_target()
        missing = find_missing(
            payload, text_fields=("name", "email"), number_fields=PROFILE_NUMBERS
        )
        if missing:
            return CommandResult.missing(*missing)
        profile = Profile(
            name=str(payload["name"]).strip(),
            email=str(payload["email"]).strip(),
            age=int(parse_number(payload["age"]) or 0),
            height_cm=parse_number(payload["height_cm"]) or 0.0,
            weight_kg=parse_number(payload["weight_kg"]) or 0.0,
        )
        self.state.profile = profile
        return CommandResult.success(profile)

    def dashboard(self) -> stats.DashboardSummary:
        """Recompute dashboard totals from the current state."""
        return stats.summarize(
            self.state.meals.list(), self.state.workouts.list(), self.state.profile
        )

    def view(self) -> ScreenView:
        """Build the contents of the visible screen."""
        screen = self.visible_screen
        if screen in UNAUTHENTICATED_SCREENS:
            return AuthView(screen=screen)
        if screen is Screen.MEALS:
            return MealsView(
                meals=self.state.meals.list(), templates=self.templates.list()
            )
        if screen is Screen.WORKOUTS:
            return WorkoutsView(workouts=self.state.workouts.list())
        if screen is Screen.BMI:
            profile = self.state.profile
            return BmiView(
                height_cm=profile.height_cm if profile else None,
                weight_kg=profile.weight_kg if profile else None,
            )
        summary = self.dashboard()
        if screen is Screen.PROFILE:
            return ProfileView(
                profile=self.state.profile,
                total_calories=summary.total_calories,
                total_workouts=summary.total_workouts,
            )
        return DashboardView(summary=summary)

    def _start_session(self, profile: Profile) -> CommandResult[Profile]:
        self.state.profile = profile
        self.state.screen = Screen.DASHBOARD
        logger.info("Session started for %s", profile.email)
        return CommandResult.success(profile)
