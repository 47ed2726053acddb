"""Tests for session state and navigation."""

from fitness_tracker.domain.screens import Screen
from fitness_tracker.services.sessions import (
    AuthView,
    BmiView,
    DashboardView,
    MealsView,
    ProfileView,
    SessionService,
    WorkoutsView,
)
from fitness_tracker.services.templates import TEMPLATES_KEY, TemplateStore
from tests.conftest import CHICKEN, InMemoryKeyValueStore


def test_initial_screen_is_login(session_service: SessionService) -> None:
    assert session_service.visible_screen is Screen.LOGIN
    assert not session_service.is_authenticated
    assert session_service.view() == AuthView(screen=Screen.LOGIN)


def test_login_creates_placeholder_profile(session_service: SessionService) -> None:
    result = session_service.login("jane@example.com", "secret")

    assert result.ok
    assert result.value.name == "John Doe"
    assert result.value.email == "jane@example.com"
    assert (result.value.age, result.value.height_cm, result.value.weight_kg) == (
        28,
        175,
        75,
    )
    assert session_service.visible_screen is Screen.DASHBOARD


def test_login_requires_email_and_password(session_service: SessionService) -> None:
    result = session_service.login("jane@example.com", "")

    assert result.missing_fields == ("password",)
    assert not session_service.is_authenticated
    assert session_service.visible_screen is Screen.LOGIN


def test_register_uses_given_name(session_service: SessionService) -> None:
    session_service.navigate(Screen.REGISTER)

    result = session_service.register("Jane", "jane@example.com", "pw")

    assert result.value.name == "Jane"
    assert (result.value.age, result.value.height_cm, result.value.weight_kg) == (
        25,
        170,
        70,
    )
    assert session_service.visible_screen is Screen.DASHBOARD


def test_register_reports_missing_fields(session_service: SessionService) -> None:
    session_service.navigate(Screen.REGISTER)

    result = session_service.register("", "", "pw")

    assert result.missing_fields == ("name", "email")
    assert session_service.visible_screen is Screen.REGISTER


def test_unauthenticated_requests_render_login(
    session_service: SessionService,
) -> None:
    assert session_service.navigate(Screen.MEALS) is Screen.LOGIN
    assert session_service.navigate(Screen.REGISTER) is Screen.REGISTER


def test_navigate_allows_any_screen_when_signed_in(
    session_service: SessionService,
) -> None:
    session_service.login("jane@example.com", "pw")

    for screen in Screen:
        assert session_service.navigate(screen) is screen


def test_update_profile_replaces_profile(session_service: SessionService) -> None:
    session_service.login("jane@example.com", "pw")

    result = session_service.update_profile(
        {
            "name": "Jane",
            "email": "jane@example.com",
            "age": "31",
            "height_cm": "168",
            "weight_kg": "60.5",
        }
    )

    assert result.ok
    assert session_service.state.profile == result.value
    assert result.value.age == 31
    assert result.value.weight_kg == 60.5


def test_update_profile_rejects_missing_fields(
    session_service: SessionService,
) -> None:
    session_service.login("jane@example.com", "pw")
    before = session_service.state.profile

    result = session_service.update_profile({"name": "Jane", "email": "", "age": 31})

    assert result.missing_fields == ("email", "height_cm", "weight_kg")
    assert session_service.state.profile == before


def test_update_profile_without_session_is_not_found(
    session_service: SessionService,
) -> None:
    assert session_service.update_profile({"name": "Jane"}).not_found


def test_logout_clears_session_but_keeps_templates() -> None:
    storage = InMemoryKeyValueStore()
    service = SessionService(TemplateStore(storage))
    service.login("jane@example.com", "pw")
    chicken = service.templates.upsert(CHICKEN).value
    service.meal_log.log_meal(chicken.id, 150)
    service.workout_log.add_workout(
        {"name": "Run", "sets": 1, "reps": 1, "calories_burned": 300}
    )
    persisted = storage.values[TEMPLATES_KEY]

    service.logout()

    assert service.state.profile is None
    assert service.state.meals.list() == []
    assert service.state.workouts.list() == []
    assert service.visible_screen is Screen.LOGIN
    assert storage.values[TEMPLATES_KEY] == persisted
    assert service.templates.list() == [chicken]


def test_dashboard_reflects_current_collections(
    session_service: SessionService,
) -> None:
    session_service.login("jane@example.com", "pw")
    chicken = session_service.templates.upsert(CHICKEN).value
    session_service.meal_log.log_meal(chicken.id, 150)
    session_service.meal_log.log_meal(chicken.id, 100)
    session_service.workout_log.add_workout(
        {"name": "Run", "sets": 1, "reps": 1, "calories_burned": 300}
    )

    summary = session_service.dashboard()

    assert summary.total_calories == 413
    assert summary.total_workouts == 1
    assert summary.bmi == "24.5"
    assert session_service.view() == DashboardView(summary=summary)


def test_views_for_each_screen(session_service: SessionService) -> None:
    session_service.login("jane@example.com", "pw")
    chicken = session_service.templates.upsert(CHICKEN).value
    meal = session_service.meal_log.log_meal(chicken.id, 100).value

    session_service.navigate(Screen.MEALS)
    assert session_service.view() == MealsView(meals=[meal], templates=[chicken])

    session_service.navigate(Screen.WORKOUTS)
    assert session_service.view() == WorkoutsView(workouts=[])

    session_service.navigate(Screen.BMI)
    assert session_service.view() == BmiView(height_cm=175, weight_kg=75)

    session_service.navigate(Screen.PROFILE)
    assert session_service.view() == ProfileView(
        profile=session_service.state.profile, total_calories=165, total_workouts=0
    )
