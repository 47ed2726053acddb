"""Tests for the ordered log collection."""

from itertools import count
from uuid import UUID

from fitness_tracker.domain.workouts import Workout
from fitness_tracker.services.logs import LogCollection


def _sequential_ids():
    counter = count(1)
    return lambda: UUID(int=next(counter))


def _workout(name: str) -> dict[str, object]:
    return {"name": name, "sets": 3, "reps": 10, "calories_burned": 50.0}


def test_add_appends_with_fresh_ids() -> None:
    collection = LogCollection(Workout)

    first = collection.add(_workout("Squat"))
    second = collection.add(_workout("Bench"))

    assert collection.list() == [first, second]
    assert first.id != second.id


def test_update_preserves_position_and_other_entries() -> None:
    collection = LogCollection(Workout, id_factory=_sequential_ids())
    first = collection.add(_workout("Squat"))
    second = collection.add(_workout("Bench"))
    third = collection.add(_workout("Row"))

    updated = collection.update(second.id, {**_workout("Incline Bench"), "sets": 5})

    assert updated == Workout(
        id=second.id, name="Incline Bench", sets=5, reps=10, calories_burned=50.0
    )
    assert collection.list() == [first, updated, third]


def test_update_unknown_id_is_noop() -> None:
    collection = LogCollection(Workout)
    entry = collection.add(_workout("Squat"))

    assert collection.update(UUID(int=99), _workout("Deadlift")) is None
    assert collection.list() == [entry]


def test_delete_is_idempotent() -> None:
    collection = LogCollection(Workout)
    keep = collection.add(_workout("Squat"))
    drop = collection.add(_workout("Bench"))

    assert collection.delete(drop.id) is True
    after_first = collection.list()
    assert collection.delete(drop.id) is False

    assert collection.list() == after_first == [keep]


def test_clear_empties_collection() -> None:
    collection = LogCollection(Workout)
    collection.add(_workout("Squat"))

    collection.clear()

    assert collection.list() == []
    assert len(collection) == 0
