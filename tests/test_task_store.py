from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from domain.entities import Priority, Task
from infrastructure.task_store import InMemoryTaskStore, TaskIdGenerator


def test_add_appends_one_task_with_submitted_title(store, make_input) -> None:
    task = store.add(make_input(title="Write report"))

    assert len(store) == 1
    assert task.title == "Write report"
    assert store.list() == [task]


def test_ids_are_unique_even_for_back_to_back_adds(store, make_input) -> None:
    ids = [store.add(make_input(title=f"t{n}")).id for n in range(50)]

    assert len(set(ids)) == 50
    assert ids == sorted(ids)


def test_ids_are_never_reused_after_remove(store, make_input) -> None:
    first = store.add(make_input(title="A"))
    store.remove(first.id)

    assert store.add(make_input(title="B")).id != first.id


def test_update_replaces_only_submitted_fields(store, make_input) -> None:
    task = store.add(
        make_input(title="A", description="keep me", due_date=date(2026, 1, 2), priority=Priority.LOW)
    )

    updated = store.update(task.id, make_input(title="A2", priority=Priority.HIGH))

    assert updated == Task(
        id=task.id, title="A2", description="keep me", due_date=date(2026, 1, 2), priority=Priority.HIGH
    )
    assert store.get(task.id) == updated


def test_update_can_clear_optional_fields(store, make_input) -> None:
    task = store.add(make_input(title="A", due_date=date(2026, 1, 2), priority=Priority.LOW))

    updated = store.update(task.id, make_input(title="A", due_date=None, priority=None))

    assert updated.due_date is None
    assert updated.priority is None


def test_update_keeps_position_and_size(store, make_input) -> None:
    a = store.add(make_input(title="A"))
    b = store.add(make_input(title="B"))
    c = store.add(make_input(title="C"))

    store.update(b.id, make_input(title="B2"))

    assert [t.id for t in store.list()] == [a.id, b.id, c.id]
    assert [t.title for t in store.list()] == ["A", "B2", "C"]


def test_update_of_missing_id_changes_nothing(store, make_input) -> None:
    store.add(make_input(title="A"))
    before = store.list()

    assert store.update(999, make_input(title="X")) is None
    assert store.list() == before


def test_remove_drops_exactly_one_and_keeps_order(store, make_input) -> None:
    a = store.add(make_input(title="A"))
    b = store.add(make_input(title="B"))
    c = store.add(make_input(title="C"))

    assert store.remove(b.id) is True
    assert store.list() == [a, c]


def test_remove_is_idempotent(store, make_input) -> None:
    a = store.add(make_input(title="A"))
    b = store.add(make_input(title="B"))

    assert store.remove(a.id) is True
    assert store.remove(a.id) is False
    assert store.list() == [b]


def test_list_is_a_snapshot(store, make_input) -> None:
    store.add(make_input(title="A"))
    snapshot = store.list()
    snapshot.clear()

    assert len(store) == 1


def test_returned_tasks_cannot_be_mutated_in_place(store, make_input) -> None:
    store.add(make_input(title="A"))

    with pytest.raises(FrozenInstanceError):
        store.list()[0].title = ""
    with pytest.raises(FrozenInstanceError):
        store.get(store.list()[0].id).title = ""
    assert store.list()[0].title == "A"


def test_id_generator_is_monotonic() -> None:
    ids = TaskIdGenerator(start=10)

    assert [ids.next_id() for _ in range(3)] == [10, 11, 12]


def test_store_uses_injected_id_generator(make_input) -> None:
    store = InMemoryTaskStore(TaskIdGenerator(start=100))

    assert store.add(make_input(title="A")).id == 100
