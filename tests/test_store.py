from __future__ import annotations

import threading

import pytest
from hypothesis import given, strategies as strategies

from tasklist import Task, TaskNotFound, TaskStore


@pytest.fixture(name="store")
def _store() -> TaskStore:
    return TaskStore.seeded()


def test_seeded(store: TaskStore) -> None:
    assert [task.id for task in store.list()] == [1, 2, 3]
    assert store.get(2) == Task(2, "Setup CI/CD Pipeline", True)


def test_empty_store_starts_at_one() -> None:
    store = TaskStore()
    assert store.create("First").id == 1


def test_duplicate_ids_rejected() -> None:
    with pytest.raises(ValueError):
        TaskStore([Task(1, "a"), Task(1, "b")])


def test_create_appends(store: TaskStore) -> None:
    task = store.create("Ship it")
    assert task == Task(4, "Ship it", False)
    assert store.list()[-1] == task
    assert len(store) == 4


def test_ids_not_reused_after_delete(store: TaskStore) -> None:
    store.delete(2)
    assert store.create("New").id == 4
    store.delete(4)
    assert store.create("Newer").id == 5
    assert [task.id for task in store.list()] == [1, 3, 5]


def test_update_partial(store: TaskStore) -> None:
    assert store.update(1, completed=True) == Task(1, "Deploy to Production", True)
    assert store.update(1, title="Deploy") == Task(1, "Deploy", True)
    assert store.update(1, completed=False) == Task(1, "Deploy", False)
    assert store.update(1) == Task(1, "Deploy", False)


def test_returned_tasks_are_copies(store: TaskStore) -> None:
    task = store.get(1)
    task.title = "Changed"
    store.list()[0].completed = True
    assert store.get(1) == Task(1, "Deploy to Production", False)


@pytest.mark.parametrize("operation", ["get", "update", "delete"])
def test_missing(store: TaskStore, operation: str) -> None:
    with pytest.raises(TaskNotFound) as info:
        getattr(store, operation)(99999)
    assert info.value.task_id == 99999


def test_order_kept_after_delete(store: TaskStore) -> None:
    store.create("Four")
    store.delete(1)
    assert [task.title for task in store.list()] == [
        "Setup CI/CD Pipeline",
        "Configure Domain",
        "Four",
    ]


@given(
    operations=strategies.lists(
        strategies.one_of(
            strategies.just(("create", None)),
            strategies.tuples(strategies.just("delete"), strategies.integers(0, 20)),
        ),
        max_size=40,
    )
)
def test_live_ids_unique(operations: list) -> None:
    store = TaskStore.seeded()
    issued = {1, 2, 3}
    for name, position in operations:
        if name == "create":
            task = store.create("task")
            assert task.id not in issued
            issued.add(task.id)
        else:
            tasks = store.list()
            if tasks:
                store.delete(tasks[position % len(tasks)].id)
        ids = [task.id for task in store.list()]
        assert len(ids) == len(set(ids))


def test_concurrent_creates() -> None:
    store = TaskStore()

    def _create() -> None:
        for _ in range(50):
            store.create("task")

    threads = [threading.Thread(target=_create) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    ids = [task.id for task in store.list()]
    assert sorted(ids) == list(range(1, 401))
