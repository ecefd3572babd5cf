import uuid

from infrastructure.task_store import InMemoryTaskStore


def test_list_starts_empty(store: InMemoryTaskStore) -> None:
    assert store.list() == []


def test_create_applies_defaults(store: InMemoryTaskStore) -> None:
    task = store.create()
    assert task.description == ""
    assert task.is_completed is False
    assert isinstance(task.id, uuid.UUID)


def test_created_ids_are_unique(store: InMemoryTaskStore) -> None:
    ids = {store.create(f"task {i}", False).id for i in range(200)}
    assert len(ids) == 200


def test_list_keeps_insertion_order(store: InMemoryTaskStore) -> None:
    first = store.create("first", False)
    second = store.create("second", True)
    third = store.create("third", False)
    assert [t.id for t in store.list()] == [first.id, second.id, third.id]


def test_update_overwrites_fields_and_keeps_id(store: InMemoryTaskStore) -> None:
    task = store.create("buy milk", False)
    assert store.update(task.id, "buy oat milk", True) is True
    (stored,) = store.list()
    assert stored.id == task.id
    assert stored.description == "buy oat milk"
    assert stored.is_completed is True


def test_update_allows_empty_description(store: InMemoryTaskStore) -> None:
    task = store.create("something", False)
    assert store.update(task.id, "", False) is True
    assert store.get(task.id).description == ""


def test_update_unknown_id_signals_not_found(store: InMemoryTaskStore) -> None:
    store.create("a", False)
    assert store.update(uuid.uuid4(), "x", True) is False
    assert store.list()[0].description == "a"


def test_delete_removes_task(store: InMemoryTaskStore) -> None:
    task = store.create("a", False)
    assert store.delete(task.id) is True
    assert store.get(task.id) is None
    assert store.delete(task.id) is False


def test_delete_unknown_id_leaves_count_unchanged(store: InMemoryTaskStore) -> None:
    store.create("a", False)
    store.create("b", False)
    assert store.delete(uuid.uuid4()) is False
    assert store.count() == 2


def test_count_after_creates_and_deletes(store: InMemoryTaskStore) -> None:
    existing = store.create("already there", False)
    created = [store.create(f"t{i}", False) for i in range(7)]
    for task in created[:3]:
        assert store.delete(task.id)
    assert len(store.list()) == 7 - 3 + 1
    assert existing.id in {t.id for t in store.list()}


def test_returned_records_are_copies(store: InMemoryTaskStore) -> None:
    task = store.create("original", False)
    task.description = "mutated outside"
    store.list()[0].is_completed = True
    stored = store.get(task.id)
    assert stored.description == "original"
    assert stored.is_completed is False


def test_parallel_creates_and_deletes(store: InMemoryTaskStore) -> None:
    from concurrent.futures import ThreadPoolExecutor

    doomed = [store.create(f"doomed {i}", False) for i in range(100)]
    with ThreadPoolExecutor(max_workers=8) as pool:
        creates = [pool.submit(store.create, f"task {i}", i % 2 == 0) for i in range(300)]
        deletes = [pool.submit(store.delete, task.id) for task in doomed]
        created = [future.result() for future in creates]
        assert all(future.result() for future in deletes)

    ids = [task.id for task in store.list()]
    assert len(set(ids)) == len(ids)
    assert {task.id for task in created} == set(ids)
    assert store.count() == 100 + 300 - 100
