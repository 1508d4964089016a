import logging

import pytest

from task_store import (
    CLEAR,
    UNCHANGED,
    NotFoundError,
    SetDescription,
    Task,
    TaskStore,
    TaskStoreError,
    ValidationError,
)


@pytest.fixture
def store():
    return TaskStore()


def seed_tasks(store, count=4):
    # Even indices end up completed
    created = []
    for i in range(count):
        task = store.create(f"Task {i}", f"Desc {i}")
        if i % 2 == 0:
            task = store.update(task.id, completed=True)
        created.append(task)
    return created


class TestCreate:
    def test_create_returns_stored_fields(self, store):
        task = store.create("Buy milk", "2 litres")
        assert task.id > 0
        assert task.title == "Buy milk"
        assert task.description == "2 litres"
        assert task.completed is False

    def test_create_without_description(self, store):
        task = store.create("Buy milk")
        assert task.description is None

    def test_create_accepts_boundary_lengths(self, store):
        task = store.create("x" * 200, "d" * 2000)
        assert len(task.title) == 200
        assert len(task.description) == 2000

        single = store.create("x", "")
        assert single.title == "x"
        assert single.description == ""

    def test_ids_increase_from_one(self, store):
        ids = [store.create(f"Task {i}").id for i in range(5)]
        assert ids == [1, 2, 3, 4, 5]

    @pytest.mark.parametrize("title", ["", "x" * 201])
    def test_invalid_title_leaves_store_unchanged(self, store, title):
        store.create("Existing")
        with pytest.raises(ValidationError) as excinfo:
            store.create(title)
        assert str(excinfo.value) == "Title must be between 1 and 200 characters"
        assert len(store) == 1
        assert store.next_id == 2

    def test_invalid_description_leaves_store_unchanged(self, store):
        with pytest.raises(ValidationError) as excinfo:
            store.create("Title", "d" * 2001)
        assert excinfo.value.message == "Description must be at most 2000 characters"
        assert len(store) == 0
        assert store.next_id == 1

    def test_rejected_create_is_logged(self, store, caplog):
        with caplog.at_level(logging.INFO, logger="task_store.repositories"):
            with pytest.raises(ValidationError):
                store.create("")
        assert "Rejected task create" in caplog.text

    def test_returned_task_is_a_copy(self, store):
        task = store.create("Original")
        task.title = "Mutated"
        assert store.get(task.id).title == "Original"

    def test_stored_id_survives_caller_mutation(self, store):
        task = store.create("Fixed id")
        task.id = 99
        assert store.get(1).title == "Fixed id"
        assert 99 not in store
        assert store.next_id == 2


class TestGet:
    def test_round_trip(self, store):
        created = store.create("Read book", "Chapter 3")
        assert store.get(created.id) == created

    def test_unknown_id_raises_not_found(self, store):
        store.create("Only one")
        with pytest.raises(NotFoundError) as excinfo:
            store.get(999)
        assert excinfo.value.task_id == 999
        assert str(excinfo.value) == "Task 999 not found"

    def test_unassigned_id_is_never_found(self, store):
        store.create("Only one")
        assert 0 not in store
        with pytest.raises(NotFoundError):
            store.get(0)


class TestList:
    def test_list_all_in_insertion_order(self, store):
        created = seed_tasks(store)
        assert [t.id for t in store.list()] == [t.id for t in created]

    def test_list_filters_by_completed(self, store):
        seed_tasks(store, 6)
        done = store.list(True)
        pending = store.list(False)
        assert [t.title for t in done] == ["Task 0", "Task 2", "Task 4"]
        assert [t.title for t in pending] == ["Task 1", "Task 3", "Task 5"]

    def test_list_reflects_current_state(self, store):
        task = store.create("Toggle me")
        assert store.list(True) == []
        store.update(task.id, completed=True)
        assert [t.id for t in store.list(True)] == [task.id]

    def test_list_empty_store(self, store):
        assert store.list() == []


class TestUpdate:
    def test_update_changes_only_provided_fields(self, store):
        task = store.create("Partial", "X")
        updated = store.update(task.id, title="New")
        assert updated.title == "New"
        assert updated.description == "X"
        assert updated.completed is False

    def test_update_completed_only(self, store):
        task = store.create("Partial", "X")
        updated = store.update(task.id, completed=True)
        assert updated.completed is True
        assert updated.title == "Partial"

    def test_clear_description(self, store):
        task = store.create("Has desc", "Remove me")
        store.update(task.id, description=CLEAR)
        assert store.get(task.id).description is None

    def test_set_description(self, store):
        task = store.create("No desc")
        updated = store.update(task.id, description=SetDescription("Now described"))
        assert updated.description == "Now described"

    def test_unchanged_description_is_default(self, store):
        task = store.create("Keep", "Kept")
        store.update(task.id, title="Kept title", description=UNCHANGED)
        assert store.get(task.id).description == "Kept"

    def test_unknown_id_raises_not_found(self, store):
        with pytest.raises(NotFoundError):
            store.update(42, title="Nope")

    def test_invalid_title_rejected(self, store):
        task = store.create("Valid")
        with pytest.raises(ValidationError):
            store.update(task.id, title="")
        assert store.get(task.id).title == "Valid"

    def test_failed_update_applies_nothing(self, store):
        # A valid title together with an oversized description must not be half-applied
        task = store.create("Before", "Old")
        with pytest.raises(ValidationError):
            store.update(
                task.id,
                title="After",
                description=SetDescription("d" * 2001),
                completed=True,
            )
        assert store.get(task.id) == task

    def test_unsupported_description_change(self, store):
        task = store.create("Before")
        with pytest.raises(TypeError):
            store.update(task.id, title="After", description="plain string")
        assert store.get(task.id).title == "Before"

    def test_update_keeps_id_and_order(self, store):
        first = store.create("First")
        second = store.create("Second")
        store.update(first.id, title="First renamed")
        assert [t.id for t in store.list()] == [first.id, second.id]


class TestDelete:
    def test_delete_returns_task_and_removes_it(self, store):
        task = store.create("ToDelete", "bye")
        removed = store.delete(task.id)
        assert removed == task
        with pytest.raises(NotFoundError):
            store.get(task.id)
        assert task.id not in store

    def test_delete_twice_raises_not_found(self, store):
        task = store.create("ToDelete")
        store.delete(task.id)
        with pytest.raises(NotFoundError):
            store.delete(task.id)

    def test_ids_are_not_reused(self, store):
        first = store.create("One")
        second = store.create("Two")
        store.delete(second.id)
        third = store.create("Three")
        assert third.id == 3
        assert [t.id for t in store.list()] == [first.id, third.id]


class TestErrors:
    def test_errors_share_base_class(self):
        assert issubclass(ValidationError, TaskStoreError)
        assert issubclass(NotFoundError, TaskStoreError)
        assert issubclass(ValidationError, ValueError)


class TestTaskEntity:
    def test_create_is_unassigned(self):
        task = Task.create("Write tests", "Add unit tests")
        assert task == Task(id=0, title="Write tests", description="Add unit tests", completed=False)

    def test_create_rejects_long_title(self):
        with pytest.raises(ValidationError) as excinfo:
            Task.create("x" * 201)
        assert "200" in str(excinfo.value)

    def test_length_counts_characters(self):
        task = Task.create("é" * 200)
        assert len(task.title) == 200
