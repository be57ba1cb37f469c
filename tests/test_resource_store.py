import threading

import pytest

from crud_api.app.core.errors import RecordNotFound
from crud_api.app.services.product_service import ProductStore
from crud_api.app.services.resource_store import ResourceStore
from crud_api.app.services.user_service import DEMO_USERS, UserStore


def test_create_assigns_sequential_ids_and_keeps_order():
    store = ResourceStore("Thing")
    created = [store.create({"name": f"thing {n}"}) for n in range(5)]

    assert [record["id"] for record in created] == [1, 2, 3, 4, 5]
    assert store.list() == created
    assert len(store) == store.count() == 5


def test_create_puts_id_first_and_ignores_payload_id():
    store = ResourceStore("Thing")
    record = store.create({"id": 42, "name": "John Doe"})

    assert record == {"id": 1, "name": "John Doe"}
    assert list(record) == ["id", "name"]


def test_get_returns_what_create_returned():
    store = ResourceStore("Thing")
    first = store.create({"name": "a", "tags": ["x"]})
    store.create({"name": "b"})

    assert store.get(first["id"]) == first


def test_reads_are_copies():
    store = ResourceStore("Thing")
    record = store.create({"name": "a"})
    record["name"] = "changed"
    store.list()[0]["name"] = "changed again"
    store.get(1)["extra"] = True

    assert store.get(1) == {"id": 1, "name": "a"}


def test_get_missing_raises_not_found():
    store = UserStore()
    with pytest.raises(RecordNotFound) as excinfo:
        store.get(999)
    assert excinfo.value.message == "User not found"
    assert excinfo.value.record_id == 999


def test_get_with_none_id_is_not_found():
    store = ProductStore()
    store.create({"name": "Laptop"})
    with pytest.raises(RecordNotFound, match="Product not found"):
        store.get(None)


def test_update_merges_fields_and_keeps_id():
    store = ResourceStore("Thing")
    store.create({"name": "a", "colour": "red"})

    updated = store.update(1, {"id": 7, "colour": "blue", "size": 3})

    assert updated == {"id": 1, "name": "a", "colour": "blue", "size": 3}
    assert store.get(1) == updated
    with pytest.raises(RecordNotFound):
        store.get(7)


def test_update_missing_raises_not_found():
    store = ResourceStore("Thing")
    with pytest.raises(RecordNotFound):
        store.update(1, {"name": "x"})


def test_delete_removes_exactly_one_record():
    store = ResourceStore("Thing")
    for name in "abc":
        store.create({"name": name})

    assert store.delete(2) is None
    assert [record["name"] for record in store.list()] == ["a", "c"]
    with pytest.raises(RecordNotFound):
        store.get(2)


def test_delete_missing_raises_not_found_and_keeps_records():
    store = ResourceStore("Thing")
    store.create({"name": "a"})
    with pytest.raises(RecordNotFound):
        store.delete(5)
    assert len(store) == 1


def test_counter_strategy_never_reuses_ids():
    store = ResourceStore("Thing", id_strategy="counter")
    store.create({"name": "a"})
    store.create({"name": "b"})
    store.delete(2)

    assert store.create({"name": "c"})["id"] == 3


def test_length_strategy_reuses_deleted_id_known_limitation():
    # Legacy ids are len(records) + 1, so the id of a deleted trailing
    # record is handed out again.
    store = ResourceStore("Thing", id_strategy="length")
    store.create({"name": "a"})
    store.create({"name": "b"})
    store.delete(2)

    assert store.create({"name": "c"}) == {"id": 2, "name": "c"}


def test_length_strategy_skips_ids_still_in_use():
    store = ResourceStore("Thing", id_strategy="length")
    store.create({"name": "John Doe"})
    store.create({"name": "Jane Doe"})
    store.delete(1)

    created = store.create({"name": "New"})

    assert created == {"id": 3, "name": "New"}
    ids = [record["id"] for record in store.list()]
    assert len(ids) == len(set(ids))


def test_unknown_id_strategy_is_rejected():
    with pytest.raises(ValueError, match="Unknown id strategy"):
        ResourceStore("Thing", id_strategy="random")


def test_clear_resets_records_and_ids():
    store = ResourceStore("Thing")
    store.create({"name": "a"})
    store.clear()

    assert store.list() == []
    assert store.create({"name": "b"})["id"] == 1


def test_entity_names():
    assert UserStore().entity_name == "User"
    assert ProductStore().entity_name == "Product"
    assert ResourceStore().entity_name == "Resource"
    assert ResourceStore("Order").entity_name == "Order"


def test_user_store_seed_loads_demo_users():
    store = UserStore()
    store.seed()

    assert store.list() == [
        {"id": index, **payload} for index, payload in enumerate(DEMO_USERS, start=1)
    ]


def test_concurrent_creates_get_unique_ids():
    store = ResourceStore("Thing")

    def worker() -> None:
        for _ in range(200):
            store.create({"name": "x"})

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    ids = [record["id"] for record in store.list()]
    assert len(ids) == 1600
    assert sorted(ids) == list(range(1, 1601))
