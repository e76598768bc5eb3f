"""Behaviour shared by MemoryStore and SqlStore (the ``store`` fixture runs both)."""
import pytest

from factory_dashboard.core.errors import ValidationError
from factory_dashboard.schemas.alerts import AlertCreate
from factory_dashboard.schemas.auth import UserCreate
from factory_dashboard.schemas.factory import FactoryCreate
from factory_dashboard.schemas.inventory import InventoryCreate
from factory_dashboard.schemas.production import ProductionLineCreate
from factory_dashboard.schemas.workforce import WorkforceCreate
from factory_dashboard.services.inventory import reconcile_item


def _line(name="Line 01", **overrides):
    values = dict(name=name, product="Housings", target=1200, completed=968, factory_id="Plant A")
    values.update(overrides)
    return ProductionLineCreate(**values)


def _alert(title, read=False, factory_id="Plant A"):
    return AlertCreate(type="info", title=title, message="m", time="now", read=read, factory_id=factory_id)


async def test_ids_are_sequential_from_one(store):
    created = [await store.production_lines.create(_line(f"Line {n}")) for n in range(4)]
    assert [line.id for line in created] == [1, 2, 3, 4]


async def test_create_then_get_round_trips_with_defaults(store):
    created = await store.production_lines.create(
        ProductionLineCreate(name="Line 07", product="Frames", target=400, factory_id="Plant A")
    )
    fetched = await store.production_lines.get(created.id)
    assert fetched == created
    assert fetched.completed == 0
    assert fetched.efficiency == 0
    assert fetched.status == "Active"


async def test_get_unknown_id_returns_none(store):
    assert await store.production_lines.get(999) is None
    assert await store.inventory.get(999) is None


async def test_ids_beyond_the_id_column_range_are_not_found(store):
    await store.production_lines.create(_line())
    for record_id in (0, -1, 2**31, 2**70):
        assert await store.production_lines.get(record_id) is None
        assert await store.production_lines.update(record_id, {"completed": 1}) is None
        assert await store.users.get(record_id) is None


async def test_whole_efficiency_reads_back_as_int(store):
    created = await store.production_lines.create(_line(target=800, completed=423))
    fetched = await store.production_lines.get(created.id)
    assert fetched.efficiency == 53
    assert isinstance(fetched.efficiency, int)


async def test_list_by_factory_filters_and_keeps_insertion_order(store):
    await store.factories.create(FactoryCreate(name="Plant B", location="Elsewhere"))
    await store.production_lines.create(_line("first"))
    await store.production_lines.create(_line("other", factory_id="Plant B"))
    await store.production_lines.create(_line("second"))

    names = [line.name for line in await store.production_lines.list_by_factory("Plant A")]
    assert names == ["first", "second"]
    assert await store.production_lines.list_by_factory("Unknown") == []


async def test_empty_update_leaves_record_identical(store):
    created = await store.production_lines.create(_line())
    updated = await store.production_lines.update(created.id, {})
    assert updated == created
    assert await store.production_lines.get(created.id) == created


async def test_update_merges_only_given_fields(store):
    created = await store.production_lines.create(_line())
    updated = await store.production_lines.update(created.id, {"product": "Brackets"})
    assert updated.product == "Brackets"
    assert updated.model_dump(exclude={"product"}) == created.model_dump(exclude={"product"})
    assert (await store.production_lines.get(created.id)).product == "Brackets"


async def test_update_unknown_id_returns_none(store):
    assert await store.workforce.update(42, {"present": 1}) is None


async def test_update_rejects_unknown_fields_and_id(store):
    created = await store.production_lines.create(_line())
    with pytest.raises(ValidationError):
        await store.production_lines.update(created.id, {"colour": "red"})
    with pytest.raises(ValidationError):
        await store.production_lines.update(created.id, {"id": 7})
    assert await store.production_lines.get(created.id) == created


async def test_update_rejects_values_violating_the_schema(store):
    created = await store.production_lines.create(_line())
    with pytest.raises(ValidationError) as excinfo:
        await store.production_lines.update(created.id, {"target": -1})
    assert "target" in excinfo.value.message


async def test_reconcile_result_is_persisted_with_the_change(store):
    item = await store.inventory.create(
        InventoryCreate(material="Copper Wire", current_stock=150, unit="kg", min_required=100, factory_id="Plant A")
    )
    assert item.status == "Adequate"
    updated = await store.inventory.update(item.id, {"current_stock": 40}, reconcile=reconcile_item)
    assert updated.status == "Critical"
    assert (await store.inventory.get(item.id)).status == "Critical"


async def test_failing_reconcile_aborts_the_update(store):
    created = await store.production_lines.create(_line())

    def reject(merged):
        raise ValidationError("nope")

    with pytest.raises(ValidationError):
        await store.production_lines.update(created.id, {"completed": 1}, reconcile=reject)
    assert (await store.production_lines.get(created.id)).completed == 968


async def test_alerts_list_unread_before_read(store):
    await store.alerts.create(_alert("a", read=True))
    await store.alerts.create(_alert("b"))
    await store.alerts.create(_alert("c", read=True))
    await store.alerts.create(_alert("d"))
    titles = [alert.title for alert in await store.alerts.list_by_factory("Plant A")]
    assert titles == ["b", "d", "a", "c"]


async def test_marking_alert_read_moves_it_after_unread(store):
    first = await store.alerts.create(_alert("first"))
    await store.alerts.create(_alert("second"))
    await store.alerts.update(first.id, {"read": True})
    titles = [alert.title for alert in await store.alerts.list_by_factory("Plant A")]
    assert titles == ["second", "first"]


async def test_factory_names_are_unique(store):
    with pytest.raises(ValidationError):
        await store.factories.create(FactoryCreate(name="Plant A", location="Again"))
    assert [f.name for f in await store.factories.list_all()] == ["Plant A"]


async def test_factory_lookup_by_name(store):
    factory = await store.factories.get_by_name("Plant A")
    assert factory.id == 1
    assert await store.factories.get(factory.id) == factory
    assert await store.factories.get_by_name("Plant Z") is None


async def test_usernames_are_unique(store):
    user = UserCreate(username="asha", password="hash", name="Asha", role="Supervisor", factory="Plant A")
    created = await store.users.create(user)
    assert (await store.users.get_by_username("asha")).id == created.id
    with pytest.raises(ValidationError):
        await store.users.create(user)


async def test_workforce_records_round_trip(store):
    created = await store.workforce.create(
        WorkforceCreate(department="QC", total=7, present=6, on_leave=1, absent=0, factory_id="Plant A")
    )
    assert await store.workforce.get(created.id) == created


async def test_returned_records_are_copies(memory_store):
    await memory_store.factories.create(FactoryCreate(name="Plant A", location="X"))
    created = await memory_store.production_lines.create(_line())
    created.completed = 0
    assert (await memory_store.production_lines.get(created.id)).completed == 968
