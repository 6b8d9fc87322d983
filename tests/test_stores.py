import threading
from types import SimpleNamespace

import pytest

from stays.core.exceptions import PersistenceError
from stays.services.supabase_service import SupabaseStore


def _property(**overrides):
    row = {
        "title": "Camp",
        "slug": "camp",
        "description": "D",
        "category": "camping",
        "location": "L",
        "price": 100,
        "price_note": "",
        "capacity": 2,
        "max_capacity": 4,
        "rating": 4.0,
        "is_top_selling": False,
        "is_active": True,
        "check_in_time": "2:00 PM",
        "check_out_time": "11:00 AM",
        "contact": "",
        "address": "",
        "amenities": ["Tent"],
        "highlights": [],
        "activities": [],
        "policies": [],
    }
    row.update(overrides)
    return row


# ── SqlStore ───────────────────────────────────────────────────────────────────

async def test_sql_insert_returns_generated_columns(sql_store):
    inserted = await sql_store.insert("properties", [_property()])

    assert len(inserted) == 1
    assert inserted[0]["id"]
    assert inserted[0]["created_at"] is not None
    assert inserted[0]["amenities"] == ["Tent"]


async def test_sql_select_filters_orders_and_projects(sql_store):
    [camp] = await sql_store.insert("properties", [_property()])
    await sql_store.insert("property_images", [
        {"property_id": camp["id"], "image_url": "b", "display_order": 1},
        {"property_id": camp["id"], "image_url": "a", "display_order": 0},
    ])

    rows = await sql_store.select(
        "property_images",
        columns="image_url, display_order",
        filters={"property_id": camp["id"]},
        order_by="display_order",
    )

    assert rows == [
        {"image_url": "a", "display_order": 0},
        {"image_url": "b", "display_order": 1},
    ]


async def test_sql_update_and_delete(sql_store):
    [camp] = await sql_store.insert("properties", [_property()])

    await sql_store.update("properties", {"is_active": False}, {"id": camp["id"]})
    [row] = await sql_store.select("properties", filters={"id": camp["id"]})
    assert row["is_active"] is False
    assert row["title"] == "Camp"

    await sql_store.delete("properties", {"id": camp["id"]})
    assert await sql_store.select("properties") == []


async def test_sql_unique_slug(sql_store):
    await sql_store.insert("properties", [_property()])
    with pytest.raises(PersistenceError) as exc_info:
        await sql_store.insert("properties", [_property(title="Other")])
    assert exc_info.value.table == "properties"
    assert exc_info.value.operation == "insert"


async def test_sql_unknown_table_and_column(sql_store):
    with pytest.raises(PersistenceError):
        await sql_store.select("bookings")
    with pytest.raises(PersistenceError):
        await sql_store.select("properties", filters={"nope": 1})


async def test_sql_replace_is_atomic(sql_store):
    [camp] = await sql_store.insert("properties", [_property()])
    await sql_store.insert("property_images", [
        {"property_id": camp["id"], "image_url": "old", "display_order": 0},
    ])

    with pytest.raises(PersistenceError):
        await sql_store.replace("property_images", {"property_id": camp["id"]}, [
            {"property_id": camp["id"], "image_url": "new", "display_order": 0},
            {"property_id": camp["id"], "image_url": None, "display_order": 1},
        ])

    rows = await sql_store.select("property_images", columns="image_url")
    assert rows == [{"image_url": "old"}]

    await sql_store.replace("property_images", {"property_id": camp["id"]}, [
        {"property_id": camp["id"], "image_url": "new", "display_order": 0},
    ])
    rows = await sql_store.select("property_images", columns="image_url")
    assert rows == [{"image_url": "new"}]


# ── SupabaseStore ──────────────────────────────────────────────────────────────

class FakeQuery:
    def __init__(self, log, data=None, error=None):
        self.log = log
        self.data = data
        self.error = error

    def __getattr__(self, name):
        def record(*args, **kwargs):
            self.log.append((name, args, kwargs))
            return self
        return record

    def execute(self):
        if self.error is not None:
            raise self.error
        return SimpleNamespace(data=self.data)


class FakeClient:
    def __init__(self, data=None, error=None):
        self.log = []
        self.data = data
        self.error = error

    def table(self, name):
        self.log.append(("table", (name,), {}))
        return FakeQuery(self.log, self.data, self.error)


async def test_supabase_select_builds_query():
    client = FakeClient(data=[{"id": "p1"}])
    store = SupabaseStore(client)

    rows = await store.select(
        "properties", columns="id, title", filters={"is_active": True}, order_by="created_at", descending=True
    )

    assert rows == [{"id": "p1"}]
    assert client.log == [
        ("table", ("properties",), {}),
        ("select", ("id, title",), {}),
        ("eq", ("is_active", True), {}),
        ("order", ("created_at",), {"desc": True}),
    ]


async def test_supabase_delete_filters_by_column():
    client = FakeClient(data=[])
    await SupabaseStore(client).delete("property_images", {"property_id": "p1"})

    assert ("delete", (), {}) in client.log
    assert ("eq", ("property_id", "p1"), {}) in client.log


async def test_supabase_error_becomes_persistence_error():
    class APIError(Exception):
        def __init__(self, message):
            super().__init__(message)
            self.message = message

    client = FakeClient(error=APIError('duplicate key value violates unique constraint "properties_slug_key"'))

    with pytest.raises(PersistenceError) as exc_info:
        await SupabaseStore(client).insert("properties", [{"title": "x"}])

    assert "duplicate key" in exc_info.value.message
    assert exc_info.value.operation == "insert"


async def test_supabase_store_is_not_transactional():
    store = SupabaseStore(FakeClient())
    assert store.supports_transactions is False
    with pytest.raises(NotImplementedError):
        await store.replace("property_images", {"property_id": "p1"}, [])


# ── Blocking calls stay off the event loop ─────────────────────────────────────

async def test_supabase_queries_run_in_threadpool():
    loop_thread = threading.get_ident()
    seen = []

    class ThreadRecordingQuery(FakeQuery):
        def execute(self):
            seen.append(threading.get_ident())
            return super().execute()

    client = FakeClient(data=[])
    client.table = lambda name: ThreadRecordingQuery(client.log, [])

    await SupabaseStore(client).select("properties")

    assert seen and loop_thread not in seen


async def test_sql_store_runs_in_threadpool(sql_store, monkeypatch):
    loop_thread = threading.get_ident()
    seen = []
    run = sql_store._run

    def recording_run(*args):
        seen.append(threading.get_ident())
        return run(*args)

    monkeypatch.setattr(sql_store, "_run", recording_run)

    await sql_store.insert("properties", [_property()])
    await sql_store.select("properties")

    assert len(seen) == 2
    assert loop_thread not in seen
