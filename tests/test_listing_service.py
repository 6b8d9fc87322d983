import pytest

from stays.core.exceptions import NotFoundError, PersistenceError
from stays.services.listing_service import ListingService


async def _seed(sync_service, make_form, titles, **overrides):
    ids = []
    for title in titles:
        ids.append(await sync_service.save(make_form(title=title, **overrides), [f"{title}.jpg"]))
    return ids


async def test_list_is_newest_first(listing_service, sync_service, make_form):
    await _seed(sync_service, make_form, ["First Camp", "Second Camp", "Third Camp"])

    summaries = await listing_service.list()

    assert [s.title for s in summaries] == ["Third Camp", "Second Camp", "First Camp"]
    assert summaries[0].slug == "third-camp"


async def test_list_empty(listing_service):
    assert await listing_service.list() == []


async def test_list_projects_summary_columns(listing_service, sync_service, make_form):
    await _seed(sync_service, make_form, ["Only Camp"])
    summary = (await listing_service.list())[0]
    assert set(summary.model_dump()) == {
        "id", "title", "slug", "category", "location", "price", "is_active", "is_top_selling", "rating",
    }


async def test_set_active_changes_only_that_field(listing_service, sync_service, make_form):
    ids = await _seed(sync_service, make_form, ["Quiet Camp", "Busy Camp"], is_active=False)
    before = {s.id: s.model_dump() for s in await listing_service.list()}

    await listing_service.set_active(ids[0], True)

    after = {s.id: s.model_dump() for s in await listing_service.list()}
    assert after[ids[0]]["is_active"] is True
    changed = {key for key in before[ids[0]] if before[ids[0]][key] != after[ids[0]][key]}
    assert changed == {"is_active"}
    assert after[ids[1]] == before[ids[1]]


async def test_set_active_failure(listing_service, store):
    store.fail("update", "properties")
    with pytest.raises(PersistenceError):
        await listing_service.set_active("p1", False)


async def test_delete_removes_property_and_images(listing_service, sync_service, store, make_form):
    keep, drop = await _seed(sync_service, make_form, ["Keep Camp", "Drop Camp"])

    await listing_service.delete(drop)

    assert [row["id"] for row in store.tables["properties"]] == [keep]
    assert store.image_urls(drop) == []
    assert store.image_urls(keep) == ["Keep Camp.jpg"]


async def test_delete_failure(listing_service, store):
    store.fail("delete", "properties")
    with pytest.raises(PersistenceError):
        await listing_service.delete("p1")


async def test_public_listing_hides_inactive(listing_service, sync_service, make_form):
    visible, hidden = await _seed(sync_service, make_form, ["Open Camp", "Closed Camp"])
    await listing_service.set_active(hidden, False)

    public = await listing_service.list_public()

    assert [s.id for s in public] == [visible]


async def test_public_detail_by_slug(listing_service, sync_service, make_form):
    await sync_service.save(make_form(title="Lake Villa"), ["one.jpg", "two.jpg"])

    draft = await listing_service.get_public_by_slug("lake-villa")

    assert draft.title == "Lake Villa"
    assert draft.images == ["one.jpg", "two.jpg"]


async def test_public_detail_of_inactive_property_is_not_found(listing_service, sync_service, make_form):
    property_id = await sync_service.save(make_form(title="Lake Villa"), [])
    await listing_service.set_active(property_id, False)

    with pytest.raises(NotFoundError):
        await listing_service.get_public_by_slug("lake-villa")


async def test_sql_store_listing(sql_store, make_form):
    from stays.services.property_sync import PropertySyncService

    sync = PropertySyncService(sql_store)
    listings = ListingService(sql_store)
    property_id = await sync.save(make_form(), ["a.jpg"])

    await listings.set_active(property_id, False)
    summaries = await listings.list()
    assert [(s.id, s.is_active) for s in summaries] == [(property_id, False)]
    assert await listings.list_public() == []

    await listings.delete(property_id)
    assert await listings.list() == []
    assert await sql_store.select("property_images") == []
