"""SqlRepository against a real SQLite store: tracking, inclusion, constraints."""

import pytest
from sqlalchemy import func

from src.domain.errors import ConstraintViolation, NotFoundError
from src.infrastructure.persistence.models.villas import Villa, VillaNumber
from src.infrastructure.persistence.repositories import get_repositories


def _villa(name="Pool View", **overrides):
    defaults = dict(name=name, rate=100.0, occupancy=2, sqft=300, amenity=["wifi"])
    defaults.update(overrides)
    return Villa(**defaults)


@pytest.fixture
def repos(session):
    return get_repositories(session)


async def test_create_assigns_identity(repos):
    villa = await repos.villas.create(_villa())
    assert villa.id == 1
    assert villa.created_at is not None


async def test_create_duplicate_name_violates_constraint(repos):
    await repos.villas.create(_villa("Pool View"))
    with pytest.raises(ConstraintViolation):
        await repos.villas.create(_villa("POOL VIEW"))
    assert len(await repos.villas.get_all()) == 1


async def test_get_with_filter_expression(repos):
    await repos.villas.create(_villa("Pool View"))
    found = await repos.villas.get(func.lower(Villa.name) == "pool view")
    assert found.name == "Pool View"


async def test_get_absent_returns_none(repos):
    assert await repos.villas.get(Villa.id == 5) is None


async def test_untracked_edits_are_not_persisted(repos, session_factory):
    created = await repos.villas.create(_villa())
    detached = await repos.villas.get(Villa.id == created.id, tracked=False)
    detached.occupancy = 99
    await repos.villas.save()

    async with session_factory() as other:
        assert (await other.get(Villa, created.id)).occupancy == 2


async def test_tracked_edits_are_persisted_on_save(repos, session_factory):
    created = await repos.villas.create(_villa())
    tracked = await repos.villas.get(Villa.id == created.id)
    tracked.occupancy = 7
    await repos.villas.save()

    async with session_factory() as other:
        assert (await other.get(Villa, created.id)).occupancy == 7


async def test_update_replaces_record_from_detached_entity(repos, session_factory):
    created = await repos.villas.create(_villa())
    await repos.villas.update(Villa(id=created.id, name="Renamed", rate=1.0, occupancy=1, sqft=1, amenity=[]))

    async with session_factory() as other:
        stored = await other.get(Villa, created.id)
    assert stored.name == "Renamed"
    assert stored.updated_at is not None


async def test_update_missing_record_raises_not_found(repos):
    with pytest.raises(NotFoundError):
        await repos.villas.update(_villa(id=42))


async def test_remove_deletes_record(repos):
    created = await repos.villas.create(_villa())
    await repos.villas.remove(created)
    assert await repos.villas.get(Villa.id == created.id) is None


async def test_remove_absent_record_raises_not_found(repos):
    with pytest.raises(NotFoundError):
        await repos.villas.remove(_villa(id=42))


async def test_include_loads_related_villa(repos, session):
    villa = await repos.villas.create(_villa())
    await repos.villa_numbers.create(VillaNumber(villa_no=101, villa_id=villa.id))
    session.expunge_all()

    number = await repos.villa_numbers.get(VillaNumber.villa_no == 101, include=("villa",))
    assert number.villa.name == "Pool View"


async def test_get_all_orders_and_pages(repos):
    for name in ("C", "A", "B"):
        await repos.villas.create(_villa(name))
    page = await repos.villas.get_all(order_by=Villa.name, page_size=2, page_number=1)
    assert [v.name for v in page] == ["A", "B"]


async def test_get_all_page_out_of_range_is_empty(repos):
    await repos.villas.create(_villa())
    assert await repos.villas.get_all(page_size=10, page_number=3) == []


async def test_villa_number_with_unknown_villa_violates_constraint(repos):
    with pytest.raises(ConstraintViolation):
        await repos.villa_numbers.create(VillaNumber(villa_no=101, villa_id=999))
