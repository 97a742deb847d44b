"""MemberService against a real SQLite database through SQLAlchemyUnitOfWork."""

from datetime import date

import pytest
from sqlalchemy import func, select

from app.application.schemas import LifeMemberCreate, LifeMemberUpdate
from app.application.services import MemberService
from app.domain.entities import ActivityStatus, Donor
from app.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from app.infrastructure.database.models import DonorModel, LifeMemberModel
from app.infrastructure.database.repositories import (
    SQLAlchemyDonorRepository,
    SQLAlchemyLifeMemberRepository,
)


def _member(**overrides) -> LifeMemberCreate:
    values = dict(
        name="Asha Menon",
        email="asha@example.org",
        phone="9876543210",
        aadhar_number="123456789012",
        join_date=date(2024, 1, 15),
    )
    values.update(overrides)
    return LifeMemberCreate(**values)


async def _count(session_factory, model) -> int:
    async with session_factory() as session:
        return (await session.execute(select(func.count()).select_from(model))).scalar_one()


@pytest.fixture
def service(uow_factory) -> MemberService:
    return MemberService(uow_factory)


@pytest.mark.asyncio
async def test_create_writes_both_rows(service: MemberService, session_factory):
    created = await service.create_member(_member())

    profile = await service.get_member(created.member_id)
    assert profile.donor_id == created.donor_id
    assert profile.name == "Asha Menon"
    assert profile.aadhar_number == "123456789012"
    assert profile.membership_status is ActivityStatus.ACTIVE
    assert await _count(session_factory, DonorModel) == 1
    assert await _count(session_factory, LifeMemberModel) == 1


@pytest.mark.asyncio
async def test_unique_violation_rolls_back_donor_insert(
    service: MemberService, session_factory, monkeypatch
):
    await service.create_member(_member())

    async def _never_in_use(self, aadhar_number):
        return False

    monkeypatch.setattr(SQLAlchemyLifeMemberRepository, "aadhar_in_use", _never_in_use)

    with pytest.raises(DuplicateEntityError, match="Member with this Aadhar number already exists"):
        await service.create_member(_member(name="Second", email="second@example.org"))

    assert await _count(session_factory, DonorModel) == 1
    assert await _count(session_factory, LifeMemberModel) == 1


@pytest.mark.asyncio
async def test_update_issues_single_minimal_statement(
    service: MemberService, captured_sql
):
    created = await service.create_member(_member())
    captured_sql.clear()

    profile = await service.update_member(created.member_id, LifeMemberUpdate(phone="9123456780"))

    updates = [s for s in captured_sql if s.lstrip().upper().startswith("UPDATE")]
    assert len(updates) == 1
    assert updates[0].lstrip().startswith("UPDATE donors SET")
    assert "phone" in updates[0]
    assert "name" not in updates[0]
    assert profile.phone == "9123456780"
    assert profile.email == "asha@example.org"


@pytest.mark.asyncio
async def test_update_both_sides(service: MemberService):
    created = await service.create_member(_member())

    profile = await service.update_member(
        created.member_id,
        LifeMemberUpdate(address="7 Lake Road", membership_status="Inactive"),
    )

    assert profile.address == "7 Lake Road"
    assert profile.membership_status is ActivityStatus.INACTIVE
    assert profile.donor_status is ActivityStatus.ACTIVE


@pytest.mark.asyncio
async def test_email_taken_by_another_donor(service: MemberService):
    await service.create_member(_member())
    second = await service.create_member(
        _member(name="Second", email="second@example.org", aadhar_number=None)
    )

    with pytest.raises(DuplicateEntityError, match="Member with this email already exists"):
        await service.update_member(second.member_id, LifeMemberUpdate(email="asha@example.org"))

    profile = await service.get_member(second.member_id)
    assert profile.email == "second@example.org"


@pytest.mark.asyncio
async def test_deactivate_flips_both_statuses(service: MemberService):
    created = await service.create_member(_member())

    profile = await service.deactivate_member(created.member_id)

    assert profile.donor_status is ActivityStatus.INACTIVE
    assert profile.membership_status is ActivityStatus.INACTIVE


@pytest.mark.asyncio
async def test_delete_cascades_membership(service: MemberService, session_factory):
    created = await service.create_member(_member())

    await service.delete_member(created.member_id)

    assert await _count(session_factory, DonorModel) == 0
    assert await _count(session_factory, LifeMemberModel) == 0
    with pytest.raises(EntityNotFoundError):
        await service.get_member(created.member_id)


@pytest.mark.asyncio
async def test_list_filters_and_search(service: MemberService):
    first = await service.create_member(_member())
    await service.create_member(
        _member(name="Babu Raj", email="babu@example.org", aadhar_number=None, join_date=date(2024, 3, 1))
    )
    await service.deactivate_member(first.member_id)

    active = await service.list_members(status="Active")
    assert [m.name for m in active] == ["Babu Raj"]

    everyone = await service.list_members(status="All")
    assert [m.name for m in everyone] == ["Babu Raj", "Asha Menon"]

    assert [m.name for m in await service.list_members(search="asha@")] == ["Asha Menon"]
    assert [
        m.name for m in await service.list_members(start_date=date(2024, 2, 1))
    ] == ["Babu Raj"]


@pytest.mark.asyncio
async def test_email_uniqueness_ignores_case(service: MemberService, session_factory):
    await service.create_member(_member(email="a@x.com", aadhar_number=None))

    with pytest.raises(DuplicateEntityError, match="Member with this email already exists"):
        await service.create_member(_member(name="Shouty", email="A@X.com", aadhar_number=None))

    assert await _count(session_factory, DonorModel) == 1


@pytest.mark.asyncio
async def test_storage_index_rejects_email_differing_only_in_case(session_factory):
    async with session_factory() as session:
        donors = SQLAlchemyDonorRepository(session)
        await donors.create(Donor(name="First", email="a@x.com"))
        await session.commit()

        with pytest.raises(DuplicateEntityError, match="Member with this email already exists"):
            await donors.create(Donor(name="Second", email="A@X.com"))
