"""Concrete repository implementation for LifeMember backed by SQLAlchemy."""

from datetime import date
from typing import Any

from sqlalchemy import Select, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import LifeMemberRepository
from app.domain.entities import ActivityStatus, LifeMember, LifeMemberProfile
from app.domain.exceptions import DuplicateEntityError
from app.infrastructure.database.models import DonorModel, LifeMemberModel
from app.infrastructure.database.repositories._partial_update import apply_partial_update


class SQLAlchemyLifeMemberRepository(LifeMemberRepository):
    """Implements the LifeMemberRepository port using SQLAlchemy async sessions.

    Profile reads join each membership row with its donor row.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    @staticmethod
    def _profile_query() -> Select:
        return select(LifeMemberModel, DonorModel).join(
            DonorModel, LifeMemberModel.donor_id == DonorModel.id
        )

    @staticmethod
    def _to_profile(member: LifeMemberModel, donor: DonorModel) -> LifeMemberProfile:
        return LifeMemberProfile(
            id=member.id,
            donor_id=donor.id,
            name=donor.name,
            email=donor.email,
            phone=donor.phone,
            address=donor.address,
            donor_status=ActivityStatus(donor.status),
            aadhar_number=member.aadhar_number,
            join_date=member.join_date,
            join_time=member.join_time,
            membership_status=ActivityStatus(member.membership_status),
            created_at=member.created_at,
            updated_at=member.updated_at,
        )

    def _to_entity(self, model: LifeMemberModel) -> LifeMember:
        return LifeMember(
            id=model.id,
            donor_id=model.donor_id,
            aadhar_number=model.aadhar_number,
            join_date=model.join_date,
            join_time=model.join_time,
            membership_status=ActivityStatus(model.membership_status),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    async def get_profile(self, member_id: int) -> LifeMemberProfile | None:
        stmt = self._profile_query().where(LifeMemberModel.id == member_id)
        row = (await self._session.execute(stmt)).first()
        return self._to_profile(*row) if row else None

    async def list_profiles(
        self,
        *,
        search: str | None = None,
        status: str | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[LifeMemberProfile]:
        stmt = self._profile_query()

        if search:
            pattern = f"%{search}%"
            stmt = stmt.where(or_(DonorModel.name.ilike(pattern), DonorModel.email.ilike(pattern)))
        if status:
            stmt = stmt.where(LifeMemberModel.membership_status == status)
        if start_date is not None:
            stmt = stmt.where(LifeMemberModel.join_date >= start_date)
        if end_date is not None:
            stmt = stmt.where(LifeMemberModel.join_date <= end_date)

        stmt = stmt.order_by(LifeMemberModel.join_date.desc(), LifeMemberModel.created_at.desc())
        result = await self._session.execute(stmt)
        return [self._to_profile(member, donor) for member, donor in result.all()]

    async def resolve_donor_id(self, member_id: int) -> int | None:
        stmt = select(LifeMemberModel.donor_id).where(LifeMemberModel.id == member_id)
        return (await self._session.execute(stmt)).scalar_one_or_none()

    async def aadhar_in_use(self, aadhar_number: str) -> bool:
        stmt = select(LifeMemberModel.id).where(LifeMemberModel.aadhar_number == aadhar_number)
        result = await self._session.execute(stmt.limit(1))
        return result.first() is not None

    async def create(self, member: LifeMember) -> LifeMember:
        model = LifeMemberModel(
            donor_id=member.donor_id,
            aadhar_number=member.aadhar_number,
            join_date=member.join_date,
            join_time=member.join_time,
            membership_status=member.membership_status.value,
            created_at=member.created_at,
            updated_at=member.updated_at,
        )
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            if "aadhar" in str(exc.orig).lower():
                raise DuplicateEntityError("Member", "Aadhar number", member.aadhar_number) from exc
            raise
        return self._to_entity(model)

    async def update_fields(self, member_id: int, changes: dict[str, Any]) -> bool:
        return await apply_partial_update(self._session, LifeMemberModel, member_id, changes)
