"""Concrete repository implementation for Donor backed by SQLAlchemy."""

from typing import Any

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import DonorRepository
from app.domain.entities import ActivityStatus, Donor, DonorType
from app.domain.exceptions import DuplicateEntityError
from app.infrastructure.database.models import DonorModel
from app.infrastructure.database.repositories._partial_update import apply_partial_update


def _is_email_conflict(exc: IntegrityError) -> bool:
    return "email" in str(exc.orig).lower()


class SQLAlchemyDonorRepository(DonorRepository):
    """Implements the DonorRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: DonorModel) -> Donor:
        """Map ORM model → domain entity."""
        return Donor(
            id=model.id,
            name=model.name,
            email=model.email,
            phone=model.phone,
            address=model.address,
            donor_type=DonorType(model.donor_type),
            status=ActivityStatus(model.status),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Donor) -> DonorModel:
        """Map domain entity → ORM model (for creation)."""
        return DonorModel(
            name=entity.name,
            email=entity.email,
            phone=entity.phone,
            address=entity.address,
            donor_type=entity.donor_type.value,
            status=entity.status.value,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    async def get_by_id(self, donor_id: int) -> Donor | None:
        result = await self._session.get(DonorModel, donor_id)
        return self._to_entity(result) if result else None

    async def find_by_name(self, name: str) -> Donor | None:
        stmt = (
            select(DonorModel)
            .where(func.lower(DonorModel.name) == name.lower())
            .order_by(DonorModel.id)
            .limit(1)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def email_in_use(self, email: str, *, exclude_id: int | None = None) -> bool:
        stmt = select(DonorModel.id).where(func.lower(DonorModel.email) == email.lower())
        if exclude_id is not None:
            stmt = stmt.where(DonorModel.id != exclude_id)
        result = await self._session.execute(stmt.limit(1))
        return result.first() is not None

    async def create(self, donor: Donor) -> Donor:
        model = self._to_model(donor)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            if _is_email_conflict(exc):
                raise DuplicateEntityError("Member", "email", donor.email) from exc
            raise
        return self._to_entity(model)

    async def update_fields(self, donor_id: int, changes: dict[str, Any]) -> bool:
        try:
            return await apply_partial_update(self._session, DonorModel, donor_id, changes)
        except IntegrityError as exc:
            if _is_email_conflict(exc):
                raise DuplicateEntityError("Member", "email", changes.get("email")) from exc
            raise

    async def delete(self, donor_id: int) -> bool:
        result = await self._session.execute(delete(DonorModel).where(DonorModel.id == donor_id))
        return result.rowcount > 0
