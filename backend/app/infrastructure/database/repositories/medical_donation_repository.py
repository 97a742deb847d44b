"""Concrete repository implementation for medical donations backed by SQLAlchemy."""

from datetime import date
from typing import Any

from sqlalchemy import Select, case, delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import MedicalDonationRepository
from app.domain.entities import (
    MedicalCategory,
    MedicalDonation,
    MedicalDonationStats,
    MedicalDonationStatus,
)
from app.infrastructure.database.models import DonorModel, MedicalDonationModel
from app.infrastructure.database.repositories._partial_update import apply_partial_update

_OPEN_STATUSES = (MedicalDonationStatus.PENDING.value, MedicalDonationStatus.APPROVED.value)


def medical_donation_with_donor() -> Select:
    return select(
        MedicalDonationModel,
        DonorModel.name,
        DonorModel.email,
        DonorModel.phone,
    ).join(DonorModel, MedicalDonationModel.donor_id == DonorModel.id)


def to_medical_donation(model: MedicalDonationModel, name=None, email=None, phone=None) -> MedicalDonation:
    return MedicalDonation(
        id=model.id,
        donor_id=model.donor_id,
        item_name=model.item_name,
        category=MedicalCategory(model.category),
        strength=model.strength,
        quantity=model.quantity,
        expiry_date=model.expiry_date,
        status=MedicalDonationStatus(model.status),
        donation_date=model.donation_date,
        donor_name=name,
        donor_email=email,
        donor_phone=phone,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def _count_where(condition) -> Any:
    return func.coalesce(func.sum(case((condition, 1), else_=0)), 0)


class SQLAlchemyMedicalDonationRepository(MedicalDonationRepository):
    """Implements the MedicalDonationRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def _fetch(self, stmt: Select) -> list[MedicalDonation]:
        result = await self._session.execute(stmt)
        return [to_medical_donation(*row) for row in result.all()]

    async def get_by_id(self, donation_id: int) -> MedicalDonation | None:
        stmt = medical_donation_with_donor().where(MedicalDonationModel.id == donation_id)
        row = (await self._session.execute(stmt)).first()
        return to_medical_donation(*row) if row else None

    async def get_all(
        self,
        *,
        donor_id: int | None = None,
        status: str | None = None,
    ) -> list[MedicalDonation]:
        stmt = medical_donation_with_donor()
        if donor_id is not None:
            stmt = stmt.where(MedicalDonationModel.donor_id == donor_id)
        if status:
            stmt = stmt.where(MedicalDonationModel.status == status)
        stmt = stmt.order_by(
            MedicalDonationModel.donation_date.desc(),
            MedicalDonationModel.created_at.desc(),
        )
        return await self._fetch(stmt)

    async def get_expiring(self, today: date, until: date) -> list[MedicalDonation]:
        stmt = (
            medical_donation_with_donor()
            .where(
                MedicalDonationModel.expiry_date.is_not(None),
                MedicalDonationModel.expiry_date.between(today, until),
                MedicalDonationModel.status.in_(_OPEN_STATUSES),
            )
            .order_by(MedicalDonationModel.expiry_date.asc())
        )
        return await self._fetch(stmt)

    async def get_expired(self, today: date) -> list[MedicalDonation]:
        stmt = (
            medical_donation_with_donor()
            .where(
                MedicalDonationModel.expiry_date.is_not(None),
                MedicalDonationModel.expiry_date < today,
                MedicalDonationModel.status.in_(_OPEN_STATUSES),
            )
            .order_by(MedicalDonationModel.expiry_date.desc())
        )
        return await self._fetch(stmt)

    async def create(self, donation: MedicalDonation) -> MedicalDonation:
        model = MedicalDonationModel(
            donor_id=donation.donor_id,
            item_name=donation.item_name,
            category=donation.category.value,
            strength=donation.strength,
            quantity=donation.quantity,
            expiry_date=donation.expiry_date,
            status=donation.status.value,
            donation_date=donation.donation_date,
            created_at=donation.created_at,
            updated_at=donation.updated_at,
        )
        self._session.add(model)
        await self._session.flush()
        return to_medical_donation(model)

    async def update_fields(self, donation_id: int, changes: dict[str, Any]) -> bool:
        return await apply_partial_update(self._session, MedicalDonationModel, donation_id, changes)

    async def delete(self, donation_id: int) -> bool:
        result = await self._session.execute(
            delete(MedicalDonationModel).where(MedicalDonationModel.id == donation_id)
        )
        return result.rowcount > 0

    async def get_stats(self, today: date, expiring_until: date) -> MedicalDonationStats:
        m = MedicalDonationModel
        stmt = select(
            func.count(m.id),
            func.coalesce(func.sum(m.quantity), 0),
            func.count(func.distinct(m.donor_id)),
            _count_where(m.status == MedicalDonationStatus.PENDING.value),
            _count_where(m.status == MedicalDonationStatus.APPROVED.value),
            _count_where(m.status == MedicalDonationStatus.COLLECTED.value),
            _count_where(m.status == MedicalDonationStatus.REJECTED.value),
            _count_where(m.expiry_date < today),
            _count_where(m.expiry_date.between(today, expiring_until)),
        )
        row = (await self._session.execute(stmt)).one()
        return MedicalDonationStats(*(int(value) for value in row))
