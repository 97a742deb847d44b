"""Concrete repository implementation for monetary donations backed by SQLAlchemy."""

from datetime import date
from typing import Any

from sqlalchemy import Select, case, delete, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import DonationRepository
from app.domain.entities import Donation, DonationStats, DonationStatus
from app.infrastructure.database.models import DonationModel, DonorModel
from app.infrastructure.database.repositories._partial_update import apply_partial_update

_COMPLETED = DonationStatus.COMPLETED.value
_PENDING = DonationStatus.PENDING.value


def donation_with_donor() -> Select:
    """Donation rows joined with the donor columns shown alongside them."""
    return select(
        DonationModel,
        DonorModel.name,
        DonorModel.donor_type,
        DonorModel.email,
        DonorModel.phone,
    ).join(DonorModel, DonationModel.donor_id == DonorModel.id)


def to_donation(model: DonationModel, name=None, donor_type=None, email=None, phone=None) -> Donation:
    return Donation(
        id=model.id,
        donor_id=model.donor_id,
        amount=model.amount,
        date=model.date,
        payment_mode=model.payment_mode,
        purpose=model.purpose,
        status=DonationStatus(model.status),
        notes=model.notes,
        donor_name=name,
        donor_type=donor_type,
        donor_email=email,
        donor_phone=phone,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


class SQLAlchemyDonationRepository(DonationRepository):
    """Implements the DonationRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, donation_id: int) -> Donation | None:
        stmt = donation_with_donor().where(DonationModel.id == donation_id)
        row = (await self._session.execute(stmt)).first()
        return to_donation(*row) if row else None

    async def get_all(
        self,
        *,
        status: str | None = None,
        search: str | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
        donor_type: str | None = None,
        skip: int = 0,
        limit: int = 50,
    ) -> list[Donation]:
        stmt = donation_with_donor()

        if status:
            stmt = stmt.where(DonationModel.status == status)
        if search:
            pattern = f"%{search}%"
            stmt = stmt.where(or_(DonorModel.name.ilike(pattern), DonationModel.purpose.ilike(pattern)))
        if start_date is not None:
            stmt = stmt.where(DonationModel.date >= start_date)
        if end_date is not None:
            stmt = stmt.where(DonationModel.date <= end_date)
        if donor_type:
            stmt = stmt.where(DonorModel.donor_type == donor_type)

        stmt = (
            stmt.order_by(DonationModel.date.desc(), DonationModel.created_at.desc())
            .offset(skip)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [to_donation(*row) for row in result.all()]

    async def get_by_donor(self, donor_id: int) -> list[Donation]:
        stmt = (
            donation_with_donor()
            .where(DonationModel.donor_id == donor_id)
            .order_by(DonationModel.date.desc(), DonationModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [to_donation(*row) for row in result.all()]

    async def create(self, donation: Donation) -> Donation:
        model = DonationModel(
            donor_id=donation.donor_id,
            amount=donation.amount,
            date=donation.date,
            payment_mode=donation.payment_mode,
            purpose=donation.purpose,
            status=donation.status.value,
            notes=donation.notes,
            created_at=donation.created_at,
            updated_at=donation.updated_at,
        )
        self._session.add(model)
        await self._session.flush()
        return to_donation(model)

    async def update_fields(self, donation_id: int, changes: dict[str, Any]) -> bool:
        return await apply_partial_update(self._session, DonationModel, donation_id, changes)

    async def delete(self, donation_id: int) -> bool:
        result = await self._session.execute(
            delete(DonationModel).where(DonationModel.id == donation_id)
        )
        return result.rowcount > 0

    async def get_stats(self, month_start: date, month_end: date) -> DonationStats:
        completed = DonationModel.status == _COMPLETED
        in_month = completed & (DonationModel.date >= month_start) & (DonationModel.date < month_end)
        stmt = select(
            func.coalesce(func.sum(case((completed, DonationModel.amount), else_=0)), 0),
            func.count(DonationModel.id),
            func.coalesce(func.sum(case((completed, 1), else_=0)), 0),
            func.coalesce(func.sum(case((DonationModel.status == _PENDING, 1), else_=0)), 0),
            func.coalesce(func.sum(case((in_month, DonationModel.amount), else_=0)), 0),
        )
        total_amount, total_count, completed_count, pending_count, monthly = (
            await self._session.execute(stmt)
        ).one()
        return DonationStats(
            total_amount=float(total_amount),
            total_count=int(total_count),
            completed_count=int(completed_count),
            pending_count=int(pending_count),
            monthly_amount=float(monthly),
        )
