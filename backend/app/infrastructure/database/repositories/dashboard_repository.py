"""Read-only SQLAlchemy queries behind the dashboard."""

from datetime import date, datetime, time, timezone

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import DashboardRepository
from app.domain.entities import (
    ActivityStatus,
    ClientStatus,
    Donation,
    DonationStatus,
    MedicalDonation,
)
from app.infrastructure.database.models import (
    ClientModel,
    DonationModel,
    LifeMemberModel,
    MedicalDonationModel,
)
from app.infrastructure.database.repositories.donation_repository import (
    donation_with_donor,
    to_donation,
)
from app.infrastructure.database.repositories.medical_donation_repository import (
    medical_donation_with_donor,
    to_medical_donation,
)


class SQLAlchemyDashboardRepository(DashboardRepository):

    def __init__(self, session: AsyncSession):
        self._session = session

    async def _scalar(self, stmt) -> int | float:
        return (await self._session.execute(stmt)).scalar_one()

    async def completed_donation_total(
        self, start: date | None = None, end: date | None = None
    ) -> float:
        stmt = select(func.coalesce(func.sum(DonationModel.amount), 0)).where(
            DonationModel.status == DonationStatus.COMPLETED.value
        )
        if start is not None:
            stmt = stmt.where(DonationModel.date >= start)
        if end is not None:
            stmt = stmt.where(DonationModel.date < end)
        return float(await self._scalar(stmt))

    async def medical_donation_count(self) -> int:
        return int(await self._scalar(select(func.count(MedicalDonationModel.id))))

    async def life_member_count(self, *, joined_since: date | None = None) -> int:
        stmt = select(func.count(LifeMemberModel.id))
        if joined_since is None:
            stmt = stmt.where(LifeMemberModel.membership_status == ActivityStatus.ACTIVE.value)
        else:
            stmt = stmt.where(LifeMemberModel.join_date >= joined_since)
        return int(await self._scalar(stmt))

    async def active_client_count(self, *, created_since: date | None = None) -> int:
        stmt = select(func.count(ClientModel.id)).where(
            ClientModel.status == ClientStatus.ACTIVE.value
        )
        if created_since is not None:
            since = datetime.combine(created_since, time.min, tzinfo=timezone.utc)
            stmt = stmt.where(ClientModel.created_at >= since)
        return int(await self._scalar(stmt))

    async def recent_donations(self, limit: int) -> list[Donation]:
        stmt = (
            donation_with_donor()
            .where(DonationModel.status == DonationStatus.COMPLETED.value)
            .order_by(DonationModel.created_at.desc())
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [to_donation(*row) for row in result.all()]

    async def recent_medical_donations(self, limit: int) -> list[MedicalDonation]:
        stmt = (
            medical_donation_with_donor()
            .order_by(MedicalDonationModel.created_at.desc())
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [to_medical_donation(*row) for row in result.all()]
