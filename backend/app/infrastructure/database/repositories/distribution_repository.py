"""Concrete repository implementation for Distribution backed by SQLAlchemy."""

from datetime import date
from typing import Any

from sqlalchemy import Select, case, delete, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import DistributionRepository
from app.domain.entities import (
    AssistanceType,
    Distribution,
    DistributionStats,
    DistributionStatus,
)
from app.infrastructure.database.models import ClientModel, DistributionModel
from app.infrastructure.database.repositories._partial_update import apply_partial_update


def _distribution_with_client() -> Select:
    return select(
        DistributionModel,
        ClientModel.name,
        ClientModel.phone,
        ClientModel.city,
        ClientModel.state,
    ).join(ClientModel, DistributionModel.client_id == ClientModel.id)


def _to_entity(model: DistributionModel, name=None, phone=None, city=None, state=None) -> Distribution:
    return Distribution(
        id=model.id,
        client_id=model.client_id,
        assistance_type=AssistanceType(model.assistance_type),
        amount=model.amount,
        quantity=model.quantity,
        unit=model.unit,
        description=model.description,
        assistance_date=model.assistance_date,
        status=DistributionStatus(model.status),
        client_name=name,
        client_phone=phone,
        client_city=city,
        client_state=state,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


class SQLAlchemyDistributionRepository(DistributionRepository):
    """Implements the DistributionRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, distribution_id: int) -> Distribution | None:
        stmt = _distribution_with_client().where(DistributionModel.id == distribution_id)
        row = (await self._session.execute(stmt)).first()
        return _to_entity(*row) if row else None

    async def get_all(
        self,
        *,
        client_id: int | None = None,
        assistance_type: str | None = None,
        status: str | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
        search: str | None = None,
    ) -> list[Distribution]:
        stmt = _distribution_with_client()

        if client_id is not None:
            stmt = stmt.where(DistributionModel.client_id == client_id)
        if assistance_type:
            stmt = stmt.where(DistributionModel.assistance_type == assistance_type)
        if status:
            stmt = stmt.where(DistributionModel.status == status)
        if start_date is not None:
            stmt = stmt.where(DistributionModel.assistance_date >= start_date)
        if end_date is not None:
            stmt = stmt.where(DistributionModel.assistance_date <= end_date)
        if search:
            pattern = f"%{search}%"
            stmt = stmt.where(
                or_(
                    ClientModel.name.ilike(pattern),
                    ClientModel.phone.ilike(pattern),
                    DistributionModel.description.ilike(pattern),
                )
            )

        stmt = stmt.order_by(
            DistributionModel.assistance_date.desc(),
            DistributionModel.created_at.desc(),
        )
        result = await self._session.execute(stmt)
        return [_to_entity(*row) for row in result.all()]

    async def create(self, distribution: Distribution) -> Distribution:
        model = DistributionModel(
            client_id=distribution.client_id,
            assistance_type=distribution.assistance_type.value,
            amount=distribution.amount,
            quantity=distribution.quantity,
            unit=distribution.unit,
            description=distribution.description,
            assistance_date=distribution.assistance_date,
            status=distribution.status.value,
            created_at=distribution.created_at,
            updated_at=distribution.updated_at,
        )
        self._session.add(model)
        await self._session.flush()
        return _to_entity(model)

    async def update_fields(self, distribution_id: int, changes: dict[str, Any]) -> bool:
        return await apply_partial_update(self._session, DistributionModel, distribution_id, changes)

    async def delete(self, distribution_id: int) -> bool:
        result = await self._session.execute(
            delete(DistributionModel).where(DistributionModel.id == distribution_id)
        )
        return result.rowcount > 0

    async def get_stats(self) -> DistributionStats:
        d = DistributionModel
        provided = d.status == DistributionStatus.PROVIDED.value

        def provided_sum(kind: AssistanceType, column):
            return func.coalesce(
                func.sum(case((provided & (d.assistance_type == kind.value), column), else_=0)), 0
            )

        def count_status(status: DistributionStatus):
            return func.coalesce(func.sum(case((d.status == status.value, 1), else_=0)), 0)

        stmt = select(
            func.count(d.id),
            count_status(DistributionStatus.PROVIDED),
            count_status(DistributionStatus.PENDING),
            count_status(DistributionStatus.CANCELLED),
            provided_sum(AssistanceType.MONEY, d.amount),
            provided_sum(AssistanceType.MEDICINE, d.quantity),
            provided_sum(AssistanceType.EQUIPMENT, d.quantity),
        )
        total, provided_n, pending_n, cancelled_n, money, medicine, equipment = (
            await self._session.execute(stmt)
        ).one()
        return DistributionStats(
            total_distributions=int(total),
            provided_count=int(provided_n),
            pending_count=int(pending_n),
            cancelled_count=int(cancelled_n),
            total_money_distributed=float(money),
            total_medicine_distributed=int(medicine),
            total_equipment_distributed=int(equipment),
        )
