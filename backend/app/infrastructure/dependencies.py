"""FastAPI dependency injection: wires repositories and units of work into services."""

from collections.abc import AsyncGenerator
from functools import partial

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import UnitOfWorkFactory
from app.application.services import (
    ClientService,
    DashboardService,
    DistributionService,
    DonationService,
    MedicalDonationService,
    MemberService,
)
from app.infrastructure.database.session import async_session_factory, get_db_session
from app.infrastructure.database.repositories import (
    SQLAlchemyClientRepository,
    SQLAlchemyDashboardRepository,
    SQLAlchemyDistributionRepository,
    SQLAlchemyDonationRepository,
    SQLAlchemyDonorRepository,
    SQLAlchemyMedicalDonationRepository,
)
from app.infrastructure.database.unit_of_work import SQLAlchemyUnitOfWork


def get_unit_of_work_factory() -> UnitOfWorkFactory:
    """Each call of the returned factory checks out its own session."""
    return partial(SQLAlchemyUnitOfWork, async_session_factory)


async def get_member_service(
    uow_factory: UnitOfWorkFactory = Depends(get_unit_of_work_factory),
) -> AsyncGenerator[MemberService, None]:
    """Provides a MemberService; every composite write runs in its own unit of work."""
    yield MemberService(uow_factory)


async def get_client_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ClientService, None]:
    """Provides a ClientService instance with its repository wired up."""
    repository = SQLAlchemyClientRepository(session)
    yield ClientService(repository)


async def get_donation_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[DonationService, None]:
    """Provides a DonationService; donor lookups share the request session."""
    yield DonationService(
        SQLAlchemyDonationRepository(session),
        SQLAlchemyDonorRepository(session),
    )


async def get_medical_donation_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[MedicalDonationService, None]:
    yield MedicalDonationService(
        SQLAlchemyMedicalDonationRepository(session),
        SQLAlchemyDonorRepository(session),
    )


async def get_distribution_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[DistributionService, None]:
    yield DistributionService(
        SQLAlchemyDistributionRepository(session),
        SQLAlchemyClientRepository(session),
    )


async def get_dashboard_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[DashboardService, None]:
    yield DashboardService(SQLAlchemyDashboardRepository(session))
