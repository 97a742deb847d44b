"""Dashboard summary endpoint."""

from fastapi import APIRouter, Depends

from app.application.schemas import (
    ApiResponse,
    ClientTotals,
    DashboardResponse,
    DonationResponse,
    DonationTotals,
    MedicalDonationResponse,
    MemberTotals,
)
from app.application.services import DashboardService
from app.infrastructure.dependencies import get_dashboard_service

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("", response_model=ApiResponse[DashboardResponse])
async def dashboard_summary(
    service: DashboardService = Depends(get_dashboard_service),
) -> ApiResponse[DashboardResponse]:
    summary = await service.get_summary()
    return ApiResponse(
        data=DashboardResponse(
            total_donations=DonationTotals(
                amount=summary.total_donation_amount,
                percentage_change=summary.donation_change_percent,
            ),
            medical_donation_count=summary.medical_donation_count,
            life_members=MemberTotals(
                total=summary.life_member_count,
                new_this_month=summary.new_members_this_month,
            ),
            active_clients=ClientTotals(
                total=summary.active_client_count,
                new_this_week=summary.new_clients_this_week,
            ),
            recent_donations=[
                DonationResponse.model_validate(d, from_attributes=True)
                for d in summary.recent_donations
            ],
            recent_medical_donations=[
                MedicalDonationResponse.model_validate(d, from_attributes=True)
                for d in summary.recent_medical_donations
            ],
        )
    )
