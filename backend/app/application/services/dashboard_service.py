"""Application service for the landing dashboard figures."""

from datetime import date, timedelta

from app.application.interfaces import DashboardRepository
from app.application.services.donation_service import month_bounds
from app.domain.entities import DashboardSummary

RECENT_DONATIONS = 5
RECENT_MEDICAL_DONATIONS = 3


class DashboardService:

    def __init__(self, repository: DashboardRepository):
        self._repository = repository

    async def get_summary(self, today: date | None = None) -> DashboardSummary:
        today = today or date.today()
        month_start, next_month = month_bounds(today.month, today.year)
        last_month_start = (month_start - timedelta(days=1)).replace(day=1)

        repo = self._repository
        return DashboardSummary(
            total_donation_amount=await repo.completed_donation_total(),
            current_month_amount=await repo.completed_donation_total(month_start, next_month),
            last_month_amount=await repo.completed_donation_total(last_month_start, month_start),
            medical_donation_count=await repo.medical_donation_count(),
            life_member_count=await repo.life_member_count(),
            new_members_this_month=await repo.life_member_count(joined_since=month_start),
            active_client_count=await repo.active_client_count(),
            new_clients_this_week=await repo.active_client_count(
                created_since=today - timedelta(days=7)
            ),
            recent_donations=await repo.recent_donations(RECENT_DONATIONS),
            recent_medical_donations=await repo.recent_medical_donations(RECENT_MEDICAL_DONATIONS),
        )
