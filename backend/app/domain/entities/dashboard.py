"""Read model for the landing dashboard."""

from dataclasses import dataclass, field

from app.domain.entities.donation import Donation
from app.domain.entities.medical_donation import MedicalDonation


@dataclass
class DashboardSummary:
    total_donation_amount: float
    current_month_amount: float
    last_month_amount: float
    medical_donation_count: int
    life_member_count: int
    new_members_this_month: int
    active_client_count: int
    new_clients_this_week: int
    recent_donations: list[Donation] = field(default_factory=list)
    recent_medical_donations: list[MedicalDonation] = field(default_factory=list)

    @property
    def donation_change_percent(self) -> int:
        """Month-over-month change of completed donations, rounded."""
        if self.last_month_amount <= 0:
            return 0
        change = (self.current_month_amount - self.last_month_amount) / self.last_month_amount
        return round(change * 100)
