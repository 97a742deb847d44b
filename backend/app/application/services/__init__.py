from .client_service import ClientService
from .dashboard_service import DashboardService
from .distribution_service import DistributionService
from .donation_service import DonationService
from .medical_donation_service import MedicalDonationService
from .member_service import MemberService

__all__ = [
    "ClientService",
    "DashboardService",
    "DistributionService",
    "DonationService",
    "MedicalDonationService",
    "MemberService",
]
