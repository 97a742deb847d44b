from .client_repository import ClientRepository
from .dashboard_repository import DashboardRepository
from .distribution_repository import DistributionRepository
from .donation_repository import DonationRepository
from .donor_repository import DonorRepository
from .life_member_repository import LifeMemberRepository
from .medical_donation_repository import MedicalDonationRepository
from .unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "ClientRepository",
    "DashboardRepository",
    "DistributionRepository",
    "DonationRepository",
    "DonorRepository",
    "LifeMemberRepository",
    "MedicalDonationRepository",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
