from .client_repository import SQLAlchemyClientRepository
from .dashboard_repository import SQLAlchemyDashboardRepository
from .distribution_repository import SQLAlchemyDistributionRepository
from .donation_repository import SQLAlchemyDonationRepository
from .donor_repository import SQLAlchemyDonorRepository
from .life_member_repository import SQLAlchemyLifeMemberRepository
from .medical_donation_repository import SQLAlchemyMedicalDonationRepository

__all__ = [
    "SQLAlchemyClientRepository",
    "SQLAlchemyDashboardRepository",
    "SQLAlchemyDistributionRepository",
    "SQLAlchemyDonationRepository",
    "SQLAlchemyDonorRepository",
    "SQLAlchemyLifeMemberRepository",
    "SQLAlchemyMedicalDonationRepository",
]
