from .donor import ActivityStatus, Donor, DonorType
from .life_member import LifeMember, LifeMemberProfile, MemberCreated
from .client import Client, ClientStatus, Gender
from .donation import Donation, DonationStats, DonationStatus
from .medical_donation import (
    MedicalCategory,
    MedicalDonation,
    MedicalDonationStats,
    MedicalDonationStatus,
)
from .distribution import (
    AssistanceType,
    Distribution,
    DistributionStats,
    DistributionStatus,
)
from .dashboard import DashboardSummary

__all__ = [
    "ActivityStatus",
    "Donor",
    "DonorType",
    "LifeMember",
    "LifeMemberProfile",
    "MemberCreated",
    "Client",
    "ClientStatus",
    "Gender",
    "Donation",
    "DonationStats",
    "DonationStatus",
    "MedicalCategory",
    "MedicalDonation",
    "MedicalDonationStats",
    "MedicalDonationStatus",
    "AssistanceType",
    "Distribution",
    "DistributionStats",
    "DistributionStatus",
    "DashboardSummary",
]
