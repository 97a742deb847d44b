from .common import ApiResponse, ErrorResponse
from .member import (
    LifeMemberCreate,
    LifeMemberUpdate,
    LifeMemberResponse,
    MemberCreatedResponse,
)
from .client import ClientCreate, ClientUpdate, ClientResponse
from .donation import (
    DonationCreate,
    DonationUpdate,
    DonationResponse,
    DonationStatsResponse,
)
from .medical_donation import (
    MedicalDonationCreate,
    MedicalDonationUpdate,
    MedicalDonationResponse,
    MedicalDonationStatsResponse,
    StatusUpdate,
)
from .distribution import (
    DistributionCreate,
    DistributionUpdate,
    DistributionResponse,
    DistributionStatsResponse,
)
from .dashboard import DashboardResponse, DonationTotals, MemberTotals, ClientTotals

__all__ = [
    "ApiResponse",
    "ErrorResponse",
    "LifeMemberCreate",
    "LifeMemberUpdate",
    "LifeMemberResponse",
    "MemberCreatedResponse",
    "ClientCreate",
    "ClientUpdate",
    "ClientResponse",
    "DonationCreate",
    "DonationUpdate",
    "DonationResponse",
    "DonationStatsResponse",
    "MedicalDonationCreate",
    "MedicalDonationUpdate",
    "MedicalDonationResponse",
    "MedicalDonationStatsResponse",
    "StatusUpdate",
    "DistributionCreate",
    "DistributionUpdate",
    "DistributionResponse",
    "DistributionStatsResponse",
    "DashboardResponse",
    "DonationTotals",
    "MemberTotals",
    "ClientTotals",
]
