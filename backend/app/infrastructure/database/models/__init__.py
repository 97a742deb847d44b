from .donor import DonorModel, LifeMemberModel
from .client import ClientModel
from .donation import DonationModel, MedicalDonationModel
from .distribution import DistributionModel

__all__ = [
    "DonorModel",
    "LifeMemberModel",
    "ClientModel",
    "DonationModel",
    "MedicalDonationModel",
    "DistributionModel",
]
