"""Domain entity for donors, the shared identity behind every contribution."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class DonorType(str, Enum):
    """Category tag of a donor record."""

    INDIVIDUAL = "Individual"
    LIFE_MEMBER = "Life Member"


class ActivityStatus(str, Enum):
    """Active/Inactive flag shared by donors and life memberships."""

    ACTIVE = "Active"
    INACTIVE = "Inactive"


@dataclass
class Donor:
    """Identity record of anyone who has given money or medical items."""

    name: str
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    donor_type: DonorType = DonorType.INDIVIDUAL
    status: ActivityStatus = ActivityStatus.ACTIVE
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
