"""Domain entity for donated medical items."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum


class MedicalCategory(str, Enum):
    MEDICINE = "Medicine"
    SUPPLEMENT = "Supplement"
    EQUIPMENT = "Equipment"

    @property
    def requires_strength(self) -> bool:
        return self is not MedicalCategory.EQUIPMENT


class MedicalDonationStatus(str, Enum):
    """Review lifecycle of a medical donation; collected/rejected are terminal."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    COLLECTED = "collected"

    @property
    def is_terminal(self) -> bool:
        return self in (MedicalDonationStatus.REJECTED, MedicalDonationStatus.COLLECTED)


@dataclass
class MedicalDonation:
    """Medicine, supplement or equipment given by a donor."""

    donor_id: int
    item_name: str
    category: MedicalCategory
    quantity: int
    strength: str | None = None
    expiry_date: date | None = None
    status: MedicalDonationStatus = MedicalDonationStatus.PENDING
    donation_date: date = field(default_factory=date.today)
    id: int | None = None
    donor_name: str | None = None
    donor_email: str | None = None
    donor_phone: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(frozen=True)
class MedicalDonationStats:
    total_donations: int
    total_quantity: int
    unique_donors: int
    pending_count: int
    approved_count: int
    collected_count: int
    rejected_count: int
    expired_count: int
    expiring_soon_count: int
