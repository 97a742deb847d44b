"""Domain entity for monetary donations."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum


class DonationStatus(str, Enum):
    """``Completed`` is terminal: a completed donation never goes back to pending."""

    COMPLETED = "Completed"
    PENDING = "Pending"

    @property
    def is_terminal(self) -> bool:
        return self is DonationStatus.COMPLETED


@dataclass
class Donation:
    """A monetary contribution made by a donor.

    The ``donor_*`` attributes are filled from the donor row on reads and are
    ignored on writes.
    """

    donor_id: int
    amount: float
    date: date
    payment_mode: str
    purpose: str
    status: DonationStatus = DonationStatus.COMPLETED
    notes: str | None = None
    id: int | None = None
    donor_name: str | None = None
    donor_type: str | None = None
    donor_email: str | None = None
    donor_phone: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(frozen=True)
class DonationStats:
    total_amount: float
    total_count: int
    completed_count: int
    pending_count: int
    monthly_amount: float
