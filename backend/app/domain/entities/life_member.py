"""Domain entities for life members: a Donor extended with membership data."""

from dataclasses import dataclass, field
from datetime import date, datetime, time, timezone

from app.domain.entities.donor import ActivityStatus


def current_time() -> time:
    """Wall-clock time truncated to whole seconds (default join time)."""
    return datetime.now().time().replace(microsecond=0)


@dataclass
class LifeMember:
    """Membership half of the composite Donor + LifeMember entity.

    Never exists on its own: ``donor_id`` points at exactly one donor row and
    deleting that donor removes the membership as well.
    """

    join_date: date
    donor_id: int | None = None
    aadhar_number: str | None = None
    join_time: time = field(default_factory=current_time)
    membership_status: ActivityStatus = ActivityStatus.ACTIVE
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class LifeMemberProfile:
    """Read model joining a life member with its donor row."""

    id: int
    donor_id: int
    name: str
    email: str | None
    phone: str | None
    address: str | None
    donor_status: ActivityStatus
    aadhar_number: str | None
    join_date: date
    join_time: time | None
    membership_status: ActivityStatus
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class MemberCreated:
    """Identifiers produced by a successful composite create."""

    member_id: int
    donor_id: int
