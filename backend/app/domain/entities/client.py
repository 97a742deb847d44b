"""Domain entity for client beneficiaries."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ClientStatus(str, Enum):
    """Lifecycle of a client. ``Dead`` is terminal."""

    ACTIVE = "Active"
    INACTIVE = "Inactive"
    DEAD = "Dead"

    @property
    def is_terminal(self) -> bool:
        return self is ClientStatus.DEAD


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


@dataclass
class Client:
    """A person receiving aid. The Aadhaar number is fixed once created."""

    name: str
    address: str
    city: str
    state: str
    zip: str
    aadhaar: str
    age: int | None = None
    gender: Gender | None = None
    phone: str | None = None
    status: ClientStatus = ClientStatus.ACTIVE
    notes: str | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
