"""Domain entity for aid handed out to clients."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum


class AssistanceType(str, Enum):
    MONEY = "money"
    MEDICINE = "medicine"
    EQUIPMENT = "equipment"


class DistributionStatus(str, Enum):
    """``provided`` is terminal."""

    PROVIDED = "provided"
    PENDING = "pending"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self is DistributionStatus.PROVIDED


@dataclass
class Distribution:
    """One act of assistance (money, medicine or equipment) to a client."""

    client_id: int
    assistance_type: AssistanceType
    assistance_date: date
    amount: float | None = None
    quantity: int | None = None
    unit: str | None = None
    description: str | None = None
    status: DistributionStatus = DistributionStatus.PENDING
    id: int | None = None
    client_name: str | None = None
    client_phone: str | None = None
    client_city: str | None = None
    client_state: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(frozen=True)
class DistributionStats:
    total_distributions: int
    provided_count: int
    pending_count: int
    cancelled_count: int
    total_money_distributed: float
    total_medicine_distributed: int
    total_equipment_distributed: int
