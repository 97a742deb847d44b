"""Abstract repository interface (port) for MedicalDonation persistence."""

from abc import ABC, abstractmethod
from datetime import date
from typing import Any

from app.domain.entities import MedicalDonation, MedicalDonationStats


class MedicalDonationRepository(ABC):
    """Port for medical donation persistence."""

    @abstractmethod
    async def get_by_id(self, donation_id: int) -> MedicalDonation | None:
        ...

    @abstractmethod
    async def get_all(
        self,
        *,
        donor_id: int | None = None,
        status: str | None = None,
    ) -> list[MedicalDonation]:
        ...

    @abstractmethod
    async def get_expiring(self, today: date, until: date) -> list[MedicalDonation]:
        """Open (pending/approved) items expiring between ``today`` and ``until``."""
        ...

    @abstractmethod
    async def get_expired(self, today: date) -> list[MedicalDonation]:
        """Open (pending/approved) items whose expiry date has passed."""
        ...

    @abstractmethod
    async def create(self, donation: MedicalDonation) -> MedicalDonation:
        ...

    @abstractmethod
    async def update_fields(self, donation_id: int, changes: dict[str, Any]) -> bool:
        ...

    @abstractmethod
    async def delete(self, donation_id: int) -> bool:
        ...

    @abstractmethod
    async def get_stats(self, today: date, expiring_until: date) -> MedicalDonationStats:
        ...
