"""Abstract read-only port for dashboard figures."""

from abc import ABC, abstractmethod
from datetime import date

from app.domain.entities import Donation, MedicalDonation


class DashboardRepository(ABC):

    @abstractmethod
    async def completed_donation_total(
        self, start: date | None = None, end: date | None = None
    ) -> float:
        """Sum of completed donations, optionally limited to [start, end)."""
        ...

    @abstractmethod
    async def medical_donation_count(self) -> int:
        ...

    @abstractmethod
    async def life_member_count(self, *, joined_since: date | None = None) -> int:
        ...

    @abstractmethod
    async def active_client_count(self, *, created_since: date | None = None) -> int:
        ...

    @abstractmethod
    async def recent_donations(self, limit: int) -> list[Donation]:
        ...

    @abstractmethod
    async def recent_medical_donations(self, limit: int) -> list[MedicalDonation]:
        ...
