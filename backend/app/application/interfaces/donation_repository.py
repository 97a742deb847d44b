"""Abstract repository interface (port) for monetary Donation persistence."""

from abc import ABC, abstractmethod
from datetime import date
from typing import Any

from app.domain.entities import Donation, DonationStats


class DonationRepository(ABC):
    """Port for donation persistence. Reads include the donor's name and contact."""

    @abstractmethod
    async def get_by_id(self, donation_id: int) -> Donation | None:
        ...

    @abstractmethod
    async def get_all(
        self,
        *,
        status: str | None = None,
        search: str | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
        donor_type: str | None = None,
        skip: int = 0,
        limit: int = 50,
    ) -> list[Donation]:
        ...

    @abstractmethod
    async def get_by_donor(self, donor_id: int) -> list[Donation]:
        ...

    @abstractmethod
    async def create(self, donation: Donation) -> Donation:
        ...

    @abstractmethod
    async def update_fields(self, donation_id: int, changes: dict[str, Any]) -> bool:
        ...

    @abstractmethod
    async def delete(self, donation_id: int) -> bool:
        ...

    @abstractmethod
    async def get_stats(self, month_start: date, month_end: date) -> DonationStats:
        """Totals over all donations plus the completed amount in [month_start, month_end)."""
        ...
