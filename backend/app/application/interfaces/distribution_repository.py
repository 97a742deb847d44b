"""Abstract repository interface (port) for Distribution persistence."""

from abc import ABC, abstractmethod
from datetime import date
from typing import Any

from app.domain.entities import Distribution, DistributionStats


class DistributionRepository(ABC):
    """Port for distribution persistence. Reads include the client's name and contact."""

    @abstractmethod
    async def get_by_id(self, distribution_id: int) -> Distribution | None:
        ...

    @abstractmethod
    async def get_all(
        self,
        *,
        client_id: int | None = None,
        assistance_type: str | None = None,
        status: str | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
        search: str | None = None,
    ) -> list[Distribution]:
        ...

    @abstractmethod
    async def create(self, distribution: Distribution) -> Distribution:
        ...

    @abstractmethod
    async def update_fields(self, distribution_id: int, changes: dict[str, Any]) -> bool:
        ...

    @abstractmethod
    async def delete(self, distribution_id: int) -> bool:
        ...

    @abstractmethod
    async def get_stats(self) -> DistributionStats:
        ...
