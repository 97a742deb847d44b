"""Abstract repository interface (port) for Client persistence."""

from abc import ABC, abstractmethod
from typing import Any

from app.domain.entities import Client


class ClientRepository(ABC):
    """Port for client persistence, implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, client_id: int) -> Client | None:
        ...

    @abstractmethod
    async def get_all(
        self,
        *,
        search: str | None = None,
        status: str | None = None,
    ) -> list[Client]:
        """Retrieve clients matching the filters, newest first."""
        ...

    @abstractmethod
    async def aadhaar_in_use(self, aadhaar: str) -> bool:
        ...

    @abstractmethod
    async def create(self, client: Client) -> Client:
        ...

    @abstractmethod
    async def update_fields(self, client_id: int, changes: dict[str, Any]) -> bool:
        """Apply staged column changes in one statement. False if no row matched."""
        ...

    @abstractmethod
    async def delete(self, client_id: int) -> bool:
        ...
