"""Abstract repository interface (port) for Donor persistence."""

from abc import ABC, abstractmethod
from typing import Any

from app.domain.entities import Donor


class DonorRepository(ABC):
    """Port for donor persistence, implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, donor_id: int) -> Donor | None:
        ...

    @abstractmethod
    async def find_by_name(self, name: str) -> Donor | None:
        """Case-insensitive exact match on the donor name."""
        ...

    @abstractmethod
    async def email_in_use(self, email: str, *, exclude_id: int | None = None) -> bool:
        """True when another donor already owns ``email``."""
        ...

    @abstractmethod
    async def create(self, donor: Donor) -> Donor:
        """Persist a new donor and return it with the generated ID."""
        ...

    @abstractmethod
    async def update_fields(self, donor_id: int, changes: dict[str, Any]) -> bool:
        """Apply staged column changes in one statement. False if no row matched."""
        ...

    @abstractmethod
    async def delete(self, donor_id: int) -> bool:
        """Delete a donor (cascades to its membership and donations)."""
        ...
