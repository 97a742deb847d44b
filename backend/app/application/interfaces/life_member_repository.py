"""Abstract repository interface (port) for LifeMember persistence."""

from abc import ABC, abstractmethod
from datetime import date
from typing import Any

from app.domain.entities import LifeMember, LifeMemberProfile


class LifeMemberRepository(ABC):
    """Port for the membership half of the Donor + LifeMember composite."""

    @abstractmethod
    async def get_profile(self, member_id: int) -> LifeMemberProfile | None:
        """Retrieve a member joined with its donor row."""
        ...

    @abstractmethod
    async def list_profiles(
        self,
        *,
        search: str | None = None,
        status: str | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[LifeMemberProfile]:
        """Retrieve member profiles, most recent join date first."""
        ...

    @abstractmethod
    async def resolve_donor_id(self, member_id: int) -> int | None:
        """Return the donor ID owning ``member_id``, or None if it does not exist."""
        ...

    @abstractmethod
    async def aadhar_in_use(self, aadhar_number: str) -> bool:
        ...

    @abstractmethod
    async def create(self, member: LifeMember) -> LifeMember:
        """Persist a new membership row and return it with the generated ID."""
        ...

    @abstractmethod
    async def update_fields(self, member_id: int, changes: dict[str, Any]) -> bool:
        """Apply staged column changes in one statement. False if no row matched."""
        ...
