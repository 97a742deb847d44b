"""Unit-of-work port for operations that must span several tables atomically."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from types import TracebackType

from app.application.interfaces.donation_repository import DonationRepository
from app.application.interfaces.donor_repository import DonorRepository
from app.application.interfaces.life_member_repository import LifeMemberRepository


class UnitOfWork(ABC):
    """One exclusively owned connection and one transaction.

    Entering begins the transaction. Leaving commits when the block
    completed, rolls back when it raised, and always releases the
    connection. Repositories exposed here are bound to that transaction.

    Usage:
        async with uow_factory() as uow:
            donor = await uow.donors.create(...)
            await uow.life_members.create(...)
    """

    donors: DonorRepository
    life_members: LifeMemberRepository
    donations: DonationRepository

    @abstractmethod
    async def __aenter__(self) -> "UnitOfWork":
        ...

    @abstractmethod
    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        ...


UnitOfWorkFactory = Callable[[], UnitOfWork]
