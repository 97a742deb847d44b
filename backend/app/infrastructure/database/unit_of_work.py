"""SQLAlchemy implementation of the unit-of-work port."""

import itertools
import time
from types import TracebackType

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.application.interfaces import UnitOfWork
from app.domain.exceptions import TransactionFailureError
from app.infrastructure.database.repositories.donation_repository import (
    SQLAlchemyDonationRepository,
)
from app.infrastructure.database.repositories.donor_repository import SQLAlchemyDonorRepository
from app.infrastructure.database.repositories.life_member_repository import (
    SQLAlchemyLifeMemberRepository,
)
from app.infrastructure.logging.colored_logger import TransactionLogger

_txn_ids = itertools.count(1)
_log = TransactionLogger("UnitOfWork")


class SQLAlchemyUnitOfWork(UnitOfWork):
    """Checks one session out of the factory and runs a single transaction on it.

    A fresh instance is needed per operation; the session is closed (and its
    connection returned to the pool) on every exit path.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory
        self._session: AsyncSession | None = None
        self._txn_id = 0
        self._started = 0.0

    async def __aenter__(self) -> "SQLAlchemyUnitOfWork":
        self._session = self._session_factory()
        await self._session.begin()
        self._txn_id = next(_txn_ids)
        self._started = time.perf_counter()
        _log.begin(self._txn_id)

        self.donors = SQLAlchemyDonorRepository(self._session)
        self.life_members = SQLAlchemyLifeMemberRepository(self._session)
        self.donations = SQLAlchemyDonationRepository(self._session)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        session = self._session
        self._session = None
        try:
            if exc is None:
                try:
                    await session.commit()
                except SQLAlchemyError as commit_error:
                    await session.rollback()
                    _log.rolled_back(self._txn_id, self._elapsed(), commit_error)
                    raise TransactionFailureError(str(commit_error)) from commit_error
                _log.committed(self._txn_id, self._elapsed())
                return

            await session.rollback()
            _log.rolled_back(self._txn_id, self._elapsed(), exc)
            if isinstance(exc, SQLAlchemyError):
                raise TransactionFailureError(str(exc)) from exc
        finally:
            await session.close()

    def _elapsed(self) -> float:
        return time.perf_counter() - self._started
