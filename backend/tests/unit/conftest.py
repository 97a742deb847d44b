"""In-memory fakes of the repository and unit-of-work ports."""

import copy
from dataclasses import dataclass, field, replace
from datetime import date, datetime, timezone
from typing import Any

import pytest

from app.application.interfaces import (
    ClientRepository,
    DonationRepository,
    DonorRepository,
    LifeMemberRepository,
    UnitOfWork,
)
from app.domain.entities import (
    Client,
    Donation,
    DonationStats,
    DonationStatus,
    Donor,
    LifeMember,
    LifeMemberProfile,
)
from app.domain.exceptions import TransactionFailureError


def _stamp(entity: Any, changes: dict[str, Any]) -> Any:
    """Apply staged column values the way the SQL executor does."""
    values = {}
    for name, value in changes.items():
        current = getattr(entity, name)
        if value is not None and current is not None and hasattr(type(current), "__members__"):
            value = type(current)(value)
        values[name] = value
    return replace(entity, **values, updated_at=datetime.now(timezone.utc))


@dataclass
class Tables:
    donors: dict[int, Donor] = field(default_factory=dict)
    members: dict[int, LifeMember] = field(default_factory=dict)
    donations: dict[int, Donation] = field(default_factory=dict)
    clients: dict[int, Client] = field(default_factory=dict)
    next_id: int = 1

    def allocate_id(self) -> int:
        value = self.next_id
        self.next_id += 1
        return value


class FakeDatabase:
    """Committed state plus a log of every mutating statement ever issued."""

    def __init__(self):
        self.committed = Tables()
        self.statements: list[str] = []
        self.commits = 0
        self.rollbacks = 0
        self.open_connections = 0
        self.fail_on: str | None = None

    def record(self, statement: str) -> None:
        self.statements.append(statement)
        if self.fail_on == statement:
            raise TransactionFailureError(f"simulated failure on {statement}")


class FakeDonorRepository(DonorRepository):

    def __init__(self, tables: Tables, db: FakeDatabase):
        self._tables = tables
        self._db = db

    async def get_by_id(self, donor_id: int) -> Donor | None:
        return self._tables.donors.get(donor_id)

    async def find_by_name(self, name: str) -> Donor | None:
        for donor in self._tables.donors.values():
            if donor.name.lower() == name.lower():
                return donor
        return None

    async def email_in_use(self, email: str, *, exclude_id: int | None = None) -> bool:
        return any(
            (d.email or "").lower() == email.lower() and d.id != exclude_id
            for d in self._tables.donors.values()
        )

    async def create(self, donor: Donor) -> Donor:
        self._db.record("INSERT donors")
        donor.id = self._tables.allocate_id()
        self._tables.donors[donor.id] = donor
        return donor

    async def update_fields(self, donor_id: int, changes: dict[str, Any]) -> bool:
        self._db.record(f"UPDATE donors SET {','.join(sorted(changes))}")
        if donor_id not in self._tables.donors:
            return False
        self._tables.donors[donor_id] = _stamp(self._tables.donors[donor_id], changes)
        return True

    async def delete(self, donor_id: int) -> bool:
        self._db.record("DELETE donors")
        if self._tables.donors.pop(donor_id, None) is None:
            return False
        for member_id in [m.id for m in self._tables.members.values() if m.donor_id == donor_id]:
            del self._tables.members[member_id]
        for donation_id in [d.id for d in self._tables.donations.values() if d.donor_id == donor_id]:
            del self._tables.donations[donation_id]
        return True


class FakeLifeMemberRepository(LifeMemberRepository):

    def __init__(self, tables: Tables, db: FakeDatabase):
        self._tables = tables
        self._db = db

    def _profile(self, member: LifeMember) -> LifeMemberProfile:
        donor = self._tables.donors[member.donor_id]
        return LifeMemberProfile(
            id=member.id,
            donor_id=donor.id,
            name=donor.name,
            email=donor.email,
            phone=donor.phone,
            address=donor.address,
            donor_status=donor.status,
            aadhar_number=member.aadhar_number,
            join_date=member.join_date,
            join_time=member.join_time,
            membership_status=member.membership_status,
            created_at=member.created_at,
            updated_at=member.updated_at,
        )

    async def get_profile(self, member_id: int) -> LifeMemberProfile | None:
        member = self._tables.members.get(member_id)
        return self._profile(member) if member else None

    async def list_profiles(self, *, search=None, status=None, start_date=None, end_date=None):
        profiles = [self._profile(m) for m in self._tables.members.values()]
        if status:
            profiles = [p for p in profiles if p.membership_status.value == status]
        if search:
            profiles = [p for p in profiles if search.lower() in p.name.lower()]
        return sorted(profiles, key=lambda p: p.join_date, reverse=True)

    async def resolve_donor_id(self, member_id: int) -> int | None:
        member = self._tables.members.get(member_id)
        return member.donor_id if member else None

    async def aadhar_in_use(self, aadhar_number: str) -> bool:
        return any(m.aadhar_number == aadhar_number for m in self._tables.members.values())

    async def create(self, member: LifeMember) -> LifeMember:
        self._db.record("INSERT life_members")
        member.id = self._tables.allocate_id()
        self._tables.members[member.id] = member
        return member

    async def update_fields(self, member_id: int, changes: dict[str, Any]) -> bool:
        self._db.record(f"UPDATE life_members SET {','.join(sorted(changes))}")
        if member_id not in self._tables.members:
            return False
        self._tables.members[member_id] = _stamp(self._tables.members[member_id], changes)
        return True


class FakeDonationRepository(DonationRepository):

    def __init__(self, tables: Tables, db: FakeDatabase):
        self._tables = tables
        self._db = db

    def _with_donor(self, donation: Donation) -> Donation:
        donor = self._tables.donors.get(donation.donor_id)
        if donor is None:
            return donation
        return replace(
            donation,
            donor_name=donor.name,
            donor_type=donor.donor_type.value,
            donor_email=donor.email,
            donor_phone=donor.phone,
        )

    async def get_by_id(self, donation_id: int) -> Donation | None:
        donation = self._tables.donations.get(donation_id)
        return self._with_donor(donation) if donation else None

    async def get_all(self, *, status=None, search=None, start_date=None, end_date=None,
                      donor_type=None, skip=0, limit=50) -> list[Donation]:
        donations = [self._with_donor(d) for d in self._tables.donations.values()]
        if status:
            donations = [d for d in donations if d.status.value == status]
        return donations[skip : skip + limit]

    async def get_by_donor(self, donor_id: int) -> list[Donation]:
        return [self._with_donor(d) for d in self._tables.donations.values() if d.donor_id == donor_id]

    async def create(self, donation: Donation) -> Donation:
        self._db.record("INSERT donations")
        donation.id = self._tables.allocate_id()
        self._tables.donations[donation.id] = donation
        return donation

    async def update_fields(self, donation_id: int, changes: dict[str, Any]) -> bool:
        self._db.record(f"UPDATE donations SET {','.join(sorted(changes))}")
        if donation_id not in self._tables.donations:
            return False
        self._tables.donations[donation_id] = _stamp(self._tables.donations[donation_id], changes)
        return True

    async def delete(self, donation_id: int) -> bool:
        self._db.record("DELETE donations")
        return self._tables.donations.pop(donation_id, None) is not None

    async def get_stats(self, month_start: date, month_end: date) -> DonationStats:
        rows = list(self._tables.donations.values())
        completed = [d for d in rows if d.status is DonationStatus.COMPLETED]
        return DonationStats(
            total_amount=sum(d.amount for d in completed),
            total_count=len(rows),
            completed_count=len(completed),
            pending_count=len(rows) - len(completed),
            monthly_amount=sum(d.amount for d in completed if month_start <= d.date < month_end),
        )


class FakeClientRepository(ClientRepository):

    def __init__(self, tables: Tables, db: FakeDatabase):
        self._tables = tables
        self._db = db

    async def get_by_id(self, client_id: int) -> Client | None:
        return self._tables.clients.get(client_id)

    async def get_all(self, *, search=None, status=None) -> list[Client]:
        clients = list(self._tables.clients.values())
        if status:
            clients = [c for c in clients if c.status.value == status]
        if search:
            clients = [c for c in clients if search.lower() in c.name.lower()]
        return clients

    async def aadhaar_in_use(self, aadhaar: str) -> bool:
        return any(c.aadhaar == aadhaar for c in self._tables.clients.values())

    async def create(self, client: Client) -> Client:
        self._db.record("INSERT clients")
        client.id = self._tables.allocate_id()
        self._tables.clients[client.id] = client
        return client

    async def update_fields(self, client_id: int, changes: dict[str, Any]) -> bool:
        self._db.record(f"UPDATE clients SET {','.join(sorted(changes))}")
        if client_id not in self._tables.clients:
            return False
        self._tables.clients[client_id] = _stamp(self._tables.clients[client_id], changes)
        return True

    async def delete(self, client_id: int) -> bool:
        self._db.record("DELETE clients")
        return self._tables.clients.pop(client_id, None) is not None


class FakeUnitOfWork(UnitOfWork):
    """Works on a private copy of the committed tables; commit swaps it in."""

    def __init__(self, db: FakeDatabase):
        self._db = db
        self._working: Tables | None = None

    async def __aenter__(self) -> "FakeUnitOfWork":
        self._db.open_connections += 1
        self._working = copy.deepcopy(self._db.committed)
        self.donors = FakeDonorRepository(self._working, self._db)
        self.life_members = FakeLifeMemberRepository(self._working, self._db)
        self.donations = FakeDonationRepository(self._working, self._db)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        try:
            if exc is None:
                self._db.committed = self._working
                self._db.commits += 1
            else:
                self._db.rollbacks += 1
        finally:
            self._db.open_connections -= 1
            self._working = None


@pytest.fixture
def fake_db() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def uow_factory(fake_db: FakeDatabase):
    return lambda: FakeUnitOfWork(fake_db)


@pytest.fixture
def donor_repo(fake_db: FakeDatabase) -> FakeDonorRepository:
    """Repositories outside a unit of work write straight to the committed tables."""
    return FakeDonorRepository(fake_db.committed, fake_db)


@pytest.fixture
def donation_repo(fake_db: FakeDatabase) -> FakeDonationRepository:
    return FakeDonationRepository(fake_db.committed, fake_db)


@pytest.fixture
def client_repo(fake_db: FakeDatabase) -> FakeClientRepository:
    return FakeClientRepository(fake_db.committed, fake_db)


@pytest.fixture
def seed_donor(fake_db: FakeDatabase):
    def _seed(name: str = "Existing Donor", **overrides) -> Donor:
        donor = Donor(name=name, **overrides)
        donor.id = fake_db.committed.allocate_id()
        fake_db.committed.donors[donor.id] = donor
        return donor

    return _seed


@pytest.fixture
def seed_donation(fake_db: FakeDatabase):
    def _seed(donor_id: int, **overrides) -> Donation:
        values = dict(
            donor_id=donor_id,
            amount=1000.0,
            date=date(2024, 3, 10),
            payment_mode="UPI",
            purpose="General Fund",
        )
        values.update(overrides)
        donation = Donation(**values)
        donation.id = fake_db.committed.allocate_id()
        fake_db.committed.donations[donation.id] = donation
        return donation

    return _seed
