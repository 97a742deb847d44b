"""Donation, medical donation, distribution and dashboard queries against SQLite."""

from datetime import date, datetime, timedelta, timezone

import pytest

from app.application.schemas import DistributionUpdate, DonationUpdate
from app.application.services import (
    DashboardService,
    DistributionService,
    DonationService,
    MedicalDonationService,
)
from app.domain.entities import (
    ActivityStatus,
    AssistanceType,
    Client,
    ClientStatus,
    Distribution,
    DistributionStatus,
    Donation,
    DonationStatus,
    Donor,
    LifeMember,
    MedicalCategory,
    MedicalDonation,
    MedicalDonationStatus,
)
from app.domain.exceptions import InvalidStatusTransitionError
from app.infrastructure.database.repositories import (
    SQLAlchemyClientRepository,
    SQLAlchemyDashboardRepository,
    SQLAlchemyDistributionRepository,
    SQLAlchemyDonationRepository,
    SQLAlchemyDonorRepository,
    SQLAlchemyLifeMemberRepository,
    SQLAlchemyMedicalDonationRepository,
)

TODAY = date.today()
MONTH_START = TODAY.replace(day=1)
LAST_MONTH_START = (MONTH_START - timedelta(days=1)).replace(day=1)


def _donation(donor_id: int, amount: float, on: date, status=DonationStatus.COMPLETED, **extra):
    return Donation(
        donor_id=donor_id,
        amount=amount,
        date=on,
        payment_mode="UPI",
        purpose="General Fund",
        status=status,
        **extra,
    )


def _medicine(donor_id: int, expiry: date | None, status=MedicalDonationStatus.PENDING, **extra):
    return MedicalDonation(
        donor_id=donor_id,
        item_name="Paracetamol",
        category=MedicalCategory.MEDICINE,
        strength="500mg",
        quantity=10,
        expiry_date=expiry,
        status=status,
        **extra,
    )


def _client(name: str, aadhaar: str, **extra) -> Client:
    return Client(
        name=name,
        address="12 Temple Street",
        city="Madurai",
        state="Tamil Nadu",
        zip="625001",
        aadhaar=aadhaar,
        **extra,
    )


async def _seed_donor(session_factory, name: str = "Asha Menon") -> int:
    async with session_factory() as session:
        donor = await SQLAlchemyDonorRepository(session).create(Donor(name=name))
        await session.commit()
    return donor.id


@pytest.mark.asyncio
async def test_donation_stats_count_only_completed_money(session_factory):
    donor_id = await _seed_donor(session_factory)
    async with session_factory() as session:
        repository = SQLAlchemyDonationRepository(session)
        await repository.create(_donation(donor_id, 1000, date(2024, 3, 5)))
        await repository.create(_donation(donor_id, 400, date(2024, 3, 20), DonationStatus.PENDING))
        await repository.create(_donation(donor_id, 250, date(2024, 2, 28)))
        await session.commit()

        stats = await repository.get_stats(date(2024, 3, 1), date(2024, 4, 1))

    assert stats.total_amount == 1250
    assert stats.total_count == 3
    assert stats.completed_count == 2
    assert stats.pending_count == 1
    assert stats.monthly_amount == 1000


@pytest.mark.asyncio
async def test_donation_reads_carry_donor_columns(session_factory):
    donor_id = await _seed_donor(session_factory)
    async with session_factory() as session:
        repository = SQLAlchemyDonationRepository(session)
        await repository.create(_donation(donor_id, 500, date(2024, 3, 5)))
        await repository.create(_donation(donor_id, 700, date(2024, 3, 9)))
        await session.commit()

        donations = await repository.get_by_donor(donor_id)
        filtered = await repository.get_all(search="asha", start_date=date(2024, 3, 6))

    assert [d.amount for d in donations] == [700, 500]
    assert donations[0].donor_name == "Asha Menon"
    assert donations[0].donor_type == "Individual"
    assert [d.amount for d in filtered] == [700]


@pytest.mark.asyncio
async def test_completed_donation_cannot_return_to_pending(session_factory):
    donor_id = await _seed_donor(session_factory)
    async with session_factory() as session:
        created = await SQLAlchemyDonationRepository(session).create(
            _donation(donor_id, 1000, date(2024, 3, 5))
        )
        await session.commit()

    async with session_factory() as session:
        service = DonationService(
            SQLAlchemyDonationRepository(session), SQLAlchemyDonorRepository(session)
        )
        with pytest.raises(InvalidStatusTransitionError, match="Cannot change status from Completed to Pending"):
            await service.update_donation(created.id, DonationUpdate(status="Pending"))

    async with session_factory() as session:
        stored = await SQLAlchemyDonationRepository(session).get_by_id(created.id)
    assert stored.status is DonationStatus.COMPLETED


@pytest.mark.asyncio
async def test_pending_donation_can_be_completed(session_factory):
    donor_id = await _seed_donor(session_factory)
    async with session_factory() as session:
        created = await SQLAlchemyDonationRepository(session).create(
            _donation(donor_id, 1000, date(2024, 3, 5), DonationStatus.PENDING)
        )
        await session.commit()

    async with session_factory() as session:
        service = DonationService(
            SQLAlchemyDonationRepository(session), SQLAlchemyDonorRepository(session)
        )
        updated = await service.update_donation(created.id, DonationUpdate(status="Completed"))
        await session.commit()

    assert updated.status is DonationStatus.COMPLETED


@pytest.mark.asyncio
async def test_expiring_and_expired_only_list_open_items(session_factory):
    donor_id = await _seed_donor(session_factory)
    async with session_factory() as session:
        repository = SQLAlchemyMedicalDonationRepository(session)
        soon = await repository.create(_medicine(donor_id, TODAY + timedelta(days=10)))
        await repository.create(
            _medicine(donor_id, TODAY + timedelta(days=5), MedicalDonationStatus.COLLECTED)
        )
        await repository.create(_medicine(donor_id, TODAY + timedelta(days=90)))
        past = await repository.create(
            _medicine(donor_id, TODAY - timedelta(days=3), MedicalDonationStatus.APPROVED)
        )
        await repository.create(
            _medicine(donor_id, TODAY - timedelta(days=3), MedicalDonationStatus.REJECTED)
        )
        await repository.create(
            MedicalDonation(
                donor_id=donor_id,
                item_name="Wheelchair",
                category=MedicalCategory.EQUIPMENT,
                quantity=1,
            )
        )
        await session.commit()

        expiring = await repository.get_expiring(TODAY, TODAY + timedelta(days=30))
        expired = await repository.get_expired(TODAY)

    assert [d.id for d in expiring] == [soon.id]
    assert expiring[0].donor_name == "Asha Menon"
    assert [d.id for d in expired] == [past.id]


@pytest.mark.asyncio
async def test_medical_stats_count_every_status(session_factory):
    first = await _seed_donor(session_factory)
    second = await _seed_donor(session_factory, "Karthik Rao")
    async with session_factory() as session:
        repository = SQLAlchemyMedicalDonationRepository(session)
        await repository.create(_medicine(first, TODAY + timedelta(days=10)))
        await repository.create(
            _medicine(first, TODAY - timedelta(days=1), MedicalDonationStatus.COLLECTED)
        )
        await repository.create(
            MedicalDonation(
                donor_id=second,
                item_name="Vitamin D",
                category=MedicalCategory.SUPPLEMENT,
                strength="1000IU",
                quantity=5,
                expiry_date=TODAY + timedelta(days=200),
                status=MedicalDonationStatus.APPROVED,
            )
        )
        await session.commit()

        stats = await repository.get_stats(TODAY, TODAY + timedelta(days=30))

    assert stats.total_donations == 3
    assert stats.total_quantity == 25
    assert stats.unique_donors == 2
    assert stats.pending_count == 1
    assert stats.approved_count == 1
    assert stats.collected_count == 1
    assert stats.rejected_count == 0
    assert stats.expired_count == 1
    assert stats.expiring_soon_count == 1


@pytest.mark.asyncio
async def test_collected_medical_donation_keeps_its_status(session_factory):
    donor_id = await _seed_donor(session_factory)
    async with session_factory() as session:
        created = await SQLAlchemyMedicalDonationRepository(session).create(
            _medicine(donor_id, TODAY + timedelta(days=60), MedicalDonationStatus.COLLECTED)
        )
        await session.commit()

    async with session_factory() as session:
        service = MedicalDonationService(
            SQLAlchemyMedicalDonationRepository(session), SQLAlchemyDonorRepository(session)
        )
        with pytest.raises(InvalidStatusTransitionError, match="Cannot change status from collected to pending"):
            await service.update_status(created.id, "pending")
        assert (await service.list_expiring(90)) == []

    async with session_factory() as session:
        stored = await SQLAlchemyMedicalDonationRepository(session).get_by_id(created.id)
    assert stored.status is MedicalDonationStatus.COLLECTED


async def _seed_client(session_factory, name: str = "Ravi Kumar", aadhaar: str = "123456789012") -> int:
    async with session_factory() as session:
        client = await SQLAlchemyClientRepository(session).create(_client(name, aadhaar))
        await session.commit()
    return client.id


@pytest.mark.asyncio
async def test_distribution_stats_total_only_provided_aid(session_factory):
    client_id = await _seed_client(session_factory)
    async with session_factory() as session:
        repository = SQLAlchemyDistributionRepository(session)
        for assistance_type, amount, quantity, status in (
            (AssistanceType.MONEY, 2000.0, None, DistributionStatus.PROVIDED),
            (AssistanceType.MONEY, 900.0, None, DistributionStatus.PENDING),
            (AssistanceType.MEDICINE, None, 30, DistributionStatus.PROVIDED),
            (AssistanceType.EQUIPMENT, None, 2, DistributionStatus.CANCELLED),
        ):
            await repository.create(
                Distribution(
                    client_id=client_id,
                    assistance_type=assistance_type,
                    assistance_date=date(2024, 3, 10),
                    amount=amount,
                    quantity=quantity,
                    status=status,
                )
            )
        await session.commit()

        stats = await repository.get_stats()

    assert stats.total_distributions == 4
    assert stats.provided_count == 2
    assert stats.pending_count == 1
    assert stats.cancelled_count == 1
    assert stats.total_money_distributed == 2000
    assert stats.total_medicine_distributed == 30
    assert stats.total_equipment_distributed == 0


@pytest.mark.asyncio
async def test_distribution_filters_join_client(session_factory):
    ravi = await _seed_client(session_factory)
    meena = await _seed_client(session_factory, "Meena", "210987654321")
    async with session_factory() as session:
        repository = SQLAlchemyDistributionRepository(session)
        await repository.create(
            Distribution(
                client_id=ravi,
                assistance_type=AssistanceType.MONEY,
                assistance_date=date(2024, 3, 10),
                amount=1500,
            )
        )
        await repository.create(
            Distribution(
                client_id=meena,
                assistance_type=AssistanceType.MEDICINE,
                assistance_date=date(2024, 4, 2),
                quantity=12,
                description="Insulin refill",
            )
        )
        await session.commit()

        by_client = await repository.get_all(client_id=meena)
        by_search = await repository.get_all(search="insulin")
        by_range = await repository.get_all(start_date=date(2024, 3, 1), end_date=date(2024, 3, 31))

    assert [d.client_name for d in by_client] == ["Meena"]
    assert by_client[0].client_city == "Madurai"
    assert [d.client_id for d in by_search] == [meena]
    assert [d.client_id for d in by_range] == [ravi]


@pytest.mark.parametrize("requested", ["pending", "cancelled"])
@pytest.mark.asyncio
async def test_provided_distribution_is_final(session_factory, requested):
    client_id = await _seed_client(session_factory)
    async with session_factory() as session:
        created = await SQLAlchemyDistributionRepository(session).create(
            Distribution(
                client_id=client_id,
                assistance_type=AssistanceType.MONEY,
                assistance_date=date(2024, 3, 10),
                amount=1500,
                status=DistributionStatus.PROVIDED,
            )
        )
        await session.commit()

    async with session_factory() as session:
        service = DistributionService(
            SQLAlchemyDistributionRepository(session), SQLAlchemyClientRepository(session)
        )
        with pytest.raises(InvalidStatusTransitionError):
            await service.update_status(created.id, requested)
        with pytest.raises(InvalidStatusTransitionError):
            await service.update_distribution(created.id, DistributionUpdate(status=requested))

    async with session_factory() as session:
        stored = await SQLAlchemyDistributionRepository(session).get_by_id(created.id)
    assert stored.status is DistributionStatus.PROVIDED


@pytest.mark.asyncio
async def test_dashboard_summary(session_factory):
    donor_id = await _seed_donor(session_factory)
    other_donor = await _seed_donor(session_factory, "Karthik Rao")
    created = datetime.now(timezone.utc)

    async with session_factory() as session:
        donations = SQLAlchemyDonationRepository(session)
        await donations.create(_donation(donor_id, 1000, TODAY, created_at=created - timedelta(minutes=3)))
        await donations.create(_donation(donor_id, 500, LAST_MONTH_START, created_at=created - timedelta(minutes=2)))
        await donations.create(_donation(donor_id, 700, TODAY, DonationStatus.PENDING, created_at=created))
        await donations.create(_donation(donor_id, 200, date(2000, 1, 1), created_at=created - timedelta(minutes=1)))

        medical = SQLAlchemyMedicalDonationRepository(session)
        await medical.create(_medicine(donor_id, None))
        await medical.create(_medicine(donor_id, None, MedicalDonationStatus.REJECTED))

        members = SQLAlchemyLifeMemberRepository(session)
        await members.create(LifeMember(donor_id=donor_id, join_date=TODAY, aadhar_number="123456789012"))
        await members.create(
            LifeMember(
                donor_id=other_donor,
                join_date=date(2020, 1, 1),
                aadhar_number="210987654321",
                membership_status=ActivityStatus.INACTIVE,
            )
        )

        clients = SQLAlchemyClientRepository(session)
        await clients.create(_client("Ravi Kumar", "111111111111"))
        await clients.create(_client("Meena", "222222222222", status=ClientStatus.INACTIVE))
        await clients.create(
            _client("Selvi", "333333333333", created_at=created - timedelta(days=30))
        )
        await session.commit()

    async with session_factory() as session:
        summary = await DashboardService(SQLAlchemyDashboardRepository(session)).get_summary(TODAY)

    assert summary.total_donation_amount == 1700
    assert summary.current_month_amount == 1000
    assert summary.last_month_amount == 500
    assert summary.donation_change_percent == 100
    assert summary.medical_donation_count == 2
    assert summary.life_member_count == 1
    assert summary.new_members_this_month == 1
    assert summary.active_client_count == 2
    assert summary.new_clients_this_week == 1
    assert [d.amount for d in summary.recent_donations] == [200, 500, 1000]
    assert summary.recent_donations[0].donor_name == "Asha Menon"
    assert len(summary.recent_medical_donations) == 2


@pytest.mark.asyncio
async def test_dashboard_summary_on_empty_database(session_factory):
    async with session_factory() as session:
        summary = await DashboardService(SQLAlchemyDashboardRepository(session)).get_summary()

    assert summary.total_donation_amount == 0
    assert summary.donation_change_percent == 0
    assert summary.life_member_count == 0
    assert summary.recent_donations == []
    assert summary.recent_medical_donations == []
