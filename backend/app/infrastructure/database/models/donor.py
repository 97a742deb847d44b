"""SQLAlchemy ORM models for donors and their life memberships."""

from datetime import date, time

from sqlalchemy import Date, ForeignKey, Index, String, Text, Time, func
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.database.base import Base
from app.infrastructure.database.models._timestamps import TimestampMixin


class DonorModel(TimestampMixin, Base):
    """ORM model for the 'donors' table."""

    __tablename__ = "donors"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(10), nullable=True)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    donor_type: Mapped[str] = mapped_column(String(20), nullable=False, default="Individual")
    status: Mapped[str] = mapped_column(String(10), nullable=False, default="Active")

    def __repr__(self) -> str:
        return f"<DonorModel(id={self.id}, name='{self.name}', type='{self.donor_type}')>"


# Email uniqueness ignores letter case.
Index("uq_donors_email_lower", func.lower(DonorModel.email), unique=True)


class LifeMemberModel(TimestampMixin, Base):
    """ORM model for the 'life_members' table (one row per donor at most)."""

    __tablename__ = "life_members"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    donor_id: Mapped[int] = mapped_column(
        ForeignKey("donors.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    aadhar_number: Mapped[str | None] = mapped_column(String(12), nullable=True, unique=True)
    join_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    join_time: Mapped[time | None] = mapped_column(Time, nullable=True)
    membership_status: Mapped[str] = mapped_column(String(10), nullable=False, default="Active")

    def __repr__(self) -> str:
        return f"<LifeMemberModel(id={self.id}, donor_id={self.donor_id})>"
