"""SQLAlchemy ORM models for monetary and medical donations."""

import datetime as dt

from sqlalchemy import Date, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.database.base import Base
from app.infrastructure.database.models._timestamps import TimestampMixin


class DonationModel(TimestampMixin, Base):
    """ORM model for the 'donations' table."""

    __tablename__ = "donations"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    donor_id: Mapped[int] = mapped_column(
        ForeignKey("donors.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    amount: Mapped[float] = mapped_column(Numeric(12, 2, asdecimal=False), nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    payment_mode: Mapped[str] = mapped_column(String(50), nullable=False)
    purpose: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[str] = mapped_column(String(10), nullable=False, default="Completed")
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<DonationModel(id={self.id}, donor_id={self.donor_id}, amount={self.amount})>"


class MedicalDonationModel(TimestampMixin, Base):
    """ORM model for the 'medical_donations' table."""

    __tablename__ = "medical_donations"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    donor_id: Mapped[int] = mapped_column(
        ForeignKey("donors.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    item_name: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[str] = mapped_column(String(20), nullable=False)
    strength: Mapped[str | None] = mapped_column(String(100), nullable=True)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    expiry_date: Mapped[dt.date | None] = mapped_column(Date, nullable=True, index=True)
    status: Mapped[str] = mapped_column(String(10), nullable=False, default="pending", index=True)
    donation_date: Mapped[dt.date] = mapped_column(Date, nullable=False, default=dt.date.today)

    def __repr__(self) -> str:
        return f"<MedicalDonationModel(id={self.id}, item='{self.item_name}', status='{self.status}')>"
