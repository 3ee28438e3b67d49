from datetime import date, datetime
from enum import Enum

from sqlalchemy import Boolean, Date, DateTime, Enum as SAEnum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, utcnow


class DocTypeEnum(str, Enum):
    CI = "CI"
    RUC = "RUC"
    PASS = "PASS"


class Customer(Base):
    __tablename__ = "customers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    doc_type: Mapped[DocTypeEnum] = mapped_column(
        SAEnum(DocTypeEnum, native_enum=False, create_constraint=False),
        nullable=False,
        default=DocTypeEnum.CI,
    )
    doc_number: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255))
    phone: Mapped[str | None] = mapped_column(String(50))
    address: Mapped[str | None] = mapped_column(String(255))
    tourism_regime: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )
    country: Mapped[str | None] = mapped_column(String(2))
    passport: Mapped[str | None] = mapped_column(String(50))
    entry_date: Mapped[date | None] = mapped_column(Date)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=utcnow, onupdate=utcnow
    )
