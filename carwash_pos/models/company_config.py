from datetime import date, datetime

from sqlalchemy import Date, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, utcnow


class CompanyConfig(Base):
    """Business identity and the active timbrado. At most one row exists."""

    __tablename__ = "company_config"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    ruc: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    legal_name: Mapped[str] = mapped_column(String(255), nullable=False)
    trade_name: Mapped[str | None] = mapped_column(String(255))
    timbrado_number: Mapped[str] = mapped_column(String(50), nullable=False)
    timbrado_valid_from: Mapped[date] = mapped_column(Date, nullable=False)
    timbrado_valid_until: Mapped[date] = mapped_column(Date, nullable=False)
    establishment: Mapped[str] = mapped_column(
        String(3), nullable=False, default="001"
    )
    point_of_sale: Mapped[str] = mapped_column(
        String(3), nullable=False, default="001"
    )
    address: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[str] = mapped_column(String(100), nullable=False, default="Asunción")
    phone: Mapped[str | None] = mapped_column(String(50))
    email: Mapped[str | None] = mapped_column(String(255))
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="PYG")
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=utcnow, onupdate=utcnow
    )
