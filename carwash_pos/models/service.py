from datetime import datetime
from decimal import Decimal
from enum import Enum

import sqlalchemy as sa
from sqlalchemy import (
    Boolean,
    DateTime,
    Enum as SAEnum,
    ForeignKey,
    Integer,
    Numeric,
    String,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, utcnow


class ServiceCategoryEnum(str, Enum):
    BASICO = "basico"
    PREMIUM = "premium"
    MOTOR = "motor"
    TAPIZADO = "tapizado"
    ENCERADO = "encerado"
    OZONO = "ozono"


class Service(Base):
    __tablename__ = "services"
    __table_args__ = (sa.Index("ix_services_active", "active"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    description: Mapped[str | None] = mapped_column(String(500))
    price: Mapped[Decimal] = mapped_column(Numeric(14, 0), nullable=False)
    duration_min: Mapped[int] = mapped_column(Integer, nullable=False, default=30)
    category: Mapped[ServiceCategoryEnum] = mapped_column(
        SAEnum(
            ServiceCategoryEnum,
            native_enum=False,
            create_constraint=False,
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
    )
    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=utcnow, onupdate=utcnow
    )


class ServiceCombo(Base):
    __tablename__ = "service_combos"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    description: Mapped[str | None] = mapped_column(String(500))
    total_price: Mapped[Decimal] = mapped_column(Numeric(14, 0), nullable=False)
    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=utcnow, onupdate=utcnow
    )
    items: Mapped[list["ServiceComboItem"]] = relationship(
        "ServiceComboItem",
        cascade="all, delete-orphan",
        order_by="ServiceComboItem.id",
    )


class ServiceComboItem(Base):
    __tablename__ = "service_combo_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    combo_id: Mapped[int] = mapped_column(
        ForeignKey("service_combos.id"), nullable=False
    )
    service_id: Mapped[int] = mapped_column(
        ForeignKey("services.id"), nullable=False
    )
    service: Mapped["Service"] = relationship("Service")
