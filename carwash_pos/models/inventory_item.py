from datetime import datetime
from enum import Enum

import sqlalchemy as sa
from sqlalchemy import Boolean, DateTime, Enum as SAEnum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, utcnow


class StockUnitEnum(str, Enum):
    UN = "UN"
    LT = "LT"
    KG = "KG"


class StockAlertEnum(str, Enum):
    NORMAL = "normal"
    LOW = "bajo"
    CRITICAL = "critico"


class InventoryItem(Base):
    __tablename__ = "inventory_items"
    __table_args__ = (
        sa.Index("ix_inventory_items_alert_status", "alert_status"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    description: Mapped[str | None] = mapped_column(String(500))
    stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    min_stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    unit: Mapped[StockUnitEnum] = mapped_column(
        SAEnum(StockUnitEnum, native_enum=False, create_constraint=False),
        nullable=False,
        default=StockUnitEnum.UN,
    )
    supplier: Mapped[str | None] = mapped_column(String(255))
    last_order: Mapped[str | None] = mapped_column(String(255))
    alert_status: Mapped[StockAlertEnum] = mapped_column(
        SAEnum(
            StockAlertEnum,
            native_enum=False,
            create_constraint=False,
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
        default=StockAlertEnum.NORMAL,
    )
    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=utcnow, onupdate=utcnow
    )
