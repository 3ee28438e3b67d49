from datetime import datetime
from decimal import Decimal
from enum import Enum

from sqlalchemy import (
    Boolean,
    DateTime,
    Enum as SAEnum,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, utcnow


class PaymentMethodEnum(str, Enum):
    CASH = "efectivo"
    CARD = "tarjeta"
    TRANSFER = "transferencia"
    ACCOUNT = "cuenta"


class Sale(Base):
    """Issued invoice. Rows are written once and never updated."""

    __tablename__ = "sales"
    __table_args__ = (
        Index("ix_sales_issued_at", "issued_at"),
        Index("ix_sales_customer_id", "customer_id"),
        Index("ix_sales_pair", "establishment", "point_of_sale"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    invoice_no: Mapped[str] = mapped_column(String(15), unique=True, nullable=False)
    establishment: Mapped[str] = mapped_column(String(3), nullable=False)
    point_of_sale: Mapped[str] = mapped_column(String(3), nullable=False)
    customer_id: Mapped[int | None] = mapped_column(ForeignKey("customers.id"))
    work_order_id: Mapped[int | None] = mapped_column(ForeignKey("work_orders.id"))
    issued_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    subtotal: Mapped[Decimal] = mapped_column(Numeric(14, 0), nullable=False)
    tax: Mapped[Decimal] = mapped_column(Numeric(14, 0), nullable=False)
    total: Mapped[Decimal] = mapped_column(Numeric(14, 0), nullable=False)
    payment_method: Mapped[PaymentMethodEnum] = mapped_column(
        SAEnum(
            PaymentMethodEnum,
            native_enum=False,
            create_constraint=False,
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
    )
    tourism_regime: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )
    timbrado_number: Mapped[str] = mapped_column(String(50), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    items: Mapped[list["SaleItem"]] = relationship(
        "SaleItem",
        cascade="all, delete-orphan",
        order_by="SaleItem.id",
    )
