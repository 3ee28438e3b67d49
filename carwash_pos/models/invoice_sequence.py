from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, utcnow


class InvoiceSequence(Base):
    """Lock row per establishment/point-of-sale pair.

    Touching the row inside the sale transaction serializes number claims
    for the pair. The last issued number itself is always read back from
    ``sales``.
    """

    __tablename__ = "invoice_sequences"

    establishment: Mapped[str] = mapped_column(String(3), primary_key=True)
    point_of_sale: Mapped[str] = mapped_column(String(3), primary_key=True)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
