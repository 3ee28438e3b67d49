from datetime import datetime
from decimal import Decimal
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from ..models import PaymentMethodEnum


class _LineBase(BaseModel):
    quantity: int = Field(1, gt=0)


class ServiceLine(_LineBase):
    kind: Literal["service"]
    service_id: int
    name: str | None = None
    unit_price: Decimal | None = Field(None, ge=0, decimal_places=0)


class ComboLine(_LineBase):
    kind: Literal["combo"]
    combo_id: int
    name: str | None = None
    unit_price: Decimal | None = Field(None, ge=0, decimal_places=0)


class ProductLine(_LineBase):
    kind: Literal["product"]
    inventory_item_id: int
    name: str | None = None
    unit_price: Decimal = Field(ge=0, decimal_places=0)


class AdHocLine(_LineBase):
    kind: Literal["adhoc"]
    name: str = Field(min_length=1, max_length=255)
    unit_price: Decimal = Field(ge=0, decimal_places=0)


LineItemRequest = Annotated[
    Union[ServiceLine, ComboLine, ProductLine, AdHocLine],
    Field(discriminator="kind"),
]


class SaleCreate(BaseModel):
    customer_id: int | None = None
    work_order_id: int | None = None
    payment_method: PaymentMethodEnum
    items: list[LineItemRequest]


class SaleItemRead(BaseModel):
    id: int
    service_id: int | None
    inventory_item_id: int | None
    name: str
    quantity: int
    unit_price: Decimal
    subtotal: Decimal

    model_config = {"from_attributes": True}


class SaleRead(BaseModel):
    id: int
    invoice_no: str
    establishment: str
    point_of_sale: str
    customer_id: int | None
    work_order_id: int | None
    issued_at: datetime
    subtotal: Decimal
    tax: Decimal
    total: Decimal
    payment_method: PaymentMethodEnum
    tourism_regime: bool
    timbrado_number: str
    items: list[SaleItemRead]

    model_config = {"from_attributes": True}
