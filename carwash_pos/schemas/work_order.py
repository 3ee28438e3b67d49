from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, model_validator

from ..models import WorkOrderStatusEnum


class WorkOrderItemIn(BaseModel):
    service_id: int | None = None
    combo_id: int | None = None
    name: str | None = None
    price: Decimal | None = Field(None, ge=0, decimal_places=0)
    quantity: int = Field(1, gt=0)

    @model_validator(mode="after")
    def one_source(self):
        if self.service_id is not None and self.combo_id is not None:
            raise ValueError("Item references both a service and a combo")
        if self.service_id is None and self.combo_id is None:
            if not self.name or self.price is None:
                raise ValueError("Free-text items need a name and a price")
        return self


class WorkOrderIn(BaseModel):
    customer_id: int
    vehicle_id: int
    notes: str | None = None
    items: list[WorkOrderItemIn] = Field(default_factory=list)


class WorkOrderStatusIn(BaseModel):
    status: WorkOrderStatusEnum


class WorkOrderItemRead(BaseModel):
    id: int
    service_id: int | None
    combo_id: int | None
    name: str
    price: Decimal
    quantity: int

    model_config = {"from_attributes": True}


class WorkOrderRead(BaseModel):
    id: int
    number: int
    customer_id: int
    vehicle_id: int
    status: WorkOrderStatusEnum
    received_at: datetime
    started_at: datetime | None
    finished_at: datetime | None
    delivered_at: datetime | None
    notes: str | None
    total: Decimal
    items: list[WorkOrderItemRead]

    model_config = {"from_attributes": True}
