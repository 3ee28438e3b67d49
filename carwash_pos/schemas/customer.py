from datetime import date, datetime

from pydantic import BaseModel, Field

from ..models import DocTypeEnum


class CustomerIn(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    doc_type: DocTypeEnum = DocTypeEnum.CI
    doc_number: str = Field(min_length=1, max_length=50)
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    tourism_regime: bool = False
    country: str | None = Field(None, min_length=2, max_length=2)
    passport: str | None = None
    entry_date: date | None = None


class CustomerRead(CustomerIn):
    id: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class VehicleIn(BaseModel):
    customer_id: int
    plate: str = Field(min_length=1, max_length=20)
    make: str = Field(min_length=1, max_length=100)
    model: str = Field(min_length=1, max_length=100)
    color: str = Field(min_length=1, max_length=50)
    notes: str | None = None


class VehicleRead(VehicleIn):
    id: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
