from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from ..models import ServiceCategoryEnum


class ServiceIn(BaseModel):
    name: str = Field(min_length=1, max_length=120)
    description: str | None = None
    price: Decimal = Field(ge=0, decimal_places=0)
    duration_min: int = Field(30, ge=5, le=480)
    category: ServiceCategoryEnum
    active: bool = True


class ServiceUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=120)
    description: str | None = None
    price: Decimal | None = Field(None, ge=0, decimal_places=0)
    duration_min: int | None = Field(None, ge=5, le=480)
    category: ServiceCategoryEnum | None = None
    active: bool | None = None


class ServiceRead(ServiceIn):
    id: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ComboIn(BaseModel):
    name: str = Field(min_length=1, max_length=120)
    description: str | None = None
    total_price: Decimal = Field(ge=0, decimal_places=0)
    active: bool = True
    service_ids: list[int] = Field(min_length=2)


class ComboUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=120)
    description: str | None = None
    total_price: Decimal | None = Field(None, ge=0, decimal_places=0)
    active: bool | None = None
    service_ids: list[int] | None = Field(None, min_length=2)


class ComboRead(BaseModel):
    id: int
    name: str
    description: str | None
    total_price: Decimal
    active: bool
    services: list[ServiceRead]
    created_at: datetime
    updated_at: datetime
