from datetime import datetime

from pydantic import BaseModel, Field

from ..models import StockAlertEnum, StockUnitEnum


class InventoryItemIn(BaseModel):
    name: str = Field(min_length=1, max_length=120)
    description: str | None = None
    stock: int = 0
    min_stock: int = Field(0, ge=0)
    unit: StockUnitEnum = StockUnitEnum.UN
    supplier: str | None = None
    last_order: str | None = None
    active: bool = True


class StockAdjustIn(BaseModel):
    stock: int


class InventoryItemRead(InventoryItemIn):
    id: int
    alert_status: StockAlertEnum
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
