from datetime import date, datetime

from pydantic import BaseModel, Field, field_validator

CODE_PATTERN = r"^\d{3}$"


class CompanyConfigIn(BaseModel):
    ruc: str
    legal_name: str = Field(min_length=1, max_length=255)
    trade_name: str | None = None
    timbrado_number: str = Field(min_length=1, max_length=50)
    timbrado_valid_from: date
    timbrado_valid_until: date
    establishment: str = Field("001", pattern=CODE_PATTERN)
    point_of_sale: str = Field("001", pattern=CODE_PATTERN)
    address: str = Field(min_length=1, max_length=255)
    city: str = "Asunción"
    phone: str | None = None
    email: str | None = None
    currency: str = "PYG"

    @field_validator("ruc")
    @classmethod
    def ruc_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("RUC is required")
        return value


class CompanyConfigRead(CompanyConfigIn):
    id: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class TimbradoStatus(BaseModel):
    is_valid: bool
    blocks_invoicing: bool
    days_left: int | None
    error_message: str | None
    level: str
    message: str
