from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models import CompanyConfig
from ..schemas import CompanyConfigIn
from .fiscal import FiscalAuthorization, validate_timbrado_dates


def get_company_config(db: Session) -> CompanyConfig | None:
    return db.execute(
        select(CompanyConfig).order_by(CompanyConfig.id).limit(1)
    ).scalar_one_or_none()


def to_authorization(config: CompanyConfig | None) -> FiscalAuthorization | None:
    if config is None:
        return None
    return FiscalAuthorization(
        number=config.timbrado_number,
        valid_from=config.timbrado_valid_from,
        valid_until=config.timbrado_valid_until,
        establishment=config.establishment,
        point_of_sale=config.point_of_sale,
    )


def get_fiscal_authorization(db: Session) -> FiscalAuthorization | None:
    return to_authorization(get_company_config(db))


def save_company_config(db: Session, payload: CompanyConfigIn) -> CompanyConfig:
    validate_timbrado_dates(payload.timbrado_valid_from, payload.timbrado_valid_until)

    config = get_company_config(db)
    if config is None:
        config = CompanyConfig(**payload.model_dump())
        db.add(config)
    else:
        for field, value in payload.model_dump().items():
            setattr(config, field, value)
    db.commit()
    db.refresh(config)
    return config
