from datetime import date

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..config import settings
from ..db import get_db
from ..schemas import CompanyConfigIn, CompanyConfigRead, TimbradoStatus
from ..services import company as company_service
from ..services.fiscal import check_validity

router = APIRouter()


@router.get("/company-config", response_model=CompanyConfigRead | None)
def company_config_get(db: Session = Depends(get_db)):
    return company_service.get_company_config(db)


@router.put("/company-config", response_model=CompanyConfigRead)
def company_config_save(
    payload: CompanyConfigIn, db: Session = Depends(get_db)
) -> CompanyConfigRead:
    return company_service.save_company_config(db, payload)


@router.get("/timbrado/status", response_model=TimbradoStatus)
def timbrado_status(db: Session = Depends(get_db)) -> TimbradoStatus:
    verdict = check_validity(
        company_service.get_fiscal_authorization(db),
        date.today(),
        warning_days=settings.timbrado_warning_days,
    )
    return TimbradoStatus(
        is_valid=verdict.is_valid,
        blocks_invoicing=verdict.blocks_invoicing,
        days_left=verdict.days_left,
        error_message=verdict.error_message,
        level=verdict.level,
        message=verdict.message,
    )
