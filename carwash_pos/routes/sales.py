from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from ..config import settings
from ..db import get_db
from ..models import Customer, Sale
from ..schemas import SaleCreate, SaleRead
from ..services import company as company_service
from ..services import sales as sales_service
from ..services.billing_gate import require_active_timbrado
from ..services.money import format_guarani

router = APIRouter(prefix="/sales")
templates = Jinja2Templates(
    directory=str(Path(__file__).resolve().parent.parent / "templates")
)
templates.env.filters["guarani"] = format_guarani


@router.get("", response_model=list[SaleRead])
def sales_list(db: Session = Depends(get_db)):
    return sales_service.list_sales(db)


@router.post("", response_model=SaleRead, status_code=201)
def sales_create(payload: SaleCreate, db: Session = Depends(get_db)):
    return sales_service.create_sale(db, payload)


@router.get("/{sale_id}", response_model=SaleRead)
def sales_get(sale_id: int, db: Session = Depends(get_db)):
    return _get_sale(db, sale_id)


@router.get("/{sale_id}/print", response_class=HTMLResponse)
def sales_print(
    sale_id: int, request: Request, db: Session = Depends(get_db)
) -> HTMLResponse:
    sale = _get_sale(db, sale_id)
    customer = db.get(Customer, sale.customer_id) if sale.customer_id else None
    return templates.TemplateResponse(
        request,
        "sales/print.html",
        {
            "sale": sale,
            "items": sale.items,
            "customer": customer,
            "company": company_service.get_company_config(db),
            "tax_rate_percent": f"{(settings.tax_rate * 100).normalize():f}",
        },
    )


@router.post("/{sale_id}/receipt", dependencies=[Depends(require_active_timbrado)])
def sales_receipt(sale_id: int, db: Session = Depends(get_db)) -> dict:
    sale = _get_sale(db, sale_id)
    # Identity comes from the sale snapshot, not the current configuration.
    return {
        "invoice_no": sale.invoice_no,
        "total": str(sale.total),
        "timbrado": {
            "number": sale.timbrado_number,
            "establishment": sale.establishment,
            "point_of_sale": sale.point_of_sale,
        },
    }


def _get_sale(db: Session, sale_id: int) -> Sale:
    sale = sales_service.get_sale(db, sale_id)
    if not sale:
        raise HTTPException(status_code=404, detail="Sale not found.")
    return sale
