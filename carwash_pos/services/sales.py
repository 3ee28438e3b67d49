"""Sale construction: cart -> totals -> billing gate -> numbered invoice."""
import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..config import settings
from ..errors import (
    BillingError,
    EmptyCartError,
    PersistenceFailedError,
    SaleValidationError,
)
from ..models import (
    Customer,
    InventoryItem,
    Sale,
    SaleItem,
    Service,
    ServiceCombo,
    WorkOrder,
    WorkOrderStatusEnum,
)
from ..schemas import AdHocLine, ComboLine, ProductLine, SaleCreate, ServiceLine
from .billing_gate import guard
from .company import get_fiscal_authorization
from .fiscal import FiscalAuthorization
from .inventory import apply_stock
from .invoice_numbers import claim_invoice_number, pair_lock
from .money import compute_tax, line_subtotal, money
from .work_orders import apply_status

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedLine:
    name: str
    unit_price: Decimal
    quantity: int
    service_id: int | None = None
    inventory_item_id: int | None = None

    @property
    def subtotal(self) -> Decimal:
        return line_subtotal(self.unit_price, self.quantity)


@dataclass(frozen=True)
class SaleTotals:
    subtotal: Decimal
    tax: Decimal
    total: Decimal


def compute_totals(
    lines: list[ResolvedLine], tourism_regime: bool, rate: Decimal | None = None
) -> SaleTotals:
    rate = settings.tax_rate if rate is None else rate
    subtotal = money(sum((line.subtotal for line in lines), Decimal("0")))
    tax = compute_tax(subtotal, rate, exempt=tourism_regime)
    return SaleTotals(subtotal=subtotal, tax=tax, total=money(subtotal + tax))


def resolve_lines(db: Session, items) -> list[ResolvedLine]:
    lines: list[ResolvedLine] = []
    for item in items:
        if isinstance(item, ServiceLine):
            service = db.get(Service, item.service_id)
            if not service:
                raise SaleValidationError(
                    "Unknown service", details=f"service_id={item.service_id}"
                )
            lines.append(
                ResolvedLine(
                    name=item.name or service.name,
                    unit_price=money(
                        service.price if item.unit_price is None else item.unit_price
                    ),
                    quantity=item.quantity,
                    service_id=service.id,
                )
            )
        elif isinstance(item, ComboLine):
            combo = db.get(ServiceCombo, item.combo_id)
            if not combo:
                raise SaleValidationError(
                    "Unknown service combo", details=f"combo_id={item.combo_id}"
                )
            lines.append(
                ResolvedLine(
                    name=item.name or combo.name,
                    unit_price=money(
                        combo.total_price if item.unit_price is None else item.unit_price
                    ),
                    quantity=item.quantity,
                )
            )
        elif isinstance(item, ProductLine):
            stock_item = db.get(InventoryItem, item.inventory_item_id)
            if not stock_item:
                raise SaleValidationError(
                    "Unknown inventory item",
                    details=f"inventory_item_id={item.inventory_item_id}",
                )
            lines.append(
                ResolvedLine(
                    name=item.name or stock_item.name,
                    unit_price=money(item.unit_price),
                    quantity=item.quantity,
                    inventory_item_id=stock_item.id,
                )
            )
        elif isinstance(item, AdHocLine):
            lines.append(
                ResolvedLine(
                    name=item.name,
                    unit_price=money(item.unit_price),
                    quantity=item.quantity,
                )
            )
        else:
            raise SaleValidationError("Unsupported line item")
    return lines


def create_sale(db: Session, payload: SaleCreate, today: date | None = None) -> Sale:
    if not payload.items:
        raise EmptyCartError()

    work_order = None
    if payload.work_order_id is not None:
        work_order = db.get(WorkOrder, payload.work_order_id)
        if not work_order:
            raise SaleValidationError(
                "Unknown work order", details=f"work_order_id={payload.work_order_id}"
            )
        already_invoiced = db.execute(
            select(Sale.invoice_no)
            .where(Sale.work_order_id == work_order.id)
            .order_by(Sale.id)
        ).scalars().first()
        if already_invoiced:
            raise SaleValidationError(
                "Work order already invoiced", details=already_invoiced
            )

    customer_id = payload.customer_id
    if customer_id is None and work_order is not None:
        customer_id = work_order.customer_id
        logger.info(
            "Defaulted customer_id from work_order_id=%s to %s",
            work_order.id,
            customer_id,
        )

    customer = None
    if customer_id is not None:
        customer = db.get(Customer, customer_id)
        if not customer:
            raise SaleValidationError(
                "Unknown customer", details=f"customer_id={customer_id}"
            )

    lines = resolve_lines(db, payload.items)
    tourism_regime = bool(customer and customer.tourism_regime)
    totals = compute_totals(lines, tourism_regime)

    def issue(authorization: FiscalAuthorization) -> Sale:
        return _persist_sale(
            db,
            authorization,
            payload,
            customer,
            work_order,
            lines,
            totals,
            tourism_regime,
        )

    return guard(get_fiscal_authorization(db), today or date.today(), issue)


def _persist_sale(
    db: Session,
    authorization: FiscalAuthorization,
    payload: SaleCreate,
    customer: Customer | None,
    work_order: WorkOrder | None,
    lines: list[ResolvedLine],
    totals: SaleTotals,
    tourism_regime: bool,
) -> Sale:
    with pair_lock(authorization.establishment, authorization.point_of_sale):
        try:
            invoice_no = claim_invoice_number(
                db, authorization.establishment, authorization.point_of_sale
            )
            sale = Sale(
                invoice_no=invoice_no,
                establishment=authorization.establishment,
                point_of_sale=authorization.point_of_sale,
                customer_id=customer.id if customer else None,
                work_order_id=work_order.id if work_order else None,
                subtotal=totals.subtotal,
                tax=totals.tax,
                total=totals.total,
                payment_method=payload.payment_method,
                tourism_regime=tourism_regime,
                timbrado_number=authorization.number,
            )
            db.add(sale)
            db.flush()

            for line in lines:
                db.add(
                    SaleItem(
                        sale_id=sale.id,
                        service_id=line.service_id,
                        inventory_item_id=line.inventory_item_id,
                        name=line.name,
                        quantity=line.quantity,
                        unit_price=line.unit_price,
                        subtotal=line.subtotal,
                    )
                )
                if line.inventory_item_id is not None:
                    stock_item = db.get(InventoryItem, line.inventory_item_id)
                    apply_stock(stock_item, stock_item.stock - line.quantity)
            db.flush()

            if work_order is not None:
                apply_status(work_order, WorkOrderStatusEnum.DELIVERED)

            db.commit()
        except BillingError:
            db.rollback()
            raise
        except SQLAlchemyError as exc:
            db.rollback()
            logger.exception("Sale persistence failed")
            raise PersistenceFailedError(
                "Could not save the sale", details="No invoice was issued; retry."
            ) from exc
        except Exception:
            db.rollback()
            logger.exception("Sale persistence failed")
            raise

    db.refresh(sale)
    logger.info(
        "Issued invoice %s total=%s tourism=%s",
        sale.invoice_no,
        sale.total,
        sale.tourism_regime,
    )
    return sale


def list_sales(db: Session) -> list[Sale]:
    return list(
        db.scalars(select(Sale).order_by(Sale.issued_at.desc(), Sale.id.desc()))
    )


def get_sale(db: Session, sale_id: int) -> Sale | None:
    return db.get(Sale, sale_id)
