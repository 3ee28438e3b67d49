import logging
from decimal import Decimal

from fastapi import HTTPException
from sqlalchemy import select, text
from sqlalchemy.orm import Session

from ..models import (
    Customer,
    Service,
    ServiceCombo,
    Vehicle,
    WorkOrder,
    WorkOrderItem,
    WorkOrderStatusEnum,
)
from ..models.base import utcnow
from ..schemas import WorkOrderIn
from .money import line_subtotal, money

logger = logging.getLogger(__name__)

STATUS_ORDER = [
    WorkOrderStatusEnum.RECEIVED,
    WorkOrderStatusEnum.IN_PROGRESS,
    WorkOrderStatusEnum.READY,
    WorkOrderStatusEnum.DELIVERED,
]


def apply_status(work_order: WorkOrder, status: WorkOrderStatusEnum) -> None:
    """Move ``work_order`` to ``status`` and stamp the matching timestamps."""
    now = utcnow()
    previous = work_order.status
    work_order.status = status
    if status == WorkOrderStatusEnum.IN_PROGRESS and work_order.started_at is None:
        work_order.started_at = now
    if status == WorkOrderStatusEnum.READY:
        work_order.started_at = work_order.started_at or now
        work_order.finished_at = work_order.finished_at or now
    if status == WorkOrderStatusEnum.DELIVERED:
        work_order.finished_at = work_order.finished_at or now
        work_order.delivered_at = now
    logger.info(
        "Work order %s status %s -> %s",
        work_order.number,
        _status_value(previous),
        _status_value(status),
    )


def _status_value(value) -> str:
    return value.value if hasattr(value, "value") else str(value)


def update_status(
    db: Session, work_order: WorkOrder, status: WorkOrderStatusEnum
) -> WorkOrder:
    current = WorkOrderStatusEnum(_status_value(work_order.status))
    if current == WorkOrderStatusEnum.DELIVERED and status != current:
        raise HTTPException(status_code=409, detail="Work order already delivered.")
    if STATUS_ORDER.index(status) < STATUS_ORDER.index(current):
        raise HTTPException(status_code=409, detail="Work order status cannot go back.")
    apply_status(work_order, status)
    db.commit()
    db.refresh(work_order)
    return work_order


def _next_work_order_number(db: Session) -> int:
    now = utcnow()
    db.execute(
        text(
            "INSERT OR IGNORE INTO work_order_sequences (id, last_number, updated_at) "
            "VALUES (1, 0, :updated_at)"
        ),
        {"updated_at": now},
    )
    db.execute(
        text(
            "UPDATE work_order_sequences "
            "SET last_number = last_number + 1, updated_at = :updated_at "
            "WHERE id = 1"
        ),
        {"updated_at": now},
    )
    return db.execute(
        text("SELECT last_number FROM work_order_sequences WHERE id = 1")
    ).scalar_one()


def _build_items(db: Session, payload: WorkOrderIn) -> list[WorkOrderItem]:
    items: list[WorkOrderItem] = []
    for entry in payload.items:
        name = entry.name
        price = entry.price
        if entry.service_id is not None:
            service = db.get(Service, entry.service_id)
            if not service:
                raise HTTPException(status_code=400, detail="Unknown service.")
            name = name or service.name
            price = service.price if price is None else price
        elif entry.combo_id is not None:
            combo = db.get(ServiceCombo, entry.combo_id)
            if not combo:
                raise HTTPException(status_code=400, detail="Unknown service combo.")
            name = name or combo.name
            price = combo.total_price if price is None else price
        items.append(
            WorkOrderItem(
                service_id=entry.service_id,
                combo_id=entry.combo_id,
                name=name,
                price=money(price),
                quantity=entry.quantity,
            )
        )
    return items


def create_work_order(db: Session, payload: WorkOrderIn) -> WorkOrder:
    if not db.get(Customer, payload.customer_id):
        raise HTTPException(status_code=400, detail="Unknown customer.")
    vehicle = db.get(Vehicle, payload.vehicle_id)
    if not vehicle:
        raise HTTPException(status_code=400, detail="Unknown vehicle.")
    if vehicle.customer_id != payload.customer_id:
        raise HTTPException(
            status_code=400, detail="Vehicle does not belong to customer."
        )

    items = _build_items(db, payload)
    total = sum((line_subtotal(item.price, item.quantity) for item in items), Decimal("0"))
    try:
        work_order = WorkOrder(
            number=_next_work_order_number(db),
            customer_id=payload.customer_id,
            vehicle_id=payload.vehicle_id,
            status=WorkOrderStatusEnum.RECEIVED,
            notes=payload.notes,
            total=money(total),
            items=items,
        )
        db.add(work_order)
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("Work order creation failed")
        raise
    db.refresh(work_order)
    return work_order


def list_work_orders(
    db: Session, status: WorkOrderStatusEnum | None = None
) -> list[WorkOrder]:
    query = select(WorkOrder).order_by(WorkOrder.number.desc())
    if status is not None:
        query = query.where(WorkOrder.status == status)
    return list(db.scalars(query))
