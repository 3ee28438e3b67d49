from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..db import get_db
from ..models import WorkOrder, WorkOrderStatusEnum
from ..schemas import WorkOrderIn, WorkOrderRead, WorkOrderStatusIn
from ..services import work_orders as work_orders_service

router = APIRouter()


@router.get("/work-orders", response_model=list[WorkOrderRead])
def work_orders_list(
    status: WorkOrderStatusEnum | None = None, db: Session = Depends(get_db)
):
    return work_orders_service.list_work_orders(db, status)


@router.post("/work-orders", response_model=WorkOrderRead, status_code=201)
def work_orders_create(payload: WorkOrderIn, db: Session = Depends(get_db)):
    return work_orders_service.create_work_order(db, payload)


@router.get("/work-orders/{work_order_id}", response_model=WorkOrderRead)
def work_orders_get(work_order_id: int, db: Session = Depends(get_db)):
    return _get_work_order(db, work_order_id)


@router.post("/work-orders/{work_order_id}/status", response_model=WorkOrderRead)
def work_orders_status(
    work_order_id: int, payload: WorkOrderStatusIn, db: Session = Depends(get_db)
):
    work_order = _get_work_order(db, work_order_id)
    return work_orders_service.update_status(db, work_order, payload.status)


def _get_work_order(db: Session, work_order_id: int) -> WorkOrder:
    work_order = db.get(WorkOrder, work_order_id)
    if not work_order:
        raise HTTPException(status_code=404, detail="Work order not found.")
    return work_order
