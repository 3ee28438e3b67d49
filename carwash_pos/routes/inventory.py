from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..db import get_db
from ..models import InventoryItem, StockAlertEnum
from ..schemas import InventoryItemIn, InventoryItemRead, StockAdjustIn
from ..services import inventory as inventory_service

router = APIRouter(prefix="/inventory")


@router.get("", response_model=list[InventoryItemRead])
def inventory_list(
    alert: StockAlertEnum | None = None, db: Session = Depends(get_db)
):
    return inventory_service.list_items(db, alert)


@router.post("", response_model=InventoryItemRead, status_code=201)
def inventory_create(payload: InventoryItemIn, db: Session = Depends(get_db)):
    return inventory_service.create_item(db, payload)


@router.put("/{item_id}", response_model=InventoryItemRead)
def inventory_update(
    item_id: int, payload: InventoryItemIn, db: Session = Depends(get_db)
):
    return inventory_service.update_item(db, _get_item(db, item_id), payload)


@router.post("/{item_id}/stock", response_model=InventoryItemRead)
def inventory_adjust_stock(
    item_id: int, payload: StockAdjustIn, db: Session = Depends(get_db)
):
    return inventory_service.adjust_stock(db, _get_item(db, item_id), payload.stock)


def _get_item(db: Session, item_id: int) -> InventoryItem:
    item = db.get(InventoryItem, item_id)
    if not item:
        raise HTTPException(status_code=404, detail="Inventory item not found.")
    return item
