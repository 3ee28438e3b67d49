import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..models import InventoryItem, StockAlertEnum
from ..schemas import InventoryItemIn

logger = logging.getLogger(__name__)


def alert_for(stock: int, min_stock: int) -> StockAlertEnum:
    if stock <= 0:
        return StockAlertEnum.CRITICAL
    if stock <= min_stock:
        return StockAlertEnum.LOW
    return StockAlertEnum.NORMAL


def apply_stock(item: InventoryItem, stock: int) -> None:
    previous = item.alert_status
    item.stock = stock
    item.alert_status = alert_for(stock, item.min_stock)
    if item.alert_status != previous:
        logger.info(
            "Inventory item %s alert %s -> %s (stock=%s)",
            item.id,
            getattr(previous, "value", previous),
            item.alert_status.value,
            stock,
        )


def create_item(db: Session, payload: InventoryItemIn) -> InventoryItem:
    item = InventoryItem(**payload.model_dump())
    item.alert_status = alert_for(item.stock, item.min_stock)
    db.add(item)
    db.commit()
    db.refresh(item)
    return item


def update_item(db: Session, item: InventoryItem, payload: InventoryItemIn) -> InventoryItem:
    for field, value in payload.model_dump().items():
        setattr(item, field, value)
    apply_stock(item, item.stock)
    db.commit()
    db.refresh(item)
    return item


def adjust_stock(db: Session, item: InventoryItem, stock: int) -> InventoryItem:
    apply_stock(item, stock)
    db.commit()
    db.refresh(item)
    return item


def list_items(
    db: Session, alert: StockAlertEnum | None = None
) -> list[InventoryItem]:
    query = select(InventoryItem).order_by(InventoryItem.name)
    if alert is not None:
        query = query.where(InventoryItem.alert_status == alert)
    return list(db.scalars(query))
