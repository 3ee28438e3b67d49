from fastapi import HTTPException
from sqlalchemy import select, true
from sqlalchemy.orm import Session

from ..models import Service, ServiceCombo, ServiceComboItem
from ..schemas import (
    ComboIn,
    ComboRead,
    ComboUpdate,
    ServiceIn,
    ServiceRead,
    ServiceUpdate,
)


def list_services(db: Session, active_only: bool = False) -> list[Service]:
    query = select(Service).order_by(Service.name)
    if active_only:
        query = query.where(Service.active == true())
    return list(db.scalars(query))


def create_service(db: Session, payload: ServiceIn) -> Service:
    service = Service(**payload.model_dump())
    db.add(service)
    db.commit()
    db.refresh(service)
    return service


def update_service(db: Session, service: Service, payload: ServiceUpdate) -> Service:
    for field, value in payload.model_dump(exclude_unset=True).items():
        setattr(service, field, value)
    db.commit()
    db.refresh(service)
    return service


def _combo_items(db: Session, service_ids: list[int]) -> list[ServiceComboItem]:
    found = set(
        db.scalars(select(Service.id).where(Service.id.in_(service_ids)))
    )
    missing = [service_id for service_id in service_ids if service_id not in found]
    if missing:
        raise HTTPException(
            status_code=400, detail=f"Unknown services: {missing}"
        )
    return [ServiceComboItem(service_id=service_id) for service_id in service_ids]


def list_combos(db: Session, active_only: bool = False) -> list[ServiceCombo]:
    query = select(ServiceCombo).order_by(ServiceCombo.name)
    if active_only:
        query = query.where(ServiceCombo.active == true())
    return list(db.scalars(query))


def create_combo(db: Session, payload: ComboIn) -> ServiceCombo:
    data = payload.model_dump(exclude={"service_ids"})
    combo = ServiceCombo(**data, items=_combo_items(db, payload.service_ids))
    db.add(combo)
    db.commit()
    db.refresh(combo)
    return combo


def update_combo(db: Session, combo: ServiceCombo, payload: ComboUpdate) -> ServiceCombo:
    data = payload.model_dump(exclude_unset=True, exclude={"service_ids"})
    for field, value in data.items():
        setattr(combo, field, value)
    if payload.service_ids is not None:
        combo.items = _combo_items(db, payload.service_ids)
    db.commit()
    db.refresh(combo)
    return combo


def combo_to_read(combo: ServiceCombo) -> ComboRead:
    return ComboRead(
        id=combo.id,
        name=combo.name,
        description=combo.description,
        total_price=combo.total_price,
        active=combo.active,
        services=[ServiceRead.model_validate(item.service) for item in combo.items],
        created_at=combo.created_at,
        updated_at=combo.updated_at,
    )
