from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..db import get_db
from ..models import Service, ServiceCombo
from ..schemas import (
    ComboIn,
    ComboRead,
    ComboUpdate,
    ServiceIn,
    ServiceRead,
    ServiceUpdate,
)
from ..services import catalog as catalog_service

router = APIRouter()


@router.get("/services", response_model=list[ServiceRead])
def services_list(db: Session = Depends(get_db)):
    return catalog_service.list_services(db)


@router.get("/services/active", response_model=list[ServiceRead])
def services_active(db: Session = Depends(get_db)):
    return catalog_service.list_services(db, active_only=True)


@router.get("/services/{service_id}", response_model=ServiceRead)
def services_get(service_id: int, db: Session = Depends(get_db)):
    return _get_service(db, service_id)


@router.post("/services", response_model=ServiceRead, status_code=201)
def services_create(payload: ServiceIn, db: Session = Depends(get_db)):
    return catalog_service.create_service(db, payload)


@router.put("/services/{service_id}", response_model=ServiceRead)
def services_update(
    service_id: int, payload: ServiceUpdate, db: Session = Depends(get_db)
):
    return catalog_service.update_service(db, _get_service(db, service_id), payload)


@router.delete("/services/{service_id}")
def services_deactivate(service_id: int, db: Session = Depends(get_db)) -> dict:
    service = _get_service(db, service_id)
    catalog_service.update_service(db, service, ServiceUpdate(active=False))
    return {"message": "Service deactivated."}


@router.get("/service-combos", response_model=list[ComboRead])
def combos_list(db: Session = Depends(get_db)) -> list[ComboRead]:
    return [
        catalog_service.combo_to_read(combo)
        for combo in catalog_service.list_combos(db)
    ]


@router.get("/service-combos/active", response_model=list[ComboRead])
def combos_active(db: Session = Depends(get_db)) -> list[ComboRead]:
    return [
        catalog_service.combo_to_read(combo)
        for combo in catalog_service.list_combos(db, active_only=True)
    ]


@router.get("/service-combos/{combo_id}", response_model=ComboRead)
def combos_get(combo_id: int, db: Session = Depends(get_db)) -> ComboRead:
    return catalog_service.combo_to_read(_get_combo(db, combo_id))


@router.post("/service-combos", response_model=ComboRead, status_code=201)
def combos_create(payload: ComboIn, db: Session = Depends(get_db)) -> ComboRead:
    return catalog_service.combo_to_read(catalog_service.create_combo(db, payload))


@router.put("/service-combos/{combo_id}", response_model=ComboRead)
def combos_update(
    combo_id: int, payload: ComboUpdate, db: Session = Depends(get_db)
) -> ComboRead:
    combo = catalog_service.update_combo(db, _get_combo(db, combo_id), payload)
    return catalog_service.combo_to_read(combo)


@router.delete("/service-combos/{combo_id}")
def combos_deactivate(combo_id: int, db: Session = Depends(get_db)) -> dict:
    combo = _get_combo(db, combo_id)
    catalog_service.update_combo(db, combo, ComboUpdate(active=False))
    return {"message": "Service combo deactivated."}


def _get_service(db: Session, service_id: int) -> Service:
    service = db.get(Service, service_id)
    if not service:
        raise HTTPException(status_code=404, detail="Service not found.")
    return service


def _get_combo(db: Session, combo_id: int) -> ServiceCombo:
    combo = db.get(ServiceCombo, combo_id)
    if not combo:
        raise HTTPException(status_code=404, detail="Service combo not found.")
    return combo
