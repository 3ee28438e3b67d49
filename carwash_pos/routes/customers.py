from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from ..db import get_db
from ..models import Customer, Sale, Vehicle, WorkOrder
from ..schemas import CustomerIn, CustomerRead, VehicleIn, VehicleRead

router = APIRouter()


@router.get("/customers", response_model=list[CustomerRead])
def customers_list(q: str | None = None, db: Session = Depends(get_db)):
    query = select(Customer).order_by(Customer.name)
    if q:
        like = f"%{q}%"
        query = query.where(
            or_(Customer.name.ilike(like), Customer.doc_number.ilike(like))
        )
    return db.execute(query).scalars().all()


@router.post("/customers", response_model=CustomerRead, status_code=201)
def customers_create(payload: CustomerIn, db: Session = Depends(get_db)):
    customer = Customer(**payload.model_dump())
    db.add(customer)
    db.commit()
    db.refresh(customer)
    return customer


@router.get("/customers/{customer_id}", response_model=CustomerRead)
def customers_get(customer_id: int, db: Session = Depends(get_db)):
    return _get_customer(db, customer_id)


@router.put("/customers/{customer_id}", response_model=CustomerRead)
def customers_update(
    customer_id: int, payload: CustomerIn, db: Session = Depends(get_db)
):
    customer = _get_customer(db, customer_id)
    for field, value in payload.model_dump().items():
        setattr(customer, field, value)
    db.commit()
    db.refresh(customer)
    return customer


@router.delete("/customers/{customer_id}", status_code=204)
def customers_delete(customer_id: int, db: Session = Depends(get_db)) -> None:
    customer = _get_customer(db, customer_id)
    in_use = db.execute(
        select(Sale.id).where(Sale.customer_id == customer.id).limit(1)
    ).scalar_one_or_none() or db.execute(
        select(WorkOrder.id).where(WorkOrder.customer_id == customer.id).limit(1)
    ).scalar_one_or_none()
    if in_use:
        raise HTTPException(
            status_code=409, detail="Cannot delete: customer has sales or work orders."
        )
    for vehicle in db.execute(
        select(Vehicle).where(Vehicle.customer_id == customer.id)
    ).scalars():
        db.delete(vehicle)
    db.delete(customer)
    db.commit()


@router.get("/customers/{customer_id}/vehicles", response_model=list[VehicleRead])
def customer_vehicles(customer_id: int, db: Session = Depends(get_db)):
    _get_customer(db, customer_id)
    return db.execute(
        select(Vehicle).where(Vehicle.customer_id == customer_id).order_by(Vehicle.plate)
    ).scalars().all()


@router.get("/vehicles", response_model=list[VehicleRead])
def vehicles_list(q: str | None = None, db: Session = Depends(get_db)):
    query = select(Vehicle).order_by(Vehicle.plate)
    if q:
        query = query.where(Vehicle.plate.ilike(f"%{q}%"))
    return db.execute(query).scalars().all()


@router.post("/vehicles", response_model=VehicleRead, status_code=201)
def vehicles_create(payload: VehicleIn, db: Session = Depends(get_db)):
    _get_customer(db, payload.customer_id)
    vehicle = Vehicle(**payload.model_dump())
    db.add(vehicle)
    db.commit()
    db.refresh(vehicle)
    return vehicle


@router.put("/vehicles/{vehicle_id}", response_model=VehicleRead)
def vehicles_update(
    vehicle_id: int, payload: VehicleIn, db: Session = Depends(get_db)
):
    vehicle = db.get(Vehicle, vehicle_id)
    if not vehicle:
        raise HTTPException(status_code=404, detail="Vehicle not found.")
    _get_customer(db, payload.customer_id)
    for field, value in payload.model_dump().items():
        setattr(vehicle, field, value)
    db.commit()
    db.refresh(vehicle)
    return vehicle


@router.delete("/vehicles/{vehicle_id}", status_code=204)
def vehicles_delete(vehicle_id: int, db: Session = Depends(get_db)) -> None:
    vehicle = db.get(Vehicle, vehicle_id)
    if not vehicle:
        raise HTTPException(status_code=404, detail="Vehicle not found.")
    in_use = db.execute(
        select(WorkOrder.id).where(WorkOrder.vehicle_id == vehicle.id).limit(1)
    ).scalar_one_or_none()
    if in_use:
        raise HTTPException(
            status_code=409, detail="Cannot delete: vehicle has work orders."
        )
    db.delete(vehicle)
    db.commit()


def _get_customer(db: Session, customer_id: int) -> Customer:
    customer = db.get(Customer, customer_id)
    if not customer:
        raise HTTPException(status_code=404, detail="Customer not found.")
    return customer
