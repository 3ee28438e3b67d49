from datetime import date, timedelta
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from carwash_pos.db import get_db
from carwash_pos.main import app
from carwash_pos.models import (
    Base,
    CompanyConfig,
    Customer,
    Service,
    ServiceCategoryEnum,
    Vehicle,
)


@pytest.fixture()
def engine(tmp_path):
    db_path = tmp_path / "test.db"
    engine = create_engine(
        f"sqlite+pysqlite:///{db_path}",
        connect_args={"check_same_thread": False, "timeout": 30},
    )
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture()
def SessionLocal(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture()
def db_session(SessionLocal):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(SessionLocal):
    def override_get_db():
        db = SessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture()
def company_config(db_session):
    today = date.today()
    config = CompanyConfig(
        ruc="80012345-6",
        legal_name="Lavadero Central S.A.",
        trade_name="Lavadero Central",
        timbrado_number="12345678",
        timbrado_valid_from=today - timedelta(days=320),
        timbrado_valid_until=today + timedelta(days=45),
        establishment="001",
        point_of_sale="001",
        address="Av. Mariscal López 1234",
        city="Asunción",
        currency="PYG",
    )
    db_session.add(config)
    db_session.commit()
    return config


@pytest.fixture()
def local_customer(db_session):
    customer = Customer(name="Juan Pérez", doc_type="CI", doc_number="12345678")
    db_session.add(customer)
    db_session.commit()
    return customer


@pytest.fixture()
def tourist_customer(db_session):
    customer = Customer(
        name="John Smith",
        doc_type="PASS",
        doc_number="US123456789",
        tourism_regime=True,
        country="US",
        passport="US123456789",
    )
    db_session.add(customer)
    db_session.commit()
    return customer


@pytest.fixture()
def vehicle(db_session, local_customer):
    vehicle = Vehicle(
        customer_id=local_customer.id,
        plate="ABC123",
        make="Toyota",
        model="Corolla",
        color="Blanco",
    )
    db_session.add(vehicle)
    db_session.commit()
    return vehicle


@pytest.fixture()
def basic_wash(db_session):
    service = Service(
        name="Lavado Básico",
        price=Decimal("35000"),
        duration_min=30,
        category=ServiceCategoryEnum.BASICO,
    )
    db_session.add(service)
    db_session.commit()
    return service


@pytest.fixture()
def premium_wash(db_session):
    service = Service(
        name="Lavado Premium",
        price=Decimal("65000"),
        duration_min=60,
        category=ServiceCategoryEnum.PREMIUM,
    )
    db_session.add(service)
    db_session.commit()
    return service
