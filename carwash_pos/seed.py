from __future__ import annotations

from decimal import Decimal

from sqlalchemy import select

from .db import SessionLocal
from .models import Service, ServiceCategoryEnum


SEED_SERVICES = [
    {"name": "Lavado Básico", "price": 35000, "duration_min": 30, "category": ServiceCategoryEnum.BASICO},
    {"name": "Lavado Premium", "price": 65000, "duration_min": 60, "category": ServiceCategoryEnum.PREMIUM},
    {"name": "Encerado", "price": 45000, "duration_min": 45, "category": ServiceCategoryEnum.ENCERADO},
    {"name": "Limpieza Motor", "price": 25000, "duration_min": 30, "category": ServiceCategoryEnum.MOTOR},
    {"name": "Limpieza Tapizado", "price": 55000, "duration_min": 90, "category": ServiceCategoryEnum.TAPIZADO},
]


def seed_services() -> int:
    created = 0
    with SessionLocal() as session:
        for entry in SEED_SERVICES:
            exists = session.execute(
                select(Service).where(Service.name == entry["name"])
            ).scalar_one_or_none()
            if exists:
                continue
            session.add(
                Service(
                    name=entry["name"],
                    price=Decimal(entry["price"]),
                    duration_min=entry["duration_min"],
                    category=entry["category"],
                    active=True,
                )
            )
            created += 1
        if created:
            session.commit()
    return created


def main() -> None:
    created = seed_services()
    print(f"Seeded services: {created}")


if __name__ == "__main__":
    main()
