from sqlalchemy import select

from carwash_pos import seed
from carwash_pos.models import Service


def test_seed_services_is_idempotent(monkeypatch, SessionLocal):
    monkeypatch.setattr(seed, "SessionLocal", SessionLocal)

    assert seed.seed_services() == 5
    assert seed.seed_services() == 0

    with SessionLocal() as session:
        names = session.execute(select(Service.name).order_by(Service.price)).scalars().all()
    assert names[0] == "Limpieza Motor"
    assert len(names) == 5
