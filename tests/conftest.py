# conftest.py - a throwaway SQLite database per test, wired into the FastAPI app

import asyncio
import os
import tempfile

import pytest

# must be set before commission_hub.config is imported
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("LOG_FILE", os.path.join(tempfile.gettempdir(), "commission_hub_tests.log"))

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession  # noqa: E402
from sqlalchemy.pool import NullPool  # noqa: E402

from commission_hub.database import get_db, init_db  # noqa: E402
from main import app  # noqa: E402


@pytest.fixture()
def engine(tmp_path):
    # file database with NullPool, every connection sees the same tables on any event loop
    test_engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool)
    asyncio.run(init_db(test_engine))
    yield test_engine
    asyncio.run(test_engine.dispose())


@pytest.fixture()
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture()
def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture()
def create_profile(client):
    def _create(profile_name=1, commission_fixed=500.00, commission_percentage=0.05):
        r = client.post("/api/commissionprofile", json={
            "profileName": profile_name,
            "commissionFixed": commission_fixed,
            "commissionPercentage": commission_percentage,
        })
        assert r.status_code == 201, r.text
        return r.json()["data"]
    return _create


@pytest.fixture()
def create_personnel(client):
    def _create(commission_profile_id, name="John Smith", age=25, phone="555-0101", **extra):
        payload = {"name": name, "age": age, "phone": phone, "commissionProfileId": commission_profile_id}
        payload.update(extra)
        r = client.post("/api/personnel", json=payload)
        assert r.status_code == 201, r.text
        return r.json()["data"]
    return _create


@pytest.fixture()
def create_sale(client):
    def _create(personnel_id, report_date, sales_amount):
        r = client.post("/api/sales", json={
            "personnelId": personnel_id,
            "reportDate": report_date,
            "salesAmount": sales_amount,
        })
        assert r.status_code == 201, r.text
        return r.json()["data"]
    return _create
