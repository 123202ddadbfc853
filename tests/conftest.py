from __future__ import annotations

from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from portal.database import get_db, init_db
from portal.main import app
from portal.services.storage import BlobStorage, get_storage

ACTOR_HEADERS = {"X-User-Id": "staff-1", "X-User-Email": "staff@example.org"}


def beneficiary_payload(**overrides) -> dict:
    payload = {
        "name": "Asha Kulkarni",
        "date_of_birth": "2010-03-21",
        "gender": "female",
        "disability_type": "visual",
        "disability_percentage": 60,
        "guardian_name": "Ravi Kulkarni",
        "guardian_phone": "9876543210",
        "guardian_email": "ravi@example.org",
        "address": "12 MG Road, Shivaji Nagar",
        "city": "Pune",
        "state": "Maharashtra",
        "pincode": "411005",
        "aadhaar_number": "",
        "udid_number": "",
        "notes": "",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def storage(tmp_path):
    return BlobStorage(tmp_path, "documents", "/storage")


@pytest.fixture
def client(session_factory, storage):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_storage] = lambda: storage
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def create_beneficiary(client):
    def _create(**overrides) -> dict:
        response = client.post("/api/beneficiaries", json=beneficiary_payload(**overrides), headers=ACTOR_HEADERS)
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def day():
    return date(2024, 6, 15)
