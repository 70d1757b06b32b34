import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from artistly.core.config import settings
from artistly.database import get_db
from artistly.db_utils import seed_sample_data
from artistly.main import app


@pytest.fixture(autouse=True)
def no_artificial_delay(monkeypatch):
    """Skip the simulated backend latency in every test."""
    monkeypatch.setattr(settings, "STATUS_TRANSITION_DELAY_SECONDS", 0.0)
    monkeypatch.setattr(settings, "INTAKE_SUBMIT_DELAY_SECONDS", 0.0)


@pytest.fixture
def Session():
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    seed_sample_data(engine)
    yield sessionmaker(bind=engine, expire_on_commit=False)
    engine.dispose()


@pytest.fixture
def db(Session):
    session = Session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(Session):
    def override_db():
        session = Session()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_db
    yield TestClient(app)
    app.dependency_overrides.clear()
