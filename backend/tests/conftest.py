# backend/tests/conftest.py
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

# We have to import the REAL app and settings to modify them
from economy import models
from economy.core.config import SEED_DIR, settings
from economy.db.base_class import Base
from economy.db.session import make_session_factory
from economy.main import app
from economy.reference_data import load_reference_data

SQLALCHEMY_DATABASE_URL = "sqlite://"
TEST_PASS_KEY = "test-pass-key"


@pytest.fixture(scope="session")
def test_client_with_db():
    """
    A TestClient whose lifespan builds an in-memory SQLite database.
    Every request carries the pass key header.
    """
    # Override the settings BEFORE the lifespan reads them
    settings.DATABASE_URL = SQLALCHEMY_DATABASE_URL
    settings.AUTH_PASS_KEY = TEST_PASS_KEY
    settings.DB_CONNECT_RETRIES = 1
    settings.REFERENCE_DATA_DIR = SEED_DIR

    with TestClient(app, headers={"X-Pass-Key": TEST_PASS_KEY}) as client:
        yield client


@pytest.fixture
def client(test_client_with_db: TestClient):
    """The session-wide client with empty tables for each test."""
    engine = app.state.engine
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    return test_client_with_db


@pytest.fixture(scope="session")
def reference():
    return load_reference_data(SEED_DIR)


@pytest.fixture
def db():
    """A plain session on a fresh in-memory database, for calling the crud layer directly."""
    engine = create_engine(
        SQLALCHEMY_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(bind=engine)
    session: Session = make_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def make_account(db: Session):
    def _make(account_id: str, dollars: int = 100, hp: int = 100) -> models.Account:
        account = models.Account(id=account_id, dollars=dollars, hp=hp)
        db.add(account)
        db.commit()
        return account

    return _make
