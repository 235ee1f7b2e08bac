"""
Pytest configuration and shared fixtures.
"""

import os

# Ensure settings resolve to SQLite before any app module is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from app.db.base_class import Base
from app.db import base as models_import  # noqa: F401 - ensure models are imported
from app.db.session import build_engine
from app.api.dependencies.database import get_db
from app.repositories.company import CompanyRepository
from app.repositories.job import JobRepository


COMPANIES = [
    {
        "handle": f"c{n}",
        "name": f"C{n}",
        "numEmployees": n,
        "description": f"Desc{n}",
        "logoUrl": f"http://c{n}.img",
    }
    for n in range(1, 5)
]

JOBS = [
    {"title": "j1", "salary": 1000, "equity": "0.0", "companyHandle": "c1"},
    {"title": "j2", "salary": 2000, "equity": "0.2", "companyHandle": "c2"},
    {"title": "j3", "salary": 3000, "equity": "0.3", "companyHandle": "c3"},
]


@pytest.fixture
def engine(tmp_path):
    """File-backed SQLite database with the full schema, one per test."""
    engine = build_engine(f"sqlite:///{tmp_path / 'test.db'}")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def job_ids(session_factory):
    """Seed companies c1..c4 and jobs j1..j3; return the job ids in title order."""
    with session_factory() as db:
        companies = CompanyRepository(db)
        for company in COMPANIES:
            companies.create(company)
        jobs = JobRepository(db)
        ids = [jobs.create(job).id for job in JOBS]
        db.commit()
    return ids


@pytest.fixture
def db(session_factory, job_ids):
    """A session over the seeded database; changes are never committed."""
    session = session_factory()
    yield session
    session.rollback()
    session.close()


@pytest.fixture
def client(session_factory, job_ids):
    from main import app

    def _override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
