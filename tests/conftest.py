"""Test config and shared fixtures."""
from datetime import date
from typing import Generator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from reportboard.db.database import Base
from reportboard.db import models  # noqa: F401
from reportboard.db.repository import create_employee
from reportboard.services.converters import employee_to_view
from reportboard.services.report_service import ReportService
from reportboard.services.views import EmployeeView, ReportView

# In-memory SQLite for tests
TEST_DATABASE_URL = "sqlite:///:memory:"
PER_PAGE = 10


@pytest.fixture(scope="function")
def engine() -> Generator[Engine, None, None]:
    eng = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    Base.metadata.create_all(bind=eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture
def session_factory(engine: Engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


@pytest.fixture
def db(session_factory) -> Generator[Session, None, None]:
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def service(db: Session) -> ReportService:
    return ReportService(db, per_page=PER_PAGE)


@pytest.fixture
def alice(db: Session) -> EmployeeView:
    return employee_to_view(create_employee(db, code="E001", name="Alice"))


@pytest.fixture
def bob(db: Session) -> EmployeeView:
    return employee_to_view(create_employee(db, code="E002", name="Bob"))


@pytest.fixture
def make_report(service: ReportService):
    """Create a valid report through the service and return its view."""
    def _make(owner: EmployeeView, title: str = "Daily report", content: str = "Worked on things.") -> ReportView:
        rv = ReportView(employee=owner, report_date=date(2026, 10, 1), title=title, content=content)
        result = service.create(rv)
        assert result.ok, result.errors
        return service.find_one(result.report_id)
    return _make
