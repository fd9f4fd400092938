from sqlalchemy import create_engine, inspect
from sqlalchemy.orm import sessionmaker

from reportboard.db.database import Base
from reportboard.db.migrations import (
    safe_run_migrations, MIGRATION_KEY_LIKES, MIGRATION_KEY_LIKES_EMPLOYEE_INDEX,
)
from reportboard.db.models import Employee, Report
from reportboard.db.repository import create_employee
from reportboard.services.converters import employee_to_view
from reportboard.services.report_service import ReportService
from reportboard.services.views import ReportView


def _legacy_engine(tmp_path):
    eng = create_engine(f"sqlite:///{tmp_path / 'legacy.sqlite3'}", future=True)
    # schema from before likes existed
    Base.metadata.create_all(bind=eng, tables=[Employee.__table__, Report.__table__])
    return eng


def test_migrations_add_likes_table_once(tmp_path):
    eng = _legacy_engine(tmp_path)
    assert "likes" not in inspect(eng).get_table_names()

    applied = safe_run_migrations(eng)

    assert applied == [MIGRATION_KEY_LIKES, MIGRATION_KEY_LIKES_EMPLOYEE_INDEX]
    insp = inspect(eng)
    assert "likes" in insp.get_table_names()
    index_names = {ix["name"] for ix in insp.get_indexes("likes")}
    assert {"ix_likes_report_employee", "ix_likes_employee_id"} <= index_names
    assert not any(ix["unique"] for ix in insp.get_indexes("likes"))

    assert safe_run_migrations(eng) == []
    eng.dispose()


def test_migrated_schema_accepts_likes(tmp_path):
    eng = _legacy_engine(tmp_path)
    safe_run_migrations(eng)

    db = sessionmaker(bind=eng, autoflush=False, autocommit=False, future=True)()
    try:
        owner = employee_to_view(create_employee(db, code="E1", name="Owner"))
        svc = ReportService(db)
        result = svc.create(ReportView(employee=owner, title="t", content="c"))
        report = svc.find_one(result.report_id)

        svc.create_like(report, owner)

        assert svc.count_like(report) == 1
    finally:
        db.close()
        eng.dispose()


def test_migrations_on_current_schema_only_record_keys(engine):
    # tables already created from metadata
    assert safe_run_migrations(engine) == [MIGRATION_KEY_LIKES, MIGRATION_KEY_LIKES_EMPLOYEE_INDEX]
    assert "likes" in inspect(engine).get_table_names()


def test_migration_keys_are_sequence_numbered():
    assert MIGRATION_KEY_LIKES == "0001_report_likes"
    assert MIGRATION_KEY_LIKES_EMPLOYEE_INDEX == "0002_likes_employee_index"
