from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, List, Optional

from sqlalchemy.orm import Session

from reportboard.core.config import ROW_PER_PAGE
from reportboard.core.logging import get_logger
from reportboard.core.validators import validate_report
from reportboard.db import repository as repo
from reportboard.db.database import SessionLocal
from reportboard.db.models import Like
from reportboard.db.queries import (
    Q_REP_GET_ALL, Q_REP_COUNT,
    Q_REP_GET_ALL_MINE, Q_REP_COUNT_ALL_MINE,
    Q_REP_GET_ALL_BY_LIKE_EMP, Q_REP_COUNT_ALL_BY_LIKE_EMP,
    Q_LIKE_COUNT_BY_REPORT,
    PARAM_EMPLOYEE_ID, PARAM_REPORT_ID,
)
from reportboard.services.converters import (
    report_to_view, reports_to_views, report_from_view, copy_view_to_report,
)
from reportboard.services.views import EmployeeView, ReportView, SaveResult
from reportboard.utils import dates

log = get_logger(__name__)


class ReportService:
    """
    Report and like operations over one explicitly passed session.

    Every write commits on its own; nothing spans two calls.
    """

    def __init__(self, db: Session, *, per_page: int = ROW_PER_PAGE):
        if per_page < 1:
            raise ValueError("per_page must be >= 1")
        self.db = db
        self.per_page = per_page

    def close(self) -> None:
        self.db.close()

    def __enter__(self) -> "ReportService":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _first_result(self, page: int) -> int:
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")
        return self.per_page * (page - 1)

    # --------------------------------
    # REPORT LISTS / COUNTS
    # --------------------------------

    def get_mine_per_page(self, employee: EmployeeView, page: int) -> List[ReportView]:
        reports = repo.run_page(
            self.db, Q_REP_GET_ALL_MINE,
            first_result=self._first_result(page), max_results=self.per_page,
            **{PARAM_EMPLOYEE_ID: employee.id},
        )
        log.debug("mine page={} employee={} rows={}", page, employee.id, len(reports))
        return reports_to_views(reports)

    def count_all_mine(self, employee: EmployeeView) -> int:
        return repo.run_scalar(self.db, Q_REP_COUNT_ALL_MINE, **{PARAM_EMPLOYEE_ID: employee.id})

    def get_all_per_page(self, page: int) -> List[ReportView]:
        reports = repo.run_page(
            self.db, Q_REP_GET_ALL,
            first_result=self._first_result(page), max_results=self.per_page,
        )
        log.debug("all page={} rows={}", page, len(reports))
        return reports_to_views(reports)

    def count_all(self) -> int:
        return repo.run_scalar(self.db, Q_REP_COUNT)

    # --------------------------------
    # SINGLE REPORT
    # --------------------------------

    def find_one(self, report_id: int) -> Optional[ReportView]:
        return report_to_view(repo.get_report(self.db, report_id))

    def create(self, rv: ReportView) -> SaveResult:
        errors = validate_report(rv)
        if errors:
            return SaveResult(errors=errors)

        # build first; a view without an owner is left untouched
        r = report_from_view(rv)
        now = dates.now_naive()
        r.created_at = now
        r.updated_at = now
        if r.report_date is None:
            r.report_date = now.date()

        r = repo.add_report(self.db, r)
        rv.id = r.id
        rv.created_at = r.created_at
        rv.updated_at = r.updated_at
        rv.report_date = r.report_date
        log.info("report created id={} employee={}", r.id, r.employee_id)
        return SaveResult(report_id=r.id)

    def update(self, rv: ReportView) -> SaveResult:
        errors = validate_report(rv)
        if errors:
            return SaveResult(errors=errors)

        r = repo.get_report(self.db, rv.id)
        if r is None:
            raise ValueError("Report not found")

        rv.updated_at = dates.now_naive()
        if rv.report_date is None:
            rv.report_date = r.report_date
        copy_view_to_report(r, rv)
        repo.commit(self.db)
        log.info("report updated id={}", r.id)
        return SaveResult(report_id=r.id)

    # --------------------------------
    # LIKES
    # --------------------------------

    def create_like(self, rv: ReportView, ev: EmployeeView) -> None:
        lk = repo.add_like(self.db, report_id=rv.id, employee_id=ev.id)
        log.info("like created id={} report={} employee={}", lk.id, rv.id, ev.id)

    def find_like(self, rv: ReportView, ev: EmployeeView) -> Optional[Like]:
        """The employee's like on the report, or None if they never liked it."""
        return repo.get_like_by_report_and_employee(self.db, report_id=rv.id, employee_id=ev.id)

    def delete_like(self, lk: Like) -> None:
        like_id = lk.id
        repo.delete_like(self.db, lk)
        log.info("like deleted id={}", like_id)

    def count_like(self, rv: ReportView) -> int:
        return repo.run_scalar(self.db, Q_LIKE_COUNT_BY_REPORT, **{PARAM_REPORT_ID: rv.id})

    def get_my_favorite_reports_per_page(self, ev: EmployeeView, page: int) -> List[ReportView]:
        reports = repo.run_page(
            self.db, Q_REP_GET_ALL_BY_LIKE_EMP,
            first_result=self._first_result(page), max_results=self.per_page,
            **{PARAM_EMPLOYEE_ID: ev.id},
        )
        return reports_to_views(reports)

    def count_my_favorite_reports(self, ev: EmployeeView) -> int:
        return repo.run_scalar(self.db, Q_REP_COUNT_ALL_BY_LIKE_EMP, **{PARAM_EMPLOYEE_ID: ev.id})


@contextmanager
def open_report_service(*, per_page: int = ROW_PER_PAGE) -> Iterator[ReportService]:
    db = SessionLocal()
    try:
        yield ReportService(db, per_page=per_page)
    finally:
        db.close()
