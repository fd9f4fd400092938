from __future__ import annotations

from typing import Iterable, List, Optional

from reportboard.db.models import Employee, Report
from reportboard.services.views import EmployeeView, ReportView


# --------------------------------
# EMPLOYEES
# --------------------------------

def employee_to_view(e: Optional[Employee]) -> Optional[EmployeeView]:
    if e is None:
        return None
    return EmployeeView(
        id=e.id,
        code=e.code,
        name=e.name,
        admin_flag=e.admin_flag,
        delete_flag=e.delete_flag,
        created_at=e.created_at,
        updated_at=e.updated_at,
    )


# --------------------------------
# REPORTS
# --------------------------------

def report_to_view(r: Optional[Report]) -> Optional[ReportView]:
    if r is None:
        return None
    return ReportView(
        id=r.id,
        employee=employee_to_view(r.employee),
        report_date=r.report_date,
        title=r.title,
        content=r.content,
        created_at=r.created_at,
        updated_at=r.updated_at,
    )


def reports_to_views(reports: Iterable[Report]) -> List[ReportView]:
    return [report_to_view(r) for r in reports]


def report_from_view(rv: ReportView) -> Report:
    """New, transient Report; the owner is referenced by id only."""
    if rv.employee is None or rv.employee.id is None:
        raise ValueError("Report view has no owning employee")
    return Report(
        id=rv.id,
        employee_id=rv.employee.id,
        report_date=rv.report_date,
        title=rv.title,
        content=rv.content,
        created_at=rv.created_at,
        updated_at=rv.updated_at,
    )


def copy_view_to_report(r: Report, rv: ReportView) -> None:
    # id, owner and created_at stay as persisted
    r.report_date = rv.report_date
    r.title = rv.title
    r.content = rv.content
    r.updated_at = rv.updated_at
