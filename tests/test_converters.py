from datetime import date, datetime

import pytest

from reportboard.db.models import Report
from reportboard.services.converters import (
    copy_view_to_report, report_from_view, report_to_view, reports_to_views,
)
from reportboard.services.views import EmployeeView, ReportView


def test_report_to_view_of_none_is_none():
    assert report_to_view(None) is None
    assert reports_to_views([]) == []


def test_report_from_view_requires_owner():
    with pytest.raises(ValueError):
        report_from_view(ReportView(title="t", content="c"))


def test_report_from_view_references_owner_by_id():
    rv = ReportView(employee=EmployeeView(id=7, code="E7"), title="t", content="c", report_date=date(2026, 1, 5))
    r = report_from_view(rv)
    assert r.employee_id == 7
    assert r.id is None
    assert r.title == "t"


def test_copy_view_to_report_keeps_identity_and_created_at():
    created = datetime(2026, 1, 1, 8, 0)
    r = Report(id=3, employee_id=1, report_date=date(2026, 1, 1), title="old", content="old",
               created_at=created, updated_at=created)
    rv = ReportView(id=99, employee=EmployeeView(id=2), report_date=date(2026, 1, 2), title="new",
                    content="new", created_at=datetime(2000, 1, 1), updated_at=datetime(2026, 1, 2, 9, 0))

    copy_view_to_report(r, rv)

    assert (r.id, r.employee_id, r.created_at) == (3, 1, created)
    assert (r.title, r.content, r.report_date) == ("new", "new", date(2026, 1, 2))
    assert r.updated_at == datetime(2026, 1, 2, 9, 0)
