"""
Named, pre-declared queries.

Every statement is built once at import time with bound parameters; callers
refer to it by name and pass the parameter values at execution time.
"""
from __future__ import annotations

from typing import Dict

from sqlalchemy import select, func, bindparam
from sqlalchemy.sql import Select

from reportboard.db.models import Report, Like

# parameter names
PARAM_EMPLOYEE_ID = "employee_id"
PARAM_REPORT_ID = "report_id"

# query names
Q_REP_GET_ALL = "report.getAll"
Q_REP_COUNT = "report.count"
Q_REP_GET_ALL_MINE = "report.getAllMine"
Q_REP_COUNT_ALL_MINE = "report.countAllMine"
Q_REP_GET_ALL_BY_LIKE_EMP = "report.getAllByLikeEmployee"
Q_REP_COUNT_ALL_BY_LIKE_EMP = "report.countAllByLikeEmployee"
Q_LIKE_COUNT_BY_REPORT = "like.countByReport"
Q_LIKE_GET_BY_REP_AND_EMP = "like.getByReportAndEmployee"


_QUERIES: Dict[str, Select] = {
    Q_REP_GET_ALL: (
        select(Report)
        .order_by(Report.id.desc())
    ),
    Q_REP_COUNT: select(func.count(Report.id)),
    Q_REP_GET_ALL_MINE: (
        select(Report)
        .where(Report.employee_id == bindparam(PARAM_EMPLOYEE_ID))
        .order_by(Report.id.desc())
    ),
    Q_REP_COUNT_ALL_MINE: (
        select(func.count(Report.id))
        .where(Report.employee_id == bindparam(PARAM_EMPLOYEE_ID))
    ),
    Q_REP_GET_ALL_BY_LIKE_EMP: (
        select(Report)
        .join(Like, Like.report_id == Report.id)
        .where(Like.employee_id == bindparam(PARAM_EMPLOYEE_ID))
        .order_by(Report.id.desc())
    ),
    Q_REP_COUNT_ALL_BY_LIKE_EMP: (
        select(func.count(Report.id))
        .select_from(Report)
        .join(Like, Like.report_id == Report.id)
        .where(Like.employee_id == bindparam(PARAM_EMPLOYEE_ID))
    ),
    Q_LIKE_COUNT_BY_REPORT: (
        select(func.count(Like.id))
        .where(Like.report_id == bindparam(PARAM_REPORT_ID))
    ),
    # oldest row first when duplicates exist
    Q_LIKE_GET_BY_REP_AND_EMP: (
        select(Like)
        .where(
            Like.report_id == bindparam(PARAM_REPORT_ID),
            Like.employee_id == bindparam(PARAM_EMPLOYEE_ID),
        )
        .order_by(Like.id.asc())
        .limit(1)
    ),
}


def named_query(name: str) -> Select:
    """Return the statement registered under `name`; KeyError if unknown."""
    try:
        return _QUERIES[name]
    except KeyError:
        raise KeyError(f"Unknown named query: {name}") from None


def query_names() -> list[str]:
    return sorted(_QUERIES)
