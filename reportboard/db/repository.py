from __future__ import annotations

from typing import Any, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from reportboard.core.logging import get_logger
from reportboard.db.models import Employee, Report, Like
from reportboard.db.queries import (
    named_query,
    Q_LIKE_GET_BY_REP_AND_EMP,
    PARAM_REPORT_ID,
    PARAM_EMPLOYEE_ID,
)

log = get_logger(__name__)


# --------------------------------
# TRANSACTIONS
# --------------------------------

def commit(db: Session) -> None:
    """Commit the session's current transaction; roll back and re-raise on failure."""
    try:
        db.commit()
    except SQLAlchemyError:
        log.exception("commit failed, rolling back")
        db.rollback()
        raise


# --------------------------------
# NAMED QUERIES
# --------------------------------

def run_scalar(db: Session, name: str, **params: Any) -> int:
    return db.execute(named_query(name), params).scalar_one()


def run_page(db: Session, name: str, *, first_result: int, max_results: int, **params: Any) -> List[Any]:
    stmt = named_query(name).offset(first_result).limit(max_results)
    return list(db.execute(stmt, params).scalars().all())


def run_one_or_none(db: Session, name: str, **params: Any) -> Optional[Any]:
    return db.execute(named_query(name), params).scalars().first()


# --------------------------------
# EMPLOYEES
# --------------------------------

def get_employee_by_code(db: Session, code: str) -> Optional[Employee]:
    return db.execute(select(Employee).where(Employee.code == code)).scalar_one_or_none()


def create_employee(db: Session, *, code: str, name: str, admin_flag: int = 0) -> Employee:
    e = Employee(code=code, name=name, admin_flag=admin_flag)
    db.add(e)
    commit(db)
    db.refresh(e)
    return e


# --------------------------------
# REPORTS
# --------------------------------

def get_report(db: Session, report_id: int) -> Optional[Report]:
    return db.get(Report, report_id)


def add_report(db: Session, r: Report) -> Report:
    db.add(r)
    commit(db)
    db.refresh(r)
    return r


# --------------------------------
# LIKES
# --------------------------------

def add_like(db: Session, *, report_id: int, employee_id: int) -> Like:
    lk = Like(id=None, report_id=report_id, employee_id=employee_id)
    db.add(lk)
    commit(db)
    db.refresh(lk)
    return lk


def get_like_by_report_and_employee(db: Session, *, report_id: int, employee_id: int) -> Optional[Like]:
    return run_one_or_none(
        db, Q_LIKE_GET_BY_REP_AND_EMP,
        **{PARAM_REPORT_ID: report_id, PARAM_EMPLOYEE_ID: employee_id},
    )


def delete_like(db: Session, lk: Like) -> None:
    db.delete(lk)
    commit(db)
