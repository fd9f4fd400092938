from __future__ import annotations

from datetime import datetime, date
from typing import Optional, List

from sqlalchemy import Integer, String, Text, DateTime, Date, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from reportboard.db.database import Base
from reportboard.utils.dates import now_naive


# ---------------------------
# Employee
# ---------------------------

class Employee(Base):
    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String(64), unique=True, index=True, nullable=False)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    admin_flag: Mapped[int] = mapped_column(Integer, default=0, nullable=False)   # 0: general, 1: admin
    delete_flag: Mapped[int] = mapped_column(Integer, default=0, nullable=False)  # 0: active, 1: deleted

    created_at: Mapped[datetime] = mapped_column(DateTime, default=now_naive, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=now_naive, nullable=False)

    reports: Mapped[List["Report"]] = relationship("Report", back_populates="employee")


# ---------------------------
# Report
# ---------------------------

class Report(Base):
    __tablename__ = "reports"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    employee_id: Mapped[int] = mapped_column(ForeignKey("employees.id"), index=True, nullable=False)
    report_date: Mapped[date] = mapped_column(Date, index=True, nullable=False)

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    employee: Mapped["Employee"] = relationship("Employee", back_populates="reports", lazy="joined")


# ---------------------------
# Like
# ---------------------------

class Like(Base):
    """
    One "employee liked report" fact.
    (report_id, employee_id) is indexed, not unique.
    """
    __tablename__ = "likes"
    __table_args__ = (Index("ix_likes_report_employee", "report_id", "employee_id"),)

    id: Mapped[Optional[int]] = mapped_column(Integer, primary_key=True, autoincrement=True)
    report_id: Mapped[int] = mapped_column(ForeignKey("reports.id", ondelete="CASCADE"), nullable=False)
    employee_id: Mapped[int] = mapped_column(ForeignKey("employees.id", ondelete="CASCADE"), index=True, nullable=False)
