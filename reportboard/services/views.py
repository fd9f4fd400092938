from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Optional


@dataclass
class EmployeeView:
    id: Optional[int] = None
    code: Optional[str] = None
    name: Optional[str] = None
    admin_flag: int = 0
    delete_flag: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class ReportView:
    id: Optional[int] = None
    employee: Optional[EmployeeView] = None
    report_date: Optional[date] = None
    title: Optional[str] = None
    content: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class SaveResult:
    """Outcome of create/update: the persisted id, or the validation errors (never both)."""
    report_id: Optional[int] = None
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors
