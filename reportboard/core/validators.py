from __future__ import annotations

from typing import List, Optional

from reportboard.services.views import ReportView

TITLE_MAX_LEN = 255

ERR_NO_TITLE = "Please enter a title."
ERR_TITLE_TOO_LONG = f"Title must be at most {TITLE_MAX_LEN} characters."
ERR_NO_CONTENT = "Please enter the content."


def _blank(s: Optional[str]) -> bool:
    return s is None or not s.strip()


def validate_report(rv: ReportView) -> List[str]:
    """Ordered list of error messages for a report view; empty when valid."""
    errors: List[str] = []

    if _blank(rv.title):
        errors.append(ERR_NO_TITLE)
    elif len(rv.title) > TITLE_MAX_LEN:
        errors.append(ERR_TITLE_TOO_LONG)

    if _blank(rv.content):
        errors.append(ERR_NO_CONTENT)

    return errors
