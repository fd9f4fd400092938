from __future__ import annotations
from sqlalchemy.engine import Engine

from reportboard.core.config import ADMIN_CODE, ADMIN_NAME
from reportboard.core.logging import get_logger, setup_logging
from reportboard.db.database import Base, engine, SessionLocal
from reportboard.db.migrations import safe_run_migrations
from reportboard.db.repository import get_employee_by_code, create_employee
import reportboard.db.models  # noqa: F401  registers tables on Base.metadata

log = get_logger(__name__)

def create_tables(bind: Engine = engine): Base.metadata.create_all(bind=bind)

def ensure_admin(session_factory=SessionLocal):
    db = session_factory()
    try:
        if not get_employee_by_code(db, ADMIN_CODE):
            create_employee(db, code=ADMIN_CODE, name=ADMIN_NAME, admin_flag=1)
            log.info("admin employee created: {}", ADMIN_CODE)
    finally: db.close()

def init_db():
    create_tables()
    safe_run_migrations()
    ensure_admin()


if __name__ == "__main__":
    setup_logging()
    init_db()
