from __future__ import annotations
import os
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, declarative_base
from reportboard.core.config import DB_URL

_url = make_url(DB_URL)
if _url.get_backend_name() == "sqlite" and _url.database and _url.database != ":memory:":
    os.makedirs(os.path.dirname(_url.database) or ".", exist_ok=True)

engine = create_engine(DB_URL, connect_args={"check_same_thread": False} if DB_URL.startswith("sqlite") else {}, future=True)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
Base = declarative_base()
