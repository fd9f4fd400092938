from __future__ import annotations
import os
from dotenv import load_dotenv
load_dotenv()

TIMEZONE = os.getenv("TIMEZONE", "Asia/Tokyo")
DB_URL = os.getenv("DB_URL", "sqlite:///data/app.sqlite3")
ROW_PER_PAGE = int(os.getenv("ROW_PER_PAGE", "15"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = os.getenv("LOG_DIR", "")
ADMIN_CODE = os.getenv("ADMIN_CODE", "admin")
ADMIN_NAME = os.getenv("ADMIN_NAME", "Admin")
