import os
from pathlib import Path

DB_PATH = os.environ.get("BINDERY_DB_PATH", str(Path.cwd() / "bindery.db"))
DATABASE_URL = os.environ.get("BINDERY_DATABASE_URL", f"sqlite+aiosqlite:///{DB_PATH}")
SQL_ECHO = os.environ.get("BINDERY_SQL_ECHO", "").lower() in ("1", "true", "yes")

# HTTP server settings
HOST = os.environ.get("BINDERY_HOST", "127.0.0.1")
PORT = int(os.environ.get("BINDERY_PORT", "8080"))
LOG_LEVEL = os.environ.get("BINDERY_LOG_LEVEL", "INFO").upper()
