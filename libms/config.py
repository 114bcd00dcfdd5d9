# libms/config.py
import os
from typing import Optional

DEFAULT_DATABASE_URL = "sqlite:///library_test.db"

TEST_DB_HOST = os.getenv("TEST_DB_HOST", "localhost")
TEST_DB_USER = os.getenv("TEST_DB_USER", "root")
TEST_DB_PASS = os.getenv("TEST_DB_PASS", "")
TEST_DB_NAME = os.getenv("TEST_DB_NAME", "library_test")

LOG_LEVEL = os.getenv("LIBMS_LOG_LEVEL", "WARNING")
LOAN_PERIOD_DAYS = int(os.getenv("LOAN_PERIOD_DAYS", "15"))


def mysql_url(host: str = TEST_DB_HOST, user: str = TEST_DB_USER,
              password: str = TEST_DB_PASS, name: Optional[str] = TEST_DB_NAME) -> str:
    """Build a PyMySQL connection URL. Leave out the database name to connect to the server only."""
    credentials = f"{user}:{password}" if password else user
    url = f"mysql+pymysql://{credentials}@{host}"
    return f"{url}/{name}" if name else url


def get_database_url() -> str:
    """Resolve the database URL.

    DATABASE_URL wins. Otherwise TEST_DB_DRIVER=mysql builds a MySQL URL from the
    TEST_DB_* variables, and anything else falls back to a local SQLite file.
    """
    url = os.getenv("DATABASE_URL")
    if url:
        return url
    if os.getenv("TEST_DB_DRIVER", "").lower() == "mysql":
        return mysql_url()
    return DEFAULT_DATABASE_URL
