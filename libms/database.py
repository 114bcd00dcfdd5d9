# libms/database.py
import logging
from contextlib import contextmanager
from typing import Any, Iterator, List, Mapping, Optional
from sqlalchemy import create_engine, event, inspect, text
from sqlalchemy.engine import Result
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import NullPool, QueuePool

from libms.config import get_database_url
from libms.models import Base, Author, Category
from libms.models.category import ACTIVE

logger = logging.getLogger(__name__)

# Children first so the deletes succeed even where foreign key checks stay on
RESET_TABLES = [
    'tblissuedbookdetails',
    'tblbooks',
    'tblstudents',
    'tblcategory',
    'tblauthors',
    'admin',
]

BASE_CATEGORY_NAME = "Test Category"
BASE_AUTHOR_NAME = "Test Author"


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite ships with foreign key enforcement off; switch it on for every new connection"""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


class Database:
    """Holds the engine and the one session the test suite shares.

    Use Database.get_instance() to reach the process-wide instance.
    """

    _instance: Optional["Database"] = None

    def __init__(self, connection_string: Optional[str] = None, **engine_kwargs):
        """Initialize database connection

        Args:
            connection_string: Database URL (e.g. "mysql+pymysql://root@localhost/library_test").
                              If None, resolved from DATABASE_URL / TEST_DB_* or a local SQLite file
            engine_kwargs: Additional keyword arguments to pass to create_engine
        """
        self.connection_string = connection_string or get_database_url()
        self.is_sqlite = self.connection_string.startswith("sqlite")
        self.is_mysql = self.connection_string.startswith("mysql")

        # SQLite-specific settings
        if self.is_sqlite:
            engine_kwargs.setdefault("connect_args", {"check_same_thread": False})
            engine_kwargs.setdefault("poolclass", NullPool)

        # Server databases
        else:
            engine_kwargs.setdefault("pool_size", 5)
            engine_kwargs.setdefault("max_overflow", 10)
            engine_kwargs.setdefault("poolclass", QueuePool)
            engine_kwargs.setdefault("pool_pre_ping", True)

        self.engine = create_engine(
            self.connection_string,
            **engine_kwargs
        )

        if self.is_sqlite:
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)

        # Create sessionmaker
        self._SessionFactory = sessionmaker(
            autoflush=False,
            bind=self.engine
        )

        # Shared session, created on first use
        self._session: Optional[Session] = None
        self._in_transaction = False

    @classmethod
    def get_instance(cls, connection_string: Optional[str] = None) -> "Database":
        """Return the process-wide database, creating it on first call.

        connection_string is only honoured by the call that creates the instance.
        """
        if cls._instance is None:
            cls._instance = cls(connection_string)
        return cls._instance

    @classmethod
    def clear_instance(cls) -> None:
        """Dispose of the process-wide database so the next get_instance() builds a new one"""
        if cls._instance is not None:
            cls._instance.dispose()
            cls._instance = None

    @property
    def session(self) -> Session:
        """Get the current session or create a new one"""
        if self._session is None:
            self._session = self._SessionFactory()
        return self._session

    def close_session(self) -> None:
        """Close the current session if it exists"""
        if self._session is not None:
            self._session.close()
            self._session = None
        self._in_transaction = False

    def dispose(self) -> None:
        self.close_session()
        self.engine.dispose()

    @contextmanager
    def get_db(self) -> Iterator[Session]:
        """Context manager for database sessions"""
        session: Session = self._SessionFactory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def get_session(self) -> Session:
        return self._SessionFactory()

    def init_db(self) -> None:
        """Initialize database schema"""
        Base.metadata.create_all(self.engine)

    def drop_db(self) -> None:
        """Drop every table the models know about"""
        Base.metadata.drop_all(self.engine)

    # Transactions

    @property
    def in_transaction(self) -> bool:
        return self._in_transaction

    def begin_transaction(self) -> None:
        """Start a transaction on the shared session unless one is already open"""
        if self._in_transaction:
            return
        if not self.session.in_transaction():
            self.session.begin()
        self._in_transaction = True

    def commit_transaction(self) -> None:
        if self._in_transaction:
            self.session.commit()
            self._in_transaction = False

    def rollback_transaction(self) -> None:
        """Roll back the shared session. A failed rollback is logged, never raised."""
        if self._session is not None:
            try:
                self._session.rollback()
            except SQLAlchemyError as e:
                logger.error(f"Rollback failed: {str(e)}")
        self._in_transaction = False

    # Raw statement passthroughs

    def execute(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> Result:
        """Execute a SQL statement with named parameters on the shared session"""
        return self.session.execute(text(sql), dict(params or {}))

    def execute_update(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> int:
        """Execute a write statement and return the number of affected rows"""
        return self.execute(sql, params).rowcount

    def last_insert_id(self) -> Optional[int]:
        """Id generated by the most recent INSERT on the shared session's connection"""
        if self.is_sqlite:
            sql = "SELECT last_insert_rowid()"
        elif self.is_mysql:
            sql = "SELECT LAST_INSERT_ID()"
        else:
            sql = "SELECT lastval()"
        return self.execute(sql).scalar()

    def table_names(self) -> List[str]:
        return inspect(self.session.connection()).get_table_names()

    # Test database reset

    def reset_test_database(self) -> bool:
        """Empty every table, reset id counters, seed base rows and open a fresh transaction.

        Failures are logged rather than raised so one broken table does not stop the suite.

        Returns:
            True if the reset completed, False otherwise
        """
        try:
            self.rollback_transaction()
            # Rows are deleted behind the ORM, so drop every object it still tracks
            self.session.expunge_all()
            self._set_foreign_key_checks(False)

            existing_tables = set(self.table_names())
            for table in RESET_TABLES:
                if table not in existing_tables:
                    continue
                try:
                    self.session.execute(text(f"DELETE FROM {table}"))
                    self._reset_auto_increment(table)
                except SQLAlchemyError as e:
                    logger.error(f"Failed to reset table {table}: {str(e)}")

            # Same connection as the disable, before it goes back to the pool
            self._set_foreign_key_checks(True)
            self.session.commit()

            self._seed_base_data()

            self.begin_transaction()
            return True

        except SQLAlchemyError as e:
            logger.error(f"Database reset failed: {str(e)}")
            self.rollback_transaction()
            return False

    def _set_foreign_key_checks(self, enabled: bool) -> None:
        if self.is_mysql:
            self.session.execute(text(f"SET FOREIGN_KEY_CHECKS = {1 if enabled else 0}"))
        elif self.is_sqlite:
            # Ignored inside a transaction; new connections get it back from the connect listener
            self.session.execute(text(f"PRAGMA foreign_keys = {'ON' if enabled else 'OFF'}"))

    def _reset_auto_increment(self, table: str) -> None:
        if self.is_mysql:
            self.session.execute(text(f"ALTER TABLE `{table}` AUTO_INCREMENT = 1"))
        elif self.is_sqlite:
            self.session.execute(text("DELETE FROM sqlite_sequence WHERE name = :name"), {"name": table})
        else:
            self.session.execute(text(f"ALTER SEQUENCE {table}_id_seq RESTART WITH 1"))

    def _seed_base_data(self) -> None:
        """Insert the category and author most tests lean on"""
        self.session.add(Category(name=BASE_CATEGORY_NAME, status=ACTIVE))
        self.session.add(Author(name=BASE_AUTHOR_NAME))
        self.session.commit()
