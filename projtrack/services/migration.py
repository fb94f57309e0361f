"""Service for creating and upgrading the database schema."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Final

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import inspect
from sqlalchemy.orm import Session

from projtrack import __version__
from projtrack.db import Base
from projtrack.exc import MigrationFailed

from .seed import seed_database

if TYPE_CHECKING:
    from sqlalchemy import Engine

logger = logging.getLogger(__name__)


@dataclass
class MigrationResult:
    """Result of a migration."""

    # The application version
    app_version: str | None
    # The current database migration version
    migration_version: str
    # Whether the sample data was written
    seeded: bool = False


class MigrationService:
    """
    Brings the database schema up to date on startup.

    A fresh database is created straight from the models, filled with the
    sample data and stamped with the newest Alembic revision.  An existing
    database is upgraded through the Alembic revisions.

    Args:
        engine: SQLAlchemy engine for the configured database

    """

    #: The Alembic scripts directory.
    ALEMBIC_DIR: Final[Path] = (
        Path(__file__).resolve().parent.parent / "models" / "alembic"
    )

    def __init__(self, engine: Engine) -> None:
        #: The SQLAlchemy engine.
        self.engine = engine

    @property
    def config(self) -> Config:
        """
        Build the Alembic configuration.

        The database connection is handed to ``env.py`` through
        ``config.attributes["connection"]`` rather than a URL.
        """
        config = Config()
        config.set_main_option("script_location", str(self.ALEMBIC_DIR))
        return config

    @property
    def script(self) -> ScriptDirectory:
        """
        Get the Alembic script directory.
        """
        return ScriptDirectory.from_config(self.config)

    def latest_migration_version(self) -> str | None:
        """
        Get the newest revision shipped with the code.
        """
        return self.script.get_current_head()

    def db_migration_version(self) -> str | None:
        """
        Get the revision the database is stamped with, or ``None``.
        """
        with self.engine.connect() as connection:
            return MigrationContext.configure(connection).get_current_revision()

    def has_pending_migrations(self) -> bool:
        """
        Whether the database is behind the newest revision.
        """
        return self.db_migration_version() != self.latest_migration_version()

    def migrate(self) -> MigrationResult:
        """
        Migrate the database to the latest version.

        Raises:
            MigrationFailed: If the migration fails

        """
        try:
            if not self.has_pending_migrations():
                logger.info("No pending migrations found")
                return MigrationResult(
                    app_version=__version__,
                    migration_version=self.db_migration_version() or "",
                )
            return self.apply_migrations()
        except Exception as e:
            logger.exception("Database migration failed")
            migration_version = None
            try:
                migration_version = self.db_migration_version()
            except Exception as version_error:  # noqa: BLE001
                logger.debug(f"Could not get migration version: {version_error}")
            raise MigrationFailed(e, migration_version) from e

    def apply_migrations(self) -> MigrationResult:
        """
        Create or upgrade the schema.

        Returns:
            The application version and the database revision afterwards

        """
        existing_tables = inspect(self.engine).get_table_names()
        config = self.config
        seeded = False

        if "alembic_version" not in existing_tables:
            # Fresh database - create tables from models
            Base.metadata.create_all(self.engine)
            if "projects" not in existing_tables:
                with Session(self.engine) as session:
                    seed_database(session)
                seeded = True
            with self.engine.begin() as connection:
                config.attributes["connection"] = connection
                command.stamp(config, "head")
            logger.info("Created database schema and stamped it as current")
        else:
            # Existing database - apply migrations normally
            with self.engine.begin() as connection:
                config.attributes["connection"] = connection
                command.upgrade(config, "head")
            logger.info("Upgraded database schema")

        return MigrationResult(
            app_version=__version__,
            migration_version=self.db_migration_version() or "",
            seeded=seeded,
        )
