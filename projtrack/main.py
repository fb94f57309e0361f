"""Main entry point for Project Tracker."""

import argparse
import logging
import sys

from projtrack import __version__
from projtrack.db import create_engine_from_url, make_session_factory, session_scope
from projtrack.exc import ConfigurationError, MigrationFailed
from projtrack.repositories import CustomerRepository, ProjectRepository
from projtrack.services import CustomerService, MigrationService, ProjectService
from projtrack.settings import Settings, load_settings
from projtrack.ui import ConsoleApp

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """
    Send log records to the configured file, away from the console UI.
    """
    logging.basicConfig(
        filename=str(settings.log_file),
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        encoding="utf-8",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="projtrack", description="Track projects and customers."
    )
    parser.add_argument(
        "--settings",
        metavar="PATH",
        help="settings file to read (default: ./appsettings.ini)",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """
    Run the Project Tracker console application.
    """
    args = build_parser().parse_args(argv)
    try:
        settings = load_settings(args.settings)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)
    configure_logging(settings)
    logger.info(f"Starting Project Tracker {__version__}")

    engine = create_engine_from_url(settings.connection_string)
    try:
        MigrationService(engine).migrate()
    except MigrationFailed as e:
        print(f"Database setup failed: {e}", file=sys.stderr)
        engine.dispose()
        sys.exit(1)
    print("Database is ready.")

    try:
        with session_scope(make_session_factory(engine)) as session:
            customer_repository = CustomerRepository(session)
            app = ConsoleApp(
                project_service=ProjectService(
                    ProjectRepository(session), customer_repository
                ),
                customer_service=CustomerService(customer_repository),
            )
            app.run()
    finally:
        engine.dispose()


if __name__ == "__main__":
    main()
