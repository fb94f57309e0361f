"""Shared pytest fixtures and test helpers for Project Tracker tests."""

import os
import tempfile
from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

from projtrack.db import Base, create_engine_from_url, make_session_factory
from projtrack.models import Customer, Project, ProjectStatus

#: Fixed reference date so date arithmetic in tests is deterministic.
TODAY = date(2026, 3, 15)


@pytest.fixture
def engine():
    """Create a temporary SQLite database with the full schema."""
    temp_db = tempfile.NamedTemporaryFile(mode="w", delete=False, suffix=".db")
    temp_db.close()
    db_path = Path(temp_db.name)

    engine = create_engine_from_url(f"sqlite:///{db_path}")
    Base.metadata.create_all(engine)

    yield engine

    engine.dispose()
    os.unlink(temp_db.name)


@pytest.fixture
def db_session(engine):
    """Create a session on the temporary database."""
    session = make_session_factory(engine)()

    yield session

    session.close()


@pytest.fixture
def sample_customer(db_session):
    """Create a sample customer."""
    return create_test_customer(db_session, name="Sample Customer")


@pytest.fixture
def sample_project(db_session, sample_customer):
    """Create a sample project numbered P001."""
    return create_test_project(
        db_session, customer_id=sample_customer.customer_id, project_number="P001"
    )


# Test helper functions (not fixtures, but available for import)


def create_test_customer(session, name="Test Customer"):
    """
    Helper to create a customer with defaults.

    Args:
        session: SQLAlchemy session
        name: Customer name

    Returns:
        Created Customer instance
    """
    customer = Customer(name=name)
    session.add(customer)
    session.commit()
    return customer


def create_test_project(session, customer_id=None, project_number="P001", **fields):
    """
    Helper to create a project with defaults, bypassing the repository.

    Args:
        session: SQLAlchemy session
        customer_id: Customer ID (if None, creates a new customer)
        project_number: Project number to store
        **fields: Overrides for any other project column

    Returns:
        Created Project instance
    """
    if customer_id is None:
        customer_id = create_test_customer(session).customer_id
    values = {
        "name": "Test Project",
        "start_date": date(2026, 1, 1),
        "end_date": date(2026, 6, 30),
        "project_manager": "John Doe",
        "service": "Development",
        "total_price": Decimal(100000),
        "status": ProjectStatus.NOT_STARTED,
    }
    values.update(fields)
    project = Project(project_number=project_number, customer_id=customer_id, **values)
    session.add(project)
    session.commit()
    return project
