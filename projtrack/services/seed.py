"""Initial data written to a freshly created database."""

from __future__ import annotations

import logging
from datetime import date, timedelta
from decimal import Decimal
from typing import TYPE_CHECKING

from projtrack.models import Customer, Project, ProjectStatus
from projtrack.utils import add_months

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


def seed_database(session: Session, today: date | None = None) -> None:
    """
    Add the sample customers and projects and commit them.

    Project dates are relative to ``today`` so the sample data always shows
    a mix of upcoming and ongoing work.

    Args:
        session: SQLAlchemy session

    Keyword Args:
        today: The reference date; defaults to :meth:`date.today`

    """
    today = today or date.today()  # noqa: DTZ011
    sample_customer = Customer(name="Sample Customer")
    tech_corp = Customer(name="Tech Corp")
    data_inc = Customer(name="Data Inc")
    session.add_all([sample_customer, tech_corp, data_inc])
    session.flush()  # Get the IDs

    session.add_all(
        [
            Project(
                project_number="P001",
                name="Sample Project",
                start_date=today,
                end_date=add_months(today, 3),
                project_manager="John Doe",
                customer_id=sample_customer.customer_id,
                service="Development",
                total_price=Decimal(300000),
                status=ProjectStatus.NOT_STARTED,
            ),
            Project(
                project_number="P002",
                name="Website Redesign",
                start_date=today - timedelta(days=10),
                end_date=add_months(today, 2),
                project_manager="Jane Smith",
                customer_id=tech_corp.customer_id,
                service="Web Design",
                total_price=Decimal(150000),
                status=ProjectStatus.ONGOING,
            ),
            Project(
                project_number="P003",
                name="Database Migration",
                start_date=add_months(today, -1),
                end_date=today + timedelta(days=15),
                project_manager="Mike Johnson",
                customer_id=data_inc.customer_id,
                service="Database Services",
                total_price=Decimal(200000),
                status=ProjectStatus.ONGOING,
            ),
        ]
    )
    session.commit()
    logger.info("Seeded database with 3 customers and 3 projects")
