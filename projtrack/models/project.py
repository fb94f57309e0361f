"""Project model."""

from __future__ import annotations

import enum
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Final

from sqlalchemy import Date, Enum, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from projtrack.db import Base

if TYPE_CHECKING:
    from projtrack.models.customer import Customer

#: Total digits stored for a price.
PRICE_PRECISION: Final[int] = 12
#: Decimal places stored for a price.
PRICE_SCALE: Final[int] = 2
#: Prices must be strictly below this.
PRICE_LIMIT: Final[Decimal] = Decimal(10) ** (PRICE_PRECISION - PRICE_SCALE)


class ProjectStatus(enum.Enum):
    """Lifecycle stage of a project."""

    NOT_STARTED = "NotStarted"
    ONGOING = "Ongoing"
    COMPLETED = "Completed"

    def __str__(self) -> str:
        return self.value


class Project(Base):
    """
    Represents a project.

    A project has these characteristics:
    - A project number (``P001``, ``P002``, ...) assigned at creation
    - A name, a project manager and a service description
    - A start and end date
    - A customer
    - A total price
    - A status

    The project number is the primary key and never changes once assigned.
    """

    __tablename__ = "projects"

    #: The project number, e.g. ``P001``.
    project_number: Mapped[str] = mapped_column(String(16), primary_key=True)
    #: The project name.
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    #: The first day of the project.
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    #: The last day of the project.
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    #: The name of the project manager.
    project_manager: Mapped[str] = mapped_column(String(200), nullable=False)
    #: The customer ID.
    customer_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("customers.customer_id"), nullable=False
    )
    #: The service delivered to the customer.
    service: Mapped[str] = mapped_column(String(200), nullable=False)
    #: The total price in SEK.
    total_price: Mapped[Decimal] = mapped_column(
        Numeric(PRICE_PRECISION, PRICE_SCALE, asdecimal=True),
        nullable=False,
        default=Decimal(0),
    )
    #: The project status, stored as its string value.  Unknown strings in
    #: the database raise :class:`LookupError` when loaded.
    status: Mapped[ProjectStatus] = mapped_column(
        Enum(
            ProjectStatus,
            name="project_status",
            native_enum=False,
            validate_strings=True,
            length=16,
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        nullable=False,
        default=ProjectStatus.NOT_STARTED,
    )

    # Relationships
    customer: Mapped[Customer] = relationship("Customer", back_populates="projects")

    def __repr__(self) -> str:
        return (
            f"Project(project_number={self.project_number!r}, name={self.name!r}, "
            f"status={self.status!s})"
        )

    def remaining_days(self, today: date | None = None) -> int:
        """
        Number of days left until the end date, never negative.

        Keyword Args:
            today: The reference date; defaults to :meth:`date.today`

        """
        today = today or date.today()  # noqa: DTZ011
        return max(0, (self.end_date - today).days)

    def is_behind_schedule(self, today: date | None = None) -> bool:
        """
        Whether an ongoing project has passed its end date.

        Keyword Args:
            today: The reference date; defaults to :meth:`date.today`

        """
        today = today or date.today()  # noqa: DTZ011
        return self.status == ProjectStatus.ONGOING and today > self.end_date
