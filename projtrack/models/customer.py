"""Customer model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from projtrack.db import Base

if TYPE_CHECKING:
    from projtrack.models.project import Project


class Customer(Base):
    """
    Represents a customer.

    A customer commissions any number of projects.  Customers are never
    deleted, so the relationship carries no cascade.
    """

    __tablename__ = "customers"

    #: The customer ID.
    customer_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    #: The customer name.
    name: Mapped[str] = mapped_column(String(200), nullable=False)

    # Relationships
    projects: Mapped[list[Project]] = relationship(
        "Project", back_populates="customer", order_by="Project.project_number"
    )

    def __repr__(self) -> str:
        return f"Customer(customer_id={self.customer_id!r}, name={self.name!r})"
