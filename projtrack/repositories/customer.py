"""Customer repository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from projtrack.models import Customer


class CustomerRepository:
    """
    CRUD primitives for :class:`~projtrack.models.customer.Customer` rows.

    Args:
        session: The SQLAlchemy session shared by the interactive session

    """

    def __init__(self, session: Session) -> None:
        #: The SQLAlchemy session.
        self.session = session

    def list_all(self) -> list[Customer]:
        """
        Return all customers in insertion order.
        """
        return list(
            self.session.scalars(select(Customer).order_by(Customer.customer_id)).all()
        )

    def get(self, customer_id: int) -> Customer | None:
        """
        Get a customer by ID, or ``None`` if there is no such customer.
        """
        return self.session.get(Customer, customer_id)

    def create(self, name: str) -> Customer:
        """
        Insert a new customer and commit it.

        Args:
            name: The customer name

        Returns:
            The new :class:`~projtrack.models.customer.Customer`, with its
            generated ID populated

        """
        customer = Customer(name=name)
        self.session.add(customer)
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return customer
