"""Service for reading and creating customers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from projtrack.exc import DoesNotExist, ServiceError, ValidationError

if TYPE_CHECKING:
    from projtrack.models import Customer
    from projtrack.repositories import CustomerRepositoryProtocol

logger = logging.getLogger(__name__)


class CustomerService:
    """
    Validates customer input and shields callers from persistence errors.

    Args:
        repository: The customer repository to delegate to

    """

    def __init__(self, repository: CustomerRepositoryProtocol) -> None:
        #: The customer repository.
        self.repository = repository

    def list_all(self) -> list[Customer]:
        """
        Return all customers.

        Raises:
            ServiceError: If the customers could not be read

        """
        try:
            return self.repository.list_all()
        except Exception as e:
            logger.exception("Error retrieving all customers")
            msg = "Failed to retrieve customers. Please try again later."
            raise ServiceError(msg, e) from e

    def get(self, customer_id: int) -> Customer:
        """
        Return the customer with ID ``customer_id``.

        Raises:
            DoesNotExist: If there is no such customer
            ServiceError: If the customer could not be read

        """
        try:
            customer = self.repository.get(customer_id)
        except Exception as e:
            logger.exception(f"Error retrieving customer {customer_id}")
            msg = f"Failed to retrieve customer {customer_id}. Please try again later."
            raise ServiceError(msg, e) from e
        if customer is None:
            raise DoesNotExist("Customer", customer_id)
        return customer

    def exists(self, customer_id: int) -> bool:
        """
        Whether a customer with ID ``customer_id`` exists.
        """
        try:
            self.get(customer_id)
        except DoesNotExist:
            return False
        return True

    def create(self, name: str) -> Customer:
        """
        Create a customer.

        Args:
            name: The customer name; surrounding whitespace is removed

        Raises:
            ValidationError: If ``name`` is empty or only whitespace
            ServiceError: If the customer could not be stored

        Returns:
            The new customer

        """
        if not name or not name.strip():
            msg = "Customer name cannot be empty."
            raise ValidationError(msg)
        try:
            customer = self.repository.create(name.strip())
        except Exception as e:
            logger.exception("Error creating customer")
            msg = "Failed to create customer. Please try again later."
            raise ServiceError(msg, e) from e
        logger.info(f"Created customer {customer.customer_id}: {customer.name}")
        return customer
