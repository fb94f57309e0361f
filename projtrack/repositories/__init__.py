"""Repositories mapping domain records onto the database."""

from projtrack.repositories.base import (
    CustomerRepositoryProtocol,
    ProjectRepositoryProtocol,
)
from projtrack.repositories.customer import CustomerRepository
from projtrack.repositories.project import ProjectRepository

__all__ = [
    "CustomerRepository",
    "CustomerRepositoryProtocol",
    "ProjectRepository",
    "ProjectRepositoryProtocol",
]
