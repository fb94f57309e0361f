"""Services package initialization."""

from projtrack.services.customer import CustomerService
from projtrack.services.migration import MigrationResult, MigrationService
from projtrack.services.project import ProjectInputModel, ProjectService
from projtrack.services.seed import seed_database

__all__ = [
    "CustomerService",
    "MigrationResult",
    "MigrationService",
    "ProjectInputModel",
    "ProjectService",
    "seed_database",
]
