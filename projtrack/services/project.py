"""Service for reading, creating and updating projects."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING

from projtrack.exc import DoesNotExist, MissingInput, ServiceError, ValidationError
from projtrack.models import Project, ProjectStatus
from projtrack.models.project import PRICE_LIMIT, PRICE_SCALE
from projtrack.utils import decimal_places

if TYPE_CHECKING:
    from projtrack.repositories import (
        CustomerRepositoryProtocol,
        ProjectRepositoryProtocol,
    )

logger = logging.getLogger(__name__)


@dataclass
class ProjectInputModel:
    """User-supplied fields for a project."""

    #: The project name.
    name: str
    #: The first day of the project.
    start_date: date
    #: The last day of the project.
    end_date: date
    #: The name of the project manager.
    project_manager: str
    #: The ID of the customer the project is for.
    customer_id: int | None
    #: The service delivered to the customer.
    service: str
    #: The total price in SEK.
    total_price: Decimal = Decimal(0)
    #: The project status.
    status: ProjectStatus = ProjectStatus.NOT_STARTED

    @classmethod
    def from_project(cls, project: Project) -> ProjectInputModel:
        """
        Build an input model from the current field values of ``project``.
        """
        return cls(
            name=project.name,
            start_date=project.start_date,
            end_date=project.end_date,
            project_manager=project.project_manager,
            customer_id=project.customer_id,
            service=project.service,
            total_price=project.total_price,
            status=project.status,
        )

    def apply_to(self, project: Project) -> None:
        """
        Copy these values onto ``project``.  Nothing is saved.
        """
        project.name = self.name
        project.start_date = self.start_date
        project.end_date = self.end_date
        project.project_manager = self.project_manager
        if self.customer_id is not None:
            project.customer_id = self.customer_id
        project.service = self.service
        project.total_price = self.total_price
        project.status = self.status

    def validate(self) -> bool:
        """
        Check the input against the project rules.

        The rules are checked in a fixed order and the first broken one is
        reported.

        Raises:
            ValidationError: With a message naming the broken rule

        Returns:
            ``True`` if every rule holds

        """
        if not self.name or not self.name.strip():
            msg = "Project name cannot be empty."
            raise ValidationError(msg)
        if not self.project_manager or not self.project_manager.strip():
            msg = "Project manager cannot be empty."
            raise ValidationError(msg)
        if self.customer_id is None or self.customer_id <= 0:
            msg = "Customer ID must be valid."
            raise ValidationError(msg)
        if not self.service or not self.service.strip():
            msg = "Service cannot be empty."
            raise ValidationError(msg)
        if self.start_date > self.end_date:
            msg = "Start date must be before end date."
            raise ValidationError(msg)
        if self.total_price < 0:
            msg = "Total price cannot be negative."
            raise ValidationError(msg)
        if decimal_places(self.total_price) > PRICE_SCALE:
            msg = f"Total price can have at most {PRICE_SCALE} decimal places."
            raise ValidationError(msg)
        if self.total_price >= PRICE_LIMIT:
            msg = f"Total price must be less than {PRICE_LIMIT:,}."
            raise ValidationError(msg)
        return True


class ProjectService:
    """
    Owns the business rules for projects and wraps the project repository.

    Args:
        repository: The project repository to delegate to

    Keyword Args:
        customer_repository: If given, the customer a project refers to must
            exist in it

    """

    def __init__(
        self,
        repository: ProjectRepositoryProtocol,
        customer_repository: CustomerRepositoryProtocol | None = None,
    ) -> None:
        #: The project repository.
        self.repository = repository
        #: The customer repository used to check customer references.
        self.customer_repository = customer_repository

    def list_all(self) -> list[Project]:
        """
        Return all projects.

        Raises:
            ServiceError: If the projects could not be read

        """
        try:
            return self.repository.list_all()
        except Exception as e:
            logger.exception("Error retrieving all projects")
            msg = "Failed to retrieve projects. Please try again later."
            raise ServiceError(msg, e) from e

    def get(self, project_number: str) -> Project:
        """
        Return the project numbered ``project_number``.

        Lookup ignores surrounding whitespace and letter case, so ``p001``
        finds ``P001``.

        Raises:
            ValidationError: If ``project_number`` is empty
            DoesNotExist: If there is no such project
            ServiceError: If the project could not be read

        """
        if not project_number or not project_number.strip():
            msg = "Project number cannot be empty."
            raise ValidationError(msg)
        project_number = project_number.strip().upper()
        try:
            project = self.repository.get(project_number)
        except Exception as e:
            logger.exception(f"Error retrieving project {project_number}")
            msg = f"Failed to retrieve project {project_number}. Please try again later."
            raise ServiceError(msg, e) from e
        if project is None:
            raise DoesNotExist("Project", project_number)
        return project

    def create(self, data: ProjectInputModel | None) -> Project:
        """
        Validate ``data`` and store it as a new project.

        Nothing is written unless validation passes.

        Raises:
            MissingInput: If ``data`` is ``None``
            ValidationError: If ``data`` breaks a project rule
            ServiceError: If the project could not be stored

        Returns:
            The new project, with its number assigned

        """
        if data is None:
            msg = "Project data cannot be empty."
            raise MissingInput(msg)
        data.validate()
        self._check_customer(data.customer_id)
        try:
            project = self.repository.create(data)
        except Exception as e:
            logger.exception("Error creating project")
            msg = "Failed to create project. Please try again later."
            raise ServiceError(msg, e) from e
        logger.info(f"Created project {project.project_number}: {project.name}")
        return project

    def update(self, project: Project) -> Project:
        """
        Validate the edited ``project`` and persist its changes.

        If validation fails the edits are discarded, so ``project`` shows its
        stored values again.

        Raises:
            ValidationError: If the edited fields break a project rule
            ServiceError: If the changes could not be stored

        """
        project_number = project.project_number
        try:
            ProjectInputModel.from_project(project).validate()
            self._check_customer(project.customer_id)
        except ValidationError:
            self.discard(project)
            raise
        try:
            self.repository.save(project)
        except Exception as e:
            logger.exception(f"Error saving project {project_number}")
            self.repository.revert()
            msg = (
                f"Failed to save project {project_number}. "
                "Please try again later."
            )
            raise ServiceError(msg, e) from e
        logger.info(f"Updated project {project_number}")
        return project

    def discard(self, project: Project) -> None:
        """
        Throw away unsaved edits to ``project``.
        """
        logger.debug(f"Discarding unsaved changes to project {project.project_number}")
        self.repository.revert()

    def _check_customer(self, customer_id: int | None) -> None:
        """
        Raise :class:`ValidationError` if the referenced customer is unknown.
        """
        if self.customer_repository is None or customer_id is None:
            return
        try:
            customer = self.customer_repository.get(customer_id)
        except Exception as e:
            logger.exception(f"Error retrieving customer {customer_id}")
            msg = f"Failed to retrieve customer {customer_id}. Please try again later."
            raise ServiceError(msg, e) from e
        if customer is None:
            msg = f"Customer with ID {customer_id} does not exist."
            raise ValidationError(msg)
