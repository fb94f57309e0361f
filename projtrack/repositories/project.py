"""Project repository."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from sqlalchemy import select
from sqlalchemy.orm import Session

from projtrack.models import Project

if TYPE_CHECKING:
    from projtrack.services.project import ProjectInputModel


class ProjectRepository:
    """
    CRUD primitives for :class:`~projtrack.models.project.Project` rows.

    Args:
        session: The SQLAlchemy session shared by the interactive session

    """

    #: Prefix of every project number.
    PREFIX: Final[str] = "P"
    #: Minimum number of digits in a project number.
    DIGITS: Final[int] = 3
    #: Matches a well-formed project number and captures its counter.
    NUMBER_REGEX: Final[re.Pattern[str]] = re.compile(r"^P(\d+)$")

    def __init__(self, session: Session) -> None:
        #: The SQLAlchemy session.
        self.session = session

    def list_all(self) -> list[Project]:
        """
        Return all projects ordered by project number.
        """
        return list(
            self.session.scalars(select(Project).order_by(Project.project_number)).all()
        )

    def get(self, project_number: str) -> Project | None:
        """
        Get a project by number, or ``None`` if there is no such project.
        """
        return self.session.get(Project, project_number)

    def create(self, data: ProjectInputModel) -> Project:
        """
        Insert a new project built from ``data`` and commit it.

        The project number is assigned here; callers never choose it.

        Args:
            data: Validated project input

        Returns:
            The new :class:`~projtrack.models.project.Project`

        """
        project = Project(
            project_number=self.next_project_number(),
            name=data.name,
            start_date=data.start_date,
            end_date=data.end_date,
            project_manager=data.project_manager,
            customer_id=data.customer_id,
            service=data.service,
            total_price=data.total_price,
            status=data.status,
        )
        self.session.add(project)
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        self.session.refresh(project)
        return project

    def next_project_number(self) -> str:
        """
        Compute the number the next created project will get.

        The counters of all stored numbers are compared as integers, not as
        strings, so ``P1000`` correctly follows ``P999``.

        Returns:
            ``P001`` for an empty store, otherwise the highest counter plus
            one, zero-padded to at least three digits

        """
        numbers = self.session.scalars(select(Project.project_number)).all()
        counters = [
            int(match.group(1))
            for match in (self.NUMBER_REGEX.match(number) for number in numbers)
            if match
        ]
        next_counter = max(counters, default=0) + 1
        return f"{self.PREFIX}{next_counter:0{self.DIGITS}d}"

    def save(self, project: Project) -> Project:
        """
        Commit pending attribute changes made to ``project``.
        """
        self.session.add(project)
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        self.session.refresh(project)
        return project

    def revert(self) -> None:
        """
        Discard every unsaved change; edited objects reload from the database.
        """
        self.session.rollback()
