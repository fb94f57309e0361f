"""Capability interfaces the services depend on."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from projtrack.models import Customer, Project
    from projtrack.services.project import ProjectInputModel


class CustomerRepositoryProtocol(Protocol):
    """Persistence operations for customers."""

    def list_all(self) -> list[Customer]: ...

    def get(self, customer_id: int) -> Customer | None: ...

    def create(self, name: str) -> Customer: ...


class ProjectRepositoryProtocol(Protocol):
    """Persistence operations for projects."""

    def list_all(self) -> list[Project]: ...

    def get(self, project_number: str) -> Project | None: ...

    def create(self, data: ProjectInputModel) -> Project: ...

    def next_project_number(self) -> str: ...

    def save(self, project: Project) -> Project: ...

    def revert(self) -> None: ...
