"""Data models for Project Tracker."""

from projtrack.models.customer import Customer
from projtrack.models.project import Project, ProjectStatus

__all__ = ["Customer", "Project", "ProjectStatus"]
