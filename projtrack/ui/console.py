"""Menu-driven console front end."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Final

from projtrack.exc import DoesNotExist, ServiceError, ValidationError
from projtrack.models import ProjectStatus
from projtrack.services.project import ProjectInputModel
from projtrack.utils import format_date, format_price

from .prompts import (
    confirm,
    pause,
    print_header,
    print_menu_item,
    print_section_title,
    prompt,
    prompt_date,
    prompt_price,
    prompt_status,
)

if TYPE_CHECKING:
    from projtrack.models import Project
    from projtrack.services.customer import CustomerService
    from projtrack.services.project import ProjectService

logger = logging.getLogger(__name__)


class ConsoleApp:
    """
    The interactive project tracker.

    Every screen is entered from the main menu and returns to it, whether it
    finishes, is cancelled or fails.  Only :meth:`exit` ends the loop.

    Args:
        project_service: The project service
        customer_service: The customer service

    """

    #: The title shown above the main menu.
    TITLE: Final[str] = "Project Management System"
    #: Typed at the customer prompt to add a new customer.
    NEW_CUSTOMER: Final[str] = "n"

    def __init__(
        self, project_service: ProjectService, customer_service: CustomerService
    ) -> None:
        self.project_service = project_service
        self.customer_service = customer_service
        #: Main menu entries: key, label, action.
        self.menu: list[tuple[str, str, Callable[[], None]]] = [
            ("1", "View All Projects", self.show_projects_list),
            ("2", "Create a New Project", self.add_new_project),
            ("3", "Edit an Existing Project", self.edit_project_menu),
            ("4", "Exit", self.exit),
        ]

    def run(self) -> None:
        """
        Show the main menu until the user exits.  End of input counts as exit.
        """
        while True:
            try:
                self.show_main_menu()
            except EOFError:
                print()
                self.exit()

    def show_main_menu(self) -> None:
        print()
        print_header(self.TITLE)
        for key, label, _ in self.menu:
            print_menu_item(int(key), label)
        choice = input("Select an option: ").strip()
        for key, _, action in self.menu:
            if choice == key:
                self.run_action(action)
                return
        print("Invalid option.")

    def run_action(self, action: Callable[[], None]) -> None:
        """
        Run one screen, reporting any failure and returning to the menu.
        """
        try:
            action()
        except ValidationError as e:
            print(f"Error: {e}")
            pause()
        except DoesNotExist as e:
            print(f"{e.resource_type} {e.resource_id} not found.")
            pause()
        except ServiceError as e:
            # Already logged with its traceback by the service
            print(f"Error: {e}")
            pause()

    def exit(self) -> None:
        logger.info("Exiting")
        sys.exit(0)

    # ---------------------------------------------------------
    # Projects list and details
    # ---------------------------------------------------------

    def show_projects_list(self) -> None:
        print_section_title("List of Projects")
        projects = self.project_service.list_all()
        if not projects:
            print("No projects found.")
            pause()
            return

        for project in projects:
            print(self.format_summary(project))

        project_number = input(
            "\nEnter project number to view details or 0 to go back: "
        ).strip()
        if not project_number or project_number == "0":
            return
        project = self.project_service.get(project_number)
        self.show_project_details(project)

    @staticmethod
    def format_summary(project: Project) -> str:
        """
        Format ``project`` as a single list line.
        """
        return (
            f"{project.project_number} - {project.name} "
            f"({format_date(project.start_date)} to {format_date(project.end_date)})"
            f" - {project.status}"
        )

    def show_project_details(self, project: Project) -> None:
        print_section_title(f"Project Details ({project.project_number})")
        print(f"Name: {project.name}")
        print(
            f"Duration: {format_date(project.start_date)} to "
            f"{format_date(project.end_date)}"
        )
        print(f"Manager: {project.project_manager}")
        print(f"Customer: {project.customer.name}")
        print(f"Service: {project.service}")
        print(f"Total Price: {format_price(project.total_price)} SEK")
        print(f"Status: {project.status}")
        print(f"Remaining Days: {project.remaining_days()}")
        if project.is_behind_schedule():
            print("Warning: this project is behind schedule.")

        if confirm("\nEdit Project?"):
            self.edit_project(project)

    # ---------------------------------------------------------
    # Create
    # ---------------------------------------------------------

    def add_new_project(self) -> None:
        print_section_title("Create a New Project")
        data = self.prompt_project_fields()
        project = self.project_service.create(data)
        print(f"Project {project.project_number} added.")
        pause()

    # ---------------------------------------------------------
    # Edit
    # ---------------------------------------------------------

    def edit_project_menu(self) -> None:
        print_section_title("Edit an Existing Project")
        project_number = input("Enter project number to edit: ").strip()
        if not project_number:
            return
        project = self.project_service.get(project_number)
        self.edit_project(project)

    def edit_project(self, project: Project) -> None:
        """
        Prompt for new values, apply them to ``project`` and save on request.

        Values are collected before any field is assigned, so a failure while
        prompting leaves ``project`` untouched.
        """
        print_section_title(f"Editing: {project.project_number}")
        data = self.prompt_project_fields(ProjectInputModel.from_project(project))
        data.apply_to(project)
        try:
            save = confirm("Save?")
        except EOFError:
            self.project_service.discard(project)
            raise
        if save:
            self.project_service.update(project)
            print("Saved.")
        else:
            self.project_service.discard(project)
            print("Changes discarded.")
        pause()

    # ---------------------------------------------------------
    # Field input
    # ---------------------------------------------------------

    def prompt_project_fields(
        self, current: ProjectInputModel | None = None
    ) -> ProjectInputModel:
        """
        Ask for every project field.

        Keyword Args:
            current: Existing values offered as defaults; when ``None`` the
                dates default to today, the price to 0 and the status to
                NotStarted

        Returns:
            The entered values; they are not validated here

        """
        today = date.today()  # noqa: DTZ011
        return ProjectInputModel(
            name=prompt("Name", current.name if current else None) or "",
            start_date=prompt_date(
                "Start Date (yyyy-mm-dd)", current.start_date if current else today
            ),
            end_date=prompt_date(
                "End Date (yyyy-mm-dd)", current.end_date if current else today
            ),
            project_manager=(
                prompt("Manager", current.project_manager if current else None) or ""
            ),
            customer_id=self.prompt_customer(current.customer_id if current else None),
            service=prompt("Service", current.service if current else None) or "",
            total_price=prompt_price(
                "Total Price (SEK)", current.total_price if current else Decimal(0)
            ),
            status=prompt_status(
                current.status if current else ProjectStatus.NOT_STARTED
            ),
        )

    def prompt_customer(self, default: int | None = None) -> int:
        """
        Ask which customer a project is for.

        The known customers are listed first.  Typing ``n``, or leaving the
        input blank when there is no current customer, adds a new customer,
        which is stored immediately.

        Keyword Args:
            default: Customer ID kept when the input is blank

        Returns:
            The ID of an existing customer

        """
        print("Customers:")
        for customer in self.customer_service.list_all():
            print(f"  {customer.customer_id}. {customer.name}")
        label = f"Customer ID ('{self.NEW_CUSTOMER}' for a new customer)"
        while True:
            value = prompt(label, str(default) if default is not None else None)
            if value is None or value.lower() == self.NEW_CUSTOMER:
                customer_id = self.add_customer()
                if customer_id is not None:
                    return customer_id
                continue
            try:
                customer_id = int(value)
            except ValueError:
                print("Customer ID must be a number.")
                continue
            if self.customer_service.exists(customer_id):
                return customer_id
            print(f"Customer {customer_id} does not exist.")

    def add_customer(self) -> int | None:
        """
        Ask for a name and store it as a new customer.

        Returns:
            The new customer's ID, or ``None`` if no name was entered

        """
        name = prompt("New customer name")
        if name is None:
            print("A customer is required.")
            return None
        customer = self.customer_service.create(name)
        print(f"Customer {customer.customer_id} added.")
        return customer.customer_id
