"""Tests for the console application, driven through scripted input."""

from datetime import date
from decimal import Decimal

import pytest

from projtrack.models import Project, ProjectStatus
from projtrack.repositories import CustomerRepository, ProjectRepository
from projtrack.services import CustomerService, ProjectService, seed_database
from projtrack.ui import ConsoleApp
from tests.conftest import TODAY


def feed(monkeypatch, *answers):
    """Answer ``input()`` calls in order, then signal end of input."""
    responses = iter(answers)

    def fake_input(_prompt=""):
        try:
            return next(responses)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


@pytest.fixture
def app(db_session):
    """Create a ConsoleApp over a seeded database."""
    seed_database(db_session, today=TODAY)
    customer_repository = CustomerRepository(db_session)
    return ConsoleApp(
        project_service=ProjectService(ProjectRepository(db_session), customer_repository),
        customer_service=CustomerService(customer_repository),
    )


def run(app):
    with pytest.raises(SystemExit) as exc_info:
        app.run()
    return exc_info.value.code


def stored(db_session, project_number):
    db_session.expire_all()
    return db_session.get(Project, project_number)


class TestMainMenu:
    """Test cases for the main menu."""

    def test_exit_option_exits_with_zero(self, app, monkeypatch, capsys):
        """Test option 4 ends the process with status 0."""
        feed(monkeypatch, "4")
        assert run(app) == 0
        out = capsys.readouterr().out
        assert "Project Management System" in out
        for item in [
            "1. View All Projects",
            "2. Create a New Project",
            "3. Edit an Existing Project",
            "4. Exit",
        ]:
            assert item in out

    def test_end_of_input_exits_with_zero(self, app, monkeypatch):
        """Test running out of input behaves like choosing Exit."""
        feed(monkeypatch)
        assert run(app) == 0

    def test_unknown_option_returns_to_menu(self, app, monkeypatch, capsys):
        """Test an unknown choice redisplays the menu."""
        feed(monkeypatch, "9", "4")
        run(app)
        out = capsys.readouterr().out
        assert "Invalid option." in out
        assert out.count("4. Exit") == 2


class TestListProjects:
    """Test cases for the project list and details screens."""

    def test_lists_projects(self, app, monkeypatch, capsys):
        """Test every project is listed with its dates and status."""
        feed(monkeypatch, "1", "0")
        run(app)
        out = capsys.readouterr().out
        assert "P001 - Sample Project (2026-03-15 to 2026-06-15) - NotStarted" in out
        assert "P002 - Website Redesign" in out
        assert "P003 - Database Migration" in out

    def test_empty_store(self, db_session, monkeypatch, capsys):
        """Test an empty store says so."""
        customer_repository = CustomerRepository(db_session)
        app = ConsoleApp(
            ProjectService(ProjectRepository(db_session)),
            CustomerService(customer_repository),
        )
        feed(monkeypatch, "1", "")
        run(app)
        assert "No projects found." in capsys.readouterr().out

    def test_shows_details(self, app, monkeypatch, capsys):
        """Test the details screen shows every field."""
        feed(monkeypatch, "1", "p002", "n")
        run(app)
        out = capsys.readouterr().out
        assert "Project Details (P002)" in out
        assert "Name: Website Redesign" in out
        assert "Duration: 2026-03-05 to 2026-05-15" in out
        assert "Manager: Jane Smith" in out
        assert "Customer: Tech Corp" in out
        assert "Service: Web Design" in out
        assert "Total Price: 150,000.00 SEK" in out
        assert "Status: Ongoing" in out
        assert "Remaining Days:" in out

    def test_unknown_project_number(self, app, monkeypatch, capsys):
        """Test a lookup miss is reported and the menu returns."""
        feed(monkeypatch, "1", "P404", "")
        run(app)
        assert "Project P404 not found." in capsys.readouterr().out


class TestCreateProject:
    """Test cases for the create screen."""

    def test_creates_project(self, app, db_session, monkeypatch, capsys):
        """Test a complete form creates the next numbered project."""
        feed(
            monkeypatch,
            "2",
            "Mobile App",  # name
            "2026-04-01",  # start
            "2026-09-30",  # end
            "Ann Berg",  # manager
            "2",  # customer
            "App Development",  # service
            "450000",  # price
            "2",  # status
            "",  # pause
        )
        run(app)

        assert "Project P004 added." in capsys.readouterr().out
        project = stored(db_session, "P004")
        assert project.name == "Mobile App"
        assert project.start_date == date(2026, 4, 1)
        assert project.end_date == date(2026, 9, 30)
        assert project.project_manager == "Ann Berg"
        assert project.customer.name == "Tech Corp"
        assert project.service == "App Development"
        assert project.total_price == Decimal(450000)
        assert project.status is ProjectStatus.ONGOING

    def test_creates_new_customer(self, app, db_session, monkeypatch, capsys):
        """Test 'n' at the customer prompt adds a customer for the project."""
        feed(
            monkeypatch,
            "2",
            "Intranet",
            "2026-04-01",
            "2026-04-30",
            "Ann Berg",
            "n",
            "Acme AB",
            "Consulting",
            "",  # price defaults to 0
            "",  # status defaults to NotStarted
            "",
        )
        run(app)

        assert "Customer 4 added." in capsys.readouterr().out
        project = stored(db_session, "P004")
        assert project.customer.name == "Acme AB"
        assert project.total_price == Decimal(0)
        assert project.status is ProjectStatus.NOT_STARTED

    def test_reprompts_for_invalid_values(self, app, db_session, monkeypatch, capsys):
        """Test bad dates, prices, customers and statuses are asked again."""
        feed(
            monkeypatch,
            "2",
            "Intranet",
            "first of april",
            "2026-04-01",
            "2026-04-30",
            "Ann Berg",
            "abc",
            "99",
            "1",
            "Consulting",
            "lots",
            "1499.999",
            "1000",
            "7",
            "3",
            "",
        )
        run(app)

        out = capsys.readouterr().out
        assert "Invalid date, expected yyyy-mm-dd." in out
        assert "Customer ID must be a number." in out
        assert "Customer 99 does not exist." in out
        assert "Invalid price, expected a number." in out
        assert "Invalid price, at most 2 decimal places." in out
        assert "Invalid status, choose 1, 2 or 3." in out
        assert stored(db_session, "P004").status is ProjectStatus.COMPLETED
        assert stored(db_session, "P004").total_price == Decimal(1000)

    def test_blank_customer_adds_new_customer(self, app, db_session, monkeypatch, capsys):
        """Test a blank customer ID on a new project asks for a new customer."""
        feed(
            monkeypatch,
            "2",
            "Intranet",
            "2026-04-01",
            "2026-04-30",
            "Ann Berg",
            "",  # customer
            "",  # blank name asks again
            "",  # customer
            "Nordic Retail",
            "Consulting",
            "",
            "",
            "",
        )
        run(app)

        out = capsys.readouterr().out
        assert "A customer is required." in out
        assert "Customer 4 added." in out
        assert stored(db_session, "P004").customer.name == "Nordic Retail"

    def test_validation_error_is_reported(self, app, db_session, monkeypatch, capsys):
        """Test an end date before the start date creates nothing."""
        feed(
            monkeypatch,
            "2",
            "Backwards",
            "2026-05-01",
            "2026-04-01",
            "Ann Berg",
            "1",
            "Consulting",
            "100",
            "1",
            "",
        )
        run(app)

        assert "Error: Start date must be before end date." in capsys.readouterr().out
        assert stored(db_session, "P004") is None


class TestEditProject:
    """Test cases for the edit screen."""

    def edit_price(self, monkeypatch, price, save):
        feed(
            monkeypatch,
            "3",
            "P002",
            "",  # name
            "",  # start
            "",  # end
            "",  # manager
            "",  # customer
            "",  # service
            price,
            "",  # status
            save,
            "",  # pause
        )

    def test_declining_to_save_keeps_stored_value(
        self, app, db_session, monkeypatch, capsys
    ):
        """Test answering 'n' leaves the stored price unchanged."""
        self.edit_price(monkeypatch, "999", "n")
        run(app)

        assert "Changes discarded." in capsys.readouterr().out
        assert stored(db_session, "P002").total_price == Decimal(150000)

    def test_confirming_save_persists_value(self, app, db_session, monkeypatch, capsys):
        """Test answering 'y' stores the new price and keeps other fields."""
        self.edit_price(monkeypatch, "999", "y")
        run(app)

        assert "Saved." in capsys.readouterr().out
        project = stored(db_session, "P002")
        assert project.total_price == Decimal(999)
        assert project.name == "Website Redesign"
        assert project.customer.name == "Tech Corp"

    def test_invalid_edit_is_not_saved(self, app, db_session, monkeypatch, capsys):
        """Test an edit breaking a rule is reported and nothing is stored."""
        self.edit_price(monkeypatch, "-1", "y")
        run(app)

        assert "Error: Total price cannot be negative." in capsys.readouterr().out
        assert stored(db_session, "P002").total_price == Decimal(150000)

    def test_edit_from_details_screen(self, app, db_session, monkeypatch):
        """Test the details screen leads into the edit screen."""
        feed(
            monkeypatch,
            "1",
            "P003",
            "y",  # edit?
            "Data Warehouse",
            "",
            "",
            "",
            "",
            "",
            "",
            "3",
            "y",
            "",
        )
        run(app)

        project = stored(db_session, "P003")
        assert project.name == "Data Warehouse"
        assert project.status is ProjectStatus.COMPLETED

    def test_unknown_project_number(self, app, monkeypatch, capsys):
        """Test editing a missing project reports it."""
        feed(monkeypatch, "3", "P999", "")
        run(app)
        assert "Project P999 not found." in capsys.readouterr().out
