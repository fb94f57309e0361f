"""Line-oriented input and output helpers for the console."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Final

from projtrack.models import ProjectStatus
from projtrack.models.project import PRICE_SCALE
from projtrack.utils import decimal_places, format_date, parse_date, parse_price

#: Menu keys for each status, in display order.
STATUS_CHOICES: Final[dict[str, ProjectStatus]] = {
    "1": ProjectStatus.NOT_STARTED,
    "2": ProjectStatus.ONGOING,
    "3": ProjectStatus.COMPLETED,
}


def print_header(header: str) -> None:
    """
    Print ``header`` inside a double-lined box.
    """
    line = "═" * (len(header) + 8)
    print(f"╔{line}╗")
    print(f"║    {header}    ║")
    print(f"╚{line}╝")


def print_section_title(title: str) -> None:
    print(f"\n===== {title} =====")


def print_menu_item(number: int, text: str) -> None:
    print(f"{number}. {text}")


def pause() -> None:
    """
    Wait for the user to press Enter.
    """
    input("Press Enter to continue...")


def prompt(label: str, default: str | None = None) -> str | None:
    """
    Ask for a line of text.

    Args:
        label: The prompt text

    Keyword Args:
        default: Returned when the user enters nothing; shown in brackets

    Returns:
        The stripped input, or ``default`` if the input was blank

    """
    suffix = f" [{default}]" if default else ""
    value = input(f"{label}{suffix}: ").strip()
    return value or default


def prompt_date(label: str, default: date) -> date:
    """
    Ask for a ``yyyy-mm-dd`` date until a valid one (or nothing) is entered.

    Returns:
        The entered date, or ``default`` if the input was blank

    """
    while True:
        value = input(f"{label} [{format_date(default)}]: ").strip()
        if not value:
            return default
        try:
            return parse_date(value)
        except ValueError:
            print("Invalid date, expected yyyy-mm-dd.")


def prompt_price(label: str, default: Decimal) -> Decimal:
    """
    Ask for a price until a valid number (or nothing) is entered.

    Prices with more than two decimal places are asked again.  Negative
    numbers are accepted here; the project rules reject them.

    Returns:
        The entered price, or ``default`` if the input was blank

    """
    while True:
        value = input(f"{label} [{default}]: ").strip()
        if not value:
            return default
        try:
            price = parse_price(value)
        except ValueError:
            print("Invalid price, expected a number.")
            continue
        if decimal_places(price) > PRICE_SCALE:
            print(f"Invalid price, at most {PRICE_SCALE} decimal places.")
            continue
        return price


def prompt_status(default: ProjectStatus) -> ProjectStatus:
    """
    Ask for a status by its menu key.

    Returns:
        The chosen status, or ``default`` if the input was blank

    """
    options = " / ".join(f"{key}-{status}" for key, status in STATUS_CHOICES.items())
    while True:
        value = input(f"Status ({options}) [{default}]: ").strip()
        if not value:
            return default
        if value in STATUS_CHOICES:
            return STATUS_CHOICES[value]
        print("Invalid status, choose 1, 2 or 3.")


def confirm(question: str) -> bool:
    """
    Ask a yes/no question; only ``y`` or ``yes`` counts as yes.
    """
    return input(f"{question} (y/n): ").strip().lower() in {"y", "yes"}
