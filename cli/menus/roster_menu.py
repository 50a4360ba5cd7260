# cli/menus/roster_menu.py

"""
Student Grading System menu for the Roster CLI.

This module defines the full interface for working with `StudentRecord` objects, including:
- Adding and removing students
- Searching for a student by name or ID
- Listing every student in the order they were added
- Reporting the average, highest, and lowest grades

All operations are routed through the `Roster` API. Invalid input is reported and the user is
returned to the menu without the `Roster` being touched.
"""

from typing import cast

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from models.roster import Roster
from models.student_record import StudentKind, StudentRecord


def run(roster: Roster) -> None:
    """
    Top-level loop with dispatch for the Student Grading System menu.

    Args:
        roster (Roster): The active `Roster`.

    Raises:
        RuntimeError: If the menu response is unrecognized.

    Notes:
        - Options are numbered 1 through 8, with 8 leaving the loop.
    """
    title = formatters.format_banner_text("Student Grading System")
    options = [
        ("Add a Student", add_student),
        ("Remove a Student", remove_student),
        ("Search for a Student", search_student),
        ("Display Student List", view_students),
        ("Calculate Average Grade", view_average_grade),
        ("Display Students with Highest Grade", view_top_grade_students),
        ("Display Students with Lowest Grade", view_bottom_grade_students),
        ("Exit", lambda _: MenuSignal.EXIT),
    ]

    while True:
        menu_response = helpers.display_menu(title, options, zero_option=None)

        if callable(menu_response):
            if menu_response(roster) is MenuSignal.EXIT:
                break

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


# === add student ===


def add_student(roster: Roster) -> None:
    """
    Prompts for a new `StudentRecord` and adds it to the roster.

    Args:
        roster (Roster): The active `Roster`.
    """
    new_student = prompt_new_student()

    if new_student is None:
        return

    roster_response = roster.add_student(new_student)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        print(f"\n{new_student.name} was not added.")

    else:
        print(f"\n{roster_response.detail}")


def prompt_new_student() -> StudentRecord | None:
    """
    Creates a new `StudentRecord` from user input.

    Returns:
        A new `StudentRecord` object, or None if the user cancels or enters invalid data.

    Notes:
        - Prompts in order for ID, name, grade, major, and type.
        - A blank name cancels; a non-numeric ID, grade, or type aborts with a message.
    """
    student_id = helpers.prompt_int_input("Enter Student ID:", "Student ID")

    if student_id is MenuSignal.CANCEL:
        return None
    student_id = cast(int, student_id)

    name = helpers.prompt_user_input_or_cancel(
        "Enter Full Name (leave blank to cancel):"
    )

    if name is MenuSignal.CANCEL:
        return None
    name = cast(str, name)

    grade = helpers.prompt_float_input("Enter Grade:", "Grade")

    if grade is MenuSignal.CANCEL:
        return None
    grade = cast(float, grade)

    major = helpers.prompt_user_input("Enter Major:")

    selector = helpers.prompt_int_input(
        "Enter type (1 for Undergraduate, 2 for Graduate):", "Type"
    )

    if selector is MenuSignal.CANCEL:
        return None

    try:
        kind = StudentKind.from_selector(cast(int, selector))

        return StudentRecord(
            id=student_id,
            name=name,
            grade=grade,
            major=major,
            kind=kind,
        )

    except (TypeError, ValueError) as e:
        print(f"\n[ERROR] Could not create student: {e}")
        return None


# === remove student ===


def remove_student(roster: Roster) -> None:
    """
    Prompts for a student ID and removes the matching record from the roster.

    Args:
        roster (Roster): The active `Roster`.
    """
    student_id = helpers.prompt_int_input("Enter Student ID to remove:", "Student ID")

    if student_id is MenuSignal.CANCEL:
        return

    roster_response = roster.remove_student(cast(int, student_id))

    if not roster_response.success:
        helpers.display_response_failure(roster_response)

    else:
        print(f"\n{roster_response.detail}")


# === search student ===


def search_student(roster: Roster) -> None:
    """
    Prompts for a name, or an ID if the name is left blank, and displays the matching student.

    Args:
        roster (Roster): The active `Roster`.
    """
    name = helpers.prompt_user_input_or_none(
        "Enter Student Full Name (leave blank to search by ID):"
    )

    student_id = None

    if name is None:
        id_input = helpers.prompt_int_input("Enter Student ID:", "Student ID")

        if id_input is MenuSignal.CANCEL:
            return
        student_id = cast(int, id_input)

    roster_response = roster.find_student(name, student_id)

    if not roster_response.success:
        print("\nStudent not found.")
        return

    student = roster_response.data["record"]

    print(f"\n{model_formatters.format_student_found(student)}")


# === view students ===


def view_students(roster: Roster) -> None:
    """
    Displays every student in the order they were added.

    Args:
        roster (Roster): The active `Roster`.
    """
    if roster.is_empty:
        print("\nNo students are currently listed.")
        return

    print("\nList of Students:")
    helpers.display_results(
        roster.students, formatter=model_formatters.format_student_oneline
    )


def view_average_grade(roster: Roster) -> None:
    roster_response = roster.average_grade()

    print(f"\n{model_formatters.format_average_grade(roster_response.data['average'])}")


def view_top_grade_students(roster: Roster) -> None:
    display_grade_extremum(roster.top_grade_students().data, "Highest")


def view_bottom_grade_students(roster: Roster) -> None:
    display_grade_extremum(roster.bottom_grade_students().data, "Lowest")


def display_grade_extremum(data: dict, label: str) -> None:
    """
    Displays the students tied at a grade extremum.

    Args:
        data (dict): The payload of `Roster.top_grade_students()` or `Roster.bottom_grade_students()`.
        label (str): "Highest" or "Lowest", used in the heading.
    """
    records = data["records"]

    if not records:
        print("\nNo students found.")
        return

    print(f"\n{model_formatters.format_extremum_heading(label, data['grade'])}")
    helpers.display_results(
        records, formatter=model_formatters.format_student_oneline
    )
