# cli/main.py

"""
Entry point for the Roster CLI.

Creates an empty, in-memory `Roster` and hands it to the Student Grading System menu.
Nothing is saved; the roster is discarded when the program exits.
"""

import core.formatters as formatters
from cli.menus import roster_menu
from models.roster import Roster


def run_cli() -> None:
    """
    Runs the Student Grading System menu against a fresh `Roster`, then exits.

    Raises:
        SystemExit: Always raised once the menu loop ends.
    """
    roster = Roster()

    try:
        roster_menu.run(roster)

    except (KeyboardInterrupt, EOFError):
        print()

    exit_program()


def exit_program():
    """
    Displays an exit banner and terminates the CLI program.

    Raises:
        SystemExit: Always raised to immediately terminate execution.
    """
    exit_banner = formatters.format_banner_text("Exiting the program... Thank you!")
    print(f"\n{exit_banner}\n")

    raise SystemExit
