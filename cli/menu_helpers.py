# cli/menu_helpers.py

"""
Helper functions for CLI menus and user interaction in the Roster application.

This module provides utilities for:
- Displaying interactive menus and result lists
- Prompting for and validating user input
- Displaying standard system messages and error feedback

These functions are shared across menu modules to keep behavior consistent.
"""

from enum import Enum
from typing import Any, Callable, Iterable

from core.response import Response


class MenuSignal(Enum):
    CANCEL = "CANCEL"
    EXIT = "EXIT"


# === display methods ===


def display_menu(
    title: str,
    options: list[tuple[str, Callable[..., Any]]],
    zero_option: str | None = "Return",
) -> MenuSignal | Callable[..., Any]:
    """
    Displays a numbered CLI menu and returns the selected action.

    Args:
        title (str): The heading displayed above the menu options.
        options (list[tuple[str, Callable[..., Any]]]): A list of (label, action) pairs to present.
        zero_option (str | None, optional): The label for the "cancel" or "exit" option. Defaults to "Return".
            If None, no zero option is shown and "0" is treated as an invalid selection.

    Returns:
        MenuSignal.EXIT if the user selects the zero option.
        Callable[..., Any]: The function associated with the selected menu item.

    Notes:
        - Menu selection is repeated until a valid choice is made.
        - User input is matched by menu index, not by label.
    """
    while True:
        print(f"\n{title}")

        for i, (label, _) in enumerate(options, 1):
            print(f"{i}. {label}")

        if zero_option is not None:
            print(f"0. {zero_option}")

        choice = prompt_user_input("Enter your choice:")

        if choice == "0" and zero_option is not None:
            return MenuSignal.EXIT

        try:
            index = int(choice)

            if index < 1:
                raise IndexError(index)

            # adjusts for zero-index, retrieves action from tuple
            return options[index - 1][1]

        except (ValueError, IndexError):
            print(
                f"Invalid selection. Please enter a number between 1 and {len(options)}."
            )


def display_results(
    results: Iterable[Any],
    show_index: bool = False,
    formatter: Callable[[Any], str] = lambda x: str(x),
) -> None:
    """
    Prints a list of results to the console, optionally numbered and formatted.

    Args:
        results (Iterable[Any]): A sequence of results to display.
        show_index (bool, optional): If True, prepends a numbered index to each result. Defaults to False.
        formatter (Callable[[Any], str], optional): A function to convert each result to a display string. Defaults to str().
    """
    for i, result in enumerate(results, 1):
        prefix = f"{i:>2}. " if show_index else ""
        print(f"{prefix}{formatter(result)}")


# === prompt user input methods ===


# Prompt Helpers
#
# These functions provide a consistent way to handle user input.
#
# Conventions:
# - `prompt_user_input()` is the base function, used by all others to standardize the UI format.
# - Empty string responses are overloaded for control signals:
#     - `prompt_user_input_or_cancel()` returns `MenuSignal.CANCEL` on blank input.
#     - `prompt_user_input_or_none()` returns `None`.
# - Typed prompts return `MenuSignal.CANCEL` when the input cannot be converted,
#   after printing a single-line message.


def prompt_user_input(prompt: str) -> str:
    return input(f"\n{prompt}\n  >> ").strip()


def prompt_user_input_or_cancel(prompt: str) -> str | MenuSignal:
    response = prompt_user_input(prompt)
    return MenuSignal.CANCEL if response == "" else response


def prompt_user_input_or_none(prompt: str) -> str | None:
    response = prompt_user_input(prompt)
    return None if response == "" else response


def prompt_int_input(prompt: str, field_name: str) -> int | MenuSignal:
    response = prompt_user_input(prompt)

    try:
        return int(response)

    except ValueError:
        print(f"Invalid input. {field_name} must be an integer.")
        return MenuSignal.CANCEL


def prompt_float_input(prompt: str, field_name: str) -> float | MenuSignal:
    response = prompt_user_input(prompt)

    try:
        return float(response)

    except ValueError:
        print(f"Invalid input. {field_name} must be a number.")
        return MenuSignal.CANCEL


# === system messages ===


def display_response_failure(response: Response, debug: bool = False) -> None:
    """
    Displays a formatted error message based on a failed `Response`.

    Args:
        response (Response): The response object to inspect.
        debug (bool, optional): If True, prints the trace field when present. Defaults to False.

    Notes:
        - Does nothing if the response was successful.
        - Enum error codes are printed by name; string errors are printed as-is.
    """
    if response.success:
        return

    print(f"\n[ERROR: {response.error_label}] {response.detail}")

    if debug and response.trace:
        print(f"\nDebug Trace: {response.trace}")
