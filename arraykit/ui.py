"""Text shown to the user by the interactive menus."""

from __future__ import annotations

import subprocess
import sys

from .collection import ArrayStorage, DynamicArray
from .util import ArrayKitError, MenuDirective

_MAIN_MENU = (
    "Choose one of the listed functions and enter a number of chosen function.",
    "Each function is followed by its number.\n\t\t-----",
    "1 - Enter array contents via keyboard and process them.",
    "2 - Provide array contents through reading from a .txt file.",
    "0 - Stop the execution.",
)

_KBOARD_INPUT_MENU = (
    "Confirm to procceed to keyboard input.\n\t\t-----",
    "1 - confirm and proceed to strings input. "
    "Can consist of symbols from standard 7 bit ASCII table.",
    "2 - confirm and proceed to input real numbers. "
    "Can be provided in decimal or exponential format.",
    "0 - return to main menu.",
)

_SORTING_MENU = (
    "Choose sorting method. Again, enter a number of chosen method.",
    "0. Return to main menu.",
    "1. Ascending bubble sort.",
    "2. Descending bubble sort.",
    "3. Ascending heap sort.",
    "4. Descending heap sort.",
)

_ARRAY_MANAGING_MENU = (
    "Choose operation to perform on arrays. Again, enter a number of chosen operation.",
    "0. Return to main menu.",
    "1. Sort one of the arrays available in the storage.",
    "2. Concatenate two of the arrays available in the storage.",
    "3. Perform map() operation on one of the arrays available in the storage.",
    "4. Perform where() operation on one of the arrays available in the storage.",
)

_DOUBLE_IS_SET = "Contents type and operations set to double (real numbers)."
_STRING_IS_SET = "Contents type and operations set to strings."


def _clear_screen() -> None:
    """Clear the terminal when output goes to one."""
    if not sys.stdout.isatty():
        return
    try:
        subprocess.run(["clear"], check=False)
    except OSError:
        pass


def _show(lines: tuple[str, ...], *, clear: bool = False) -> str:
    """Print the given lines, optionally clearing first, and return the text."""
    if clear:
        _clear_screen()
    text = "\n".join(lines)
    print(text)
    return text


def print_main_menu() -> str:
    """Show the top-level menu and return its text."""
    return _show(_MAIN_MENU)


def print_error(error: ArrayKitError) -> None:
    """Describe an error and ask the user to try again."""
    _clear_screen()
    if error.code:
        print(error)
    print("Try again.")


def print_exit(context: MenuDirective) -> None:
    """Say why the program is finishing."""
    if context is MenuDirective.USER_EXIT:
        print("Exexcution successfully finished.")
    elif context is MenuDirective.SYSTEM_EXIT:
        print("Execution terminated due to multiple cases of providing an incorrect value.")


def print_kboard_input_menu() -> str:
    """Show the choice of element type for keyboard input and return its text."""
    return _show(_KBOARD_INPUT_MENU, clear=True)


def print_double_is_set() -> str:
    """Announce that real numbers were chosen and return the message."""
    return _show((_DOUBLE_IS_SET,))


def print_string_is_set() -> str:
    """Announce that strings were chosen and return the message."""
    return _show((_STRING_IS_SET,))


def print_array_storage(storage: ArrayStorage) -> None:
    """List every array in the storage, numbered from one."""
    print("Enter a number of array you want to work with.")
    print("Current array storage:")
    for number, array in enumerate(storage, start=1):
        print(
            f"{number}. Of type {array.type_info.type_name}, "
            f"containing {len(array)} elements."
        )


def print_array_contents(array: DynamicArray) -> None:
    """Print every element of an array using its type's printer."""
    print("Current content of provided array:")
    last = len(array) - 1
    for position, element in enumerate(array):
        array.type_info.printer(element)
        print(", " if position < last else ".", end="" if position < last else "\n")
    print()


def print_sorting_menu() -> str:
    """Show the available sorting methods and return the text."""
    return _show(_SORTING_MENU, clear=True)


def print_array_managing_menu() -> str:
    """Show the operations available on stored arrays and return the text."""
    return _show(_ARRAY_MANAGING_MENU, clear=True)