"""Interactive menus that drive array input, management and sorting."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

from .collection import DynamicArray, get_storage
from .input import cmd_input, receiver
from .sort import SortOrder, bubble_sort, heap_sort
from .typeinfo import get_string_ti
from .ui import (
    print_array_contents,
    print_array_managing_menu,
    print_array_storage,
    print_double_is_set,
    print_error,
    print_exit,
    print_kboard_input_menu,
    print_main_menu,
    print_sorting_menu,
    print_string_is_set,
)
from .util import ArrayKitError, MenuDirective

_SORTERS = {
    1: (bubble_sort, SortOrder.ASCENDING),
    2: (bubble_sort, SortOrder.DESCENDING),
    3: (heap_sort, SortOrder.ASCENDING),
    4: (heap_sort, SortOrder.DESCENDING),
}


def choose_array(stream: TextIO | None = None) -> DynamicArray | None:
    """Let the user pick a stored array by number; ``None`` when none was picked."""
    storage = get_storage()
    print_array_storage(storage)
    try:
        command = cmd_input(len(storage), stream)
    except ArrayKitError as error:
        print_error(error)
        return None
    if command == 0:
        return None
    return storage[command - 1]


def sorting_menu(stream: TextIO | None = None) -> MenuDirective:
    """Pick an array and a sorting method, then sort and show the array."""
    array = choose_array(stream)
    if array is None:
        return MenuDirective.USER_CONTINUE
    print_sorting_menu()
    try:
        command = cmd_input(len(_SORTERS), stream)
    except ArrayKitError as error:
        print_error(error)
        return MenuDirective.USER_CONTINUE
    if command in _SORTERS:
        sorter, order = _SORTERS[command]
        print_array_contents(array)
        sorter(array, order)
        print_array_contents(array)
    return MenuDirective.USER_CONTINUE


def array_managing(stream: TextIO | None = None) -> MenuDirective:
    """Offer the operations on stored arrays and run the chosen one."""
    print_array_managing_menu()
    try:
        command = cmd_input(4, stream)
    except ArrayKitError as error:
        print_error(error)
        return MenuDirective.USER_CONTINUE
    if command == 1:
        sorting_menu(stream)
    return MenuDirective.USER_CONTINUE


def kboard_input_menu(stream: TextIO | None = None) -> MenuDirective:
    """Read an array of the chosen element type from one input line."""
    print_kboard_input_menu()
    try:
        command = cmd_input(2, stream)
    except ArrayKitError as error:
        print_error(error)
        return MenuDirective.USER_CONTINUE

    if command == 1:
        print_string_is_set()
        try:
            text = receiver(stream)
        except ArrayKitError as error:
            print_error(error)
            return MenuDirective.USER_CONTINUE
        array = DynamicArray(get_string_ti())
        array.read_from_input(text)
        array_managing(stream)
    elif command == 2:
        print_double_is_set()
    return MenuDirective.USER_CONTINUE


def main_menu(
    argv: Sequence[str] | None = None, stream: TextIO | None = None
) -> MenuDirective:
    """Run the top-level menu until the user exits or input runs out."""
    while True:
        print_main_menu()
        try:
            command = cmd_input(2, stream)
            if command == 0:
                print_exit(MenuDirective.USER_EXIT)
                return MenuDirective.USER_EXIT
            if command == 1:
                kboard_input_menu(stream)
        except ArrayKitError as error:
            print_error(error)
        except EOFError:
            return MenuDirective.SYSTEM_EXIT


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the interactive program."""
    main_menu(sys.argv[1:] if argv is None else argv, sys.stdin)
    return 0