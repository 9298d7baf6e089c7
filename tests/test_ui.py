import pytest

from arraykit.collection import ArrayStorage, DynamicArray
from arraykit.typeinfo import get_string_ti
from arraykit.ui import (
    print_array_contents,
    print_array_managing_menu,
    print_array_storage,
    print_double_is_set,
    print_error,
    print_exit,
    print_main_menu,
    print_sorting_menu,
    print_string_is_set,
)
from arraykit.util import (
    ArrayKitError,
    CmdOutOfContextError,
    MenuDirective,
    ZeroLengthInputError,
)


@pytest.fixture
def storage():
    return ArrayStorage()


def test_print_error_shows_message_then_retry(capsys):
    print_error(CmdOutOfContextError())
    out = capsys.readouterr().out
    assert out == CmdOutOfContextError.default_message + "\nTry again.\n"


def test_print_error_other_kind(capsys):
    print_error(ZeroLengthInputError())
    assert capsys.readouterr().out.startswith("Error. Provided input is empty.")


def test_print_error_base_error_only_retry(capsys):
    print_error(ArrayKitError())
    assert capsys.readouterr().out == "Try again.\n"


def test_print_exit_user(capsys):
    print_exit(MenuDirective.USER_EXIT)
    assert capsys.readouterr().out == "Exexcution successfully finished.\n"


def test_print_exit_system(capsys):
    print_exit(MenuDirective.SYSTEM_EXIT)
    assert "incorrect value" in capsys.readouterr().out


def test_print_main_menu(capsys):
    print_main_menu()
    assert "0 - Stop the execution." in capsys.readouterr().out


def test_print_sorting_menu(capsys):
    print_sorting_menu()
    assert "4. Descending heap sort." in capsys.readouterr().out


def test_print_array_managing_menu(capsys):
    print_array_managing_menu()
    assert "1. Sort one of the arrays available in the storage." in capsys.readouterr().out


def test_type_announcements(capsys):
    print_string_is_set()
    print_double_is_set()
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Contents type and operations set to strings.",
        "Contents type and operations set to double (real numbers).",
    ]


def test_print_array_contents(capsys, storage):
    array = DynamicArray(get_string_ti(), storage)
    array.append("b")
    array.append("a")
    print_array_contents(array)
    out = capsys.readouterr().out
    assert out == "Current content of provided array:\nb\n, a\n.\n\n"


def test_print_array_contents_empty(capsys, storage):
    print_array_contents(DynamicArray(get_string_ti(), storage))
    assert capsys.readouterr().out == "Current content of provided array:\n\n"


def test_print_array_storage_lists_each_array(capsys, storage):
    first = DynamicArray(get_string_ti(), storage)
    first.read_from_input("x y\n")
    DynamicArray(get_string_ti(), storage)
    print_array_storage(storage)
    out = capsys.readouterr().out
    assert "1. Of type string, containing 2 elements." in out
    assert "2. Of type string, containing 0 elements." in out