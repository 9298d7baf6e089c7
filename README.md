# arraykit

A small interactive console program for working with typed dynamic arrays.
Arrays of strings are entered from the keyboard and kept in a shared
storage. Any stored array can then be sorted in ascending or descending
order with bubble sort or heap sort.

## Installation

```
pip install .
```

## Running

```
arraykit
```

Every menu prints its choices and then asks for a command number after a
`>> ` prompt. The main menu offers:

- `1`: enter array contents from the keyboard
- `2`: read contents from a file (listed, but does nothing yet)
- `0`: stop

The program also stops when standard input runs out.

After choosing keyboard input, pick `1` for strings (`0` goes back). Then
enter one line of words separated by spaces. A word that starts with a
double quote runs to the closing quote or to the end of the line, so it
can contain spaces; the quotes are not kept. For example:

```
apple "green pear" banana
```

gives the three elements `apple`, `green pear` and `banana`.

The new array is put into the storage and the array-managing menu opens.
Choose `1` to sort one of the stored arrays. The stored arrays are listed,
numbered from one, with their element type and size; enter the number of
the array to sort (`0` goes back). Then pick a sorting method:

- `1`: ascending bubble sort
- `2`: descending bubble sort
- `3`: ascending heap sort
- `4`: descending heap sort

The array contents are printed before and after sorting.

A command that is not a number, is empty, or is larger than the menu's
highest choice is reported with a short message, followed by "Try again.".

## What it does not do

- Reading array contents from a file (main menu choice `2`) is not
  available; the choice returns to the main menu.
- Only string arrays can be entered. Choosing real numbers (keyboard menu
  choice `2`) prints a message and returns without creating an array.
- The array-managing menu lists concatenation, `map()` and `where()`
  (choices `2` to `4`), but only sorting (choice `1`) does anything.

## Using it as a library

```python
from arraykit.collection import ArrayStorage, DynamicArray
from arraykit.sort import SortOrder, bubble_sort, heap_sort
from arraykit.typeinfo import get_string_ti

storage = ArrayStorage()
words = DynamicArray(get_string_ti(), storage)
words.read_from_input('pear apple "fig tree"')
bubble_sort(words, SortOrder.ASCENDING)
print(list(words))  # ['apple', 'fig tree', 'pear']
```

- `arraykit.collection`: `DynamicArray` (with `append`, `prepend`,
  `index_push`, `read_from_input`, `swap`, indexing, iteration and `len`),
  `ArrayStorage`, the process-wide `get_storage()`, and `tokenize()`,
  which splits input text the way the keyboard input does. A
  `DynamicArray` created without a storage is added to `get_storage()`.
- `arraykit.sort`: `bubble_sort` and `heap_sort`, both in place, with
  `SortOrder.ASCENDING` (the default) or `SortOrder.DESCENDING`.
- `arraykit.typeinfo`: `TypeInfo` and the string element type from
  `get_string_ti()`. Strings compare character by character, a proper
  prefix ordering first (`string_compare`, `string_max`). String helpers
  `is_alpha`, `is_digit`, `is_upper_case`, `is_lower_case`,
  `invert_string`, `to_lower_case` and `to_upper_case` work on ASCII
  letters and digits only.
- `arraykit.util`: `char_to_int` and `char_to_double` parse non-negative
  numbers from the first line of a string, and `power` raises a number to
  an integer exponent. The parsers raise subclasses of `ArrayKitError`,
  such as `UnexpectedAlphaError`, `ZeroLengthInputError` or
  `DoubleInputError`, when the input is malformed.
- `arraykit.input`: `receiver` reads one input line of at most
  1,048,576 characters (raising `InputOverflowError` beyond that), and
  `cmd_input` reads a menu command, raising `CmdOutOfContextError` when it
  is out of range and `EOFError` when input runs out.

## Tests

```
pip install .[test]
pytest
```