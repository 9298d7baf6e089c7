"""Growable typed arrays and the storage that keeps track of them."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Iterator

from .typeinfo import TypeInfo

_SEPARATORS = frozenset(" \n")
_QUOTE = '"'


def tokenize(text: str) -> list[str]:
    """Split input text into element tokens.

    Tokens are separated by spaces and newlines. A token that starts with a
    double quote runs to the closing quote or to the end of the line, so it
    may hold spaces; the quotes themselves are not kept.
    """
    tokens: list[str] = []
    current: list[str] = []
    in_word = False
    in_quotes = False

    for char in text:
        if in_quotes:
            if char == _QUOTE:
                in_quotes = False
            elif char == "\n":
                in_quotes = False
                tokens.append("".join(current))
                current = []
                in_word = False
            else:
                current.append(char)
            continue

        if char in _SEPARATORS:
            if in_word:
                tokens.append("".join(current))
                current = []
                in_word = False
            continue

        if char == _QUOTE and not in_word:
            in_quotes = True
            in_word = True
            continue

        current.append(char)
        in_word = True

    if in_word:
        tokens.append("".join(current))
    return tokens


class ArrayStorage:
    """An ordered registry of every array created against it."""

    def __init__(self) -> None:
        self._arrays: list[DynamicArray] = []

    def add(self, array: DynamicArray) -> None:
        """Register an array at the end of the storage."""
        self._arrays.append(array)

    def __len__(self) -> int:
        return len(self._arrays)

    def __iter__(self) -> Iterator[DynamicArray]:
        return iter(self._arrays)

    def __getitem__(self, index: int) -> DynamicArray:
        return self._arrays[index]

    def __repr__(self) -> str:
        return f"ArrayStorage({len(self)} arrays)"


@lru_cache(maxsize=None)
def get_storage() -> ArrayStorage:
    """Return the process-wide array storage."""
    return ArrayStorage()


class DynamicArray:
    """An array of elements whose operations are described by a ``TypeInfo``."""

    def __init__(self, type_info: TypeInfo, storage: ArrayStorage | None = None) -> None:
        self.type_info = type_info
        self._items: list[Any] = []
        (storage if storage is not None else get_storage()).add(self)

    def append(self, element: Any) -> None:
        """Add an element at the end."""
        self._items.append(element)

    def prepend(self, element: Any) -> None:
        """Add an element at the front."""
        self._items.insert(0, element)

    def index_push(self, element: Any, index: int) -> None:
        """Insert an element so that it ends up at position ``index``."""
        if not 0 <= index <= len(self._items):
            raise IndexError(f"index {index} out of range for array of size {len(self._items)}")
        self._items.insert(index, element)

    def read_from_input(self, text: str) -> int:
        """Parse every token of ``text`` as an element and append it; return the count."""
        tokens = tokenize(text)
        for token in tokens:
            self.append(self.type_info.parse(token))
        return len(tokens)

    def swap(self, i: int, j: int) -> None:
        """Exchange the elements at positions ``i`` and ``j``."""
        self._items[i], self._items[j] = self._items[j], self._items[i]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __repr__(self) -> str:
        return f"DynamicArray({self.type_info.type_name}, {self._items!r})"