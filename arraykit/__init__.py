"""Typed dynamic arrays of strings with an interactive console menu for entering and sorting them."""

__version__ = "0.1.0"