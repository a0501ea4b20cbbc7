"""
Character classes shared by the recipe grammar.

.. autofunction:: is_text_char

.. autofunction:: is_quantity_char
"""

TEXT_SYMBOLS = "\t /-_@.,%#'"
"""Non-alphanumeric characters allowed in names, units and other free text."""

QUANTITY_SEPARATORS = ".,/_"
"""Separator characters allowed (between digits) in a quantity."""

WHITESPACE = " \t\r\n"


def is_text_char(char: str) -> bool:
    """
    True if the character may appear within free text (e.g. the name between
    ``{`` and ``}`` or a unit).
    """
    return char.isalnum() or char in TEXT_SYMBOLS


def is_quantity_char(char: str) -> bool:
    """True if the character may appear within a quantity (e.g. ``1/2``)."""
    return char.isnumeric() or char in QUANTITY_SEPARATORS


def is_whitespace(char: str) -> bool:
    return char in WHITESPACE
