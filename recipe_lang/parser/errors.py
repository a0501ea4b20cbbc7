"""
Exceptions thrown when a recipe cannot be tokenized. When cast to
:py:class:`str` these take the form:

.. code:: text

    At line 2 column 16:
        Put the boiled {quinoa(200gr) in the bowl.
                       ^
    Expected closing '}'

.. autoexception:: RecipeParseError

.. autoexception:: MalformedSyntaxError

.. autoexception:: NoMatchingRuleError
"""

from typing import Type, TypeVar

from dataclasses import dataclass

from peggie.error_message_generation import (
    offset_to_line_and_column,
    extract_line,
    format_error_message,
)

__all__ = [
    "RecipeParseError",
    "MalformedSyntaxError",
    "NoMatchingRuleError",
]


E = TypeVar("E", bound="RecipeParseError")


@dataclass
class RecipeParseError(ValueError):
    """Base type for tokenization errors."""

    line: int
    column: int
    snippet: str
    """The source code location and snippet of the cause of the problem."""

    offset: int
    """Source offset (in chars) at which parsing failed."""

    expected: str
    """A human readable description of what was expected at this point."""

    fatal = False
    """
    True when the failure happened inside a construct which had already been
    recognised (e.g. after an opening ``{``) and so no other interpretation of
    the input was attempted.
    """

    @property
    def explanation(self) -> str:
        return f"Expected {self.expected}"

    def __str__(self) -> str:
        return format_error_message(
            self.line, self.column, self.snippet, self.explanation
        )

    @classmethod
    def from_offset(
        cls: Type[E], source: str, offset: int, expected: str
    ) -> E:
        line, column = offset_to_line_and_column(source, offset)
        snippet = extract_line(source, line)
        return cls(line, column, snippet, offset, expected)


@dataclass
class MalformedSyntaxError(RecipeParseError):
    """
    Thrown when the content of an ingredient, material, timer, recipe
    reference, amount or comment is malformed, for example an unclosed ``{``,
    an empty name or a quantity such as ``2..0``.
    """

    fatal = True


@dataclass
class NoMatchingRuleError(RecipeParseError):
    """
    Thrown when none of the grammar's alternatives match at some position of
    the input (e.g. the input is empty).
    """
