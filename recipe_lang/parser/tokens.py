"""
The token types produced by :py:func:`recipe_lang.parser.parse`.

Every token records the span of source text it was produced from (its
``start`` and ``end`` offsets). Concatenating the :py:meth:`Token.raw` text of
every token in a parse reproduces the source exactly while concatenating their
:py:meth:`Token.render` forms reproduces the prose with all markup removed
(see :py:func:`render`).

.. autoclass:: Token
    :members:

.. autofunction:: render
"""

from dataclasses import dataclass, field

from typing import Iterable, Optional

__all__ = [
    "Token",
    "Metadata",
    "Ingredient",
    "RecipeRef",
    "Timer",
    "Material",
    "Word",
    "Space",
    "Comment",
    "Backstory",
    "render",
]


class Token:
    """
    Base class for all tokens.
    """

    start: int
    """Source offset (in chars) of the first character consumed by the token."""

    end: int
    """Source offset (in chars) just after the last character consumed."""

    def raw(self, source: str) -> str:
        """The source text consumed to produce this token."""
        return source[self.start : self.end]

    def render(self) -> str:
        """The text this token contributes to the rendered instructions."""
        return ""


@dataclass(frozen=True)
class Metadata(Token):
    """A ``>> key: value`` header line."""

    key: str
    value: str

    start: int = field(default=0, compare=False, repr=False)
    end: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class Ingredient(Token):
    """An ingredient, e.g. ``{quinoa}(200 gr)``."""

    name: str
    quantity: Optional[str] = None
    unit: Optional[str] = None

    start: int = field(default=0, compare=False, repr=False)
    end: int = field(default=0, compare=False, repr=False)

    def render(self) -> str:
        return self.name


@dataclass(frozen=True)
class RecipeRef(Token):
    """A reference to another recipe, e.g. ``@{woile/tomato-sauce}(100 ml)``."""

    name: str
    quantity: Optional[str] = None
    unit: Optional[str] = None

    start: int = field(default=0, compare=False, repr=False)
    end: int = field(default=0, compare=False, repr=False)

    def render(self) -> str:
        return f'"{self.name}"'


@dataclass(frozen=True)
class Timer(Token):
    """A timer, e.g. ``t{25 minutes}``."""

    duration: str

    start: int = field(default=0, compare=False, repr=False)
    end: int = field(default=0, compare=False, repr=False)

    def render(self) -> str:
        return self.duration


@dataclass(frozen=True)
class Material(Token):
    """A tool or other piece of equipment, e.g. ``&{pot}``."""

    name: str

    start: int = field(default=0, compare=False, repr=False)
    end: int = field(default=0, compare=False, repr=False)

    def render(self) -> str:
        return self.name


@dataclass(frozen=True)
class Word(Token):
    text: str

    start: int = field(default=0, compare=False, repr=False)
    end: int = field(default=0, compare=False, repr=False)

    def render(self) -> str:
        return self.text


@dataclass(frozen=True)
class Space(Token):
    text: str

    start: int = field(default=0, compare=False, repr=False)
    end: int = field(default=0, compare=False, repr=False)

    def render(self) -> str:
        return self.text


@dataclass(frozen=True)
class Comment(Token):
    """A ``/* ... */`` comment (not rendered)."""

    text: str

    start: int = field(default=0, compare=False, repr=False)
    end: int = field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class Backstory(Token):
    """
    The free text following a ``---`` line at the end of a recipe (not
    rendered).
    """

    text: str

    start: int = field(default=0, compare=False, repr=False)
    end: int = field(default=0, compare=False, repr=False)


def render(tokens: Iterable[Token]) -> str:
    """
    Concatenate the rendered form of a series of tokens. For example, the
    tokens of ``Boil the {quinoa}(200gr) for t{5 minutes}`` render as ``Boil
    the quinoa for 5 minutes``.
    """
    return "".join(token.render() for token in tokens)
