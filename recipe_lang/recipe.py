r"""
The :py:mod:`recipe_lang.recipe` module defines the :py:class:`Recipe`
document built from a parsed recipe.


Overview
========

Recipes are written as prose with inline markup identifying the things used:

.. code:: text

    >> name: buddha bowl
    >> tags: vegan

    Boil the {quinoa}(200gr) for t{15 minutes} in a &{pot}.
    Serve with @{woile/tahini-sauce}(2 tbsp). /* or hummus */

    ---
    A recipe from my time in Bali.

The tokens produced by :py:func:`recipe_lang.parser.parse` are collected by
:py:func:`aggregate` into a :py:class:`Recipe` giving:

* The metadata given in ``>> key: value`` lines (the ``name`` key is
  also available as :py:attr:`Recipe.name`).
* The :py:class:`Ingredient`\ s (``{quinoa}(200gr)``),
  :py:class:`RecipeRef`\ s (``@{woile/tahini-sauce}(2 tbsp)``),
  :py:class:`Timer`\ s (``t{15 minutes}``) and :py:class:`Material`\ s
  (``&{pot}``) in the order they appear.
* The backstory following the ``---`` line, if any.
* The original tokens, from which the instructions may be rendered.

Most users will simply use :py:func:`parse_recipe`.

.. autofunction:: parse_recipe

.. autofunction:: aggregate


Data model
==========

.. autoclass:: Recipe
    :members:

.. autoclass:: Ingredient
    :members:

.. autoclass:: RecipeRef
    :members:

.. autoclass:: Timer
    :members:

.. autoclass:: Material
    :members:
"""

from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union

from dataclasses import dataclass, field

from fractions import Fraction

from recipe_lang.number_parser import number

from recipe_lang.parser import parse, tokens

__all__ = [
    "Ingredient",
    "RecipeRef",
    "Timer",
    "Material",
    "Recipe",
    "aggregate",
    "parse_recipe",
]


@dataclass(frozen=True)
class Ingredient:
    """An ingredient used by a recipe."""

    name: str

    quantity: Optional[str] = None
    """The quantity as written (e.g. '1/2' or '200'), if given."""

    unit: Optional[str] = None
    """The unit as written (e.g. 'gr' or 'cups'), if given."""

    @property
    def amount(self) -> Optional[Union[int, float, Fraction]]:
        """
        The quantity as a number, or None if no quantity was given. Throws a
        :py:exc:`ValueError` if the quantity cannot be converted (e.g.
        '1/2/3').
        """
        if self.quantity is None:
            return None
        return number(self.quantity)


@dataclass(frozen=True)
class RecipeRef(Ingredient):
    """
    A reference to another recipe used as an ingredient. The name is the
    identifier of the referenced recipe (e.g. 'woile/tahini-sauce').
    """


@dataclass(frozen=True)
class Timer:
    duration: str
    """The duration as written, e.g. '15 minutes'."""


@dataclass(frozen=True)
class Material:
    name: str


@dataclass(frozen=True)
class Recipe:
    """A parsed recipe."""

    name: Optional[str] = None
    """The recipe name (given by the ``name`` metadata key), if given."""

    metadata: Mapping[str, str] = field(default_factory=dict)
    """
    The ``>> key: value`` metadata. Where a key is given more than once, the
    last value is used.
    """

    ingredients: Tuple[Ingredient, ...] = ()
    recipe_refs: Tuple[RecipeRef, ...] = ()
    timers: Tuple[Timer, ...] = ()
    materials: Tuple[Material, ...] = ()

    backstory: Optional[str] = None
    """The text following the ``---`` line, or None if absent or empty."""

    instructions: Tuple[tokens.Token, ...] = field(default=(), repr=False)
    """Every token of the recipe, in order."""

    @property
    def instructions_text(self) -> str:
        """
        The instructions as plain prose: all markup removed, metadata,
        comments and backstory omitted and surrounding whitespace stripped.
        """
        return tokens.render(self.instructions).strip()

    @classmethod
    def from_source(cls, source: str) -> "Recipe":
        return aggregate(parse(source.strip()))


def aggregate(recipe_tokens: Iterable[tokens.Token]) -> Recipe:
    """
    Collect a series of tokens (from :py:func:`recipe_lang.parser.parse`) into
    a :py:class:`Recipe`.
    """
    instructions = tuple(recipe_tokens)

    metadata: Dict[str, str] = {}
    ingredients: List[Ingredient] = []
    recipe_refs: List[RecipeRef] = []
    timers: List[Timer] = []
    materials: List[Material] = []
    backstory = ""

    for token in instructions:
        if isinstance(token, tokens.Metadata):
            metadata[token.key] = token.value
        elif isinstance(token, tokens.Ingredient):
            ingredients.append(Ingredient(token.name, token.quantity, token.unit))
        elif isinstance(token, tokens.RecipeRef):
            recipe_refs.append(RecipeRef(token.name, token.quantity, token.unit))
        elif isinstance(token, tokens.Timer):
            timers.append(Timer(token.duration))
        elif isinstance(token, tokens.Material):
            materials.append(Material(token.name))
        elif isinstance(token, tokens.Backstory):
            backstory += token.text

    return Recipe(
        name=metadata.get("name"),
        metadata=metadata,
        ingredients=tuple(ingredients),
        recipe_refs=tuple(recipe_refs),
        timers=tuple(timers),
        materials=tuple(materials),
        backstory=backstory or None,
        instructions=instructions,
    )


def parse_recipe(source: str) -> Recipe:
    """
    Parse a recipe. Leading and trailing whitespace is ignored.

    Raises
    ======
    recipe_lang.parser.errors.RecipeParseError
    """
    return Recipe.from_source(source)
