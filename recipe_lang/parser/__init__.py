"""
Recipe source is split into a list of tokens using
:py:func:`recipe_lang.parser.parse`:

.. autofunction:: recipe_lang.parser.parse
"""

from typing import List

from recipe_lang.parser.grammar import tokenize

from recipe_lang.parser.tokens import Token, render

from recipe_lang.parser.errors import (
    RecipeParseError,
    MalformedSyntaxError,
    NoMatchingRuleError,
)

__all__ = [
    "parse",
    "render",
    "Token",
    "RecipeParseError",
    "MalformedSyntaxError",
    "NoMatchingRuleError",
]


def parse(source: str) -> List[Token]:
    """
    Parse a recipe into a list of tokens (see
    :py:mod:`recipe_lang.parser.tokens`). This is useful when building your own
    renderer. Most users will want :py:func:`recipe_lang.recipe.parse_recipe`
    instead.

    Leading and trailing whitespace is not removed: the tokens cover the
    source exactly.

    Raises
    ======
    recipe_lang.parser.errors.RecipeParseError
    """
    return tokenize(source)
