"""
Plain text rendering of a :py:class:`~recipe_lang.recipe.Recipe`, e.g.:

.. code:: text

    Buddha Bowl

    Ingredients

      quinoa                          200 gr
      woile/tahini-sauce              2 tbsp

    Instructions

    Boil the quinoa for 15 minutes in a pot.
    Serve with "woile/tahini-sauce".
"""

import re

from typing import Iterable, List, Optional

from recipe_lang.recipe import Recipe, Ingredient

__all__ = [
    "title_case",
    "format_amount",
    "render_recipe",
]


MIN_NAME_COLUMN_WIDTH = 32
NAME_COLUMN_PADDING = 10


def title_case(name: str) -> str:
    """Convert a recipe name (e.g. 'buddha-bowl') into a title ('Buddha Bowl')."""
    return " ".join(word.capitalize() for word in re.split(r"[\s_-]+", name) if word)


def format_amount(quantity: Optional[str], unit: Optional[str]) -> str:
    return " ".join(part for part in (quantity, unit) if part)


def render_ingredient_table(ingredients: Iterable[Ingredient]) -> List[str]:
    ingredients = list(ingredients)
    if not ingredients:
        return []

    width = max(
        MIN_NAME_COLUMN_WIDTH,
        max(len(i.name) for i in ingredients) + NAME_COLUMN_PADDING,
    )
    return [
        f"  {i.name.ljust(width)}{format_amount(i.quantity, i.unit)}".rstrip()
        for i in ingredients
    ]


def render_recipe(recipe: Recipe) -> str:
    """
    Render a recipe as plain text: its title, a table of ingredients and
    referenced recipes with their amounts, the instructions and, finally, the
    backstory.
    """
    out: List[str] = []

    if recipe.name is not None:
        out.append(title_case(recipe.name))
        out.append("")

    if recipe.ingredients or recipe.recipe_refs:
        out.append("Ingredients")
        out.append("")
        out.extend(
            render_ingredient_table(
                list(recipe.ingredients) + list(recipe.recipe_refs)
            )
        )
        out.append("")

    out.append("Instructions")
    out.append("")
    out.append(recipe.instructions_text)

    if recipe.backstory is not None:
        out.append("")
        out.append("Backstory")
        out.append("")
        out.append(recipe.backstory.strip())

    return "\n".join(out) + "\n"
