"""
A parser for recipes written as prose with inline markup for ingredients
(``{quinoa}(200gr)``), materials (``&{pot}``), timers (``t{5 minutes}``),
references to other recipes (``@{woile/tomato-sauce}``), comments, metadata
and a trailing backstory.
"""

from recipe_lang.recipe import parse_recipe, Recipe

__all__ = ["parse_recipe", "Recipe"]
