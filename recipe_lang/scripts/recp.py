"""
The ``recp`` command displays recipes in the terminal.

Usage::

    $ recp show RECIPE [...]

The ``show`` (or ``s``) command prints each recipe's title, a table of its
ingredients and referenced recipes followed by its instructions with all
markup removed.

If a recipe cannot be parsed, the error is printed to stderr and a non-zero
exit status is returned.
"""

import sys

from argparse import ArgumentParser

from pathlib import Path

from typing import List, Optional

from recipe_lang.parser import RecipeParseError

from recipe_lang.recipe import parse_recipe

from recipe_lang.renderer.text import render_recipe


def show(recipes: List[Path]) -> int:
    for recipe_path in recipes:
        try:
            recipe = parse_recipe(recipe_path.read_text())
        except OSError as e:
            sys.stderr.write(f"{recipe_path}: Could not read the file: {e}\n")
            return 1
        except RecipeParseError as e:
            sys.stderr.write(f"{recipe_path}: Failed to parse the recipe:\n\n{e}\n")
            return 1
        sys.stdout.write(render_recipe(recipe))
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    parser = ArgumentParser(
        description="""
            Display recipes written in the recipe markup language.
        """,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    show_parser = subparsers.add_parser(
        "show",
        aliases=["s"],
        help="""
            Print recipes with their ingredients and instructions.
        """,
    )
    show_parser.add_argument(
        "recipes",
        type=Path,
        nargs="+",
        help="""
            The filenames of the recipes to show.
        """,
    )

    args = parser.parse_args(argv)

    sys.exit(show(args.recipes))


if __name__ == "__main__":
    main()
