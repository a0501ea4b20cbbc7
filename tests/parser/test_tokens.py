import pytest

from recipe_lang.parser import parse, render

from recipe_lang.parser.tokens import (
    Metadata,
    Ingredient,
    RecipeRef,
    Timer,
    Material,
    Word,
    Space,
    Comment,
    Backstory,
    Token,
)


@pytest.mark.parametrize(
    "token, exp",
    [
        (Metadata("name", "stew"), ""),
        (Ingredient("quinoa", "200", "gr"), "quinoa"),
        (RecipeRef("woile/tomato-sauce", "1", "cup"), '"woile/tomato-sauce"'),
        (Timer("5 minutes"), "5 minutes"),
        (Material("pot"), "pot"),
        (Word("boil"), "boil"),
        (Space(" \n"), " \n"),
        (Comment("careful"), ""),
        (Backstory("once upon a time"), ""),
    ],
)
def test_render_token(token: Token, exp: str) -> None:
    assert token.render() == exp


def test_raw() -> None:
    source = "Add {salt}(pinch) now"
    ingredient = Ingredient("salt", None, "pinch", start=4, end=17)
    assert ingredient.raw(source) == "{salt}(pinch)"


def test_spans_ignored_in_comparison() -> None:
    assert Word("spam", start=10, end=14) == Word("spam")


@pytest.mark.parametrize(
    "source, exp",
    [
        (
            "Boil the quinoa for t{5 minutes} in a &{pot}.\n"
            "Put the boiled {quinoa}(200gr) in the base of the bowl.",
            "Boil the quinoa for 5 minutes in a pot.\n"
            "Put the boiled quinoa in the base of the bowl.",
        ),
        (
            ">> name: story\n"
            "Boil the quinoa for t{5 minutes} in a &{pot}.\n"
            "Put the boiled {quinoa}(200gr) in the base of the bowl.",
            "\n"
            "Boil the quinoa for 5 minutes in a pot.\n"
            "Put the boiled quinoa in the base of the bowl.",
        ),
        (
            "Boil the {quinoa} /* don't do it! */ for t{5 minutes}",
            "Boil the quinoa for 5 minutes",
        ),
        (
            "use the @{woile/magic-hummus}(200gr)",
            'use the "woile/magic-hummus"',
        ),
        (
            "Serve. \n---\nA {backstory}",
            "Serve. ",
        ),
    ],
)
def test_render(source: str, exp: str) -> None:
    assert render(parse(source)) == exp
