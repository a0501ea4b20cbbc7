import pytest

from recipe_lang.parser import (
    parse,
    RecipeParseError,
    MalformedSyntaxError,
    NoMatchingRuleError,
)


def test_from_offset() -> None:
    source = "Boil it.\nPut the {quinoa(200gr) in the bowl."
    error = MalformedSyntaxError.from_offset(source, 24, "closing '}'")
    assert error.line == 2
    assert error.offset == 24
    assert error.snippet == "Put the {quinoa(200gr) in the bowl."
    assert error.explanation == "Expected closing '}'"
    assert "Expected closing '}'" in str(error)
    assert error.fatal
    assert isinstance(error, MalformedSyntaxError)


def test_hierarchy() -> None:
    assert issubclass(MalformedSyntaxError, RecipeParseError)
    assert issubclass(NoMatchingRuleError, RecipeParseError)
    assert issubclass(RecipeParseError, ValueError)
    assert not NoMatchingRuleError.fatal


@pytest.mark.parametrize("source", ["{unclosed", "{}", "(ok) {x}(2..0)"])
def test_no_partial_result(source: str) -> None:
    with pytest.raises(MalformedSyntaxError):
        parse(source)
