import pytest

from typing import Union

from fractions import Fraction

from recipe_lang.number_parser import number


class TestNumber:
    @pytest.mark.parametrize(
        "value, exp",
        [
            # Integers
            ("0", 0),
            ("123", 123),
            ("1_000", 1000),
            # Decimals
            ("16.25", 16.25),
            (".5", 0.5),
            ("1,5", 1.5),
            # Fractions
            ("1/2", Fraction(1, 2)),
            ("10/30", Fraction(1, 3)),
        ],
    )
    def test_valid(self, value: str, exp: Union[int, float, Fraction]) -> None:
        n = number(value)
        assert n == exp
        assert type(n) is type(exp)

    @pytest.mark.parametrize(
        "value",
        [
            # Empty
            "",
            # Invalid decimal
            "1.2.3",
            "1,000,000",
            # Invalid fraction
            "1/",
            "/1",
            "1/2/3",
            "1/0",
            "1.5/2",
        ],
    )
    def test_invalid(self, value: str) -> None:
        with pytest.raises(ValueError):
            number(value)
