from typing import Union

import re

from fractions import Fraction


fraction_pattern = re.compile(r"(?P<numerator>[0-9]+)/(?P<denominator>[0-9]+)")


def number(value: str) -> Union[int, float, Fraction]:
    """
    Attempt to parse a quantity formatted as a fraction (e.g. 3/4), decimal
    (e.g. 3.14 or 3,14) or integer (e.g. 123 or 1_000). Throws a
    :py:exc:`ValueError` if this fails.
    """
    value = value.replace("_", "")
    match = fraction_pattern.fullmatch(value)
    if match is not None:
        denominator = int(match["denominator"])
        if denominator == 0:
            raise ValueError(f"Zero denominator in {value!r}")
        return Fraction(int(match["numerator"]), denominator)
    else:
        value = value.replace(",", ".")
        try:
            return int(value)
        except ValueError:
            return float(value)
