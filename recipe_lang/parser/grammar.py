"""
The recipe grammar.

Each rule is a function taking the source string and an offset into it. A rule
either returns what it parsed along with the offset immediately following the
consumed text, raises :py:exc:`Backtrack` if the rule does not apply at that
offset, or raises a :py:exc:`~recipe_lang.parser.errors.MalformedSyntaxError`
if the rule applies but what follows is malformed. Once a rule has seen enough
to be sure of what it is looking at (e.g. an opening ``{``) no other rule is
tried.

The tokens of a recipe are produced by :py:func:`tokenize` which tries the
rules listed in :py:data:`TOKEN_RULES` in order at each position.

.. autofunction:: tokenize

.. autodata:: TOKEN_RULES
"""

from typing import Callable, List, Optional, Sequence, Tuple

from recipe_lang.charsets import (
    QUANTITY_SEPARATORS,
    is_text_char,
    is_quantity_char,
    is_whitespace,
)

from recipe_lang.parser.errors import MalformedSyntaxError, NoMatchingRuleError

from recipe_lang.parser.tokens import (
    Token,
    Metadata,
    Ingredient,
    RecipeRef,
    Timer,
    Material,
    Word,
    Space,
    Comment,
    Backstory,
)

__all__ = [
    "Backtrack",
    "TOKEN_RULES",
    "tokenize",
]


QUANTITY_EXPECTATION = "a quantity value, like 3, 1.2, 1/2 or 1_000"

Amount = Tuple[Optional[str], Optional[str]]


class Backtrack(Exception):
    """Raised by a rule which does not apply at the current position."""


def cut(source: str, offset: int, expected: str) -> MalformedSyntaxError:
    return MalformedSyntaxError.from_offset(source, offset, expected)


def take_while(source: str, offset: int, predicate: Callable[[str], bool]) -> int:
    """Return the offset of the first character not matching the predicate."""
    while offset < len(source) and predicate(source[offset]):
        offset += 1
    return offset


def skip_hspace(source: str, offset: int) -> int:
    return take_while(source, offset, lambda c: c in " \t")


def parse_line_ending(source: str, offset: int) -> int:
    if source.startswith("\n", offset):
        return offset + 1
    elif source.startswith("\r\n", offset):
        return offset + 2
    else:
        raise Backtrack()


def find_line_end(source: str, offset: int) -> int:
    """Offset of the line terminator ending the current line (or end of input)."""
    end = source.find("\n", offset)
    if end == -1:
        return len(source)
    elif end > offset and source[end - 1] == "\r":
        return end - 1
    else:
        return end


def parse_text(source: str, offset: int) -> Tuple[str, int]:
    """Free text, e.g. 'sweet potatoes' or '1/2 lemon'."""
    end = take_while(source, offset, is_text_char)
    if end == offset:
        raise Backtrack()
    return source[offset:end], end


def parse_curly(source: str, offset: int) -> Tuple[str, int]:
    """Free text between curly braces, e.g. '{salt}'. The text is stripped."""
    if not source.startswith("{", offset):
        raise Backtrack()
    offset += 1

    try:
        text, end = parse_text(source, offset)
    except Backtrack:
        if source.startswith("}", offset):
            raise cut(source, offset, "a name between '{' and '}'") from None
        raise cut(source, offset, "closing '}'") from None

    if not source.startswith("}", end):
        raise cut(source, end, "closing '}'")

    return text.strip(), end + 1


def is_valid_quantity(quantity: str) -> bool:
    """
    Separators may not end a quantity nor appear twice in a row (e.g. '2.' and
    '2..0' are not valid quantities).
    """
    if quantity[-1] in QUANTITY_SEPARATORS:
        return False
    return not any(
        a == b and a in QUANTITY_SEPARATORS for a, b in zip(quantity, quantity[1:])
    )


def parse_quantity(source: str, offset: int) -> Tuple[str, int]:
    """A numeric quantity, e.g. '3', '1.2', '1,2', '1/2' or '1_000'."""
    end = take_while(source, offset, is_quantity_char)
    if end == offset:
        raise Backtrack()

    quantity = source[offset:end]
    if not is_valid_quantity(quantity):
        raise cut(source, offset, QUANTITY_EXPECTATION)

    return quantity, end


def parse_unit(source: str, offset: int) -> Tuple[str, int]:
    """A unit, e.g. 'gr', 'ml' or 'large pinch'. The text is stripped."""
    text, end = parse_text(source, offset)
    unit = text.strip()
    if not unit:
        raise Backtrack()
    return unit, end


def parse_amount(source: str, offset: int) -> Tuple[Amount, int]:
    """
    A parenthesised quantity and unit, e.g. '(200gr)', '(1/2)', '(1.5 cups)'
    or '(pinch)'.
    """
    if not source.startswith("(", offset):
        raise Backtrack()
    offset = skip_hspace(source, offset + 1)

    quantity: Optional[str] = None
    try:
        quantity, offset = parse_quantity(source, offset)
    except Backtrack:
        pass

    unit: Optional[str] = None
    try:
        unit, offset = parse_unit(source, offset)
    except Backtrack:
        pass

    offset = skip_hspace(source, offset)
    if not source.startswith(")", offset):
        raise cut(source, offset, "closing ')'")

    return (quantity, unit), offset + 1


def parse_optional_amount(source: str, offset: int) -> Tuple[Amount, int]:
    try:
        return parse_amount(source, offset)
    except Backtrack:
        return (None, None), offset


def parse_ingredient(source: str, offset: int) -> Ingredient:
    """An ingredient, e.g. '{quinoa}(200gr)' or '{salt}'."""
    name, end = parse_curly(source, offset)
    (quantity, unit), end = parse_optional_amount(source, end)
    return Ingredient(name, quantity, unit, start=offset, end=end)


def parse_material(source: str, offset: int) -> Material:
    """A material, e.g. '&{pot}'."""
    if not source.startswith("&", offset):
        raise Backtrack()
    name, end = parse_curly(source, offset + 1)
    return Material(name, start=offset, end=end)


def parse_timer(source: str, offset: int) -> Timer:
    """A timer, e.g. 't{25 minutes}'."""
    if not source.startswith("t", offset):
        raise Backtrack()
    duration, end = parse_curly(source, offset + 1)
    return Timer(duration, start=offset, end=end)


def parse_recipe_ref(source: str, offset: int) -> RecipeRef:
    """A reference to another recipe, e.g. '@{woile/tomato-sauce}(100 ml)'."""
    if not source.startswith("@", offset):
        raise Backtrack()
    name, end = parse_curly(source, offset + 1)
    (quantity, unit), end = parse_optional_amount(source, end)
    return RecipeRef(name, quantity, unit, start=offset, end=end)


def parse_metadata(source: str, offset: int) -> Metadata:
    """A metadata line, e.g. '>> tags: vegan'."""
    if not source.startswith(">>", offset):
        raise Backtrack()
    key_start = skip_hspace(source, offset + 2)
    end = find_line_end(source, key_start)

    colon = source.find(":", key_start, end)
    if colon == -1:
        raise Backtrack()

    key = source[key_start:colon].strip()
    if not key:
        raise Backtrack()
    value = source[colon + 1 : end].strip()

    return Metadata(key, value, start=offset, end=end)


def parse_comment(source: str, offset: int) -> Comment:
    """A comment, e.g. '/* use the ripe ones */'."""
    if not source.startswith("/*", offset):
        raise Backtrack()
    close = source.find("*/", offset + 2)
    if close == -1:
        raise cut(source, offset, "'*/' to close this comment")

    text = source[offset + 2 : close].strip()
    end = skip_hspace(source, close + 2)
    return Comment(text, start=offset, end=end)


def parse_backstory(source: str, offset: int) -> Backstory:
    """
    The backstory: everything following a line containing just '---'. This
    rule only matches at the line terminator preceding the '---' line.
    """
    end = parse_line_ending(source, offset)
    end = take_while(source, end, is_whitespace)
    if not source.startswith("---", end):
        raise Backtrack()
    end = parse_line_ending(source, end + 3)
    end = take_while(source, end, is_whitespace)
    return Backstory(source[end:], start=offset, end=len(source))


def is_separator_line(source: str, offset: int) -> bool:
    """True if a line containing just '---' starts at this offset."""
    if not source.startswith("---", offset):
        return False
    try:
        parse_line_ending(source, offset + 3)
        return True
    except Backtrack:
        return False


def parse_word(source: str, offset: int) -> Word:
    end = take_while(source, offset, lambda c: not is_whitespace(c))
    if end == offset:
        raise Backtrack()
    return Word(source[offset:end], start=offset, end=end)


def parse_space(source: str, offset: int) -> Space:
    """
    A run of whitespace. The run ends early at a line terminator beginning a
    backstory separator.
    """
    end = take_while(source, offset, is_whitespace)
    if end == offset:
        raise Backtrack()

    if is_separator_line(source, end):
        for i in range(offset + 1, end):
            if source.startswith("\n", i) or source.startswith("\r\n", i):
                end = i
                break

    return Space(source[offset:end], start=offset, end=end)


TOKEN_RULES: Sequence[Callable[[str, int], Token]] = (
    parse_metadata,
    parse_material,
    parse_timer,
    # Ingredients have no prefix so must come after materials and timers
    parse_ingredient,
    parse_recipe_ref,
    parse_backstory,
    parse_comment,
    parse_word,
    parse_space,
)
"""
The rules which produce tokens, in the order they are attempted.
"""


def parse_token(source: str, offset: int) -> Token:
    for rule in TOKEN_RULES:
        try:
            return rule(source, offset)
        except Backtrack:
            continue
    raise NoMatchingRuleError.from_offset(source, offset, "text")


def tokenize(source: str) -> List[Token]:
    """
    Split a recipe into a list of :py:class:`~recipe_lang.parser.tokens.Token`
    objects which together cover the whole source.

    Raises
    ======
    recipe_lang.parser.errors.MalformedSyntaxError
        When an ingredient, material, timer, recipe reference, amount or
        comment is malformed.
    recipe_lang.parser.errors.NoMatchingRuleError
        When the source is empty.
    """
    if not source:
        raise NoMatchingRuleError(1, 1, "", 0, "a recipe")

    tokens: List[Token] = []
    offset = 0
    while offset < len(source):
        token = parse_token(source, offset)
        tokens.append(token)
        offset = token.end
    return tokens
