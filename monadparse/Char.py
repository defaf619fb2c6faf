from typing import Iterable
from .Parser import Parser, ParseResult, ResultSet, Input
from .Prim import satisfy, result, rule
from .Combinators import bind, choice, many, then


# Helper function: Parses a single character
def char(c: str) -> Parser[str]:
    """Parses a single character c and returns it."""
    return satisfy(lambda x: x == c).label(f"'{c}'")

def one_of(cs: Iterable[str]) -> Parser[str]:
    """Succeeds if the current character is in cs. Returns the parsed character."""
    cs = set(cs)
    return satisfy(lambda c: c in cs).label("one_of")

def none_of(cs: Iterable[str]) -> Parser[str]:
    """Succeeds if the current character is not in cs. Returns the parsed character."""
    cs = set(cs)
    return satisfy(lambda c: c not in cs).label("none_of")

def any_char() -> Parser[str]:
    return satisfy(lambda _: True).label("any_char")

def space() -> Parser[str]:
    return satisfy(str.isspace).label("space")

def spaces() -> Parser[None]:
    """Skips whitespace. Every shorter run of whitespace is also a result."""
    return then(many(space()), result(None)).label("spaces")

def upper() -> Parser[str]:
    return satisfy(str.isupper).label("uppercase letter")

def lower() -> Parser[str]:
    return satisfy(str.islower).label("lowercase letter")

def letter() -> Parser[str]:
    return satisfy(str.isalpha).label("letter")

DIGITS = frozenset("0123456789")
HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

def digit() -> Parser[str]:
    """Parses an ASCII digit and returns it."""
    return satisfy(lambda c: c in DIGITS).label("digit")

def hex_digit() -> Parser[str]:
    return satisfy(lambda c: c in HEX_DIGITS).label("hexadecimal digit")

def alpha_num() -> Parser[str]:
    return satisfy(str.isalnum).label("letter or digit")

def string(s: str) -> Parser[str]:
    """Parses the exact string s and returns it."""
    chars = [char(c) for c in s]
    def parse(inp: Input) -> ResultSet:
        rest = inp
        for p in chars:
            step = p(rest)
            if not step:
                return []
            [(_, rest)] = step
        return [ParseResult(s, rest)]
    return Parser(parse, f"'{s}'")

# A word is a letter followed by a word, or the empty word. Because there is
# no commit, every prefix of the letters is a separate result.
# Each letter costs about ten Python frames, so under the default recursion
# limit of 1000 words longer than roughly 80 letters raise RecursionError;
# use many(letter()) for long runs.
@rule
def word() -> Parser[str]:
    return choice(
        bind(letter(), lambda c: bind(word, lambda rest: result(c + rest))),
        result(""),
    )
