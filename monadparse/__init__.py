# Core
from .Parser import Parser, ParseResult, ParseError
from .Prim import (
    result, zero, pure, fail, item, satisfy,
    lazy, rule, run_parser, parse_all, parse_test
)

# Combinators
from .Combinators import (
    bind, sequence, choice, orelse, first, fmap, then, skip,
    between, option, optional, many, many1, count,
    sep_by, sep_by1, chainl1, chainr1,
    eof, look_ahead, not_followed_by, trace
)

# Characters
from .Char import (
    char, string, one_of, none_of, any_char,
    space, spaces, upper, lower, letter, digit, hex_digit, alpha_num,
    word
)
