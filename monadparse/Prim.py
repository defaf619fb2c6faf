from .Parser import Parser, ParseResult, ParseError, ResultSet, Input, T
from typing import Any, Callable, List, Optional, Tuple


def result(value: T) -> Parser[T]:
    """Return a parser that succeeds with a value without consuming input."""
    def parse(inp: Input) -> ResultSet:
        return [ParseResult(value, inp)]
    return Parser(parse, f"result({value!r})")

def zero() -> Parser[Any]:
    """A parser that always fails."""
    def parse(inp: Input) -> ResultSet:
        return []
    return Parser(parse, "zero")

# Haskell-flavoured names for the unit and the failure
pure = result
fail = zero

def item() -> Parser[Any]:
    """Consume exactly one unit of input. The only primitive that consumes."""
    def parse(inp: Input) -> ResultSet:
        if not inp:
            return []
        return [ParseResult(inp[0], inp[1:])]
    return Parser(parse, "item")

def satisfy(pred: Callable[[Any], bool]) -> Parser[Any]:
    """Consume one unit, succeeding only if it satisfies `pred`."""
    from .Combinators import bind
    return bind(item(), lambda u: result(u) if pred(u) else zero()).label("satisfy")

def lazy(thunk: Callable[[], Parser[T]], name: Optional[str] = None) -> Parser[T]:
    """
    Defer building a parser until it is run.

    `thunk` is called on every parse, so a grammar can mention itself:

        expr = lazy(lambda: term | (term & char('+') & expr))
    """
    def parse(inp: Input) -> ResultSet:
        return thunk()(inp)
    return Parser(parse, name)

def rule(fn: Callable[[], Parser[T]]) -> Parser[T]:
    """Decorator turning a zero-argument grammar function into a deferred parser."""
    return lazy(fn, fn.__name__)


def parse_all(parser: Parser[T], inp: Input) -> List[T]:
    """Values of every parse that consumed the whole input, in result order."""
    return [r.value for r in parser(inp) if not r.remainder]

def run_parser(parser: Parser[T], inp: Input) -> Tuple[Optional[T], Optional[ParseError]]:
    """
    Pick the first parse that consumed all of `inp`.

    Returns (value, None) on success and (None, ParseError) otherwise.
    """
    results = parser(inp)
    for r in results:
        if not r.remainder:
            return r.value, None
    if not results:
        return None, ParseError("no parse", inp)
    shortest = min((r.remainder for r in results), key=len)
    return None, ParseError(f"{len(results)} partial parse(s), none consumed all input", shortest)

def parse_test(parser: Parser[T], inp: Input) -> None:
    """Test a parser and print the result."""
    value, err = run_parser(parser, inp)
    if err:
        print(err)
    else:
        print(value)
