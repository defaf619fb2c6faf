from dataclasses import dataclass
from typing import Any, Callable, List, NamedTuple, Optional, Sequence, Tuple, TypeVar, Generic

T = TypeVar('T')  # Generic type for parser results
U = TypeVar('U')

Input = Sequence[Any]  # Usually a str; any sliceable sequence of tokens works


class ParseResult(NamedTuple):
    """One successful derivation: the value and the unconsumed input."""
    value: Any
    remainder: Input


ResultSet = List[ParseResult]


@dataclass(frozen=True)
class ParseError:
    """Returned by drivers when no parse consumed the whole input."""
    message: str
    remainder: Optional[Input] = None

    def __str__(self) -> str:
        if self.remainder is None:
            return f"Parse error: {self.message}"
        return f"Parse error: {self.message} (stopped before {self.remainder[:20]!r})"


class Parser(Generic[T]):
    """A parser maps an input to the list of every way it can succeed."""
    def __init__(self, parse_fn: Callable[[Input], ResultSet], name: Optional[str] = None):
        self.parse_fn = parse_fn
        self.name = name

    def parse(self, inp: Input) -> ResultSet:
        return self.parse_fn(inp)

    def __call__(self, inp: Input) -> ResultSet:
        return self.parse_fn(inp)

    def __repr__(self) -> str:
        return f"<Parser {self.name}>" if self.name else "<Parser>"

    # Monadic bind (>>=)
    def bind(self, f: Callable[[T], 'Parser[U]']) -> 'Parser[U]':
        from .Combinators import bind
        return bind(self, f)

    # Functor map (<$>)
    def map(self, f: Callable[[T], U]) -> 'Parser[U]':
        from .Combinators import fmap
        return fmap(f, self)

    def label(self, name: str) -> 'Parser[T]':
        """Same parser under a new name, for repr and tracing."""
        return Parser(self.parse_fn, name)

    # Alternative (<|>), keeps the successes of both sides
    def __or__(self, other: 'Parser[T]') -> 'Parser[T]':
        from .Combinators import choice
        return choice(self, other)

    # Sequence (&)
    def __and__(self, other: 'Parser[U]') -> 'Parser[Tuple[T, U]]':
        from .Combinators import sequence
        return sequence(self, other)

    # Sequence (*>)
    def __gt__(self, other: 'Parser[U]') -> 'Parser[U]':
        from .Combinators import then
        return then(self, other)

    # Sequence (<*)
    def __lt__(self, other: 'Parser[U]') -> 'Parser[T]':
        from .Combinators import skip
        return skip(self, other)

    # Bind when given a function, *> when given a parser
    def __rshift__(self, other: Any) -> 'Parser[Any]':
        from .Combinators import bind, then
        if isinstance(other, Parser):
            return then(self, other)
        if callable(other):
            return bind(self, other)
        raise TypeError(f"cannot sequence a parser with {type(other).__name__}")
