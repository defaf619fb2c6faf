import logging
from typing import Any, Callable, List, Tuple

from .Parser import Parser, ParseResult, ResultSet, Input, T, U
from .Prim import result, zero

log = logging.getLogger("monadparse")


# 1. bind: the monadic composition every other sequencing combinator rests on
def bind(p: Parser[T], f: Callable[[T], Parser[U]]) -> Parser[U]:
    """
    Run `p`, then for each of its successes run `f(value)` on that remainder.

    Results come out grouped by `p`'s results, in `p`'s order. `f` is only
    called for values `p` actually produced.
    """
    def parse(inp: Input) -> ResultSet:
        out: ResultSet = []
        for value, rem in p(inp):
            out.extend(f(value)(rem))
        return out
    return Parser(parse)

# 2. sequence: pair the values of two parsers run one after the other
def sequence(p: Parser[T], q: Parser[U]) -> Parser[Tuple[T, U]]:
    return bind(p, lambda a: bind(q, lambda b: result((a, b))))

# 3. choice: run every alternative on the same input and keep all successes
def choice(*parsers: Parser[T]) -> Parser[T]:
    """
    Concatenate the results of each parser, left operand first.

    Every branch is explored even when an earlier one succeeds, so an
    ambiguous grammar yields all of its parses. With no operands this is `zero`.
    """
    if not parsers:
        return zero()
    def parse(inp: Input) -> ResultSet:
        out: ResultSet = []
        for p in parsers:
            out.extend(p(inp))
        return out
    return Parser(parse)

# 4. orelse: committed choice, `q` is only tried when `p` has no success
def orelse(p: Parser[T], q: Parser[T]) -> Parser[T]:
    def parse(inp: Input) -> ResultSet:
        return p(inp) or q(inp)
    return Parser(parse)

# 5. first: keep at most the first success of `p`
def first(p: Parser[T]) -> Parser[T]:
    def parse(inp: Input) -> ResultSet:
        return p(inp)[:1]
    return Parser(parse)

def fmap(f: Callable[[T], U], p: Parser[T]) -> Parser[U]:
    """Apply `f` to the value of every success of `p`."""
    return bind(p, lambda x: result(f(x)))

def then(p: Parser[Any], q: Parser[U]) -> Parser[U]:
    """Run `p` then `q`, keeping `q`'s value."""
    return bind(p, lambda _: q)

def skip(p: Parser[T], q: Parser[Any]) -> Parser[T]:
    """Run `p` then `q`, keeping `p`'s value."""
    return bind(p, lambda x: bind(q, lambda _: result(x)))

def between(open: Parser[Any], close: Parser[Any], p: Parser[T]) -> Parser[T]:
    """
    Parses 'open', then 'p', then 'close', returning the result of 'p'.
    """
    return then(open, skip(p, close))

def option(x: T, p: Parser[T]) -> Parser[T]:
    """
    The successes of `p` followed by `x` without consuming input.
    Unlike a committing parser library, `x` is offered even when `p` succeeds.
    """
    return choice(p, result(x))

def optional(p: Parser[Any]) -> Parser[None]:
    """Like `option`, discarding the value."""
    return choice(then(p, result(None)), result(None))

# 6. many: every number of repetitions, longest first for deterministic `p`
def many(p: Parser[T]) -> Parser[List[T]]:
    """
    Parse zero or more occurrences of `p`.

    Produces the same results, in the same order, as the recursive rule
    `(p >>= x -> many(p) >>= xs -> result([x] + xs)) | result([])`, but walks
    the repetitions with an explicit stack so input length does not bound
    the Python call depth. A success of `p` that consumes nothing is not
    repeated.
    """
    def parse(inp: Input) -> ResultSet:
        out: ResultSet = []
        stack = [([], inp, iter(p(inp)))]
        while stack:
            acc, rem, successes = stack[-1]
            step = next(successes, None)
            if step is None:
                # every longer repetition from here has been emitted
                stack.pop()
                out.append(ParseResult(acc, rem))
                continue
            value, rest = step
            if len(rest) >= len(rem):
                log.debug("many: dropped a repetition of %r that consumed no input", p)
                continue
            stack.append((acc + [value], rest, iter(p(rest))))
        return out
    return Parser(parse)

def many1(p: Parser[T]) -> Parser[List[T]]:
    """
    Applies parser p one or more times, returning a list of results.
    """
    return bind(p, lambda x: fmap(lambda xs: [x] + xs, many(p)))

def count(n: int, p: Parser[T]) -> Parser[List[T]]:
    """Exactly `n` occurrences of `p`, in every way `p` allows."""
    if n < 0:
        raise ValueError(f"count: n must be non-negative, got {n}")
    def parse(inp: Input) -> ResultSet:
        # Expanding one level at a time keeps bind's left-to-right order
        frontier: ResultSet = [ParseResult([], inp)]
        for _ in range(n):
            frontier = [ParseResult(acc + [value], rest)
                        for acc, rem in frontier
                        for value, rest in p(rem)]
            if not frontier:
                break
        return frontier
    return Parser(parse)

def sep_by1(p: Parser[T], sep: Parser[Any]) -> Parser[List[T]]:
    """
    Parses one or more occurrences of p separated by sep, returning a list of p's results.
    """
    return bind(p, lambda x: fmap(lambda xs: [x] + xs, many(then(sep, p))))

def sep_by(p: Parser[T], sep: Parser[Any]) -> Parser[List[T]]:
    """
    Parses zero or more occurrences of p separated by sep, returning a list of p's results.
    """
    return choice(sep_by1(p, sep), result([]))

def chainl1(p: Parser[T], op: Parser[Callable[[T, T], T]]) -> Parser[T]:
    """
    One or more `p` separated by `op`, folded to the left.
    Every shorter chain is also a result.
    """
    def fold(x: T, pairs: List[Tuple[Callable[[T, T], T], T]]) -> T:
        acc = x
        for f, y in pairs:
            acc = f(acc, y)
        return acc
    return bind(p, lambda x: fmap(lambda pairs: fold(x, pairs), many(sequence(op, p))))

def chainr1(p: Parser[T], op: Parser[Callable[[T, T], T]]) -> Parser[T]:
    """
    One or more `p` separated by `op`, folded to the right.
    """
    def fold(x: T, pairs: List[Tuple[Callable[[T, T], T], T]]) -> T:
        if not pairs:
            return x
        operands = [x] + [y for _, y in pairs]
        acc = operands[-1]
        for (f, _), y in zip(reversed(pairs), reversed(operands[:-1])):
            acc = f(y, acc)
        return acc
    return bind(p, lambda x: fmap(lambda pairs: fold(x, pairs), many(sequence(op, p))))

def eof() -> Parser[None]:
    """Succeeds only if no input remains."""
    def parse(inp: Input) -> ResultSet:
        return [] if inp else [ParseResult(None, inp)]
    return Parser(parse, "eof")

def look_ahead(p: Parser[T]) -> Parser[T]:
    """The values of `p`, without consuming input."""
    def parse(inp: Input) -> ResultSet:
        return [ParseResult(value, inp) for value, _ in p(inp)]
    return Parser(parse)

def not_followed_by(p: Parser[Any]) -> Parser[None]:
    """Succeeds, consuming nothing, exactly when `p` fails."""
    def parse(inp: Input) -> ResultSet:
        return [] if p(inp) else [ParseResult(None, inp)]
    return Parser(parse)

def trace(label: str, p: Parser[T]) -> Parser[T]:
    """`p`, logging the input it sees and how many results it returns."""
    def parse(inp: Input) -> ResultSet:
        log.debug("%s: trying %r", label, inp[:30])
        results = p(inp)
        log.debug("%s: %d result(s)", label, len(results))
        return results
    return Parser(parse, label)
