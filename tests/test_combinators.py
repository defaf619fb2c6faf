import pytest
from hypothesis import given, strategies as st
from monadparse.Prim import result, zero, item, lazy
from monadparse.Char import char, string, digit, word
from monadparse.Combinators import (
    bind, sequence, choice, orelse, first, fmap, then, skip,
    between, option, optional, many, many1, count,
    sep_by, sep_by1, chainl1, chainr1, eof, look_ahead, not_followed_by,
)
from conftest import assert_results_eq


def many_recursive(p):
    """many written directly as its recursive rule, for comparison."""
    return lazy(lambda: choice(
        bind(p, lambda x: bind(many_recursive(p), lambda xs: result([x] + xs))),
        result([]),
    ))

# --- Bind ---

def test_bind_does_not_call_continuation_on_failure():
    calls = []
    def f(x):
        calls.append(x)
        return result(x)
    assert bind(char("a"), f).parse("b") == []
    assert calls == []

def test_bind_runs_continuation_per_success():
    p = bind(word, lambda w: fmap(lambda c: w + "|" + c, item()))
    # word on "ab" gives "ab", "a", ""; item fails after "ab"
    assert p.parse("ab") == [("a|b", ""), ("|a", "b")]

# --- Sequence ---

def test_sequence():
    assert sequence(item(), item()).parse("ab") == [(("a", "b"), "")]
    assert sequence(item(), item()).parse("a") == []

def test_sequence_cross_product():
    p = sequence(choice(char("a"), string("ab")), choice(char("b"), string("bc")))
    assert p.parse("abc") == [
        (("a", "b"), "c"),
        (("a", "bc"), ""),
    ]

# --- Choice ---

def test_choice_explores_both_branches():
    p = choice(char("a"), string("ab"))
    assert p.parse("abc") == [("a", "bc"), ("ab", "c")]

def test_choice_variadic_and_empty():
    p = choice(char("a"), char("b"), char("a"))
    assert p.parse("a") == [("a", ""), ("a", "")]
    assert choice().parse("a") == []

def test_orelse_commits_to_first_success():
    assert orelse(char("a"), string("ab")).parse("ab") == [("a", "b")]
    assert orelse(char("x"), string("ab")).parse("ab") == [("ab", "")]
    assert len(orelse(word, result("x")).parse("ab")) == 3

def test_first():
    assert first(word).parse("ab cd") == [("ab", " cd")]
    assert first(zero()).parse("ab") == []

# --- Derived sequencing ---

def test_fmap_then_skip():
    assert fmap(str.upper, item()).parse("ab") == [("A", "b")]
    assert then(char("a"), char("b")).parse("abc") == [("b", "c")]
    assert skip(char("a"), char("b")).parse("abc") == [("a", "c")]

def test_between():
    p = between(char("("), char(")"), word)
    assert p.parse("(ab)") == [("ab", "")]
    assert p.parse("(ab") == []

def test_option_offers_default_alongside_success():
    p = option("x", char("a"))
    assert p.parse("ab") == [("a", "b"), ("x", "ab")]
    assert p.parse("b") == [("x", "b")]

def test_optional():
    assert optional(char("a")).parse("ab") == [(None, "b"), (None, "ab")]
    assert optional(char("a")).parse("b") == [(None, "b")]

# --- Repetition ---

def test_many():
    assert many(item()).parse("ab") == [(["a", "b"], ""), (["a"], "b"), ([], "ab")]
    assert many(char("x")).parse("ab") == [([], "ab")]

def test_many_ambiguous_item_order():
    p = choice(char("a"), string("aa"))
    assert many(p).parse("aa") == [
        (["a", "a"], ""),
        (["a"], "a"),
        (["aa"], ""),
        ([], "aa"),
    ]

@given(st.text(alphabet="ab", max_size=6))
def test_many_matches_recursive_rule(s):
    for p in [item(), char("a"), choice(char("a"), string("aa")), choice(item(), item())]:
        assert_results_eq(many(p).parse(s), many_recursive(p).parse(s))

def test_many_skips_non_consuming_steps(debug_log):
    assert many(result(1)).parse("ab") == [([], "ab")]
    assert "consumed no input" in debug_log.text

def test_many1():
    assert many1(digit()).parse("12x") == [(["1", "2"], "x"), (["1"], "2x")]
    assert many1(digit()).parse("x") == []

def test_count():
    assert count(2, item()).parse("abc") == [(["a", "b"], "c")]
    assert count(0, item()).parse("abc") == [([], "abc")]
    assert count(3, item()).parse("ab") == []
    assert count(2, choice(char("a"), string("aa"))).parse("aaa") == [
        (["a", "a"], "a"),
        (["a", "aa"], ""),
        (["aa", "a"], ""),
    ]

def test_count_rejects_negative():
    with pytest.raises(ValueError):
        count(-1, item())

def test_sep_by():
    p = sep_by(digit(), char(","))
    assert p.parse("1,2") == [(["1", "2"], ""), (["1"], ",2"), ([], "1,2")]
    assert p.parse("") == [([], "")]
    assert sep_by1(digit(), char(",")).parse("") == []

def test_chains():
    number = fmap(int, digit())
    minus = fmap(lambda _: lambda x, y: x - y, char("-"))
    assert chainl1(number, minus).parse("8-4-2") == [(2, ""), (4, "-2"), (8, "-4-2")]
    assert chainr1(number, minus).parse("8-4-2") == [(6, ""), (4, "-2"), (8, "-4-2")]

# --- Lookahead and end of input ---

def test_eof():
    assert eof().parse("") == [(None, "")]
    assert eof().parse("a") == []
    assert skip(word, eof()).parse("ab") == [("ab", "")]

def test_look_ahead():
    assert look_ahead(item()).parse("ab") == [("a", "ab")]
    assert look_ahead(item()).parse("") == []

def test_not_followed_by():
    assert not_followed_by(char("a")).parse("b") == [(None, "b")]
    assert not_followed_by(char("a")).parse("a") == []
    # prefixes of the word not followed by 'b'
    assert skip(word, not_followed_by(char("b"))).parse("ab") == [("ab", ""), ("", "ab")]

# --- Operator sugar ---

def test_operators():
    a, b = char("a"), char("b")
    assert (a & b).parse("ab") == [(("a", "b"), "")]
    assert (a | b).parse("b") == [("b", "")]
    assert (a >> (lambda c: result(c * 2))).parse("a") == [("aa", "")]
    assert (a >> b).parse("ab") == [("b", "")]
    assert (a > b).parse("ab") == [("b", "")]
    assert (a < b).parse("ab") == [("a", "")]
    assert a.bind(lambda c: b).parse("ab") == [("b", "")]
    assert a.map(str.upper).parse("a") == [("A", "")]

def test_rshift_rejects_non_parser():
    with pytest.raises(TypeError):
        char("a") >> 5

# --- Shared parsers ---

def test_first_and_orelse_agree_with_full_results(sample_parsers):
    for name, p in sample_parsers.items():
        for s in ["", "a", "aa", "12", "ab cd"]:
            full = p.parse(s)
            assert first(p).parse(s) == full[:1], name
            assert orelse(p, zero()).parse(s) == full, name
            assert look_ahead(p).parse(s) == [(v, s) for v, _ in full], name
