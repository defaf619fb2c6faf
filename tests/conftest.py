# tests/conftest.py
import logging

import pytest

from monadparse.Char import char, digit, string, word
from monadparse.Combinators import choice, many
from monadparse.Prim import item


def assert_results_eq(res1, res2):
    """
    Results must match value for value, remainder for remainder, in order.
    """
    assert len(res1) == len(res2), f"Result count mismatch: {len(res1)} != {len(res2)}"
    for r1, r2 in zip(res1, res2):
        assert r1.value == r2.value
        assert r1.remainder == r2.remainder


@pytest.fixture
def sample_parsers():
    return {
        "item": item(),
        "word": word,
        "digits": many(digit()),
        "a_or_aa": choice(char("a"), string("aa")),
    }


@pytest.fixture
def debug_log(caplog):
    caplog.set_level(logging.DEBUG, logger="monadparse")
    return caplog
