"""
Unit and property-based tests for the term and equation reader.

Core claims:
    - Printed terms parse back to the same term
    - Reserved gensym identifiers are refused
    - Malformed text raises ParseError, never anything else
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from abelian.core.term import identity, variable, scale, negate, from_assocs, format_term
from abelian.syntax import ParseError, tokenize, parse_term, parse_equation


# ── Generators ──────────────────────────────────────────────────────────────

@st.composite
def terms(draw):
    pairs = draw(st.lists(
        st.tuples(st.sampled_from(["a", "b", "x", "y", "z1"]),
                  st.integers(min_value=-20, max_value=20)),
        max_size=5,
    ))
    return from_assocs(pairs)


# ── Unit tests ───────────────────────────────────────────────────────────────

class TestTokenize:
    def test_splits_numbers_from_identifiers(self):
        assert tokenize("64x") == ["64", "x"]

    def test_identifiers_may_contain_digits(self):
        assert tokenize("x1 + y22") == ["x1", "+", "y22"]

    def test_whitespace_ignored(self):
        assert tokenize("  2 ( x -y )") == ["2", "(", "x", "-", "y", ")"]


class TestParseTerm:
    def test_zero(self):
        assert parse_term("0") == identity()

    def test_variable(self):
        assert parse_term("x") == variable("x")

    def test_coefficient(self):
        assert parse_term("3x") == scale(3, variable("x"))

    def test_negation(self):
        assert parse_term("-x") == negate(variable("x"))

    def test_sum_and_difference(self):
        assert parse_term("x + 2y - z") == from_assocs([("x", 1), ("y", 2), ("z", -1)])

    def test_plus_negative(self):
        assert parse_term("x + -x") == identity()

    def test_parentheses(self):
        assert parse_term("2(x - y)") == from_assocs([("x", 2), ("y", -2)])

    def test_nested_parentheses(self):
        assert parse_term("-(x + 3(y - x))") == from_assocs([("x", 2), ("y", -3)])

    def test_coefficient_of_zero(self):
        assert parse_term("5 0") == identity()

    def test_leading_zeros(self):
        assert parse_term("007x") == scale(7, variable("x"))


class TestParseErrors:
    @pytest.mark.parametrize("text", [
        "",
        "x +",
        "2",
        "x y",
        "(x",
        "x)",
        "--x",
        "x - -y",
        "*x",
        "0x",
    ])
    def test_malformed_terms(self, text):
        with pytest.raises(ParseError):
            parse_term(text)

    def test_reserved_prefix(self):
        with pytest.raises(ParseError, match="reserved"):
            parse_term("g0 + x")

    def test_reserved_prefix_whole_identifier(self):
        with pytest.raises(ParseError):
            parse_term("gamma")

    def test_deep_nesting(self):
        with pytest.raises(ParseError, match="nested too deeply"):
            parse_term("(" * 3000 + "x" + ")" * 3000)

    def test_deep_nesting_in_equation(self):
        with pytest.raises(ParseError, match="nested too deeply"):
            parse_equation("x = " + "-(" * 3000 + "y" + ")" * 3000)

    def test_moderate_nesting_parses(self):
        assert parse_term("(" * 50 + "x" + ")" * 50) == variable("x")

    def test_parse_error_is_value_error(self):
        assert issubclass(ParseError, ValueError)


class TestParseEquation:
    def test_simple(self):
        eq = parse_equation("64x - 41y = a")
        assert eq.left == from_assocs([("x", 64), ("y", -41)])
        assert eq.right == variable("a")

    def test_missing_equals(self):
        with pytest.raises(ParseError):
            parse_equation("x + y")

    def test_missing_right_side(self):
        with pytest.raises(ParseError):
            parse_equation("x =")

    def test_two_equals(self):
        with pytest.raises(ParseError):
            parse_equation("x = y = z")

    def test_zero_sides(self):
        eq = parse_equation("0 = 0")
        assert eq.left == identity() and eq.right == identity()


# ── Property-based tests ─────────────────────────────────────────────────────

class TestParseProperties:

    @given(terms())
    def test_print_then_parse(self, t):
        assert parse_term(format_term(t)) == t

    @given(terms(), terms())
    def test_equation_print_then_parse(self, t0, t1):
        eq = parse_equation(f"{format_term(t0)} = {format_term(t1)}")
        assert eq.left == t0 and eq.right == t1

    @given(st.text(alphabet="xyab0123+-()= ", max_size=12))
    def test_only_parse_errors(self, text):
        try:
            parse_equation(text)
        except ParseError:
            pass
