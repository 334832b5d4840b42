"""
Property-based and unit tests for linear terms.

The core claims:
    - Invariant:     no stored coefficient is zero, no variable repeats
    - Group laws:    add is commutative and associative, identity is neutral,
                     t + negate(t) is the identity
    - Scaling:       scale(0, t) is the identity, scale distributes over add
    - Canonical:     canonicalize is idempotent and preserves equality
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from abelian.core.term import (
    Term, identity, variable, scale, negate, add,
    from_assocs, assocs, canonicalize, apply_substitution, format_term,
)


# ── Generators ──────────────────────────────────────────────────────────────

names = st.sampled_from(["a", "b", "c", "x", "y", "z"])

coefficients = st.integers(min_value=-6, max_value=6)

@st.composite
def terms(draw):
    pairs = draw(st.lists(st.tuples(names, coefficients), max_size=6))
    return from_assocs(pairs)


def well_formed(t: Term) -> bool:
    xs = [x for x, _ in t.factors]
    return all(c != 0 for _, c in t.factors) and len(xs) == len(set(xs))


# ── Unit tests ───────────────────────────────────────────────────────────────

class TestConstructors:
    def test_identity_is_empty(self):
        assert identity().factors == ()
        assert identity().is_identity

    def test_variable_has_coefficient_one(self):
        assert variable("x").factors == (("x", 1),)

    def test_scale_by_zero_is_identity(self):
        assert scale(0, variable("x")) == identity()

    def test_scale_multiplies(self):
        assert scale(3, from_assocs([("x", 2), ("y", -1)])) == \
            from_assocs([("x", 6), ("y", -3)])

    def test_negate(self):
        assert negate(from_assocs([("x", 2), ("y", -1)])) == \
            from_assocs([("x", -2), ("y", 1)])


class TestAdd:
    def test_cancellation_removes_variable(self):
        t = add(variable("x"), negate(variable("x")))
        assert t == identity()
        assert t.factors == ()

    def test_coefficients_sum(self):
        t = add(from_assocs([("x", 2)]), from_assocs([("x", 3), ("y", 1)]))
        assert t.coefficient("x") == 5
        assert t.coefficient("y") == 1

    def test_partial_cancellation(self):
        t = add(from_assocs([("x", 1), ("y", 2)]), from_assocs([("y", -2)]))
        assert assocs(t) == [("x", 1)]

    def test_from_assocs_combines_repeats(self):
        t = from_assocs([("x", 1), ("y", 0), ("x", 2)])
        assert assocs(t) == [("x", 3)]


class TestEquality:
    def test_order_does_not_matter(self):
        assert Term((("x", 1), ("y", 1))) == Term((("y", 1), ("x", 1)))

    def test_equal_terms_hash_alike(self):
        t1 = Term((("x", 1), ("y", 1)))
        t2 = Term((("y", 1), ("x", 1)))
        assert hash(t1) == hash(t2)
        assert len({t1, t2}) == 1

    def test_not_equal_to_other_types(self):
        assert variable("x") != "x"


class TestFormat:
    def test_identity_is_zero(self):
        assert format_term(identity()) == "0"

    def test_unit_coefficient_elided(self):
        assert format_term(variable("x")) == "x"

    def test_minus_one_is_leading_minus(self):
        assert format_term(negate(variable("x"))) == "-x"

    def test_sorted_with_signs(self):
        t = from_assocs([("a", -16), ("g6", -41)])
        assert format_term(t) == "-16a - 41g6"

    def test_mixed(self):
        t = from_assocs([("y", -1), ("x", 2), ("z", 1)])
        assert format_term(t) == "2x - y + z"

    def test_name_property_matches(self):
        t = from_assocs([("y", 3), ("x", -2)])
        assert t.name == format_term(t) == str(t)


class TestApplySubstitution:
    def test_replaces_bound_variables(self):
        sub = {"x": from_assocs([("a", 2)])}
        t = from_assocs([("x", 3), ("y", 1)])
        assert apply_substitution(sub, t) == from_assocs([("a", 6), ("y", 1)])

    def test_simultaneous_not_chained(self):
        # x -> x + y must not loop; y -> x must not rewrite the new x
        sub = {"x": from_assocs([("x", 1), ("y", 1)]), "y": variable("x")}
        t = from_assocs([("x", 1), ("y", 1)])
        assert apply_substitution(sub, t) == from_assocs([("x", 2), ("y", 1)])

    def test_unbound_unchanged(self):
        assert apply_substitution({}, variable("z")) == variable("z")


# ── Property-based tests ─────────────────────────────────────────────────────

class TestTermProperties:

    @given(terms(), terms())
    def test_add_keeps_invariant(self, t1, t2):
        assert well_formed(add(t1, t2))

    @given(coefficients, terms())
    def test_scale_keeps_invariant(self, k, t):
        assert well_formed(scale(k, t))

    @given(terms(), terms())
    def test_add_commutative(self, t1, t2):
        assert add(t1, t2) == add(t2, t1)

    @given(terms(), terms(), terms())
    def test_add_associative(self, t1, t2, t3):
        assert add(add(t1, t2), t3) == add(t1, add(t2, t3))

    @given(terms())
    def test_identity_neutral(self, t):
        assert add(t, identity()) == t

    @given(terms())
    def test_inverse_cancels(self, t):
        assert add(t, negate(t)) == identity()

    @given(coefficients, terms(), terms())
    def test_scale_distributes(self, k, t1, t2):
        assert scale(k, add(t1, t2)) == add(scale(k, t1), scale(k, t2))

    @given(terms())
    def test_canonicalize_idempotent(self, t):
        once = canonicalize(t)
        assert canonicalize(once).factors == once.factors
        assert once == t

    @given(terms())
    def test_format_stable_under_canonicalize(self, t):
        assert format_term(canonicalize(t)) == format_term(t)
