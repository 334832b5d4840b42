"""
Linear terms: the normal form of an Abelian group term.

A term built from +, 0 and unary - over a set of variables is, modulo
the group axioms, a sum of factors c*x where c is a non-zero integer
and no variable occurs twice. The identity element 0 is the empty sum.

    x + y + -x + 2y      ->  3y        (("y", 3),)
    0                    ->  0         ()
    -(x + -y)            ->  -x + y    (("x", -1), ("y", 1))

Terms are immutable. Every operation returns a new term that keeps
the invariants: coefficients are non-zero, variables are unique.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Term:
    """
    A linear combination of variables with integer coefficients.

    factors is a tuple of (variable, coefficient) pairs. Their order is
    whatever the operations produced; equality and hashing go through
    the canonical (sorted) form, so x + y == y + x.
    """
    factors: tuple = ()

    @property
    def name(self):
        return format_term(self)

    @property
    def is_identity(self):
        return len(self.factors) == 0

    @property
    def variables(self):
        return [x for x, _ in self.factors]

    def coefficient(self, var: str) -> int:
        """Coefficient of var, 0 if var does not occur."""
        for x, c in self.factors:
            if x == var:
                return c
        return 0

    def __hash__(self):
        return hash(tuple(sorted(self.factors)))

    def __eq__(self, other):
        return (isinstance(other, Term) and
                sorted(self.factors) == sorted(other.factors))

    def __str__(self):
        return self.name

    def __repr__(self):
        return f"Term({self.name})"


# --- Constructors ---

def identity() -> Term:
    """The group identity, 0."""
    return Term()


def variable(name: str) -> Term:
    return Term(((name, 1),))


def scale(k: int, term: Term) -> Term:
    """Multiply every coefficient by k. Scaling by 0 gives the identity."""
    if k == 0:
        return identity()
    if k == 1:
        return term
    return Term(tuple((x, k * c) for x, c in term.factors))


def negate(term: Term) -> Term:
    """The group inverse: negate every coefficient."""
    return Term(tuple((x, -c) for x, c in term.factors))


def add(t1: Term, t2: Term) -> Term:
    """
    Sum two terms. Coefficients of a shared variable are added, and the
    variable disappears when they cancel.
    """
    merged = dict(t1.factors)
    for x, c in t2.factors:
        total = merged.get(x, 0) + c
        if total == 0:
            merged.pop(x, None)
        else:
            merged[x] = total
    return Term(tuple(merged.items()))


def from_assocs(pairs) -> Term:
    """
    Build a term from (variable, coefficient) pairs.

    Zero coefficients vanish and repeated variables are combined, so any
    list of pairs is accepted.
    """
    result = identity()
    for x, c in pairs:
        result = add(result, scale(c, variable(x)))
    return result


def assocs(term: Term) -> list:
    """The (variable, coefficient) pairs of a term, in stored order."""
    return list(term.factors)


def canonicalize(term: Term) -> Term:
    """Sort factors by variable name."""
    return Term(tuple(sorted(term.factors)))


# --- Substitution ---

def apply_substitution(sub, term: Term) -> Term:
    """
    Apply a substitution to a term.

    sub is a dict {variable: Term} or a list of Maplets. Replacement is
    simultaneous: a matcher may map x to a term that mentions the
    constant x, so bindings are never followed in chains.
    """
    if not isinstance(sub, dict):
        sub = {m.variable: m.term for m in sub}
    result = identity()
    for x, c in term.factors:
        if x in sub:
            result = add(result, scale(c, sub[x]))
        else:
            result = add(result, scale(c, variable(x)))
    return result


# --- Display ---

def _format_factor(x: str, c: int) -> str:
    if c == 1:
        return x
    if c == -1:
        return f"-{x}"
    return f"{c}{x}"


def format_term(term: Term) -> str:
    """
    Render a term in canonical order.

        0            identity
        2x - y + z   coefficients 1 elided, later negatives as " - "
    """
    factors = canonicalize(term).factors
    if not factors:
        return "0"
    first, rest = factors[0], factors[1:]
    parts = [_format_factor(*first)]
    for x, c in rest:
        if c < 0:
            parts.append(" - " + _format_factor(x, -c))
        else:
            parts.append(" + " + _format_factor(x, c))
    return "".join(parts)
