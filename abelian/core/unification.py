"""
Unification and matching in Abelian groups.

The unification problem t =? t' asks for a substitution s such that
s(t) = s(t') modulo the group axioms

    x + y = y + x                 commutativity
    (x + y) + z = x + (y + z)     associativity
    x + 0 = x                     identity
    x + -x = 0                    cancellation

The matching problem asks for s such that s(t) = t', where the symbols
of t' are treated as constants and are never instantiated.

Both reduce to integer linear algebra. Consider matching

    c[0]*x[0] + ... + c[n-1]*x[n-1]  =?  d[0]*a[0] + ... + d[m-1]*a[m-1]

The number of occurrences of constant a[k] in s(x[0]), ..., s(x[n-1]),
weighted by c, must equal d[k]. So a most general matcher is read off a
most general integer solution of c.x = d[k] for every k, which is what
diophantine.solve computes. Unification is matching against 0 after
moving everything to the left: s(t) = s(t') iff s(t - t') = 0.

Results are lists of Maplets, or None when there is no solution.
"""

from typing import Optional

from .term import (
    Term, identity, variable, negate, add,
    assocs, from_assocs, apply_substitution,
)
from .state import Equation, Maplet
from .diophantine import solve


# Generated variables start with this character. The parser refuses
# user identifiers that start with it.
GENSYM_PREFIX = "g"


def gensym(i: int) -> str:
    """Name of the parameter variable with solver index i."""
    return f"{GENSYM_PREFIX}{i}"


def is_gensym(name: str) -> bool:
    return name.startswith(GENSYM_PREFIX)


def mgu(variables: list, symbols: list, subst: dict) -> list:
    """
    Build a most general unifier from a solver substitution.

    variables[n] is the term variable at solver index n, symbols[k] the
    constant whose coefficient is constant k. Eliminated variables get
    their solved value with parameters renamed by gensym; variables the
    solver never touched are free and map to a fresh variable of their own.
    """
    maplets = []
    for n, x in enumerate(variables):
        if n in subst:
            factors, consts = subst[n]
            pairs = [(gensym(j), c) for j, c in enumerate(factors)]
            pairs += list(zip(symbols, consts))
            maplets.append(Maplet(x, from_assocs(pairs)))
        else:
            maplets.append(Maplet(x, variable(gensym(n))))
    return maplets


def match_terms(t0: Term, t1: Term, verbose: bool = False,
                trace: Optional[list] = None) -> Optional[list]:
    """
    Find s with s(t0) = t1. Returns a list of Maplets or None.

    The variables of t1 act as constants. If t0 is 0 there is nothing
    to instantiate, so the answer is [] when t1 is 0 and None otherwise.
    """
    left, right = assocs(t0), assocs(t1)
    if not left and not right:
        return []
    if not left:
        return None

    subst = solve(
        [c for _, c in left],
        [c for _, c in right],
        verbose=verbose,
        trace=trace,
    )
    if subst is None:
        return None
    return mgu([x for x, _ in left], [a for a, _ in right], subst)


def unify_terms(t0: Term, t1: Term, verbose: bool = False,
                trace: Optional[list] = None) -> Optional[list]:
    """
    Find s with s(t0) = s(t1). Returns a list of Maplets or None.

    Unification is matching with no constants: solve t0 - t1 =? 0.
    """
    return match_terms(add(t0, negate(t1)), identity(),
                       verbose=verbose, trace=trace)


def match(equation: Equation, **kwargs) -> Optional[list]:
    return match_terms(equation.left, equation.right, **kwargs)


def unify(equation: Equation, **kwargs) -> Optional[list]:
    return unify_terms(equation.left, equation.right, **kwargs)


def is_unifier(maplets: list, t0: Term, t1: Term) -> bool:
    """Does applying maplets make t0 and t1 equal?"""
    return apply_substitution(maplets, t0) == apply_substitution(maplets, t1)


def is_matcher(maplets: list, t0: Term, t1: Term) -> bool:
    """Does applying maplets to t0 give t1 exactly?"""
    return apply_substitution(maplets, t0) == t1
