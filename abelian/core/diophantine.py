"""
Integer solutions of linear Diophantine equations.

A problem is a pair of integer lists (coefficients, constants). With no
constants it is the homogeneous equation

    c[0]*x[0] + c[1]*x[1] + ... + c[n-1]*x[n-1] = 0

otherwise it is one equation per constant, all with the same left side:

    c[0]*x[0] + ... + c[n-1]*x[n-1] = d[k]      for each k

A solution maps the index of each eliminated variable to a pair
(coefficients, constants): the variable part of its value followed by
the constant part. The variable part may use indices >= n, which name
parameters introduced while solving. For example 64x = 41y + 1 has the
general solution x = -41z - 16, y = -64z - 25:

    solve([64, -41], [1]) == {
        0: ([0, 0, 0, 0, 0, 0, -41], [-16]),
        1: ([0, 0, 0, 0, 0, 0, -64], [-25]),
    }

The method is the one in Knuth, The Art of Computer Programming,
Vol. 2, Seminumerical Algorithms, 2nd ed., p. 327: repeatedly reduce
every coefficient modulo the smallest one, introducing a fresh variable
each time, until some coefficient is 1 or divides all the others.
"""

from itertools import zip_longest
from typing import Optional


class BadProblem(Exception):
    """The elimination reached a state with no non-zero coefficient."""


def smallest(c: list) -> tuple:
    """
    Index and value of the non-zero entry of smallest absolute value.
    The first one seen wins ties. Returns (-1, 0) or (i, 0) when
    there is no non-zero entry.
    """
    i, ci = -1, 0
    for j, x in enumerate(c):
        if ci == 0 or (x != 0 and abs(x) < abs(ci)):
            i, ci = j, x
    return i, ci


def invert(xs: list) -> list:
    return [-x for x in xs]


def zero(i: int, xs: list) -> list:
    """Copy of xs with position i set to 0."""
    return [0 if j == i else x for j, x in enumerate(xs)]


def divisible(small: int, xs: list) -> bool:
    return all(x % small == 0 for x in xs)


def divide(small: int, xs: list) -> list:
    return [x // small for x in xs]


def addmul(m: int, xs: list, ys: list) -> list:
    """xs + m*ys, padding the shorter list with zeros."""
    return [x + m * y for x, y in zip_longest(xs, ys, fillvalue=0)]


def eliminate(n: int, i: int, coefficients: list, constants: list,
              subst: dict) -> dict:
    """
    Record x[i] = coefficients . x + constants and substitute it into
    every equation already in subst.

    Only variables of the original problem (i < n) are kept in the
    result; parameters are substituted away and then forgotten. After
    this step no equation in the result mentions x[i].
    """
    result = {}
    if i < n:
        result[i] = (coefficients, constants)
    for k, (ck, dk) in subst.items():
        m = ck[i] if i < len(ck) else 0
        if m == 0:
            result[k] = (ck, dk)
        else:
            result[k] = (addmul(m, zero(i, ck), coefficients),
                         addmul(m, dk, constants))
    return result


def solve(
    coefficients: list,
    constants: list,
    verbose: bool = False,
    trace: Optional[list] = None,
) -> Optional[dict]:
    """
    Most general integer solution of a linear equation system.

    Returns the substitution dict, or None when the system has no
    integer solution. Raises BadProblem if every coefficient vanishes,
    which cannot happen for a problem with a non-zero coefficient.

    Args:
        coefficients: the shared left-hand side c
        constants:    right-hand sides d; empty for the homogeneous case
        verbose:      print each round
        trace:        if a list, one dict per round is appended to it
    """
    n = len(coefficients)
    c, d = list(coefficients), list(constants)
    subst = {}
    if n == 0:
        return subst

    rounds = 0

    def record(action, i, ci):
        nonlocal rounds
        rounds += 1
        entry = {
            "round": rounds,
            "action": action,
            "index": i,
            "pivot": ci,
            "coefficients": list(c),
            "constants": list(d),
        }
        if trace is not None:
            trace.append(entry)
        if verbose:
            print(f"  round {rounds}: [{action}] x{i} pivot={ci} c={entry['coefficients']} "
                  f"d={entry['constants']}")

    while True:
        i, ci = smallest(c)

        if ci < 0:
            # Pivot must be positive for the // and % below
            record("negate", i, ci)
            c, d = invert(c), invert(d)
            continue

        if ci == 0:
            record("fail", i, ci)
            raise BadProblem(f"no non-zero coefficient in {c}")

        if ci == 1:
            # x[i] = sum[j != i] -c[j]*x[j] + d[k]
            record("eliminate", i, ci)
            return eliminate(n, i, invert(zero(i, c)), d, subst)

        if divisible(ci, c):
            if not divisible(ci, d):
                record("fail", i, ci)
                return None
            record("divide", i, ci)
            c, d = divide(ci, c), divide(ci, d)
            return eliminate(n, i, invert(zero(i, c)), d, subst)

        # Eliminate x[i] in favor of a fresh x[len(c)]:
        #   x[i] = x[len(c)] - sum[j != i] (c[j] div ci)*x[j]
        # leaving ci*x[len(c)] + sum[j] (c[j] mod ci)*x[j] = d[k]
        record("reduce", i, ci)
        quotients = divide(ci, zero(i, c))
        subst = eliminate(n, i, invert(quotients) + [1], [], subst)
        c = [x % ci for x in c] + [ci]
