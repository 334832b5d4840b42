"""
Abelian: unification and matching modulo the theory of Abelian groups.

Refines the commutative/monoidal unification algorithms of Baader and
Snyder (Handbook of Automated Reasoning, ch. 8, sec. 5) for the special
case of Abelian groups: terms are linear combinations of variables, and
problems are solved with integer linear algebra.

Usage:
    python -m abelian < equations.txt
    python -m abelian --problems worked
    python -m abelian --file equations.txt --save reports.json
    python -m abelian --load reports.json
"""

from .core.term import (
    Term, identity, variable, scale, negate, add,
    from_assocs, assocs, canonicalize, apply_substitution, format_term,
)
from .core.state import Equation, Maplet, ProblemReport, save_reports, load_reports
from .core.diophantine import solve, BadProblem
from .core.unification import (
    gensym, mgu, match_terms, unify_terms, match, unify,
    is_unifier, is_matcher,
)
from .syntax import ParseError, parse_term, parse_equation
from .visualization import format_equation, format_maplet, format_maplets, print_report
from .batch import solve_problem, run_batch

__all__ = [
    "Term", "identity", "variable", "scale", "negate", "add",
    "from_assocs", "assocs", "canonicalize", "apply_substitution", "format_term",
    "Equation", "Maplet", "ProblemReport", "save_reports", "load_reports",
    "solve", "BadProblem",
    "gensym", "mgu", "match_terms", "unify_terms", "match", "unify",
    "is_unifier", "is_matcher",
    "ParseError", "parse_term", "parse_equation",
    "format_equation", "format_maplet", "format_maplets", "print_report",
    "solve_problem", "run_batch",
]
