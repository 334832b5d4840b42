from .term import (
    Term, identity, variable, scale, negate, add,
    from_assocs, assocs, canonicalize, apply_substitution, format_term,
)
from .state import Equation, Maplet, ProblemReport, save_reports, load_reports
from .diophantine import solve, BadProblem
from .unification import (
    GENSYM_PREFIX, gensym, is_gensym, mgu,
    match_terms, unify_terms, match, unify,
    is_unifier, is_matcher,
)

__all__ = [
    "Term", "identity", "variable", "scale", "negate", "add",
    "from_assocs", "assocs", "canonicalize", "apply_substitution", "format_term",
    "Equation", "Maplet", "ProblemReport", "save_reports", "load_reports",
    "solve", "BadProblem",
    "GENSYM_PREFIX", "gensym", "is_gensym", "mgu",
    "match_terms", "unify_terms", "match", "unify",
    "is_unifier", "is_matcher",
]
