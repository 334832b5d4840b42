"""
Core data structures: Equation, Maplet, ProblemReport.

Nothing in here depends on the solver or the parser.

    Equation:       left = right, both linear terms
    Maplet:         x -> term, one binding of a unifier or matcher
    ProblemReport:  everything the batch driver learned about one input
                    line, serializable for later inspection

A unifier or matcher is a plain list of Maplets. None stands for
"no solution".
"""

from dataclasses import dataclass
from typing import Optional
import json

from .term import Term, canonicalize, format_term


@dataclass(frozen=True)
class Equation:
    """A problem statement left =? right."""
    left: Term
    right: Term

    @property
    def name(self):
        return f"{format_term(self.left)} = {format_term(self.right)}"

    def canonicalize(self) -> "Equation":
        return Equation(canonicalize(self.left), canonicalize(self.right))

    def __repr__(self):
        return f"Equation({self.name})"


@dataclass(frozen=True)
class Maplet:
    """One binding of a substitution: variable -> term."""
    variable: str
    term: Term

    @property
    def name(self):
        return f"{self.variable} -> {format_term(self.term)}"

    def __repr__(self):
        return f"Maplet({self.name})"


@dataclass
class ProblemReport:
    """
    The outcome of one line of input.

    source:   the raw text
    equation: parsed equation, None if the line did not parse
    unifier:  list of Maplets, None for no solution
    matcher:  list of Maplets, None for no solution
    error:    parse error or internal failure message, "" if none
    """
    source: str
    equation: Optional[Equation] = None
    unifier: Optional[list] = None
    matcher: Optional[list] = None
    error: str = ""

    @property
    def ok(self):
        return self.equation is not None and not self.error

    def to_dict(self):
        def serialize_term(t):
            return [[x, c] for x, c in t.factors]

        def serialize_maplets(maplets):
            if maplets is None:
                return None
            return [{"variable": m.variable, "term": serialize_term(m.term)}
                    for m in maplets]

        equation = None
        if self.equation is not None:
            equation = {"left": serialize_term(self.equation.left),
                        "right": serialize_term(self.equation.right)}
        return {
            "source": self.source,
            "equation": equation,
            "unifier": serialize_maplets(self.unifier),
            "matcher": serialize_maplets(self.matcher),
            "error": self.error,
        }

    @classmethod
    def from_dict(cls, d):
        def deserialize_term(pairs):
            return Term(tuple((x, c) for x, c in pairs))

        def deserialize_maplets(data):
            if data is None:
                return None
            return [Maplet(m["variable"], deserialize_term(m["term"]))
                    for m in data]

        equation = None
        if d.get("equation") is not None:
            equation = Equation(deserialize_term(d["equation"]["left"]),
                                deserialize_term(d["equation"]["right"]))
        return cls(
            source=d["source"],
            equation=equation,
            unifier=deserialize_maplets(d.get("unifier")),
            matcher=deserialize_maplets(d.get("matcher")),
            error=d.get("error", ""),
        )


def save_reports(reports, path="abelian_reports.json"):
    with open(path, "w") as f:
        json.dump([r.to_dict() for r in reports], f, indent=2)


def load_reports(path="abelian_reports.json") -> list:
    with open(path) as f:
        return [ProblemReport.from_dict(d) for d in json.load(f)]
