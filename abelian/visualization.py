"""
Printing and reporting utilities.
"""

from typing import Optional

from .core.state import Equation, Maplet, ProblemReport


def format_equation(equation: Equation) -> str:
    return equation.canonicalize().name


def format_maplet(maplet: Maplet) -> str:
    return maplet.name


def format_maplets(maplets: Optional[list]) -> str:
    """Render a unifier as [x -> t, y -> u], or "no solution" for None."""
    if maplets is None:
        return "no solution"
    return "[" + ", ".join(format_maplet(m) for m in maplets) + "]"


def print_report(report: ProblemReport):
    """Print the problem, its unifier and its matcher."""
    if report.equation is None:
        print(f"Parse error: {report.error}  (in {report.source!r})")
        return
    print(f"Problem:   {format_equation(report.equation)}")
    if report.error:
        print(f"Error:     {report.error}")
    else:
        print(f"Unifier:   {format_maplets(report.unifier)}")
        print(f"Matcher:   {format_maplets(report.matcher)}")
    print()


def print_summary(reports: list):
    """One line per outcome category."""
    parsed = [r for r in reports if r.equation is not None]
    unsound = [r for r in parsed if r.error.startswith("check failed")]
    failed = [r for r in parsed
              if r.error and not r.error.startswith("check failed")]
    matched = [r for r in parsed if not r.error and r.matcher is not None]
    print(f"{'='*60}")
    print(f"Problems: {len(reports)} | parse errors: {len(reports) - len(parsed)}"
          f" | internal errors: {len(failed)} | failed checks: {len(unsound)}"
          f" | with matcher: {len(matched)}")
    print(f"{'='*60}")