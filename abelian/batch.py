"""
The batch driver: one equation per line, a unifier and a matcher for each.

A bad line never stops the batch. Parse errors and internal failures
are recorded in the line's ProblemReport and the driver moves on.
"""

from typing import Optional

from .core.state import ProblemReport, save_reports
from .core.diophantine import BadProblem
from .core.unification import unify, match, is_unifier, is_matcher
from .syntax import ParseError, parse_equation
from .visualization import print_report


def solve_problem(text: str, verbose: bool = False,
                  check: bool = False) -> ProblemReport:
    """
    Parse one line and compute its unifier and matcher.

    Args:
        text:    "term = term"
        verbose: print solver rounds as they happen
        check:   verify the results by substitution and record a
                 failed check as an error
    """
    report = ProblemReport(source=text)
    try:
        report.equation = parse_equation(text)
    except ParseError as e:
        report.error = str(e)
        return report

    eq = report.equation
    try:
        if verbose:
            print(f"--- Unify {eq.name} ---")
        report.unifier = unify(eq, verbose=verbose)
        if verbose:
            print(f"--- Match {eq.name} ---")
        report.matcher = match(eq, verbose=verbose)
    except BadProblem as e:
        report.error = f"bad problem: {e}"
        return report

    if check:
        failures = []
        if report.unifier is not None and not is_unifier(report.unifier, eq.left, eq.right):
            failures.append("unifier does not equate both sides")
        if report.matcher is not None and not is_matcher(report.matcher, eq.left, eq.right):
            failures.append("matcher does not reach the right side")
        if failures:
            report.error = "check failed: " + "; ".join(failures)
    return report


def run_batch(
    lines,
    verbose: bool = False,
    quiet: bool = False,
    check: bool = False,
    save_path: Optional[str] = None,
) -> list:
    """
    Solve every non-blank line.

    Args:
        lines:     iterable of equation strings (a file object works)
        verbose:   print solver rounds
        quiet:     do not print the per-problem reports
        check:     verify results by substitution
        save_path: if set, write all reports as JSON when done

    Ctrl-C stops the batch; the reports finished so far are still
    saved and returned.
    """
    reports = []
    try:
        for line in lines:
            text = line.strip()
            if not text:
                continue
            report = solve_problem(text, verbose=verbose, check=check)
            reports.append(report)
            if not quiet:
                print_report(report)
    except KeyboardInterrupt:
        print("\nInterrupted.")
    if save_path:
        save_reports(reports, save_path)
    return reports
