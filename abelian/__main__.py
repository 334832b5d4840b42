"""
CLI entry point. Run as: python -m abelian [--file PATH | --problems NAME]

Reads one equation per line (stdin by default) and prints, for each,
the canonical problem, a most general unifier and a most general matcher.
"""

import argparse
import sys

from .batch import run_batch
from .core.state import load_reports
from .problems import PROBLEM_SETS
from .visualization import print_report, print_summary


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Unification and matching in Abelian groups")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--file", type=str, default=None,
                        help="Read equations from a file instead of stdin")
    source.add_argument("--problems", choices=list(PROBLEM_SETS.keys()),
                        default=None, help="Run a built-in problem set")
    source.add_argument("--load", type=str, default=None,
                        help="Print reports saved with --save")
    parser.add_argument("--save",  type=str, default=None, help="Save reports to a JSON file")
    parser.add_argument("--trace", action="store_true",    help="Print solver rounds")
    parser.add_argument("--check", action="store_true",    help="Verify results by substitution")
    parser.add_argument("--quiet", action="store_true",    help="Only print the summary")
    args = parser.parse_args(argv)

    if args.load:
        reports = load_reports(args.load)
        print(f"Loaded {len(reports)} reports from {args.load}")
        for report in reports:
            print_report(report)
        return

    if args.problems:
        problem_set = PROBLEM_SETS[args.problems]
        print(f"Problem set: {args.problems} -- {problem_set['description']}\n")
        lines = problem_set["problems"]
    elif args.file:
        with open(args.file) as f:
            lines = f.readlines()
    else:
        lines = sys.stdin

    reports = run_batch(
        lines,
        verbose=args.trace,
        quiet=args.quiet,
        check=args.check,
        save_path=args.save,
    )

    if args.quiet:
        print_summary(reports)

    if args.save and reports:
        print(f"Reports saved to {args.save}")


if __name__ == "__main__":
    main()
