"""
Built-in problem sets.

Each set is a dict describing a batch run:
    problems:     list of equation strings, one per line of input
    description:  str
"""

BASIC_PROBLEMS = [
    # Already equal by commutativity: the unifier is empty
    "x + y = y + x",
    # Cancellation leaves 0 = 0
    "x + -x = 0",
    # Torsion-free: only x = 0 works
    "2x = 0",
    "x = y",
    "x + y = a",
    "2x + y = 3z",
    "-(x + y) = y - x",
    "3(x - y) = 0",
]

WORKED_PROBLEMS = [
    # Knuth's example: x = -41g6 - 16a, y = -64g6 - 25a
    "64x - 41y = a",
    "64x = 41y + a",
    "2x = a",
    "2x = 2a",
    "6x + 10y = 4a + 8b",
    "2x + 4y = a",
]

ERROR_PROBLEMS = [
    "x + y",
    "x = ",
    "2 = x",
    "x = (y",
    "g1 = x",
    "x = y z",
    "x + y = y + x",
]


PROBLEM_SETS = {
    "basic": {
        "problems":    BASIC_PROBLEMS,
        "description": "Commutativity, cancellation and torsion",
    },
    "worked": {
        "problems":    WORKED_PROBLEMS,
        "description": "Inhomogeneous problems needing Euclidean reduction",
    },
    "errors": {
        "problems":    ERROR_PROBLEMS,
        "description": "Malformed lines mixed with a good one: the batch keeps going",
    },
}
