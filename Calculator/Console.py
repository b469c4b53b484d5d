# Console.py
"""Line-based console front-end.

Reads an expression per line, prints "= <result>" or "Invalid expression".
The error kind is only logged; the user always sees the same flat message.
"""

import logging

from . import MathEngine as MathEngine
from . import error as E

logger = logging.getLogger(__name__)

BANNER = "Evaluator (+ - * / ^ and parentheses)"
PROMPT = "Expr: "
INVALID_MESSAGE = "Invalid expression"
EXIT_COMMANDS = ["exit", "quit"]


def answer(problem):
    """Return the console output line for one expression."""
    try:
        ergebnis = MathEngine.evaluate(problem)
    except E.EvaluationError as e:
        logger.debug(E.describe(e))
        return INVALID_MESSAGE

    # Full precision, like the result box of the desktop UI
    ausgabe_string, _ = MathEngine.format_result(ergebnis)
    return "= " + ausgabe_string


def run_once(read_line=input, write=print):
    """Read exactly one expression, print its result and return the exit code."""
    write(BANNER)
    try:
        problem = read_line(PROMPT)
    except EOFError:
        problem = ""
    write(answer(problem))
    return 0


def run(read_line=input, write=print):
    """Interactive loop until 'exit', 'quit', EOF or Ctrl-C."""
    write(BANNER)
    while True:
        try:
            problem = read_line(PROMPT)
        except (EOFError, KeyboardInterrupt):
            write("")
            break

        problem = problem.strip()
        if problem == "":
            continue
        if problem.lower() in EXIT_COMMANDS:
            break

        write(answer(problem))

    return 0


if __name__ == "__main__":
    # python -m Calculator.Console
    raise SystemExit(run())
