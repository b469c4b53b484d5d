"""Tests for the console front-end."""

import pytest

from Calculator import Console


class FakeTerminal:
    """Feeds prepared lines to the console and records everything it writes."""

    def __init__(self, *lines, end=EOFError):
        self.lines = list(lines)
        self.end = end
        self.output = []
        self.prompts = []

    def read_line(self, prompt):
        self.prompts.append(prompt)
        if not self.lines:
            raise self.end()
        return self.lines.pop(0)

    def write(self, text):
        self.output.append(text)


@pytest.mark.parametrize("line, expected", [
    ("(2+3)*4", "= 20"),
    ("1/3", "= 0.3333333333333333"),
    ("1/0", "= Infinity"),
    ("1+", "Invalid expression"),
    ("(1+2", "Invalid expression"),
    ("1$2", "Invalid expression"),
])
def test_answer(line, expected):
    assert Console.answer(line) == expected


def test_run_loops_until_eof():
    terminal = FakeTerminal("1+2", "", "2^3^2", "1+*2")
    assert Console.run(terminal.read_line, terminal.write) == 0
    assert terminal.output == [Console.BANNER, "= 3", "= 512", "Invalid expression", ""]
    assert terminal.prompts == [Console.PROMPT] * 5


@pytest.mark.parametrize("command", ["exit", "QUIT", "  quit  "])
def test_run_stops_on_exit_command(command):
    terminal = FakeTerminal("4*-2", command, "1+1")
    Console.run(terminal.read_line, terminal.write)
    assert terminal.output == [Console.BANNER, "= -8"]


def test_run_stops_on_ctrl_c():
    terminal = FakeTerminal("-(2+3)", end=KeyboardInterrupt)
    assert Console.run(terminal.read_line, terminal.write) == 0
    assert terminal.output == [Console.BANNER, "= -5", ""]


def test_run_once_reads_single_line():
    terminal = FakeTerminal("1.5*2", "9")
    assert Console.run_once(terminal.read_line, terminal.write) == 0
    assert terminal.output == [Console.BANNER, "= 3"]


def test_run_once_on_empty_input():
    terminal = FakeTerminal()
    Console.run_once(terminal.read_line, terminal.write)
    assert terminal.output == [Console.BANNER, "Invalid expression"]
