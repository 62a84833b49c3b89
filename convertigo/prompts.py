"""Terminal prompts for the interactive menu.

All readers take an optional `input_func` (builtin `input` when omitted) so
the menu can be driven from tests. EOFError from `input_func` is not handled here.
"""
import math
import sys
from typing import Callable, Optional, TextIO

InputFunc = Callable[[str], str]


def read_amount(input_func: Optional[InputFunc] = None, output: Optional[TextIO] = None) -> float:
    """Prompt until the user enters a finite number greater than zero."""
    read = input_func or input
    out = output or sys.stdout
    while True:
        text = read("Enter amount to convert: ")
        try:
            amount = float(text.strip())
        except ValueError:
            amount = None

        if amount is not None and math.isfinite(amount) and amount > 0:
            return amount

        # The whole line is dropped, so nothing from a bad entry carries over
        print("Please enter a valid positive number.", file=out)


def read_currency(prompt: str, input_func: Optional[InputFunc] = None) -> str:
    """Read one currency code, uppercased. Not checked against any list."""
    read = input_func or input
    while True:
        tokens = read(prompt).split()
        if tokens:
            return tokens[0].upper()


def read_menu_choice(input_func: Optional[InputFunc] = None) -> str:
    read = input_func or input
    return read("Enter your choice (1-3): ").strip()
