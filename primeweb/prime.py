"""Interactive checker that tells whether whole numbers are prime."""

from __future__ import annotations

import math
import re
import sys
from typing import Iterable, Optional, Sequence, TextIO, Tuple

_WHOLE_NUMBER = re.compile(r"[+-]?[0-9]+")
_INT_RANGE = range(-(2**63), 2**63)


def is_prime(n: int) -> Tuple[bool, str]:
    """Return whether ``n`` is prime together with an explanation."""
    if n in (0, 1):
        return False, f"{n} is not prime by definition"
    if n < 0:
        return False, "Negative numbers are not prime"
    for divisor in range(2, math.isqrt(n) + 1):
        if n % divisor == 0:
            return False, f"{n} is not prime because it is divisible by {divisor}"
    return True, f"{n} is a prime number"


def check_number(line: str) -> Tuple[str, bool]:
    """Return the message for one input line and whether the user quits."""
    if line.casefold() == "q":
        return "", True
    if not _WHOLE_NUMBER.fullmatch(line) or int(line) not in _INT_RANGE:
        return "Please enter a whole number", False
    return is_prime(int(line))[1], False


def prompt(out: Optional[TextIO] = None) -> None:
    """Write the input prompt."""
    (out or sys.stdout).write("-> ")


def intro(out: Optional[TextIO] = None) -> None:
    """Write the welcome text followed by a prompt."""
    stream = out or sys.stdout
    stream.write(
        "Is it prime?\n"
        "------------\n"
        "Enter a whole number, and check if its a prime or not. Enter q to quit\n"
    )
    prompt(stream)


def read_user_input(lines: Iterable[str], out: Optional[TextIO] = None) -> None:
    """Answer each input line until the user quits or input runs out."""
    stream = out or sys.stdout
    for raw in lines:
        message, done = check_number(raw.rstrip("\r\n"))
        if done:
            return
        print(message, file=stream)
        prompt(stream)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive prime checker on standard input."""
    intro()
    read_user_input(sys.stdin)
    print("Goodbye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())