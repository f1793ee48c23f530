"""Polynomial multiplier.

    python -m polymult "(3x^3 + x^2 + 26x - 5)(x^2 + 4x)"

Without an argument it asks for one on stdin.
"""

import argparse
import sys
from typing import List, Optional

from .errors import ParseError
from .product import parse_product

PROMPT = """Polynomial multiplier:
Here's the how it should look in case you forgot:
(3x^3 + x^2 + 26x - 5)(x^2 + 4x)(x^16 - 12x^9 + -2)... etc.
So go ahead:
"""


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="polymult", description="Multiply out a product of polynomials.")
    parser.add_argument("expression", nargs="?", help="ex. '(x^2 + 4x)(x - 1)'. Read from stdin if left out.")
    parser.add_argument("--var", default="x", help="letter used for the variable (default: x)")
    args = parser.parse_args(argv)

    text = args.expression
    if text is None:
        print(PROMPT)
        text = sys.stdin.readline().rstrip("\r\n")

    try:
        poly = parse_product(text, var=args.var).normalize()
    except ParseError as e:
        print(e.pointer(text), file=sys.stderr)
        return 1

    print([tuple(term) for term in poly])
    print(poly.render(args.var))
    return 0


if __name__ == "__main__":
    sys.exit(main())
