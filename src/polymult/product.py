"""Products of parenthesized polynomials, like "(3x^3 + x^2 + 26x - 5)(x^2 + 4x)(x^16 - 12x^9 + -2)".

Anything outside the parentheses is ignored.
"""

import warnings
from typing import Optional

from .debug.logger import Logger, log_time
from .errors import IllegalParenthesisError, ParseError
from .parse import parse
from .polynomial import Polynomial


def _multiply_in(product: Polynomial, factor: str, var: str) -> Polynomial:
    return product * parse(factor, var)


def parse_product(text: str, var: str = "x", logger: Optional[Logger] = None) -> Polynomial:
    """Parse every (...) factor in text and multiply them together.

    Errors from a factor point into the whole text, not just the factor.
    """
    product = Polynomial.one()
    start: Optional[int] = None  # index of the open parenthesis, None if there isn't one
    n_factors = 0

    for i, char in enumerate(text):
        if char == "(":
            if start is not None:
                raise IllegalParenthesisError(i, True)
            start = i
        elif char == ")":
            if start is None:
                raise IllegalParenthesisError(i, False)
            factor = text[start + 1 : i]
            try:
                product = log_time(logger, factor, _multiply_in, product, factor, var)
            except ParseError as e:
                raise e.shifted(start + 1) from e
            start = None
            n_factors += 1

    if start is not None:
        raise IllegalParenthesisError(start, True)
    if n_factors == 0:
        warnings.warn(f"No parenthesized factors found in {text!r}, returning 1")
    return product
