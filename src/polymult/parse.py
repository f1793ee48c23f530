"""Text -> terms.

The parser walks the text one character at a time. Each character is classified into a Mode, the
Mode is checked against the modes allowed to follow the previous one (TRANSITIONS), and then it
updates the term being built. A "+" is tacked onto the end of the text so the last term gets
flushed by the same code as every other term, which means error indices can point at that extra
character.
"""

import math
import string
from enum import Enum
from typing import Dict, FrozenSet, List, Optional

from .errors import EmptyInputError, UnexpectedCharacterError
from .polynomial import Polynomial, Term


class Mode(Enum):
    NUMBER = "number"  # a digit or "."
    VARIABLE = "variable"
    OPERATOR = "operator"  # "+" or "-"
    CARET = "caret"


# Only the kind of character matters here, never its value.
TRANSITIONS: Dict[Mode, FrozenSet[Mode]] = {
    Mode.NUMBER: frozenset({Mode.NUMBER, Mode.OPERATOR, Mode.VARIABLE, Mode.CARET}),
    Mode.VARIABLE: frozenset({Mode.OPERATOR, Mode.CARET}),
    Mode.OPERATOR: frozenset({Mode.NUMBER, Mode.OPERATOR, Mode.VARIABLE}),
    Mode.CARET: frozenset({Mode.NUMBER, Mode.OPERATOR, Mode.CARET}),
}
# The operator is here so that a polynomial can open with a sign, like "-4x + 3".
START: FrozenSet[Mode] = frozenset({Mode.NUMBER, Mode.VARIABLE, Mode.OPERATOR})


def check_var(var: str) -> str:
    if not (isinstance(var, str) and len(var) == 1 and var in string.ascii_letters):
        raise ValueError(f"The variable must be a single ascii letter, got {var!r}")
    return var


def classify(index: int, char: str, var: str = "x") -> Mode:
    if char == "^":
        return Mode.CARET
    if char in (var.lower(), var.upper()):
        return Mode.VARIABLE
    if char in "+-":
        return Mode.OPERATOR
    if char == "." or char in string.digits:
        return Mode.NUMBER
    raise UnexpectedCharacterError(index, char)


def _parse_float(index: int, digits: List[str], char: str) -> float:
    try:
        value = float("".join(digits))
    except ValueError as e:
        raise UnexpectedCharacterError(index, char) from e
    if not math.isfinite(value):
        # too many digits, float() gives inf
        raise UnexpectedCharacterError(index, char)
    return value


class _TermBuilder:
    """Accumulates one term at a time.

    coefficient is None until the coefficient is known.
    exponent is None until it's known too, but once the variable is seen it's 1.0 (the power if no
    "^" follows) and after a "^" it goes back to None until the exponent digits are flushed.
    """

    def __init__(self):
        self.terms: List[Term] = []
        self.digits: List[str] = []
        self.coefficient: Optional[float] = None
        self.exponent: Optional[float] = None
        # sign of the next number to be flushed. set by the last operator.
        self.positive = True

    def _sign(self) -> float:
        return 1.0 if self.positive else -1.0

    def number(self, index: int, char: str):
        self.digits.append(char)

    def variable(self, index: int, char: str):
        if self.coefficient is not None:
            raise UnexpectedCharacterError(index, char)
        if not self.digits:
            self.digits.append("1")
        self.coefficient = _parse_float(index, self.digits, char) * self._sign()
        self.positive = True
        self.exponent = 1.0
        self.digits = []

    def caret(self, index: int, char: str):
        if self.coefficient is None or self.exponent != 1.0:
            raise UnexpectedCharacterError(index, char)
        self.exponent = None

    def operator(self, index: int, char: str):
        is_plus = char == "+"

        if self.coefficient is None:
            if not self.digits and not is_plus:
                # sign of the upcoming coefficient
                self.positive = False
                return
            self.coefficient = _parse_float(index, self.digits, char) * self._sign()
            self.exponent = 0.0
            self.digits = []
        elif self.exponent is None:
            if not self.digits:
                # sign of the upcoming exponent
                self.positive = is_plus
                return
            self.exponent = _parse_float(index, self.digits, char) * self._sign()
            self.digits = []
        elif self.exponent != 1.0:
            raise UnexpectedCharacterError(index, char)

        self.terms.append(Term(self.coefficient, self.exponent))
        self.positive = is_plus
        self.coefficient = None
        self.exponent = None

    @property
    def unfinished(self) -> bool:
        return self.coefficient is not None or bool(self.digits)


def parse_terms(text: str, var: str = "x") -> List[Term]:
    """Parse text into its terms, in the order they're written. Nothing is merged or sorted."""
    check_var(var)
    if not text.strip(" "):
        raise EmptyInputError()

    augmented = text + "+"
    builder = _TermBuilder()
    handlers = {
        Mode.NUMBER: builder.number,
        Mode.VARIABLE: builder.variable,
        Mode.OPERATOR: builder.operator,
        Mode.CARET: builder.caret,
    }
    expected = START

    for i, char in enumerate(augmented):
        if char == " ":
            continue
        mode = classify(i, char, var)
        if mode not in expected:
            raise UnexpectedCharacterError(i, char)
        expected = TRANSITIONS[mode]
        handlers[mode](i, char)

    if builder.unfinished:
        # ex: "x^" or "2x^-", the exponent never showed up.
        raise UnexpectedCharacterError(len(augmented) - 1, "+")
    return builder.terms


def parse(text: str, var: str = "x") -> Polynomial:
    """Parse text like "3x^3 + 33.2 - 4x + -16.998x^33.3" into a Polynomial.

    Raises a subclass of ParseError when the text isn't a polynomial.
    """
    return Polynomial(parse_terms(text, var))

