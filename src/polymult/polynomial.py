"""RULES OF POLYNOMIALS:

1. Polynomials are never mutated after __post_init__. simplify, organize and multiply all hand back
a new Polynomial.
2. Nothing is enforced on construction. Duplicate exponents and zero coefficients are fine until
you call simplify().

Exponents are floats, so x^-2 and x^0.5 are allowed. Equality of exponents is exact float equality,
which is why every bit of arithmetic goes through snap().
"""

from dataclasses import dataclass
from typing import Iterator, NamedTuple, Tuple, Union

import numpy as np

_NINE_DIGITS = 1e9


class Term(NamedTuple):
    coefficient: float
    exponent: float


def snap(values: Union[float, np.ndarray]) -> np.ndarray:
    """Round away floating point addition junk like 0.1 + 0.2 = 0.30000000000000004.

    The nearest integer is split off first and only the leftover is rounded to 9 decimal places, so
    legitimately fractional values survive. inf and nan come back unchanged.
    """
    values = np.asarray(values, dtype=float)
    finite = np.isfinite(values)
    # inf - round(inf) is nan, so overflowed values are passed through as they are
    cleaned = np.where(finite, values, 0.0)
    whole = np.round(cleaned)
    snapped = whole + np.round((cleaned - whole) * _NINE_DIGITS) / _NINE_DIGITS
    return np.where(finite, snapped, values)


def format_number(value: float) -> str:
    """Shortest repr that reads back to the same float. Never scientific notation, no trailing ".0"."""
    return np.format_float_positional(value, trim="-")


@dataclass(frozen=True)
class Polynomial:
    terms: Tuple[Term, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "terms", tuple(Term(float(c), float(e)) for c, e in self.terms))

    @classmethod
    def one(cls) -> "Polynomial":
        """The multiplicative identity."""
        return cls([(1.0, 0.0)])

    @classmethod
    def from_string(cls, text: str, var: str = "x") -> "Polynomial":
        from .parse import parse

        return parse(text, var)

    def __len__(self) -> int:
        return len(self.terms)

    def __iter__(self) -> Iterator[Term]:
        return iter(self.terms)

    def simplify(self) -> "Polynomial":
        """Merge terms with the same exponent and drop zero terms. Keeps first-seen order."""
        merged = []
        for term in self.terms:
            if term.coefficient == 0:
                continue
            for i, existing in enumerate(merged):
                if existing.exponent == term.exponent:
                    merged[i] = Term(float(snap(existing.coefficient + term.coefficient)), term.exponent)
                    break
            else:
                merged.append(term)

        # merging can cancel things out, ex. x - x
        return Polynomial(term for term in merged if term.coefficient != 0)

    def organize(self) -> "Polynomial":
        """Order by exponent, highest first. Equal exponents keep their input order."""
        ordered = []
        for term in self.terms:
            for i, placed in enumerate(ordered):
                if placed.exponent < term.exponent:
                    ordered.insert(i, term)
                    break
            else:
                # nothing smaller, including when term ties the last one
                ordered.append(term)
        return Polynomial(ordered)

    def normalize(self) -> "Polynomial":
        return self.simplify().organize()

    def multiply(self, other: "Polynomial") -> "Polynomial":
        a = np.array(self.terms, dtype=float).reshape(-1, 2)
        b = np.array(other.terms, dtype=float).reshape(-1, 2)
        coefficients = snap(np.multiply.outer(a[:, 0], b[:, 0])).ravel()
        exponents = snap(np.add.outer(a[:, 1], b[:, 1])).ravel()
        product = Polynomial(zip(coefficients.tolist(), exponents.tolist()))
        return product.simplify().organize()

    def __mul__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.multiply(other)

    def render(self, var: str = "x") -> str:
        """Terms in their current order, joined with " + ". Negative terms come out as "+ -3x^2"."""
        return " + ".join(_render_term(term, var) for term in self.terms if term.coefficient != 0)

    def __str__(self) -> str:
        return self.render()


def _render_term(term: Term, var: str) -> str:
    coefficient, exponent = term
    if exponent == 0:
        power = ""
    elif exponent == 1:
        power = var
    else:
        power = f"{var}^{format_number(exponent)}"

    if coefficient == 1:
        return power or "1"
    if coefficient == -1:
        return "-" + (power or "1")
    return format_number(coefficient) + power


def simplify(poly: Polynomial) -> Polynomial:
    return poly.simplify()


def organize(poly: Polynomial) -> Polynomial:
    return poly.organize()


def multiply(a: Polynomial, b: Polynomial) -> Polynomial:
    return a.multiply(b)


def render(poly: Polynomial, var: str = "x") -> str:
    return poly.render(var)
