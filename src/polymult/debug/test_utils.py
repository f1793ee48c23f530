from typing import Iterable, Tuple

from polymult.polynomial import Polynomial, Term

Pair = Tuple[float, float]


def assert_terms(poly: Polynomial, expected: Iterable[Pair]):
    """Tests that poly has exactly these terms, in this order, with exact float equality."""
    expected = [Term(float(c), float(e)) for c, e in expected]
    assert list(poly.terms) == expected, f"{list(poly.terms)} != {expected}, \n\trendered: {poly} != {Polynomial(expected)}"


def term_set_eq(a: Iterable[Pair], b: Iterable[Pair]) -> bool:
    """Does set(a) == set(b) but ignores the difference between Terms and plain tuples and ints and floats"""
    return {(float(c), float(e)) for c, e in a} == {(float(c), float(e)) for c, e in b}


def eq_float(a: Polynomial, b: Polynomial, atol=1e-6) -> bool:
    """Same terms in the same order, up to atol."""
    if len(a) != len(b):
        return False
    return all(
        abs(t1.coefficient - t2.coefficient) < atol and abs(t1.exponent - t2.exponent) < atol
        for t1, t2 in zip(a, b)
    )
