import pytest

from polymult.debug.logger import Logger
from polymult.debug.test_utils import assert_terms
from polymult.errors import EmptyInputError, IllegalParenthesisError, UnexpectedCharacterError
from polymult.polynomial import Polynomial
from polymult.product import parse_product


def test_square():
    poly = parse_product("(x^2 + 4x)(x^2 + 4x)")
    assert_terms(poly, [(1, 4), (8, 3), (16, 2)])


def test_difference_of_squares_chain():
    assert_terms(parse_product("(x - 1)(x + 1)(x^2 + 1)"), [(1, 4), (-1, 0)])


def test_single_factor_is_normalized():
    assert_terms(parse_product("(3 + x + 2)"), [(1, 1), (5, 0)])


def test_text_outside_parentheses_is_ignored():
    assert parse_product("2 (x)  * (x)!") == parse_product("(x)(x)")


def test_no_factors_warns():
    with pytest.warns(UserWarning):
        poly = parse_product("x + 1")
    assert poly == Polynomial.one()


@pytest.mark.parametrize(
    ["text", "index", "is_open"],
    [
        ["(x(x))", 2, True],
        ["x)", 1, False],
        ["(x)(x))", 6, False],
        ["(x + 1)(x", 7, True],
    ],
)
def test_illegal_parentheses(text, index, is_open):
    with pytest.raises(IllegalParenthesisError) as e:
        parse_product(text)
    assert e.value.index == index
    assert e.value.is_open == is_open


def test_factor_errors_point_into_the_whole_text():
    text = "(x + 1)(3x $ 2)"
    with pytest.raises(UnexpectedCharacterError) as e:
        parse_product(text)
    assert e.value.index == 11
    assert text[e.value.index] == "$"


def test_unfinished_factor_points_at_close_parenthesis():
    text = "(x + 1)(x^)"
    with pytest.raises(UnexpectedCharacterError) as e:
        parse_product(text)
    assert text[e.value.index] == ")"


def test_empty_factor():
    with pytest.raises(EmptyInputError):
        parse_product("(x)()")


def test_logger(tmp_path):
    logger = Logger()
    parse_product("(x^2 + 4x)(x - 1)", logger=logger)
    assert [datum.text for datum in logger.data] == ["x^2 + 4x", "x - 1"]
    assert logger.data[-1].result == parse_product("(x^2 + 4x)(x - 1)")
    assert all(datum.time_spent >= 0 for datum in logger.data)

    path = tmp_path / "log.txt"
    logger.dump(str(path))
    contents = path.read_text()
    assert contents.startswith("Factor: time taken (s)")
    assert "x^2 + 4x: " in contents
    assert "x - 1: " in contents


def test_logger_sort():
    logger = Logger()
    logger.log("fast", 0.1, Polynomial.one())
    logger.log("slow", 2.0, Polynomial.one())
    logger.sort()
    assert [datum.text for datum in logger.data] == ["slow", "fast"]


def test_logger_keeps_repeated_factors():
    logger = Logger()
    parse_product("(x)(x)(x)", logger=logger)
    assert [datum.text for datum in logger.data] == ["x", "x", "x"]
    assert [str(datum.result) for datum in logger.data] == ["x", "x^2", "x^3"]
