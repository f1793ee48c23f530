from .errors import EmptyInputError, IllegalParenthesisError, ParseError, UnexpectedCharacterError
from .parse import parse, parse_terms
from .polynomial import Polynomial, Term, multiply, organize, render, simplify, snap
from .product import parse_product
