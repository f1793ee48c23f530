"""Errors raised while turning text into polynomials.

Every error carries the index (into the text the parser actually scanned, which
is the input plus one trailing "+") of the character that broke the parse, so
callers can point at it:

>>> try:
...     parse("3x^3 $ 2")
... except ParseError as e:
...     print(e.pointer("3x^3 $ 2"))
Failure to parse, encountered character $ at index 5
3x^3 $ 2
     ^
"""

from typing import Optional


class ParseError(Exception):
    """Base class for everything that can go wrong reading a polynomial."""

    index: Optional[int] = None

    def __init__(self, message: str, index: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.index = index

    def pointer(self, text: str) -> str:
        if self.index is None:
            return self.message
        return f"{self.message}\n{text}\n{' ' * self.index}^"

    def shifted(self, offset: int) -> "ParseError":
        """Copy of this error with the index moved by offset. Used when the parsed text was a slice of something bigger."""
        return ParseError(self.message, None if self.index is None else self.index + offset)


class EmptyInputError(ParseError):
    def __init__(self):
        super().__init__("No polynomial found in string")

    def shifted(self, offset: int) -> "EmptyInputError":
        return EmptyInputError()


class UnexpectedCharacterError(ParseError):
    """Illegal character, illegal position for a character, or a number that doesn't parse."""

    def __init__(self, index: int, char: str):
        super().__init__(f"Failure to parse, encountered character {char} at index {index}", index)
        self.char = char

    def shifted(self, offset: int) -> "UnexpectedCharacterError":
        return UnexpectedCharacterError(self.index + offset, self.char)


class IllegalParenthesisError(ParseError):
    """Only raised by the product parser; see polymult.product."""

    def __init__(self, index: int, is_open: bool):
        super().__init__(f"Illegal {'open' if is_open else 'close'} parentheses at index {index}", index)
        self.is_open = is_open

    def shifted(self, offset: int) -> "IllegalParenthesisError":
        return IllegalParenthesisError(self.index + offset, self.is_open)
