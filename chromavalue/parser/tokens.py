from __future__ import annotations
from enum import Enum
from typing import Any, Tuple


class TokenKind(str, Enum):
    FUNCTION = "function"
    FUNCTION_NAME = "function-name"
    NUMBER = "number"
    PERCENTAGE = "percentage"
    DEGREES_UNIT_SYMBOL = "degrees-unit-symbol"
    PARENTHESIS_OPEN_SYMBOL = "parenthesis-open-symbol"
    PARENTHESIS_CLOSE_SYMBOL = "parenthesis-close-symbol"
    SEPARATOR_SYMBOL = "separator-symbol"
    WHITESPACE = "whitespace"


SYMBOL_KINDS = frozenset({
    TokenKind.DEGREES_UNIT_SYMBOL,
    TokenKind.PARENTHESIS_OPEN_SYMBOL,
    TokenKind.PARENTHESIS_CLOSE_SYMBOL,
    TokenKind.SEPARATOR_SYMBOL,
    TokenKind.WHITESPACE,
})


class ColorFunctionToken:
    """
    A node of a parsed color function.

    Leaves keep their decoded ``value`` next to the literal ``text`` they were
    read from. A function token has no value of its own; its text is the
    concatenation of its children's text.
    """
    __slots__ = ('kind', 'value', 'text', 'children')

    def __init__(self, kind: TokenKind, value: Any, text: str, children: Tuple[ColorFunctionToken, ...] = ()) -> None:
        if kind is TokenKind.FUNCTION and not children:
            raise ValueError("A function token needs at least one child")
        self.kind = kind
        self.value = value
        self.text = text
        self.children = children

    @classmethod
    def leaf(cls, kind: TokenKind, value: Any, text: str) -> ColorFunctionToken:
        return cls(kind, value, text)

    @classmethod
    def function(cls, children: Tuple[ColorFunctionToken, ...]) -> ColorFunctionToken:
        children = tuple(children)
        return cls(TokenKind.FUNCTION, None, "".join(child.text for child in children), children)

    @property
    def is_symbol(self) -> bool:
        return self.kind in SYMBOL_KINDS

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorFunctionToken):
            return NotImplemented
        return (self.kind, self.value, self.text, self.children) == (other.kind, other.value, other.text, other.children)

    def __hash__(self) -> int:
        return hash((self.kind, self.value, self.text, self.children))

    def __repr__(self) -> str:
        if self.children:
            return f"ColorFunctionToken({self.kind.value}, {list(self.children)!r})"
        return f"ColorFunctionToken({self.kind.value}, {self.value!r}, {self.text!r})"
