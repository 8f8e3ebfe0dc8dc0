"""
EBNF grammar of the color functions, e.g. ``rgb(1, 2, 3)``, ``hsla(359deg 25% 50% / 75%)``.

The grammar only checks the shape of the text; the function name is any run of
letters, and which values are allowed in which slot is decided by the
transformer. Every character of the input, whitespace included, ends up in
exactly one leaf token.
"""
import logging
from functools import lru_cache
from typing import List
from lark import Lark, Token, Transformer
from .tokens import ColorFunctionToken, TokenKind

logger = logging.getLogger(__name__)

COLOR_FUNCTION_GRAMMAR = r"""
start: function

function: NAME WS? PAREN_OPEN WS? value separator value separator value alpha? WS? PAREN_CLOSE

alpha: alpha_separator value

separator: WS? COMMA WS?
         | WS

alpha_separator: WS? (COMMA | SLASH) WS?
               | WS

?value: number
      | percentage
      | degrees

number: NUMBER
percentage: NUMBER PERCENT
degrees: NUMBER DEG

NAME: /[a-zA-Z]+/
NUMBER: /[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?/
DEG: "deg"i
PERCENT: "%"
PAREN_OPEN: "("
PAREN_CLOSE: ")"
COMMA: ","
SLASH: "/"
WS: /[ \t\f\r\n]+/
"""

# Terminals that become leaf tokens as they are; NUMBER and PERCENT are handled by their rules.
terminal_kinds = {
    "NAME": TokenKind.FUNCTION_NAME,
    "WS": TokenKind.WHITESPACE,
    "PAREN_OPEN": TokenKind.PARENTHESIS_OPEN_SYMBOL,
    "PAREN_CLOSE": TokenKind.PARENTHESIS_CLOSE_SYMBOL,
    "COMMA": TokenKind.SEPARATOR_SYMBOL,
    "SLASH": TokenKind.SEPARATOR_SYMBOL,
    "DEG": TokenKind.DEGREES_UNIT_SYMBOL,
}


@lru_cache(maxsize=None)
def get_color_function_parser() -> Lark:
    """Compile the grammar once; the parser is shared by every call afterwards."""
    logger.debug("Compiling color function grammar")
    return Lark(COLOR_FUNCTION_GRAMMAR, start="start", parser="earley")


def _leaf(token: Token) -> ColorFunctionToken:
    kind = terminal_kinds[token.type]
    text = str(token)
    if kind is TokenKind.FUNCTION_NAME:
        return ColorFunctionToken.leaf(kind, text.lower(), text)
    return ColorFunctionToken.leaf(kind, text, text)


def _flatten(children) -> List[ColorFunctionToken]:
    tokens: List[ColorFunctionToken] = []
    for child in children:
        if isinstance(child, Token):
            tokens.append(_leaf(child))
        elif isinstance(child, ColorFunctionToken):
            tokens.append(child)
        else:
            tokens.extend(child)
    return tokens


class ColorFunctionTokenBuilder(Transformer):
    """Turns the lark parse tree into a single function ``ColorFunctionToken``."""

    def start(self, children):
        return children[0]

    def function(self, children):
        return ColorFunctionToken.function(tuple(_flatten(children)))

    def number(self, children):
        (number,) = children
        return [ColorFunctionToken.leaf(TokenKind.NUMBER, float(number), str(number))]

    def percentage(self, children):
        number, percent = children
        return [ColorFunctionToken.leaf(TokenKind.PERCENTAGE, float(number), str(number) + str(percent))]

    def degrees(self, children):
        number, unit = children
        return [ColorFunctionToken.leaf(TokenKind.NUMBER, float(number), str(number)), _leaf(unit)]

    def __default__(self, data, children, meta):
        return _flatten(children)
