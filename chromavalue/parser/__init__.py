"""
Color text parsing.

``parse`` reads any supported color text; ``parse_rgb``, ``parse_hsl`` and
``parse_hsv`` only accept the forms of one space. Color functions go through
a lark grammar into a ``ColorFunctionToken`` tree (``parse_color_function``)
which ``transform`` turns into a color.
"""
from .tokens import ColorFunctionToken, TokenKind
from .grammar import COLOR_FUNCTION_GRAMMAR, ColorFunctionTokenBuilder, get_color_function_parser
from .transformer import ColorFunctionTransformer, transform
from .hash_color import parse_hash
from .color_parser import parse, parse_rgb, parse_hsl, parse_hsv, parse_color_function

__all__ = [
    "ColorFunctionToken",
    "TokenKind",
    "COLOR_FUNCTION_GRAMMAR",
    "ColorFunctionTokenBuilder",
    "get_color_function_parser",
    "ColorFunctionTransformer",
    "transform",
    "parse_hash",
    "parse",
    "parse_rgb",
    "parse_hsl",
    "parse_hsv",
    "parse_color_function",
]
