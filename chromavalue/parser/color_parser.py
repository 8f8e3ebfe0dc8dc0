import logging
from typing import Optional
from lark.exceptions import UnexpectedEOF, UnexpectedInput
from .grammar import ColorFunctionTokenBuilder, get_color_function_parser
from .hash_color import parse_hash
from .tokens import ColorFunctionToken
from .transformer import transform
from ..colors import Color, RgbColor, HslColor, HsvColor, web_color
from ..errors import ColorSyntaxError
from ..types.color_types import ColorSpace

logger = logging.getLogger(__name__)


def parse_color_function(text: str) -> ColorFunctionToken:
    """
    Parse a whole color function such as ``rgb(1,2,3)`` into its token tree.

    Raises:
        ColorSyntaxError: with the position of the offending character, or
            ``len(text)`` when the text ends too early
    """
    try:
        tree = get_color_function_parser().parse(text)
    except UnexpectedEOF as error:
        logger.debug("Color function %r ended early", text)
        raise ColorSyntaxError(text, len(text)) from error
    except UnexpectedInput as error:
        position = getattr(error, "pos_in_stream", None)
        if position is None or position < 0:
            position = len(text)
        logger.debug("Color function %r failed at %d", text, position)
        raise ColorSyntaxError(text, position) from error
    return ColorFunctionTokenBuilder().transform(tree)


def _parse_function(text: str, expected: Optional[ColorSpace] = None) -> Color:
    return transform(parse_color_function(text), expected)


def _check_text(text: str) -> str:
    if not isinstance(text, str):
        raise TypeError(f"Expected a str, got {type(text).__name__}")
    if not text:
        raise ValueError("Color text is empty")
    return text


def parse(text: str) -> Color:
    """
    Parse any supported color text.

    Accepts ``#rgb``, ``#rgba``, ``#rrggbb``, ``#rrggbbaa``, the ``rgb``/``rgba``,
    ``hsl``/``hsla`` and ``hsv``/``hsva`` functions, and CSS3 color names.

    Examples:
        >>> parse("rgb(1,2,3)").to_css()
        '#010203'
        >>> str(parse("hsl(359,100%,50%)"))
        'hsl(359,100%,50%)'
    """
    _check_text(text)
    lower = text.lower()
    if lower.startswith(("hsl", "hsv", "rgb")):
        return _parse_function(text)
    if text.startswith("#"):
        return parse_hash(text)
    if text[0].isalpha():
        return web_color(text)
    raise ColorSyntaxError(text, 0)


def parse_rgb(text: str) -> RgbColor:
    """Parse ``#...``, ``rgb(...)``, ``rgba(...)`` or a CSS3 color name."""
    _check_text(text)
    if text.startswith("#"):
        return parse_hash(text)
    if text.lower().startswith("rgb"):
        return _parse_function(text, ColorSpace.RGB)
    if text[0].isalpha():
        return web_color(text)
    raise ColorSyntaxError(text, 0)


def parse_hsl(text: str) -> HslColor:
    return _parse_function(_check_text(text), ColorSpace.HSL)


def parse_hsv(text: str) -> HsvColor:
    return _parse_function(_check_text(text), ColorSpace.HSV)
