from ..colors import RgbColor, rgb, rgba
from ..errors import ColorSyntaxError

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

# Lengths include the leading "#".
HASH_LENGTHS = (4, 5, 7, 9)

def parse_hash(text: str) -> RgbColor:
    """
    Decode ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa``.

    Short forms repeat each digit, so ``#1234`` is ``#11223344``.

    Raises:
        ColorSyntaxError: if the text has another length or a non hex digit
    """
    if not text.startswith("#"):
        raise ColorSyntaxError(text, 0, "expected '#'")
    for position, char in enumerate(text[1:], start=1):
        if char not in HEX_DIGITS:
            raise ColorSyntaxError(text, position, "expected a hex digit")
    if len(text) not in HASH_LENGTHS:
        raise ColorSyntaxError(text, min(len(text), 9), f"expected 3, 4, 6 or 8 hex digits, got {len(text) - 1}")

    digits = text[1:]
    if len(digits) <= 4:
        channels = [int(digit, 16) * 0x11 for digit in digits]
    else:
        channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]

    if len(channels) == 4:
        return rgba(*channels)
    return rgb(*channels)
