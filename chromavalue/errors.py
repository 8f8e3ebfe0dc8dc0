from __future__ import annotations
from typing import Any


class ColorError(ValueError):
    """Base class for every error raised while building or parsing a color."""


class ComponentRangeError(ColorError):
    def __init__(self, kind: Any, value: Any, minimum: Any, maximum: Any) -> None:
        self.kind = kind
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"Invalid {getattr(kind, 'value', kind)} value {value!r}, expected between {minimum} and {maximum}"
        )


class ColorSyntaxError(ColorError):
    """
    Raised when text is not a well formed color.

    Attributes:
        text: The full text being parsed
        position: Index of the offending character, ``len(text)`` when the text ended early
    """

    def __init__(self, text: str, position: int, reason: str | None = None) -> None:
        self.text = text
        self.position = position
        if position >= len(text):
            where = "end of text"
        else:
            where = f"{text[position]!r} at {position}"
        message = f"Invalid color {text!r}: unexpected {where}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class UnknownFunctionError(ColorError):
    def __init__(self, name: str, text: str | None = None) -> None:
        self.name = name
        self.text = text
        message = f"Unknown color function {name!r}"
        if text is not None:
            message = f"{message} in {text!r}"
        super().__init__(message)


class UnsupportedSlotError(ColorError):
    """A value of the wrong kind was given for a component, e.g. a percentage hue."""

    def __init__(self, token_text: str, slot: str) -> None:
        self.token_text = token_text
        self.slot = slot
        super().__init__(f"Unsupported value {token_text!r} for {slot}")


class UnknownColorNameError(ColorError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown color name {name!r}")


class MixAmountError(ColorError):
    def __init__(self, amount: Any) -> None:
        self.amount = amount
        super().__init__(f"Mix amount {amount!r} must be between 0.0 and 1.0")
