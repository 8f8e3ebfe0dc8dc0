import logging
from typing import Optional
import webcolors
from ..errors import UnknownColorNameError

logger = logging.getLogger(__name__)

def web_color_to_rgb(name: str) -> tuple[int, int, int]:
    """
    Look up a CSS3 color name, case-insensitively.

    Raises:
        UnknownColorNameError: if ``name`` is not a CSS3 color name
    """
    try:
        value = webcolors.name_to_rgb(name.strip().lower(), spec=webcolors.CSS3)
    except ValueError as error:
        raise UnknownColorNameError(name) from error
    return value.red, value.green, value.blue

def rgb_to_web_color_name(red: int, green: int, blue: int) -> Optional[str]:
    """The CSS3 name of an opaque color, or ``None`` when it has none."""
    try:
        return webcolors.rgb_to_name((red, green, blue), spec=webcolors.CSS3)
    except ValueError:
        logger.debug("No CSS3 name for rgb(%d,%d,%d)", red, green, blue)
        return None
