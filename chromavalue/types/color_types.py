from enum import Enum

class ColorSpace(str, Enum):
    RGB = "rgb"
    HSL = "hsl"
    HSV = "hsv"

# Function names accepted by the parser, mapped to the space they build.
function_spaces = {
    "rgb": ColorSpace.RGB,
    "rgba": ColorSpace.RGB,
    "hsl": ColorSpace.HSL,
    "hsla": ColorSpace.HSL,
    "hsv": ColorSpace.HSV,
    "hsva": ColorSpace.HSV,
}
