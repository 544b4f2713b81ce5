"""Hex to HSL conversion for row tinting."""

import colorsys
from typing import Optional

from matplotlib.colors import to_rgb


def hex_to_hsl(
    hex_color: str,
    hue: Optional[float] = None,
    saturation: Optional[float] = None,
    lightness: Optional[float] = None,
) -> str:
    """Convert a hex color to a CSS ``hsl()`` string.

    Any of hue (degrees), saturation or lightness (percent) may be given to
    override the converted component. Row tints keep hue and saturation and
    force lightness to 90.

    Args:
        hex_color: "#rgb" or "#rrggbb" color
        hue: Optional hue override in degrees
        saturation: Optional saturation override in percent
        lightness: Optional lightness override in percent

    Returns:
        String such as "hsl(120, 100%, 90%)"

    Raises:
        ValueError: If hex_color is not a valid color

    Examples:
        >>> hex_to_hsl("#0f0", lightness=90)
        'hsl(120, 100%, 90%)'
    """
    red, green, blue = to_rgb(hex_color)
    h, l, s = colorsys.rgb_to_hls(red, green, blue)

    if hue is None:
        hue = h * 360
    if saturation is None:
        saturation = s * 100
    if lightness is None:
        lightness = l * 100

    return f"hsl({round(hue)}, {round(saturation)}%, {round(lightness)}%)"
