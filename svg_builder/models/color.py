"""
Color helpers producing CSS color strings for fill and stroke attributes.
Components are clamped to their legal range instead of being rejected.
"""

from typing import Union

Number = Union[int, float]

MAX_CHANNEL = 255
MAX_ALPHA = 1.0


def _clamp(value: Number, maximum: Number) -> Number:
    """Clamp ``value`` into ``[0, maximum]``."""
    return max(0, min(value, maximum))


def rgb(red: int, green: int, blue: int) -> str:
    """
    Format an ``rgb()`` color.

    Args:
        red: Red channel (0-255)
        green: Green channel (0-255)
        blue: Blue channel (0-255)

    Returns:
        Color string such as ``rgb(255, 0, 0)``
    """
    return (f"rgb({_clamp(red, MAX_CHANNEL)}, "
            f"{_clamp(green, MAX_CHANNEL)}, "
            f"{_clamp(blue, MAX_CHANNEL)})")


def rgba(red: int, green: int, blue: int, alpha: float) -> str:
    """
    Format an ``rgba()`` color.

    Args:
        red: Red channel (0-255)
        green: Green channel (0-255)
        blue: Blue channel (0-255)
        alpha: Opacity (0.0-1.0)

    Returns:
        Color string such as ``rgba(255, 0, 0, 0.5)``
    """
    return (f"rgba({_clamp(red, MAX_CHANNEL)}, "
            f"{_clamp(green, MAX_CHANNEL)}, "
            f"{_clamp(blue, MAX_CHANNEL)}, "
            f"{_clamp(alpha, MAX_ALPHA)})")
