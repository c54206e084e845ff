"""Relative luminance and contrast ratio calculations for themecontrast.

This module implements the two numerical primitives of the Web Content
Accessibility Guidelines (WCAG) 2.1 contrast model: the relative luminance of
an sRGB color and the contrast ratio between two luminance values. Everything
else in the package (compliance flags, theme aggregation, ratings) is built on
these two functions.

Standards Compliance:
    - WCAG 2.1 relative luminance: sRGB linearization with the 0.03928 knee
    - Rec. 709 channel weights: R=0.2126, G=0.7152, B=0.0722
    - Contrast ratio: (L_lighter + 0.05) / (L_darker + 0.05), range [1, 21]

Example:
    >>> from themecontrast.luminance import calculate_contrast_ratio
    >>> calculate_contrast_ratio("#FFFFFF", "#000000")
    21.0
"""

from typing import Any

from . import const
from .color_utils import Color

__all__ = [
    "relative_luminance",
    "contrast_ratio_from_luminance",
    "calculate_contrast_ratio",
]


def _linearize(c: float) -> float:
    if c <= const.LINEAR_THRESHOLD:
        return c / const.LINEAR_DIVISOR
    return ((c + const.GAMMA_OFFSET) / const.GAMMA_DIVISOR) ** const.GAMMA_EXPONENT


def relative_luminance(color: Any) -> float:
    """Compute the relative luminance of an sRGB color according to WCAG 2.1.

    The calculation follows the WCAG 2.1 algorithm:
    1. Apply gamma correction (linearization) to each RGB component
    2. Weight components by human visual sensitivity: R=21.26%, G=71.52%, B=7.22%
    3. Sum weighted components to get relative luminance

    Args:
        color: A :class:`Color`, a color string (``#RRGGBB``, ``rgb(...)``, ...)
            or a sequence of 3 or 4 normalized channel values in [0, 1].
            Alpha is ignored.

    Returns:
        float: Relative luminance in range [0.0, 1.0] where 0.0 is black and
        1.0 is white.

    Algorithm Details:
        Linearization (gamma correction):
        - For c ≤ 0.03928: linear_c = c / 12.92
        - For c > 0.03928: linear_c = ((c + 0.055) / 1.055)^2.4

        Luminance calculation:
        - L = 0.2126 × R_linear + 0.7152 × G_linear + 0.0722 × B_linear

    Raises:
        InvalidColorError: If ``color`` cannot be read as a valid color.

    Examples:
        >>> relative_luminance((0.0, 0.0, 0.0))
        0.0
        >>> relative_luminance((1.0, 1.0, 1.0))
        1.0
        >>> relative_luminance((1.0, 0.0, 0.0))
        0.2126
    """
    r, g, b = Color.coerce(color).rgb
    return (
        const.RED_WEIGHT * _linearize(r)
        + const.GREEN_WEIGHT * _linearize(g)
        + const.BLUE_WEIGHT * _linearize(b)
    )


def contrast_ratio_from_luminance(l1: float, l2: float) -> float:
    """Calculate the WCAG contrast ratio between two relative luminance values.

    The ratio is order-independent: the lighter value is always divided by
    the darker one, so the result is ≥ 1.0. For luminance values in [0, 1]
    the result is at most 21.0 (white against black).

    Args:
        l1: First relative luminance value in [0.0, 1.0].
        l2: Second relative luminance value in [0.0, 1.0].

    Returns:
        float: Contrast ratio in [1.0, 21.0].

    Examples:
        >>> contrast_ratio_from_luminance(0.0, 1.0)
        21.0
        >>> contrast_ratio_from_luminance(0.5, 0.5)
        1.0
    """
    light = max(l1, l2)
    dark = min(l1, l2)
    return (light + const.LUMINANCE_OFFSET) / (dark + const.LUMINANCE_OFFSET)


def calculate_contrast_ratio(foreground: Any, background: Any) -> float:
    """Calculate the contrast ratio between two colors.

    Args:
        foreground: The foreground color (typically text).
        background: The background color.

    Returns:
        float: The contrast ratio in [1.0, 21.0]. Argument order does not
        affect the result.

    Raises:
        InvalidColorError: If either argument is not a valid color.
    """
    return contrast_ratio_from_luminance(
        relative_luminance(foreground), relative_luminance(background)
    )
