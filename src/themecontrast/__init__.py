"""themecontrast - WCAG contrast validation for theme palettes"""

__version__ = "0.1.0"

from .color_utils import Color, color_to_hex, parse_color
from .contrast import (
    ContrastResult,
    get_contrast_description,
    meets_wcag_aa,
    meets_wcag_aa_large_text,
    meets_wcag_aaa,
    meets_wcag_aaa_large_text,
    validate_color_combination,
)
from .errors import InvalidColorError, MissingPaletteColorError
from .luminance import calculate_contrast_ratio, relative_luminance
from .palettes import ThemePalette, get_builtin_palette, load_palette
from .theme_validation import (
    CRITICAL_PAIRS,
    AccessibilityRating,
    ThemeValidationResult,
    rate,
    validate_theme,
)
from .validation_cache import ThemeValidationCache

__all__ = [
    "Color",
    "color_to_hex",
    "parse_color",
    "relative_luminance",
    "calculate_contrast_ratio",
    "ContrastResult",
    "meets_wcag_aa",
    "meets_wcag_aa_large_text",
    "meets_wcag_aaa",
    "meets_wcag_aaa_large_text",
    "validate_color_combination",
    "get_contrast_description",
    "ThemePalette",
    "get_builtin_palette",
    "load_palette",
    "CRITICAL_PAIRS",
    "ThemeValidationResult",
    "AccessibilityRating",
    "validate_theme",
    "rate",
    "ThemeValidationCache",
    "InvalidColorError",
    "MissingPaletteColorError",
]
