"""Test configuration and fixtures for themecontrast tests."""

from typing import Callable, List, Tuple

import pytest

from themecontrast.palettes import ThemePalette
from themecontrast.theme_validation import CRITICAL_PAIRS

WHITE = "#FFFFFF"


@pytest.fixture
def palette_factory() -> Callable[[List[str]], ThemePalette]:
    """Build palettes where every critical pair sits on white.

    The factory takes the text color of each pair in CRITICAL_PAIRS order.
    """

    def make(foregrounds: List[str], name: str = "test") -> ThemePalette:
        assert len(foregrounds) == len(CRITICAL_PAIRS)
        roles = {}
        for pair, fg in zip(CRITICAL_PAIRS, foregrounds):
            roles[pair.foreground] = fg
            roles[pair.background] = WHITE
        return ThemePalette(name=name, **roles)

    return make


@pytest.fixture
def sample_colors() -> List[Tuple[float, float, float]]:
    """Provide sample RGB colors for testing."""
    return [
        (0.0, 0.0, 0.0),      # Black
        (1.0, 1.0, 1.0),      # White
        (1.0, 0.0, 0.0),      # Red
        (0.0, 1.0, 0.0),      # Green
        (0.0, 0.0, 1.0),      # Blue
        (0.5, 0.5, 0.5),      # Gray
        (1.0, 1.0, 0.0),      # Yellow
        (1.0, 0.0, 1.0),      # Magenta
        (0.0, 1.0, 1.0),      # Cyan
    ]


@pytest.fixture
def known_luminance_values() -> List[Tuple[Tuple[float, float, float], float]]:
    """Provide colors with known luminance values for testing."""
    return [
        ((0.0, 0.0, 0.0), 0.0),           # Black
        ((1.0, 1.0, 1.0), 1.0),           # White
        ((1.0, 0.0, 0.0), 0.2126),        # Red
        ((0.0, 1.0, 0.0), 0.7152),        # Green
        ((0.0, 0.0, 1.0), 0.0722),        # Blue
    ]


@pytest.fixture
def invalid_color_formats() -> List[str]:
    """Provide examples of invalid color format strings."""
    return [
        "invalid",
        "#GG0000",             # Invalid hex characters
        "#FF00",               # Too short hex
        "#FF00000",            # Seven digits
        "FF0000",              # Missing # in hex
        "#+F+F+F",             # Signed hex pairs
        "#+0+0+0",             # Signed hex pairs
        "# FFFFF",             # Whitespace inside hex
        "rgb(256, 0, 0)",      # RGB value out of range
        "rgb(-1, 0, 0)",       # Negative RGB value
        "rgb(255, 0)",         # Missing RGB component
        "rgba(0, 0, 0, 1.5)",  # Alpha out of range
        "hsl(361, 50%, 50%)",  # HSL hue out of range
        "hsl(180, 101%, 50%)", # HSL saturation out of range
        "hsv(180, 50%, 101%)", # HSV value out of range
        "",                    # Empty string
        "   ",                 # Whitespace only
    ]


@pytest.fixture
def complete_palette_roles() -> dict:
    """Role mapping (camelCase, as exported by design tools) for a dark-on-light theme."""
    return {
        "name": "paper",
        "primary": "#1A237E",
        "onPrimary": "#FFFFFF",
        "primaryContainer": "#E8EAF6",
        "onPrimaryContainer": "#000000",
        "secondary": "#004D40",
        "onSecondary": "#FFFFFF",
        "secondaryContainer": "#E0F2F1",
        "onSecondaryContainer": "#000000",
        "surface": "#FFFFFF",
        "onSurface": "#000000",
        "surfaceVariant": "#F5F5F5",
        "onSurfaceVariant": "#212121",
        "background": "#FFFFFF",
        "onBackground": "#000000",
        "error": "#8B0000",
        "onError": "#FFFFFF",
        "errorContainer": "#FFEBEE",
        "onErrorContainer": "#000000",
    }
