"""WCAG compliance classification for single foreground/background pairs."""

from dataclasses import dataclass, field
from typing import Any, NamedTuple

from . import const
from .color_utils import Color
from .luminance import calculate_contrast_ratio

__all__ = [
    "ComplianceFlags",
    "ContrastResult",
    "classify_contrast_ratio",
    "describe_contrast_ratio",
    "meets_wcag_aa",
    "meets_wcag_aa_large_text",
    "meets_wcag_aaa",
    "meets_wcag_aaa_large_text",
    "validate_color_combination",
    "get_contrast_description",
]


class ComplianceFlags(NamedTuple):
    aa_normal: bool
    aa_large: bool
    aaa_normal: bool
    aaa_large: bool


def classify_contrast_ratio(ratio: float) -> ComplianceFlags:
    """Compare a contrast ratio against the four WCAG thresholds."""
    return ComplianceFlags(
        aa_normal=ratio >= const.WCAG_AA_NORMAL_TEXT_RATIO,
        aa_large=ratio >= const.WCAG_AA_LARGE_TEXT_RATIO,
        aaa_normal=ratio >= const.WCAG_AAA_NORMAL_TEXT_RATIO,
        aaa_large=ratio >= const.WCAG_AAA_LARGE_TEXT_RATIO,
    )


def describe_contrast_ratio(ratio: float) -> str:
    """Describe a ratio by the highest threshold it meets."""
    if ratio >= const.WCAG_AAA_NORMAL_TEXT_RATIO:
        return const.DESCRIPTION_AAA
    if ratio >= const.WCAG_AA_NORMAL_TEXT_RATIO:
        return const.DESCRIPTION_AA
    if ratio >= const.WCAG_AA_LARGE_TEXT_RATIO:
        return const.DESCRIPTION_LARGE_TEXT
    return const.DESCRIPTION_POOR


@dataclass(frozen=True)
class ContrastResult:
    """Outcome of validating one foreground/background combination.

    Attributes:
        contrast_ratio: WCAG contrast ratio in [1.0, 21.0].
        meets_wcag_aa: Ratio ≥ 4.5 (normal text).
        meets_wcag_aa_large_text: Ratio ≥ 3.0.
        meets_wcag_aaa: Ratio ≥ 7.0 (normal text).
        meets_wcag_aaa_large_text: Ratio ≥ 4.5.
        foreground: The foreground color that was checked.
        background: The background color that was checked.
        label: Optional name of the pair, e.g. ``"primary"``.
    """

    contrast_ratio: float
    meets_wcag_aa: bool
    meets_wcag_aa_large_text: bool
    meets_wcag_aaa: bool
    meets_wcag_aaa_large_text: bool
    foreground: Color
    background: Color
    label: str | None = field(default=None, compare=False)

    @property
    def description(self) -> str:
        return describe_contrast_ratio(self.contrast_ratio)

    @property
    def compliance_summary(self) -> str:
        """Highest standard met followed by the ratio, e.g. ``WCAG AA compliant (5.12:1)``."""
        if self.meets_wcag_aaa:
            level = const.SUMMARY_AAA
        elif self.meets_wcag_aa:
            level = const.SUMMARY_AA
        elif self.meets_wcag_aa_large_text:
            level = const.SUMMARY_LARGE_TEXT
        else:
            level = const.SUMMARY_FAIL
        return f"{level} ({self.contrast_ratio:.2f}:1)"

    @property
    def is_suitable_for_normal_text(self) -> bool:
        return self.meets_wcag_aa

    @property
    def is_suitable_for_large_text(self) -> bool:
        return self.meets_wcag_aa_large_text


def meets_wcag_aa(foreground: Any, background: Any) -> bool:
    """True if the pair reaches 4.5:1 (AA, normal text)."""
    return classify_contrast_ratio(
        calculate_contrast_ratio(foreground, background)
    ).aa_normal


def meets_wcag_aa_large_text(foreground: Any, background: Any) -> bool:
    """True if the pair reaches 3.0:1 (AA, large text)."""
    return classify_contrast_ratio(
        calculate_contrast_ratio(foreground, background)
    ).aa_large


def meets_wcag_aaa(foreground: Any, background: Any) -> bool:
    """True if the pair reaches 7.0:1 (AAA, normal text)."""
    return classify_contrast_ratio(
        calculate_contrast_ratio(foreground, background)
    ).aaa_normal


def meets_wcag_aaa_large_text(foreground: Any, background: Any) -> bool:
    """True if the pair reaches 4.5:1 (AAA, large text)."""
    return classify_contrast_ratio(
        calculate_contrast_ratio(foreground, background)
    ).aaa_large


def validate_color_combination(
    foreground: Any, background: Any, label: str | None = None
) -> ContrastResult:
    """Validate a color combination and return a detailed result.

    Args:
        foreground: Foreground color, or anything :meth:`Color.coerce` accepts.
        background: Background color, or anything :meth:`Color.coerce` accepts.
        label: Optional pair name carried on the result for reporting.

    Raises:
        InvalidColorError: If either color is malformed.
    """
    fg = Color.coerce(foreground)
    bg = Color.coerce(background)
    ratio = calculate_contrast_ratio(fg, bg)
    flags = classify_contrast_ratio(ratio)
    return ContrastResult(
        contrast_ratio=ratio,
        meets_wcag_aa=flags.aa_normal,
        meets_wcag_aa_large_text=flags.aa_large,
        meets_wcag_aaa=flags.aaa_normal,
        meets_wcag_aaa_large_text=flags.aaa_large,
        foreground=fg,
        background=bg,
        label=label,
    )


def get_contrast_description(foreground: Any, background: Any) -> str:
    """Human-readable description of the contrast level of a pair."""
    return describe_contrast_ratio(calculate_contrast_ratio(foreground, background))
