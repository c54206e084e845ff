"""Theme-wide accessibility validation and rating.

A theme is validated by checking each of its critical foreground/background
pairs, the combinations end users actually read text against. The results
are collected in a :class:`ThemeValidationResult` snapshot, from which an
:class:`AccessibilityRating` is derived.
"""

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, NamedTuple

from . import const
from .contrast import ContrastResult, meets_wcag_aa, validate_color_combination
from .errors import MissingPaletteColorError
from .palettes import ThemePalette

__all__ = [
    "CriticalPair",
    "CRITICAL_PAIRS",
    "ThemeValidationResult",
    "AccessibilityRating",
    "validate_theme",
    "validate_color_pair",
    "rate",
    "get_theme_accessibility_rating",
]


class CriticalPair(NamedTuple):
    label: str
    foreground: str
    background: str


CRITICAL_PAIRS: tuple[CriticalPair, ...] = (
    CriticalPair("primary", "on_primary", "primary"),
    CriticalPair("primary-container", "on_primary_container", "primary_container"),
    CriticalPair("secondary", "on_secondary", "secondary"),
    CriticalPair("secondary-container", "on_secondary_container", "secondary_container"),
    CriticalPair("surface", "on_surface", "surface"),
    CriticalPair("surface-variant", "on_surface_variant", "surface"),
    CriticalPair("background", "on_background", "background"),
    CriticalPair("error", "on_error", "error"),
    CriticalPair("error-container", "on_error_container", "error_container"),
)


@dataclass(frozen=True)
class ThemeValidationResult:
    """Snapshot of a theme validation.

    The aggregate fields are computed once at construction from
    ``validations``.
    """

    validations: tuple[ContrastResult, ...]
    palette: ThemePalette | None = None
    wcag_aa_compliant_count: int = field(init=False)
    wcag_aaa_compliant_count: int = field(init=False)
    total_checks: int = field(init=False)
    worst_contrast_ratio: float = field(init=False)
    best_contrast_ratio: float = field(init=False)
    is_fully_wcag_aa_compliant: bool = field(init=False)
    is_fully_wcag_aaa_compliant: bool = field(init=False)
    failed_validations: tuple[ContrastResult, ...] = field(init=False)
    accessibility_summary: str = field(init=False)

    def __post_init__(self) -> None:
        validations = tuple(self.validations)
        ratios = [v.contrast_ratio for v in validations]
        aa_count = sum(1 for v in validations if v.meets_wcag_aa)
        aaa_count = sum(1 for v in validations if v.meets_wcag_aaa)
        total = len(validations)

        values = {
            "validations": validations,
            "wcag_aa_compliant_count": aa_count,
            "wcag_aaa_compliant_count": aaa_count,
            "total_checks": total,
            "worst_contrast_ratio": min(ratios, default=0.0),
            "best_contrast_ratio": max(ratios, default=0.0),
            "is_fully_wcag_aa_compliant": aa_count == total,
            "is_fully_wcag_aaa_compliant": aaa_count == total,
            "failed_validations": tuple(v for v in validations if not v.meets_wcag_aa),
        }
        for name, value in values.items():
            object.__setattr__(self, name, value)
        object.__setattr__(self, "accessibility_summary", self._summarize())

    def _summarize(self) -> str:
        if self.is_fully_wcag_aaa_compliant:
            return const.THEME_SUMMARY_AAA
        if self.is_fully_wcag_aa_compliant:
            return const.THEME_SUMMARY_AA
        if self.wcag_aa_compliant_count >= int(
            self.total_checks * const.MOSTLY_ACCESSIBLE_THRESHOLD
        ):
            return const.THEME_SUMMARY_MOSTLY
        return const.THEME_SUMMARY_CONCERNS

    @property
    def aa_ratio(self) -> float:
        """Fraction of checks meeting AA for normal text."""
        if not self.total_checks:
            return 0.0
        return self.wcag_aa_compliant_count / self.total_checks

    @property
    def aaa_ratio(self) -> float:
        """Fraction of checks meeting AAA for normal text."""
        if not self.total_checks:
            return 0.0
        return self.wcag_aaa_compliant_count / self.total_checks


class AccessibilityRating(enum.Enum):
    """User-facing accessibility rating of a theme."""

    EXCELLENT = ("Excellent", "Exceeds WCAG AAA standards")
    GOOD = ("Good", "Meets WCAG AA standards")
    ACCEPTABLE = ("Acceptable", "Meets most WCAG standards")
    NEEDS_IMPROVEMENT = ("Needs Improvement", "Some accessibility concerns")
    POOR = ("Poor", "Significant accessibility issues")

    def __init__(self, display_name: str, description: str) -> None:
        self.display_name = display_name
        self.description = description


def _as_palette(palette: ThemePalette | Mapping[str, Any]) -> ThemePalette:
    if isinstance(palette, ThemePalette):
        return palette
    if isinstance(palette, Mapping):
        return ThemePalette.from_mapping(palette)
    raise TypeError(
        f"Expected a ThemePalette or mapping, got {type(palette).__name__}"
    )


def validate_theme(palette: ThemePalette | Mapping[str, Any]) -> ThemeValidationResult:
    """Validate every critical color pair of a theme.

    Args:
        palette: A :class:`ThemePalette`, or a mapping of role names to colors.

    Returns:
        ThemeValidationResult: One entry per pair of :data:`CRITICAL_PAIRS`,
        in that order.

    Raises:
        MissingPaletteColorError: If a role needed by a critical pair is
            missing. Nothing is evaluated in that case.
        InvalidColorError: If a color in a mapping cannot be parsed.
    """
    palette = _as_palette(palette)

    for pair in CRITICAL_PAIRS:
        for role in (pair.foreground, pair.background):
            if getattr(palette, role) is None:
                raise MissingPaletteColorError(pair.label, role, palette.name)

    validations = []
    for pair in CRITICAL_PAIRS:
        result = validate_color_combination(
            getattr(palette, pair.foreground),
            getattr(palette, pair.background),
            label=pair.label,
        )
        const.LOGGER.debug(
            "Theme %s pair %s: %s", palette.name, pair.label, result.compliance_summary
        )
        if not result.meets_wcag_aa:
            const.LOGGER.warning(
                "Theme %s pair %s fails WCAG AA: %.2f:1",
                palette.name,
                pair.label,
                result.contrast_ratio,
            )
        validations.append(result)

    return ThemeValidationResult(validations=tuple(validations), palette=palette)


def validate_color_pair(foreground: Any, background: Any) -> bool:
    """Check if two colors meet WCAG AA for normal text."""
    return meets_wcag_aa(foreground, background)


def rate(result: ThemeValidationResult) -> AccessibilityRating:
    """Map a theme validation to an accessibility rating.

    AAA coverage is checked first at the 90% bar, then AA coverage at
    80%, 70% and 60%.
    """
    if not result.total_checks:
        return AccessibilityRating.POOR

    aaa_ratio = result.aaa_ratio
    aa_ratio = result.aa_ratio

    if aaa_ratio >= const.EXCELLENT_THRESHOLD:
        return AccessibilityRating.EXCELLENT
    if aa_ratio >= const.GOOD_THRESHOLD:
        return AccessibilityRating.GOOD
    if aa_ratio >= const.ACCEPTABLE_THRESHOLD:
        return AccessibilityRating.ACCEPTABLE
    if aa_ratio >= const.NEEDS_IMPROVEMENT_THRESHOLD:
        return AccessibilityRating.NEEDS_IMPROVEMENT
    return AccessibilityRating.POOR


def get_theme_accessibility_rating(
    palette: ThemePalette | Mapping[str, Any],
) -> AccessibilityRating:
    return rate(validate_theme(palette))
