"""Constants shared across themecontrast."""

import logging

LOGGER = logging.getLogger(__package__)

# WCAG 2.1 contrast ratio thresholds
WCAG_AA_NORMAL_TEXT_RATIO = 4.5
WCAG_AA_LARGE_TEXT_RATIO = 3.0
WCAG_AAA_NORMAL_TEXT_RATIO = 7.0
WCAG_AAA_LARGE_TEXT_RATIO = 4.5

# Ambient light reflection term of the contrast ratio formula
LUMINANCE_OFFSET = 0.05

# sRGB linearization
LINEAR_THRESHOLD = 0.03928
LINEAR_DIVISOR = 12.92
GAMMA_OFFSET = 0.055
GAMMA_DIVISOR = 1.055
GAMMA_EXPONENT = 2.4

# Rec. 709 channel weights
RED_WEIGHT = 0.2126
GREEN_WEIGHT = 0.7152
BLUE_WEIGHT = 0.0722

MIN_CONTRAST_RATIO = 1.0
MAX_CONTRAST_RATIO = 21.0

# Theme rating buckets (fraction of critical pairs)
EXCELLENT_THRESHOLD = 0.9  # AAA compliance
GOOD_THRESHOLD = 0.8  # AA compliance
ACCEPTABLE_THRESHOLD = 0.7  # AA compliance
NEEDS_IMPROVEMENT_THRESHOLD = 0.6  # AA compliance

# Share of AA-compliant pairs for a "mostly accessible" theme summary
MOSTLY_ACCESSIBLE_THRESHOLD = 0.8

DESCRIPTION_AAA = "Excellent contrast (WCAG AAA)"
DESCRIPTION_AA = "Good contrast (WCAG AA)"
DESCRIPTION_LARGE_TEXT = "Acceptable for large text only"
DESCRIPTION_POOR = "Poor contrast - accessibility concerns"

SUMMARY_AAA = "WCAG AAA compliant"
SUMMARY_AA = "WCAG AA compliant"
SUMMARY_LARGE_TEXT = "WCAG AA large text only"
SUMMARY_FAIL = "Does not meet WCAG standards"

THEME_SUMMARY_AAA = "Excellent accessibility (WCAG AAA)"
THEME_SUMMARY_AA = "Good accessibility (WCAG AA)"
THEME_SUMMARY_MOSTLY = "Mostly accessible"
THEME_SUMMARY_CONCERNS = "Accessibility concerns detected"
