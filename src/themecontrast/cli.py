"""Command-line interface for themecontrast."""

import json
import sys
from pathlib import Path
from typing import Any

import click

from . import __version__
from .color_utils import color_to_hex, format_color, parse_color
from .contrast import ContrastResult, validate_color_combination
from .palettes import BUILTIN_PALETTES, ThemePalette, get_builtin_palette, load_palette
from .theme_validation import rate, validate_theme

OUTPUT_FORMATS = click.Choice(["text", "json"], case_sensitive=False)


def _result_to_dict(result: ContrastResult) -> dict[str, Any]:
    data: dict[str, Any] = {}
    if result.label is not None:
        data["pair"] = result.label
    data.update(
        {
            "foreground": color_to_hex(result.foreground),
            "background": color_to_hex(result.background),
            "contrast_ratio": round(result.contrast_ratio, 2),
            "meets_wcag_aa": result.meets_wcag_aa,
            "meets_wcag_aa_large_text": result.meets_wcag_aa_large_text,
            "meets_wcag_aaa": result.meets_wcag_aaa,
            "meets_wcag_aaa_large_text": result.meets_wcag_aaa_large_text,
            "description": result.description,
        }
    )
    return data


def _resolve_palette(palette: str) -> ThemePalette:
    if palette in BUILTIN_PALETTES:
        return get_builtin_palette(palette)
    path = Path(palette)
    if not path.exists():
        raise ValueError(
            f"'{palette}' is neither a palette file nor a built-in palette "
            f"({', '.join(sorted(BUILTIN_PALETTES))})"
        )
    return load_palette(path)


def _mark(flag: bool) -> str:
    return "pass" if flag else "FAIL"


@click.group()
@click.version_option(version=__version__, prog_name="themecontrast")
def main() -> None:
    """Check WCAG contrast of colors and theme palettes.

    Colors may be given as #RRGGBB, #RRGGBBAA, rgb(R,G,B), rgba(R,G,B,A),
    hsl(H,S%,L%) or hsv(H,S%,V%).
    """


@main.command()
@click.argument("foreground")
@click.argument("background")
@click.option(
    "-F",
    "--output-format",
    type=OUTPUT_FORMATS,
    default="text",
    help="Output format (default: text)",
)
def ratio(foreground: str, background: str, output_format: str) -> None:
    """Show the contrast ratio of FOREGROUND text on BACKGROUND.

    Examples:

        themecontrast ratio "#FFFFFF" "#000000"

        themecontrast ratio "rgb(119, 119, 119)" "#888888" -F json
    """
    try:
        result = validate_color_combination(parse_color(foreground), parse_color(background))
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if output_format.lower() == "json":
        click.echo(json.dumps(_result_to_dict(result), indent=2))
        return

    click.echo(
        f"{format_color(result.foreground)} on {format_color(result.background)}: "
        f"{result.contrast_ratio:.2f}:1"
    )
    click.echo(f"  AA normal text:   {_mark(result.meets_wcag_aa)}")
    click.echo(f"  AA large text:    {_mark(result.meets_wcag_aa_large_text)}")
    click.echo(f"  AAA normal text:  {_mark(result.meets_wcag_aaa)}")
    click.echo(f"  AAA large text:   {_mark(result.meets_wcag_aaa_large_text)}")
    click.echo(f"  {result.description}")


@main.command()
@click.argument("palette")
@click.option(
    "-F",
    "--output-format",
    type=OUTPUT_FORMATS,
    default="text",
    help="Output format (default: text)",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Exit with status 1 unless every pair meets WCAG AA",
)
def theme(palette: str, output_format: str, strict: bool) -> None:
    """Validate the critical color pairs of PALETTE.

    PALETTE is a built-in palette name or a JSON/YAML file mapping color
    roles (primary, onPrimary, ...) to colors.

    Examples:

        themecontrast theme mario-classic

        themecontrast theme my_theme.yaml -F json --strict
    """
    try:
        result = validate_theme(_resolve_palette(palette))
    except (ValueError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    rating = rate(result)

    if output_format.lower() == "json":
        click.echo(
            json.dumps(
                {
                    "palette": result.palette.name if result.palette else None,
                    "rating": rating.display_name,
                    "summary": result.accessibility_summary,
                    "wcag_aa_compliant_count": result.wcag_aa_compliant_count,
                    "wcag_aaa_compliant_count": result.wcag_aaa_compliant_count,
                    "total_checks": result.total_checks,
                    "worst_contrast_ratio": round(result.worst_contrast_ratio, 2),
                    "best_contrast_ratio": round(result.best_contrast_ratio, 2),
                    "validations": [_result_to_dict(v) for v in result.validations],
                },
                indent=2,
            )
        )
    else:
        name = result.palette.name if result.palette else palette
        click.echo(f"Theme {name}: {rating.display_name} ({rating.description})")
        click.echo()
        for v in result.validations:
            click.echo(
                f"  {v.label or '':20}  {color_to_hex(v.foreground)} on "
                f"{color_to_hex(v.background)}  {v.compliance_summary}"
            )
        click.echo()
        click.echo(
            f"{result.accessibility_summary}: "
            f"{result.wcag_aa_compliant_count}/{result.total_checks} AA, "
            f"{result.wcag_aaa_compliant_count}/{result.total_checks} AAA"
        )

    if strict and not result.is_fully_wcag_aa_compliant:
        sys.exit(1)


if __name__ == "__main__":
    main()
