"""Theme palettes: the color roles a theme exposes to text and surfaces."""

import json
import re
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from .color_utils import Color

__all__ = [
    "ThemePalette",
    "REQUIRED_ROLES",
    "BUILTIN_PALETTES",
    "get_builtin_palette",
    "load_palette",
]

REQUIRED_ROLES = (
    "primary",
    "on_primary",
    "primary_container",
    "on_primary_container",
    "secondary",
    "on_secondary",
    "secondary_container",
    "on_secondary_container",
    "surface",
    "on_surface",
    "surface_variant",
    "on_surface_variant",
    "background",
    "on_background",
    "error",
    "on_error",
    "error_container",
    "on_error_container",
)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def _snake_case(key: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", key).replace("-", "_").lower()


@dataclass(frozen=True)
class ThemePalette:
    """Color scheme of a theme, one field per role.

    Any role may be left as ``None``; the validator reports missing roles
    that it needs instead of skipping them. Values given as strings or
    channel sequences are converted with :meth:`Color.coerce`.
    """

    name: str | None = None
    primary: Color | None = None
    on_primary: Color | None = None
    primary_container: Color | None = None
    on_primary_container: Color | None = None
    secondary: Color | None = None
    on_secondary: Color | None = None
    secondary_container: Color | None = None
    on_secondary_container: Color | None = None
    tertiary: Color | None = None
    on_tertiary: Color | None = None
    tertiary_container: Color | None = None
    on_tertiary_container: Color | None = None
    surface: Color | None = None
    on_surface: Color | None = None
    surface_variant: Color | None = None
    on_surface_variant: Color | None = None
    background: Color | None = None
    on_background: Color | None = None
    error: Color | None = None
    on_error: Color | None = None
    error_container: Color | None = None
    on_error_container: Color | None = None
    outline: Color | None = None

    def __post_init__(self) -> None:
        for role in self.roles():
            value = getattr(self, role)
            if value is not None:
                object.__setattr__(self, role, Color.coerce(value))

    @classmethod
    def roles(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls) if f.name != "name")

    def missing_roles(self) -> list[str]:
        return [role for role in REQUIRED_ROLES if getattr(self, role) is None]

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], name: str | None = None) -> "ThemePalette":
        """Build a palette from a mapping of role names to colors.

        Keys may be snake_case (``on_primary``) or camelCase (``onPrimary``).
        A ``name`` key names the palette unless ``name`` is passed.
        """
        known = set(cls.roles())
        values: dict[str, Any] = {}
        palette_name = name
        for key, value in data.items():
            if not isinstance(key, str):
                raise ValueError(f"Palette role names must be strings, got {key!r}")
            if key == "name":
                if palette_name is None:
                    palette_name = str(value)
                continue
            role = _snake_case(key)
            if role not in known:
                raise ValueError(f"Unknown palette role: '{key}'")
            values[role] = value
        return cls(name=palette_name, **values)


def load_palette(path: str | Path) -> ThemePalette:
    """Load a palette from a JSON or YAML file."""
    path = Path(path)
    suffix = path.suffix.lower()
    with path.open(encoding="utf-8") as fh:
        if suffix == ".json":
            data = json.load(fh)
        elif suffix in (".yaml", ".yml"):
            try:
                data = yaml.safe_load(fh)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid palette file {path}: {e}") from e
        else:
            raise ValueError(
                f"Unsupported palette file type: '{path.suffix}'. "
                "Supported: .json, .yaml, .yml"
            )
    if not isinstance(data, Mapping):
        raise ValueError(f"Palette file must contain a mapping: {path}")
    name = data.get("name")
    return ThemePalette.from_mapping(
        data, name=str(name) if name is not None else path.stem
    )


MATERIAL_LIGHT = ThemePalette(
    name="material-light",
    primary="#6750A4",
    on_primary="#FFFFFF",
    primary_container="#EADDFF",
    on_primary_container="#21005D",
    secondary="#625B71",
    on_secondary="#FFFFFF",
    secondary_container="#E8DEF8",
    on_secondary_container="#1D192B",
    tertiary="#7D5260",
    on_tertiary="#FFFFFF",
    tertiary_container="#FFD8E4",
    on_tertiary_container="#31111D",
    surface="#FFFBFE",
    on_surface="#1C1B1F",
    surface_variant="#E7E0EC",
    on_surface_variant="#49454F",
    background="#FFFBFE",
    on_background="#1C1B1F",
    error="#B3261E",
    on_error="#FFFFFF",
    error_container="#F9DEDC",
    on_error_container="#410E0B",
    outline="#79747E",
)

MATERIAL_DARK = ThemePalette(
    name="material-dark",
    primary="#D0BCFF",
    on_primary="#381E72",
    primary_container="#4F378B",
    on_primary_container="#EADDFF",
    secondary="#CCC2DC",
    on_secondary="#332D41",
    secondary_container="#4A4458",
    on_secondary_container="#E8DEF8",
    tertiary="#EFB8C8",
    on_tertiary="#492532",
    tertiary_container="#633B48",
    on_tertiary_container="#FFD8E4",
    surface="#1C1B1F",
    on_surface="#E6E1E5",
    surface_variant="#49454F",
    on_surface_variant="#CAC4D0",
    background="#1C1B1F",
    on_background="#E6E1E5",
    error="#F2B8B5",
    on_error="#601410",
    error_container="#8C1D18",
    on_error_container="#F9DEDC",
    outline="#938F99",
)

MARIO_CLASSIC = ThemePalette(
    name="mario-classic",
    primary="#E60012",
    on_primary="#FFFFFF",
    primary_container="#FFE6E6",
    on_primary_container="#8B0000",
    secondary="#0066CC",
    on_secondary="#FFFFFF",
    secondary_container="#E6F0FF",
    on_secondary_container="#003366",
    tertiary="#00A652",
    on_tertiary="#FFFFFF",
    tertiary_container="#E6F5E6",
    on_tertiary_container="#004D00",
    surface="#FFFBFE",
    on_surface="#1C1B1F",
    surface_variant="#FFF8E1",
    on_surface_variant="#49454F",
    background="#FFFBFE",
    on_background="#1C1B1F",
    error="#BA1A1A",
    on_error="#FFFFFF",
    error_container="#FFDAD6",
    on_error_container="#410002",
    outline="#8B6914",
)

BUILTIN_PALETTES: dict[str, ThemePalette] = {
    palette.name: palette for palette in (MATERIAL_LIGHT, MATERIAL_DARK, MARIO_CLASSIC)
}


def get_builtin_palette(name: str) -> ThemePalette:
    try:
        return BUILTIN_PALETTES[name]
    except KeyError:
        raise ValueError(
            f"Unknown built-in palette: '{name}'. "
            f"Available: {', '.join(sorted(BUILTIN_PALETTES))}"
        ) from None
