"""Exceptions raised by themecontrast."""

from typing import Any


class InvalidColorError(ValueError):
    """A color value is malformed or has a channel outside [0, 1]."""

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class MissingPaletteColorError(ValueError):
    """A palette lacks a color required by one of the critical pairs."""

    def __init__(self, pair: str, role: str, palette_name: str | None = None) -> None:
        self.pair = pair
        self.role = role
        self.palette_name = palette_name
        where = f" in palette '{palette_name}'" if palette_name else ""
        super().__init__(
            f"Missing color '{role}' required by the '{pair}' pair{where}"
        )
