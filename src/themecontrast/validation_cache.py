"""Caller-owned cache of theme validation results.

Validation is pure, so a result stays valid for as long as the palette that
produced it is unchanged. UI code that re-validates on every redraw can keep
one :class:`ThemeValidationCache` and look results up by theme identity
(a theme name, or a name plus version).

Cache Strategy:
    - Keyed by a hashable theme identity, ``palette.name`` by default
    - An entry is reused only if its stored palette equals the given one;
      a changed palette under the same key is revalidated and replaced
    - Explicit invalidation per key or for the whole cache
"""

from collections.abc import Hashable
from typing import Any

from . import const
from .palettes import ThemePalette
from .theme_validation import ThemeValidationResult, validate_theme

__all__ = ["ThemeValidationCache"]


class ThemeValidationCache:
    """Memoizes :func:`validate_theme` per theme identity.

    Attributes:
        hits: Number of lookups served from the cache.
        misses: Number of lookups that ran a validation.
    """

    def __init__(self) -> None:
        self._entries: dict[Hashable, ThemeValidationResult] = {}
        self.hits = 0
        self.misses = 0

    def get(self, palette: ThemePalette, key: Hashable | None = None) -> ThemeValidationResult:
        """Return the validation of ``palette``, computing it if needed.

        Args:
            palette: The palette to validate.
            key: Theme identity. Defaults to ``palette.name``.

        Raises:
            ValueError: If no key is given and the palette has no name.
        """
        if key is None:
            key = palette.name
        if key is None:
            raise ValueError("Unnamed palettes need an explicit cache key")

        cached = self._entries.get(key)
        if cached is not None and cached.palette == palette:
            self.hits += 1
            return cached

        self.misses += 1
        const.LOGGER.debug("Validating theme %s for cache key %r", palette.name, key)
        result = validate_theme(palette)
        self._entries[key] = result
        return result

    def invalidate(self, key: Hashable) -> bool:
        """Drop one entry. Returns True if it was cached."""
        return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        self._entries.clear()

    @property
    def stats(self) -> dict[str, Any]:
        return {"entries": len(self._entries), "hits": self.hits, "misses": self.misses}

    def __contains__(self, key: Hashable) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
