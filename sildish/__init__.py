"""Sildish: Roman-to-Sildish transliteration toolkit."""

from sildish.transliterate import transliterate


__version__ = "1.0.0"

__all__ = ['transliterate', '__version__']
