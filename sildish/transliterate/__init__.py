"""Roman-to-Sildish transliteration engine."""

from sildish.transliterate.builder import (
    CatalogConflictError,
    build_transliteration_tree,
    get_transliteration_tree,
)
from sildish.transliterate.segmenter import (
    WordSegments,
    segment,
    transliterate,
    transliterate_leading_or_trailing_vowels,
    transliterate_medials,
    transliterate_nonmedial_vowels,
)


__all__ = [
    'CatalogConflictError',
    'WordSegments',
    'build_transliteration_tree',
    'get_transliteration_tree',
    'segment',
    'transliterate',
    'transliterate_leading_or_trailing_vowels',
    'transliterate_medials',
    'transliterate_nonmedial_vowels',
]
