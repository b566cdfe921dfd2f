"""Construction of the Roman-to-Sildish transliteration tree.

The tree holds two entries for every reduplicable consonant: the single
letter maps to a nonreduplicated (3-glyph) payload and the doubled letter maps
to the full 6-glyph payload. Doubling a letter therefore just selects another
catalog entry, and the matcher needs no reduplication rule of its own.
"""

import logging
import threading
from collections.abc import Iterable

from sildish.catalog.phonemes import CLUSTERS, PHONEMES
from sildish.models import GraphemeKind, PhonemeData, ReduplicableConsonant
from sildish.tree.prefix_tree import PrefixTree, PrefixTreeConflictError


logger = logging.getLogger(__name__)

_VOCALIC = (GraphemeKind.VOWEL, GraphemeKind.DIPHTHONG)
_CONSONANTAL = (GraphemeKind.CONSONANT, GraphemeKind.REDUPLICABLE_CONSONANT)


class CatalogConflictError(PrefixTreeConflictError):
    """Two catalog entries claim the same Roman key.

    This is a defect in the static catalog and aborts initialization.
    """

    def __init__(self, old: PhonemeData, new: PhonemeData, key: str | None = None):
        self.key = key
        where = f" at key {key!r}" if key is not None else ""
        super().__init__(
            old,
            new,
            f"Catalog conflict{where}: {old.roman!r} /{old.pronunciation}/ "
            f"collides with {new.roman!r} /{new.pronunciation}/",
        )


def _refuse(old: PhonemeData, new: PhonemeData) -> PhonemeData:
    raise CatalogConflictError(old, new)


def _keyed(entries: Iterable[tuple[str, PhonemeData]]) -> dict[str, PhonemeData]:
    """Collect (key, payload) pairs, refusing duplicate keys."""
    mapping: dict[str, PhonemeData] = {}
    for key, data in entries:
        if key in mapping:
            raise CatalogConflictError(mapping[key], data, key=key)
        mapping[key] = data
    return mapping


def _single_occurrence(data: PhonemeData) -> PhonemeData:
    """Coerce a reduplicable consonant to its nonreduplicated form."""
    if isinstance(data.graphemes, ReduplicableConsonant):
        return PhonemeData(data.roman, data.pronunciation, data.graphemes.nonreduplicated())
    return data


def build_transliteration_tree(
    phonemes: Iterable[PhonemeData] = PHONEMES,
    clusters: Iterable[PhonemeData] = CLUSTERS,
) -> PrefixTree[str, PhonemeData]:
    """
    Build the transliteration tree from catalog data.

    Four sub-trees are merged: vowels and diphthongs, every consonant keyed by
    its Roman spelling (nonreduplicated), every reduplicable consonant keyed by
    its doubled spelling, and clusters.

    Args:
        phonemes: Catalog phonemes
        clusters: Catalog clusters

    Returns:
        The merged tree

    Raises:
        CatalogConflictError: if two entries map to the same key
    """
    phonemes = list(phonemes)
    clusters = list(clusters)

    sources = [
        _keyed((p.roman, p) for p in phonemes if p.kind in _VOCALIC),
        _keyed((p.roman, _single_occurrence(p)) for p in phonemes if p.kind in _CONSONANTAL),
        _keyed(
            (p.roman * 2, p)
            for p in phonemes
            if p.kind is GraphemeKind.REDUPLICABLE_CONSONANT
        ),
        _keyed((c.roman, c) for c in clusters),
    ]

    tree: PrefixTree[str, PhonemeData] = PrefixTree.build_all(sources[0])
    for source in sources[1:]:
        tree = tree.merge(PrefixTree.build_all(source), _refuse)

    logger.debug(
        "Built transliteration tree with %d keys",
        sum(len(source) for source in sources),
    )
    return tree


_tree: PrefixTree[str, PhonemeData] | None = None
_tree_lock = threading.Lock()


def get_transliteration_tree() -> PrefixTree[str, PhonemeData]:
    """Return the shared transliteration tree, building it on first use.

    The tree is never modified after construction.
    """
    global _tree
    if _tree is None:
        with _tree_lock:
            if _tree is None:
                _tree = build_transliteration_tree()
    return _tree


def longest_roman_vowel(phonemes: Iterable[PhonemeData] = PHONEMES) -> int:
    """Length of the longest Roman spelling of a vowel or diphthong."""
    return max(len(p.roman) for p in phonemes if p.kind in _VOCALIC)


def longest_roman_medial(
    phonemes: Iterable[PhonemeData] = PHONEMES,
    clusters: Iterable[PhonemeData] = CLUSTERS,
) -> int:
    """Length of the longest key a medial run can match, doubled consonants included."""
    lengths = []
    for p in phonemes:
        if p.kind is GraphemeKind.REDUPLICABLE_CONSONANT:
            lengths.append(2 * len(p.roman))
        else:
            lengths.append(len(p.roman))
    lengths.extend(len(c.roman) for c in clusters)
    return max(lengths)
