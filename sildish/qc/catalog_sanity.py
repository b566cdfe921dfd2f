"""Sanity checks for the phoneme catalog."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from sildish.models import GraphemeKind, PhonemeData


# Basic Multilingual Plane Private Use Area
PUA_START = 0xE000
PUA_END = 0xF8FF


@dataclass
class CatalogSanityResult:
    """Result of a catalog sanity check."""

    entries: int
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors


def is_private_use(char: str) -> bool:
    return PUA_START <= ord(char) <= PUA_END


def _trie_keys(entry: PhonemeData) -> list[str]:
    keys = [entry.roman]
    if entry.kind is GraphemeKind.REDUPLICABLE_CONSONANT:
        keys.append(entry.roman * 2)
    return keys


def check_catalog(
    phonemes: Iterable[PhonemeData],
    clusters: Iterable[PhonemeData],
    logger: logging.Logger,
) -> CatalogSanityResult:
    """
    Check catalog data before it is used to build the transliteration tree.

    Args:
        phonemes: Catalog phonemes
        clusters: Catalog clusters
        logger: Logger instance

    Returns:
        Sanity check result
    """
    phonemes = list(phonemes)
    clusters = list(clusters)
    entries = phonemes + clusters
    result = CatalogSanityResult(entries=len(entries))

    owners: dict[str, str] = {}
    for entry in entries:
        label = f"{entry.roman!r}"

        if not entry.roman or not (entry.roman.isascii() and entry.roman.isalpha()):
            result.errors.append(f"{label}: Roman spelling must be ASCII letters")
        elif entry.roman != entry.roman.lower():
            result.errors.append(f"{label}: Roman spelling must be lowercase")

        if not entry.pronunciation:
            result.errors.append(f"{label}: missing pronunciation")

        for name, glyph in entry.graphemes.variants().items():
            if not glyph:
                result.errors.append(f"{label}: empty {name} glyph")
                continue
            outside = [f"U+{ord(c):04X}" for c in glyph if not is_private_use(c)]
            if outside:
                result.errors.append(
                    f"{label}: {name} glyph has code points outside the Private Use Area: "
                    + ", ".join(outside)
                )

        for key in _trie_keys(entry):
            if key in owners:
                result.errors.append(
                    f"{label}: key {key!r} already claimed by {owners[key]!r}"
                )
            else:
                owners[key] = entry.roman

    # Every letter needs a single-letter entry, or the matcher can stall on it.
    letters = {char for entry in entries for char in entry.roman}
    for letter in sorted(letters - set(owners)):
        result.errors.append(f"Letter {letter!r} has no single-letter catalog entry")

    vocalic = {
        char for entry in entries if entry.graphemes.is_vocalic for char in entry.roman
    }
    consonantal = {
        char for entry in entries if not entry.graphemes.is_vocalic for char in entry.roman
    }
    for letter in sorted(vocalic & consonantal):
        result.errors.append(f"Letter {letter!r} spells both vowels and consonants")

    for cluster in clusters:
        if cluster.graphemes.is_vocalic:
            result.warnings.append(f"Cluster {cluster.roman!r} is vocalic")

    if result.errors:
        logger.error(f"Catalog check found {len(result.errors)} errors in {len(entries)} entries")
    else:
        logger.info(f"Catalog check passed for {len(entries)} entries")

    return result
