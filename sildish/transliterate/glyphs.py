"""Glyph variant selection for matched phonemes."""

from sildish.models import (
    Consonant,
    Diphthong,
    GraphemeSet,
    ReduplicableConsonant,
    Vowel,
)


def select_nonmedial(graphemes: GraphemeSet) -> str:
    """
    Select the glyph for a leading or trailing vowel.

    Args:
        graphemes: Grapheme set of a vowel or diphthong

    Returns:
        The bar-less variant

    Raises:
        TypeError: if called with a consonant
    """
    if isinstance(graphemes, (Vowel, Diphthong)):
        return graphemes.without_bar
    raise TypeError(f"Nonmedial runs contain only vowels, got {graphemes.kind.value}")


def select_medial(
    graphemes: GraphemeSet,
    is_first: bool,
    is_last: bool,
    is_capitalized: bool = False,
) -> str:
    """
    Select the glyph for a phoneme inside the barred medial run.

    A consonant opening an uncapitalized run takes its initial form; the
    capital mark already opens the bar of a capitalized word. Otherwise a
    consonant closing the run takes its final form. The opening rule wins
    when a run holds a single consonant.

    Args:
        graphemes: Grapheme set of the matched phoneme
        is_first: Whether this is the first match of the run
        is_last: Whether this is the last match of the run
        is_capitalized: Whether the word is capitalized

    Returns:
        The selected glyph string
    """
    if isinstance(graphemes, (Vowel, Diphthong)):
        return graphemes.standard

    opens = is_first and not is_capitalized
    if isinstance(graphemes, ReduplicableConsonant):
        if opens:
            return graphemes.initial_reduplicated
        if is_last:
            return graphemes.final_reduplicated
        return graphemes.reduplicated

    if isinstance(graphemes, Consonant):
        if opens:
            return graphemes.initial
        if is_last:
            return graphemes.final
        return graphemes.standard

    raise TypeError(f"Unknown grapheme set: {graphemes!r}")
