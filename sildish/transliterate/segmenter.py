"""Roman-to-Sildish word segmentation and rendering.

Each word is split into four regions:

- a capital mark, if the word starts with an uppercase letter;
- leading vowels, rendered without the bar (uncapitalized words only);
- medials, rendered with the bar, consonants taking initial or final forms at
  the edges of the run;
- trailing vowels, rendered without the bar.

Any character outside the Sildish alphabet ends the current word and is
copied to the output unchanged.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from sildish.catalog.phonemes import (
    CAPITAL_MARK,
    CONSONANT_LETTERS,
    VOWEL_LETTERS,
    is_sildish_letter,
)
from sildish.models import Consonant, PhonemeData
from sildish.transliterate.builder import (
    get_transliteration_tree,
    longest_roman_medial,
    longest_roman_vowel,
)
from sildish.transliterate.glyphs import select_medial, select_nonmedial
from sildish.transliterate.matcher import iter_matches
from sildish.tree.prefix_tree import PrefixTree


LONGEST_VOWEL = longest_roman_vowel()
LONGEST_MEDIAL = max(LONGEST_VOWEL, longest_roman_medial())


@dataclass
class WordSegments:
    """A word split into the regions that are rendered differently."""

    capitalized: bool = False
    leading_vowels: str = ""
    medials: str = ""
    trailing_vowels: str = ""
    consonant_count: int = 0

    def render(self, tree: PrefixTree[str, PhonemeData] | None = None) -> str:
        """Render the word in Sildish."""
        return "".join(
            (
                CAPITAL_MARK if self.capitalized else "",
                transliterate_nonmedial_vowels(self.leading_vowels, tree),
                transliterate_medials(self.medials, self.capitalized, tree),
                transliterate_nonmedial_vowels(self.trailing_vowels, tree),
            )
        )


def transliterate_nonmedial_vowels(
    vowels: str,
    tree: PrefixTree[str, PhonemeData] | None = None,
) -> str:
    """
    Transliterate a run of leading or trailing vowels, without the bar.

    Args:
        vowels: Lowercase Roman vowels
        tree: Transliteration tree (default: the shared tree)

    Returns:
        Sildish text
    """
    if tree is None:
        tree = get_transliteration_tree()
    return "".join(
        select_nonmedial(match.phoneme.graphemes)
        for match in iter_matches(vowels, LONGEST_VOWEL, tree)
    )


transliterate_leading_or_trailing_vowels = transliterate_nonmedial_vowels


def transliterate_medials(
    medials: str,
    is_capitalized: bool = False,
    tree: PrefixTree[str, PhonemeData] | None = None,
) -> str:
    """
    Transliterate a medial run, with the bar.

    Args:
        medials: Lowercase Roman letters
        is_capitalized: Whether the enclosing word is capitalized; the capital
            mark then opens the bar instead of an initial consonant form
        tree: Transliteration tree (default: the shared tree)

    Returns:
        Sildish text
    """
    if tree is None:
        tree = get_transliteration_tree()
    return "".join(
        select_medial(match.phoneme.graphemes, match.is_first, match.is_last, is_capitalized)
        for match in iter_matches(medials, LONGEST_MEDIAL, tree)
    )


def _is_digraph(first: str, second: str, tree: PrefixTree[str, PhonemeData]) -> bool:
    """True if two consonant letters spell one nonreduplicable consonant."""
    data = tree.lookup(first + second)
    return data is not None and isinstance(data.graphemes, Consonant)


def scan_word(
    text: str,
    start: int,
    tree: PrefixTree[str, PhonemeData] | None = None,
) -> tuple[WordSegments, int]:
    """
    Classify the word starting at `text[start]`.

    Args:
        text: Input text
        start: Index of the first character of the word
        tree: Transliteration tree (default: the shared tree)

    Returns:
        Tuple of (segments, index just past the word)
    """
    if tree is None:
        tree = get_transliteration_tree()
    word = WordSegments()
    end = len(text)
    i = start

    if i < end and text[i].isupper() and is_sildish_letter(text[i]):
        word.capitalized = True

    leading: list[str] = []
    if not word.capitalized:
        while i < end and text[i].lower() in VOWEL_LETTERS:
            leading.append(text[i].lower())
            i += 1

    # A consonant stays unclassified until the next consonant or the end of
    # the word shows whether it closes the bar.
    medials: list[str] = []
    unclassified: list[str] = []
    while i < end:
        char = text[i].lower()
        if char in CONSONANT_LETTERS:
            medials.extend(unclassified)
            unclassified = [char]
            word.consonant_count += 1
            i += 1
            if i < end:
                following = text[i].lower()
                if following in CONSONANT_LETTERS and _is_digraph(char, following, tree):
                    unclassified.append(following)
                    i += 1
        elif char in VOWEL_LETTERS:
            unclassified.append(char)
            i += 1
        else:
            break

    trailing: list[str] = []
    if unclassified and unclassified[0] in CONSONANT_LETTERS:
        split = 0
        while split < len(unclassified) and unclassified[split] in CONSONANT_LETTERS:
            split += 1
        medials.extend(unclassified[:split])
        if word.consonant_count == 1:
            medials.extend(unclassified[split:])
        else:
            trailing = unclassified[split:]
    else:
        # Only a capitalized, entirely vocalic word gets here with vowels.
        medials.extend(unclassified)

    word.leading_vowels = "".join(leading)
    word.medials = "".join(medials)
    word.trailing_vowels = "".join(trailing)
    return word, i


def segment(
    text: str,
    tree: PrefixTree[str, PhonemeData] | None = None,
) -> Iterator[WordSegments | str]:
    """
    Split text into words and verbatim runs, in order.

    Args:
        text: Arbitrary Unicode text
        tree: Transliteration tree (default: the shared tree)

    Yields:
        WordSegments for each word, and str for each run of characters
        outside the Sildish alphabet
    """
    if tree is None:
        tree = get_transliteration_tree()
    i = 0
    end = len(text)
    while i < end:
        if is_sildish_letter(text[i]):
            word, i = scan_word(text, i, tree)
            yield word
        verbatim_start = i
        while i < end and not is_sildish_letter(text[i]):
            i += 1
        if i > verbatim_start:
            yield text[verbatim_start:i]


def transliterate(text: str, tree: PrefixTree[str, PhonemeData] | None = None) -> str:
    """
    Transliterate Roman text to Sildish.

    Never fails: characters outside the Sildish alphabet are copied verbatim,
    in their original case.

    Args:
        text: Arbitrary Unicode text
        tree: Transliteration tree (default: the shared tree)

    Returns:
        Sildish text
    """
    if tree is None:
        tree = get_transliteration_tree()
    return "".join(
        piece.render(tree) if isinstance(piece, WordSegments) else piece
        for piece in segment(text, tree)
    )
