"""The Sildish phoneme catalog.

Glyphs live in the Unicode Private Use Area and are rendered by the Sildish
font. Consonant glyph rows follow a fixed layout: 0xE1xx standard, 0xE2xx
initial, 0xE3xx final, 0xE4xx-0xE6xx the reduplicated counterparts.
"""

from sildish.models import (
    Consonant,
    Diphthong,
    GraphemeKind,
    PhonemeData,
    ReduplicableConsonant,
    Vowel,
)


# Marks a capitalized word; it opens the bar at the start of the word.
CAPITAL_MARK = "\uea00"


def _vowel(roman: str, ipa: str, standard: int, without_bar: int) -> PhonemeData:
    return PhonemeData(roman, ipa, Vowel(chr(standard), chr(without_bar)))


def _diphthong(roman: str, ipa: str, standard: int, without_bar: int) -> PhonemeData:
    return PhonemeData(roman, ipa, Diphthong(chr(standard), chr(without_bar)))


def _consonant(roman: str, ipa: str, column: int) -> PhonemeData:
    return PhonemeData(
        roman,
        ipa,
        Consonant(
            standard=chr(0xE100 + column),
            initial=chr(0xE200 + column),
            final=chr(0xE300 + column),
        ),
    )


def _reduplicable(roman: str, ipa: str, column: int) -> PhonemeData:
    return PhonemeData(
        roman,
        ipa,
        ReduplicableConsonant(
            standard=chr(0xE100 + column),
            initial=chr(0xE200 + column),
            final=chr(0xE300 + column),
            reduplicated=chr(0xE400 + column),
            initial_reduplicated=chr(0xE500 + column),
            final_reduplicated=chr(0xE600 + column),
        ),
    )


PHONEMES: tuple[PhonemeData, ...] = (
    # Simple vowels
    _vowel("y", "i", 0xE000, 0xE040),
    _vowel("i", "ɪ", 0xE001, 0xE041),
    _vowel("e", "ɛ", 0xE002, 0xE042),
    _vowel("a", "a", 0xE003, 0xE043),
    _vowel("o", "o", 0xE004, 0xE044),
    _vowel("u", "u", 0xE005, 0xE045),
    # Diphthongs
    _diphthong("ei", "ɛi", 0xE008, 0xE048),
    _diphthong("ae", "ai", 0xE009, 0xE049),
    _diphthong("oi", "oi", 0xE00A, 0xE04A),
    _diphthong("ui", "ui", 0xE00B, 0xE04B),
    _diphthong("eu", "ɛu", 0xE026, 0xE066),
    _diphthong("au", "au", 0xE027, 0xE067),
    # Consonants
    _reduplicable("m", "m", 0x01),
    _reduplicable("n", "n", 0x07),
    _consonant("ng", "ŋ", 0x0D),
    _reduplicable("p", "p", 0x10),
    _reduplicable("b", "b", 0x11),
    _reduplicable("t", "t", 0x16),
    _reduplicable("d", "d", 0x17),
    _reduplicable("c", "k", 0x1C),
    _reduplicable("g", "g", 0x1D),
    _consonant("f", "f", 0x22),
    _consonant("v", "v", 0x23),
    _consonant("th", "θ", 0x24),
    _consonant("dh", "ð", 0x25),
    _reduplicable("s", "s", 0x26),
    _consonant("z", "z", 0x27),
    _consonant("sh", "ʃ", 0x28),
    _consonant("zh", "ʒ", 0x29),
    _consonant("ch", "x", 0x2C),
    _consonant("h", "h", 0x2E),
    _consonant("hw", "ʍ", 0x30),
    _consonant("w", "w", 0x31),
    _consonant("j", "j", 0x3B),
    _consonant("r", "ɾ", 0x47),
    _consonant("rh", "r", 0x57),
    _reduplicable("l", "l", 0x67),
)

# Clusters spell one Roman letter with two consonant glyphs. The initial form
# changes only the first glyph, the final form only the second.
CLUSTERS: tuple[PhonemeData, ...] = (
    PhonemeData(
        "q",
        "kw",
        Consonant(
            standard="\ue11c\ue131",
            initial="\ue21c\ue131",
            final="\ue11c\ue331",
        ),
    ),
    PhonemeData(
        "x",
        "ks",
        Consonant(
            standard="\ue11c\ue126",
            initial="\ue21c\ue126",
            final="\ue11c\ue326",
        ),
    ),
)


def phonemes_of_kind(*kinds: GraphemeKind) -> list[PhonemeData]:
    """Return catalog phonemes whose grapheme set is one of `kinds`."""
    return [p for p in PHONEMES if p.kind in kinds]


def all_vowels() -> list[PhonemeData]:
    """Simple vowels and diphthongs."""
    return phonemes_of_kind(GraphemeKind.VOWEL, GraphemeKind.DIPHTHONG)


def all_consonants() -> list[PhonemeData]:
    return phonemes_of_kind(GraphemeKind.CONSONANT, GraphemeKind.REDUPLICABLE_CONSONANT)


def all_reduplicable_consonants() -> list[PhonemeData]:
    return phonemes_of_kind(GraphemeKind.REDUPLICABLE_CONSONANT)


def find_phoneme(roman: str) -> PhonemeData | None:
    """Find a phoneme or cluster by its Roman spelling."""
    for entry in PHONEMES + CLUSTERS:
        if entry.roman == roman:
            return entry
    return None


def _letters(entries: tuple[PhonemeData, ...], vocalic: bool) -> frozenset[str]:
    return frozenset(
        char
        for entry in entries
        if entry.graphemes.is_vocalic == vocalic
        for char in entry.roman
    )


# Roman letters that spell vowels and consonants. The two sets are disjoint.
VOWEL_LETTERS: frozenset[str] = _letters(PHONEMES + CLUSTERS, vocalic=True)
CONSONANT_LETTERS: frozenset[str] = _letters(PHONEMES + CLUSTERS, vocalic=False)


def is_vowel_letter(char: str) -> bool:
    return char.lower() in VOWEL_LETTERS


def is_consonant_letter(char: str) -> bool:
    return char.lower() in CONSONANT_LETTERS


def is_sildish_letter(char: str) -> bool:
    """True if `char` (in either case) spells part of a Sildish phoneme."""
    return is_vowel_letter(char) or is_consonant_letter(char)
