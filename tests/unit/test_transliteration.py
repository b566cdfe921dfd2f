"""Tests for Roman-to-Sildish transliteration."""

import pytest

from sildish import transliterate
from sildish.catalog.phonemes import CLUSTERS, PHONEMES, all_vowels
from sildish.models import ReduplicableConsonant
from sildish.transliterate import (
    transliterate_leading_or_trailing_vowels,
    transliterate_medials,
)


def sildish_text(*code_points: int) -> str:
    """Build the expected Sildish string from code points."""
    return "".join(chr(cp) for cp in code_points)


CAPITAL = 0xEA00

NONMEDIAL_VOWELS = {
    "uoaeiy": (0xE045, 0xE044, 0xE049, 0xE041, 0xE040),
    "aeei": (0xE049, 0xE048),
    "aeiei": (0xE049, 0xE041, 0xE048),
    "eioa": (0xE048, 0xE044, 0xE043),
    "eoia": (0xE042, 0xE04A, 0xE043),
    "ieiu": (0xE041, 0xE048, 0xE045),
    "eiui": (0xE048, 0xE04B),
    "yieaou": (0xE040, 0xE041, 0xE042, 0xE043, 0xE044, 0xE045),
}

MEDIALS = {
    "shae": (0xE228, 0xE009),
    "shaen": (0xE228, 0xE009, 0xE307),
    "paperh": (0xE210, 0xE003, 0xE110, 0xE002, 0xE357),
    "paper": (0xE210, 0xE003, 0xE110, 0xE002, 0xE347),
}

WORDS = {
    "eioie": (0xE048, 0xE04A, 0xE042),
    "feie": (0xE222, 0xE008, 0xE002),
    "za": (0xE227, 0xE003),
    "hwa": (0xE230, 0xE003),
    "ama": (0xE043, 0xE201, 0xE003),
    "mana": (0xE201, 0xE003, 0xE307, 0xE043),
    "yrhax": (0xE040, 0xE257, 0xE003, 0xE11C, 0xE326),
    "ibril": (0xE041, 0xE211, 0xE147, 0xE001, 0xE367),
    "enhwen": (0xE042, 0xE207, 0xE130, 0xE002, 0xE307),
    "oros": (0xE044, 0xE247, 0xE004, 0xE326),
    "naen": (0xE207, 0xE009, 0xE307),
    "gehach": (0xE21D, 0xE002, 0xE12E, 0xE003, 0xE32C),
    "mimna": (0xE201, 0xE001, 0xE101, 0xE307, 0xE043),
    "vella": (0xE223, 0xE002, 0xE667, 0xE043),
    "thauma": (0xE224, 0xE027, 0xE301, 0xE043),
    "hwasslacantha": (
        0xE230, 0xE003, 0xE426, 0xE167, 0xE003, 0xE11C, 0xE003, 0xE107, 0xE324, 0xE043,
    ),
    "droa": (0xE217, 0xE347, 0xE044, 0xE043),
    "cobrye": (0xE21C, 0xE004, 0xE111, 0xE347, 0xE040, 0xE042),
    "oppoliteie": (0xE044, 0xE510, 0xE004, 0xE167, 0xE001, 0xE316, 0xE048, 0xE042),
    "occulthos": (0xE044, 0xE51C, 0xE005, 0xE167, 0xE124, 0xE004, 0xE326),
    "arcatty": (0xE043, 0xE247, 0xE11C, 0xE003, 0xE616, 0xE040),
    "tenghwae": (0xE216, 0xE002, 0xE10D, 0xE330, 0xE049),
    "mehannynimfa": (
        0xE201, 0xE002, 0xE12E, 0xE003, 0xE407, 0xE000, 0xE107, 0xE001, 0xE101, 0xE322, 0xE043,
    ),
    "Celenthyon": (
        CAPITAL, 0xE11C, 0xE002, 0xE167, 0xE002, 0xE107, 0xE124, 0xE000, 0xE004, 0xE307,
    ),
    "Saranelluen": (
        CAPITAL, 0xE126, 0xE003, 0xE147, 0xE003, 0xE107, 0xE002, 0xE467, 0xE005, 0xE002, 0xE307,
    ),
    "Arhyanne": (CAPITAL, 0xE003, 0xE157, 0xE000, 0xE003, 0xE607, 0xE042),
}


@pytest.mark.parametrize("roman,expected", NONMEDIAL_VOWELS.items())
def test_nonmedial_vowels(roman, expected):
    assert transliterate_leading_or_trailing_vowels(roman) == sildish_text(*expected)


@pytest.mark.parametrize("roman,expected", MEDIALS.items())
def test_medials(roman, expected):
    assert transliterate_medials(roman) == sildish_text(*expected)


@pytest.mark.parametrize("roman,expected", WORDS.items())
def test_words(roman, expected):
    assert transliterate(roman) == sildish_text(*expected)


def test_single_consonant_medial_uses_initial_form():
    for phoneme in PHONEMES:
        if phoneme.graphemes.is_vocalic:
            continue
        assert transliterate_medials(phoneme.roman) == phoneme.graphemes.initial


def test_single_consonant_medial_capitalized_uses_final_form():
    for phoneme in PHONEMES:
        if phoneme.graphemes.is_vocalic:
            continue
        assert transliterate_medials(phoneme.roman, is_capitalized=True) == phoneme.graphemes.final


def test_doubled_consonant_medial():
    for phoneme in PHONEMES:
        graphemes = phoneme.graphemes
        if not isinstance(graphemes, ReduplicableConsonant):
            continue
        doubled = phoneme.roman * 2
        assert transliterate_medials(doubled) == graphemes.initial_reduplicated
        assert transliterate_medials(doubled, is_capitalized=True) == graphemes.final_reduplicated


def test_each_phoneme_alone():
    """A lone consonant opens the bar; a lone vowel is written without it."""
    for phoneme in PHONEMES:
        graphemes = phoneme.graphemes
        if graphemes.is_vocalic:
            assert transliterate(phoneme.roman) == graphemes.without_bar
        else:
            assert transliterate(phoneme.roman) == graphemes.initial


def test_each_cluster_alone():
    for cluster in CLUSTERS:
        assert transliterate(cluster.roman) == cluster.graphemes.initial


def test_vowel_word_has_no_bar():
    for vowel in all_vowels():
        assert transliterate(vowel.roman) == vowel.graphemes.without_bar


def test_capitalized_vowel_word_is_medial():
    assert transliterate("Aeo") == sildish_text(CAPITAL, 0xE009, 0xE004)


def test_case_insensitive_after_first_letter():
    assert transliterate("CELENTHYON") == transliterate("Celenthyon")
    assert transliterate("mAnA") == transliterate("mana")


@pytest.mark.parametrize("separator", [" ", "-", "---", ", "])
def test_multiple_words(separator):
    first = transliterate("Celenthyon")
    second = transliterate("oros")
    assert transliterate(f"Celenthyon{separator}oros") == f"{first}{separator}{second}"


def test_sentence():
    expected = " ".join(
        [transliterate("Celenthyon"), sildish_text(0xE041), transliterate("Saranelluen")]
    )
    assert transliterate("Celenthyon i Saranelluen") == expected


def test_empty_string():
    assert transliterate("") == ""


@pytest.mark.parametrize("text", ["123", "—", "  ", "?!", "Ä", "ä", "k"])
def test_non_alphabet_passes_through(text):
    assert transliterate(text) == text


def test_uppercase_non_alphabet_keeps_case():
    """No capital mark for a letter outside the alphabet."""
    assert transliterate("Äma") == "Ä" + transliterate("ma")


def test_punctuation_between_words():
    assert transliterate("(mana).") == "(" + transliterate("mana") + ")."


def test_maximal_munch_prefers_digraphs():
    """'sh' is one phoneme, not 's' followed by 'h'."""
    sh = sildish_text(0xE228, 0xE003)
    assert transliterate("sha") == sh
    assert transliterate("sha") != transliterate("s") + transliterate("ha")


def test_reduplicable_pair_is_not_a_digraph():
    """'ll' counts as two consonants, so the final vowel stays outside the bar."""
    assert transliterate("ella") == sildish_text(0xE042, 0xE567, 0xE043)


@pytest.mark.slow
def test_long_text_matches_word_by_word():
    words = list(WORDS) * 200
    text = " ".join(words)

    assert transliterate(text) == " ".join(transliterate(word) for word in words)
