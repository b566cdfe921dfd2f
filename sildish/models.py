"""Data models for the Sildish phoneme catalog."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar


class GraphemeKind(str, Enum):
    """Kind of grapheme set attached to a phoneme."""

    VOWEL = "VOWEL"
    DIPHTHONG = "DIPHTHONG"
    CONSONANT = "CONSONANT"
    REDUPLICABLE_CONSONANT = "REDUPLICABLE_CONSONANT"


@dataclass(frozen=True)
class Vowel:
    """A simple vowel.

    `standard` carries a full bar; `without_bar` is used for leading and
    trailing vowels.
    """

    standard: str
    without_bar: str

    kind: ClassVar[GraphemeKind] = GraphemeKind.VOWEL

    @property
    def is_vocalic(self) -> bool:
        return True

    def variants(self) -> dict[str, str]:
        return {"standard": self.standard, "without_bar": self.without_bar}


@dataclass(frozen=True)
class Diphthong:
    """A diphthong, rendered like a vowel."""

    standard: str
    without_bar: str

    kind: ClassVar[GraphemeKind] = GraphemeKind.DIPHTHONG

    @property
    def is_vocalic(self) -> bool:
        return True

    def variants(self) -> dict[str, str]:
        return {"standard": self.standard, "without_bar": self.without_bar}


@dataclass(frozen=True)
class Consonant:
    """A nonreduplicable consonant.

    `initial` has the bar to the right of the tether, `final` to the left.
    """

    standard: str
    initial: str
    final: str

    kind: ClassVar[GraphemeKind] = GraphemeKind.CONSONANT

    @property
    def is_vocalic(self) -> bool:
        return False

    def variants(self) -> dict[str, str]:
        return {"standard": self.standard, "initial": self.initial, "final": self.final}


@dataclass(frozen=True)
class ReduplicableConsonant:
    """A consonant that has a distinct doubled form."""

    standard: str
    initial: str
    final: str
    reduplicated: str
    initial_reduplicated: str
    final_reduplicated: str

    kind: ClassVar[GraphemeKind] = GraphemeKind.REDUPLICABLE_CONSONANT

    @property
    def is_vocalic(self) -> bool:
        return False

    def nonreduplicated(self) -> Consonant:
        """Drop the doubled variants, keeping the single-occurrence glyphs."""
        return Consonant(standard=self.standard, initial=self.initial, final=self.final)

    def variants(self) -> dict[str, str]:
        return {
            "standard": self.standard,
            "initial": self.initial,
            "final": self.final,
            "reduplicated": self.reduplicated,
            "initial_reduplicated": self.initial_reduplicated,
            "final_reduplicated": self.final_reduplicated,
        }


GraphemeSet = Vowel | Diphthong | Consonant | ReduplicableConsonant


@dataclass(frozen=True)
class PhonemeData:
    """A phoneme (or cluster) with its Roman spelling, IPA and glyphs."""

    roman: str
    pronunciation: str
    graphemes: GraphemeSet

    @property
    def kind(self) -> GraphemeKind:
        return self.graphemes.kind

    def __str__(self) -> str:
        return f"{self.roman} /{self.pronunciation}/"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "roman": self.roman,
            "pronunciation": self.pronunciation,
            "kind": self.kind.value,
            "glyphs": {
                name: code_points(glyph)
                for name, glyph in self.graphemes.variants().items()
            },
        }


def code_points(glyph: str) -> list[str]:
    """Render a glyph string as a list of U+XXXX code point labels."""
    return [f"U+{ord(char):04X}" for char in glyph]
