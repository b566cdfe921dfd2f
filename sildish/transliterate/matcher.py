"""Maximal-munch matching of Roman runs against the transliteration tree."""

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from sildish.models import PhonemeData
from sildish.tree.prefix_tree import PrefixTree


class UnmatchedRegionError(ValueError):
    """A region starts with a character that has no catalog entry."""


@dataclass(frozen=True)
class Match:
    """One phoneme matched in a region."""

    phoneme: PhonemeData
    is_first: bool
    is_last: bool


def iter_matches(
    region: Iterable[str],
    longest: int,
    tree: PrefixTree[str, PhonemeData],
) -> Iterator[Match]:
    """
    Segment `region` into phonemes, always taking the longest key available.

    The lookahead buffer holds up to `longest` characters. Near the end of the
    region it may run short, which only means no longer key can remain.

    Args:
        region: Lowercase Roman characters to segment
        longest: Length of the longest key worth probing
        tree: Transliteration tree

    Yields:
        Matches in order; `is_first` marks the first, `is_last` the final one

    Raises:
        UnmatchedRegionError: if no key matches at some position
    """
    chars = iter(region)
    buffer: deque[str] = deque()

    def refill() -> None:
        while len(buffer) < longest:
            char = next(chars, None)
            if char is None:
                return
            buffer.append(char)

    refill()
    first = True
    while buffer:
        found = tree.all_payloads_along(buffer)
        if not found or found[-1].position == 0:
            raise UnmatchedRegionError(f"No catalog entry matches {''.join(buffer)!r}")
        best = found[-1]
        for _ in range(best.position):
            buffer.popleft()
        refill()
        yield Match(best.payload, is_first=first, is_last=not buffer)
        first = False
