"""Diacritic-insensitive comparison, sorting and substring search.

Titles are folded by NFKD decomposition with combining marks dropped, so
"Åland" and "Aland" compare equal. Case is ignored for the primary
comparison and only breaks ties between otherwise equal titles.
"""

import unicodedata
from collections.abc import Iterable
from functools import cmp_to_key
from typing import TypeVar

from region_picker.models.display import DisplayableRegion, MatchRange, TitleResolver

T = TypeVar("T", bound=DisplayableRegion)

# Letters with overlaid strokes have no canonical decomposition
_STROKED_LETTERS = str.maketrans({
    "Ø": "O", "ø": "o",
    "Ł": "L", "ł": "l",
    "Đ": "D", "đ": "d",
    "Ħ": "H", "ħ": "h",
    "Ŧ": "T", "ŧ": "t",
})


def fold_diacritics(text: str) -> str:
    """Strip diacritics, e.g. "Côte d’Ivoire" -> "Cote d’Ivoire"."""
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.translate(_STROKED_LETTERS)


def _cmp(a: str, b: str) -> int:
    return (a > b) - (a < b)


def compare(a: str, b: str) -> int:
    """Compare two strings ignoring diacritics. Returns -1, 0 or 1."""
    folded_a, folded_b = fold_diacritics(a), fold_diacritics(b)
    primary_a, primary_b = folded_a.casefold(), folded_b.casefold()
    if primary_a != primary_b:
        return _cmp(primary_a, primary_b)
    return _cmp(folded_a, folded_b)


def _folded_with_offsets(text: str) -> tuple[str, list[int]]:
    """Fold text for matching, remembering which source index each folded char came from."""
    pieces: list[str] = []
    offsets: list[int] = []
    for index, char in enumerate(text):
        for piece in fold_diacritics(char).casefold():
            pieces.append(piece)
            offsets.append(index)
    return "".join(pieces), offsets


def find(title: str, query: str) -> MatchRange | None:
    """Locate query in title, ignoring case and diacritics.

    The returned range indexes the original title and covers any combining
    marks that trail the last matched character.
    """
    folded_query = fold_diacritics(query).casefold()
    if not folded_query:
        return None
    folded_title, offsets = _folded_with_offsets(title)
    position = folded_title.find(folded_query)
    if position < 0:
        return None

    start = offsets[position]
    end = offsets[position + len(folded_query) - 1] + 1
    while end < len(title) and not fold_diacritics(title[end]):
        end += 1
    return MatchRange(start, end - start)


def initial(title: str) -> str:
    """First character of a title with its diacritics folded away ("Å" -> "A")."""
    first = title[:1]
    return fold_diacritics(first)[:1] or first


class Collator:
    """Title-aware ordering for display items and sections."""

    def __init__(self, resolver: TitleResolver):
        self.resolver = resolver

    def title(self, entry: DisplayableRegion) -> str | None:
        return entry.title(self.resolver)

    def sort(self, entries: Iterable[T]) -> list[T]:
        """Stable sort by title.

        Entries without a title are never compared; they keep their original
        positions and the titled entries are sorted around them.
        """
        decorated = [(self.title(entry), entry) for entry in entries]
        titled = [pair for pair in decorated if pair[0] is not None]
        titled.sort(key=cmp_to_key(lambda a, b: compare(a[0], b[0])))

        ordered = iter(entry for _, entry in titled)
        return [entry if title is None else next(ordered) for title, entry in decorated]
