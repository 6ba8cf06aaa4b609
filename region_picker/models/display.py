from dataclasses import dataclass, replace
from enum import Enum
from typing import NamedTuple, Protocol


class GroupingMode(str, Enum):
    COUNTRIES = "countries"
    CONTINENTS = "continents"
    SUBREGIONS = "subregions"


class MatchRange(NamedTuple):
    """Where a search query was found, in string indices of the resolved title."""

    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length


class TitleResolver(Protocol):
    def resolve_title(self, region_code: str) -> str | None: ...


class DisplayableRegion:
    """Identity and title behaviour shared by items and sections.

    Two displayables are equal iff their ids are equal. Ordering by title is
    locale dependent and lives in Collator, never in the objects themselves.
    """

    id: str
    region_code: str
    title_is_precomputed: bool = False

    def title(self, resolver: TitleResolver) -> str | None:
        if self.title_is_precomputed:
            return self.region_code
        return resolver.resolve_title(self.region_code)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DisplayableRegion):
            return NotImplemented
        return type(self) is type(other) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass(frozen=True, eq=False)
class DisplayItem(DisplayableRegion):
    id: str
    region_code: str
    search_match_range: MatchRange | None = None

    @classmethod
    def for_region(cls, region_code: str) -> "DisplayItem":
        return cls(id=region_code, region_code=region_code)

    def with_match(self, match_range: MatchRange) -> "DisplayItem":
        return replace(self, search_match_range=match_range)


@dataclass(frozen=True, eq=False)
class DisplaySection(DisplayableRegion):
    id: str
    region_code: str
    items: tuple[DisplayItem, ...] = ()
    title_is_precomputed: bool = False

    @classmethod
    def for_region(cls, region_code: str, items) -> "DisplaySection":
        """Section titled by resolving a continent or subregion code."""
        return cls(id=region_code, region_code=region_code, items=tuple(items))

    @classmethod
    def fixed(cls, title: str, items, id: str | None = None) -> "DisplaySection":
        """Section whose title is used verbatim; id defaults to the title."""
        return cls(
            id=title if id is None else id,
            region_code=title,
            items=tuple(items),
            title_is_precomputed=True,
        )
