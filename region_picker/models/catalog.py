from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Subregion:
    identifier: str
    countries: tuple[str, ...] = ()


@dataclass(frozen=True)
class Continent:
    identifier: str
    subregions: tuple[Subregion, ...] = ()

    def countries(self) -> Iterator[str]:
        for subregion in self.subregions:
            yield from subregion.countries


@dataclass(frozen=True)
class Catalog:
    """Continent -> subregion -> country tree, built once at startup."""

    continents: tuple[Continent, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not self.continents

    def subregions(self) -> Iterator[Subregion]:
        for continent in self.continents:
            yield from continent.subregions

    def countries(self) -> Iterator[str]:
        for continent in self.continents:
            yield from continent.countries()
