"""Region relationship providers.

A provider reports every region code it knows together with the continent
that contains it (None for continents and the world) and the codes it
directly contains. The catalog builder is the only consumer.
"""

import logging
from typing import Protocol

from pydantic import BaseModel

from region_picker.geo import mappings

logger = logging.getLogger(__name__)


class RegionRelationship(BaseModel):
    code: str
    parent_continent: str | None = None
    child_codes: frozenset[str] = frozenset()

    model_config = {"frozen": True}


class RegionRelationshipProvider(Protocol):
    def list_regions(self) -> list[RegionRelationship]: ...


class StaticRegionProvider:
    """Serves the bundled UN M.49 containment table."""

    def __init__(
        self,
        continents: dict[str, list[str]] | None = None,
        subregions: dict[str, list[str]] | None = None,
        world: str = mappings.WORLD,
    ):
        self.continents = mappings.CONTINENTS if continents is None else continents
        self.subregions = mappings.SUBREGIONS if subregions is None else subregions
        self.world = world

    def list_regions(self) -> list[RegionRelationship]:
        regions = [RegionRelationship(code=self.world, child_codes=frozenset(self.continents))]

        for continent, subregion_codes in self.continents.items():
            regions.append(RegionRelationship(code=continent, child_codes=frozenset(subregion_codes)))
            for subregion in subregion_codes:
                countries = self.subregions.get(subregion, [])
                regions.append(
                    RegionRelationship(
                        code=subregion,
                        parent_continent=continent,
                        child_codes=frozenset(countries),
                    )
                )
                for country in countries:
                    regions.append(RegionRelationship(code=country, parent_continent=continent))

        logger.debug("Static provider listed %d regions", len(regions))
        return regions
