"""Catalog Builder.

Turns the provider's flat relationship dump into a continent -> subregion ->
country tree. Titles and ordering are left to the grouping engine.
"""

import logging
from collections.abc import Iterable

from region_picker.config import settings
from region_picker.geo.provider import RegionRelationship
from region_picker.models.catalog import Catalog, Continent, Subregion

logger = logging.getLogger(__name__)


def build_catalog(
    regions: Iterable[RegionRelationship],
    world_code: str | None = None,
) -> Catalog:
    """Build the catalog from every region the provider reports.

    Regions without a parent continent are continents and list subregions as
    children. Regions with a parent continent and children are subregions and
    list countries. Countries themselves contribute nothing on their own.
    """
    world_code = world_code or settings.WORLD_REGION_CODE
    continent_relationships: dict[str, frozenset[str]] = {}
    subregion_relationships: dict[str, frozenset[str]] = {}

    for region in regions:
        if region.code == world_code:
            continue
        if region.parent_continent is None:
            continent_relationships[region.code] = region.child_codes
        elif region.child_codes:
            subregion_relationships[region.code] = region.child_codes

    continents: list[Continent] = []
    for continent_code, subregion_codes in continent_relationships.items():
        subregions = tuple(
            Subregion(
                identifier=code,
                countries=tuple(sorted(subregion_relationships.get(code, frozenset()))),
            )
            for code in sorted(subregion_codes)
        )
        continents.append(Continent(identifier=continent_code, subregions=subregions))

    catalog = Catalog(continents=tuple(continents))
    if catalog.is_empty:
        logger.warning("Region provider returned no continents, catalog is empty")
    else:
        logger.info(
            "Built catalog: %d continents, %d subregions, %d countries",
            len(catalog.continents),
            sum(1 for _ in catalog.subregions()),
            sum(1 for _ in catalog.countries()),
        )
    return catalog


def validate_catalog(catalog: Catalog) -> None:
    """Raise ValueError if a country or subregion is reachable by more than one path."""
    subregion_parents: dict[str, str] = {}
    country_parents: dict[str, str] = {}

    for continent in catalog.continents:
        for subregion in continent.subregions:
            if subregion.identifier in subregion_parents:
                raise ValueError(
                    f"Subregion '{subregion.identifier}' found in "
                    f"'{subregion_parents[subregion.identifier]}' and '{continent.identifier}'"
                )
            subregion_parents[subregion.identifier] = continent.identifier

            for country in subregion.countries:
                if country in country_parents:
                    raise ValueError(
                        f"Country '{country}' found in "
                        f"'{country_parents[country]}' and '{subregion.identifier}'"
                    )
                country_parents[country] = subregion.identifier
