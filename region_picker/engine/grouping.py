"""Grouping Engine.

Slices the catalog into display sections for one grouping mode. Items are
sorted within each section and the section list is sorted by title, so the
construction order of the catalog never leaks into the output.
"""

import logging
from collections.abc import Iterable

from region_picker.config import settings
from region_picker.i18n.collation import Collator, initial
from region_picker.models.catalog import Catalog
from region_picker.models.display import DisplayItem, DisplaySection, GroupingMode

logger = logging.getLogger(__name__)


def group(
    catalog: Catalog,
    mode: GroupingMode,
    collator: Collator,
    unknown_title: str | None = None,
) -> list[DisplaySection]:
    if mode == GroupingMode.CONTINENTS:
        sections = _group_by_continent(catalog, collator)
    elif mode == GroupingMode.SUBREGIONS:
        sections = _group_by_subregion(catalog, collator)
    else:
        sections = _group_by_initial(catalog, collator, unknown_title or settings.UNKNOWN_SECTION_TITLE)

    sections = collator.sort(sections)
    logger.debug("Grouped catalog by %s into %d sections", mode.value, len(sections))
    return sections


def _items(codes: Iterable[str], collator: Collator) -> list[DisplayItem]:
    return collator.sort(DisplayItem.for_region(code) for code in codes)


def _group_by_continent(catalog: Catalog, collator: Collator) -> list[DisplaySection]:
    return [
        DisplaySection.for_region(continent.identifier, _items(continent.countries(), collator))
        for continent in catalog.continents
    ]


def _group_by_subregion(catalog: Catalog, collator: Collator) -> list[DisplaySection]:
    return [
        DisplaySection.for_region(subregion.identifier, _items(subregion.countries, collator))
        for subregion in catalog.subregions()
    ]


def _group_by_initial(catalog: Catalog, collator: Collator, unknown_title: str) -> list[DisplaySection]:
    buckets: dict[str, list[DisplayItem]] = {}
    for code in catalog.countries():
        item = DisplayItem.for_region(code)
        title = collator.title(item)
        key = initial(title) if title else unknown_title
        buckets.setdefault(key, []).append(item)

    return [
        DisplaySection.fixed(key, collator.sort(items))
        for key, items in buckets.items()
    ]
