"""Current-region pinning and the section index for letter grouping."""

from region_picker.config import settings
from region_picker.i18n.collation import Collator
from region_picker.models.display import DisplayItem, DisplaySection, GroupingMode


def pin_current_region(
    sections: list[DisplaySection],
    current_region_code: str | None,
    label: str,
    section_id: str | None = None,
    item_suffix: str | None = None,
) -> list[DisplaySection]:
    """Prepend a section holding the current region.

    The pinned item's id gets a suffix because the same country is also
    listed in its regular section and ids must be unique across the list.
    """
    if not current_region_code:
        return list(sections)

    suffix = settings.CURRENT_ITEM_SUFFIX if item_suffix is None else item_suffix
    item = DisplayItem(id=current_region_code + suffix, region_code=current_region_code)
    pinned = DisplaySection.fixed(label, [item], id=section_id or settings.CURRENT_SECTION_ID)
    return [pinned, *sections]


def index_titles(
    sections: list[DisplaySection],
    mode: GroupingMode,
    is_search_active: bool,
    collator: Collator,
    current_section_id: str | None = None,
    marker: str | None = None,
) -> list[str] | None:
    """Single-character index labels, or None when an index makes no sense.

    Continents and subregions don't have unique first characters, and a
    search shows a single section.
    """
    if mode != GroupingMode.COUNTRIES or is_search_active:
        return None

    current_section_id = current_section_id or settings.CURRENT_SECTION_ID
    marker = marker or settings.CURRENT_SECTION_MARKER

    titles: list[str] = []
    for section in sections:
        title = collator.title(section)
        if title is None:
            continue
        if section.id == current_section_id:
            titles.insert(0, marker)
        elif title:
            titles.append(title[0])
    return titles
