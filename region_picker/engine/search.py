"""Search Engine.

Substring containment only: case and diacritics are ignored, word
boundaries are not, and there is no typo tolerance.
"""

import logging

from region_picker.config import settings
from region_picker.i18n.collation import Collator, find
from region_picker.models.catalog import Catalog
from region_picker.models.display import DisplayItem, DisplaySection, MatchRange

logger = logging.getLogger(__name__)


def search(
    catalog: Catalog,
    query: str,
    collator: Collator,
    section_id: str | None = None,
) -> DisplaySection:
    """Return one untitled section with every country whose title contains query.

    Callers revert to grouped sections for an empty query instead of calling this.
    """
    if not query:
        raise ValueError("search() requires a non-empty query")

    matches: list[DisplayItem] = []
    for code in catalog.countries():
        item = DisplayItem.for_region(code)
        title = collator.title(item)
        if title is None:
            continue
        match_range = find(title, query)
        if match_range is None:
            continue
        matches.append(item.with_match(match_range))

    logger.debug("Search %r matched %d countries", query, len(matches))
    return DisplaySection.fixed(
        "",
        collator.sort(matches),
        id=section_id or settings.SEARCH_SECTION_ID,
    )


def highlight(title: str, match_range: MatchRange | None) -> list[tuple[str, bool]]:
    """Split a title into (text, is_match) segments for rendering a search hit."""
    if match_range is None or match_range.length <= 0:
        return [(title, False)]

    segments = [
        (title[:match_range.start], False),
        (title[match_range.start:match_range.end], True),
        (title[match_range.end:], False),
    ]
    return [segment for segment in segments if segment[0]]
