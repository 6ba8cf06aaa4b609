"""Region picker state.

One owner mutates the store through set_query() and set_grouping_mode().
Every change recomputes the complete section list synchronously and hands it
to each subscriber; there are no incremental updates.
"""

import logging
from collections.abc import Callable
from typing import NamedTuple

from region_picker.config import settings
from region_picker.engine.grouping import group
from region_picker.engine.pinning import index_titles, pin_current_region
from region_picker.engine.search import search
from region_picker.i18n.collation import Collator
from region_picker.i18n.strings import PickerStrings
from region_picker.models.catalog import Catalog
from region_picker.models.display import DisplayItem, DisplaySection, GroupingMode

logger = logging.getLogger(__name__)

Listener = Callable[[list[DisplaySection]], None]


class GroupingOption(NamedTuple):
    mode: GroupingMode
    label: str
    selected: bool


class RegionPickerStore:
    def __init__(
        self,
        catalog: Catalog,
        collator: Collator,
        grouping: GroupingMode | None = None,
        selected_region_code: str | None = None,
        current_region_code: str | None = None,
        strings: PickerStrings | None = None,
        pin_current: bool | None = None,
    ):
        self.catalog = catalog
        self.collator = collator
        self.strings = strings or PickerStrings()
        self.current_region_code = current_region_code
        self.pin_current = settings.PIN_CURRENT_REGION if pin_current is None else pin_current
        self.selected_region_code = selected_region_code

        self._grouping = grouping or settings.DEFAULT_GROUPING
        self._query: str | None = None
        self._listeners: list[Listener] = []
        self._sections = self._grouped_sections()

    # State

    @property
    def sections(self) -> list[DisplaySection]:
        return list(self._sections)

    @property
    def grouping(self) -> GroupingMode:
        return self._grouping

    @property
    def query(self) -> str | None:
        return self._query

    @property
    def is_search_active(self) -> bool:
        return bool(self._query)

    # Mutators

    def set_query(self, query: str | None) -> None:
        query = query or None
        if query == self._query:
            return
        self._query = query

        if not query:
            self._publish(self._grouped_sections())
            return
        self._publish([search(self.catalog, query, self.collator)])

    def set_grouping_mode(self, mode: GroupingMode) -> None:
        if mode == self._grouping:
            return
        self._grouping = mode
        # Search results don't depend on grouping; the new mode applies once the query clears
        if self.is_search_active:
            return
        self._publish(self._grouped_sections())

    # Queries

    def selected_item_location(self) -> tuple[int, int] | None:
        """(section index, item index) of the selected region, first occurrence."""
        if self.selected_region_code is None:
            return None
        for section_index, section in enumerate(self._sections):
            for item_index, item in enumerate(section.items):
                if item.region_code == self.selected_region_code:
                    return section_index, item_index
        return None

    def is_current_selection(self, item: DisplayItem) -> bool:
        return self.selected_region_code is not None and item.region_code == self.selected_region_code

    def index_titles(self) -> list[str] | None:
        return index_titles(self._sections, self._grouping, self.is_search_active, self.collator)

    def selection_title(self) -> str:
        if self.selected_region_code is None:
            return self.strings.no_region_selected
        title = self.collator.resolver.resolve_title(self.selected_region_code)
        return title or self.selected_region_code

    def grouping_options(self) -> list[GroupingOption]:
        return [
            GroupingOption(mode, self.strings.grouping_label(mode), mode == self._grouping)
            for mode in (GroupingMode.COUNTRIES, GroupingMode.CONTINENTS, GroupingMode.SUBREGIONS)
        ]

    # Observers

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener for new section lists. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # Helpers

    def _grouped_sections(self) -> list[DisplaySection]:
        sections = group(self.catalog, self._grouping, self.collator)
        if self.pin_current:
            sections = pin_current_region(sections, self.current_region_code, self.strings.current_section)
        return sections

    def _publish(self, sections: list[DisplaySection]) -> None:
        self._sections = sections
        for listener in list(self._listeners):
            try:
                listener(self.sections)
            except Exception:
                logger.exception("Section listener %r failed", listener)
