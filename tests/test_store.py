import pytest

from region_picker.config import settings
from region_picker.i18n.strings import PickerStrings
from region_picker.models.display import DisplayItem, GroupingMode
from region_picker.store import RegionPickerStore


@pytest.fixture
def store(catalog, collator):
    return RegionPickerStore(
        catalog,
        collator,
        grouping=GroupingMode.COUNTRIES,
        selected_region_code="DE",
        current_region_code="FR",
        pin_current=True,
    )


def test_initial_sections_pinned(store):
    sections = store.sections
    assert sections[0].id == settings.CURRENT_SECTION_ID
    assert sections[0].items[0].id == "FR" + settings.CURRENT_ITEM_SUFFIX
    assert [s.region_code for s in sections[1:]] == ["?", "A", "C", "F", "G", "J", "S", "U"]


def test_pinning_can_be_disabled(catalog, collator):
    store = RegionPickerStore(catalog, collator, current_region_code="FR", pin_current=False)
    assert all(s.id != settings.CURRENT_SECTION_ID for s in store.sections)


def test_search_replaces_sections(store):
    store.set_query("ger")

    assert store.is_search_active
    assert len(store.sections) == 1
    assert [item.region_code for item in store.sections[0].items] == ["DE"]
    assert store.index_titles() is None


def test_clearing_query_reverts_to_grouping(store):
    grouped = store.sections
    store.set_query("ger")
    store.set_query("")

    assert not store.is_search_active
    assert store.query is None
    assert [s.id for s in store.sections] == [s.id for s in grouped]


def test_grouping_change(store):
    store.set_grouping_mode(GroupingMode.CONTINENTS)

    assert store.grouping == GroupingMode.CONTINENTS
    assert store.sections[0].id == settings.CURRENT_SECTION_ID
    assert [s.region_code for s in store.sections[1:]] == ["142", "150", "009"]
    assert store.index_titles() is None


def test_grouping_change_during_search_applies_after_clear(store):
    store.set_query("ger")
    store.set_grouping_mode(GroupingMode.SUBREGIONS)
    assert len(store.sections) == 1

    store.set_query(None)
    assert store.sections[1].region_code == "030"


def test_selected_item_location(store):
    # Germany lives under G, after the pinned section and "?", "A", "C", "F"
    assert store.selected_item_location() == (5, 0)

    store.set_query("ger")
    assert store.selected_item_location() == (0, 0)

    store.set_query("japan")
    assert store.selected_item_location() is None


def test_selected_item_location_finds_pinned_first(catalog, collator):
    store = RegionPickerStore(catalog, collator, selected_region_code="FR", current_region_code="FR", pin_current=True)
    assert store.selected_item_location() == (0, 0)


def test_no_selection(catalog, collator):
    store = RegionPickerStore(catalog, collator)
    assert store.selected_item_location() is None
    assert not store.is_current_selection(DisplayItem.for_region("DE"))
    assert store.selection_title() == "No region selected"


def test_is_current_selection_matches_region_code(store):
    assert store.is_current_selection(DisplayItem.for_region("DE"))
    assert store.is_current_selection(DisplayItem(id="DE_Current", region_code="DE"))
    assert not store.is_current_selection(DisplayItem.for_region("FR"))


def test_selection_title(store):
    assert store.selection_title() == "Germany"


def test_grouping_options(store):
    options = store.grouping_options()
    assert [(o.mode, o.selected) for o in options] == [
        (GroupingMode.COUNTRIES, True),
        (GroupingMode.CONTINENTS, False),
        (GroupingMode.SUBREGIONS, False),
    ]
    assert options[0].label == "Country name"


def test_custom_strings(catalog, collator):
    strings = PickerStrings(current_section="Actuel")
    store = RegionPickerStore(catalog, collator, current_region_code="FR", strings=strings, pin_current=True)
    assert collator.title(store.sections[0]) == "Actuel"


def test_listeners_receive_full_sections(store):
    received = []
    store.subscribe(received.append)

    store.set_query("fra")
    store.set_query("fra")
    store.set_grouping_mode(GroupingMode.COUNTRIES)
    store.set_query(None)

    assert len(received) == 2
    assert len(received[0]) == 1
    assert received[1] == store.sections


def test_unsubscribe(store):
    received = []
    unsubscribe = store.subscribe(received.append)
    unsubscribe()
    store.set_query("fra")
    assert received == []


def test_failing_listener_does_not_block_others(store):
    received = []

    def broken(sections):
        raise RuntimeError("boom")

    store.subscribe(broken)
    store.subscribe(received.append)
    store.set_grouping_mode(GroupingMode.SUBREGIONS)

    assert len(received) == 1
