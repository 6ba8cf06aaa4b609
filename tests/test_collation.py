from region_picker.i18n.collation import Collator, compare, find, fold_diacritics, initial
from region_picker.i18n.titles import StaticTitleResolver
from region_picker.models.display import DisplayItem, MatchRange


def test_fold_removes_diacritics():
    assert fold_diacritics("Côte d’Ivoire") == "Cote d’Ivoire"
    assert fold_diacritics("São Tomé & Príncipe") == "Sao Tome & Principe"
    assert fold_diacritics("Curaçao") == "Curacao"


def test_fold_stroked_letters():
    assert fold_diacritics("Øresund") == "Oresund"
    assert fold_diacritics("Łódź") == "Lodz"


def test_diacritics_compare_equal():
    assert compare("Åland", "Aland") == 0
    assert compare("Réunion", "Reunion") == 0


def test_alphabetical_order():
    assert compare("Åland", "Belgium") == -1
    assert compare("Belgium", "Åland") == 1
    assert compare("Zambia", "Égypt") == 1


def test_case_only_breaks_ties():
    assert compare("aland", "Belgium") == -1
    assert compare("Aland", "aland") == -1


def test_untitled_entries_keep_their_positions():
    collator = Collator(StaticTitleResolver({"AA": "Zed", "ZB": "Alpha", "CC": "Mid"}))
    items = [DisplayItem.for_region(code) for code in ("AA", "MM", "CC", "NN", "ZB")]
    ordered = [item.region_code for item in collator.sort(items)]
    assert ordered == ["ZB", "MM", "CC", "NN", "AA"]


def test_find_prefix():
    assert find("France", "fra") == MatchRange(0, 3)
    assert find("Germany", "GER") == MatchRange(0, 3)


def test_find_inside_word():
    assert find("Côte d’Ivoire", "ivo") == MatchRange(7, 3)
    assert find("United Arab Emirates", "arab") == MatchRange(7, 4)


def test_find_ignores_diacritics_both_ways():
    assert find("Côte d’Ivoire", "cote") == MatchRange(0, 4)
    assert find("Reunion", "Réu") == MatchRange(0, 3)


def test_find_covers_trailing_combining_marks():
    # "Côte" written with a combining circumflex
    assert find("Co\u0302te", "co") == MatchRange(0, 3)


def test_find_no_match():
    assert find("France", "ger") is None
    assert find("France", "") is None


def test_initial_folds_first_character():
    assert initial("Åland Islands") == "A"
    assert initial("Égypt") == "E"
    assert initial("France") == "F"


def test_collator_sort_is_stable_for_ties():
    collator = Collator(StaticTitleResolver({"AX": "Åland", "XA": "Aland", "BE": "Belgium"}))
    items = [DisplayItem.for_region(code) for code in ("BE", "XA", "AX")]
    ordered = [item.region_code for item in collator.sort(items)]
    assert ordered == ["XA", "AX", "BE"]
