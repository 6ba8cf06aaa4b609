"""Shared fixtures: a small catalog with fixed English titles.

"XA" deliberately shares its folded title with "AX" ("Åland Islands") to
exercise diacritic ties, and "ZZ" has no title at all.
"""

import pytest

from region_picker.engine.catalog import build_catalog
from region_picker.geo.provider import StaticRegionProvider
from region_picker.i18n.collation import Collator
from region_picker.i18n.titles import StaticTitleResolver

TITLES = {
    "001": "World",
    "150": "Europe",
    "142": "Asia",
    "009": "Oceania",
    "155": "Western Europe",
    "154": "Northern Europe",
    "030": "Eastern Asia",
    "145": "Western Asia",
    "QO": "Outlying Oceania",
    "FR": "France",
    "DE": "Germany",
    "AT": "Austria",
    "AX": "Åland Islands",
    "XA": "Aland Islands",
    "SE": "Sweden",
    "JP": "Japan",
    "CN": "China",
    "AE": "United Arab Emirates",
    "EU": "Europe",
    "EU-W": "Western Europe",
}

CONTINENTS = {
    "150": ["155", "154"],
    "142": ["030", "145"],
    "009": ["QO"],
}

SUBREGIONS = {
    "155": ["FR", "DE", "AT"],
    "154": ["AX", "XA", "SE"],
    "030": ["JP", "CN"],
    "145": ["AE"],
    "QO": ["ZZ"],
}

ALL_COUNTRIES = {code for codes in SUBREGIONS.values() for code in codes}


@pytest.fixture
def collator():
    return Collator(StaticTitleResolver(TITLES))


@pytest.fixture
def catalog():
    return build_catalog(StaticRegionProvider(CONTINENTS, SUBREGIONS).list_regions())


@pytest.fixture
def europe_catalog():
    """Continent "EU" with subregion "EU-W" holding France and Germany."""
    provider = StaticRegionProvider({"EU": ["EU-W"]}, {"EU-W": ["FR", "DE"]})
    return build_catalog(provider.list_regions())
