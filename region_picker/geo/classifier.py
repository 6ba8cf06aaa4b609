from region_picker.models.catalog import Catalog


def classify_country(catalog: Catalog, country_code: str) -> dict[str, str | None]:
    """Find the continent and subregion a country code sits under.

    Returns dict with country_code, subregion and continent; the latter two
    are None when the catalog doesn't contain the country.
    """
    code = country_code.upper().strip()
    for continent in catalog.continents:
        for subregion in continent.subregions:
            if code in subregion.countries:
                return {
                    "country_code": code,
                    "subregion": subregion.identifier,
                    "continent": continent.identifier,
                }
    return {"country_code": code, "subregion": None, "continent": None}
