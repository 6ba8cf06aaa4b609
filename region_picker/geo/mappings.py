"""UN M.49 / CLDR region containment.

World -> continents -> subregions -> countries. Every country code must
appear under exactly one subregion, and every subregion under exactly one
continent. Validated at startup via validate_no_duplicate_codes().
"""

WORLD = "001"

CONTINENTS: dict[str, list[str]] = {
    "002": ["015", "011", "017", "014", "018"],  # Africa
    "019": ["021", "013", "029", "005"],  # Americas
    "142": ["143", "030", "034", "035", "145"],  # Asia
    "150": ["151", "154", "039", "155"],  # Europe
    "009": ["053", "054", "057", "061", "QO"],  # Oceania
}

SUBREGIONS: dict[str, list[str]] = {
    # Africa
    "015": ["DZ", "EA", "EG", "EH", "IC", "LY", "MA", "SD", "TN"],
    "011": [
        "BF", "BJ", "CI", "CV", "GH", "GM", "GN", "GW", "LR",
        "ML", "MR", "NE", "NG", "SH", "SL", "SN", "TG",
    ],
    "017": ["AO", "CD", "CF", "CG", "CM", "GA", "GQ", "ST", "TD"],
    "014": [
        "BI", "DJ", "ER", "ET", "IO", "KE", "KM", "MG", "MU", "MW", "MZ",
        "RE", "RW", "SC", "SO", "SS", "TF", "TZ", "UG", "YT", "ZM", "ZW",
    ],
    "018": ["BW", "LS", "NA", "SZ", "ZA"],
    # Americas
    "021": ["BM", "CA", "GL", "PM", "US"],
    "013": ["BZ", "CR", "GT", "HN", "MX", "NI", "PA", "SV"],
    "029": [
        "AG", "AI", "AW", "BB", "BL", "BQ", "BS", "CU", "CW", "DM", "DO", "GD", "GP",
        "HT", "JM", "KN", "KY", "LC", "MF", "MQ", "MS", "PR", "SX", "TC", "TT", "VC",
        "VG", "VI",
    ],
    "005": ["AR", "BO", "BR", "BV", "CL", "CO", "EC", "FK", "GF", "GS", "GY", "PE", "PY", "SR", "UY", "VE"],
    # Asia
    "143": ["KG", "KZ", "TJ", "TM", "UZ"],
    "030": ["CN", "HK", "JP", "KP", "KR", "MN", "MO", "TW"],
    "034": ["AF", "BD", "BT", "IN", "IR", "LK", "MV", "NP", "PK"],
    "035": ["BN", "ID", "KH", "LA", "MM", "MY", "PH", "SG", "TH", "TL", "VN"],
    "145": [
        "AE", "AM", "AZ", "BH", "CY", "GE", "IL", "IQ", "JO",
        "KW", "LB", "OM", "PS", "QA", "SA", "SY", "TR", "YE",
    ],
    # Europe
    "151": ["BG", "BY", "CZ", "HU", "MD", "PL", "RO", "RU", "SK", "UA"],
    "154": ["AX", "CQ", "DK", "EE", "FI", "FO", "GB", "GG", "IE", "IM", "IS", "JE", "LT", "LV", "NO", "SE", "SJ"],
    "039": ["AD", "AL", "BA", "ES", "GI", "GR", "HR", "IT", "ME", "MK", "MT", "PT", "RS", "SI", "SM", "VA", "XK"],
    "155": ["AT", "BE", "CH", "DE", "FR", "LI", "LU", "MC", "NL"],
    # Oceania
    "053": ["AU", "CC", "CX", "HM", "NF", "NZ"],
    "054": ["FJ", "NC", "PG", "SB", "VU"],
    "057": ["FM", "GU", "KI", "MH", "MP", "NR", "PW", "UM"],
    "061": ["AS", "CK", "NU", "PF", "PN", "TK", "TO", "TV", "WF", "WS"],
    "QO": ["AC", "AQ", "CP", "DG", "TA"],
}


def _build_subregion_to_continent() -> dict[str, str]:
    mapping: dict[str, str] = {}
    for continent, subregions in CONTINENTS.items():
        for subregion in subregions:
            mapping[subregion] = continent
    return mapping


SUBREGION_TO_CONTINENT: dict[str, str] = _build_subregion_to_continent()


def validate_no_duplicate_codes() -> None:
    """Raise ValueError if a code is contained by more than one parent."""
    seen: dict[str, str] = {}
    all_entries: list[tuple[str, str]] = []

    for continent, subregions in CONTINENTS.items():
        for subregion in subregions:
            all_entries.append((subregion, continent))
    for subregion, codes in SUBREGIONS.items():
        for code in codes:
            all_entries.append((code, subregion))

    for code, parent in all_entries:
        if code in seen:
            raise ValueError(
                f"Duplicate region code '{code}': found in '{seen[code]}' and '{parent}'"
            )
        seen[code] = parent

    orphaned = set(SUBREGIONS) - set(SUBREGION_TO_CONTINENT)
    if orphaned:
        raise ValueError(f"Subregions without a continent: {sorted(orphaned)}")
