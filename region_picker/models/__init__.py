from region_picker.models.catalog import Catalog, Continent, Subregion
from region_picker.models.display import (
    DisplayableRegion,
    DisplayItem,
    DisplaySection,
    GroupingMode,
    MatchRange,
    TitleResolver,
)

__all__ = [
    "Catalog",
    "Continent",
    "Subregion",
    "DisplayableRegion",
    "DisplayItem",
    "DisplaySection",
    "GroupingMode",
    "MatchRange",
    "TitleResolver",
]
