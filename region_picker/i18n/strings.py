from pydantic import BaseModel

from region_picker.models.display import GroupingMode


class PickerStrings(BaseModel):
    """User-facing labels. Defaults are English; pass a translated instance to localize."""

    current_section: str = "Device Current"
    no_region_selected: str = "No region selected"
    group_by_countries: str = "Country name"
    group_by_continents: str = "Continents"
    group_by_subregions: str = "Subregions"

    model_config = {"frozen": True}

    def grouping_label(self, mode: GroupingMode) -> str:
        if mode == GroupingMode.CONTINENTS:
            return self.group_by_continents
        if mode == GroupingMode.SUBREGIONS:
            return self.group_by_subregions
        return self.group_by_countries
