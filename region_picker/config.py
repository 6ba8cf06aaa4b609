from pydantic_settings import BaseSettings

from region_picker.models.display import GroupingMode


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Locale used for titles and collation (CLDR identifier, e.g. "en_US", "fr_FR")
    LOCALE: str = "en_US"
    # Overrides the territory derived from LOCALE as the device's current region
    CURRENT_REGION_CODE: str | None = None
    PIN_CURRENT_REGION: bool = True
    DEFAULT_GROUPING: GroupingMode = GroupingMode.COUNTRIES

    # Catalog
    WORLD_REGION_CODE: str = "001"

    # Sections
    UNKNOWN_SECTION_TITLE: str = "?"
    CURRENT_SECTION_ID: str = "__current_region__"
    SEARCH_SECTION_ID: str = "__search_results__"
    CURRENT_ITEM_SUFFIX: str = "_Current"
    CURRENT_SECTION_MARKER: str = "◆"


settings = Settings()
