from pydantic import BaseModel

from region_picker.models.display import GroupingMode


class MatchRangeResponse(BaseModel):
    start: int
    length: int


class ItemResponse(BaseModel):
    id: str
    region_code: str
    title: str | None
    search_match_range: MatchRangeResponse | None = None
    is_selected: bool = False


class SectionResponse(BaseModel):
    id: str
    region_code: str
    title: str | None
    title_is_precomputed: bool
    items: list[ItemResponse]


class GroupingOptionResponse(BaseModel):
    mode: GroupingMode
    label: str
    selected: bool


class SectionsResponse(BaseModel):
    grouping: GroupingMode
    query: str | None
    sections: list[SectionResponse]
    index_titles: list[str] | None
    selected_location: tuple[int, int] | None
    grouping_options: list[GroupingOptionResponse]


class RegionResponse(BaseModel):
    country_code: str
    title: str | None
    subregion: str
    subregion_title: str | None
    continent: str
    continent_title: str | None
