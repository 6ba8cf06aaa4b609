from fastapi import APIRouter, Depends, HTTPException, Query

from region_picker.geo.classifier import classify_country
from region_picker.i18n.collation import Collator
from region_picker.i18n.titles import DeviceRegionSource
from region_picker.models.catalog import Catalog
from region_picker.models.display import DisplaySection, GroupingMode
from region_picker.schemas.region import (
    GroupingOptionResponse,
    ItemResponse,
    MatchRangeResponse,
    RegionResponse,
    SectionResponse,
    SectionsResponse,
)
from region_picker.state import get_catalog, get_collator, get_device_region
from region_picker.store import RegionPickerStore

router = APIRouter(prefix="/regions", tags=["regions"])


def _section_response(section: DisplaySection, store: RegionPickerStore) -> SectionResponse:
    collator = store.collator
    return SectionResponse(
        id=section.id,
        region_code=section.region_code,
        title=collator.title(section),
        title_is_precomputed=section.title_is_precomputed,
        items=[
            ItemResponse(
                id=item.id,
                region_code=item.region_code,
                title=collator.title(item),
                search_match_range=(
                    MatchRangeResponse(start=item.search_match_range.start, length=item.search_match_range.length)
                    if item.search_match_range
                    else None
                ),
                is_selected=store.is_current_selection(item),
            )
            for item in section.items
        ],
    )


@router.get("/sections", response_model=SectionsResponse)
async def list_sections(
    grouping: GroupingMode = Query(GroupingMode.COUNTRIES, description="How to group countries"),
    q: str | None = Query(None, description="Search query; empty shows grouped sections"),
    selected: str | None = Query(None, description="Currently selected region code"),
    catalog: Catalog = Depends(get_catalog),
    collator: Collator = Depends(get_collator),
    device_region: DeviceRegionSource = Depends(get_device_region),
):
    store = RegionPickerStore(
        catalog,
        collator,
        grouping=grouping,
        selected_region_code=selected.upper() if selected else None,
        current_region_code=device_region.current_region_code(),
    )
    store.set_query(q)

    return SectionsResponse(
        grouping=store.grouping,
        query=store.query,
        sections=[_section_response(section, store) for section in store.sections],
        index_titles=store.index_titles(),
        selected_location=store.selected_item_location(),
        grouping_options=[GroupingOptionResponse(**option._asdict()) for option in store.grouping_options()],
    )


@router.get("/{code}", response_model=RegionResponse)
async def get_region(
    code: str,
    catalog: Catalog = Depends(get_catalog),
    collator: Collator = Depends(get_collator),
):
    path = classify_country(catalog, code)
    if path["continent"] is None or path["subregion"] is None:
        raise HTTPException(status_code=404, detail="Region not found")

    resolve = collator.resolver.resolve_title
    return RegionResponse(
        country_code=path["country_code"],
        title=resolve(path["country_code"]),
        subregion=path["subregion"],
        subregion_title=resolve(path["subregion"]),
        continent=path["continent"],
        continent_title=resolve(path["continent"]),
    )
