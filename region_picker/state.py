"""Process-wide catalog and locale collaborators for the HTTP app."""

import logging
from functools import lru_cache

from region_picker.config import settings
from region_picker.engine.catalog import build_catalog, validate_catalog
from region_picker.geo.provider import RegionRelationshipProvider, StaticRegionProvider
from region_picker.i18n.collation import Collator
from region_picker.i18n.titles import BabelTitleResolver, DeviceRegionSource
from region_picker.models.catalog import Catalog

logger = logging.getLogger(__name__)

_catalog: Catalog | None = None


def init_catalog(provider: RegionRelationshipProvider | None = None) -> Catalog:
    """Build and validate the catalog once. Called from the app lifespan."""
    global _catalog
    provider = provider or StaticRegionProvider()
    catalog = build_catalog(provider.list_regions())
    validate_catalog(catalog)
    _catalog = catalog
    return catalog


def get_catalog() -> Catalog:
    if _catalog is None:
        logger.info("Catalog requested before startup, building it now")
        return init_catalog()
    return _catalog


@lru_cache(maxsize=1)
def get_collator() -> Collator:
    return Collator(BabelTitleResolver(settings.LOCALE))


def get_device_region() -> DeviceRegionSource:
    return DeviceRegionSource(settings.LOCALE)
