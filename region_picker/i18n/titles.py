"""Region titles and the device's current region.

Locale data enters the system only through the classes in this module; pass
a StaticTitleResolver to pin titles for tests or embedding.
"""

import logging
from functools import lru_cache

from babel import Locale, UnknownLocaleError

from region_picker.config import settings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _parse_locale(identifier: str) -> Locale:
    try:
        return Locale.parse(identifier.replace("-", "_"))
    except (UnknownLocaleError, ValueError) as exc:
        raise ValueError(f"Unknown locale '{identifier}'") from exc


class BabelTitleResolver:
    """Resolve region codes to CLDR territory names for one locale."""

    def __init__(self, locale: str | None = None):
        self.locale = locale or settings.LOCALE
        self._territories = dict(_parse_locale(self.locale).territories)
        logger.info("Loaded %d territory names for locale %s", len(self._territories), self.locale)

    def resolve_title(self, region_code: str) -> str | None:
        return self._territories.get(region_code)


class StaticTitleResolver:
    def __init__(self, titles: dict[str, str]):
        self.titles = dict(titles)

    def resolve_title(self, region_code: str) -> str | None:
        return self.titles.get(region_code)


class DeviceRegionSource:
    """Current device region: explicit override first, then the locale's territory."""

    def __init__(self, locale: str | None = None, override: str | None = None):
        self.locale = locale or settings.LOCALE
        self.override = override if override is not None else settings.CURRENT_REGION_CODE

    def current_region_code(self) -> str | None:
        if self.override:
            return self.override.upper()
        return _parse_locale(self.locale).territory
