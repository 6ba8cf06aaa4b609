import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from region_picker.api.regions import router as regions_router
from region_picker.config import settings
from region_picker.geo.mappings import validate_no_duplicate_codes
from region_picker.state import get_collator, init_catalog

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting Region Picker (locale=%s)", settings.LOCALE)
    validate_no_duplicate_codes()
    logger.info("Region code validation passed")

    init_catalog()
    get_collator()
    logger.info("Catalog initialized")

    yield


app = FastAPI(
    title="Region Picker",
    description="Region catalog grouping, collation and search",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(regions_router)


@app.get("/health")
async def health():
    return {"status": "ok"}
