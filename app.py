"""Catalog Manager - Main entry point."""
import logging

from nicegui import app, ui

from config import APP_TITLE, APP_PORT, APP_HOST, LOG_LEVEL
from catalog.ui.pages.catalog import catalog_page

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@ui.page("/")
def index():
    catalog_page()


@app.get("/_health")
async def health_check():
    return {"status": "ok", "app": "catalog-manager"}


ui.run(
    title=APP_TITLE,
    host=APP_HOST,
    port=APP_PORT,
    reload=False,
    dark=False,
)
