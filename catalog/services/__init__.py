"""Services package."""
from catalog.services.catalog_client import CatalogClient, CatalogError, NetworkError, ValidationError
from catalog.services.catalog_state import CatalogState
from catalog.services.csv_exporter import export_csv, export_filename
from catalog.services.drafts import build_draft, form_from_product
from catalog.services.pipeline import PipelineResult, apply, build_criteria, page_window
from catalog.services.utils import first_valid_image, is_valid_url, parse_image_urls, parse_number, truncate

__all__ = [
    "CatalogClient",
    "CatalogError",
    "NetworkError",
    "ValidationError",
    "CatalogState",
    "export_csv",
    "export_filename",
    "build_draft",
    "form_from_product",
    "PipelineResult",
    "apply",
    "build_criteria",
    "page_window",
    "first_valid_image",
    "is_valid_url",
    "parse_image_urls",
    "parse_number",
    "truncate",
]
