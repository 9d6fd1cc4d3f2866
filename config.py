"""Application configuration."""
import os

from dotenv import load_dotenv

load_dotenv()

# Remote catalog service
API_BASE_URL = os.getenv("CATALOG_API_BASE_URL", "https://api.escuelajs.co/api/v1").rstrip("/")
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "15"))

# Pagination
DEFAULT_PAGE_SIZE = 20
PAGE_SIZE_OPTIONS = {10: "10 / page", 20: "20 / page", 50: "50 / page", 100: "100 / page"}
MAX_VISIBLE_PAGES = 5

# Placeholder images
NO_IMAGE_URL = "https://via.placeholder.com/400x400?text=No+Image"
IMAGE_ERROR_URL = "https://via.placeholder.com/400x400?text=Image+Error"
THUMBNAIL_ERROR_URL = "https://via.placeholder.com/80x80?text=Error"
# Sent to the service when a form carries no valid image URL
UPLOAD_PLACEHOLDER_URL = "https://i.imgur.com/placeholder.jpg"

# Category name -> Material icon shown on product cards
CATEGORY_ICONS: dict[str, str] = {
    "Clothes": "checkroom",
    "Electronics": "laptop",
    "Furniture": "chair",
    "Shoes": "ice_skating",
    "Miscellaneous": "inventory_2",
}
DEFAULT_CATEGORY_ICON = "sell"

DEFAULT_DESCRIPTION = "No description"
DESCRIPTION_PREVIEW_LENGTH = 100

# App settings
APP_TITLE = "Catalog Manager"
APP_PORT = 8080
APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
