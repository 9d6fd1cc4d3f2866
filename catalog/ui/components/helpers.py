"""Shared UI helper functions and design tokens for product display."""
from html import escape

from nicegui import ui

from config import CATEGORY_ICONS, DEFAULT_CATEGORY_ICON, IMAGE_ERROR_URL


# ─── Design Tokens ────────────────────────────────────────────────────────────

INPUT_PROPS = "outlined dense"

# Grid of product cards; the marker class is the scroll target
GRID_MARKER = "catalog-grid"
GRID_STYLE = "grid-template-columns: repeat(auto-fill, minmax(240px, 1fr))"

_SCROLL_TO_GRID_JS = (
    "document.querySelector('.%s')?.scrollIntoView({behavior: 'smooth', block: 'start'});"
    % GRID_MARKER
)


def page_header(title: str, subtitle: str | None = None, icon: str | None = None):
    """Render a consistent page title with optional icon + subtitle."""
    with ui.row().classes("items-center gap-3"):
        if icon:
            ui.icon(icon, size="sm").classes("text-accent")
        ui.label(title).classes("text-h5 font-bold")
    if subtitle:
        ui.label(subtitle).classes("text-body2 text-secondary")


def section_header(title: str, icon: str | None = None, subtitle: str | None = None):
    """Render a consistent card section header with accent-colored icon."""
    with ui.row().classes("items-center gap-2 mb-2"):
        if icon:
            ui.icon(icon).classes("text-accent")
        ui.label(title).classes("text-subtitle1 font-bold")
    if subtitle:
        ui.label(subtitle).classes("text-caption text-secondary")


def category_icon(category_name: str | None) -> str:
    """Return the icon for a category name, or the default tag icon."""
    return CATEGORY_ICONS.get(category_name or "", DEFAULT_CATEGORY_ICON)


def format_price(price, na_text: str = "-") -> str:
    """Format a price for display: whole numbers without decimals."""
    if price is None:
        return na_text
    if float(price).is_integer():
        return f"${int(price)}"
    return f"${price:.2f}"


def image_html(
    src: str,
    alt: str,
    classes: str = "",
    style: str = "",
    error_src: str = IMAGE_ERROR_URL,
) -> str:
    """Build an ``<img>`` tag that swaps to *error_src* if loading fails.

    All interpolated values are HTML-escaped.
    """
    return (
        f'<img src="{escape(src)}" alt="{escape(alt or "")}" '
        f'class="{escape(classes)}" style="{escape(style)}" '
        'referrerpolicy="no-referrer" loading="lazy" '
        f"onerror=\"this.onerror=null;this.src='{escape(error_src)}'\">"
    )


def scroll_to_grid():
    """Smooth-scroll the browser to the top of the product grid."""
    ui.run_javascript(_SCROLL_TO_GRID_JS)
