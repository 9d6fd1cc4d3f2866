"""Product summary card component."""
from nicegui import ui

from config import DESCRIPTION_PREVIEW_LENGTH, NO_IMAGE_URL
from catalog.models import Product
from catalog.services.utils import first_valid_image, truncate
from catalog.ui.components.helpers import category_icon, format_price, image_html


def product_card(product: Product, on_open=None):
    """Render a grid card for a single product.

    Args:
        product: The product to display.
        on_open: Optional callback(product_id) fired when the card is clicked.
    """
    image_url = first_valid_image(product.images, NO_IMAGE_URL)
    category_name = product.category_name or "Uncategorized"

    card = ui.card().classes("w-full p-0 gap-0 cursor-pointer overflow-hidden")
    if on_open:
        card.on("click", lambda _, pid=product.id: on_open(pid))

    with card:
        with ui.element("div").classes("relative w-full"):
            ui.html(image_html(
                image_url, product.title,
                classes="w-full object-cover", style="aspect-ratio: 1 / 1",
            )).classes("w-full")
            ui.badge(f"ID: {product.id}", color="primary").classes("absolute top-2 left-2")

        with ui.column().classes("w-full p-4 gap-1"):
            with ui.row().classes("items-center gap-1"):
                ui.icon(category_icon(product.category_name), size="xs").classes("text-accent")
                ui.label(category_name).classes("text-caption text-secondary")
            ui.label(product.title).classes("text-subtitle1 font-bold")
            ui.label(
                truncate(product.description, DESCRIPTION_PREVIEW_LENGTH) or "No description"
            ).classes("text-body2 text-secondary")
            with ui.row().classes("w-full items-center justify-between mt-2"):
                ui.label(format_price(product.price)).classes("text-subtitle1 text-positive font-bold")
                with ui.row().classes("items-center gap-1"):
                    ui.icon("sell", size="xs").classes("text-grey-6")
                    ui.label(f"#{product.id}").classes("text-caption text-grey-6")
