"""Detail, create and edit dialogs for a single product."""
from nicegui import ui

from config import NO_IMAGE_URL, THUMBNAIL_ERROR_URL
from catalog.models import Product, ProductForm
from catalog.services.utils import first_valid_image
from catalog.ui.components.helpers import INPUT_PROPS, format_price, image_html, section_header


def product_detail_dialog(product: Product, on_edit=None):
    """Open a dialog with the full details of *product*.

    Args:
        product: Product to show.
        on_edit: Optional callback(product_id); adds an Edit button.
    """
    with ui.dialog() as dialog, ui.card().classes("w-full").style("max-width: 860px"):
        with ui.row().classes("w-full gap-6 no-wrap items-start"):
            ui.html(image_html(
                first_valid_image(product.images, NO_IMAGE_URL), product.title,
                classes="w-full rounded-lg",
            )).classes("w-2/5")

            with ui.column().classes("flex-1 gap-1"):
                ui.label(product.title).classes("text-h6 font-bold")
                ui.label(f"ID: {product.id}").classes("text-caption text-secondary")
                ui.separator().classes("my-2")
                _detail_row("Price", format_price(product.price))
                _detail_row("Category", product.category_name or "N/A")
                ui.label("Description").classes("text-subtitle2 font-bold mt-2")
                ui.label(product.description or "No description").classes("text-body2")

                if product.images:
                    ui.label("Images").classes("text-subtitle2 font-bold mt-2")
                    with ui.row().classes("gap-2 flex-wrap"):
                        for img in product.images:
                            ui.html(image_html(
                                img, product.title,
                                classes="rounded",
                                style="width: 80px; height: 80px; object-fit: cover",
                                error_src=THUMBNAIL_ERROR_URL,
                            ))

        with ui.row().classes("w-full justify-end gap-2 mt-4"):
            ui.button("Close", on_click=dialog.close).props("flat")
            if on_edit:
                def _edit():
                    dialog.close()
                    on_edit(product.id)

                ui.button("Edit", icon="edit", on_click=_edit).props("color=primary")
    dialog.open()
    return dialog


def _detail_row(label: str, value: str):
    with ui.row().classes("gap-2 items-baseline"):
        ui.label(f"{label}:").classes("text-body2 font-bold")
        ui.label(value).classes("text-body2")


def product_form_dialog(
    title: str,
    categories: dict[int, str],
    on_submit,
    form: ProductForm | None = None,
    submit_label: str = "Save",
):
    """Open a create/edit form; blank when *form* is None.

    ``on_submit(form)`` is awaited and must return a truthy value on
    success, which closes the dialog. On failure the dialog stays open
    with the user's input intact.
    """
    form = form or ProductForm()

    with ui.dialog() as dialog, ui.card().classes("w-full").style("max-width: 560px"):
        section_header(title, icon="edit_note")

        title_input = ui.input(label="Title *", value=form.title).props(INPUT_PROPS).classes("w-full")
        price_input = ui.number(
            label="Price *", value=form.price, min=0, step=0.01,
        ).props(INPUT_PROPS).classes("w-full")
        category_select = ui.select(
            categories, value=form.category_id if form.category_id in categories else None,
            label="Category *", with_input=True,
        ).props(INPUT_PROPS).classes("w-full")
        description_input = ui.textarea(
            label="Description", value=form.description,
        ).props(INPUT_PROPS).classes("w-full")
        images_input = ui.input(
            label="Image URLs",
            placeholder="https://i.imgur.com/a.jpg, https://i.imgur.com/b.jpg",
            value=form.images,
        ).props(INPUT_PROPS).classes("w-full")
        ui.label("Separate multiple URLs with commas. Invalid URLs are ignored.").classes(
            "text-caption text-secondary"
        )

        async def _submit():
            save_btn.disable()
            try:
                ok = await on_submit(ProductForm(
                    title=title_input.value or "",
                    price=price_input.value,
                    description=description_input.value or "",
                    category_id=category_select.value,
                    images=images_input.value or "",
                ))
            finally:
                save_btn.enable()
            if ok:
                dialog.close()

        with ui.row().classes("w-full justify-end gap-2 mt-3"):
            ui.button("Cancel", on_click=dialog.close).props("flat")
            save_btn = ui.button(submit_label, icon="save", on_click=_submit).props("color=primary")
    dialog.open()
    return dialog
