"""Catalog page -- browse, filter, edit and export products."""
import logging

from nicegui import ui

from config import DEFAULT_PAGE_SIZE, PAGE_SIZE_OPTIONS
from catalog.controller import CatalogController
from catalog.models import SortKey
from catalog.services import build_criteria, form_from_product
from catalog.ui.components import (
    pagination_bar, product_card, product_detail_dialog, product_form_dialog,
    show_notice, stats_card,
)
from catalog.ui.components.helpers import (
    GRID_MARKER, GRID_STYLE, INPUT_PROPS, page_header, scroll_to_grid,
)
from catalog.ui.layout import build_layout

logger = logging.getLogger(__name__)

_ALL_CATEGORIES = "All categories"


def catalog_page(controller: CatalogController | None = None):
    """Render the catalog browser.

    A fresh controller (and so a fresh state) is created per page visit
    unless one is passed in.
    """
    controller = controller or CatalogController()
    controller.set_notifier(show_notice)
    content = build_layout()

    with content:
        page_header(
            "Products", subtitle="Browse, filter and manage the product catalog.",
            icon="inventory_2",
        )

        loading = ui.row().classes("w-full justify-center py-12")
        with loading:
            ui.spinner(size="xl")

        error_panel = ui.card().classes("w-full p-6 items-center")
        error_panel.set_visibility(False)
        with error_panel:
            ui.icon("error_outline", size="lg").classes("text-negative")
            error_label = ui.label("").classes("text-body1 text-negative")

        main = ui.column().classes("w-full gap-4")
        main.set_visibility(False)

        with main:
            # --- Summary + actions ---
            with ui.row().classes("w-full items-center gap-4"):
                product_count = stats_card("Products", "0", icon="inventory_2")
                category_count = stats_card("Categories", "0", icon="category", color="accent")
                ui.space()
                export_btn = ui.button("Export CSV", icon="file_download").props(
                    "color=positive outline"
                )
                create_btn = ui.button("Create Product", icon="add").props("color=primary")

            # --- Filter row ---
            with ui.card().classes("w-full p-4"):
                search_input = ui.input(
                    label="Search products", placeholder="Type to filter by title...",
                ).props(f"clearable {INPUT_PROPS}").classes("w-full")
                search_input.props('prepend-inner-icon="search"')

                with ui.row().classes("w-full items-center gap-4 flex-wrap mt-2"):
                    category_filter = ui.select(
                        {"": _ALL_CATEGORIES}, value="", label="Category",
                    ).props(INPUT_PROPS).classes("w-56")
                    price_min = ui.number(label="Min price", min=0).props(INPUT_PROPS).classes("w-32")
                    price_max = ui.number(label="Max price", min=0).props(INPUT_PROPS).classes("w-32")
                    sort_select = ui.select(
                        SortKey.options(), value=SortKey.NONE.value, label="Sort by",
                    ).props(INPUT_PROPS).classes("w-48")
                    page_size_select = ui.select(
                        PAGE_SIZE_OPTIONS, value=DEFAULT_PAGE_SIZE, label="Per page",
                    ).props(INPUT_PROPS).classes("w-36")

            count_label = ui.label("").classes("text-body2 text-secondary")

            # --- Product grid + pagination ---
            grid = ui.element("div").classes(f"w-full grid gap-4 {GRID_MARKER}").style(GRID_STYLE)
            pagination = ui.row().classes("w-full justify-center")

    def render(result, scroll: bool):
        product_count.text = str(result.total)
        if result.total:
            bounds = result.page_state
            count_label.text = (
                f"Showing {bounds.start + 1}-{bounds.end} of {result.total} products"
                f" (page {result.page} of {result.total_pages})"
            )
        else:
            count_label.text = "0 products"

        grid.clear()
        with grid:
            if not result.visible:
                with ui.column().classes("w-full items-center py-12").style("grid-column: 1 / -1"):
                    ui.icon("inbox", size="xl").classes("text-grey-5")
                    ui.label("No products found.").classes("text-body2 text-secondary")
            for product in result.visible:
                product_card(product, on_open=open_detail)

        pagination.clear()
        with pagination:
            pagination_bar(result.page, result.total_pages, controller.go_to_page)

        if scroll:
            scroll_to_grid()

    controller.subscribe(render)

    # ------------------------------------------------------------------
    # Dialogs
    # ------------------------------------------------------------------

    def open_detail(product_id: int):
        product = controller.find_product(product_id)
        if product is None:
            return
        product_detail_dialog(product, on_edit=open_edit)

    def open_edit(product_id: int):
        product = controller.find_product(product_id)
        if product is None:
            return
        product_form_dialog(
            f"Edit product #{product_id}",
            controller.state.category_options(),
            on_submit=lambda form: controller.update_product(product_id, form),
            form=form_from_product(product),
        )

    def open_create():
        product_form_dialog(
            "Create product",
            controller.state.category_options(),
            on_submit=controller.create_product,
            submit_label="Create",
        )

    def export():
        exported = controller.export()
        if exported is None:
            return
        data, filename = exported
        ui.download(data, filename, "text/csv")

    # ------------------------------------------------------------------
    # Control wiring
    # ------------------------------------------------------------------

    def apply_filters(_=None):
        controller.set_criteria(build_criteria(
            search_input.value, category_filter.value, price_min.value, price_max.value,
        ))

    _search_timer = {"ref": None}

    def _debounced_search(_):
        if _search_timer["ref"] is not None:
            _search_timer["ref"].cancel()
        _search_timer["ref"] = ui.timer(0.3, apply_filters, once=True)

    search_input.on_value_change(_debounced_search)
    category_filter.on_value_change(apply_filters)
    for field in (category_filter, price_min, price_max):
        field.on("keydown.enter", apply_filters)
    for field in (price_min, price_max):
        field.on("blur", apply_filters)
    sort_select.on_value_change(lambda e: controller.set_sort(e.value))
    page_size_select.on_value_change(lambda e: controller.set_page_size(e.value))
    export_btn.on_click(export)
    create_btn.on_click(open_create)

    # ------------------------------------------------------------------
    # Startup
    # ------------------------------------------------------------------

    async def initialize():
        ok = await controller.load()
        loading.set_visibility(False)
        if not ok:
            error_label.text = controller.load_error
            error_panel.set_visibility(True)
            return

        category_filter.options = {"": _ALL_CATEGORIES, **controller.state.category_options()}
        category_filter.update()
        category_count.text = str(len(controller.state.categories))
        main.set_visibility(True)

    ui.timer(0.1, initialize, once=True)
