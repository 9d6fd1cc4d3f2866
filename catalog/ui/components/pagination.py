"""Pagination bar with a sliding window of page-number buttons."""
from nicegui import ui

from config import MAX_VISIBLE_PAGES
from catalog.services.pipeline import page_window


def pagination_bar(page: int, total_pages: int, on_change):
    """Render previous / numbered / next buttons.

    Nothing is rendered when there is a single page. Previous and next
    are disabled at the boundaries.

    Args:
        page: Current 1-based page.
        total_pages: Number of pages (at least 1).
        on_change: Callback(page) for a page button click.
    """
    if total_pages <= 1:
        return

    with ui.row().classes("w-full items-center justify-center gap-1"):
        prev_btn = ui.button(
            "Previous", icon="chevron_left", on_click=lambda: on_change(page - 1),
        ).props("flat dense no-caps")
        prev_btn.set_enabled(page > 1)

        for number in page_window(page, total_pages, MAX_VISIBLE_PAGES):
            btn = ui.button(str(number), on_click=lambda _, n=number: on_change(n))
            if number == page:
                btn.props("unelevated dense color=primary")
            else:
                btn.props("flat dense color=primary")

        next_btn = ui.button(
            "Next", on_click=lambda: on_change(page + 1),
        ).props("flat dense no-caps icon-right=chevron_right")
        next_btn.set_enabled(page < total_pages)
