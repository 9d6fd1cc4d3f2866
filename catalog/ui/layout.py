"""Shared layout: header and content area."""
from nicegui import ui

from config import APP_TITLE


def build_layout(title: str = APP_TITLE):
    """Create the shared page layout and return the content container."""
    ui.colors(
        primary="#4A4443",
        secondary="#5f6368",
        accent="#A08968",
        positive="#34a853",
        negative="#ea4335",
    )

    with ui.header().classes("items-center justify-between px-4 bg-primary"):
        with ui.row().classes("items-center gap-3"):
            ui.icon("storefront", size="md").classes("text-white")
            ui.separator().props("vertical").classes("bg-white opacity-30")
            ui.label(title).classes("text-subtitle1 text-white")
        ui.space()

    content = ui.column().classes("w-full p-6 max-w-7xl mx-auto gap-4")
    return content
