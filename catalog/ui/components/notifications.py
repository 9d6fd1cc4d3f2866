"""Notification component surfacing controller notices."""
from nicegui import ui

from catalog.controller import Notice


def show_notice(notice: Notice):
    """Display *notice*; errors stay on screen until dismissed."""
    if notice.level == "negative":
        ui.notify(
            notice.message, type="negative", multi_line=True,
            close_button="OK", timeout=0, position="center",
        )
    else:
        ui.notify(notice.message, type=notice.level, multi_line=True)
