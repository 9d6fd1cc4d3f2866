"""Reusable UI components."""
from catalog.ui.components.helpers import category_icon, format_price, image_html
from catalog.ui.components.notifications import show_notice
from catalog.ui.components.pagination import pagination_bar
from catalog.ui.components.product_card import product_card
from catalog.ui.components.product_dialogs import product_detail_dialog, product_form_dialog
from catalog.ui.components.stats_card import stats_card

__all__ = [
    "category_icon",
    "format_price",
    "image_html",
    "show_notice",
    "pagination_bar",
    "product_card",
    "product_detail_dialog",
    "product_form_dialog",
    "stats_card",
]
