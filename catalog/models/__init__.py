"""Catalog models package."""
from catalog.models.category import Category
from catalog.models.draft import ProductDraft, ProductForm
from catalog.models.filters import FilterCriteria, PageState, SortKey
from catalog.models.product import Product

__all__ = [
    "Category",
    "Product",
    "ProductDraft",
    "ProductForm",
    "FilterCriteria",
    "PageState",
    "SortKey",
]
