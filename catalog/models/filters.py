"""Filter, sort and pagination value types."""
import math
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class FilterCriteria:
    """Active search constraints; an empty text and no category match everything."""

    text: str = ""
    category_id: int | None = None
    min_price: float = 0.0
    max_price: float = math.inf

    def matches(self, product) -> bool:
        needle = self.text.strip().casefold()
        if needle and needle not in (product.title or "").casefold():
            return False
        if self.category_id is not None and product.category_id != self.category_id:
            return False
        return self.min_price <= product.price <= self.max_price


class SortKey(str, Enum):
    NONE = ""
    TITLE_ASC = "title"
    TITLE_DESC = "title-desc"
    PRICE_ASC = "price"
    PRICE_DESC = "price-desc"

    @property
    def label(self) -> str:
        return _SORT_LABELS[self]

    @classmethod
    def options(cls) -> dict[str, str]:
        """Value -> label mapping for a select control."""
        return {key.value: key.label for key in cls}


_SORT_LABELS = {
    SortKey.NONE: "Default",
    SortKey.TITLE_ASC: "Title (A-Z)",
    SortKey.TITLE_DESC: "Title (Z-A)",
    SortKey.PRICE_ASC: "Price (low to high)",
    SortKey.PRICE_DESC: "Price (high to low)",
}


@dataclass(frozen=True)
class PageState:
    page: int
    page_size: int
    total: int

    @property
    def total_pages(self) -> int:
        return max(1, math.ceil(self.total / self.page_size))

    @property
    def start(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def end(self) -> int:
        return min(self.start + self.page_size, self.total)
