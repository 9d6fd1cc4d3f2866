"""Filter -> sort -> paginate transformation over an in-memory product list."""
import math
import unicodedata
from dataclasses import dataclass

from catalog.models import FilterCriteria, PageState, Product, SortKey
from catalog.services.utils import parse_number


@dataclass(frozen=True)
class PipelineResult:
    visible: list[Product]
    total: int
    total_pages: int
    page: int
    filtered: list[Product]
    page_size: int

    @property
    def page_state(self) -> PageState:
        return PageState(page=self.page, page_size=self.page_size, total=self.total)


def build_criteria(
    text: str | None = "",
    category_id=None,
    min_price=None,
    max_price=None,
) -> FilterCriteria:
    """Build FilterCriteria from raw control values.

    Non-numeric price bounds fall back to 0 and +infinity; an empty or
    non-integer category means "all categories".
    """
    try:
        cat = int(category_id) if category_id not in (None, "") else None
    except (TypeError, ValueError):
        cat = None
    return FilterCriteria(
        text=(text or "").strip(),
        category_id=cat,
        min_price=parse_number(min_price, 0.0),
        max_price=parse_number(max_price, math.inf),
    )


def filter_products(products: list[Product], criteria: FilterCriteria) -> list[Product]:
    """Keep products matching every constraint, preserving input order."""
    return [p for p in products if criteria.matches(p)]


def _title_key(product: Product) -> tuple[str, str]:
    # Accent- and case-insensitive primary key; on ties lowercase and
    # unaccented titles come first
    title = product.title or ""
    folded = unicodedata.normalize("NFKD", title)
    folded = "".join(ch for ch in folded if not unicodedata.combining(ch)).casefold()
    return folded, title.swapcase()


def sort_products(products: list[Product], sort_key: SortKey) -> list[Product]:
    """Stable sort by *sort_key*; SortKey.NONE keeps the incoming order."""
    if sort_key == SortKey.TITLE_ASC:
        return sorted(products, key=_title_key)
    if sort_key == SortKey.TITLE_DESC:
        return sorted(products, key=_title_key, reverse=True)
    if sort_key == SortKey.PRICE_ASC:
        return sorted(products, key=lambda p: p.price)
    if sort_key == SortKey.PRICE_DESC:
        return sorted(products, key=lambda p: p.price, reverse=True)
    return list(products)


def total_pages_for(total: int, page_size: int) -> int:
    return max(1, math.ceil(total / page_size))


def clamp_page(page: int, total_pages: int) -> int:
    return min(max(1, page), total_pages)


def apply(
    products: list[Product],
    criteria: FilterCriteria,
    sort_key: SortKey,
    page: int,
    page_size: int,
) -> PipelineResult:
    """Run the full pipeline and return the visible page.

    The requested *page* is clamped to ``[1, total_pages]`` so shrinking
    the result set or growing the page size never yields an empty page
    while matches exist.

    Raises
    ------
    ValueError
        If *page_size* is not a positive integer.
    """
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")

    filtered = sort_products(filter_products(products, criteria), sort_key)
    total = len(filtered)
    pages = total_pages_for(total, page_size)
    current = clamp_page(page, pages)
    start = (current - 1) * page_size
    return PipelineResult(
        visible=filtered[start:start + page_size],
        total=total,
        total_pages=pages,
        page=current,
        filtered=filtered,
        page_size=page_size,
    )


def page_window(current: int, total_pages: int, max_visible: int = 5) -> list[int]:
    """Return the page numbers to show as buttons, centred on *current*.

    The window slides so it always stays within ``[1, total_pages]``.
    """
    start = max(1, current - max_visible // 2)
    end = min(total_pages, start + max_visible - 1)
    if end - start < max_visible - 1:
        start = max(1, end - max_visible + 1)
    return list(range(start, end + 1))
