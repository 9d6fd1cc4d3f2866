"""In-memory catalog state owned by the controller."""
from dataclasses import dataclass, field

from config import DEFAULT_PAGE_SIZE
from catalog.models import Category, FilterCriteria, Product, SortKey
from catalog.services.pipeline import PipelineResult, apply


@dataclass
class CatalogState:
    """Full product/category lists plus the active view parameters.

    Empty until :meth:`populate` is called with the startup fetch results.
    """

    products: list[Product] = field(default_factory=list)
    categories: list[Category] = field(default_factory=list)
    criteria: FilterCriteria = field(default_factory=FilterCriteria)
    sort_key: SortKey = SortKey.NONE
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    loaded: bool = False

    def populate(self, products: list[Product], categories: list[Category]) -> None:
        self.products = list(products)
        self.categories = list(categories)
        self.page = 1
        self.loaded = True

    def find(self, product_id: int) -> Product | None:
        for product in self.products:
            if product.id == product_id:
                return product
        return None

    def prepend(self, product: Product) -> None:
        """Insert a newly created product at the head of the list."""
        self.products.insert(0, product)

    def replace(self, product_id: int, payload: dict) -> Product | None:
        """Merge a server response over the product at *product_id*.

        Returns the merged product, or None if no local record has that id.
        """
        for idx, product in enumerate(self.products):
            if product.id == product_id:
                merged = product.merged(payload)
                self.products[idx] = merged
                return merged
        return None

    def category_options(self) -> dict[int, str]:
        return {c.id: c.name for c in self.categories}

    def view(self) -> PipelineResult:
        """Run the pipeline over the current lists and record the clamped page."""
        result = apply(
            self.products, self.criteria, self.sort_key, self.page, self.page_size,
        )
        self.page = result.page
        return result
