"""Top-level controller: owns catalog state and reacts to user actions.

UI code registers a render listener and a notifier, then calls the
controller's methods from its event handlers. Every state-mutating action
re-runs the pipeline and notifies listeners before returning.
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Callable

from catalog.models import FilterCriteria, Product, ProductForm, SortKey
from catalog.services import (
    CatalogClient, CatalogError, CatalogState, PipelineResult, ValidationError,
    build_draft, export_csv, export_filename,
)

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "Unable to load the catalog. Please try again later."
CREATE_IMAGE_HINT = "Note: the service may require valid image URLs (imgur, etc)."


@dataclass(frozen=True)
class Notice:
    """User-facing message; level is one of positive, negative, warning, info."""

    message: str
    level: str = "info"


RenderListener = Callable[[PipelineResult, bool], None]


class CatalogController:
    """Single owner of :class:`CatalogState` for one browser session."""

    def __init__(
        self,
        client: CatalogClient | None = None,
        notify: Callable[[Notice], None] | None = None,
    ):
        self.client = client or CatalogClient()
        self.state = CatalogState()
        self.result: PipelineResult | None = None
        self.load_error: str | None = None
        self._notify = notify or _log_notice
        self._listeners: list[RenderListener] = []

    # ------------------------------------------------------------------
    # Wiring
    # ------------------------------------------------------------------

    def subscribe(self, listener: RenderListener) -> None:
        """Register *listener(result, scroll)*, called after every re-render."""
        self._listeners.append(listener)

    def set_notifier(self, notify: Callable[[Notice], None]) -> None:
        self._notify = notify

    # ------------------------------------------------------------------
    # Startup
    # ------------------------------------------------------------------

    async def load(self) -> bool:
        """Fetch products and categories concurrently.

        Both must succeed; on any failure the state stays empty and
        ``load_error`` holds a generic message for the error panel.
        """
        loop = asyncio.get_event_loop()
        try:
            products, categories = await asyncio.gather(
                loop.run_in_executor(None, self.client.list_products),
                loop.run_in_executor(None, self.client.list_categories),
            )
        except CatalogError as exc:
            logger.error("Error initializing catalog: %s", exc)
            self.load_error = LOAD_ERROR_MESSAGE
            return False

        self.state.populate(products, categories)
        self.load_error = None
        logger.info("Loaded %d products", len(products))
        logger.info("Loaded %d categories", len(categories))
        self.refresh()
        return True

    # ------------------------------------------------------------------
    # View parameters
    # ------------------------------------------------------------------

    def refresh(self, scroll: bool = False) -> PipelineResult:
        """Re-run the pipeline over current state and notify listeners."""
        self.result = self.state.view()
        for listener in self._listeners:
            listener(self.result, scroll)
        return self.result

    def set_criteria(self, criteria: FilterCriteria) -> PipelineResult:
        self.state.criteria = criteria
        self.state.page = 1
        return self.refresh(scroll=True)

    def set_sort(self, sort_key: SortKey | str) -> PipelineResult:
        self.state.sort_key = SortKey(sort_key or "")
        self.state.page = 1
        return self.refresh(scroll=True)

    def set_page_size(self, page_size: int) -> PipelineResult:
        """Change the page size, keeping the current page if it still exists."""
        page_size = int(page_size)
        if page_size < 1:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self.state.page_size = page_size
        return self.refresh(scroll=True)

    def go_to_page(self, page: int) -> bool:
        """Move to *page*; out-of-range requests are ignored."""
        total_pages = self.result.total_pages if self.result else 1
        if page < 1 or page > total_pages or page == self.state.page:
            return False
        self.state.page = page
        self.refresh(scroll=True)
        return True

    def next_page(self) -> bool:
        return self.go_to_page(self.state.page + 1)

    def prev_page(self) -> bool:
        return self.go_to_page(self.state.page - 1)

    def find_product(self, product_id: int) -> Product | None:
        return self.state.find(product_id)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    async def create_product(self, form: ProductForm) -> Product | None:
        """Validate *form*, POST it and prepend the created record.

        Returns the new product, or None when validation or the request
        failed (state is left untouched).
        """
        try:
            draft = build_draft(form)
        except ValidationError as exc:
            self._notify(Notice(exc.message, "warning"))
            return None

        loop = asyncio.get_event_loop()
        try:
            created = await loop.run_in_executor(None, self.client.create_product, draft)
        except CatalogError as exc:
            logger.error("Create product failed: %s", exc)
            self._notify(Notice(f"Error creating product: {exc.message}\n\n{CREATE_IMAGE_HINT}", "negative"))
            return None

        logger.info("Product created: id=%s", created.id)
        self.state.prepend(created)
        # Back to page 1 so the new record is on screen
        self.state.page = 1
        self.refresh()
        self._notify(Notice("Product created successfully!", "positive"))
        return created

    async def update_product(self, product_id: int, form: ProductForm) -> Product | None:
        """Validate *form*, PUT it and merge the response into the local record."""
        try:
            draft = build_draft(form)
        except ValidationError as exc:
            self._notify(Notice(exc.message, "warning"))
            return None

        loop = asyncio.get_event_loop()
        try:
            payload = await loop.run_in_executor(None, self.client.update_product, product_id, draft)
        except CatalogError as exc:
            logger.error("Update product %s failed: %s", product_id, exc)
            self._notify(Notice(f"Error updating product: {exc.message}", "negative"))
            return None

        updated = self.state.replace(product_id, payload)
        if updated is None:
            logger.warning("Product %s updated remotely but missing from local state", product_id)
            self._notify(Notice(
                f"Product #{product_id} was saved but is no longer in the loaded catalog.",
                "warning",
            ))
            return None
        logger.info("Product updated: id=%s", product_id)
        self.refresh()
        self._notify(Notice("Product updated successfully!", "positive"))
        return updated

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def export(self) -> tuple[bytes, str] | None:
        """Return ``(csv_bytes, filename)`` for the filtered/sorted view.

        Returns None, with a warning notice, when there is nothing to export.
        """
        products = self.result.filtered if self.result else []
        if not products:
            self._notify(Notice("No data to export!", "warning"))
            return None
        return export_csv(products), export_filename()


def _log_notice(notice: Notice) -> None:
    logger.info("[%s] %s", notice.level, notice.message)
