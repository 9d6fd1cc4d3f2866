"""REST client for the remote product catalog service."""
import logging

import requests

from config import API_BASE_URL, REQUEST_TIMEOUT
from catalog.models import Category, Product, ProductDraft

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Base class for catalog service failures."""

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.message = message
        self.status = status


class NetworkError(CatalogError):
    """Raised on transport failure or a non-success status while fetching."""


class ValidationError(CatalogError):
    """Raised when a draft is rejected, by the service or before sending."""

    def __init__(self, message: str, status: int | None = None, field: str | None = None):
        super().__init__(message, status)
        self.field = field


class CatalogClient:
    """Thin wrapper around the catalog REST endpoints.

    Every method makes exactly one request; there are no retries and no
    local caching. Callers own any state changes.
    """

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        session: requests.Session | None = None,
        timeout: float = REQUEST_TIMEOUT,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def list_products(self) -> list[Product]:
        """Fetch every product. Raises NetworkError on failure."""
        data = self._read("/products")
        return _convert(data, Product.from_api, "/products")

    def list_categories(self) -> list[Category]:
        """Fetch every category. Raises NetworkError on failure."""
        data = self._read("/categories")
        return _convert(data, Category.from_api, "/categories")

    def create_product(self, draft: ProductDraft) -> Product:
        """POST a new product and return the record the service created.

        Raises
        ------
        ValidationError
            The service rejected the payload (4xx).
        NetworkError
            Transport failure, server error or an unreadable response.
        """
        data = self._write("POST", "/products/", draft.to_payload())
        try:
            return Product.from_api(data)
        except (KeyError, TypeError, ValueError) as exc:
            raise NetworkError("Unexpected response from /products/") from exc

    def update_product(self, product_id: int, draft: ProductDraft) -> dict:
        """PUT *draft* onto product *product_id*.

        Returns the raw service response so callers can merge it over the
        local record (the response may omit fields).
        """
        return self._write("PUT", f"/products/{product_id}", draft.to_payload())

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _read(self, path: str):
        url = f"{self.base_url}{path}"
        logger.debug("GET %s", url)
        try:
            resp = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("GET %s failed: %s", url, exc)
            raise NetworkError(f"Failed to fetch {path}: {exc}") from exc

        if not resp.ok:
            logger.warning("GET %s returned status %s", url, resp.status_code)
            raise NetworkError(f"Failed to fetch {path} (HTTP {resp.status_code})", resp.status_code)
        return self._decode(resp, path)

    def _write(self, method: str, path: str, payload: dict) -> dict:
        url = f"{self.base_url}{path}"
        logger.debug("%s %s body=%s", method, url, payload)
        try:
            resp = self.session.request(method, url, json=payload, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise NetworkError(f"Request failed: {exc}") from exc

        logger.debug("%s %s -> %s", method, url, resp.status_code)
        if not resp.ok:
            message = _service_message(resp)
            logger.warning("%s %s rejected (%s): %s", method, url, resp.status_code, message)
            if 400 <= resp.status_code < 500:
                raise ValidationError(message, resp.status_code)
            raise NetworkError(message, resp.status_code)

        data = self._decode(resp, path)
        if not isinstance(data, dict):
            raise NetworkError(f"Unexpected response from {path}", resp.status_code)
        return data

    @staticmethod
    def _decode(resp: requests.Response, path: str):
        try:
            return resp.json()
        except ValueError as exc:
            raise NetworkError(f"Invalid JSON from {path}", resp.status_code) from exc


def _convert(data, factory, path: str) -> list:
    if not isinstance(data, list):
        raise NetworkError(f"Unexpected response from {path}")
    try:
        return [factory(item) for item in data]
    except (KeyError, TypeError, ValueError) as exc:
        raise NetworkError(f"Malformed record from {path}: {exc}") from exc


def _service_message(resp: requests.Response) -> str:
    """Extract the service's error message, or fall back to status + body."""
    try:
        body = resp.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, list):
            message = "; ".join(str(m) for m in message)
        if message:
            return str(message)
    text = resp.text if body is None else str(body)
    return f"HTTP {resp.status_code}: {text}"
