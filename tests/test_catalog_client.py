import pytest
import requests

from catalog.models import ProductDraft
from catalog.services.catalog_client import CatalogClient, NetworkError, ValidationError
from tests.conftest import FakeSession, make_response

BASE = "https://api.example.test/v1"

PRODUCT_JSON = {
    "id": 10,
    "title": "Desk",
    "price": 120,
    "description": "Oak desk",
    "category": {"id": 3, "name": "Furniture", "image": "https://x/y.jpg"},
    "images": ["https://i.imgur.com/desk.jpg", 42, "not a url"],
}

DRAFT = ProductDraft(
    title="Desk", price=120, description="Oak desk", category_id=3,
    images=["https://i.imgur.com/desk.jpg"],
)


def _client(*responses):
    session = FakeSession(*responses)
    return CatalogClient(base_url=BASE + "/", session=session), session


def test_list_products_parses_records():
    client, session = _client(make_response(200, [PRODUCT_JSON]))

    products = client.list_products()

    assert session.calls == [("GET", f"{BASE}/products", None)]
    assert len(products) == 1
    desk = products[0]
    assert desk.id == 10
    assert desk.category_name == "Furniture"
    assert desk.images == ["https://i.imgur.com/desk.jpg", "not a url"]


def test_list_categories():
    client, session = _client(make_response(200, [{"id": 1, "name": "Clothes"}]))
    categories = client.list_categories()
    assert session.calls[0][1] == f"{BASE}/categories"
    assert [(c.id, c.name) for c in categories] == [(1, "Clothes")]


def test_list_fails_on_error_status():
    client, _ = _client(make_response(500, {"message": "boom"}))
    with pytest.raises(NetworkError) as exc_info:
        client.list_products()
    assert exc_info.value.status == 500


def test_list_fails_on_transport_error():
    client, _ = _client(requests.ConnectionError("refused"))
    with pytest.raises(NetworkError):
        client.list_categories()


def test_list_fails_on_non_list_body():
    client, _ = _client(make_response(200, {"products": []}))
    with pytest.raises(NetworkError):
        client.list_products()


def test_create_sends_payload_to_trailing_slash_endpoint():
    client, session = _client(make_response(201, PRODUCT_JSON))

    created = client.create_product(DRAFT)

    method, url, body = session.calls[0]
    assert method == "POST"
    assert url == f"{BASE}/products/"
    assert body == {
        "title": "Desk",
        "price": 120,
        "description": "Oak desk",
        "categoryId": 3,
        "images": ["https://i.imgur.com/desk.jpg"],
    }
    assert created.id == 10


def test_create_rejection_surfaces_service_message():
    client, _ = _client(make_response(400, {"message": ["price must be positive", "images must be URLs"]}))
    with pytest.raises(ValidationError) as exc_info:
        client.create_product(DRAFT)
    assert exc_info.value.status == 400
    assert exc_info.value.message == "price must be positive; images must be URLs"


def test_create_rejection_without_message_reports_status_and_body():
    client, _ = _client(make_response(422, {"error": "bad"}))
    with pytest.raises(ValidationError) as exc_info:
        client.create_product(DRAFT)
    assert exc_info.value.message.startswith("HTTP 422:")


def test_create_server_error_is_network_error():
    client, _ = _client(make_response(503, text="unavailable"))
    with pytest.raises(NetworkError) as exc_info:
        client.create_product(DRAFT)
    assert exc_info.value.message == "HTTP 503: unavailable"


def test_create_transport_failure():
    client, _ = _client(requests.Timeout("slow"))
    with pytest.raises(NetworkError):
        client.create_product(DRAFT)


def test_update_puts_to_product_url_and_returns_raw_response():
    client, session = _client(make_response(200, {"id": 10, "title": "Desk 2"}))

    data = client.update_product(10, DRAFT)

    assert session.calls[0][:2] == ("PUT", f"{BASE}/products/10")
    assert data == {"id": 10, "title": "Desk 2"}


def test_update_rejection():
    client, _ = _client(make_response(404, {"message": "Not found"}))
    with pytest.raises(ValidationError) as exc_info:
        client.update_product(99, DRAFT)
    assert exc_info.value.message == "Not found"


def test_invalid_json_is_network_error():
    client, _ = _client(make_response(200, text="<html>"))
    with pytest.raises(NetworkError):
        client.list_products()
