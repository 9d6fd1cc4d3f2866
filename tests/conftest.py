"""Shared fixtures and fakes for the catalog tests."""
import json

import pytest
import requests

from catalog.models import Category, Product

CLOTHES = Category(id=1, name="Clothes")
ELECTRONICS = Category(id=2, name="Electronics")
SHOES = Category(id=3, name="Shoes")


def make_product(pid, title="Item", price=10, category=CLOTHES, description="desc", images=None):
    return Product(
        id=pid,
        title=title,
        price=price,
        description=description,
        category=category,
        images=list(images) if images is not None else [f"https://i.imgur.com/{pid}.jpg"],
    )


def make_response(status: int, body=None, text: str | None = None) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    if text is not None:
        resp._content = text.encode("utf-8")
    else:
        resp._content = json.dumps(body).encode("utf-8")
    resp.headers["Content-Type"] = "application/json"
    return resp


class FakeSession:
    """Stands in for requests.Session; replies from a queue and records calls."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def _next(self):
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    def get(self, url, timeout=None):
        self.calls.append(("GET", url, None))
        return self._next()

    def request(self, method, url, json=None, timeout=None):
        self.calls.append((method, url, json))
        return self._next()


@pytest.fixture
def products():
    return [
        make_product(1, "Classic Red Shirt", 25, CLOTHES),
        make_product(2, "Wireless Mouse", 40, ELECTRONICS),
        make_product(3, "Running Shoes", 90, SHOES),
        make_product(4, "blue t-shirt", 15, CLOTHES),
        make_product(5, "Laptop Stand", 55, ELECTRONICS),
        make_product(6, "Sandals", 30, SHOES),
    ]


@pytest.fixture
def categories():
    return [CLOTHES, ELECTRONICS, SHOES]
