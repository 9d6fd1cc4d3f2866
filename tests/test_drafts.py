import pytest

from config import DEFAULT_DESCRIPTION, UPLOAD_PLACEHOLDER_URL
from catalog.models import ProductForm
from catalog.services.catalog_client import ValidationError
from catalog.services.drafts import build_draft, form_from_product
from catalog.services.utils import first_valid_image, is_valid_url, parse_image_urls, parse_number, truncate
from tests.conftest import make_product


def _form(**overrides):
    values = dict(title="Lamp", price="19.5", description="Desk lamp", category_id=2, images="")
    values.update(overrides)
    return ProductForm(**values)


@pytest.mark.parametrize("field,overrides", [
    ("title", {"title": "   "}),
    ("price", {"price": ""}),
    ("price", {"price": "abc"}),
    ("price", {"price": 0}),
    ("category", {"category_id": None}),
    ("category", {"category_id": ""}),
])
def test_missing_required_fields(field, overrides):
    with pytest.raises(ValidationError) as exc_info:
        build_draft(_form(**overrides))
    assert exc_info.value.field == field


def test_draft_normalises_values():
    draft = build_draft(_form(title="  Lamp ", category_id="2", description="   "))
    assert draft.title == "Lamp"
    assert draft.price == 19.5
    assert draft.category_id == 2
    assert draft.description == DEFAULT_DESCRIPTION


def test_whole_prices_are_sent_as_integers():
    assert build_draft(_form(price=40.0)).price == 40


def test_invalid_images_fall_back_to_single_placeholder():
    draft = build_draft(_form(images="not a url, ftp://x/y.png, "))
    assert draft.images == [UPLOAD_PLACEHOLDER_URL]


def test_valid_images_are_kept_in_order():
    draft = build_draft(_form(images="https://i.imgur.com/a.jpg, junk , http://cdn.example/b.png"))
    assert draft.images == ["https://i.imgur.com/a.jpg", "http://cdn.example/b.png"]


def test_form_from_product_prefills_fields():
    product = make_product(3, "Hat", 12, images=["https://a/1.jpg", "https://a/2.jpg"])
    form = form_from_product(product)
    assert form.title == "Hat"
    assert form.price == 12
    assert form.category_id == 1
    assert form.images == "https://a/1.jpg, https://a/2.jpg"


@pytest.mark.parametrize("value,expected", [
    ("https://i.imgur.com/x.jpg", True),
    ("http://example.com", True),
    ("  https://example.com/a.png ", True),
    ("example.com/a.png", False),
    ("javascript:alert(1)", False),
    ("", False),
    (None, False),
    (123, False),
])
def test_is_valid_url(value, expected):
    assert is_valid_url(value) is expected


def test_first_valid_image_skips_invalid_entries():
    assert first_valid_image(["", "[\"https://x\"]", "https://ok.example/a.jpg"], "fallback") == "https://ok.example/a.jpg"
    assert first_valid_image([], "fallback") == "fallback"


def test_parse_image_urls_empty():
    assert parse_image_urls("") == []
    assert parse_image_urls(None) == []


@pytest.mark.parametrize("value,expected", [
    ("12.5", 12.5),
    (" 40 ", 40.0),
    (7, 7.0),
    ("", None),
    ("abc", None),
    ("nan", None),
    ("inf", None),
    (None, None),
])
def test_parse_number(value, expected):
    assert parse_number(value) == expected


def test_truncate():
    assert truncate("short", 10) == "short"
    assert truncate(None, 10) == ""
    assert truncate("a" * 20, 10) == "a" * 9 + "…"
