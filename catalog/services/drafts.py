"""Validate create/edit form input and turn it into a ProductDraft."""
from config import DEFAULT_DESCRIPTION, UPLOAD_PLACEHOLDER_URL
from catalog.models import Product, ProductDraft, ProductForm
from catalog.services.catalog_client import ValidationError
from catalog.services.utils import parse_image_urls, parse_number

REQUIRED_FIELDS_MESSAGE = "Please fill in all required fields (title, price, category)."


def build_draft(form: ProductForm) -> ProductDraft:
    """Check required fields and normalise the form into a draft.

    Title must be non-blank, price a positive number and a category
    selected. Invalid image URLs are dropped; if none remain a single
    placeholder image is used.

    Raises:
        ValidationError: a required field is missing or invalid. No
            request should be sent in that case.
    """
    title = (form.title or "").strip()
    if not title:
        raise ValidationError(REQUIRED_FIELDS_MESSAGE, field="title")

    price = parse_number(form.price)
    if price is None or price <= 0:
        raise ValidationError(REQUIRED_FIELDS_MESSAGE, field="price")

    try:
        category_id = int(form.category_id)
    except (TypeError, ValueError):
        category_id = 0
    if category_id <= 0:
        raise ValidationError(REQUIRED_FIELDS_MESSAGE, field="category")

    images = parse_image_urls(form.images) or [UPLOAD_PLACEHOLDER_URL]
    description = (form.description or "").strip() or DEFAULT_DESCRIPTION

    return ProductDraft(
        title=title,
        price=int(price) if price.is_integer() else price,
        description=description,
        category_id=category_id,
        images=images,
    )


def form_from_product(product: Product) -> ProductForm:
    """Pre-fill an edit form from an existing product."""
    return ProductForm(
        title=product.title,
        price=product.price,
        description=product.description or "",
        category_id=product.category_id,
        images=", ".join(product.images),
    )
