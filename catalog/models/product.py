"""Product model."""
from dataclasses import dataclass, field

from catalog.models.category import Category


def _as_price(value) -> float:
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return value
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


@dataclass
class Product:
    id: int
    title: str
    price: float
    description: str | None = None
    category: Category | None = None
    images: list[str] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: dict) -> "Product":
        """Build a Product from a service JSON object.

        Tolerates a missing category and non-list or mixed ``images``;
        non-string image entries are dropped, invalid URLs are kept.
        """
        category = data.get("category")
        images = data.get("images")
        return cls(
            id=int(data["id"]),
            title=data.get("title") or "",
            price=_as_price(data.get("price")),
            description=data.get("description"),
            category=Category.from_api(category) if isinstance(category, dict) else None,
            images=[img for img in images if isinstance(img, str)] if isinstance(images, list) else [],
        )

    def to_api(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "price": self.price,
            "description": self.description,
            "category": self.category.to_api() if self.category else None,
            "images": list(self.images),
        }

    def merged(self, payload: dict) -> "Product":
        """Return a copy with the fields of *payload* laid over this product's fields."""
        return Product.from_api({**self.to_api(), **payload})

    @property
    def category_id(self) -> int | None:
        return self.category.id if self.category else None

    @property
    def category_name(self) -> str | None:
        return self.category.name if self.category else None

    def __repr__(self) -> str:
        return f"<Product id={self.id} title={self.title!r}>"
