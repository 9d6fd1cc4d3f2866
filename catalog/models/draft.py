"""Create/update form input and the validated draft sent to the service."""
from dataclasses import dataclass, field


@dataclass
class ProductForm:
    """Raw values as typed into the create/edit form."""

    title: str = ""
    price: str | float | None = None
    description: str = ""
    category_id: int | str | None = None
    images: str = ""


@dataclass
class ProductDraft:
    title: str
    price: float
    description: str
    category_id: int
    images: list[str] = field(default_factory=list)

    def to_payload(self) -> dict:
        """JSON body understood by the create/update endpoints."""
        return {
            "title": self.title,
            "price": self.price,
            "description": self.description,
            "categoryId": self.category_id,
            "images": list(self.images),
        }
