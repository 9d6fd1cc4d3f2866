"""Category model."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Category:
    id: int
    name: str

    @classmethod
    def from_api(cls, data: dict) -> "Category":
        return cls(id=int(data["id"]), name=data.get("name") or "")

    def to_api(self) -> dict:
        return {"id": self.id, "name": self.name}

    def __repr__(self) -> str:
        return f"<Category id={self.id} name={self.name!r}>"
