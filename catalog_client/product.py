"""Catalog product value object."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Product:
    """A single catalog item as returned by the provider."""

    id: str | None
    type: str | None
    name: str | None

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "Product":
        """
        Build a product from a decoded JSON object.

        Only ``id``, ``type`` and ``name`` are copied; anything else in the
        payload is dropped. Missing fields become ``None`` since the provider
        contract, not the client, guarantees the shape.
        """
        return cls(
            id=raw.get("id"),
            type=raw.get("type"),
            name=raw.get("name"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "type": self.type, "name": self.name}
