"""Product domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductEntity:
    """Domain entity for a product row.

    Attributes:
        product_name: Display name, must be non-empty for writes
        price: Unit price, must be strictly positive for writes
        description: Optional free text
        company_id: Owning company (not validated here)
        store_id: Owning store (not validated here)
        id: Database identifier, None until assigned
    """

    product_name: str | None
    price: float | None
    description: str | None = None
    company_id: int | None = None
    store_id: int | None = None
    id: int | None = None

    @property
    def is_valid(self) -> bool:
        """Check the write invariants: a non-empty name and a positive price."""
        return bool(self.product_name) and self.price is not None and self.price > 0
