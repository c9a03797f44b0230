"""Request DTOs for API endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from product_api.entities import ProductEntity


class ProductRequest(BaseModel):
    """Request DTO for creating or updating a product.

    Field-level rules (non-empty name, positive price) are checked by the
    service so that every violation maps to the same 400 response.
    ``ModifiedDate`` and unknown keys are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int | None = Field(None, alias="Id", description="Ignored on update, the path id wins")
    product_name: str | None = Field(None, alias="ProductName", description="Product display name")
    description: str | None = Field(None, alias="Description", description="Optional description")
    price: float | None = Field(None, alias="Price", description="Unit price, must be > 0")
    company_id: int | None = Field(None, alias="CompanyId", description="Owning company id")
    store_id: int | None = Field(None, alias="StoreId", description="Owning store id")

    def to_entity(self) -> ProductEntity:
        """Convert to the internal domain entity."""
        return ProductEntity(
            product_name=self.product_name,
            price=self.price,
            description=self.description,
            company_id=self.company_id,
            store_id=self.store_id,
            id=self.id,
        )
