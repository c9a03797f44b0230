#!/usr/bin/env python3
"""
Demo script for the product API.

Runs the create / update / list / delete flow against an in-memory
SQLite database, first through the service layer and then over HTTP.
"""

import json

from fastapi.testclient import TestClient
from sqlalchemy import text

from product_api.api.app import create_app
from product_api.config import Settings, create_db_engine
from product_api.entities import ProductEntity
from product_api.repositories import SqlProductRepository
from product_api.services import ProductService

DEMO_KEY = "demo-key"

PRODUCT_TABLE_DDL = """
CREATE TABLE IF NOT EXISTS Product (
    Id INTEGER PRIMARY KEY AUTOINCREMENT,
    ProductName TEXT NOT NULL,
    Description TEXT,
    Price REAL NOT NULL,
    CompanyId INTEGER,
    StoreId INTEGER,
    ModifiedDate TEXT
)
"""


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def demo_service(service: ProductService) -> None:
    """Demonstrate service-level results."""
    print_section("Service Layer")

    created = service.create_product(ProductEntity(product_name="Widget", price=9.99, company_id=1, store_id=1))
    print(f"  create            -> {created}")

    invalid = service.create_product(ProductEntity(product_name="", price=9.99))
    print(f"  create (invalid)  -> {invalid}")

    updated = service.update_product(created.unwrap(), ProductEntity(product_name="Widget XL", price=14.99))
    print(f"  update            -> {updated}")

    missing = service.delete_product(999)
    print(f"  delete (missing)  -> {missing}")

    print("\n  Products:")
    for product in json.loads(service.list_products().unwrap()):
        print(f"    {product['Id']:>3}  {product['ProductName']:<12} {product['Price']:>8.2f}")


def demo_http(client: TestClient) -> None:
    """Demonstrate the HTTP contract."""
    print_section("HTTP API")

    response = client.post("/products", json={"ProductName": "Gadget", "Price": 4.5, "CompanyId": 1, "StoreId": 2})
    print(f"  POST   /products           {response.status_code}  {response.text}")
    location = response.headers["location"]

    response = client.put(location, json={"ProductName": "Gadget Pro", "Price": 7.25, "CompanyId": 1, "StoreId": 2})
    print(f"  PUT    {location:<20} {response.status_code}  {response.text}")

    response = client.get("/products")
    print(f"  GET    /products           {response.status_code}  {len(response.json())} products")

    response = client.delete(location)
    print(f"  DELETE {location:<20} {response.status_code}  {response.text}")

    response = client.put(location, json={"ProductName": "Gadget Pro", "Price": 7.25})
    print(f"  PUT    {location:<20} {response.status_code}  {response.text}")

    response = client.get("/products", headers={"x-functions-key": "wrong"})
    print(f"  GET    /products (bad key) {response.status_code}")


def main() -> None:
    """Run all demos."""
    settings = Settings(database_url="sqlite://", api_key=DEMO_KEY, log_level="WARNING")
    engine = create_db_engine(settings)
    with engine.begin() as conn:
        conn.execute(text(PRODUCT_TABLE_DDL))

    demo_service(ProductService.create(repository=SqlProductRepository.create(engine)))

    with TestClient(create_app(settings=settings, engine=engine), headers={"x-functions-key": DEMO_KEY}) as client:
        demo_http(client)

    engine.dispose()
    print_section("Done")


if __name__ == "__main__":
    main()
