"""
Tests for ProductService results, using both the SQLite repository and
in-memory fakes for failure paths.
"""

import json
from datetime import datetime, timedelta

import pytest
from sqlalchemy.exc import OperationalError

from product_api.entities import ProductEntity
from product_api.services import INVALID_PRODUCT_MESSAGE, ErrorKind, ProductService, Result


class RecordingStore:
    """ProductStore fake that records calls and serves a fixed row set."""

    def __init__(self, existing_ids=(), affected=None, products_json="[]"):
        self.existing_ids = set(existing_ids)
        self.affected = affected
        self.products_json = products_json
        self.calls = []

    def list_as_json(self):
        self.calls.append(("list_as_json",))
        return self.products_json

    def insert(self, product):
        self.calls.append(("insert", product))
        return 42

    def exists(self, product_id):
        self.calls.append(("exists", product_id))
        return product_id in self.existing_ids

    def update(self, product, modified_at):
        self.calls.append(("update", product, modified_at))
        return 1 if self.affected is None else self.affected

    def delete(self, product_id):
        self.calls.append(("delete", product_id))
        return 1 if self.affected is None else self.affected

    def health_check(self):
        return True

    @property
    def mutations(self):
        return [call for call in self.calls if call[0] in ("insert", "update", "delete")]


class BrokenStore:
    """ProductStore fake whose database is down."""

    def _fail(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, ConnectionError("server unreachable"))

    list_as_json = insert = exists = update = delete = _fail

    def health_check(self):
        return False


def widget(**overrides) -> ProductEntity:
    fields = {"product_name": "Widget", "price": 9.99, "company_id": 1, "store_id": 1}
    fields.update(overrides)
    return ProductEntity(**fields)


INVALID_PRODUCTS = [
    None,
    widget(product_name=None),
    widget(product_name=""),
    widget(price=None),
    widget(price=0),
    widget(price=-1.5),
]


class TestListProducts:
    def test_empty_store(self, service):
        result = service.list_products()

        assert result.is_success
        assert result.data == "[]"

    def test_null_from_database_becomes_empty_array(self):
        service = ProductService(repository=RecordingStore(products_json=None))

        assert service.list_products().data == "[]"

    def test_returns_database_json_verbatim(self):
        raw = '[{"Id":1,"ProductName":"Widget"}]'
        service = ProductService(repository=RecordingStore(products_json=raw))

        assert service.list_products().data == raw

    def test_counts_inserted_products(self, service):
        for index in range(3):
            service.create_product(widget(product_name=f"Widget {index}"))

        assert len(json.loads(service.list_products().data)) == 3

    def test_database_failure(self):
        result = ProductService(repository=BrokenStore()).list_products()

        assert result.kind is ErrorKind.INFRASTRUCTURE
        assert result.error == "An error occurred while retrieving products."


class TestCreateProduct:
    def test_valid_product_is_inserted(self, service):
        result = service.create_product(widget(description="Blue"))

        assert result.is_success
        [row] = json.loads(service.list_products().data)
        assert row["Id"] == result.data
        assert row["ProductName"] == "Widget"
        assert row["Description"] == "Blue"
        assert row["Price"] == 9.99

    @pytest.mark.parametrize("product", INVALID_PRODUCTS)
    def test_invalid_product_never_reaches_store(self, product):
        store = RecordingStore()

        result = ProductService(repository=store).create_product(product)

        assert result.kind is ErrorKind.VALIDATION
        assert result.error == INVALID_PRODUCT_MESSAGE
        assert store.calls == []

    def test_database_failure(self):
        result = ProductService(repository=BrokenStore()).create_product(widget())

        assert result.kind is ErrorKind.INFRASTRUCTURE
        assert result.error == "An error occurred while creating the product."


class TestUpdateProduct:
    def test_path_id_overrides_payload_id(self):
        store = RecordingStore(existing_ids={7})

        result = ProductService(repository=store).update_product(7, widget(id=99))

        assert result.is_success
        [(_, product, _)] = store.mutations
        assert product.id == 7

    def test_missing_product_is_not_found(self):
        store = RecordingStore()

        result = ProductService(repository=store).update_product(5, widget())

        assert result.kind is ErrorKind.NOT_FOUND
        assert result.error == "Product with ID: 5 not found."
        assert store.mutations == []

    @pytest.mark.parametrize("product", INVALID_PRODUCTS)
    def test_invalid_product_never_reaches_store(self, product):
        store = RecordingStore(existing_ids={1})

        result = ProductService(repository=store).update_product(1, product)

        assert result.kind is ErrorKind.VALIDATION
        assert store.calls == []

    def test_row_deleted_after_existence_check(self):
        store = RecordingStore(existing_ids={3}, affected=0)

        result = ProductService(repository=store).update_product(3, widget())

        assert result.kind is ErrorKind.NOT_FOUND

    def test_modified_date_moves_forward(self, repository):
        start = datetime(2026, 5, 1, 12, 0, 0)
        ticks = iter([start, start + timedelta(milliseconds=5)])
        service = ProductService(repository=repository, clock=lambda: next(ticks))
        product_id = service.create_product(widget()).data

        service.update_product(product_id, widget(product_name="Widget XL", price=14.99))
        [first] = json.loads(service.list_products().data)
        service.update_product(product_id, widget(product_name="Widget XXL", price=19.99))
        [second] = json.loads(service.list_products().data)

        assert first["ProductName"] == "Widget XL"
        assert second["ProductName"] == "Widget XXL"
        assert second["Price"] == 19.99
        assert second["ModifiedDate"] > first["ModifiedDate"]

    def test_database_failure(self):
        result = ProductService(repository=BrokenStore()).update_product(1, widget())

        assert result.kind is ErrorKind.INFRASTRUCTURE
        assert result.error == "An error occurred while updating the product."


class TestDeleteProduct:
    def test_existing_product_is_removed(self, service, repository):
        product_id = service.create_product(widget()).data

        result = service.delete_product(product_id)

        assert result.is_success
        assert repository.exists(product_id) is False

    def test_missing_product_is_not_found(self):
        store = RecordingStore()

        result = ProductService(repository=store).delete_product(8)

        assert result.kind is ErrorKind.NOT_FOUND
        assert result.error == "Product with ID: 8 not found."
        assert store.mutations == []

    def test_row_deleted_after_existence_check(self):
        store = RecordingStore(existing_ids={3}, affected=0)

        assert ProductService(repository=store).delete_product(3).kind is ErrorKind.NOT_FOUND

    def test_database_failure(self):
        result = ProductService(repository=BrokenStore()).delete_product(1)

        assert result.kind is ErrorKind.INFRASTRUCTURE
        assert result.error == "An error occurred while deleting the product."


def test_result_unwrap_failure_raises():
    result = ProductService(repository=RecordingStore()).delete_product(1)

    assert not result
    with pytest.raises(ValueError, match="Cannot unwrap a failure result"):
        result.unwrap()


def test_result_ok_holds_data():
    result = Result.ok(42)

    assert result
    assert result.unwrap() == 42
    assert result.kind is None
