"""SQL statements for the product table, per database dialect.

Parameters use SQLAlchemy's ``:name`` style and are always bound, never
interpolated.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductQueries:
    """The statements a product repository needs."""

    list_json: str
    insert: str
    exists: str
    update: str
    delete: str
    ping: str = "SELECT 1"


SQL_SERVER_QUERIES = ProductQueries(
    list_json="SELECT dbo.GetProductsAsJson()",
    insert="EXEC InsertProduct :ProductName, :Description, :Price, :CompanyId, :StoreId",
    exists="SELECT COUNT(1) FROM Product WHERE Id = :ProductID",
    update="""
        UPDATE Product
        SET ProductName = :ProductName,
            Description = :Description,
            Price = :Price,
            CompanyID = :CompanyId,
            StoreID = :StoreId,
            ModifiedDate = :ModifiedDate
        WHERE Id = :Id""",
    delete="DELETE FROM Product WHERE Id = :ProductID",
)

# Plain-SQL stand-ins for the stored function and procedure.
SQLITE_QUERIES = ProductQueries(
    list_json="""
        SELECT json_group_array(
            json_object(
                'Id', Id,
                'ProductName', ProductName,
                'Description', Description,
                'Price', Price,
                'CompanyId', CompanyId,
                'StoreId', StoreId,
                'ModifiedDate', ModifiedDate
            )
        )
        FROM (SELECT * FROM Product ORDER BY Id)""",
    insert="""
        INSERT INTO Product (ProductName, Description, Price, CompanyId, StoreId)
        VALUES (:ProductName, :Description, :Price, :CompanyId, :StoreId)
        RETURNING Id""",
    exists="SELECT COUNT(1) FROM Product WHERE Id = :ProductID",
    update="""
        UPDATE Product
        SET ProductName = :ProductName,
            Description = :Description,
            Price = :Price,
            CompanyId = :CompanyId,
            StoreId = :StoreId,
            ModifiedDate = :ModifiedDate
        WHERE Id = :Id""",
    delete="DELETE FROM Product WHERE Id = :ProductID",
)

_QUERIES_BY_DIALECT = {
    "mssql": SQL_SERVER_QUERIES,
    "sqlite": SQLITE_QUERIES,
}


def queries_for_dialect(dialect_name: str) -> ProductQueries:
    """Look up the statement set for a SQLAlchemy dialect name.

    Raises:
        ValueError: If the dialect is not supported
    """
    try:
        return _QUERIES_BY_DIALECT[dialect_name]
    except KeyError:
        raise ValueError(
            f"Unsupported database dialect '{dialect_name}', "
            f"expected one of {sorted(_QUERIES_BY_DIALECT)}"
        ) from None
