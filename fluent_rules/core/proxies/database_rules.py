"""
Database-backed proxied rules: unique and exists.

Both render a table, a column and an optional list of extra
``column,value`` constraints the validation engine adds to its query.
"""

from typing import Any

from .base_proxy import ProxyRule
from fluent_rules.utils.formatting import format_argument


def _addslashes(value: str) -> str:
    """Escape backslashes, quotes and NUL bytes."""
    return (
        value.replace("\\", "\\\\")
        .replace("'", "\\'")
        .replace('"', '\\"')
        .replace("\x00", "\\0")
    )


class DatabaseRule(ProxyRule):
    """
    Shared table/column/where handling for database rules.

    Parameters:
    - table: Table (or connection.table) to query
    - column: Column to compare against, "NULL" lets the engine use the field name
    """

    configuration_methods = frozenset({
        "where",
        "where_not",
        "where_null",
        "where_not_null",
    })

    def __init__(self, table: str, column: str = "NULL"):
        self.table = table
        self.column = column
        self.wheres: list[tuple[str, str]] = []

    def where(self, column: str, value: Any = None) -> "DatabaseRule":
        """Constrain the query to rows where ``column`` equals ``value``."""
        self.wheres.append((column, format_argument(value)))
        return self

    def where_not(self, column: str, value: Any) -> "DatabaseRule":
        """Constrain the query to rows where ``column`` differs from ``value``."""
        return self.where(column, "!" + format_argument(value))

    def where_null(self, column: str) -> "DatabaseRule":
        return self.where(column, "NULL")

    def where_not_null(self, column: str) -> "DatabaseRule":
        return self.where(column, "NOT_NULL")

    def format_wheres(self) -> str:
        return ",".join(f"{column},{value}" for column, value in self.wheres)


class Unique(DatabaseRule):
    """
    ``unique:table,column,ignore,id_column[,wheres]``

    ``ignore`` skips one row (typically the record being updated) and is
    quoted so ids containing commas survive the engine's argument split.
    """

    rule_name = "unique"
    configuration_methods = DatabaseRule.configuration_methods | {"ignore"}

    def __init__(self, table: str, column: str = "NULL"):
        super().__init__(table, column)
        self.ignore_id: Any = None
        self.id_column = "id"

    def ignore(self, id: Any, id_column: str | None = None) -> "Unique":
        """Ignore the row whose ``id_column`` equals ``id``."""
        self.ignore_id = id
        self.id_column = id_column or "id"
        return self

    def __str__(self) -> str:
        if self.ignore_id:
            ignore = '"' + _addslashes(format_argument(self.ignore_id)) + '"'
        else:
            ignore = "NULL"

        token = f"unique:{self.table},{self.column},{ignore},{self.id_column},{self.format_wheres()}"
        return token.rstrip(",")


class Exists(DatabaseRule):
    """``exists:table,column[,wheres]``"""

    rule_name = "exists"

    def __str__(self) -> str:
        return f"exists:{self.table},{self.column},{self.format_wheres()}".rstrip(",")
