"""Exception hierarchy for the SQL query collector.

Every error raised by a collection cycle derives from SqlQueryError, so a
scheduler can catch one class and report the specific cause:

    try:
        collector.gather()
    except TypeCoercionError as e:
        print(f"Bad value {e.value!r} in column {e.column}")
    except SqlQueryError as e:
        print(f"Collection failed: {e}")
"""

from typing import Optional


class SqlQueryError(Exception):
    """Base exception for all collector errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(SqlQueryError):
    """Invalid or unusable configuration value."""

    pass


class DatabaseConnectionError(SqlQueryError):
    """The database could not be opened or did not answer a ping."""

    def __init__(self, message: str, driver: Optional[str] = None) -> None:
        self.driver = driver
        super().__init__(message)


class QueryExecutionError(SqlQueryError):
    """A configured query failed to execute or its columns could not be read."""

    def __init__(self, query: str, reason: str) -> None:
        self.query = query
        self.reason = reason
        super().__init__(f"Query '{query}' failed: {reason}")


class RowReadError(SqlQueryError):
    """The driver failed while fetching a row."""

    def __init__(self, query: str, reason: str) -> None:
        self.query = query
        self.reason = reason
        super().__init__(f"Reading a row of query '{query}' failed: {reason}")


class TypeCoercionError(SqlQueryError):
    """A field cell could not be parsed into its configured type.

    Attributes:
        column: Name of the offending column
        value: The raw cell text
        target_type: "int", "float" or "bool"
    """

    def __init__(self, column: str, value: str, target_type: str) -> None:
        self.column = column
        self.value = value
        self.target_type = target_type
        super().__init__(
            f"Column '{column}': cannot parse {value!r} as {target_type}"
        )


class SinkError(SqlQueryError):
    """A metric sink rejected or failed to deliver a record."""

    pass
