# ==============================================
# SqlQueryCollector — One Collection Cycle
# ==============================================
#
# PURPOSE:
#   Runs every configured query once and emits one metric per row.
#
#   ┌──────────────────────────────────────────────────────────┐
#   │                    SqlQueryCollector                     │
#   │                                                          │
#   │  Connection.open(driver, server_url) → ping()            │
#   │                 │                                        │
#   │                 ▼  for each query (in order)             │
#   │  conn.query(sql) → columns + lazy rows, query time       │
#   │                 │                                        │
#   │                 ▼  once per query                        │
#   │  ColumnClassifier.classify(columns) → ColumnRoleIndex    │
#   │                 │                                        │
#   │                 ▼  once per row                          │
#   │  RowDecoder.decode(row) → tags + fields                  │
#   │                 │                                        │
#   │                 ▼                                        │
#   │  sink.emit(table_name, fields, tags, query time)         │
#   └──────────────────────────────────────────────────────────┘
#
# ERRORS:
#   The first error (connection, query, row read, coercion) aborts
#   the cycle: the remaining rows and queries are skipped and the
#   error propagates. The connection and the open cursor are closed
#   on the way out. There are no retries here.
#
# ==============================================

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, List, Optional, Tuple

from sqlquery.analysis.classifier import ColumnClassifier
from sqlquery.config import SqlQueryConfig, sample_config
from sqlquery.normalization.row_decoder import RowDecoder
from sqlquery.observability import CollectionObserver, LoggingObserver
from sqlquery.storage.connection import Connection
from sqlquery.storage.sink import Sink

logger = logging.getLogger(__name__)

ConnectionOpener = Callable[[str, str], Connection]


@dataclass
class GatherResult:
    rows_per_query: List[Tuple[str, int]] = field(default_factory=list)
    total_rows: int = 0
    duration_seconds: float = 0.0


class SqlQueryCollector:
    """Collects metrics from SQL queries into a sink."""

    def __init__(
        self,
        config: SqlQueryConfig,
        sink: Sink,
        observer: Optional[CollectionObserver] = None,
        opener: Optional[ConnectionOpener] = None
    ):
        self.config = config.set_default_values()
        self.sink = sink
        self.observer = observer or LoggingObserver()
        self._open = opener or Connection.open

        roles = self.config.roles()
        for name, listed_under in roles.overlaps().items():
            logger.warning(
                "Column '%s' is listed as %s; it will be treated as %s",
                name,
                " and ".join(role.value for role in listed_under),
                listed_under[0].value,
            )
        self._classifier = ColumnClassifier(roles)
        self._decoder = RowDecoder(zeroize_null=self.config.zeroize_null)

    @staticmethod
    def description() -> str:
        return "Perform SQL query and read results"

    @staticmethod
    def sample_config() -> str:
        return sample_config()

    def gather(self) -> GatherResult:
        """
        Run one collection cycle.

        Returns:
            GatherResult with the number of rows emitted per query.

        Raises:
            DatabaseConnectionError, QueryExecutionError, RowReadError,
            TypeCoercionError: the first failure of the cycle.
        """
        result = GatherResult()
        started = time.monotonic()
        self.observer.cycle_started(self.config.queries)

        try:
            with self._open(self.config.driver, self.config.server_url) as connection:
                connection.ping()
                for query in self.config.queries:
                    row_count = self._run_query(connection, query)
                    result.rows_per_query.append((query, row_count))
                    result.total_rows += row_count
        except Exception as e:
            self.observer.cycle_failed(e)
            raise

        result.duration_seconds = time.monotonic() - started
        self.observer.cycle_finished(result.total_rows, result.duration_seconds)
        return result

    def _run_query(self, connection: Connection, query: str) -> int:
        self.observer.query_started(query)
        started = time.monotonic()
        row_count = 0

        with connection.query(query) as query_result:
            query_time = datetime.now(timezone.utc)
            columns = query_result.columns
            index = self._classifier.classify(columns)
            self.observer.query_classified(query, columns, index)

            for row in query_result.rows:
                decoded = self._decoder.decode(row, columns, index)
                self.sink.emit(self.config.table_name, decoded.fields, decoded.tags, query_time)
                row_count += 1

        self.observer.query_finished(query, row_count, time.monotonic() - started)
        return row_count
