"""
Collection events.

The collector reports what it does through a CollectionObserver instead
of printing. LoggingObserver (the default) turns each event into a log
record whose `extra` carries the structured values; RecordingObserver
keeps the events so callers and tests can inspect them.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

from sqlquery.analysis.roles import ColumnRoleIndex

logger = logging.getLogger(__name__)


class CollectionObserver:
    """No-op base; override the hooks you need."""

    def cycle_started(self, queries: Sequence[str]) -> None:
        pass

    def query_started(self, query: str) -> None:
        pass

    def query_classified(self, query: str, columns: Sequence[str], index: ColumnRoleIndex) -> None:
        pass

    def query_finished(self, query: str, row_count: int, duration_seconds: float) -> None:
        pass

    def cycle_finished(self, row_count: int, duration_seconds: float) -> None:
        pass

    def cycle_failed(self, error: Exception) -> None:
        pass


class LoggingObserver(CollectionObserver):
    def __init__(self, log: logging.Logger = logger):
        self.log = log

    def cycle_started(self, queries):
        self.log.debug(
            "Collection cycle started (%d queries)", len(queries),
            extra={"event": "cycle_started", "query_count": len(queries)}
        )

    def query_started(self, query):
        self.log.debug("Performing query '%s'", query, extra={"event": "query_started", "query": query})

    def query_classified(self, query, columns, index):
        counts = index.counts()
        self.log.debug(
            "Query '%s' received %d tags and %d (int) + %d (float) + %d (bool) + %d (str) fields",
            query, counts["tag"], counts["int"], counts["float"], counts["bool"], counts["string"],
            extra={"event": "query_classified", "query": query, "columns": counts}
        )

    def query_finished(self, query, row_count, duration_seconds):
        self.log.info(
            "Query '%s' pushed %d rows in %.3fs", query, row_count, duration_seconds,
            extra={
                "event": "query_finished",
                "query": query,
                "row_count": row_count,
                "duration_seconds": duration_seconds,
            }
        )

    def cycle_finished(self, row_count, duration_seconds):
        self.log.info(
            "Collection cycle finished: %d rows in %.3fs", row_count, duration_seconds,
            extra={"event": "cycle_finished", "row_count": row_count, "duration_seconds": duration_seconds}
        )

    def cycle_failed(self, error):
        self.log.error(
            "Collection cycle aborted: %s", error,
            extra={"event": "cycle_failed", "error_type": type(error).__name__}
        )


@dataclass
class ObservedEvent:
    name: str
    data: Dict[str, Any] = field(default_factory=dict)


class RecordingObserver(CollectionObserver):
    def __init__(self):
        self.events: List[ObservedEvent] = []

    def names(self) -> List[str]:
        return [event.name for event in self.events]

    def cycle_started(self, queries):
        self.events.append(ObservedEvent("cycle_started", {"queries": list(queries)}))

    def query_started(self, query):
        self.events.append(ObservedEvent("query_started", {"query": query}))

    def query_classified(self, query, columns, index):
        self.events.append(ObservedEvent("query_classified", {"query": query, "roles": index.to_dict(columns)}))

    def query_finished(self, query, row_count, duration_seconds):
        self.events.append(ObservedEvent(
            "query_finished",
            {"query": query, "row_count": row_count, "duration_seconds": duration_seconds}
        ))

    def cycle_finished(self, row_count, duration_seconds):
        self.events.append(ObservedEvent("cycle_finished", {"row_count": row_count, "duration_seconds": duration_seconds}))

    def cycle_failed(self, error):
        self.events.append(ObservedEvent("cycle_failed", {"error": error}))
