# ==============================================
# Sink
# ==============================================
#
# PURPOSE:
#   Receives one metric per decoded row. The collector only ever
#   calls emit(table_name, fields, tags, timestamp) and never reads
#   a return value.
#
# CLASSES:
# --------
# - Metric (dataclass): one emitted record
# - Sink: base class, emit() + close()
# - MemorySink: keeps every Metric in a list
#
# ==============================================

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional


@dataclass
class Metric:
    measurement: str
    fields: Dict[str, Any] = field(default_factory=dict)
    tags: Dict[str, str] = field(default_factory=dict)
    timestamp: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "measurement": self.measurement,
            "tags": dict(self.tags),
            "fields": dict(self.fields),
            "time": self.timestamp,
        }


class Sink:
    """Destination for emitted metrics."""

    def emit(self, table_name: str, fields: Dict[str, Any], tags: Dict[str, str], timestamp: datetime) -> None:
        raise NotImplementedError

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class MemorySink(Sink):
    def __init__(self):
        self.metrics: List[Metric] = []

    def emit(self, table_name, fields, tags, timestamp) -> None:
        self.metrics.append(Metric(table_name, dict(fields), dict(tags), timestamp))

    def clear(self) -> None:
        self.metrics.clear()
