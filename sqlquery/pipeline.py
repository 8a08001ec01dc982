"""
==============================================
Collection Pipeline
==============================================

Runs the collector on a fixed interval with a sink built from
configuration.

USAGE EXAMPLES:

1. One cycle:
    from sqlquery.pipeline import CollectionPipeline

    pipeline = CollectionPipeline()
    result = pipeline.run_once()

2. Periodic collection (Ctrl+C to stop):
    with CollectionPipeline() as pipeline:
        pipeline.run(max_cycles=10)
"""

import logging
import time
from typing import Callable, Optional

from sqlquery.collector import GatherResult, SqlQueryCollector
from sqlquery.config import AppConfig, get_config
from sqlquery.exceptions import ConfigurationError, SqlQueryError
from sqlquery.observability import CollectionObserver
from sqlquery.storage.line_protocol import HttpSink, LineProtocolSink
from sqlquery.storage.mongo_sink import MongoSink
from sqlquery.storage.sink import MemorySink, Sink

logger = logging.getLogger(__name__)


def build_sink(config: AppConfig) -> Sink:
    """Create the sink named by config.sink.kind."""
    kind = config.sink.kind
    if kind == "stdout":
        return LineProtocolSink()
    if kind == "http":
        return HttpSink(config.sink.url, timeout=config.sink.timeout_seconds)
    if kind == "mongo":
        sink = MongoSink(
            host=config.mongo.host,
            port=config.mongo.port,
            database=config.mongo.database,
            user=config.mongo.user,
            password=config.mongo.password
        )
        sink.connect()
        return sink
    if kind == "memory":
        return MemorySink()
    raise ConfigurationError(f"Unknown sink kind '{kind}'")


class CollectionPipeline:
    """
    Periodic wrapper around SqlQueryCollector.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        sink: Optional[Sink] = None,
        observer: Optional[CollectionObserver] = None,
        sleep: Callable[[float], None] = time.sleep
    ):
        """
        Args:
            config: Optional configuration. If None, loads from environment.
            sink: Optional sink. If None, built from config.sink.
            observer: Optional observer passed to the collector.
            sleep: Function used to wait between cycles.
        """
        self._config = config or get_config()
        self.sink = sink or build_sink(self._config)
        self.collector = SqlQueryCollector(self._config.sqlquery, self.sink, observer=observer)
        self._sleep = sleep
        self._is_running = False
        self.cycles_run = 0
        self.cycles_failed = 0

    def run_once(self) -> GatherResult:
        self.cycles_run += 1
        return self.collector.gather()

    def run(self, max_cycles: Optional[int] = None) -> dict:
        """
        Gather every interval_seconds until stopped.

        A failed cycle is logged and the next one runs as scheduled.

        Args:
            max_cycles: Stop after this many cycles (None = indefinite)

        Returns:
            Summary statistics
        """
        interval = self._config.interval_seconds
        self._is_running = True
        total_rows = 0

        try:
            while self._is_running:
                if max_cycles is not None and self.cycles_run >= max_cycles:
                    break

                started = time.monotonic()
                try:
                    total_rows += self.run_once().total_rows
                except SqlQueryError as e:
                    self.cycles_failed += 1
                    logger.error("Cycle %d failed: %s", self.cycles_run, e)

                if max_cycles is not None and self.cycles_run >= max_cycles:
                    break
                self._sleep(max(0.0, interval - (time.monotonic() - started)))
        except KeyboardInterrupt:
            logger.info("Interrupted by user")
        finally:
            self._is_running = False

        return {
            "cycles": self.cycles_run,
            "failed_cycles": self.cycles_failed,
            "rows_emitted": total_rows,
        }

    def stop(self) -> None:
        self._is_running = False

    def close(self) -> None:
        self.sink.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
