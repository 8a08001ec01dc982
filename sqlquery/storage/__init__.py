# ==============================================
# STORAGE: DATABASE CONNECTIONS + METRIC SINKS
# ==============================================
#
# Modules:
# --------
# - connection.py    → Open a database by driver name, run queries
# - sink.py          → Sink base class, Metric, MemorySink
# - line_protocol.py → Line protocol encoding, stdout and HTTP sinks
# - mongo_sink.py    → Store metrics as MongoDB documents
#
# ==============================================

from .connection import Connection, QueryResult, available_drivers, register_driver
from .sink import Metric, Sink, MemorySink
from .line_protocol import LineProtocolSink, HttpSink, encode_line
from .mongo_sink import MongoSink

__all__ = [
    "Connection",
    "QueryResult",
    "available_drivers",
    "register_driver",
    "Metric",
    "Sink",
    "MemorySink",
    "LineProtocolSink",
    "HttpSink",
    "encode_line",
    "MongoSink",
]
