# ==============================================
# MongoSink
# ==============================================
#
# PURPOSE:
#   Stores every metric as a MongoDB document in a collection named
#   after the measurement:
#
#     {"measurement": ..., "tags": {...}, "fields": {...}, "time": ...}
#
#   Constructor stores connection params only; connect() opens the
#   client and pings it. Usable as `with MongoSink(...) as sink:`.
#
# ==============================================

from pymongo import MongoClient as PyMongoClient
from pymongo.errors import ConnectionFailure, OperationFailure, PyMongoError

from sqlquery.exceptions import SinkError
from .sink import Metric, Sink


class MongoSink(Sink):
    def __init__(self, host, port, database, user=None, password=None):
        self.host = host
        self.port = port
        self.database = database
        self.user = user
        self.password = password
        self.client = None

    def connect(self):
        if self.user and self.password:
            uri = f"mongodb://{self.user}:{self.password}@{self.host}:{self.port}/{self.database}"
        else:
            uri = f"mongodb://{self.host}:{self.port}/{self.database}"
        try:
            self.client = PyMongoClient(uri)
            self.client.admin.command('ping')
        except (ConnectionFailure, OperationFailure) as e:
            self.client = None
            raise SinkError(f"Could not connect to MongoDB: {e}") from e

    def disconnect(self):
        if self.client:
            self.client.close()
            self.client = None

    def emit(self, table_name, fields, tags, timestamp) -> None:
        if not self.client:
            raise SinkError("Not connected to MongoDB.")
        document = Metric(table_name, fields, tags, timestamp).to_dict()
        try:
            self.client[self.database][table_name].insert_one(document)
        except PyMongoError as e:
            raise SinkError(f"MongoDB insert into '{table_name}' failed: {e}") from e

    def close(self) -> None:
        self.disconnect()

    def __enter__(self):
        self.connect()
        return self
