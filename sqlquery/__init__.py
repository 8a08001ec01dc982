# ==============================================
# SQL Query Metrics Collector
# ==============================================
#
# Package Structure:
#
# sqlquery/
# ├── analysis/         # Classify result columns into tag/field roles
# ├── normalization/    # Decode raw cells into typed tag and field values
# ├── storage/          # Database connections and metric sinks
# ├── config.py         # Configuration management
# ├── observability.py  # Collection events and logging
# ├── collector.py      # One collection cycle over all queries
# ├── pipeline.py       # Periodic collection loop
# └── cli.py            # Command line entry point
#
# ==============================================

__version__ = "0.1.0"
