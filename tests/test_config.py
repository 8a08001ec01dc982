# ==============================================
# Tests for Configuration
# ==============================================

import pytest

from sqlquery import config as config_module
from sqlquery.analysis import ColumnRoleConfig
from sqlquery.config import SqlQueryConfig, get_config, reset_config, sample_config
from sqlquery.exceptions import ConfigurationError


@pytest.fixture
def clean_env(monkeypatch):
    """Remove collector variables and keep .env out of the way."""
    for name in (
        "SQLQUERY_DRIVER", "SQLQUERY_SERVER_URL", "SQLQUERY_QUERIES", "SQLQUERY_TABLE_NAME",
        "SQLQUERY_TAG_COLS", "SQLQUERY_INT_FIELDS", "SQLQUERY_FLOAT_FIELDS", "SQLQUERY_BOOL_FIELDS",
        "SQLQUERY_ZEROIZE_NULL", "SQLQUERY_INTERVAL_SECONDS",
        "SINK_KIND", "SINK_URL", "SINK_TIMEOUT_SECONDS",
        "MONGO_HOST", "MONGO_PORT", "MONGO_USER", "MONGO_PASSWORD", "MONGO_DATABASE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config_module, "load_dotenv", lambda **kwargs: False)
    return monkeypatch


class TestSqlQueryConfig:
    def test_defaults(self):
        config = SqlQueryConfig().set_default_values()
        assert config.driver == "oci8"
        assert config.server_url == "user/passw@localhost:port/sid"
        assert config.queries == ["SELECT count(*) FROM tablename"]
        assert config.table_name == "noTableName"
        assert config.zeroize_null is False

    def test_set_values_are_kept(self):
        config = SqlQueryConfig(driver="mysql", queries=["SELECT 1"], table_name="t").set_default_values()
        assert (config.driver, config.queries, config.table_name) == ("mysql", ["SELECT 1"], "t")

    def test_roles(self):
        config = SqlQueryConfig(tag_cols=["loc"], int_fields=["used"], bool_fields=["active"])
        assert config.roles() == ColumnRoleConfig(
            tag_names=("loc",), int_names=("used",), float_names=(), bool_names=("active",)
        )

    def test_from_dict(self):
        config = SqlQueryConfig.from_dict({
            "driver": "sqlite",
            "queries": ["SELECT 1"],
            "tag_cols": ["host"],
            "zeroize_null": True,
        })
        assert config.driver == "sqlite"
        assert config.tag_cols == ["host"]
        assert config.zeroize_null is True
        assert SqlQueryConfig.from_dict(config.to_dict()) == config

    def test_from_dict_unknown_option(self):
        with pytest.raises(ConfigurationError):
            SqlQueryConfig.from_dict({"tag_columns": ["host"]})

    def test_from_dict_string_instead_of_list(self):
        with pytest.raises(ConfigurationError):
            SqlQueryConfig.from_dict({"queries": "SELECT 1"})

    def test_sample_config_mentions_every_option(self):
        text = sample_config()
        for option in ("driver", "server_url", "queries", "tag_cols", "int_fields",
                       "float_fields", "bool_fields", "zeroize_null"):
            assert option in text


class TestGetConfig:
    def test_from_environment(self, clean_env):
        clean_env.setenv("SQLQUERY_DRIVER", "sqlite")
        clean_env.setenv("SQLQUERY_SERVER_URL", "/tmp/x.db")
        clean_env.setenv("SQLQUERY_QUERIES", "SELECT a, b FROM t; SELECT c FROM u")
        clean_env.setenv("SQLQUERY_TAG_COLS", "a, c")
        clean_env.setenv("SQLQUERY_INT_FIELDS", "b")
        clean_env.setenv("SQLQUERY_ZEROIZE_NULL", "yes")
        clean_env.setenv("SQLQUERY_INTERVAL_SECONDS", "2.5")
        clean_env.setenv("SINK_KIND", "memory")

        config = get_config()
        assert config.sqlquery.driver == "sqlite"
        assert config.sqlquery.queries == ["SELECT a, b FROM t", "SELECT c FROM u"]
        assert config.sqlquery.tag_cols == ["a", "c"]
        assert config.sqlquery.int_fields == ["b"]
        assert config.sqlquery.float_fields == []
        assert config.sqlquery.zeroize_null is True
        assert config.interval_seconds == 2.5
        assert config.sink.kind == "memory"
        assert config.sqlquery.table_name == "noTableName"

    def test_singleton(self, clean_env):
        assert get_config() is get_config()
        reset_config()
        clean_env.setenv("SQLQUERY_TABLE_NAME", "other")
        assert get_config().sqlquery.table_name == "other"

    def test_bad_sink_kind(self, clean_env):
        clean_env.setenv("SINK_KIND", "kafka")
        with pytest.raises(ConfigurationError):
            get_config()

    def test_bad_number(self, clean_env):
        clean_env.setenv("MONGO_PORT", "lots")
        with pytest.raises(ConfigurationError):
            get_config()
