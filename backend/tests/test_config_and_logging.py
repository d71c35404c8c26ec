import logging

import pytest

from config.app_config import load_config
from exceptions import ConfigurationError
from utils.logging_utils import (
    StructuredLogger,
    clear_logging_context,
    get_logging_context,
    log_operation,
    set_logging_context,
)


def test_config_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("MAILRELAY_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("MAILRELAY_DOMAIN", "Relay.Example.org")
    monkeypatch.setenv("MAILRELAY_CORS_ORIGINS", "http://a.test, http://b.test,")
    monkeypatch.delenv("MAILRELAY_DATABASE_URL", raising=False)

    config = load_config()

    assert config.local_domain == "relay.example.org"
    assert config.database_url == f"sqlite:///{tmp_path / 'mailrelay.db'}"
    assert config.is_sqlite
    assert config.log_dir == tmp_path / "logs"
    assert config.cors_origins == ["http://a.test", "http://b.test"]


def test_config_rejects_malformed_local_domain(monkeypatch):
    monkeypatch.setenv("MAILRELAY_DOMAIN", "not a domain")

    with pytest.raises(ConfigurationError):
        load_config()


@pytest.fixture(autouse=True)
def _clean_context():
    clear_logging_context()
    yield
    clear_logging_context()


def test_logging_context_is_merged_into_records(caplog):
    set_logging_context(user_id="u-1")

    with caplog.at_level(logging.INFO):
        StructuredLogger("tests.logging").info("hello", extra={"domain_id": "d-1"})

    record = caplog.records[-1]
    assert record.user_id == "u-1"
    assert record.domain_id == "d-1"
    assert "user_id=u-1" in record.getMessage()


def test_clear_logging_context():
    set_logging_context(user_id="u-1")
    clear_logging_context()

    assert get_logging_context() == {}


def test_log_operation_logs_completion(caplog):
    @log_operation("rename")
    def rename(*, user_id, domain_id):
        return "done"

    with caplog.at_level(logging.INFO):
        assert rename(user_id="u-1", domain_id="d-1") == "done"

    record = caplog.records[-1]
    assert record.operation == "rename"
    assert record.domain_id == "d-1"
    assert "Completed rename" in record.getMessage()


def test_log_operation_reraises_failures(caplog):
    @log_operation("explode")
    def explode(*, user_id):
        raise ValueError("boom")

    with caplog.at_level(logging.INFO):
        with pytest.raises(ValueError):
            explode(user_id="u-1")

    assert caplog.records[-1].error_type == "ValueError"
