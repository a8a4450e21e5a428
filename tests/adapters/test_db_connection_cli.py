"""Tests for the test_db_connection adapter."""

from src.adapters import test_db_connection


class _DummyConnection:
    def __init__(self) -> None:
        self.executed: list[str] = []

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False

    def exec_driver_sql(self, statement: str) -> None:
        self.executed.append(statement)


class _DummyEngine:
    def __init__(self, url: str) -> None:
        self.url = url
        self.connection = _DummyConnection()

    def connect(self):
        return self.connection


def test_main_checks_connection_and_prepares_table(monkeypatch):
    """The CLI should log the URL, run SELECT 1, and create the table."""
    engine = _DummyEngine("sqlite:///debts.db")
    prepared: list[object] = []

    class _Adapter:
        def get_debts_engine(self):
            return engine

    class _Repository:
        def __init__(self, db_port) -> None:
            self.db_port = db_port

        def prepare_storage(self) -> None:
            prepared.append(self.db_port)

    log_messages: list[str] = []

    class _Logger:
        def info(self, msg: str) -> None:
            log_messages.append(msg)

    adapter = _Adapter()
    monkeypatch.setattr(
        test_db_connection,
        "build_database_adapter",
        lambda: adapter,
    )
    monkeypatch.setattr(
        test_db_connection,
        "build_debts_repository",
        _Repository,
    )
    monkeypatch.setattr(
        test_db_connection,
        "get_app_logger",
        lambda: _Logger(),
    )

    test_db_connection.main()

    assert "sqlite:///debts.db" in log_messages[0]
    assert engine.connection.executed == ["SELECT 1"]
    assert prepared == [adapter]
    assert "debts table is ready" in log_messages[-1]
