"""
Tests for the startup database check and launcher.
"""

import json

from pymongo.errors import ServerSelectionTimeoutError

from catalog import run
from catalog.api.db.mongo import check_connection


class _Admin:
    def __init__(self, error=None):
        self.error = error

    def command(self, name):
        if self.error:
            raise self.error
        return {"ok": 1.0}


class _Client:
    def __init__(self, error=None):
        self.admin = _Admin(error)


def _events(capsys):
    return [json.loads(line)["event"] for line in capsys.readouterr().out.splitlines() if line.startswith("{")]


class TestCheckConnection:
    def test_unreachable_server_is_logged(self, capsys):
        ok = check_connection(_Client(ServerSelectionTimeoutError("no servers")))

        assert ok is False
        assert "mongo_connection_error" in _events(capsys)

    def test_reachable_server(self, capsys):
        assert check_connection(_Client()) is True
        assert "mongo_connected" in _events(capsys)


class TestRunMain:
    def test_keeps_serving_when_database_is_down(self, monkeypatch):
        served = {}

        class _App:
            def run(self, **kwargs):
                served.update(kwargs)

        def fake_create_app(repository=None, debug=None):
            served["graphql_debug"] = debug
            return _App()

        monkeypatch.setattr(run, "connect_db", lambda: None)
        monkeypatch.setattr(run, "check_connection", lambda: False)
        monkeypatch.setattr(run, "create_app", fake_create_app)
        monkeypatch.setattr(run.settings, "DEBUG", True)

        run.main(["--port", "4100", "--no-debug"])

        assert served["port"] == 4100
        assert served["debug"] is False
        assert served["graphql_debug"] is False
