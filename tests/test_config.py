import logging

from fastapi.testclient import TestClient

from crud_api.app.core import config
from crud_api.app.core.config import Settings
from crud_api.app.core.logging_config import setup_logging


def test_module_settings_instance():
    assert isinstance(config.settings, Settings)
    assert config.settings.id_strategy in {"counter", "length"}


def test_expose_errors():
    assert Settings(environment="development", debug=False).expose_errors
    assert Settings(environment="Development", debug=False).expose_errors
    assert Settings(environment="production", debug=True).expose_errors
    assert not Settings(environment="production", debug=False).expose_errors


def test_env_flag(monkeypatch):
    monkeypatch.setenv("SOME_FLAG", "Yes")
    assert config._env_flag("SOME_FLAG")
    monkeypatch.setenv("SOME_FLAG", "0")
    assert not config._env_flag("SOME_FLAG")
    monkeypatch.delenv("SOME_FLAG")
    assert not config._env_flag("SOME_FLAG")
    assert config._env_flag("SOME_FLAG", "true")


def test_setup_logging_is_idempotent():
    root = logging.getLogger()
    setup_logging("DEBUG")
    handlers = list(root.handlers)
    setup_logging("DEBUG")
    assert root.handlers == handlers
    assert handlers


def test_requests_are_logged(client, caplog):
    with caplog.at_level(logging.INFO, logger="crud_api.requests"):
        client.get("/api/users")

    messages = [record.getMessage() for record in caplog.records if record.name == "crud_api.requests"]
    assert any(message.startswith("GET /api/users -> 200") for message in messages)


def test_store_mutations_are_logged(client, caplog):
    with caplog.at_level(logging.INFO, logger="crud_api.app.services.resource_store"):
        client.post("/api/users", json={"name": "John Doe"})

    assert "Created User 1" in caplog.text


def test_failed_requests_are_logged_as_500(make_app, caplog):
    app = make_app()

    async def explode():
        raise RuntimeError("boom")

    app.add_api_route("/explode", explode)
    client = TestClient(app, raise_server_exceptions=False)

    with caplog.at_level(logging.INFO, logger="crud_api.requests"):
        assert client.get("/explode").status_code == 500

    messages = [record.getMessage() for record in caplog.records if record.name == "crud_api.requests"]
    assert any(message.startswith("GET /explode -> 500") for message in messages)
