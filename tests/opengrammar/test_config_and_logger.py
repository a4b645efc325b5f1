import importlib

import opengrammar.config as config
import opengrammar.logger as logger_mod


def test_config_reads_logging_level_from_env(monkeypatch):
    monkeypatch.setenv("LOGGING_LEVEL", "warning")
    try:
        reloaded = importlib.reload(config)
        assert reloaded.LOGGING_LEVEL == "WARNING"
    finally:
        monkeypatch.delenv("LOGGING_LEVEL", raising=False)
        importlib.reload(config)


def test_config_defaults_to_info(monkeypatch):
    monkeypatch.delenv("LOGGING_LEVEL", raising=False)
    monkeypatch.setattr("dotenv.load_dotenv", lambda *a, **k: False)
    assert importlib.reload(config).LOGGING_LEVEL == "INFO"


def test_api_constants_are_fixed():
    assert config.ANTHROPIC_MESSAGES_URL == "https://api.anthropic.com/v1/messages"
    assert config.ANTHROPIC_MODEL == "claude-3-haiku-20240307"
    assert config.ANTHROPIC_MAX_TOKENS == 1000
    assert config.ANTHROPIC_API_VERSION == "2023-06-01"


def test_logger_helpers():
    log = logger_mod.get_logger()

    assert log is logger_mod.logger
    assert log.name == "opengrammar"
    assert callable(logger_mod.info)
    assert callable(logger_mod.error)


def test_client_never_logs_the_credential(fake_session, caplog):
    from opengrammar.errors import RemoteAPIError
    from opengrammar.llm import AnthropicClient

    caplog.set_level("DEBUG", logger="opengrammar")
    client = AnthropicClient(session=fake_session(401, "bad key"))

    try:
        client.send("prompt", "sk-super-secret")
    except RemoteAPIError:
        pass

    assert "sk-super-secret" not in caplog.text
    assert "401" in caplog.text


def test_logger_relies_on_config_for_dotenv_loading():
    assert logger_mod.config is config
    assert not hasattr(logger_mod, "load_dotenv")
