import pytest

from memory_client.config import (
    MissingEnvVarError,
    normalize,
    resolve_env_vars,
)


def test_server_url_resolved_from_env():
    cfg = normalize({"serverUrl": "${MY_VAR}"}, env={"MY_VAR": "http://x:9"})
    assert cfg.server_url == "http://x:9"


def test_missing_env_var_named():
    with pytest.raises(MissingEnvVarError) as ei:
        normalize({"serverUrl": "${MY_VAR}"}, env={})
    assert "MY_VAR" in str(ei.value)
    assert ei.value.variable == "MY_VAR"
    assert ei.value.code == "config-missing-env-var"


def test_empty_env_var_counts_as_unset():
    with pytest.raises(MissingEnvVarError):
        normalize({"apiKey": "${AGENT_MEMORY_API_KEY}"},
                  env={"AGENT_MEMORY_API_KEY": ""})


def test_defaults_to_process_environment(monkeypatch):
    monkeypatch.setenv("AGENT_MEMORY_SERVER_URL", "http://from-env:8000")
    monkeypatch.setenv("AGENT_MEMORY_API_KEY", "secret")
    cfg = normalize(
        {"serverUrl": "${AGENT_MEMORY_SERVER_URL}",
         "apiKey": "${AGENT_MEMORY_API_KEY}"}
    )
    assert cfg.server_url == "http://from-env:8000"
    assert cfg.api_key == "secret"


def test_process_environment_unset(monkeypatch):
    monkeypatch.delenv("MEMORY_CLIENT_TEST_UNSET", raising=False)
    with pytest.raises(MissingEnvVarError):
        normalize({"bearerToken": "${MEMORY_CLIENT_TEST_UNSET}"})


def test_multiple_placeholders_in_one_string():
    env = {"HOST": "mem.local", "PORT": "9000"}
    cfg = normalize({"serverUrl": "https://${HOST}:${PORT}/v1"}, env=env)
    assert cfg.server_url == "https://mem.local:9000/v1"


def test_substitution_not_rescanned():
    env = {"OUTER": "${INNER}"}
    assert resolve_env_vars("${OUTER}", env) == "${INNER}"


def test_token_and_key_resolved():
    env = {"TOK": "bearer-1", "KEY": "key-1"}
    cfg = normalize(
        {"apiKey": "Key ${KEY}", "bearerToken": "${TOK}"}, env=env
    )
    assert cfg.api_key == "Key key-1"
    assert cfg.bearer_token == "bearer-1"


def test_plain_strings_untouched():
    assert resolve_env_vars("http://localhost:8000", {}) == (
        "http://localhost:8000"
    )
    # not a complete token
    assert resolve_env_vars("$HOME and ${", {}) == "$HOME and ${"


def test_strategy_error_reported_before_env():
    from memory_client.config import InvalidEnumError

    with pytest.raises(InvalidEnumError):
        normalize(
            {"serverUrl": "${NOPE}", "extractionStrategy": "bogus"}, env={}
        )


def test_empty_placeholder_name_left_as_is():
    # ${} names no variable, so nothing is looked up
    assert resolve_env_vars("a${}b", {}) == "a${}b"
    cfg = normalize({"serverUrl": "http://h/${}"}, env={})
    assert cfg.server_url == "http://h/${}"
