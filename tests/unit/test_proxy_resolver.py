"""Unit tests for managed proxy session substitution."""

import pytest

from llm_dispatch.core.models import IdeSettings, LLMOptions
from llm_dispatch.core.provider import apply_proxy_session, is_proxy_provider


@pytest.mark.unit
class TestApplyProxySession:
    def test_replaces_key_and_rewrites_base(self):
        options = LLMOptions(
            provider="continue-proxy", api_key="user-key", api_base="https://user.example.com/v1"
        )
        settings = IdeSettings(
            user_token="session-token", remote_config_server_url="https://config.example.com/a/b"
        )

        patched = apply_proxy_session(options, settings)

        assert patched.api_key == "session-token"
        assert patched.api_base == "https://config.example.com/proxy/v1"

    def test_keeps_port_of_remote_server(self):
        settings = IdeSettings(user_token="t", remote_config_server_url="http://localhost:3000")

        patched = apply_proxy_session(LLMOptions(provider="continue-proxy"), settings)

        assert patched.api_base == "http://localhost:3000/proxy/v1"

    def test_missing_remote_url_skips_base_rewrite(self):
        options = LLMOptions(provider="continue-proxy", api_base="https://user.example.com/v1")

        patched = apply_proxy_session(options, IdeSettings(user_token="session-token"))

        assert patched.api_base == "https://user.example.com/v1"

    def test_missing_token_yields_empty_key(self):
        patched = apply_proxy_session(
            LLMOptions(provider="continue-proxy", api_key="user-key"), IdeSettings()
        )

        assert patched.api_key == ""

    def test_returns_new_options_without_mutating_input(self):
        options = LLMOptions(provider="continue-proxy", api_key="user-key")

        patched = apply_proxy_session(options, IdeSettings(user_token="session-token"))

        assert patched is not options
        assert options.api_key == "user-key"


@pytest.mark.unit
def test_only_continue_proxy_is_the_proxy_provider():
    assert is_proxy_provider("continue-proxy") is True
    assert is_proxy_provider("openai") is False
    assert is_proxy_provider("Continue-Proxy") is False
