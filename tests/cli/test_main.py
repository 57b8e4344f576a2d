"""Tests for the llmd command line interface."""

import json

import pytest
from typer.testing import CliRunner

from llm_dispatch.cli import main as cli_main
from llm_dispatch.cli.main import app
from llm_dispatch.core.models import ModelDescription, RequestOptions

WIDE = {"COLUMNS": "200"}


@pytest.fixture(autouse=True)
def keep_root_logging(monkeypatch):
    """The CLI callback reconfigures root logging; keep pytest's handlers."""
    monkeypatch.setattr(cli_main, "configure_root_logging", lambda level: None)


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def config_file(tmp_path):
    (tmp_path / "rules.md").write_text("Prefer short answers.", encoding="utf-8")
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "systemMessage": "{{ rules.md }}",
                "models": [
                    {
                        "title": "Tab",
                        "provider": "cortex",
                        "model": "cortex-tab",
                        "apiKey": "cortex-secret-key",
                    },
                    {
                        "title": "Canned",
                        "provider": "mock",
                        "completionOptions": {"completion": "Canned answer"},
                    },
                ],
            }
        ),
        encoding="utf-8",
    )
    return path


@pytest.mark.unit
class TestProvidersCommand:
    def test_lists_registered_providers(self, runner):
        result = runner.invoke(app, ["providers"], env=WIDE)

        assert result.exit_code == 0
        assert "Registered Providers (22)" in result.output
        assert "cortex" in result.output
        assert "continue-proxy" in result.output


@pytest.mark.unit
class TestResolveCommand:
    def test_shows_resolved_models_with_masked_keys(self, runner, config_file):
        result = runner.invoke(app, ["resolve", str(config_file)], env=WIDE)

        assert result.exit_code == 0
        assert "codestral-latest" in result.output
        assert "cort...-key" in result.output
        assert "cortex-secret-key" not in result.output
        assert "mock-model" in result.output

    def test_title_selects_one_model(self, runner, config_file):
        result = runner.invoke(app, ["resolve", str(config_file), "--title", "Canned"], env=WIDE)

        assert result.exit_code == 0
        assert "mock-model" in result.output
        assert "codestral-latest" not in result.output

    def test_unknown_title_fails(self, runner, config_file):
        result = runner.invoke(app, ["resolve", str(config_file), "-t", "Nope"], env=WIDE)

        assert result.exit_code == 1
        assert "No model titled 'Nope'" in result.output

    def test_unknown_provider_exits_with_2(self, runner, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps([{"title": "Odd", "provider": "not-a-provider"}]))

        result = runner.invoke(app, ["resolve", str(path)], env=WIDE)

        assert result.exit_code == 2
        assert "unknown provider" in result.output

    def test_invalid_json_fails(self, runner, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")

        result = runner.invoke(app, ["resolve", str(path)], env=WIDE)

        assert result.exit_code == 1
        assert "invalid JSON" in result.output

    def test_missing_template_file_fails(self, runner, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"provider": "mock", "systemMessage": "{{ missing.md }}"}))

        result = runner.invoke(app, ["resolve", str(path)], env=WIDE)

        assert result.exit_code == 1
        assert "System message rendering failed" in result.output

    def test_malformed_template_fails(self, runner, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"provider": "mock", "systemMessage": "Rules: {{ rules.md"}))

        result = runner.invoke(app, ["resolve", str(path)], env=WIDE)

        assert result.exit_code == 1
        assert "System message rendering failed" in result.output


@pytest.mark.unit
class TestCompleteCommand:
    def test_streams_completion_from_selected_model(self, runner, config_file):
        result = runner.invoke(
            app, ["complete", str(config_file), "Hello?", "--title", "Canned"], env=WIDE
        )

        assert result.exit_code == 0
        assert "Canned answer" in result.output

    def test_unknown_provider_exits_with_2(self, runner, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"provider": "not-a-provider"}))

        result = runner.invoke(app, ["complete", str(path), "Hello?"], env=WIDE)

        assert result.exit_code == 2
        assert "Unknown provider 'not-a-provider'" in result.output


@pytest.mark.unit
class TestCheckCommand:
    def test_valid_configuration(self, runner, monkeypatch):
        monkeypatch.setenv("LLMD_REMOTE_CONFIG_SERVER_URL", "https://config.example.com")

        result = runner.invoke(app, ["check"], env=WIDE)

        assert result.exit_code == 0
        assert "Configuration valid" in result.output
        assert "https://config.example.com" in result.output

    def test_reports_invalid_values(self, runner, monkeypatch):
        monkeypatch.setenv("REQUEST_TIMEOUT", "never")

        result = runner.invoke(app, ["check"], env=WIDE)

        assert result.exit_code == 1
        assert "REQUEST_TIMEOUT=never" in result.output


@pytest.mark.unit
def test_version(runner):
    result = runner.invoke(app, ["version"], env=WIDE)

    assert result.exit_code == 0
    assert "llmd" in result.output


@pytest.mark.unit
class TestDefaultTimeout:
    def test_fills_missing_timeout(self):
        description = ModelDescription(
            provider="openai", request_options=RequestOptions(headers={"X-Org": "acme"})
        )

        updated = cli_main._with_default_timeout(description, 12.0)

        assert updated.request_options == RequestOptions(timeout=12.0, headers={"X-Org": "acme"})
        assert description.request_options.timeout is None

    def test_keeps_explicit_timeout(self):
        description = ModelDescription(provider="openai", request_options=RequestOptions(timeout=5))

        assert cli_main._with_default_timeout(description, 12.0) is description
