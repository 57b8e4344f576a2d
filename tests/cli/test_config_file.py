import json

import pytest

from llm_dispatch.cli.config_file import load_config_document, make_file_reader
from llm_dispatch.core.models import CompletionOptions


@pytest.mark.unit
class TestLoadConfigDocument:
    def test_models_document_with_shared_options(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(
            json.dumps(
                {
                    "completionOptions": {"temperature": 0.2},
                    "systemMessage": "Be brief.",
                    "models": [{"provider": "openai"}, {"provider": "ollama", "model": "llama3"}],
                }
            )
        )

        document = load_config_document(path)

        assert [d.provider for d in document.models] == ["openai", "ollama"]
        assert document.completion_options == CompletionOptions(temperature=0.2)
        assert document.system_message == "Be brief."

    def test_bare_list(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps([{"provider": "groq"}]))

        document = load_config_document(path)

        assert document.models[0].provider == "groq"
        assert document.completion_options is None

    def test_single_description(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"provider": "mock", "title": "Only"}))

        assert load_config_document(path).models[0].title == "Only"

    def test_scalar_document_is_rejected(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("42")

        with pytest.raises(ValueError, match="expected a JSON object or list"):
            load_config_document(path)


@pytest.mark.unit
@pytest.mark.asyncio
class TestFileReader:
    async def test_relative_paths_resolve_against_base_dir(self, tmp_path):
        (tmp_path / "rules.md").write_text("Be kind.", encoding="utf-8")

        assert await make_file_reader(tmp_path)("rules.md") == "Be kind."

    async def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            await make_file_reader(tmp_path)("missing.md")
