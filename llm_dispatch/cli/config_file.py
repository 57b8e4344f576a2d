"""Loading model descriptions from IDE configuration files."""

import asyncio
import json
from dataclasses import dataclass, field
from pathlib import Path

from llm_dispatch.core.models import CompletionOptions, ModelDescription, ReadFile


@dataclass(frozen=True)
class ConfigDocument:
    """Parsed configuration file.

    Attributes:
        models: Model descriptions in file order
        completion_options: Document-level base completion options
        system_message: Document-level system message
    """

    models: list[ModelDescription] = field(default_factory=list)
    completion_options: CompletionOptions | None = None
    system_message: str | None = None


def load_config_document(path: Path) -> ConfigDocument:
    """Read a config file.

    Accepts a ``{"models": [...]}`` document, a bare list of descriptions,
    or a single description object.

    Raises:
        ValueError: If the file is not valid JSON or a description is invalid
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"{path}: invalid JSON ({e})") from e

    if isinstance(data, list):
        return ConfigDocument(models=[ModelDescription.from_dict(entry) for entry in data])
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object or list")
    if "models" not in data:
        return ConfigDocument(models=[ModelDescription.from_dict(data)])

    base_options = data.get("completionOptions")
    return ConfigDocument(
        models=[ModelDescription.from_dict(entry) for entry in data["models"]],
        completion_options=(
            CompletionOptions.from_dict(base_options) if base_options is not None else None
        ),
        system_message=data.get("systemMessage"),
    )


def make_file_reader(base_dir: Path) -> ReadFile:
    """Build an async reader resolving relative paths against ``base_dir``."""

    async def read_file(filepath: str) -> str:
        target = Path(filepath).expanduser()
        if not target.is_absolute():
            target = base_dir / target
        return await asyncio.to_thread(target.read_text, encoding="utf-8")

    return read_file
