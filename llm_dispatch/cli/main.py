"""Main CLI entry point for llm-dispatch."""

import asyncio
import dataclasses
import logging
import sys
import uuid
from pathlib import Path

import typer
from jinja2 import TemplateError
from rich.console import Console

from llm_dispatch.cli.config_file import ConfigDocument, load_config_document, make_file_reader
from llm_dispatch.cli.presenters.models import ProviderTablePresenter, ResolvedModelPresenter
from llm_dispatch.core.config import Config, ConfigError, validate_all
from llm_dispatch.core.exceptions import LLMDispatchError
from llm_dispatch.core.logging import configure_root_logging, correlation_context
from llm_dispatch.core.models import ModelDescription, RequestOptions, WriteLog
from llm_dispatch.core.provider import client_factory, provider_registry
from llm_dispatch.llms import BaseLLM

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="llmd",
    help="llm-dispatch CLI - resolve model descriptions into provider clients",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def _fail(message: str, code: int = 1) -> typer.Exit:
    Console(stderr=True).print(f"[red]❌ {message}[/red]")
    return typer.Exit(code)


def _load_config() -> Config:
    try:
        return Config()
    except ConfigError as e:
        raise _fail(f"Configuration error: {e}") from e


def _load_document(config_path: Path) -> ConfigDocument:
    try:
        return load_config_document(config_path)
    except (OSError, ValueError) as e:
        raise _fail(f"Cannot load {config_path}: {e}") from e


def _make_write_log(enabled: bool) -> WriteLog:
    err_console = Console(stderr=True)

    async def write_log(line: str) -> None:
        if enabled:
            err_console.print(line, markup=False, highlight=False)

    return write_log


def _with_default_timeout(description: ModelDescription, timeout: float) -> ModelDescription:
    request_options = description.request_options or RequestOptions()
    if request_options.timeout is not None:
        return description
    return dataclasses.replace(
        description, request_options=dataclasses.replace(request_options, timeout=timeout)
    )


def _select(descriptions: list[ModelDescription], title: str | None) -> list[ModelDescription]:
    if title is None:
        return descriptions
    selected = [d for d in descriptions if d.title == title]
    if not selected:
        raise _fail(f"No model titled '{title}'")
    return selected


async def _resolve_all(
    document: ConfigDocument,
    descriptions: list[ModelDescription],
    base_dir: Path,
    session_id: str,
    config: Config,
) -> list[tuple[ModelDescription, BaseLLM | None]]:
    read_file = make_file_reader(base_dir)
    write_log = _make_write_log(config.log_prompts)
    results = []
    for description in descriptions:
        llm = await client_factory.resolve_from_description(
            _with_default_timeout(description, config.request_timeout),
            read_file,
            session_id,
            config.ide_settings,
            write_log,
            document.completion_options,
            document.system_message,
        )
        results.append((description, llm))
    return results


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """llm-dispatch CLI."""
    try:
        log_level = Config().log_level
    except ConfigError:
        # Reported by the command itself; `llmd check` lists every error
        log_level = "INFO"
    configure_root_logging("DEBUG" if verbose else log_level)


@app.command()
def version() -> None:
    """Show version information."""
    from llm_dispatch import __version__

    console = Console()
    console.print(f"[bold cyan]llmd[/bold cyan] version [green]{__version__}[/green]")


@app.command()
def providers() -> None:
    """List registered providers and their defaults."""
    ProviderTablePresenter(console=Console()).present(provider_registry.list_all())


@app.command()
def check() -> None:
    """Validate environment configuration."""
    errors = validate_all()
    if errors:
        err_console = Console(stderr=True)
        for error in errors:
            err_console.print(f"[red]❌ {error}[/red]")
        raise typer.Exit(1)

    config = Config()
    console = Console()
    console.print("✅ Configuration valid")
    console.print(f"✅ Session token: {config.user_token_hash}")
    remote = config.ide_settings.remote_config_server_url
    console.print(f"✅ Remote config server: {remote or '<not-set>'}")


@app.command()
def resolve(
    config_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Model config JSON"),
    title: str = typer.Option(None, "--title", "-t", help="Only resolve the model with this title"),
) -> None:
    """Resolve model descriptions and show the effective options."""
    config = _load_config()
    document = _load_document(config_path)
    descriptions = _select(document.models, title)
    session_id = str(uuid.uuid4())

    with correlation_context(session_id):
        try:
            results = asyncio.run(
                _resolve_all(document, descriptions, config_path.parent, session_id, config)
            )
        except (OSError, TemplateError) as e:
            raise _fail(f"System message rendering failed: {e}") from e

    ResolvedModelPresenter(console=Console()).present(results)
    if any(llm is None for _, llm in results):
        raise typer.Exit(2)


@app.command()
def complete(
    config_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Model config JSON"),
    prompt: str = typer.Argument(..., help="Prompt text"),
    title: str = typer.Option(None, "--title", "-t", help="Model title (defaults to the first model)"),
) -> None:
    """Send one prompt through a resolved model and stream the answer."""
    config = _load_config()
    document = _load_document(config_path)
    descriptions = _select(document.models, title)[:1]
    if not descriptions:
        raise _fail("No models configured")
    session_id = str(uuid.uuid4())

    async def run() -> None:
        [(description, llm)] = await _resolve_all(
            document, descriptions, config_path.parent, session_id, config
        )
        if llm is None:
            raise _fail(f"Unknown provider '{description.provider}'", code=2)
        logger.info(f"Sending prompt to {llm.provider_name}/{llm.model}")
        async for chunk in llm.stream_complete(prompt):
            sys.stdout.write(chunk)
            sys.stdout.flush()
        sys.stdout.write("\n")

    with correlation_context(session_id):
        try:
            asyncio.run(run())
        except (OSError, TemplateError) as e:
            raise _fail(f"System message rendering failed: {e}") from e
        except LLMDispatchError as e:
            raise _fail(str(e)) from e


if __name__ == "__main__":
    app()
