"""Presenters for provider and resolved model display in CLI."""

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from llm_dispatch.core.models import ModelDescription
from llm_dispatch.llms import BaseLLM


def mask_secret(secret: str | None) -> str:
    if not secret:
        return "<not-set>"
    if len(secret) <= 8:
        return "*" * len(secret)
    return f"{secret[:4]}...{secret[-4:]}"


class ProviderTablePresenter:
    """Renders the provider registry as a table."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def present(self, providers: Sequence[type[BaseLLM]]) -> None:
        table = Table(title=f"Registered Providers ({len(providers)})")
        table.add_column("Provider", style="cyan")
        table.add_column("Default Model", style="green")
        table.add_column("Default API Base")
        table.add_column("Max Tokens", justify="right")

        for cls in providers:
            defaults = cls.default_options
            max_tokens = defaults.completion_options.max_tokens
            table.add_row(
                cls.provider_name,
                defaults.model or "[dim]-[/dim]",
                defaults.api_base or "[dim]-[/dim]",
                str(max_tokens) if max_tokens is not None else "[dim]-[/dim]",
            )

        self.console.print(table)


class ResolvedModelPresenter:
    """Renders resolution results; API keys are always masked."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def present(self, results: Sequence[tuple[ModelDescription, BaseLLM | None]]) -> None:
        table = Table(title="Resolved Models")
        table.add_column("Title", style="cyan")
        table.add_column("Provider")
        table.add_column("Model", style="green")
        table.add_column("Max Tokens", justify="right")
        table.add_column("API Base")
        table.add_column("API Key")
        table.add_column("FIM")

        for description, llm in results:
            title = description.title or description.model or "-"
            if llm is None:
                table.add_row(
                    title,
                    f"[red]{description.provider}[/red]",
                    "[red]unknown provider[/red]",
                    "",
                    "",
                    "",
                    "",
                )
                continue
            table.add_row(
                llm.title,
                llm.provider_name,
                llm.model,
                str(llm.completion_options.max_tokens),
                llm.api_base or "[dim]-[/dim]",
                mask_secret(llm.api_key),
                "yes" if llm.supports_fim() else "no",
            )

        self.console.print(table)
