"""System message template rendering.

Placeholders take the form ``{{ name }}``. A name found in the supplied
input data is substituted directly; any other name is treated as a file
path and replaced with the file's contents via the injected reader.

File paths are rarely valid template expressions (``{{ docs/style.md }}``,
``{{ my rules.md }}``), so each placeholder is rebound to a generated
variable before the template is handed to the sandboxed jinja2
environment. Input data stays visible to ``{% ... %}`` blocks.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from jinja2 import StrictUndefined, TemplateSyntaxError, UndefinedError
from jinja2.meta import find_undeclared_variables
from jinja2.sandbox import SandboxedEnvironment

from llm_dispatch.core.models import ReadFile

logger = logging.getLogger(__name__)

PLACEHOLDER_VARIABLE_PREFIX = "_llmd_placeholder_"

_environment = SandboxedEnvironment(
    autoescape=False,
    undefined=StrictUndefined,
    keep_trailing_newline=True,
)


@dataclass(frozen=True)
class _Segment:
    """A run of template source; ``name`` is set for ``{{ ... }}`` blocks."""

    source: str
    name: str | None = None
    begin: str = ""
    end: str = ""
    # Set for tag and comment tokens outside placeholders
    markup: bool = False


def _segments(template: str) -> list[_Segment]:
    """Split ``template`` into plain source and placeholder blocks.

    Raises:
        TemplateSyntaxError: If a placeholder is unterminated or malformed
    """
    segments: list[_Segment] = []
    block: list[tuple[str, str]] | None = None
    lineno = 1
    for lineno, token_type, value in _environment.lex(template):
        if token_type == "variable_begin":
            block = [(token_type, value)]
        elif block is not None:
            block.append((token_type, value))
            if token_type == "variable_end":
                inner = "".join(part for _, part in block[1:-1])
                segments.append(
                    _Segment(
                        source="".join(part for _, part in block),
                        name=inner.strip(),
                        begin=block[0][1],
                        end=value,
                    )
                )
                block = None
        else:
            segments.append(_Segment(source=value, markup=token_type != "data"))
    if block is not None:
        raise TemplateSyntaxError("unexpected end of template, expected '}}'", lineno)
    return segments


def template_variables(template: str) -> list[str]:
    """Return placeholder names in order of first appearance."""
    seen: dict[str, None] = {}
    for segment in _segments(template):
        if segment.name:
            seen.setdefault(segment.name, None)
    return list(seen)


async def render_templated_string(
    template: str,
    read_file: ReadFile,
    input_data: Mapping[str, str] | None = None,
) -> str:
    """Render ``template`` by resolving every placeholder.

    Each file is read at most once. Errors raised by ``read_file`` and
    jinja2 template errors propagate to the caller unchanged.
    """
    input_data = dict(input_data or {})
    segments = _segments(template)
    if not any(segment.name is not None or segment.markup for segment in segments):
        return template

    variables: dict[str, str] = {}
    context: dict[str, str] = dict(input_data)
    rewritten: list[str] = []
    for segment in segments:
        if not segment.name:
            rewritten.append(segment.source)
            continue
        variable = variables.get(segment.name)
        if variable is None:
            variable = f"{PLACEHOLDER_VARIABLE_PREFIX}{len(variables)}"
            variables[segment.name] = variable
            if segment.name in input_data:
                context[variable] = input_data[segment.name]
            else:
                logger.debug(f"Reading template file '{segment.name}'")
                context[variable] = await read_file(segment.name)
        rewritten.append(f"{segment.begin} {variable} {segment.end}")

    source = "".join(rewritten)
    missing = find_undeclared_variables(_environment.parse(source)) - context.keys()
    if missing:
        raise UndefinedError(f"Template references undefined names: {', '.join(sorted(missing))}")
    return _environment.from_string(source).render(context)
