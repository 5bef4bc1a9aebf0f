"""Typer-based command line interface for sentence highlighting.

The commands take a document (``--text`` or ``--in``) and an absolute cursor
offset, locate the line containing the cursor and report either the highlight
spans or the active sentence.  They exist to inspect the heuristics outside
of an editor host.

Exit codes
----------
0 success
2 usage error (raised by typer/click)
3 I/O error (unreadable input file)
4 configuration error
5 cursor outside the document
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import NoReturn, Optional

import typer
import yaml
from pydantic import ValidationError

from .config import ConfigModel, load_config
from .core.models import Line
from .project.highlight import active_sentence_text, project_highlights
from .utils.errors import CursorOutOfBoundsError
from .utils.logging import configure_logging
from .utils.textspan import line_at

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="sentence-focus",
    help="Inspect sentence highlighting. Try 'sentence-focus spans'.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _load(config_path: Optional[Path], verbose: bool) -> ConfigModel:
    configure_logging(verbose)
    try:
        cfg = load_config(config_path)
    except ValidationError as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    except (OSError, yaml.YAMLError) as exc:
        _safe_exit(4, str(exc))
    if verbose:
        typer.echo("Loaded config", err=True)
    return cfg


def _read_document(text: Optional[str], in_path: Optional[Path], encoding: str) -> str:
    if text is not None and in_path is None:
        return text
    if text is not None or in_path is None:
        _safe_exit(2, "Pass exactly one of --text or --in")
    try:
        return in_path.read_text(encoding=encoding)
    except OSError as exc:
        _safe_exit(3, str(exc))


def _locate(document: str, cursor: int) -> Line:
    try:
        return line_at(document, cursor)
    except CursorOutOfBoundsError as exc:
        _safe_exit(5, str(exc))


_TEXT_OPTION = typer.Option(None, "--text", help="Document text")
_IN_OPTION = typer.Option(None, "--in", "--input", help="Read the document from a file")
_CURSOR_OPTION = typer.Option(..., "--cursor", "-c", help="Absolute cursor offset")
_CONFIG_OPTION = typer.Option(None, "--config", help="YAML/JSON config to override defaults")
_ENCODING_OPTION = typer.Option("utf-8-sig", help="Input file encoding")
_VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Emit debug messages to stderr")


@app.callback()
def main() -> None:
    """Entry point for the sentence-focus command group."""
    pass


@app.command()
def spans(  # noqa: PLR0913
    text: Optional[str] = _TEXT_OPTION,
    in_path: Optional[Path] = _IN_OPTION,
    cursor: int = _CURSOR_OPTION,
    config_path: Optional[Path] = _CONFIG_OPTION,
    encoding_in: str = _ENCODING_OPTION,
    as_json: bool = typer.Option(False, "--json", help="Print spans as a JSON list"),  # noqa: B008
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Print the highlight spans for the line containing ``--cursor``."""

    cfg = _load(config_path, verbose)
    document = _read_document(text, in_path, encoding_in)
    line = _locate(document, cursor)
    if verbose:
        typer.echo(f"Line [{line.start}, {line.end}) of {len(document)} chars", err=True)

    result = project_highlights(line, cursor, cfg.sentence_config())
    if as_json:
        payload = [{"from": s.start, "to": s.end, "role": s.role.value} for s in result]
        typer.echo(json.dumps(payload))
        return
    for span in result:
        typer.echo(f"{span.start}\t{span.end}\t{span.role.value}")


@app.command()
def sentence(
    text: Optional[str] = _TEXT_OPTION,
    in_path: Optional[Path] = _IN_OPTION,
    cursor: int = _CURSOR_OPTION,
    config_path: Optional[Path] = _CONFIG_OPTION,
    encoding_in: str = _ENCODING_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Print the active sentence for ``--cursor``."""

    cfg = _load(config_path, verbose)
    document = _read_document(text, in_path, encoding_in)
    line = _locate(document, cursor)
    typer.echo(active_sentence_text(line, cursor, cfg.sentence_config()))


@app.command("config")
def show_config(
    config_path: Optional[Path] = _CONFIG_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Print the effective configuration as YAML."""

    cfg = _load(config_path, verbose)
    typer.echo(yaml.safe_dump(cfg.model_dump(), allow_unicode=True, sort_keys=False), nl=False)


__all__ = ["app"]
