"""Typer-based command line interface for drive-audio-catalog."""
from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable, NoReturn, Optional

import typer
from rich.console import Console

from .builder import CatalogBuilder, RemoteLister
from .drive import DriveLister, build_drive_service, load_credentials
from .errors import CatalogError
from .exporter import CatalogExporter
from .schema import TSV_COLUMNS, CatalogEntry, CatalogSummary
from .sinks import FileSink
from .utils.config import DEFAULT_CONFIG_PATH, AppConfig, load_config
from .utils.logging import configure_logging, get_logger

LOGGER = get_logger(__name__)

app = typer.Typer(add_completion=False, help="Catalog audio files stored in Google Drive.")
console = Console()


class _State:
    config: AppConfig = AppConfig()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
    config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, "--config", help="YAML configuration file."),
) -> None:
    _State.config = load_config(config_path)
    configure_logging("DEBUG" if verbose else _State.config.log_level)


def _make_lister(config: AppConfig) -> RemoteLister:
    credentials = load_credentials(config.credentials_path, config.token_path)
    service = build_drive_service(credentials)
    return DriveLister(service, page_size=config.page_size, order_by=config.order_by)


def _read_catalog(path: Path) -> Iterable[CatalogEntry]:
    with path.open("r", encoding="utf-8", newline="") as handle:
        reader = csv.reader(handle, delimiter="\t", quoting=csv.QUOTE_NONE)
        for line_number, row in enumerate(reader, start=1):
            if not row:
                continue
            if len(row) != len(TSV_COLUMNS):
                raise typer.BadParameter(
                    f"{path}:{line_number}: expected {len(TSV_COLUMNS)} tab-separated fields, got {len(row)}"
                )
            yield CatalogEntry(**dict(zip(TSV_COLUMNS, row)))


def _fail(exc: CatalogError) -> NoReturn:
    LOGGER.error("%s", exc)
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=1)


@app.command()
def scan(
    root_id: Optional[str] = typer.Option(None, "--root-id", help="Drive folder id to start from."),
    out: Optional[Path] = typer.Option(None, "--out", help="Output TSV path."),
    credentials: Optional[Path] = typer.Option(None, "--credentials", help="OAuth client secrets JSON."),
    token: Optional[Path] = typer.Option(None, "--token", help="Cached OAuth token JSON."),
    page_size: Optional[int] = typer.Option(None, "--page-size", min=1, max=1000, help="Entries requested per folder."),
) -> None:
    """Walk the Drive tree under the root folder and export the audio catalog."""

    overrides = {
        "root_id": root_id,
        "output_path": out,
        "credentials_path": credentials,
        "token_path": token,
        "page_size": page_size,
    }
    config = _State.config.model_copy(update={k: v for k, v in overrides.items() if v is not None})
    if not config.root_id:
        raise typer.BadParameter("A root folder id is required (--root-id or root_id in config)")

    try:
        lister = _make_lister(config)
        catalog = CatalogBuilder(lister, console=console).build(config.root_id)
        lines = CatalogExporter(FileSink(config.output_path)).export(catalog)
    except CatalogError as exc:
        _fail(exc)
    typer.echo(f"Exported {len(lines)} entries to {config.output_path}")


@app.command()
def summarize(catalog_path: Path = typer.Argument(..., help="Exported TSV path.")) -> None:
    """Print per-series entry counts of an exported catalog."""

    if not catalog_path.exists():
        raise typer.BadParameter(f"Catalog {catalog_path} not found")
    summary = CatalogSummary.from_entries(_read_catalog(catalog_path))
    typer.echo(summary.model_dump_json(indent=2))


@app.command()
def login() -> None:
    """Authorise Drive access and cache the token."""

    config = _State.config
    try:
        load_credentials(config.credentials_path, config.token_path)
    except CatalogError as exc:
        _fail(exc)
    typer.echo(f"Saved token to {config.token_path}")


if __name__ == "__main__":
    app()
