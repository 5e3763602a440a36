"""Example script showing how to build and export a catalog programmatically."""
from __future__ import annotations

from pathlib import Path

from audiocatalog import CatalogBuilder, CatalogExporter, FileSink
from audiocatalog.drive import DriveLister, build_drive_service, load_credentials
from audiocatalog.utils import configure_logging, load_config


def main() -> None:
    configure_logging("INFO")
    config = load_config(Path("audiocatalog.yml"))
    if not config.root_id:
        raise SystemExit("Set root_id in audiocatalog.yml")
    credentials = load_credentials(config.credentials_path, config.token_path)
    lister = DriveLister(build_drive_service(credentials), page_size=config.page_size)
    catalog = CatalogBuilder(lister).build(config.root_id)
    CatalogExporter(FileSink(config.output_path)).export(catalog)
    print(catalog.summary().model_dump_json(indent=2))


if __name__ == "__main__":
    main()
