"""ISO catalogue entries, their TOML configuration and downloads."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from machv.disks import CommandError, run_shell

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IsoEntry:
    """An installation image available for download."""

    url: str = ""

    def friendly_name(self) -> str:
        """Return the last path component of the URL."""
        return self.url.split("/")[-1]

    def __str__(self) -> str:
        return self.url


def _lookup(table: dict[str, Any], field: str) -> Any:
    if field in table:
        return table[field]
    for key, value in table.items():
        if key.lower() == field.lower():
            return value
    return None


def parse_iso_toml(iso_toml_path: str | Path) -> list[IsoEntry]:
    """Read the ISO entries from a TOML file with an ``entries`` array of tables."""
    with open(iso_toml_path, "rb") as handle:
        document = tomllib.load(handle)

    raw_entries = _lookup(document, "Entries")
    if raw_entries is None:
        return []
    if not isinstance(raw_entries, list):
        raise ValueError("entries must be an array of tables")

    entries = []
    for raw in raw_entries:
        if not isinstance(raw, dict):
            raise ValueError("each entry must be a table")
        url = _lookup(raw, "Url")
        if url is None:
            url = ""
        if not isinstance(url, str):
            raise ValueError("entry url must be a string")
        entries.append(IsoEntry(url))
    return entries


def get_iso_path(iso: IsoEntry, iso_dir: str | Path) -> Path:
    """Return where the ISO is stored in the ISO directory."""
    return Path(iso_dir) / iso.friendly_name()


def download_iso(iso: IsoEntry, iso_dir: str | Path) -> None:
    """Download the ISO into the ISO directory with curl."""
    command = f"curl -LO {iso.url}"
    logger.info("Downloading requested iso to %s: %s", iso_dir, command)
    try:
        run_shell(command, cwd=str(iso_dir))
    except CommandError as exc:
        raise CommandError(f"downloading iso: {exc}") from exc