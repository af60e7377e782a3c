"""Command-line entry point."""

from __future__ import annotations

import logging
import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from machv.disks import CommandError
from machv.options import (
    create_new_static_qcow2,
    create_new_usable_qcow2,
    launch_from_usable_qcow2,
)
from machv.prompts import SelectionError, display_options, select_option

logger = logging.getLogger(__name__)

CREATE_STATIC = 0
CREATE_USABLE = 1
LOAD = 2
INVALID_VERB = -1
LOAD_WITH_NOUN = -2
INVALID_CREATE_NOUN = -3

MENU = (
    "Create new static virtual machine disk",
    "Create new usable virtual machine disk",
    "Load virtual machine disk",
)

_INTEGER = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class Paths:
    """The directories and files the program works with."""

    main_dir: Path
    iso_dir: Path
    disks_dir: Path
    static_dir: Path
    config_dir: Path
    share_path: Path
    iso_toml_path: Path


def default_paths(home: str | Path | None = None) -> Paths:
    """Return the standard layout below a home directory."""
    home = Path.home() if home is None else Path(home)
    main_dir = home / ".local" / "share" / "machv"
    config_dir = home / ".config" / "machv"
    return Paths(
        main_dir=main_dir,
        iso_dir=main_dir / "iso",
        disks_dir=main_dir / "disks",
        static_dir=main_dir / "static",
        config_dir=config_dir,
        share_path=main_dir / "vmshare",
        iso_toml_path=config_dir / "iso.toml",
    )


def initialize_directories(paths: Paths) -> None:
    """Create the working directories that do not exist yet."""
    for directory in (
        paths.main_dir,
        paths.iso_dir,
        paths.disks_dir,
        paths.config_dir,
        paths.share_path,
    ):
        logger.debug("Checking dir %s if it exists", directory)
        if directory.exists():
            logger.debug("The dir %s already exists", directory)
        else:
            logger.info("Creating dir %s as it did not exist", directory)
            directory.mkdir(parents=True, exist_ok=True)


def parse_option(args: Sequence[str]) -> int:
    """Turn command-line words into an option number; negative numbers are errors."""
    verb = args[0] if args else ""
    noun = args[1] if len(args) > 1 else ""

    if _INTEGER.fullmatch(verb):
        return int(verb)
    if verb == "create":
        return {"static": CREATE_STATIC, "usable": CREATE_USABLE}.get(noun, INVALID_CREATE_NOUN)
    if verb == "load":
        return LOAD_WITH_NOUN if noun else LOAD
    return INVALID_VERB


def _choose_from_menu() -> int:
    display_options(MENU, "Options:")
    return MENU.index(select_option(MENU))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program and return its exit status."""
    logging.basicConfig(level=logging.INFO)
    args = list(sys.argv[1:] if argv is None else argv)

    logger.info("Initializing machv...")
    paths = default_paths()
    try:
        initialize_directories(paths)
    except OSError as exc:
        logger.error("A fatal error has occurred while checking dir: %s", exc)
        return 1

    if not args:
        try:
            option = _choose_from_menu()
        except (SelectionError, EOFError) as exc:
            logger.error("fatal while selecting options: %s", exc)
            return 1
    else:
        option = parse_option(args)

    try:
        if option == CREATE_STATIC:
            create_new_static_qcow2(paths.static_dir, paths.iso_toml_path, paths.iso_dir)
        elif option == CREATE_USABLE:
            create_new_usable_qcow2(paths.static_dir, paths.disks_dir)
        elif option == LOAD:
            launch_from_usable_qcow2(paths.disks_dir, paths.share_path)
        elif option == INVALID_VERB:
            logger.error("invalid verb")
        elif option == LOAD_WITH_NOUN:
            logger.error("'load' does not take a noun")
        elif option == INVALID_CREATE_NOUN:
            logger.error("invalid noun for 'create'")
    except (CommandError, SelectionError, EOFError, OSError, ValueError) as exc:
        logger.error("fatal while executing option: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())