"""The interactive actions: create static disks, derive usable disks, launch machines."""

from __future__ import annotations

import logging
from pathlib import Path

from machv.disks import (
    QEMU_GLOBAL_ARGS,
    CommandError,
    create_disk_path,
    create_static_qcow2,
    create_usable_qcow2,
    run_shell,
)
from machv.isos import download_iso, get_iso_path, parse_iso_toml
from machv.prompts import (
    display_bool,
    display_options,
    get_input,
    read_files_in_directory,
    select_bool,
    select_option,
)

logger = logging.getLogger(__name__)

STATIC_DISK_SIZE_MIB = 20480

SPICE_ARGS = (
    "-spice port=3001,disable-ticketing=on",
    "-device virtio-serial-pci",
    "-chardev spicevmc,id=vdagent,name=vdagent",
    "device virtserialport,chardev=vdagent,name=com.redhat.spice.0",
)


def build_create_command(disk_path: str | Path, iso_path: str | Path) -> str:
    """Return the qemu command that boots the installer ISO with the disk attached."""
    return f"qemu-system-x86_64 {QEMU_GLOBAL_ARGS} -hda {disk_path} -boot d -cdrom {iso_path}"


def build_launch_command(disk_path: str | Path, extra_args: str) -> str:
    """Return the qemu command that boots a usable disk."""
    return f"qemu-system-x86_64 -{QEMU_GLOBAL_ARGS} -hda {disk_path} -boot a {extra_args}"


def share_path_args(share_path: str | Path) -> str:
    """Return the qemu arguments that share a host directory with the guest."""
    return (
        f"-virtfs local,path={share_path},mount_tag=host0,"
        "security_model=mapped,id=host0"
    )


def spice_args() -> str:
    """Return the qemu arguments that enable a spice display channel."""
    return " ".join(SPICE_ARGS)


def _add_extra_args(prompt_text: str, args: str, extra_args: str) -> str:
    display_bool(prompt_text)
    if select_bool():
        return f"{args} {extra_args}"
    return args


def create_new_static_qcow2(
    static_dir: str | Path, iso_toml_path: str | Path, iso_dir: str | Path
) -> None:
    """Pick an ISO, fetch it if needed, create a static disk and boot the installer."""
    all_isos = parse_iso_toml(iso_toml_path)

    display_options(all_isos, "ISOs:")
    chosen_iso = select_option(all_isos)

    iso_path = get_iso_path(chosen_iso, iso_dir)
    if not iso_path.exists():
        download_iso(chosen_iso, iso_dir)

    disk_name = get_input("Enter name for new static disk: ")
    wanted_disk_path = create_disk_path(disk_name, static_dir)
    static_disk_path = create_static_qcow2(wanted_disk_path, STATIC_DISK_SIZE_MIB)

    command = build_create_command(static_disk_path, iso_path)
    logger.info("Running qemu to install from %s: %s", iso_path, command)
    try:
        run_shell(command)
    except CommandError as exc:
        raise CommandError(f"creating vm: {exc}") from exc


def create_new_usable_qcow2(static_dir: str | Path, disks_dir: str | Path) -> None:
    """Copy a chosen static disk into a new usable disk."""
    logger.info("Loading all static virtual machine disks...")

    disks = read_files_in_directory(static_dir)
    display_options(disks, "Static disks:")
    static_disk_path = select_option(disks)

    disk_name = get_input("Enter name for new usable machine disk: ")
    usable_disk_path = create_disk_path(disk_name, disks_dir)

    if usable_disk_path.exists():
        raise FileExistsError("usable disk already exists")

    create_usable_qcow2(static_disk_path, usable_disk_path)


def launch_from_usable_qcow2(disks_dir: str | Path, share_path: str | Path) -> None:
    """Pick a usable disk, ask for optional extras and boot it."""
    logger.info("Loading all usable virtual machine disks...")

    disks = read_files_in_directory(disks_dir)
    display_options(disks, "Usable disks:")
    selected_disk_path = select_option(disks)

    extra_args = ""
    extra_args = _add_extra_args(
        f"Share {share_path} with virtual machine?",
        extra_args,
        share_path_args(share_path),
    )
    extra_args = _add_extra_args("Run with spice?", extra_args, spice_args())

    logger.info("Observe the diskPath %s and extraArgs %r", selected_disk_path, extra_args)

    command = build_launch_command(selected_disk_path, extra_args)
    logger.info("Running qemu with the following command: %s", command)
    try:
        run_shell(command)
    except CommandError as exc:
        logger.warning("running qemu: %s", exc)