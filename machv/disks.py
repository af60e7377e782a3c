"""Creation of qcow2 disk images and shell command execution."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)

QEMU_GLOBAL_ARGS = (
    "-enable-kvm -m 4G -smp 2 "
    "-netdev user,id=net0,net=192.168.0.0/24,dhcpstart=192.168.0.9 "
    "-device virtio-net-pci,netdev=net0 -vga qxl -device ich9-intel-hda"
)

DISK_SUFFIX = ".qcow2"


class CommandError(RuntimeError):
    """Raised when an external command fails."""


def run_shell(command: str, cwd: str | Path | None = None) -> None:
    """Run a command through bash, attached to the current terminal."""
    try:
        result = subprocess.run(["bash", "-c", command], cwd=cwd, check=False)
    except OSError as exc:
        raise CommandError(f"starting {command!r}: {exc}") from exc
    if result.returncode != 0:
        raise CommandError(f"{command!r} exited with status {result.returncode}")


def create_disk_path(file_name: str, directory: str | Path) -> Path:
    """Return the disk path in a directory, adding the qcow2 suffix if missing."""
    if not file_name.endswith(DISK_SUFFIX):
        file_name += DISK_SUFFIX
    return Path(directory) / file_name


def create_static_qcow2(disk_path: str | Path, size_mib: int) -> Path:
    """Create a new qcow2 image of the given size with qemu-img."""
    command = f"qemu-img create -f qcow2 {disk_path} {size_mib}M"
    logger.info("Assembled command to create disk with qemu-img: %s", command)
    try:
        run_shell(command)
    except CommandError as exc:
        raise CommandError(f"running qemu-img command: {exc}") from exc
    return Path(disk_path)


def create_usable_qcow2(static_disk_path: str | Path, usable_disk_path: str | Path) -> None:
    """Copy a static disk image to a new usable disk image."""
    shutil.copyfile(static_disk_path, usable_disk_path)