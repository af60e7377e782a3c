import io
from unittest import mock

import pytest

from machv import options
from machv.disks import QEMU_GLOBAL_ARGS
from machv.prompts import SelectionError


@pytest.fixture
def stdin(monkeypatch):
    def feed(text):
        monkeypatch.setattr("sys.stdin", io.StringIO(text))

    return feed


def test_build_create_command_contains_parts(tmp_path):
    disk = tmp_path / "d.qcow2"
    iso = tmp_path / "x.iso"
    command = options.build_create_command(disk, iso)
    assert command.startswith("qemu-system-x86_64 ")
    assert QEMU_GLOBAL_ARGS in command
    assert command.endswith(f"-hda {disk} -boot d -cdrom {iso}")


def test_build_launch_command_contains_parts(tmp_path):
    disk = tmp_path / "d.qcow2"
    command = options.build_launch_command(disk, "EXTRA")
    assert command.startswith("qemu-system-x86_64 -")
    assert f"-hda {disk} -boot a EXTRA" in command


def test_share_path_args(tmp_path):
    args = options.share_path_args(tmp_path)
    assert args.startswith(f"-virtfs local,path={tmp_path},")
    assert "mount_tag=host0" in args
    assert "security_model=mapped" in args


def test_spice_args_join_all_parts():
    args = options.spice_args()
    for part in options.SPICE_ARGS:
        assert part in args
    assert args.startswith("-spice port=3001,disable-ticketing=on")


def test_create_usable_copies_disk(tmp_path, stdin):
    static_dir = tmp_path / "static"
    disks_dir = tmp_path / "disks"
    static_dir.mkdir()
    disks_dir.mkdir()
    (static_dir / "base.qcow2").write_bytes(b"image-bytes")
    stdin("0\nnew\n")
    options.create_new_usable_qcow2(static_dir, disks_dir)
    assert (disks_dir / "new.qcow2").read_bytes() == b"image-bytes"


def test_create_usable_refuses_existing(tmp_path, stdin):
    static_dir = tmp_path / "static"
    disks_dir = tmp_path / "disks"
    static_dir.mkdir()
    disks_dir.mkdir()
    (static_dir / "base.qcow2").write_bytes(b"a")
    (disks_dir / "taken.qcow2").write_bytes(b"old")
    stdin("0\ntaken\n")
    with pytest.raises(FileExistsError):
        options.create_new_usable_qcow2(static_dir, disks_dir)
    assert (disks_dir / "taken.qcow2").read_bytes() == b"old"


def test_create_usable_bad_index(tmp_path, stdin):
    static_dir = tmp_path / "static"
    static_dir.mkdir()
    (static_dir / "base.qcow2").write_bytes(b"a")
    stdin("3\n")
    with pytest.raises(SelectionError):
        options.create_new_usable_qcow2(static_dir, tmp_path)


def test_create_static_runs_qemu_commands(tmp_path, stdin):
    iso_dir = tmp_path / "iso"
    static_dir = tmp_path / "static"
    iso_dir.mkdir()
    static_dir.mkdir()
    (iso_dir / "distro.iso").write_bytes(b"")
    toml_path = tmp_path / "iso.toml"
    toml_path.write_text('[[entries]]\nurl = "https://example.com/images/distro.iso"\n')
    stdin("0\nmydisk\n")
    with mock.patch("machv.disks.subprocess.run") as run:
        run.return_value = mock.MagicMock(returncode=0)
        options.create_new_static_qcow2(static_dir, toml_path, iso_dir)
    commands = [c.args[0][2] for c in run.call_args_list]
    disk = static_dir / "mydisk.qcow2"
    assert commands == [
        f"qemu-img create -f qcow2 {disk} 20480M",
        options.build_create_command(disk, iso_dir / "distro.iso"),
    ]


def test_create_static_downloads_missing_iso(tmp_path, stdin):
    iso_dir = tmp_path / "iso"
    iso_dir.mkdir()
    toml_path = tmp_path / "iso.toml"
    toml_path.write_text('[[entries]]\nurl = "https://example.com/distro.iso"\n')
    stdin("0\nd\n")
    with mock.patch("machv.disks.subprocess.run") as run:
        run.return_value = mock.MagicMock(returncode=0)
        options.create_new_static_qcow2(tmp_path, toml_path, iso_dir)
    first = run.call_args_list[0]
    assert first.args[0][2] == "curl -LO https://example.com/distro.iso"
    assert first.kwargs["cwd"] == str(iso_dir)


def test_launch_with_all_extras(tmp_path, stdin):
    disks_dir = tmp_path / "disks"
    disks_dir.mkdir()
    disk = disks_dir / "vm.qcow2"
    disk.write_bytes(b"")
    share = tmp_path / "share"
    stdin("0\n1\n1\n")
    with mock.patch("machv.disks.subprocess.run") as run:
        run.return_value = mock.MagicMock(returncode=0)
        options.launch_from_usable_qcow2(disks_dir, share)
    command = run.call_args.args[0][2]
    assert f"-hda {disk}" in command
    assert options.share_path_args(share) in command
    assert options.spice_args() in command


def test_launch_without_extras(tmp_path, stdin):
    disks_dir = tmp_path / "disks"
    disks_dir.mkdir()
    disk = disks_dir / "vm.qcow2"
    disk.write_bytes(b"")
    stdin("0\n0\n0\n")
    with mock.patch("machv.disks.subprocess.run") as run:
        run.return_value = mock.MagicMock(returncode=0)
        result = options.launch_from_usable_qcow2(disks_dir, tmp_path)
    assert result is None
    command = run.call_args.args[0][2]
    assert command.startswith(options.build_launch_command(disk, "").rstrip())
    assert options.share_path_args(tmp_path) not in command
    assert options.spice_args() not in command
    assert "-virtfs" not in command
    assert "-spice" not in command


def test_launch_failure_is_not_raised(tmp_path, stdin):
    disks_dir = tmp_path / "disks"
    disks_dir.mkdir()
    disk = disks_dir / "vm.qcow2"
    disk.write_bytes(b"")
    stdin("0\n0\n0\n")
    with mock.patch("machv.disks.subprocess.run") as run:
        run.return_value = mock.MagicMock(returncode=1)
        result = options.launch_from_usable_qcow2(disks_dir, tmp_path)
    assert result is None
    assert run.call_count == 1
    command = run.call_args.args[0][2]
    assert command.startswith(options.build_launch_command(disk, "").rstrip())