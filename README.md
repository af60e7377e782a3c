# machv

A small interactive tool for building and running QEMU virtual machines
from qcow2 disk images.

machv keeps three kinds of things:

- **ISOs**. These are downloaded on demand with `curl` from URLs listed in
  `~/.config/machv/iso.toml`. They are saved into `~/.local/share/machv/iso`.
- **Static disks**. These are fresh installs of an operating system, kept in
  `~/.local/share/machv/static`.
- **Usable disks**. These are copies of a static disk that you actually run,
  kept in `~/.local/share/machv/disks`.

The directory `~/.local/share/machv/vmshare` can be shared with a running
machine through 9p (`mount_tag=host0`).

On every start machv creates the missing directories among
`~/.local/share/machv`, its `iso`, `disks` and `vmshare` subdirectories, and
`~/.config/machv`. It does not create the `static` directory or `iso.toml`.

## Requirements

- Python 3.11 or later
- Linux with KVM
- `bash`, `qemu-img`, `qemu-system-x86_64` and `curl` on the `PATH`

## Installation

```
pip install .
```

## ISO list

`~/.config/machv/iso.toml` holds one `[[Entries]]` table per ISO, each with
a `Url`. The key names are matched without regard to case, so `entries` and
`url` work as well:

```toml
[[Entries]]
Url = "https://mirror.example.com/images/distro-1.0-x86_64.iso"

[[Entries]]
Url = "https://mirror.example.com/images/other-2.3.iso"
```

The file name of an ISO is the last part of its URL. An ISO is downloaded
only if that file is not already in the ISO directory.

## Usage

Run without arguments to pick from a menu:

```
machv
```

```
Options:
  0) Create new static virtual machine disk
  1) Create new usable virtual machine disk
  2) Load virtual machine disk
```

Or name the action directly:

```
machv create static    # pick an ISO, make a 20 GiB disk, boot the installer
machv create usable    # copy a static disk to a new usable disk
machv load             # pick a usable disk and run it
```

A number works as well: `machv 0`, `machv 1`, `machv 2`.

Choices are made by typing the number shown next to an option. Disk names
get a `.qcow2` suffix if they do not already end in one. Creating a usable
disk stops with an error if a disk of that name already exists.

When loading a disk, machv asks whether to share the `vmshare` directory
with the machine and whether to run with SPICE (port 3001).

Every machine gets 4 GiB of memory, 2 CPUs, user-mode networking on
`192.168.0.0/24`, QXL graphics and Intel HDA sound.

An unknown verb, `load` followed by a word, or `create` with a noun other
than `static` or `usable` is reported as an error. machv exits with status 1
when a chosen action fails, for example on an invalid menu number, a missing
`iso.toml`, or a failing `qemu-img` or `curl` command. A failing
`qemu-system-x86_64` run while loading a disk is only logged as a warning.

## What machv does not do

- It does not write or edit `iso.toml`; the ISO list is kept by hand.
- It has no commands to list, rename or delete ISOs or disks.
- Memory, CPU count, disk size and network settings are fixed and cannot be
  changed from the command line.