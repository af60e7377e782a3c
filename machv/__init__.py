"""Create qcow2 disks from installer ISOs and launch QEMU virtual machines from them."""

__version__ = "0.1.0"
__all__ = ["__version__"]