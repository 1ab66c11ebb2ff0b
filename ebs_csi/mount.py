"""Filesystem helpers used by the node service."""

from __future__ import annotations

import errno
import logging
import os
import re
from collections.abc import Callable, Sequence

log = logging.getLogger(__name__)

_UINT64_MAX = 2**64 - 1
_UNSIGNED = re.compile(r"[0-9]+")
_CORRUPTED_MOUNT_ERRNOS = frozenset(
    {errno.ENOTCONN, errno.ESTALE, errno.EIO, errno.EACCES, errno.EHOSTDOWN}
)

CommandRunner = Callable[[Sequence[str]], str]


class MountError(Exception):
    """A filesystem inspection or preparation step failed."""


class CommandError(Exception):
    """Raised by a command runner when a command fails."""

    def __init__(self, message: str, output: str = "") -> None:
        super().__init__(message)
        self.output = output


def _parse_uint(value: str) -> int:
    if not _UNSIGNED.fullmatch(value):
        raise ValueError(f"invalid syntax: {value!r}")
    number = int(value)
    if number > _UINT64_MAX:
        raise ValueError(f"value out of range: {value!r}")
    return number


def parse_fs_info_output(
    output: str, separator: str, block_size_key: str, block_count_key: str
) -> tuple[int, int]:
    """Pull block size and block count out of ``key<sep>value`` lines.

    Missing keys yield 0; unparsable values raise MountError.
    """
    block_size = block_count = 0
    for line in output.split("\n"):
        tokens = line.split(separator)
        if len(tokens) != 2:
            continue
        key, value = (token.strip().lower() for token in tokens)
        if key == block_size_key:
            try:
                block_size = _parse_uint(value)
            except ValueError as exc:
                raise MountError(f"failed to parse block size {value}: {exc}") from exc
        if key == block_count_key:
            try:
                block_count = _parse_uint(value)
            except ValueError as exc:
                raise MountError(f"failed to parse block count {value}: {exc}") from exc
    return block_size, block_count


class NodeMounter:
    """Prepares mount targets and inspects device and filesystem sizes.

    Size inspection asks ``runner`` to run inspection tools; it takes the
    argument list and returns the combined output, raising CommandError on
    failure.
    """

    def __init__(self, runner: CommandRunner | None = None) -> None:
        self.runner = runner

    def _run(self, args: Sequence[str]) -> str:
        if self.runner is None:
            raise MountError(f"no command runner configured to run {args[0]}")
        return self.runner(args)

    def make_file(self, path: str | os.PathLike[str]) -> None:
        """Create ``path`` as an empty file unless it already exists."""
        fd = os.open(path, os.O_CREAT | os.O_RDONLY, 0o644)
        os.close(fd)

    def make_dir(self, path: str | os.PathLike[str]) -> None:
        """Create ``path`` and its parents unless it is already a directory."""
        os.makedirs(path, mode=0o755, exist_ok=True)

    def path_exists(self, path: str | os.PathLike[str]) -> bool:
        """Whether ``path`` exists; a corrupted mount point counts as existing."""
        try:
            os.stat(path)
        except FileNotFoundError:
            return False
        except OSError as exc:
            if exc.errno in _CORRUPTED_MOUNT_ERRNOS:
                return True
            raise
        return True

    def get_device_size(self, device_path: str) -> int:
        try:
            output = self._run(["blockdev", "--getsize64", device_path]).strip()
        except CommandError as exc:
            raise MountError(
                f"failed to read size of device {device_path}: {exc}: {exc.output.strip()}"
            ) from exc
        try:
            return _parse_uint(output)
        except ValueError as exc:
            raise MountError(
                f"failed to parse size of device {device_path} {output}: {exc}"
            ) from exc

    def _filesystem_size(
        self, args: Sequence[str], target: str, separator: str, size_key: str, count_key: str
    ) -> tuple[int, int]:
        try:
            output = self._run(args)
        except CommandError as exc:
            raise MountError(
                f"failed to read size of filesystem on {target}: {exc}: {exc.output}"
            ) from exc
        block_size, block_count = parse_fs_info_output(output, separator, size_key, count_key)
        if block_size == 0:
            raise MountError(f"could not find block size of device {target}")
        if block_count == 0:
            raise MountError(f"could not find block count of device {target}")
        return block_size, block_size * block_count

    def get_ext_size(self, device_path: str) -> tuple[int, int]:
        """Return (block size, filesystem size) of an ext filesystem."""
        return self._filesystem_size(
            ["dumpe2fs", "-h", device_path], device_path, ":", "block size", "block count"
        )

    def get_xfs_size(self, device_path: str) -> tuple[int, int]:
        """Return (block size, filesystem size) of an xfs filesystem."""
        return self._filesystem_size(
            ["xfs_io", "-c", "statfs", device_path],
            device_path,
            "=",
            "geom.bsize",
            "geom.datablocks",
        )

    def need_resize(self, device_path: str, device_mount_path: str, fs_format: str) -> bool:
        """Whether the filesystem of ``fs_format`` is smaller than its device."""
        device_size = self.get_device_size(device_path)
        # An unformatted disk needs no resize: mkfs uses the whole disk.
        if fs_format == "":
            return False
        log.info("ResizeFs.needResize - checking mounted volume %s", device_path)
        if fs_format in ("ext3", "ext4"):
            block_size, fs_size = self.get_ext_size(device_path)
        elif fs_format == "xfs":
            block_size, fs_size = self.get_xfs_size(device_mount_path)
        else:
            log.error(
                "Not able to parse given filesystem info. fsType: %s, will not resize", fs_format
            )
            raise MountError(
                f"Could not parse fs info on given filesystem format: {fs_format}. "
                "Supported fs types are: xfs, ext3, ext4"
            )
        log.debug(
            "Volume %s: device size=%d, filesystem size=%d, block size=%d",
            device_path,
            device_size,
            fs_size,
            block_size,
        )
        # Tolerate one block of difference for rounding.
        return device_size > fs_size + block_size