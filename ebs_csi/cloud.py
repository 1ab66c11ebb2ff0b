"""Cloud-side data types, errors and the interface the controller talks to."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol

GIB = 1024**3

VOLUME_NAME_TAG_KEY = "CSIVolumeName"
SNAPSHOT_NAME_TAG_KEY = "CSIVolumeSnapshotName"
AWS_EBS_DRIVER_TAG_KEY = "ebs.csi.aws.com/cluster"

VOLUME_TYPE_IO1 = "io1"
VOLUME_TYPE_IO2 = "io2"
VOLUME_TYPE_GP2 = "gp2"
VOLUME_TYPE_GP3 = "gp3"
VOLUME_TYPE_SC1 = "sc1"
VOLUME_TYPE_ST1 = "st1"
VOLUME_TYPE_STANDARD = "standard"

DEFAULT_VOLUME_SIZE = 100 * GIB


class CloudError(Exception):
    """Base of errors reported by a cloud backend."""


class NotFoundError(CloudError):
    """The resource could not be found."""


class IdempotentParameterMismatchError(CloudError):
    """A resource with the same name exists with different parameters."""


class VolumeInUseError(CloudError):
    """The volume is already attached to another instance."""


class InvalidMaxResultsError(CloudError):
    """The requested page size is not accepted by the backend."""


class MultiSnapshotsError(CloudError):
    """More than one snapshot matched a lookup that expected one."""


@dataclass
class Disk:
    volume_id: str
    capacity_gib: int = 0
    availability_zone: str = ""
    outpost_arn: str = ""
    snapshot_id: str = ""
    attachments: list[str] = field(default_factory=list)


@dataclass
class Snapshot:
    snapshot_id: str
    source_volume_id: str
    size: int
    creation_time: datetime
    ready_to_use: bool = False


@dataclass
class DiskOptions:
    capacity_bytes: int
    tags: dict[str, str] = field(default_factory=dict)
    volume_type: str = ""
    iops_per_gb: int = 0
    allow_iops_per_gb_increase: bool = False
    iops: int = 0
    throughput: int = 0
    availability_zone: str = ""
    outpost_arn: str = ""
    encrypted: bool = False
    kms_key_id: str = ""
    snapshot_id: str = ""


@dataclass
class SnapshotOptions:
    tags: dict[str, str] = field(default_factory=dict)


@dataclass
class SnapshotPage:
    snapshots: list[Snapshot] = field(default_factory=list)
    next_token: str = ""


class Cloud(Protocol):
    """Operations the controller needs from the block-storage provider.

    Implementations raise the errors defined in this module.
    """

    def create_disk(self, name: str, options: DiskOptions) -> Disk:
        """Create a disk, or return the existing one of that name."""

    def delete_disk(self, volume_id: str) -> bool:
        """Delete a disk; True when it was deleted."""

    def attach_disk(self, volume_id: str, node_id: str) -> str:
        """Attach a disk to an instance and return its device path."""

    def detach_disk(self, volume_id: str, node_id: str) -> None:
        """Detach a disk from an instance."""

    def resize_disk(self, volume_id: str, new_size_bytes: int) -> int:
        """Grow a disk and return its new size in GiB."""

    def is_existing_instance(self, node_id: str) -> bool:
        """Whether an instance with this id exists."""

    def get_disk_by_id(self, volume_id: str) -> Disk:
        """Look a disk up by id."""

    def create_snapshot(self, volume_id: str, options: SnapshotOptions) -> Snapshot:
        """Snapshot a disk."""

    def delete_snapshot(self, snapshot_id: str) -> bool:
        """Delete a snapshot; True when it was deleted."""

    def get_snapshot_by_name(self, name: str) -> Snapshot:
        """Look a snapshot up by name."""

    def get_snapshot_by_id(self, snapshot_id: str) -> Snapshot:
        """Look a snapshot up by id."""

    def list_snapshots(self, volume_id: str, max_results: int, next_token: str) -> SnapshotPage:
        """List snapshots, optionally of one volume, one page at a time."""